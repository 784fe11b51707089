"""Static US reference data — states, cities, ZIP prefix ranges."""

from app.domain.value_objects.geo_point import GeoPoint

# Inclusive 3-digit ZIP prefix ranges → state. Military (AA/AE/AP) and
# territory-only prefixes other than Puerto Rico are deliberately absent.
ZIP_PREFIX_RANGES: list[tuple[int, int, str]] = [
    (5, 5, "NY"),
    (6, 9, "PR"),
    (10, 27, "MA"),
    (28, 29, "RI"),
    (30, 38, "NH"),
    (39, 49, "ME"),
    (50, 54, "VT"),
    (55, 55, "MA"),
    (56, 59, "VT"),
    (60, 69, "CT"),
    (70, 89, "NJ"),
    (100, 149, "NY"),
    (150, 196, "PA"),
    (197, 199, "DE"),
    (200, 200, "DC"),
    (201, 201, "VA"),
    (202, 205, "DC"),
    (206, 219, "MD"),
    (220, 246, "VA"),
    (247, 268, "WV"),
    (270, 289, "NC"),
    (290, 299, "SC"),
    (300, 319, "GA"),
    (320, 339, "FL"),
    (341, 349, "FL"),
    (350, 369, "AL"),
    (370, 385, "TN"),
    (386, 397, "MS"),
    (398, 399, "GA"),
    (400, 427, "KY"),
    (430, 459, "OH"),
    (460, 479, "IN"),
    (480, 499, "MI"),
    (500, 528, "IA"),
    (530, 549, "WI"),
    (550, 567, "MN"),
    (569, 569, "DC"),
    (570, 577, "SD"),
    (580, 588, "ND"),
    (590, 599, "MT"),
    (600, 629, "IL"),
    (630, 658, "MO"),
    (660, 679, "KS"),
    (680, 693, "NE"),
    (700, 714, "LA"),
    (716, 729, "AR"),
    (730, 749, "OK"),
    (750, 799, "TX"),
    (800, 816, "CO"),
    (820, 831, "WY"),
    (832, 838, "ID"),
    (840, 847, "UT"),
    (850, 865, "AZ"),
    (870, 884, "NM"),
    (885, 885, "TX"),
    (889, 898, "NV"),
    (900, 961, "CA"),
    (967, 968, "HI"),
    (970, 979, "OR"),
    (980, 994, "WA"),
    (995, 999, "AK"),
]

REGION_CENTROIDS: dict[str, GeoPoint] = {
    "AL": GeoPoint(latitude=33.5186, longitude=-86.8104),
    "AK": GeoPoint(latitude=61.2181, longitude=-149.9003),
    "AZ": GeoPoint(latitude=33.4484, longitude=-112.0740),
    "AR": GeoPoint(latitude=34.7465, longitude=-92.2896),
    "CA": GeoPoint(latitude=34.0522, longitude=-118.2437),
    "CO": GeoPoint(latitude=39.7392, longitude=-104.9903),
    "CT": GeoPoint(latitude=41.7658, longitude=-72.6734),
    "DE": GeoPoint(latitude=39.7391, longitude=-75.5398),
    "DC": GeoPoint(latitude=38.9072, longitude=-77.0369),
    "FL": GeoPoint(latitude=28.5383, longitude=-81.3792),
    "GA": GeoPoint(latitude=33.7490, longitude=-84.3880),
    "HI": GeoPoint(latitude=21.3069, longitude=-157.8583),
    "ID": GeoPoint(latitude=43.6150, longitude=-116.2023),
    "IL": GeoPoint(latitude=41.8781, longitude=-87.6298),
    "IN": GeoPoint(latitude=39.7684, longitude=-86.1581),
    "IA": GeoPoint(latitude=41.5868, longitude=-93.6250),
    "KS": GeoPoint(latitude=37.6872, longitude=-97.3301),
    "KY": GeoPoint(latitude=38.2527, longitude=-85.7585),
    "LA": GeoPoint(latitude=30.4515, longitude=-91.1871),
    "ME": GeoPoint(latitude=43.6591, longitude=-70.2568),
    "MD": GeoPoint(latitude=39.2904, longitude=-76.6122),
    "MA": GeoPoint(latitude=42.3601, longitude=-71.0589),
    "MI": GeoPoint(latitude=42.3314, longitude=-83.0458),
    "MN": GeoPoint(latitude=44.9778, longitude=-93.2650),
    "MS": GeoPoint(latitude=32.2988, longitude=-90.1848),
    "MO": GeoPoint(latitude=38.5767, longitude=-92.1735),
    "MT": GeoPoint(latitude=46.5891, longitude=-112.0391),
    "NE": GeoPoint(latitude=41.2565, longitude=-95.9345),
    "NV": GeoPoint(latitude=36.1699, longitude=-115.1398),
    "NH": GeoPoint(latitude=42.9956, longitude=-71.4548),
    "NJ": GeoPoint(latitude=40.7357, longitude=-74.1724),
    "NM": GeoPoint(latitude=35.0844, longitude=-106.6504),
    "NY": GeoPoint(latitude=40.7128, longitude=-74.0060),
    "NC": GeoPoint(latitude=35.2271, longitude=-80.8431),
    "ND": GeoPoint(latitude=46.8083, longitude=-100.7837),
    "OH": GeoPoint(latitude=39.9612, longitude=-82.9988),
    "OK": GeoPoint(latitude=35.4676, longitude=-97.5164),
    "OR": GeoPoint(latitude=45.5152, longitude=-122.6784),
    "PA": GeoPoint(latitude=40.2732, longitude=-76.8867),
    "PR": GeoPoint(latitude=18.4655, longitude=-66.1057),
    "RI": GeoPoint(latitude=41.8240, longitude=-71.4128),
    "SC": GeoPoint(latitude=34.0007, longitude=-81.0348),
    "SD": GeoPoint(latitude=43.5446, longitude=-96.7311),
    "TN": GeoPoint(latitude=36.1627, longitude=-86.7816),
    "TX": GeoPoint(latitude=30.2672, longitude=-97.7431),
    "UT": GeoPoint(latitude=40.7608, longitude=-111.8910),
    "VT": GeoPoint(latitude=44.4759, longitude=-73.2121),
    "VA": GeoPoint(latitude=37.5407, longitude=-77.4360),
    "WA": GeoPoint(latitude=47.6062, longitude=-122.3321),
    "WV": GeoPoint(latitude=38.3498, longitude=-81.6326),
    "WI": GeoPoint(latitude=43.0389, longitude=-87.9065),
    "WY": GeoPoint(latitude=41.1400, longitude=-104.8202),
}

# Sparse on purpose: unlisted states use the default penalty
REGION_PENALTIES: dict[str, float] = {
    "AK": 9.50,
    "HI": 7.00,
    "MT": 7.50,
    "WY": 7.50,
    "NV": 7.00,
    "TX": 7.00,
    "CA": 6.50,
    "NY": 5.40,
    "NJ": 5.00,
    "MA": 5.20,
    "RI": 5.00,
    "CT": 5.00,
    "DE": 5.00,
    "DC": 5.00,
}

CITY_COORDINATES: dict[tuple[str, str], GeoPoint] = {
    ("NEW YORK", "NY"): GeoPoint(latitude=40.7128, longitude=-74.0060),
    ("BROOKLYN", "NY"): GeoPoint(latitude=40.6782, longitude=-73.9442),
    ("BUFFALO", "NY"): GeoPoint(latitude=42.8864, longitude=-78.8784),
    ("LOS ANGELES", "CA"): GeoPoint(latitude=34.0522, longitude=-118.2437),
    ("SAN FRANCISCO", "CA"): GeoPoint(latitude=37.7749, longitude=-122.4194),
    ("SAN DIEGO", "CA"): GeoPoint(latitude=32.7157, longitude=-117.1611),
    ("CHICAGO", "IL"): GeoPoint(latitude=41.8781, longitude=-87.6298),
    ("HOUSTON", "TX"): GeoPoint(latitude=29.7604, longitude=-95.3698),
    ("DALLAS", "TX"): GeoPoint(latitude=32.7767, longitude=-96.7970),
    ("AUSTIN", "TX"): GeoPoint(latitude=30.2672, longitude=-97.7431),
    ("PHOENIX", "AZ"): GeoPoint(latitude=33.4484, longitude=-112.0740),
    ("PHILADELPHIA", "PA"): GeoPoint(latitude=39.9526, longitude=-75.1652),
    ("PITTSBURGH", "PA"): GeoPoint(latitude=40.4406, longitude=-79.9959),
    ("ATLANTA", "GA"): GeoPoint(latitude=33.7490, longitude=-84.3880),
    ("MIAMI", "FL"): GeoPoint(latitude=25.7617, longitude=-80.1918),
    ("ORLANDO", "FL"): GeoPoint(latitude=28.5383, longitude=-81.3792),
    ("SEATTLE", "WA"): GeoPoint(latitude=47.6062, longitude=-122.3321),
    ("DENVER", "CO"): GeoPoint(latitude=39.7392, longitude=-104.9903),
    ("BOSTON", "MA"): GeoPoint(latitude=42.3601, longitude=-71.0589),
    ("DETROIT", "MI"): GeoPoint(latitude=42.3314, longitude=-83.0458),
    ("MINNEAPOLIS", "MN"): GeoPoint(latitude=44.9778, longitude=-93.2650),
    ("ST. LOUIS", "MO"): GeoPoint(latitude=38.6270, longitude=-90.1994),
    ("KANSAS CITY", "MO"): GeoPoint(latitude=39.0997, longitude=-94.5786),
    ("LAS VEGAS", "NV"): GeoPoint(latitude=36.1699, longitude=-115.1398),
    ("WASHINGTON", "DC"): GeoPoint(latitude=38.9072, longitude=-77.0369),
}
