"""Static Canadian reference data — provinces, cities, postal prefixes."""

from app.domain.value_objects.geo_point import GeoPoint

# First letter of the forward sortation area → province / territory
POSTAL_FIRST_LETTER_REGION: dict[str, str] = {
    "A": "NL",
    "B": "NS",
    "C": "PE",
    "E": "NB",
    "G": "QC",
    "H": "QC",
    "J": "QC",
    "K": "ON",
    "L": "ON",
    "M": "ON",
    "N": "ON",
    "P": "ON",
    "R": "MB",
    "S": "SK",
    "T": "AB",
    "V": "BC",
    "X": "NT",
    "Y": "YT",
}

# Province centroid = main population centre, not the geographic centre
REGION_CENTROIDS: dict[str, GeoPoint] = {
    "NL": GeoPoint(latitude=47.5615, longitude=-52.7126),
    "NS": GeoPoint(latitude=44.6488, longitude=-63.5752),
    "PE": GeoPoint(latitude=46.2382, longitude=-63.1311),
    "NB": GeoPoint(latitude=45.9636, longitude=-66.6431),
    "QC": GeoPoint(latitude=45.5017, longitude=-73.5673),
    "ON": GeoPoint(latitude=43.6532, longitude=-79.3832),
    "MB": GeoPoint(latitude=49.8951, longitude=-97.1384),
    "SK": GeoPoint(latitude=50.4452, longitude=-104.6189),
    "AB": GeoPoint(latitude=53.5461, longitude=-113.4938),
    "BC": GeoPoint(latitude=49.2827, longitude=-123.1207),
    "NT": GeoPoint(latitude=62.4540, longitude=-114.3718),
    "NU": GeoPoint(latitude=63.7467, longitude=-68.5167),
    "YT": GeoPoint(latitude=60.7212, longitude=-135.0568),
}

# Road-curvature multipliers applied when the ticket only resolves to a province
REGION_PENALTIES: dict[str, float] = {
    "QC": 5.40,
    "ON": 6.00,
    "BC": 8.00,
    "AB": 7.00,
    "MB": 6.50,
    "SK": 6.50,
    "NB": 5.80,
    "NS": 5.80,
    "PE": 5.80,
    "NL": 6.20,
    "YT": 8.50,
    "NT": 9.00,
    "NU": 9.50,
}

# Keyed by (CITY, PROVINCE); both spellings of Fredericton appear in roster data
CITY_COORDINATES: dict[tuple[str, str], GeoPoint] = {
    ("FREDERICKTON", "NB"): GeoPoint(latitude=45.9636, longitude=-66.6431),
    ("FREDERICTON", "NB"): GeoPoint(latitude=45.9636, longitude=-66.6431),
    ("WINNIPEG", "MB"): GeoPoint(latitude=49.8951, longitude=-97.1384),
    ("CALGARY", "AB"): GeoPoint(latitude=51.0447, longitude=-114.0719),
    ("LAVAL", "QC"): GeoPoint(latitude=45.6066, longitude=-73.7124),
    ("THORNHILL", "ON"): GeoPoint(latitude=43.8106, longitude=-79.4263),
    ("EDMONTON", "AB"): GeoPoint(latitude=53.5461, longitude=-113.4938),
    ("RICHMOND (VANCOUVER)", "BC"): GeoPoint(latitude=49.1666, longitude=-123.1336),
    ("RICHMOND", "BC"): GeoPoint(latitude=49.1666, longitude=-123.1336),
    ("SCARBOROUGH", "ON"): GeoPoint(latitude=43.7764, longitude=-79.2318),
}
