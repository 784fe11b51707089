"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def haversine_km(self, other: "GeoPoint") -> float:
        """Great-circle distance in km between two points (Haversine formula)."""
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        h = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        # Rounding can push h a hair above 1 for antipodal points
        c = 2 * math.asin(min(1.0, math.sqrt(h)))

        return EARTH_RADIUS_KM * c
