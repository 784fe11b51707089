"""Port interface for geocoding postal codes to coordinates."""

from abc import ABC, abstractmethod

from app.domain.value_objects.geo_point import GeoPoint


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode_postal(self, postal: str, country_code: str) -> GeoPoint | None:
        """Resolve a normalized postal code inside one country to its best-match point.

        Returns None if the code cannot be resolved; transport errors are
        reported the same way.
        """
        ...
