"""Port interface for the optional postal → region mapping."""

from abc import ABC, abstractmethod


class PostalRegionRepository(ABC):
    @abstractmethod
    async def get_mapping(self) -> dict[str, str] | None:
        """Normalized postal code → region code.

        Returns None when no mapping source is configured.
        """
        ...
