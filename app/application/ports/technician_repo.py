"""Port interface for the technician roster."""

from abc import ABC, abstractmethod

from app.domain.entities.technician import Technician


class TechnicianRepository(ABC):
    @abstractmethod
    async def get_all(self) -> list[Technician]:
        """Full roster in source order."""
        ...
