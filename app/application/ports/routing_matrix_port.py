"""Port interface for the driving distance / duration matrix service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.domain.value_objects.enums import Jurisdiction


@dataclass(frozen=True)
class MatrixResult:
    """Driving figures aligned index-for-index with the requested destinations.

    A destination that could not be geocoded or routed is ``None`` at its
    position. A failed request carries ``error`` and empty lists.
    """

    distances_km: list[float | None] = field(default_factory=list)
    durations_min: list[float | None] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, error: str) -> MatrixResult:
        return cls(error=error)


class RoutingMatrixPort(ABC):
    @abstractmethod
    async def matrix(
        self,
        origin_postal: str,
        destination_postals: list[str],
        jurisdiction: Jurisdiction,
    ) -> MatrixResult:
        """One origin, many destinations. Never raises for service errors."""
        ...
