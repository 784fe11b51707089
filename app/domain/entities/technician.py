"""Technician entity — a field technician on the dispatch roster."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Technician:
    id: str
    name: str
    city: str = ""
    region: str = ""
    postal: str = ""
