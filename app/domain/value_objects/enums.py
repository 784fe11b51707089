"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Jurisdiction(str, Enum):
    CA = "CA"
    US = "US"


class Precision(str, Enum):
    EXACT = "exact"
    CITY = "city"
    REGION = "region"
    UNRESOLVED = "unresolved"


class RoutingMode(str, Enum):
    DRIVING = "driving"
    ESTIMATE = "estimate"


class ResolutionState(str, Enum):
    IDLE = "idle"
    NORMALIZING_POSTAL = "normalizing_postal"
    RESOLVING_TICKET = "resolving_ticket"
    SCORING_ROSTER = "scoring_roster"
    ROUTING_ATTEMPT = "routing_attempt"
    ESTIMATE_FALLBACK = "estimate_fallback"
    RANKED = "ranked"
    DONE = "done"
    FAILED = "failed"
