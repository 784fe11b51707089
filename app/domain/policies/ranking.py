"""RankingPolicy — ordering rules for scored technician candidates."""

from __future__ import annotations

import math

from app.domain.entities.scored_candidate import ScoredCandidate

DEFAULT_CANDIDATE_LIMIT = 25
DEFAULT_SHORTLIST_SIZE = 8


def _or_inf(value: float | None) -> float:
    return value if value is not None else math.inf


def rank_by_straight_line(candidates: list[ScoredCandidate]) -> list[ScoredCandidate]:
    """Baseline ranking: straight-line km ascending (stable for ties)."""
    return sorted(candidates, key=lambda c: c.straight_km)


def rank_by_driving(candidates: list[ScoredCandidate]) -> list[ScoredCandidate]:
    """Driving ranking: duration ascending, then driving km ascending.

    Missing values sort last. Ties keep their incoming (straight-line) order,
    so candidates without any driving data stay in baseline order at the end.
    """
    return sorted(candidates, key=lambda c: (_or_inf(c.drive_min), _or_inf(c.drive_km)))


def driving_candidates(
    ranked: list[ScoredCandidate],
    limit: int = DEFAULT_CANDIDATE_LIMIT,
) -> list[ScoredCandidate]:
    """The nearest *limit* candidates by straight line, sent for routing."""
    return ranked[: max(0, limit)]


def pick_best(ranked: list[ScoredCandidate], prefer_driving: bool = False) -> ScoredCandidate:
    """Best entry of a final ranking.

    In driving mode the first candidate with both driving figures wins; if
    none has them the head of the ranking is used.

    Raises:
        ValueError: if the ranking is empty.
    """
    if not ranked:
        raise ValueError("Cannot pick from an empty ranking")
    if prefer_driving:
        for candidate in ranked:
            if candidate.has_driving_data:
                return candidate
    return ranked[0]


def shortlist(
    ranked: list[ScoredCandidate],
    size: int = DEFAULT_SHORTLIST_SIZE,
) -> list[ScoredCandidate]:
    return ranked[: max(0, size)]
