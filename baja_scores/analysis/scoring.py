"""Percentage-of-maximum scoring with overflow tracking.

Raw points are divided by the category maximum and expressed as a
percentage.  Teams occasionally score above the published maximum (bonus
points, rescored heats), so the percentage is split into a value capped at
100 and the overflow above it.  Nothing is rounded here; formatting is the
caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..registry.categories import DEFAULT_REGISTRY, CategoryRegistry
from .extraction import extract_raw_points

_CAP: float = 100.0


@dataclass(frozen=True)
class NormalizedScore:
    """A category score on the 0-100 scale plus anything beyond it.

    Attributes
    ----------
    capped:
        ``min(percentage, 100)``.
    overflow:
        ``max(0, percentage - 100)``; zero when the team is within the
        maximum.
    """

    capped: float = 0.0
    overflow: float = 0.0

    @property
    def percentage(self) -> float:
        """The uncapped percentage, ``capped + overflow``."""
        return self.capped + self.overflow

    @property
    def has_overflow(self) -> bool:
        return self.overflow > 0.0


ZERO_SCORE = NormalizedScore()


def split_percentage(percentage: float) -> NormalizedScore:
    """Split *percentage* into its capped and overflow parts."""
    return NormalizedScore(
        capped=min(percentage, _CAP),
        overflow=max(0.0, percentage - _CAP),
    )


def normalize(
    raw_points: float,
    category: str,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> NormalizedScore:
    """Convert *raw_points* to a :class:`NormalizedScore` for *category*.

    ``percentage = raw_points / max_points * 100``.  Unknown categories
    return a zero score without dividing.
    """
    max_points = registry.max_points(category)
    if max_points is None:
        return ZERO_SCORE
    return split_percentage(raw_points / max_points * 100.0)


def score_team(
    team_record: Optional[Mapping],
    category: str,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> NormalizedScore:
    """Extract and normalize one team's score in one category."""
    if category not in registry:
        return ZERO_SCORE
    return normalize(extract_raw_points(team_record, category, registry), category, registry)
