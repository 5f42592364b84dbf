"""Category definitions for Baja SAE dynamic events.

Each season's results sheet spells the same event differently: the section
for Suspension may be keyed ``"Suspension & Traction"`` or ``"S&T"``, the
score inside it may be ``"Score"`` or ``"Suspension & Traction Score (75)"``,
and the rolled-up column in ``Overall`` may carry yet another name.  This
module collects every known spelling into one declarative table so that a
single extraction routine can serve all categories.

Public API
----------
CategoryDefinition
    Immutable description of one scored category.
CategoryRegistry
    Read-only lookup over a set of definitions.
DEFAULT_REGISTRY
    Registry of the canonical Baja categories.
DISPLAY_CATEGORIES
    Ordered category names shown in a comparison by default.
load_registry(path)
    Build a registry from a JSON file.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryDefinition:
    """One scored event and the aliases used to find its points.

    Attributes
    ----------
    name : str
        Canonical category name (e.g. ``"Hill Climb"``).
    max_points : float
        Points available for the event.  Always positive.
    overall_keys : tuple[str, ...]
        Field names tried, in order, inside a team's ``Overall`` section.
    section_keys : tuple[str, ...]
        Event-section names tried, in order, on the team record.
    score_keys : tuple[str, ...]
        Field names tried, in order, inside an event section.
    """

    name: str
    max_points: float
    overall_keys: tuple[str, ...] = ()
    section_keys: tuple[str, ...] = ()
    score_keys: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("category name must be a non-empty string")
        if (
            isinstance(self.max_points, bool)
            or not isinstance(self.max_points, (int, float))
            or not math.isfinite(self.max_points)
            or self.max_points <= 0
        ):
            raise ValueError(
                f"max_points for {self.name!r} must be a positive number, "
                f"got {self.max_points!r}"
            )
        # Accept lists from JSON but store tuples so the definition stays
        # hashable and immutable.
        for attr in ("overall_keys", "section_keys", "score_keys"):
            object.__setattr__(self, attr, tuple(getattr(self, attr)))


# ---------------------------------------------------------------------------
# Canonical category table
#
# Grouped by category.  Alias lists are ordered most-specific first: the
# season-specific spelling precedes the generic ``"Score"`` / ``"score"``.
# ---------------------------------------------------------------------------

_DEFAULT_DEFINITIONS: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        name="Acceleration",
        max_points=75,
        overall_keys=("Acceleration (75)",),
        section_keys=("Acceleration", "Accel"),
        score_keys=("Acceleration Score (75)", "Score", "score"),
    ),
    CategoryDefinition(
        name="Maneuverability",
        max_points=75,
        overall_keys=("Maneuverability (75)", "Land Manuverability (75)"),
        section_keys=("Maneuverability", "Manv"),
        score_keys=(
            "Maneuverability Score (75)",
            "Land Manuverability Score (75)",
            "Score",
            "score",
        ),
    ),
    CategoryDefinition(
        name="Hill Climb",
        max_points=75,
        overall_keys=("Hill Climb (75)",),
        section_keys=("Hill Climb", "Hill"),
        score_keys=("Hill Climb Score (75)", "Score", "score"),
    ),
    CategoryDefinition(
        name="Suspension",
        max_points=75,
        overall_keys=("Suspension & Traction (75)",),
        section_keys=("Suspension & Traction", "S&T"),
        score_keys=("Suspension & Traction Score (75)", "Score", "score"),
    ),
    CategoryDefinition(
        name="Rock Crawl",
        max_points=75,
        overall_keys=("Rock Crawl (75)",),
        section_keys=("Rock Crawl",),
        score_keys=("Rock Crawl Score (75)", "Score", "score"),
    ),
    # Only held at some events; registered but not in DISPLAY_CATEGORIES.
    CategoryDefinition(
        name="Sled Pull",
        max_points=75,
        overall_keys=("Sled Pull (75)",),
        section_keys=("Sled Pull", "Pull"),
        score_keys=("Sled Pull Score (75)", "Score", "score"),
    ),
    CategoryDefinition(
        name="Endurance",
        max_points=400,
        overall_keys=("Endurance (400)", "Endurance Race (400)"),
        section_keys=("Endurance",),
        score_keys=(
            "Endurance Race Score (400)",
            "Points (400)",
            "Points",
            "Score",
            "score",
        ),
    ),
)

DISPLAY_CATEGORIES: tuple[str, ...] = (
    "Acceleration",
    "Suspension",
    "Maneuverability",
    "Hill Climb",
    "Rock Crawl",
    "Endurance",
)


class CategoryRegistry:
    """Read-only lookup of :class:`CategoryDefinition` by canonical name.

    Built once and passed explicitly to the extraction and scoring
    functions.  Iteration yields definitions in the order supplied.

    Parameters
    ----------
    definitions:
        Category definitions.  Names must be unique.
    """

    def __init__(self, definitions) -> None:
        table: dict[str, CategoryDefinition] = {}
        for definition in definitions:
            if definition.name in table:
                raise ValueError(f"duplicate category {definition.name!r}")
            table[definition.name] = definition
        self._table = table

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Mapping]) -> "CategoryRegistry":
        """Build a registry from a JSON-style mapping.

        Expected shape::

            {
                "Hill Climb": {
                    "max_points": 75,
                    "overall_keys": ["Hill Climb (75)"],
                    "section_keys": ["Hill Climb", "Hill"],
                    "score_keys": ["Score"]
                },
                ...
            }

        Raises
        ------
        ValueError
            If *mapping* or any entry is malformed.
        """
        if not isinstance(mapping, Mapping):
            raise ValueError("category table must be a JSON object")

        definitions = []
        for name, entry in mapping.items():
            if not isinstance(entry, Mapping):
                raise ValueError(f"category {name!r} must map to an object")
            if "max_points" not in entry:
                raise ValueError(f"category {name!r} is missing max_points")
            aliases = {}
            for attr in ("overall_keys", "section_keys", "score_keys"):
                value = entry.get(attr, ())
                if not isinstance(value, (list, tuple)) or not all(
                    isinstance(v, str) for v in value
                ):
                    raise ValueError(
                        f"{attr} for category {name!r} must be a list of strings"
                    )
                aliases[attr] = value
            definitions.append(
                CategoryDefinition(name=name, max_points=entry["max_points"], **aliases)
            )
        return cls(definitions)

    def get(self, name: str) -> Optional[CategoryDefinition]:
        """Return the definition for *name*, or ``None`` when unknown."""
        return self._table.get(name)

    def max_points(self, name: str) -> Optional[float]:
        """Return the maximum points for *name*, or ``None`` when unknown."""
        definition = self._table.get(name)
        return definition.max_points if definition is not None else None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator[CategoryDefinition]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"CategoryRegistry({list(self._table)!r})"


DEFAULT_REGISTRY: CategoryRegistry = CategoryRegistry(_DEFAULT_DEFINITIONS)


def load_registry(path: Path | str) -> CategoryRegistry:
    """Read a category table from the JSON file at *path*.

    See :meth:`CategoryRegistry.from_mapping` for the expected layout.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)
    registry = CategoryRegistry.from_mapping(raw)
    logger.info("Loaded %d categories from %s", len(registry), path)
    return registry
