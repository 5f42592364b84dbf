"""Raw point extraction from loosely-structured team records.

Team records come from several seasons of results sheets with different
layouts.  Newer seasons carry one section per event
(``record["Hill Climb"]["Score"]``); older ones only have rolled-up
columns in ``record["Overall"]`` (``"Hill Climb (75)"``).  Extraction
walks the aliases of a :class:`~baja_scores.registry.CategoryDefinition`
and prefers per-event detail over the aggregate.
"""

from __future__ import annotations

import logging
import numbers
import re
from typing import Any, Mapping, Optional

import numpy as np

from ..lookup.team import OVERALL_SECTION
from ..registry.categories import DEFAULT_REGISTRY, CategoryDefinition, CategoryRegistry

logger = logging.getLogger(__name__)

_SCORE_FIELD_RE = re.compile(r"score", re.IGNORECASE)


def coerce_number(value: Any) -> Optional[float]:
    """Return *value* as a float if it is a finite real number.

    Strings are not parsed, booleans are rejected, and NaN, infinity and
    integers too large for a float count as missing.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if not isinstance(value, numbers.Real):
        return None
    try:
        number = float(value)
    except (OverflowError, TypeError, ValueError):
        return None
    if not np.isfinite(number):
        return None
    return number


def _points_from_section(section: Mapping, definition: CategoryDefinition) -> Optional[float]:
    """Return the first numeric score in an event section, or ``None``."""
    for field in definition.score_keys:
        if field in section:
            points = coerce_number(section[field])
            if points is not None:
                return points

    # Undeclared score column: take the first "...score..." field holding
    # a number.
    for field, value in section.items():
        if isinstance(field, str) and _SCORE_FIELD_RE.search(field):
            points = coerce_number(value)
            if points is not None:
                logger.debug(
                    "%s: using undeclared score field %r", definition.name, field,
                )
                return points
    return None


def read_section_points(team_record: Mapping, definition: CategoryDefinition) -> Optional[float]:
    """Try each event-section alias of *definition* in declared order."""
    for section_key in definition.section_keys:
        section = team_record.get(section_key)
        if not isinstance(section, Mapping):
            continue
        points = _points_from_section(section, definition)
        if points is not None:
            return points
    return None


def read_overall_points(team_record: Mapping, definition: CategoryDefinition) -> Optional[float]:
    """Try each ``Overall`` alias of *definition* in declared order."""
    overall = team_record.get(OVERALL_SECTION)
    if not isinstance(overall, Mapping):
        return None
    for field in definition.overall_keys:
        if field in overall:
            points = coerce_number(overall[field])
            if points is not None:
                return points
    return None


def extract_raw_points(
    team_record: Optional[Mapping],
    category: str,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> float:
    """Return the raw points *team_record* earned in *category*.

    Resolution order (first numeric value wins):

    1. Event sections named by the category's section aliases.  Inside
       each, the declared score fields, then any field whose name contains
       "score".  A section with no usable value moves on to the next alias.
    2. The category's aliases inside the ``Overall`` section.
    3. ``0.0``.

    Unknown categories and non-mapping records return ``0.0`` straight
    away.  Never raises for malformed data.
    """
    definition = registry.get(category)
    if definition is None:
        logger.debug("Unknown category %r", category)
        return 0.0
    if not isinstance(team_record, Mapping):
        return 0.0

    points = read_section_points(team_record, definition)
    if points is None:
        points = read_overall_points(team_record, definition)
    if points is None:
        logger.debug("No %s points found; using 0", category)
        return 0.0
    return points
