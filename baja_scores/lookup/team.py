"""Team lookup inside a competition's record set.

Record-set keys carry no meaning; a team is identified by the
``Overall.team_key`` string (``"School - [Campus -] Team Name"``).  When
several records share a key the first one in the mapping's insertion
order wins, which keeps repeated lookups on the same data deterministic.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional

logger = logging.getLogger(__name__)

OVERALL_SECTION = "Overall"


def team_key_of(record: Any) -> Optional[str]:
    """Return ``record["Overall"]["team_key"]`` if it is a string."""
    if not isinstance(record, Mapping):
        return None
    overall = record.get(OVERALL_SECTION)
    if not isinstance(overall, Mapping):
        return None
    key = overall.get("team_key")
    return key if isinstance(key, str) else None


def iter_team_records(record_set: Mapping[str, Any]) -> Iterator[Mapping]:
    """Yield every well-formed team record in insertion order.

    Records without an ``Overall`` mapping or a string ``team_key`` are
    skipped.
    """
    if not isinstance(record_set, Mapping):
        return
    for record in record_set.values():
        if team_key_of(record) is not None:
            yield record


def locate_team(record_set: Mapping[str, Any], team_key: str) -> Optional[Mapping]:
    """Return the team record whose ``team_key`` matches *team_key*.

    Matching order:

    1. Exact equality with ``Overall.team_key``.
    2. Equality after stripping whitespace from both sides.

    Returns ``None`` when neither tier finds a record.
    """
    if not isinstance(team_key, str):
        return None
    records = list(iter_team_records(record_set))

    for record in records:
        if team_key_of(record) == team_key:
            return record

    trimmed = team_key.strip()
    for record in records:
        if team_key_of(record).strip() == trimmed:
            return record

    logger.debug("No team matches %r", team_key)
    return None
