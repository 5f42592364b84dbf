"""Competition resolution across historical spellings.

Competition names in the dataset were typed by hand over many seasons, so
the same event may appear as ``"Midwest 2023"``, ``"Midwest 2023 "`` or
``"midwest 2023"``.  Callers hold whatever spelling they were given; this
module maps it back onto a dataset key.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)


def resolve_competition_key(dataset: Mapping[str, Any], identifier: str) -> Optional[str]:
    """Return the dataset key that *identifier* refers to.

    Resolution order (first hit wins):

    1. Exact key match.
    2. *identifier* with leading/trailing whitespace stripped, matched
       exactly against the keys as stored.
    3. Case-insensitive match with both *identifier* and every key
       stripped.  Keys are scanned in insertion order.

    Parameters
    ----------
    dataset : Mapping
        Competition name -> record set.
    identifier : str
        Competition name as supplied by the caller.

    Returns
    -------
    str or None
        The matching key, or ``None`` when no tier matches.
    """
    if not isinstance(dataset, Mapping) or not isinstance(identifier, str):
        return None

    # Tier 1 -- exact
    if identifier in dataset:
        return identifier

    # Tier 2 -- trimmed identifier
    trimmed = identifier.strip()
    if trimmed in dataset:
        return trimmed

    # Tier 3 -- trimmed + case-folded on both sides
    target = trimmed.lower()
    for key in dataset:
        if isinstance(key, str) and key.strip().lower() == target:
            return key

    logger.debug("No competition matches %r", identifier)
    return None


def resolve_competition(dataset: Mapping[str, Any], identifier: str) -> Optional[Mapping]:
    """Return the record set for *identifier*, or ``None`` if unresolved."""
    key = resolve_competition_key(dataset, identifier)
    if key is None:
        return None
    record_set = dataset[key]
    if not isinstance(record_set, Mapping):
        logger.debug("Competition %r is not a mapping; ignoring", key)
        return None
    return record_set
