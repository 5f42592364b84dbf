"""Leaderboard view of a single competition."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import pandas as pd

from ..lookup.competition import resolve_competition
from ..lookup.team import OVERALL_SECTION, iter_team_records
from .extraction import coerce_number

logger = logging.getLogger(__name__)

OVERVIEW_COLUMNS = ["team", "school", "team_key", "total"]

DEFAULT_TOTAL_KEY = "Overall (1000)"


def _strip_school(team_key: str, school: str) -> str:
    prefix = f"{school} - "
    if school and team_key.startswith(prefix):
        return team_key[len(prefix):]
    return team_key


def top_teams(
    dataset: Mapping[str, Any],
    competition: str,
    limit: int = 10,
    total_key: str = DEFAULT_TOTAL_KEY,
) -> pd.DataFrame:
    """Return the *limit* best teams at *competition* by ``Overall[total_key]``.

    Columns are ``team`` (team key without the school prefix), ``school``,
    ``team_key`` and ``total``.  Teams with no numeric total are left out.
    An unresolved competition gives an empty frame.
    """
    record_set = resolve_competition(dataset, competition)
    if record_set is None:
        logger.debug("Overview: competition %r not found", competition)
        return pd.DataFrame(columns=OVERVIEW_COLUMNS)

    rows = []
    for record in iter_team_records(record_set):
        overall = record[OVERALL_SECTION]
        total = coerce_number(overall.get(total_key))
        if total is None:
            continue
        school = overall.get("School")
        school = school if isinstance(school, str) else ""
        team_key = overall["team_key"]
        rows.append({
            "team": _strip_school(team_key, school),
            "school": school,
            "team_key": team_key,
            "total": total,
        })

    frame = pd.DataFrame(rows, columns=OVERVIEW_COLUMNS)
    if frame.empty:
        return frame
    # mergesort is stable, so ties keep dataset order.
    frame = frame.sort_values("total", ascending=False, kind="mergesort")
    return frame.head(max(limit, 0)).reset_index(drop=True)
