"""Competition, team and selection lookup over the raw dataset."""

from .competition import resolve_competition, resolve_competition_key
from .selection import (
    MAX_SELECTIONS,
    TeamSelection,
    make_token,
    parse_token,
    selection_options,
    team_display_name,
)
from .team import iter_team_records, locate_team, team_key_of

__all__ = [
    "MAX_SELECTIONS",
    "TeamSelection",
    "iter_team_records",
    "locate_team",
    "make_token",
    "parse_token",
    "resolve_competition",
    "resolve_competition_key",
    "selection_options",
    "team_display_name",
    "team_key_of",
]
