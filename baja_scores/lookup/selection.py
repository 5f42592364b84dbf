"""Team selections and their identity tokens.

A selection pins one team's appearance at one competition.  Presentation
code keys series, colours and legends on the selection's token, so the
token must be stable for the same (competition, school, team_key) triple.
The engine itself treats tokens as opaque strings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .team import OVERALL_SECTION, iter_team_records, team_key_of

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ":::"

# The comparison chart becomes unreadable beyond this many series.
MAX_SELECTIONS = 6


@dataclass(frozen=True)
class TeamSelection:
    """One team at one competition, as chosen for comparison."""

    token: str
    competition: str
    school: str
    team_key: str

    @property
    def team_name(self) -> str:
        return team_display_name(self.team_key)

    @property
    def label(self) -> str:
        """``"School - Team - Competition"`` label used in listings."""
        return f"{self.school} - {self.team_name} - {self.competition}"

    @classmethod
    def create(cls, competition: str, school: str, team_key: str) -> "TeamSelection":
        """Build a selection with the default token for the triple."""
        return cls(
            token=make_token(competition, school, team_key),
            competition=competition,
            school=school,
            team_key=team_key,
        )


def make_token(competition: str, school: str, team_key: str) -> str:
    return TOKEN_SEPARATOR.join((competition, school, team_key))


def parse_token(token: Optional[str]) -> Optional[TeamSelection]:
    """Rebuild a :class:`TeamSelection` from a token made by :func:`make_token`.

    Returns ``None`` for an empty token or one with fewer than three parts.
    Any separator inside the team key is kept as part of the key.
    """
    if not token:
        return None
    parts = token.split(TOKEN_SEPARATOR, 2)
    if len(parts) < 3:
        logger.debug("Malformed selection token %r", token)
        return None
    competition, school, team_key = parts
    return TeamSelection(
        token=token, competition=competition, school=school, team_key=team_key,
    )


def team_display_name(team_key: str) -> str:
    """Return the team-name part of a ``"School - [Campus -] Team"`` key.

    The last non-empty ``" - "`` segment is taken as the team name.  A key
    without separators is returned unchanged.
    """
    parts = [p.strip() for p in team_key.split(" - ") if p.strip()]
    return parts[-1] if parts else team_key


def selection_options(dataset: Mapping[str, Any]) -> list[TeamSelection]:
    """Return a selection for every team appearance in *dataset*.

    Options are sorted by their display label, case-insensitively.
    """
    options: list[TeamSelection] = []
    if not isinstance(dataset, Mapping):
        return options

    for competition, record_set in dataset.items():
        for record in iter_team_records(record_set):
            school = record[OVERALL_SECTION].get("School")
            if not isinstance(school, str):
                school = ""
            options.append(
                TeamSelection.create(competition, school, team_key_of(record))
            )

    options.sort(key=lambda s: (s.label.casefold(), s.label))
    return options
