"""ComparisonTable -- the engine's output for a set of selected teams.

One table holds a :class:`~baja_scores.analysis.scoring.NormalizedScore`
for every (category, selection) pair, in the caller's category order and
selection order.  It is consumed by the terminal display, the Markdown
exporter and any charting front-end via :meth:`ComparisonTable.to_records`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:
    from ..analysis.scoring import NormalizedScore
    from ..lookup.selection import TeamSelection

OVERFLOW_SUFFIX = "__overflow"


@dataclass
class ComparisonTable:
    """Normalized scores for each category and selected team.

    Attributes
    ----------
    categories : list[str]
        Category names, in display order.
    selections : list[TeamSelection]
        Selected teams, in display order.
    scores : dict[tuple[str, str], NormalizedScore]
        ``(category, token) -> score``.
    """

    categories: list[str] = field(default_factory=list)
    selections: list["TeamSelection"] = field(default_factory=list)
    scores: dict[tuple[str, str], "NormalizedScore"] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def tokens(self) -> list[str]:
        return [s.token for s in self.selections]

    def score(self, category: str, token: str) -> "NormalizedScore":
        """Return the score for *category* and *token*.

        Raises ``KeyError`` for a pair that is not in the table.
        """
        return self.scores[(category, token)]

    def overflowing(self) -> list[tuple[str, str, float]]:
        """Return ``(category, token, overflow)`` for every score above 100%."""
        hits = []
        for category in self.categories:
            for token in self.tokens:
                result = self.scores[(category, token)]
                if result.has_overflow:
                    hits.append((category, token, result.overflow))
        return hits

    def is_empty(self) -> bool:
        return not self.selections

    # ------------------------------------------------------------------
    # Export shapes
    # ------------------------------------------------------------------

    def to_records(self) -> list[dict]:
        """Return one chart row per category.

        Each row looks like::

            {"category": "Hill Climb", "<token>": 100.0, "<token>__overflow": 6.67}

        With no selections each row carries only the category name.
        """
        rows = []
        for category in self.categories:
            row: dict = {"category": category}
            for token in self.tokens:
                result = self.scores[(category, token)]
                row[token] = result.capped
                row[f"{token}{OVERFLOW_SUFFIX}"] = result.overflow
            rows.append(row)
        return rows

    def to_dataframe(self) -> pd.DataFrame:
        """Return :meth:`to_records` as a DataFrame indexed by category."""
        frame = pd.DataFrame.from_records(self.to_records(), columns=self._columns())
        return frame.set_index("category")

    def _columns(self) -> list[str]:
        columns = ["category"]
        for token in self.tokens:
            columns.extend([token, f"{token}{OVERFLOW_SUFFIX}"])
        return columns
