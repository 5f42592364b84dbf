"""Comparison engine for selected Baja teams.

Ties together competition resolution, team lookup, extraction and
normalization, and produces a :class:`ComparisonTable` for a list of
selections.  This module is the entry point for every consumer of the
scoring logic.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..lookup.competition import resolve_competition_key
from ..lookup.selection import TeamSelection
from ..lookup.team import locate_team
from ..output.comparison import ComparisonTable
from ..registry.categories import DEFAULT_REGISTRY, DISPLAY_CATEGORIES, CategoryRegistry
from .scoring import ZERO_SCORE, NormalizedScore, score_team

logger = logging.getLogger(__name__)

_MISSING = object()


class ScoreEngine:
    """Scores team selections against a read-only dataset.

    Typical usage::

        engine = ScoreEngine(load_dataset("baja-data.json"))
        table = engine.compare([TeamSelection.create(comp, school, key)])
        for row in table.to_records():
            print(row)

    Parameters
    ----------
    dataset:
        Competition -> record set -> team record.  Never modified.
    registry:
        Category table used for extraction and normalization.
    memoize:
        When *True*, competition and team lookups are cached per argument
        until :meth:`reload` is called.
    """

    def __init__(
        self,
        dataset: Mapping[str, Any],
        registry: CategoryRegistry = DEFAULT_REGISTRY,
        memoize: bool = True,
    ) -> None:
        self._dataset = dataset
        self.registry = registry
        self.memoize = memoize
        self._competition_cache: dict[str, Optional[str]] = {}
        self._team_cache: dict[tuple[str, str], Optional[Mapping]] = {}

    @property
    def dataset(self) -> Mapping[str, Any]:
        return self._dataset

    def reload(self, dataset: Mapping[str, Any]) -> None:
        """Swap in a new dataset and drop every cached lookup."""
        self._dataset = dataset
        self.clear_cache()
        logger.info("Dataset reloaded (%d competitions)", len(dataset))

    def clear_cache(self) -> None:
        self._competition_cache.clear()
        self._team_cache.clear()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def resolve(self, identifier: str) -> Optional[str]:
        """Return the dataset key for competition *identifier*, or ``None``."""
        if not self.memoize:
            return resolve_competition_key(self._dataset, identifier)
        cached = self._competition_cache.get(identifier, _MISSING)
        if cached is _MISSING:
            cached = resolve_competition_key(self._dataset, identifier)
            self._competition_cache[identifier] = cached
        return cached

    def locate(self, identifier: str, team_key: str) -> Optional[Mapping]:
        """Return the team record for *team_key* at *identifier*, or ``None``."""
        if not self.memoize:
            return self._locate_uncached(identifier, team_key)
        cache_key = (identifier, team_key)
        cached = self._team_cache.get(cache_key, _MISSING)
        if cached is _MISSING:
            cached = self._locate_uncached(identifier, team_key)
            self._team_cache[cache_key] = cached
        return cached

    def _locate_uncached(self, identifier: str, team_key: str) -> Optional[Mapping]:
        key = self.resolve(identifier)
        if key is None:
            return None
        record_set = self._dataset[key]
        if not isinstance(record_set, Mapping):
            return None
        return locate_team(record_set, team_key)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def score(self, selection: TeamSelection, category: str) -> NormalizedScore:
        """Return *selection*'s normalized score in *category*.

        A competition or team that cannot be found scores zero.
        """
        if self.resolve(selection.competition) is None:
            logger.debug("Competition %r not found; zero-filling", selection.competition)
            return ZERO_SCORE
        record = self.locate(selection.competition, selection.team_key)
        if record is None:
            logger.debug(
                "Team %r not found in %r; zero-filling",
                selection.team_key, selection.competition,
            )
            return ZERO_SCORE
        return score_team(record, category, self.registry)

    def compare(
        self,
        selections: Sequence[TeamSelection],
        categories: Iterable[str] = DISPLAY_CATEGORIES,
    ) -> ComparisonTable:
        """Score every selection in every category.

        Parameters
        ----------
        selections:
            Teams to compare.  Tokens are used as keys and should be
            unique; a repeated token keeps its first position and the
            later duplicate is dropped.
        categories:
            Category names in output order.

        Returns
        -------
        ComparisonTable
        """
        categories = list(categories)
        unique: list[TeamSelection] = []
        seen: set[str] = set()
        for selection in selections:
            if selection.token in seen:
                logger.warning("Duplicate selection token %r ignored", selection.token)
                continue
            seen.add(selection.token)
            unique.append(selection)

        table = ComparisonTable(categories=categories, selections=unique)
        for category in categories:
            for selection in unique:
                table.scores[(category, selection.token)] = self.score(selection, category)
        return table


def compute_comparison(
    dataset: Mapping[str, Any],
    selections: Sequence[TeamSelection],
    categories: Iterable[str] = DISPLAY_CATEGORIES,
    registry: CategoryRegistry = DEFAULT_REGISTRY,
) -> ComparisonTable:
    """One-shot comparison without memoization."""
    return ScoreEngine(dataset, registry, memoize=False).compare(selections, categories)
