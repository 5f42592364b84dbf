"""Normalized, comparable Baja SAE event scores across historical result sheets."""

from .analysis import NormalizedScore, ScoreEngine, compute_comparison, extract_raw_points, normalize
from .lookup import TeamSelection, locate_team, resolve_competition
from .registry import DEFAULT_REGISTRY, DISPLAY_CATEGORIES, CategoryDefinition, CategoryRegistry

__all__ = [
    "CategoryDefinition",
    "CategoryRegistry",
    "DEFAULT_REGISTRY",
    "DISPLAY_CATEGORIES",
    "NormalizedScore",
    "ScoreEngine",
    "TeamSelection",
    "compute_comparison",
    "extract_raw_points",
    "locate_team",
    "normalize",
    "resolve_competition",
]
