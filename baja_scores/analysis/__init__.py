"""Score extraction, normalization and comparison."""

from .extraction import coerce_number, extract_raw_points
from .overview import top_teams
from .pipeline import ScoreEngine, compute_comparison
from .scoring import NormalizedScore, normalize, score_team

__all__ = [
    "NormalizedScore",
    "ScoreEngine",
    "coerce_number",
    "compute_comparison",
    "extract_raw_points",
    "normalize",
    "score_team",
    "top_teams",
]
