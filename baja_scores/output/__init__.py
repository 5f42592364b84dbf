"""Output formatting for terminal and markdown export."""

from .comparison import ComparisonTable
from .markdown import comparison_to_markdown, export_comparison
from .terminal import display_comparison, display_overview

__all__ = [
    "ComparisonTable",
    "comparison_to_markdown",
    "display_comparison",
    "display_overview",
    "export_comparison",
]
