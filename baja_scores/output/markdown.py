"""Markdown export for category comparisons.

Generates a Markdown document from a
:class:`~baja_scores.output.comparison.ComparisonTable`, suitable for
sharing via GitHub, Discord, or any platform that renders Markdown.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .comparison import ComparisonTable

logger = logging.getLogger(__name__)


def _escape(text: str) -> str:
    """Escape pipe characters so they do not break table cells."""
    return text.replace("|", "\\|")


def _cell(capped: float, overflow: float) -> str:
    if overflow > 0:
        return f"{capped:.1f}% (+{overflow:.1f})"
    return f"{capped:.1f}%"


def comparison_to_markdown(table: "ComparisonTable") -> str:
    """Render *table* as a Markdown document.

    Parameters
    ----------
    table:
        Engine output to render.

    Returns
    -------
    str
        Markdown text, ending in a newline.
    """
    lines: list[str] = []
    lines.append("# Category Performance Comparison")
    lines.append("")
    lines.append(f"_Generated {date.today().isoformat()}_")
    lines.append("")

    if table.is_empty():
        lines.append("No teams selected.")
        return "\n".join(lines) + "\n"

    # Team legend
    lines.append("## Teams")
    lines.append("")
    for i, selection in enumerate(table.selections, start=1):
        lines.append(
            f"{i}. **{_escape(selection.team_name)}** -- "
            f"{_escape(selection.school)} -- {_escape(selection.competition.strip())}"
        )
    lines.append("")

    # Score grid
    lines.append("## Scores (% of category maximum)")
    lines.append("")
    header = ["Category"] + [str(i) for i in range(1, len(table.selections) + 1)]
    lines.append("| " + " | ".join(header) + " |")
    lines.append("|" + "|".join(["---"] + ["---:"] * len(table.selections)) + "|")
    for category in table.categories:
        cells = [_escape(category)]
        for token in table.tokens:
            result = table.score(category, token)
            cells.append(_cell(result.capped, result.overflow))
        lines.append("| " + " | ".join(cells) + " |")
    lines.append("")

    overflow = table.overflowing()
    if overflow:
        names = {s.token: s.team_name for s in table.selections}
        lines.append("## Above maximum")
        lines.append("")
        for category, token, amount in overflow:
            lines.append(f"- {_escape(names[token])}, {_escape(category)}: +{amount:.1f}%")
        lines.append("")

    return "\n".join(lines)


def export_comparison(table: "ComparisonTable", path: Path | str) -> Path:
    """Write :func:`comparison_to_markdown` output to *path*.

    Parent directories are created as needed.

    Returns
    -------
    Path
        The path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(comparison_to_markdown(table), encoding="utf-8")
    logger.info("Exported comparison to %s", path)
    return path
