"""Terminal display for category comparisons and competition overviews.

Uses ``colorama`` for cross-platform ANSI colour output and ``tabulate``
for neatly aligned tables.  All output goes to stdout via :func:`print`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from colorama import Fore, Style, init as colorama_init
from tabulate import tabulate

if TYPE_CHECKING:
    import pandas as pd

    from .comparison import ComparisonTable

# Initialise colorama once at import time (autoreset so every print
# statement starts from a clean style).
colorama_init(autoreset=True)

_SEPARATOR = "=" * 70

# Bar-height bands for the capped percentage.
_BAND_COLOURS: tuple[tuple[float, str], ...] = (
    (90.0, Fore.LIGHTGREEN_EX),
    (70.0, Fore.GREEN),
    (40.0, Fore.YELLOW),
    (0.0, Fore.RED),
)

OVERFLOW_MARKER = "▲"


def _band_colour(capped: float) -> str:
    for floor, colour in _BAND_COLOURS:
        if capped >= floor:
            return colour
    return Fore.RED


def format_cell(capped: float, overflow: float, colour: bool = True) -> str:
    """Format one score cell, e.g. ``"100.0% ▲ +6.7"``."""
    text = f"{capped:.1f}%"
    if colour:
        text = f"{_band_colour(capped)}{text}{Style.RESET_ALL}"
    if overflow > 0:
        marker = f"{OVERFLOW_MARKER} +{overflow:.1f}"
        if colour:
            marker = f"{Style.BRIGHT}{Fore.MAGENTA}{marker}{Style.RESET_ALL}"
        text = f"{text} {marker}"
    return text


def _print_header(title: str) -> None:
    print()
    print(f"{Style.BRIGHT}{Fore.WHITE}{_SEPARATOR}{Style.RESET_ALL}")
    print(f"{Style.BRIGHT}{Fore.WHITE}  {title}{Style.RESET_ALL}")
    print(f"{Style.BRIGHT}{Fore.WHITE}{_SEPARATOR}{Style.RESET_ALL}")
    print()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def display_comparison(table: "ComparisonTable", colour: bool = True) -> None:
    """Print a category-by-team comparison grid.

    One row per category, one column per selected team.  Scores above the
    category maximum show the capped value plus an overflow marker.

    Parameters
    ----------
    table:
        Engine output to render.
    colour:
        When *False*, print without ANSI escapes (useful for piping).
    """
    if table.is_empty():
        print(f"{Fore.YELLOW}No teams selected.{Style.RESET_ALL}")
        return

    _print_header("CATEGORY PERFORMANCE COMPARISON")

    # Legend: column number -> team.
    for i, selection in enumerate(table.selections, start=1):
        print(
            f"  [{i}] {Style.BRIGHT}{selection.team_name}{Style.RESET_ALL}"
            f" - {selection.school} - {selection.competition.strip()}"
        )
    print()

    rows = []
    for category in table.categories:
        row = [category]
        for token in table.tokens:
            result = table.score(category, token)
            row.append(format_cell(result.capped, result.overflow, colour=colour))
        rows.append(row)

    grid = tabulate(
        rows,
        headers=["Category"] + [f"[{i}]" for i in range(1, len(table.selections) + 1)],
        tablefmt="simple",
        stralign="left",
        numalign="right",
    )
    for line in grid.splitlines():
        print(f"  {line}")
    print()

    overflow = table.overflowing()
    if overflow:
        print(
            f"  {Fore.MAGENTA}{OVERFLOW_MARKER}{Style.RESET_ALL} "
            f"{len(overflow)} score(s) above the category maximum"
        )
        print()

    print(f"{Style.BRIGHT}{Fore.WHITE}{_SEPARATOR}{Style.RESET_ALL}")
    print()


def display_overview(
    frame: "pd.DataFrame",
    competition: str,
    highlight_school: Optional[str] = None,
) -> None:
    """Print the top-team leaderboard produced by
    :func:`~baja_scores.analysis.overview.top_teams`.

    Rows belonging to *highlight_school* are printed in bright cyan.
    """
    if frame.empty:
        print(f"{Fore.YELLOW}No teams found for {competition!r}.{Style.RESET_ALL}")
        return

    _print_header(f"TOP {len(frame)} TEAMS  --  {competition.strip()}")

    rows = []
    for rank, (_, row) in enumerate(frame.iterrows(), start=1):
        cells = [rank, row["team"], row["school"], f"{row['total']:.1f}"]
        if highlight_school and row["school"] == highlight_school:
            cells = [f"{Style.BRIGHT}{Fore.CYAN}{c}{Style.RESET_ALL}" for c in cells]
        rows.append(cells)

    table = tabulate(
        rows,
        headers=["#", "Team", "School", "Overall"],
        tablefmt="simple",
        disable_numparse=True,
        stralign="left",
        numalign="right",
    )
    for line in table.splitlines():
        print(f"    {line}")
    print()
    print(f"{Style.BRIGHT}{Fore.WHITE}{_SEPARATOR}{Style.RESET_ALL}")
    print()
