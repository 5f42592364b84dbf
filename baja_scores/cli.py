"""Command-line interface for the Baja results comparison tool.

Provides three subcommands:

- ``teams``    -- List every team appearance and its selection token.
- ``compare``  -- Compare selected teams category by category.
- ``overview`` -- Show the top teams at one competition.

Usage
-----
::

    python -m baja_scores teams --search "Cornell"
    python -m baja_scores compare "Midwest 2023:::Cornell University:::Cornell University - Big Red Racing"
    python -m baja_scores compare --team "Midwest 2023" "Cornell University" "Cornell University - Big Red Racing" --export cmp.md
    python -m baja_scores overview "Midwest 2023" --top 10 --school "Cornell University"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _load_dataset(args: argparse.Namespace):
    """Load the dataset named by ``--data`` or exit with an error."""
    from .data.loader import load_dataset

    try:
        return load_dataset(args.data)
    except FileNotFoundError:
        _fail(f"Dataset file not found: {args.data}")
    except ValueError as exc:
        _fail(f"Could not read dataset {args.data}: {exc}")


def _load_registry(args: argparse.Namespace):
    """Return the category registry from ``--categories`` or the default."""
    from .registry.categories import DEFAULT_REGISTRY, load_registry

    if not args.categories:
        return DEFAULT_REGISTRY
    path = Path(args.categories)
    if not path.is_file():
        _fail(f"Category file not found: {path}")
    try:
        return load_registry(path)
    except ValueError as exc:
        _fail(f"Invalid category file {path}: {exc}")


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------

def _handle_teams(args: argparse.Namespace) -> None:
    """List selectable team appearances."""
    from .lookup.selection import selection_options

    dataset = _load_dataset(args)
    options = selection_options(dataset)

    if args.search:
        needle = args.search.casefold()
        options = [o for o in options if needle in o.label.casefold()]

    if not options:
        print("No matches found.")
        return

    for option in options:
        print(option.label)
        print(f"    {option.token}")
    print(f"\n{len(options)} team appearance(s).")


def _handle_compare(args: argparse.Namespace) -> None:
    """Compare selected teams across categories."""
    from .analysis.pipeline import ScoreEngine
    from .lookup.selection import MAX_SELECTIONS, TeamSelection, parse_token
    from .output.terminal import display_comparison
    from .registry.categories import DISPLAY_CATEGORIES

    selections: list[TeamSelection] = []
    for token in args.tokens:
        selection = parse_token(token)
        if selection is None:
            _fail(
                f"Invalid team token {token!r}. "
                "Expected COMPETITION:::SCHOOL:::TEAM_KEY (see the 'teams' command)."
            )
        selections.append(selection)
    for competition, school, team_key in args.team or []:
        selections.append(TeamSelection.create(competition, school, team_key))

    if not selections:
        _fail("No teams given. Pass tokens or --team COMPETITION SCHOOL TEAM_KEY.")
    if len(selections) > MAX_SELECTIONS:
        _fail(f"At most {MAX_SELECTIONS} teams can be compared at once.")

    registry = _load_registry(args)
    categories = args.category or list(DISPLAY_CATEGORIES)
    for name in categories:
        if name not in registry:
            logger.warning("Unknown category %r will score 0 for every team", name)

    dataset = _load_dataset(args)
    engine = ScoreEngine(dataset, registry)

    for selection in selections:
        if engine.resolve(selection.competition) is None:
            logger.warning("Competition %r not found in dataset", selection.competition)
        elif engine.locate(selection.competition, selection.team_key) is None:
            logger.warning(
                "Team %r not found at %r", selection.team_key, selection.competition,
            )

    table = engine.compare(selections, categories)
    display_comparison(table, colour=not args.no_colour)

    if args.export:
        from .output.markdown import export_comparison

        written = export_comparison(table, Path(args.export))
        print(f"Exported comparison to {written}")


def _handle_overview(args: argparse.Namespace) -> None:
    """Show the top teams at one competition."""
    from .analysis.overview import top_teams
    from .lookup.competition import resolve_competition_key
    from .output.terminal import display_overview

    dataset = _load_dataset(args)
    key = resolve_competition_key(dataset, args.competition)
    if key is None:
        _fail(f"Competition not found: {args.competition!r}")

    frame = top_teams(dataset, key, limit=args.top)
    display_overview(frame, key, highlight_school=args.school)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="baja_scores",
        description="Compare Baja SAE team results across competitions.",
    )

    # Global flags
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Path to the results JSON (default: baja_scores/data/baja-data.json).",
    )
    parser.add_argument(
        "--categories",
        metavar="FILE",
        default=None,
        help="JSON file overriding the built-in category table.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ---- teams ----
    teams_parser = subparsers.add_parser(
        "teams",
        help="List team appearances and their selection tokens.",
    )
    teams_parser.add_argument(
        "--search",
        metavar="TEXT",
        help="Only show teams whose label contains TEXT (case-insensitive).",
    )
    teams_parser.set_defaults(func=_handle_teams)

    # ---- compare ----
    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare selected teams category by category.",
    )
    compare_parser.add_argument(
        "tokens",
        nargs="*",
        metavar="TOKEN",
        help="Selection token as printed by the 'teams' command.",
    )
    compare_parser.add_argument(
        "--team",
        nargs=3,
        action="append",
        metavar=("COMPETITION", "SCHOOL", "TEAM_KEY"),
        help="Select a team explicitly. May be repeated.",
    )
    compare_parser.add_argument(
        "--category",
        action="append",
        metavar="NAME",
        help="Category to include, in order. May be repeated (default: all six).",
    )
    compare_parser.add_argument(
        "--export",
        metavar="PATH",
        help="Export the comparison to a Markdown file.",
    )
    compare_parser.add_argument(
        "--no-colour",
        action="store_true",
        default=False,
        help="Disable ANSI colours in the score grid.",
    )
    compare_parser.set_defaults(func=_handle_compare)

    # ---- overview ----
    overview_parser = subparsers.add_parser(
        "overview",
        help="Show the top teams at one competition.",
    )
    overview_parser.add_argument(
        "competition",
        metavar="COMPETITION",
        help="Competition name (whitespace and case are forgiven).",
    )
    overview_parser.add_argument(
        "--top",
        type=int,
        default=10,
        metavar="N",
        help="Number of teams to show (default: 10).",
    )
    overview_parser.add_argument(
        "--school",
        metavar="NAME",
        help="Highlight rows for this school.",
    )
    overview_parser.set_defaults(func=_handle_overview)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    """Parse command-line arguments and dispatch to the appropriate handler.

    Parameters
    ----------
    argv:
        Argument list to parse.  Defaults to ``sys.argv[1:]`` when
        *None*.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s  %(name)-30s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )

    # Set default data path if not specified
    if args.data is None:
        from .data.loader import DEFAULT_DATA_PATH
        args.data = DEFAULT_DATA_PATH

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    args.func(args)
