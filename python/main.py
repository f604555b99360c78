#!/usr/bin/env python3
"""Nineteen Puzzle Solver.

Usage::

    python main.py                  # solve the default sample (test1)
    python main.py -b test4 -f rich # Rich terminal output
    python main.py --list           # list sample boards
    python main.py -v               # debug logging from the search engine
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "nineteen.frontend.cli.vanilla.app",
    Frontend.rich: "nineteen.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _print_boards(boards: dict) -> None:
    print("\n  === SAMPLE BOARDS ===")
    for board_id, state in boards.items():
        print(f"\n  --- {board_id} ---")
        print(state)
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board: str = typer.Option(
        "test1", "-b", "--board",
        help="Id of the sample board to solve.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    fixtures: Optional[Path] = typer.Option(
        None, "--fixtures",
        help="JSON file of sample boards (defaults to fixtures/boards.json).",
    ),
    list_boards: bool = typer.Option(
        False, "--list",
        help="Show the sample boards and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve a nineteen-puzzle sample board with A*."""
    from nineteen.models import MalformedStateError, load_boards

    _configure_logging(verbose)

    path = fixtures or FIXTURES_DIR / "boards.json"
    try:
        boards = load_boards(path)
    except (OSError, ValueError, KeyError) as exc:
        # MalformedStateError and JSON errors are ValueErrors.
        kind = "Malformed board" if isinstance(exc, MalformedStateError) else "Cannot load"
        typer.echo(f"{kind} in {path}: {exc}", err=True)
        raise typer.Exit(code=1)

    if list_boards:
        _print_boards(boards)
        return

    if board not in boards:
        typer.echo(
            f"Unknown board {board!r}; choose from {', '.join(boards)}.", err=True
        )
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, boards[board])


if __name__ == "__main__":
    app()
