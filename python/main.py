#!/usr/bin/env python3
"""Capture Chess puzzle.

Usage::

    python main.py solve ../data/puzzles/chess-4x4.txt   # print the shortest solution
    python main.py play ../data/puzzles/chess-4x4.txt    # plain-text UI
    python main.py play -f rich ../data/puzzles/chess-4x4.txt
    python main.py -v play -f pyqt ../data/puzzles/chess-4x4.txt
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"
PUZZLES_DIR = DATA_DIR / "puzzles"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.board import Board  # noqa: E402
from backend.models.errors import BoardLoadError, BoardParseError  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pyqt = "pyqt"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def _resolve(puzzle: Path) -> Path:
    """Look in the bundled puzzles directory for bare file names."""
    if not puzzle.exists() and (PUZZLES_DIR / puzzle).exists():
        return PUZZLES_DIR / puzzle
    return puzzle


def _read_board(puzzle: Path) -> Board:
    try:
        return Board.from_file(puzzle)
    except (BoardLoadError, BoardParseError) as exc:
        print(f"Failed to load {puzzle}: {exc}", file=sys.stderr)
        raise typer.Exit(code=1) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log solver and gameplay details.",
    ),
) -> None:
    """Capture Chess: capture until a single piece is left."""
    _configure_logging(verbose)


@app.command()
def solve(
    puzzle: Path = typer.Argument(..., help="Puzzle file to solve."),
) -> None:
    """Print the shortest capture sequence for PUZZLE."""
    puzzle = _resolve(puzzle)
    board = _read_board(puzzle)
    print(f"File: {puzzle}")
    print(board)

    solver = Solver()
    path = solver.solve(board)
    print(f"Total configs: {solver.total_configs}")
    print(f"Unique configs: {solver.unique_configs}")

    if path is None:
        print("No solution")
        return
    for i, step in enumerate(reversed(path)):
        print(f"Step {i}:")
        print(step)


@app.command()
def play(
    puzzle: Path = typer.Argument(..., help="Puzzle file to play."),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend to launch.",
    ),
) -> None:
    """Play PUZZLE interactively."""
    puzzle = _resolve(puzzle)
    _read_board(puzzle)  # fail early with a readable message

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(puzzle=puzzle)


if __name__ == "__main__":
    app()
