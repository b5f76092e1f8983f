"""Vanilla terminal frontend: typed commands, no third-party dependencies.

Uses only stdlib (input, print, ANSI codes).  Commands mirror a classic
plain-text UI: hint, load, select, reset and quit.
"""

from __future__ import annotations

from pathlib import Path

from backend.engine.gameplay import GamePlay
from backend.models.errors import BoardParseError

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_HELP = (
    f"  {_C}h{_R}(int)              -- hint next move\n"
    f"  {_C}l{_R}(oad) filename     -- load new puzzle file\n"
    f"  {_C}s{_R}(elect) r c        -- select cell at r, c\n"
    f"  {_C}q{_R}(uit)              -- quit the game\n"
    f"  {_C}r{_R}(eset)             -- reset the current game"
)


def _colour(status: str) -> str:
    if status.startswith(("Captured", "Next step", "Already solved", "Loaded")):
        return f"{_G}{status}{_R}"
    if status.startswith(("Can't", "Invalid", "No solution", "Failed")):
        return f"{_Y}{status}{_R}"
    return f"{_C}{status}{_R}"


def _show(game: GamePlay, status: str) -> None:
    print(_colour(status))
    print(game.render())
    if game.is_won:
        print(f"{_G}★ Solved in {game.state.moves} captures! ★{_R}")


# -- command dispatch ---------------------------------------------------------


def _name(game: GamePlay) -> str:
    return game.source.name if game.source else "puzzle"


def _dispatch(game: GamePlay, words: list[str]) -> str | None:
    """Run one command.  Returns the status to show, or ``None`` to quit."""
    cmd = words[0]

    if cmd.startswith("q"):
        return None
    if cmd.startswith("l"):
        if len(words) < 2:
            return "Usage: load filename"
        try:
            return game.load(words[1])
        except BoardParseError as exc:
            return f"Failed to load: {Path(words[1]).name} ({exc})"
    if cmd.startswith("s"):
        try:
            row, col = int(words[1]), int(words[2])
        except (IndexError, ValueError):
            return "Usage: select r c"
        return game.select(row, col)
    if cmd.startswith("r"):
        try:
            return game.reset()
        except BoardParseError as exc:
            return f"Failed to load: {_name(game)} ({exc})"
    if cmd.startswith("h"):
        return game.hint()
    return "Invalid Command"


# -- public entry point -------------------------------------------------------


def run(puzzle: Path) -> None:
    """Launch the vanilla PTUI on *puzzle*."""
    game = GamePlay.from_file(puzzle)
    _show(game, f"Loaded: {puzzle.name}")
    print(_HELP)

    while True:
        try:
            line = input(f"{_DIM}>{_R} ")
        except EOFError:
            print()
            return
        words = line.split()
        if not words:
            continue

        status = _dispatch(game, words)
        if status is None:
            return
        if status == "Invalid Command" or status.startswith("Usage"):
            print(f"{_RED}{status}{_R}")
            continue
        _show(game, status)
