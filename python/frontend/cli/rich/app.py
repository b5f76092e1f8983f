"""Rich terminal frontend: coloured board, cursor and status panel.

Uses the ``rich`` library for styled output while sharing the
single-keypress input handler and backend with the other frontends.
Move the cursor over a piece, select it, then select the piece to capture.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board, Cell
from backend.models.errors import BoardParseError
from frontend.cli.input_handler import get_key

console = Console()

# Unicode glyphs for the board; "." stays a dim dot.
_GLYPHS: dict[str, str] = {
    "P": "♟",
    "K": "♚",
    "N": "♞",
    "B": "♝",
    "R": "♜",
    "Q": "♛",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _status_markup(status: str) -> str:
    if status.startswith(("Captured", "Next step", "Already solved", "Solved")):
        return f"[green]{status}[/green]"
    if status.startswith(("Can't", "Invalid", "No solution", "Failed")):
        return f"[yellow]{status}[/yellow]"
    return f"[cyan]{status}[/cyan]"


# -- board rendering ----------------------------------------------------------


def _render_board(
    board: Board,
    cursor: Cell | None = None,
    selected: Cell | None = None,
) -> Table:
    """Return a Rich Table representing the chessboard."""
    table = Table(
        show_header=True,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        header_style="dim",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for c in range(board.cols):
        table.add_column(str(c), justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = [str(r)]
        for c, piece in enumerate(row):
            glyph = _GLYPHS.get(piece.value, "·")
            bg = "#45475a" if (r + c) % 2 else "#313244"
            if (r, c) == selected:
                bg = "#a6e3a1"
            elif (r, c) == cursor:
                bg = "#89b4fa"
            style = "dim" if piece.is_empty else "bold white"
            if (r, c) in (selected, cursor):
                style = "bold black"
            cells.append(f"[{style} on {bg}] {glyph} [/]")
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, cursor: Cell, status: str = "") -> None:
    console.clear()

    board = game.state.board
    board_table = _render_board(board, cursor, game.state.selected)

    stats = Text()
    stats.append("  Captures: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Pieces: ", style="dim")
    stats.append(str(board.piece_count), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    name = game.source.name if game.source else "puzzle"
    colour = "green" if game.is_won else "cyan"
    panel = Panel(
        Align.center(board_table),
        title=f"[bold {colour}]Capture Chess  {name}[/bold {colour}]",
        border_style="bold green" if game.is_won else "bright_blue",
        padding=(1, 2),
    )

    parts = [Align.center(stats)]
    if status:
        parts.append(Align.center(Text.from_markup(f"  {_status_markup(status)}")))
    if game.is_won:
        parts.append(
            Align.center(Text("\n  ★ SOLVED! ★\n", style="bold green"))
        )
    parts.append(Align.center(controls))

    console.print()
    console.print(Align.center(panel))
    console.print(Group(*parts))


# -- solver helpers -----------------------------------------------------------


def _auto_solve(game: GamePlay) -> str:
    """Run the solver and animate its captures.  Returns a status message."""
    solver = Solver()
    with console.status("[cyan]Searching…[/cyan]"):
        path = solver.solve(game.state.board)

    if path is None:
        return "No solution!"
    if len(path) == 1:
        return "Already solved!"

    steps = len(path) - 1
    for i in range(steps):
        # path[-1] is always the board currently on screen
        game.apply_path(path[: len(path) - i])
        console.clear()
        panel = Panel(
            Align.center(_render_board(game.state.board)),
            title=f"[bold cyan]Auto-Solve  {i + 1}/{steps}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        sys.stdout.flush()
        time.sleep(0.4)

    return (
        f"Solved in {steps} captures "
        f"({solver.total_configs} total, {solver.unique_configs} unique configs)"
    )


def _reset(game: GamePlay) -> str:
    """Reset the puzzle; a file that no longer parses keeps the board."""
    try:
        return game.reset()
    except BoardParseError as exc:
        name = game.source.name if game.source else "puzzle"
        return f"Failed to load: {name} ({exc})"


# -- game loop ----------------------------------------------------------------


def _play(game: GamePlay) -> None:
    cursor: Cell = (0, 0)
    status = f"Loaded: {game.source.name}" if game.source else ""

    moves = {
        "up": (-1, 0),
        "down": (1, 0),
        "left": (0, -1),
        "right": (0, 1),
    }

    while True:
        _draw(game, cursor, status)
        status = ""
        key = get_key()

        if key in moves:
            board = game.state.board
            dr, dc = moves[key]
            r, c = cursor[0] + dr, cursor[1] + dc
            if board.in_bounds(r, c):
                cursor = (r, c)
        elif key == "select":
            status = game.select(*cursor)
        elif key == "hint":
            with console.status("[cyan]Searching…[/cyan]"):
                status = game.hint()
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "reset":
            status = _reset(game)
            board = game.state.board
            if not board.in_bounds(*cursor):
                cursor = (0, 0)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(puzzle: Path) -> None:
    """Launch the Rich CLI on *puzzle*."""
    _play(GamePlay.from_file(puzzle))
