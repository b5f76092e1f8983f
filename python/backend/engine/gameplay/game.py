"""Core gameplay logic: selection, captures, reset and hints.

Every action returns a short status message for the frontend to show;
the current board is read back from ``state``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.errors import BoardLoadError

log = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self, board: Board, source: Path | None = None) -> None:
        self.source = source
        self._initial = board
        self.state = GameState(board)

    @classmethod
    def from_file(cls, path: Path | str) -> GamePlay:
        """Start a session from a puzzle file.

        Unlike ``load``, failures are raised: there is no previous board
        to fall back on.
        """
        path = Path(path)
        return cls(Board.from_file(path), source=path)

    # -- puzzle files ---------------------------------------------------------

    def load(self, path: Path | str) -> str:
        """Switch to another puzzle file.

        An unreadable file keeps the current puzzle.  Malformed content
        raises ``BoardParseError``.
        """
        path = Path(path)
        try:
            board = Board.from_file(path)
        except BoardLoadError as exc:
            log.warning("%s", exc)
            return f"Failed to load: {path.name}"

        self.source = path
        self._start(board)
        log.info(
            "Loaded %s (%dx%d, %d pieces)",
            path, board.rows, board.cols, board.piece_count,
        )
        return f"Loaded: {path.name}"

    def reset(self) -> str:
        """Go back to the start of the puzzle, re-reading its file."""
        if self.source is None:
            board = self._initial
        else:
            try:
                board = Board.from_file(self.source)
            except BoardLoadError as exc:
                log.warning("%s", exc)
                return f"Failed to load: {self.source.name}"
        self._start(board)
        log.info("Puzzle reset")
        return "Puzzle reset!"

    # -- captures -------------------------------------------------------------

    def select(self, row: int, col: int) -> str:
        """Select a piece, or capture with the already selected one.

        The first call picks the capturing piece, the second picks its
        target.  Either way the selection is cleared after a capture
        attempt.
        """
        state = self.state
        board = state.board

        if not board.in_bounds(row, col):
            state.clear_selection()
            return f"Invalid selection ({row}, {col})"

        if state.selected is None:
            if board.get_cell(row, col).is_empty:
                return f"Invalid selection ({row}, {col})"
            state.selected = (row, col)
            return f"Selected ({row}, {col})"

        source = state.selected
        dest = (row, col)
        state.clear_selection()
        if not board.is_valid_move(source, dest):
            return f"Can't capture from {_fmt(source)} to {_fmt(dest)}"

        state.advance(board.make_move(source, dest))
        log.debug("Captured %s -> %s", source, dest)
        return f"Captured from {_fmt(source)} to {_fmt(dest)}"

    def hint(self) -> str:
        """Play the first move of a shortest solution."""
        return self.apply_path(Solver().solve(self.state.board))

    def apply_path(self, path: list[Board] | None) -> str:
        """Apply a solver result computed for the current board.

        Lets a frontend run the search elsewhere and hand the path back.
        """
        self.state.clear_selection()
        if path is None:
            return "No solution!"
        if len(path) == 1:
            return "Already solved!"
        self.state.advance(path[-2])
        log.debug("Hint applied, %d moves left", len(path) - 2)
        return "Next step!"

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    def render(self) -> str:
        """The board with row and column numbers, for text interfaces."""
        board = self.state.board
        row_w = len(str(board.rows - 1))
        cell_w = len(str(board.cols - 1))
        margin = " " * (row_w + 1)

        lines = [
            margin + "".join(f" {c:>{cell_w}}" for c in range(board.cols)),
            margin + "-" * ((cell_w + 1) * board.cols),
        ]
        for r, row in enumerate(board.tiles):
            cells = "".join(f" {p.value:>{cell_w}}" for p in row)
            lines.append(f"{r:>{row_w}}|{cells}")
        return "\n".join(lines)

    # -- helpers --------------------------------------------------------------

    def _start(self, board: Board) -> None:
        self._initial = board
        self.state = GameState(board)


def _fmt(cell: tuple[int, int]) -> str:
    return f"({cell[0]}, {cell[1]})"
