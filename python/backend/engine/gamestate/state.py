"""Tracks the mutable state of a puzzle in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from backend.models.board import Board, Cell


class GameState:
    """Holds the current board, capture counter, selection and elapsed time.

    The clock starts on construction and stops for good once a capture
    leaves a single piece on the board.
    """

    def __init__(
        self, board: Board, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.board = board
        self.moves: int = 0
        self.selected: Cell | None = None
        self._clock = clock
        self._started: float = clock()
        self._stopped: float | None = self._started if board.is_solution() else None

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        end = self._stopped if self._stopped is not None else self._clock()
        return end - self._started

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        """Replace the board with the one reached by a single capture."""
        self.board = board
        self.moves += 1
        self.selected = None
        if self._stopped is None and board.is_solution():
            self._stopped = self._clock()

    def clear_selection(self) -> None:
        self.selected = None

    @property
    def is_solved(self) -> bool:
        return self.board.is_solution()
