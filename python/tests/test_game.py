"""Gameplay session: select-then-capture, reset, load and hints."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models.board import Board
from backend.models.errors import BoardLoadError, BoardParseError
from backend.models.piece import Piece

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "data" / "puzzles"


@pytest.fixture
def game() -> GamePlay:
    # R . . N
    # . K . .
    # . . B .
    # P . . Q
    return GamePlay.from_file(PUZZLES_DIR / "chess-4x4.txt")


# -- selection ----------------------------------------------------------------


def test_select_empty_cell_is_rejected(game: GamePlay) -> None:
    assert game.select(1, 0) == "Invalid selection (1, 0)"
    assert game.state.selected is None


def test_select_then_capture(game: GamePlay) -> None:
    assert game.select(3, 3) == "Selected (3, 3)"
    assert game.state.selected == (3, 3)

    assert game.select(2, 2) == "Captured from (3, 3) to (2, 2)"
    assert game.board.get_cell(2, 2) is Piece.QUEEN
    assert game.board.get_cell(3, 3) is Piece.EMPTY
    assert game.state.moves == 1
    assert game.state.selected is None


def test_illegal_capture_keeps_board(game: GamePlay) -> None:
    before = game.board
    game.select(3, 0)
    assert game.select(0, 0) == "Can't capture from (3, 0) to (0, 0)"
    assert game.board == before
    assert game.state.moves == 0
    assert game.state.selected is None


def test_capture_onto_empty_cell_is_rejected(game: GamePlay) -> None:
    game.select(3, 0)
    assert game.select(2, 1) == "Can't capture from (3, 0) to (2, 1)"


def test_select_off_board_clears_selection(game: GamePlay) -> None:
    game.select(3, 3)
    assert game.select(9, 9) == "Invalid selection (9, 9)"
    assert game.state.selected is None


# -- reset --------------------------------------------------------------------


def test_reset_rereads_puzzle(game: GamePlay) -> None:
    start = game.board
    game.select(3, 3)
    game.select(2, 2)

    assert game.reset() == "Puzzle reset!"
    assert game.board == start
    assert game.state.moves == 0


def test_reset_without_file_restores_initial_board() -> None:
    start = Board.from_text("1 3\nR N P\n")
    game = GamePlay(start)
    game.select(0, 0)
    game.select(0, 1)
    assert game.board != start

    game.reset()
    assert game.board == start


def test_reset_with_missing_file_keeps_board(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.txt"
    shutil.copy(PUZZLES_DIR / "chess-1x2.txt", path)
    game = GamePlay.from_file(path)
    game.select(0, 0)
    game.select(0, 1)
    path.unlink()

    assert game.reset() == "Failed to load: puzzle.txt"
    assert game.board == Board.from_text("1 2\n. R\n")


# -- loading ------------------------------------------------------------------


def test_from_file_missing_raises(tmp_path: Path) -> None:
    with pytest.raises(BoardLoadError):
        GamePlay.from_file(tmp_path / "missing.txt")


def test_load_switches_puzzle(game: GamePlay) -> None:
    assert game.load(PUZZLES_DIR / "chess-1x2.txt") == "Loaded: chess-1x2.txt"
    assert (game.board.rows, game.board.cols) == (1, 2)
    assert game.source == PUZZLES_DIR / "chess-1x2.txt"
    assert game.state.moves == 0


def test_load_missing_file_keeps_current_puzzle(game: GamePlay, tmp_path: Path) -> None:
    before = game.board
    assert game.load(tmp_path / "missing.txt") == "Failed to load: missing.txt"
    assert game.board == before
    assert game.source == PUZZLES_DIR / "chess-4x4.txt"


def test_load_malformed_file_raises(game: GamePlay, tmp_path: Path) -> None:
    before = game.board
    bad = tmp_path / "bad.txt"
    bad.write_text("2 2\nR\n")
    with pytest.raises(BoardParseError):
        game.load(bad)
    assert game.board == before


# -- hints --------------------------------------------------------------------


def test_hint_plays_one_capture() -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-1x2.txt")
    assert game.hint() == "Next step!"
    assert game.board == Board.from_text("1 2\n. R\n")
    assert game.is_won
    assert game.hint() == "Already solved!"


def test_hints_solve_the_puzzle(game: GamePlay) -> None:
    for _ in range(5):
        assert game.hint() == "Next step!"
    assert game.is_won
    assert game.state.moves == 5


def test_hint_on_unsolvable_puzzle() -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-unsolvable.txt")
    before = game.board
    assert game.hint() == "No solution!"
    assert game.board == before


def test_hint_clears_selection(game: GamePlay) -> None:
    game.select(3, 3)
    game.hint()
    assert game.state.selected is None


def test_apply_path_without_solution() -> None:
    game = GamePlay(Board.from_text("1 2\nR P\n"))
    assert game.apply_path(None) == "No solution!"


# -- rendering ----------------------------------------------------------------


def test_render_adds_axis_numbers() -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-1x2.txt")
    assert game.render() == "   0 1\n  ----\n0| R P"


def test_render_pads_two_digit_rows() -> None:
    text = "11 1\n" + "\n".join(["."] * 10 + ["K"])
    game = GamePlay(Board.from_text(text))
    lines = game.render().splitlines()
    assert lines[0] == "    0"
    assert lines[2] == " 0| ."
    assert lines[-1] == "10| K"


# -- clock --------------------------------------------------------------------


class _Clock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_clock_stops_when_solved() -> None:
    clock = _Clock()
    board = Board.from_text("1 3\nR N P\n")
    state = GameState(board, clock=clock)

    clock.now = 105.0
    assert state.elapsed_time == 5.0

    board = board.make_move((0, 0), (0, 1))
    state.advance(board)
    clock.now = 107.0
    assert state.elapsed_time == 7.0

    clock.now = 110.0
    state.advance(board.make_move((0, 1), (0, 2)))
    assert state.is_solved
    clock.now = 200.0
    assert state.elapsed_time == 10.0


def test_clock_of_already_solved_board_does_not_run() -> None:
    clock = _Clock()
    state = GameState(Board.from_text("1 2\n. K\n"), clock=clock)
    clock.now = 150.0
    assert state.elapsed_time == 0.0
