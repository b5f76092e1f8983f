"""Text frontends: command dispatch, reset handling and key mapping."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.board import Board
from frontend.cli.input_handler import resolve
from frontend.cli.rich.app import _reset
from frontend.cli.vanilla.app import _dispatch

PUZZLES_DIR = Path(__file__).resolve().parent.parent.parent / "data" / "puzzles"


@pytest.fixture
def captured(tmp_path: Path) -> GamePlay:
    """A 1x2 session copied to a temp file, one capture in (board ``. R``)."""
    path = tmp_path / "puzzle.txt"
    shutil.copy(PUZZLES_DIR / "chess-1x2.txt", path)
    game = GamePlay.from_file(path)
    game.select(0, 0)
    game.select(0, 1)
    return game


# -- vanilla dispatch ---------------------------------------------------------


def test_dispatch_select_and_capture() -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-1x2.txt")
    assert _dispatch(game, ["s", "0", "0"]) == "Selected (0, 0)"
    assert _dispatch(game, ["select", "0", "1"]) == "Captured from (0, 0) to (0, 1)"
    assert game.is_won


@pytest.mark.parametrize(
    "words, expected",
    [
        (["s", "0"], "Usage: select r c"),
        (["s", "a", "b"], "Usage: select r c"),
        (["l"], "Usage: load filename"),
        (["x"], "Invalid Command"),
    ],
    ids=["select-short", "select-nan", "load-no-file", "unknown"],
)
def test_dispatch_bad_commands(words: list[str], expected: str) -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-1x2.txt")
    assert _dispatch(game, words) == expected


def test_dispatch_quit() -> None:
    game = GamePlay.from_file(PUZZLES_DIR / "chess-1x2.txt")
    assert _dispatch(game, ["q"]) is None


def test_dispatch_reset_rereads_file(captured: GamePlay) -> None:
    assert _dispatch(captured, ["r"]) == "Puzzle reset!"
    assert captured.board == Board.from_text("1 2\nR P\n")


def test_dispatch_reset_of_corrupted_file_keeps_board(captured: GamePlay) -> None:
    assert captured.source is not None
    captured.source.write_text("1 2\nR X\n")

    status = _dispatch(captured, ["r"])
    assert status is not None
    assert status.startswith("Failed to load: puzzle.txt")
    assert "line 2" in status
    assert captured.board == Board.from_text("1 2\n. R\n")
    assert captured.state.moves == 1


def test_dispatch_load_of_malformed_file_keeps_board(
    captured: GamePlay, tmp_path: Path
) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("2 2\nR\n")
    status = _dispatch(captured, ["l", str(bad)])
    assert status is not None
    assert status.startswith("Failed to load: bad.txt")
    assert captured.board == Board.from_text("1 2\n. R\n")


# -- rich reset ---------------------------------------------------------------


def test_rich_reset_of_corrupted_file_keeps_board(captured: GamePlay) -> None:
    assert captured.source is not None
    captured.source.write_text("1 2\nR X\n")

    status = _reset(captured)
    assert status.startswith("Failed to load: puzzle.txt")
    assert captured.board == Board.from_text("1 2\n. R\n")


def test_rich_reset_restores_start(captured: GamePlay) -> None:
    assert _reset(captured) == "Puzzle reset!"
    assert captured.state.moves == 0


# -- key mapping --------------------------------------------------------------


@pytest.mark.parametrize(
    "raw, action",
    [
        ("w", "up"),
        ("S", "down"),
        ("\x1b[C", "right"),
        ("\x1b[D", "left"),
        ("\x1b", "quit"),
        ("\x03", "quit"),
        (" ", "select"),
        ("\r", "select"),
        ("n", "hint"),
        ("v", "solve"),
        ("r", "reset"),
        ("z", ""),
        ("\x1b[Z", ""),
    ],
)
def test_resolve(raw: str, action: str) -> None:
    assert resolve(raw) == action
