"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from main import PUZZLES_DIR, app

runner = CliRunner()


def test_solve_prints_steps_from_the_start() -> None:
    result = runner.invoke(app, ["solve", str(PUZZLES_DIR / "chess-1x2.txt")])
    assert result.exit_code == 0
    out = result.stdout
    assert "Total configs: 2" in out
    assert "Unique configs: 2" in out
    assert out.index("Step 0:\nR P") < out.index("Step 1:\n. R")


def test_solve_finds_bundled_puzzle_by_name() -> None:
    result = runner.invoke(app, ["solve", "chess-4x4.txt"])
    assert result.exit_code == 0
    assert "Step 5:" in result.stdout


def test_solve_reports_no_solution() -> None:
    result = runner.invoke(app, ["solve", "chess-unsolvable.txt"])
    assert result.exit_code == 0
    assert "No solution" in result.stdout


def test_solve_missing_file_fails(tmp_path: Path) -> None:
    result = runner.invoke(app, ["solve", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_solve_malformed_file_fails(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("1 2\nR X\n")
    result = runner.invoke(app, ["solve", str(bad)])
    assert result.exit_code == 1
