"""Errors raised while building a board from a puzzle file."""

from __future__ import annotations

from pathlib import Path


class BoardLoadError(OSError):
    """The puzzle file could not be opened or read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read puzzle file {path}: {reason}")
        self.path = path


class BoardParseError(ValueError):
    """The puzzle text does not follow the ``R C`` + grid format.

    ``line`` is the 1-based line number the problem was found on, or
    ``None`` when it concerns the text as a whole.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
