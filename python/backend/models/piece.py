"""Chess piece kinds used by the capture puzzle."""

from __future__ import annotations

from enum import StrEnum


class Piece(StrEnum):
    EMPTY = "."
    PAWN = "P"
    KING = "K"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"

    @property
    def is_empty(self) -> bool:
        return self is Piece.EMPTY
