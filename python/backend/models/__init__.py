from backend.models.board import Board, Cell
from backend.models.errors import BoardLoadError, BoardParseError
from backend.models.piece import Piece

__all__ = ["Board", "BoardLoadError", "BoardParseError", "Cell", "Piece"]
