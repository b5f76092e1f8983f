"""Board model for the capture-only chess puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backend.models.errors import BoardLoadError, BoardParseError
from backend.models.piece import Piece

Cell = tuple[int, int]

# Offsets are (row, col). Row 0 is the top of the board and pawns capture
# toward it.
_PAWN_STEPS: tuple[Cell, ...] = ((-1, -1), (-1, 1))
_KING_STEPS: tuple[Cell, ...] = _PAWN_STEPS + (
    (-1, 0), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1),
)
_KNIGHT_STEPS: tuple[Cell, ...] = (
    (-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1),
)
_BISHOP_RAYS: tuple[Cell, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_ROOK_RAYS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

_STEPS: dict[Piece, tuple[Cell, ...]] = {
    Piece.PAWN: _PAWN_STEPS,
    Piece.KING: _KING_STEPS,
    Piece.KNIGHT: _KNIGHT_STEPS,
}
_RAYS: dict[Piece, tuple[Cell, ...]] = {
    Piece.BISHOP: _BISHOP_RAYS,
    Piece.ROOK: _ROOK_RAYS,
    Piece.QUEEN: _ROOK_RAYS + _BISHOP_RAYS,
}


@dataclass(frozen=True)
class Board:
    """An immutable grid of pieces.

    Equality and hashing are structural over ``tiles``, so two boards with
    the same pieces in the same cells are interchangeable as search states.
    Every move returns a new board.
    """

    tiles: tuple[tuple[Piece, ...], ...]

    def __post_init__(self) -> None:
        tiles = tuple(tuple(Piece(p) for p in row) for row in self.tiles)
        if not tiles or not tiles[0]:
            raise ValueError("A board needs at least one row and one column.")
        width = len(tiles[0])
        for r, row in enumerate(tiles):
            if len(row) != width:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {width}."
                )
        object.__setattr__(self, "tiles", tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse a puzzle in the ``R C`` header + grid format.

        Example::

            Board.from_text("1 3\\nR N P\\n")
        """
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if not lines:
            raise BoardParseError("Puzzle text is empty.")

        header = lines[0].split()
        if len(header) != 2:
            raise BoardParseError(
                f"Expected 'ROWS COLS', got {lines[0]!r}.", line=1
            )
        try:
            rows, cols = int(header[0]), int(header[1])
        except ValueError:
            raise BoardParseError(
                f"Dimensions must be integers, got {lines[0]!r}.", line=1
            ) from None
        if rows < 1 or cols < 1:
            raise BoardParseError(
                f"Dimensions must be positive, got {rows}x{cols}.", line=1
            )

        body = lines[1:]
        if len(body) != rows:
            raise BoardParseError(
                f"Expected {rows} rows of pieces, found {len(body)}."
            )

        tiles: list[tuple[Piece, ...]] = []
        for lineno, line in enumerate(body, start=2):
            tokens = line.split()
            if len(tokens) != cols:
                raise BoardParseError(
                    f"Expected {cols} pieces, found {len(tokens)}.", line=lineno
                )
            row: list[Piece] = []
            for token in tokens:
                try:
                    row.append(Piece(token))
                except ValueError:
                    raise BoardParseError(
                        f"Unknown piece {token!r}.", line=lineno
                    ) from None
            tiles.append(tuple(row))
        return cls(tiles=tuple(tiles))

    @classmethod
    def from_file(cls, path: Path | str) -> Board:
        """Read and parse a puzzle file.

        Raises ``BoardLoadError`` if the file cannot be read and
        ``BoardParseError`` if its content is malformed.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            raise BoardParseError(f"{path.name} is not a text file.") from None
        except OSError as exc:
            raise BoardLoadError(path, exc.strerror or str(exc)) from exc
        return cls.from_text(text)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0])

    def get_cell(self, row: int, col: int) -> Piece:
        return self.tiles[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def occupied_cells(self) -> list[Cell]:
        """Cells holding a piece, in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self.tiles)
            for c, piece in enumerate(row)
            if not piece.is_empty
        ]

    @property
    def piece_count(self) -> int:
        return sum(not p.is_empty for row in self.tiles for p in row)

    def is_solution(self) -> bool:
        """A puzzle is solved when exactly one piece is left."""
        return self.piece_count == 1

    # -- move generation ------------------------------------------------------

    def is_valid_move(self, source: Cell, dest: Cell) -> bool:
        """Check whether the piece on *source* can capture on *dest*."""
        if source == dest:
            return False
        if not (self.in_bounds(*source) and self.in_bounds(*dest)):
            return False
        piece = self.get_cell(*source)
        if piece.is_empty or self.get_cell(*dest).is_empty:
            return False

        if piece in _STEPS:
            offset = (dest[0] - source[0], dest[1] - source[1])
            return offset in _STEPS[piece]
        # A slider reaches an occupied cell only if it is the first piece
        # along one of its rays.
        return any(
            self._first_blocker(source, ray) == dest for ray in _RAYS[piece]
        )

    def capture_targets(self, row: int, col: int) -> list[Cell]:
        """Every cell the piece on (row, col) could capture, in move order."""
        piece = self.get_cell(row, col)
        targets: list[Cell] = []
        for dr, dc in _STEPS.get(piece, ()):
            r, c = row + dr, col + dc
            if self.in_bounds(r, c) and not self.tiles[r][c].is_empty:
                targets.append((r, c))
        for ray in _RAYS.get(piece, ()):
            blocker = self._first_blocker((row, col), ray)
            if blocker is not None:
                targets.append(blocker)
        return targets

    def attempt_move(self, source: Cell, dest: Cell) -> Board | None:
        """Return the board after *source* captures *dest*, or ``None``
        if there is nothing on *dest* to capture."""
        if self.get_cell(*dest).is_empty:
            return None
        return self.make_move(source, dest)

    def make_move(self, source: Cell, dest: Cell) -> Board:
        """Move the piece on *source* to *dest* without any validation."""
        grid = [list(row) for row in self.tiles]
        (sr, sc), (dr, dc) = source, dest
        grid[dr][dc] = grid[sr][sc]
        grid[sr][sc] = Piece.EMPTY
        return Board(tiles=tuple(tuple(row) for row in grid))

    def neighbors(self) -> list[Board]:
        """All distinct boards one capture away.

        Pieces are visited in row-major order and each piece's captures in
        its fixed direction order; duplicates keep their first position.
        """
        found: dict[Board, None] = {}
        for source in self.occupied_cells():
            for dest in self.capture_targets(*source):
                board = self.attempt_move(source, dest)
                if board is not None:
                    found.setdefault(board)
        return list(found)

    # -- helpers --------------------------------------------------------------

    def _first_blocker(self, start: Cell, ray: Cell) -> Cell | None:
        """Walk from *start* along *ray* and return the first occupied cell."""
        (r, c), (dr, dc) = start, ray
        r, c = r + dr, c + dc
        while self.in_bounds(r, c):
            if not self.tiles[r][c].is_empty:
                return (r, c)
            r, c = r + dr, c + dc
        return None

    def __str__(self) -> str:
        return "\n".join(" ".join(p.value for p in row) for row in self.tiles)
