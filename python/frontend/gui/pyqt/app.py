"""PyQt6 GUI frontend: clickable chessboard with load, reset and hint.

Click a piece, then click the piece it should capture.  Hints are
searched on a worker thread so the window stays responsive on large
boards.
"""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt6.QtCore import Qt, QThread, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.errors import BoardParseError

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

# Light and dark squares of the board.
_LIGHT = "#f0d9b5"
_DARK = "#b58863"

_GLYPHS: dict[str, str] = {
    "P": "♟",
    "K": "♚",
    "N": "♞",
    "B": "♝",
    "R": "♜",
    "Q": "♛",
}

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
        f" QPushButton:disabled {{ background:{_MANTLE}; color:{_OVERLAY0}; }}"
    )
    return btn


# ═══════════════════════════════════════════════════════════════════════════
# Solver thread
# ═══════════════════════════════════════════════════════════════════════════


class _SolveThread(QThread):
    """Runs one search and reports the path back on the GUI thread."""

    solved = pyqtSignal(object)

    def __init__(self, board: Board, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._board = board

    def run(self) -> None:
        self.solved.emit(Solver().solve(self._board))


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.game = game
        self._worker: _SolveThread | None = None
        self._btns: list[list[QPushButton]] = []

        self.setWindowTitle("Capture Chess")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(420, 480)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(8)
        root.setContentsMargins(16, 12, 16, 12)
        self.setCentralWidget(page)

        # status
        self._status = QLabel()
        self._status.setFont(QFont("Helvetica", 14, QFont.Weight.Bold))
        self._status.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._status)

        # board
        self._frame = QFrame()
        self._frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        self._grid = QGridLayout(self._frame)
        self._grid.setSpacing(0)
        self._grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(self._frame, alignment=Qt.AlignmentFlag.AlignCenter)

        # actions
        hbox = QHBoxLayout()
        hbox.setSpacing(10)
        self.load_btn = _styled_btn("LOAD", min_w=100)
        self.reset_btn = _styled_btn(
            "RESET", bg=_RED, hover=_RED_H, fg=_BASE, min_w=100
        )
        self.hint_btn = _styled_btn(
            "HINT", bg=_BLUE, hover=_LAVENDER, fg=_BASE, min_w=100
        )
        self.load_btn.clicked.connect(self._on_load)
        self.reset_btn.clicked.connect(self._on_reset)
        self.hint_btn.clicked.connect(self._on_hint)
        for btn in (self.load_btn, self.reset_btn, self.hint_btn):
            hbox.addWidget(btn)
        root.addLayout(hbox)

        keys = QLabel("L  load     R  reset     H  hint     Esc  quit")
        keys.setFont(QFont("Helvetica", 11))
        keys.setStyleSheet(f"color:{_OVERLAY0};")
        keys.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(keys)

        name = game.source.name if game.source else "puzzle"
        self._rebuild_board()
        self._set_status(f"Loaded: {name}")

    # -- board ---

    def _rebuild_board(self) -> None:
        """Recreate the button grid; needed when the board size changes."""
        for row in self._btns:
            for b in row:
                self._grid.removeWidget(b)
                b.deleteLater()

        board = self.game.state.board
        tile_px = max(36, min(75, 480 // max(board.rows, board.cols)))
        self._btns = []
        for r in range(board.rows):
            row: list[QPushButton] = []
            for c in range(board.cols):
                b = QPushButton()
                b.setFixedSize(tile_px, tile_px)
                b.setFont(QFont("Helvetica", tile_px // 2))
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.clicked.connect(lambda _, rr=r, cc=c: self._click(rr, cc))
                self._grid.addWidget(b, r, c)
                row.append(b)
            self._btns.append(row)
        self._sync()

    def _sync(self) -> None:
        board = self.game.state.board
        selected = self.game.state.selected
        for r in range(board.rows):
            for c in range(board.cols):
                piece = board.get_cell(r, c)
                bg = _LIGHT if (r + c) % 2 == 0 else _DARK
                if (r, c) == selected:
                    bg = _GREEN
                b = self._btns[r][c]
                b.setText(_GLYPHS.get(piece.value, ""))
                b.setStyleSheet(
                    f"QPushButton{{background:{bg};color:#000;border:none;}}"
                    f"QPushButton:hover{{background:{_GREEN_H};}}"
                )

    def _set_status(self, msg: str) -> None:
        colour = _TEXT
        if msg.startswith(("Captured", "Next step", "Loaded")):
            colour = _GREEN
        elif msg.startswith(("Can't", "Invalid", "No solution", "Failed")):
            colour = _YELLOW
        if self.game.is_won:
            msg = f"{msg}   ★ Solved! ★"
            colour = _GREEN
        self._status.setText(msg)
        self._status.setStyleSheet(f"color:{colour};")

    # -- actions ---

    def _click(self, r: int, c: int) -> None:
        if self._worker is not None:
            return
        msg = self.game.select(r, c)
        self._sync()
        self._set_status(msg)

    def _on_load(self) -> None:
        if self._worker is not None:
            return
        start = str(self.game.source.parent) if self.game.source else "."
        filename, _ = QFileDialog.getOpenFileName(
            self, "Load puzzle", start, "Puzzle files (*.txt);;All files (*)"
        )
        if not filename:
            return
        try:
            msg = self.game.load(filename)
        except BoardParseError as exc:
            msg = f"Failed to load: {Path(filename).name} ({exc})"
        self._rebuild_board()
        self._set_status(msg)

    def _on_reset(self) -> None:
        if self._worker is not None:
            return
        try:
            msg = self.game.reset()
        except BoardParseError as exc:
            name = self.game.source.name if self.game.source else "puzzle"
            msg = f"Failed to load: {name} ({exc})"
        else:
            self._rebuild_board()
        self._set_status(msg)

    def _on_hint(self) -> None:
        if self._worker is not None:
            return
        self._set_busy(True)
        self._status.setText("Searching…")
        worker = _SolveThread(self.game.state.board, self)
        worker.solved.connect(self._on_solved)
        worker.finished.connect(worker.deleteLater)
        self._worker = worker
        worker.start()

    def _on_solved(self, path: list[Board] | None) -> None:
        self._worker = None
        self._set_busy(False)
        msg = self.game.apply_path(path)
        self._sync()
        self._set_status(msg)

    def _set_busy(self, busy: bool) -> None:
        for btn in (self.load_btn, self.reset_btn, self.hint_btn):
            btn.setEnabled(not busy)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_L:
            self._on_load()
        elif key == Qt.Key.Key_R:
            self._on_reset()
        elif key == Qt.Key.Key_H:
            self._on_hint()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(puzzle: Path) -> None:
    """Launch the PyQt6 GUI on *puzzle*."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(GamePlay.from_file(puzzle))
    window.show()
    qapp.exec()
