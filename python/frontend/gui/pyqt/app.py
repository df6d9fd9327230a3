"""PyQt6 GUI frontend.

A single window holding a custom-painted 4x4 board: each tile is a stroked
square with its number centred inside, and clicking a tile slides it into
the blank.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import TILE_COUNT
from frontend.gui.layout import DEFAULT_MARGIN, Rect, hit_test, tile_rects

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_PINK = "#f5c2e7"
_RED = "#f38ba8"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_HINT = "Click a tile to move it     R  restart     Esc  quit"


class _BoardView(QWidget):
    """Paints the board and turns mouse presses into moves."""

    moved = pyqtSignal()

    def __init__(self, game: GamePlay, margin: float = DEFAULT_MARGIN) -> None:
        super().__init__()
        self.game = game
        self._margin = margin
        self.setMinimumSize(320, 320)

    def _rects(self) -> list[Rect]:
        return tile_rects(self.width(), self.height(), self._margin)

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(_MANTLE))

        rects = self._rects()
        font = QFont("Helvetica")
        font.setBold(True)
        font.setPixelSize(max(8, int(rects[0].height * 0.45)))
        painter.setFont(font)

        for tile, r in zip(self.game.state.tiles, rects):
            box = QRectF(r.x, r.y, r.width, r.height)
            painter.setPen(QPen(QColor(_RED), 2))
            painter.drawRect(box)
            if not tile.is_blank:
                painter.setPen(QColor(_TEXT))
                painter.drawText(box, Qt.AlignmentFlag.AlignCenter, tile.label)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        point = event.position()
        pos = hit_test(self._rects(), point.x(), point.y())
        if pos is None:
            return
        if self.game.move_at(pos):
            self.update()
            self.moved.emit()


class _MainWindow(QMainWindow):
    """Window holding the move counter, the board and the controls hint."""

    def __init__(self, game: GamePlay, margin: float) -> None:
        super().__init__()
        self.game = game

        self.setWindowTitle("Fifteen Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(420, 500)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        title = QLabel("Fifteen Puzzle")
        title.setFont(QFont("Helvetica", 17, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        self._stats = QLabel()
        self._stats.setFont(QFont("Helvetica", 13))
        self._stats.setStyleSheet(f"color:{_PINK};")
        self._stats.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._stats)

        self._board = _BoardView(game, margin)
        self._board.moved.connect(self._sync)
        root.addWidget(self._board, stretch=1)

        hint = QLabel(_HINT)
        hint.setFont(QFont("Helvetica", 11))
        hint.setStyleSheet(f"color:{_OVERLAY0};")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self.setCentralWidget(page)
        self._sync()

    def _sync(self) -> None:
        mode = "   (strict)" if self.game.strict else ""
        self._stats.setText(f"Moves: {self.game.moves}{mode}")

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_R:
            self.game.restart()
            self._board.update()
            self._sync()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    blank: int = TILE_COUNT, strict: bool = False, margin: float = DEFAULT_MARGIN
) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(GamePlay(blank, strict=strict), margin)
    window.show()
    qapp.exec()
