"""Square-grid geometry shared by GUI frontends."""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.gamestate import SIZE

DEFAULT_MARGIN = 20.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        """Half-open test, so neighbouring tiles never share a point."""
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )


def tile_rects(
    width: float, height: float, margin: float = DEFAULT_MARGIN
) -> list[Rect]:
    """Return one rectangle per grid position, row 0 at the top.

    The board is the largest square that fits inside the view once
    *margin* is taken off every side.
    """
    side = max(0.0, min(width, height) - 2 * margin)
    unit = side / SIZE
    rects: list[Rect] = []
    for pos in range(SIZE * SIZE):
        row, col = divmod(pos, SIZE)
        rects.append(Rect(margin + col * unit, margin + row * unit, unit, unit))
    return rects


def hit_test(rects: list[Rect], x: float, y: float) -> int | None:
    """Return the position whose rectangle contains (x, y), or None."""
    for pos, rect in enumerate(rects):
        if rect.contains(x, y):
            return pos
    return None
