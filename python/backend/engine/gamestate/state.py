"""Holds the tile arrangement of a fifteen puzzle and applies moves."""

from __future__ import annotations

import logging
from dataclasses import replace

from backend.models.tile import Tile

logger = logging.getLogger(__name__)

SIZE = 4
TILE_COUNT = SIZE * SIZE


class OutOfRange(IndexError):
    """Raised for a grid position or tile id that is not on the board."""


class PuzzleState:
    """The 16 tiles in position order plus the position of the blank.

    Moves only transfer labels: the tile with id ``i`` always sits at
    position ``i - 1``, and whichever tile shows the empty label is the
    blank.
    """

    def __init__(self, blank_id: int = TILE_COUNT) -> None:
        self._tiles: list[Tile] = []
        self.blank_position: int = 0
        self.initialize(blank_id)

    # -- construction ---------------------------------------------------------

    def initialize(self, blank_id: int) -> None:
        """Reset to solved order with the tile numbered *blank_id* hidden."""
        if not 1 <= blank_id <= TILE_COUNT:
            raise ValueError(
                f"Blank id must be between 1 and {TILE_COUNT}, got {blank_id}."
            )
        self._tiles = [
            Tile(id=i, label="" if i == blank_id else str(i), position=i - 1)
            for i in range(1, TILE_COUNT + 1)
        ]
        self.blank_position = blank_id - 1

    # -- queries --------------------------------------------------------------

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    @property
    def blank_id(self) -> int:
        return self._tiles[self.blank_position].id

    def tile_at(self, position: int) -> Tile:
        if not 0 <= position < TILE_COUNT:
            raise OutOfRange(f"Position {position} is outside 0..{TILE_COUNT - 1}.")
        return self._tiles[position]

    def tile_by_id(self, tile_id: int) -> Tile:
        for tile in self._tiles:
            if tile.id == tile_id:
                return tile
        raise OutOfRange(f"No tile with id {tile_id}.")

    def find(self, label: str) -> Tile | None:
        """Return the tile currently showing *label*, if any."""
        for tile in self._tiles:
            if tile.label == label:
                return tile
        return None

    def rows(self) -> list[list[Tile]]:
        return [self._tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def labels(self) -> list[str]:
        return [tile.label for tile in self._tiles]

    def is_adjacent(self, tile_id: int) -> bool:
        """Check whether a tile shares an edge with the blank."""
        pos = self.tile_by_id(tile_id).position
        br, bc = divmod(self.blank_position, SIZE)
        tr, tc = divmod(pos, SIZE)
        return abs(tr - br) + abs(tc - bc) == 1

    # -- moves ----------------------------------------------------------------

    def apply_move(self, target_id: int) -> None:
        """Slide the label of tile *target_id* into the blank.

        Any tile on the board may be moved, adjacent to the blank or not.
        """
        target = self.tile_by_id(target_id)
        blank = self._tiles[self.blank_position]
        if target.position == blank.position:
            return

        self._tiles[blank.position] = replace(blank, label=target.label)
        self._tiles[target.position] = replace(target, label="")
        self.blank_position = target.position

        logger.debug(
            "moved tile %d into position %d; labels: %s",
            target.id,
            blank.position,
            " ".join(t.label or "_" for t in self._tiles),
        )
