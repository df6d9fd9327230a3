"""Game session logic: resolves host input into puzzle moves."""

from __future__ import annotations

import logging

from backend.engine.gamestate import TILE_COUNT, PuzzleState

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single puzzle session for a host view.

    By default every tile may be moved into the blank. With ``strict`` set,
    only tiles sharing an edge with the blank are accepted.
    """

    def __init__(self, blank_id: int = TILE_COUNT, *, strict: bool = False) -> None:
        self.blank_id = blank_id
        self.strict = strict
        self.state = PuzzleState(blank_id)
        self.moves: int = 0

    # -- movement -------------------------------------------------------------

    def move_tile(self, tile_id: int) -> bool:
        """Move tile *tile_id* into the blank.

        Returns True if the move was applied and counted.
        """
        state = self.state
        if tile_id == state.blank_id:
            return False

        if self.strict and not state.is_adjacent(tile_id):
            logger.debug(
                "rejected tile %d: not adjacent to blank at %d",
                tile_id,
                state.blank_position,
            )
            return False

        state.apply_move(tile_id)
        self.moves += 1
        return True

    def move_at(self, position: int) -> bool:
        """Move the tile occupying grid *position* (e.g. after a click)."""
        return self.move_tile(self.state.tile_at(position).id)

    def move_label(self, label: str) -> bool:
        """Move the tile currently showing *label*."""
        tile = self.state.find(label)
        if tile is None or tile.is_blank:
            return False
        return self.move_tile(tile.id)

    # -- session --------------------------------------------------------------

    def restart(self) -> None:
        self.state.initialize(self.blank_id)
        self.moves = 0
        logger.info("restarted with tile %d blank", self.blank_id)
