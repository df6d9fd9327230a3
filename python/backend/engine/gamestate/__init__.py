from backend.engine.gamestate.state import SIZE, TILE_COUNT, OutOfRange, PuzzleState

__all__ = ["SIZE", "TILE_COUNT", "OutOfRange", "PuzzleState"]
