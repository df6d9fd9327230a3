from backend.models.tile import Tile

__all__ = ["Tile"]
