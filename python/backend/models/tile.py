"""Tile model for the fifteen puzzle."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """One cell of the puzzle.

    ``id`` is fixed at creation, ``label`` is what the cell currently shows
    (empty for the blank) and ``position`` is the row-major cell index.
    """

    id: int
    label: str
    position: int

    @property
    def is_blank(self) -> bool:
        return self.label == ""
