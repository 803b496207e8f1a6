"""Tile model for the memory game."""

from __future__ import annotations

from enum import IntEnum

PALETTE_SIZE = 4


class Tile(IntEnum):
    """One of the four selectable pads.

    Tiles are pure indices: they are never created or destroyed, only
    referenced by the sequences.
    """

    PRIMARY = 0
    SECONDARY = 1
    EMERALD = 2
    AMBER = 3

    @classmethod
    def parse(cls, value: object) -> Tile | None:
        """Return the tile for *value*, or ``None`` if it is not a tile index.

        Example::

            Tile.parse(2)    # Tile.EMERALD
            Tile.parse(7)    # None
            Tile.parse("1")  # None
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if not 0 <= value < PALETTE_SIZE:
            return None
        return cls(value)
