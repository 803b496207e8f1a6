"""Generates the tiles that extend the target sequence."""

from __future__ import annotations

import random

from backend.models.tile import PALETTE_SIZE, Tile


class SequenceGenerator:
    """Draws uniformly random tiles.

    Draws are independent of history, so immediate repeats are allowed.
    Pass a seeded ``random.Random`` for reproducible games.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def next(self) -> Tile:
        return Tile(self.rng.randrange(PALETTE_SIZE))
