"""Checks player input against the target sequence."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.phase import Verdict
from backend.models.tile import Tile


class InputValidator:
    """Stateless validator — all methods are static."""

    @staticmethod
    def submit(tile: Tile, position: int, target: Sequence[Tile]) -> Verdict:
        """Classify the tile supplied for *position* of *target*.

        A position outside the target can never match, so it is a mismatch.
        """
        if not 0 <= position < len(target) or target[position] != tile:
            return Verdict.MISMATCH
        if position == len(target) - 1:
            return Verdict.ROUND_COMPLETE
        return Verdict.CONTINUE

    @staticmethod
    def is_prefix(player: Sequence[Tile], target: Sequence[Tile]) -> bool:
        """Return True if *player* is a prefix of *target*."""
        return len(player) <= len(target) and all(
            p == t for p, t in zip(player, target)
        )
