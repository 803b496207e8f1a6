"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.phase import SessionPhase
from backend.models.tile import Tile


class GameState:
    """Holds both sequences, the score, and the current phase."""

    def __init__(self) -> None:
        self.phase: SessionPhase = SessionPhase.IDLE
        self.score: int = 0
        self._target: list[Tile] = []
        self._player: list[Tile] = []

    # -- sequences ------------------------------------------------------------

    @property
    def target(self) -> tuple[Tile, ...]:
        return tuple(self._target)

    @property
    def player(self) -> tuple[Tile, ...]:
        return tuple(self._player)

    @property
    def level(self) -> int:
        """The round number, which is always the target length.

        Starts at 1 with each game; it is 0 only while idle, before the first
        game has drawn a tile.
        """
        return len(self._target)

    def reset(self, first: Tile) -> None:
        self.score = 0
        self._target = [first]
        self._player = []

    def extend_target(self, tile: Tile) -> None:
        """Start a new round: one more tile to remember, fresh input."""
        self._target.append(tile)
        self._player.clear()

    def record_input(self, tile: Tile, points: int) -> None:
        if len(self._player) >= len(self._target):
            raise ValueError("Round already complete; no more input expected.")
        self._player.append(tile)
        self.score += points

    @property
    def next_position(self) -> int:
        return len(self._player)
