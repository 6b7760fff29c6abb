"""The two sides of a two-player board game."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """A side to move; white moves first."""

    WHITE = 0
    BLACK = 1

    def flip(self) -> "Side":
        """Return the opposing side."""
        return Side.BLACK if self is Side.WHITE else Side.WHITE