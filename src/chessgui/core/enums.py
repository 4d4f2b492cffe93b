"""Core enumerations shared by the engine adapter and the UI."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Orientation(IntEnum):
    """Which board row is drawn at the top of the screen.

    ``NORMAL`` draws rank 1 on the top screen row, ``FLIPPED`` draws rank 8
    there.
    """

    NORMAL = 0
    FLIPPED = 1

    @property
    def is_flipped(self) -> bool:
        return self is Orientation.FLIPPED

    def toggled(self) -> Orientation:
        return Orientation(1 - self.value)
