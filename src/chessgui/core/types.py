"""Board cell value type and coordinate helpers.

Cells are addressed as ``(x, y)``:
    x = file, 0–7 (a–h)
    y = rank, 0–7 (1–8), so y = 0 is White's back rank
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

BOARD_SIZE: Final = 8


@dataclass(frozen=True, slots=True)
class BoardPosition:
    """Immutable board cell coordinate. Identifies a square, not a piece."""

    x: int
    y: int

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        return 0 <= self.x < size and 0 <= self.y < size

    def __str__(self) -> str:
        """Square name, e.g. ``BoardPosition(4, 1)`` → ``'e2'``."""
        if not self.in_bounds():
            return f"({self.x}, {self.y})"
        return chr(ord("a") + self.x) + str(self.y + 1)


def all_cells(size: int = BOARD_SIZE) -> list[BoardPosition]:
    """Every cell of the board, rank by rank starting at y = 0."""
    return [BoardPosition(x, y) for y in range(size) for x in range(size)]
