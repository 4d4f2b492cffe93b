"""Pixel ↔ board cell transform with vertical perspective flipping."""

from __future__ import annotations

from dataclasses import dataclass

from chessgui.core.enums import Orientation
from chessgui.core.types import BOARD_SIZE, BoardPosition


def flip_row(row: int, board_size: int = BOARD_SIZE) -> int:
    """Mirror a row index; applying it twice is the identity."""
    return board_size - 1 - row


@dataclass(frozen=True, slots=True)
class CoordinateMapper:
    """Maps pointer positions to cells and cells to their top-left pixel.

    Bounds are not enforced here: :meth:`screen_to_cell` happily returns
    cells like ``(8, -1)`` and callers must check :meth:`contains` before
    treating the result as a board reference.
    """

    square_size: int = 96
    board_size: int = BOARD_SIZE

    def __post_init__(self) -> None:
        if self.square_size <= 0:
            raise ValueError(f"square_size must be positive, got {self.square_size}")
        if self.board_size <= 0:
            raise ValueError(f"board_size must be positive, got {self.board_size}")

    @property
    def board_pixels(self) -> int:
        return self.square_size * self.board_size

    def screen_to_cell(
        self, px: float, py: float, orientation: Orientation
    ) -> BoardPosition:
        # int() truncates toward zero, so (-10, 5) lands on column 0.
        col = int(px / self.square_size)
        row = int(py / self.square_size)
        if orientation.is_flipped:
            row = flip_row(row, self.board_size)
        return BoardPosition(col, row)

    def cell_to_screen(
        self, cell: BoardPosition, orientation: Orientation
    ) -> tuple[int, int]:
        row = flip_row(cell.y, self.board_size) if orientation.is_flipped else cell.y
        return cell.x * self.square_size, row * self.square_size

    def contains(self, cell: BoardPosition) -> bool:
        return cell.in_bounds(self.board_size)
