"""Core value types — cells, pieces, colors, orientation.

Quick start::

    from chessgui.core import BoardPosition, Color, Piece, PieceType

    cell = BoardPosition(4, 1)  # e2
    piece = Piece(Color.WHITE, PieceType.PAWN)
"""

from chessgui.core.enums import Color, Orientation, PieceType
from chessgui.core.piece import Piece
from chessgui.core.types import BOARD_SIZE, BoardPosition, all_cells

__all__ = [
    # Enums
    "Color",
    "Orientation",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "BoardPosition",
    "all_cells",
    # Domain objects
    "Piece",
]
