"""PieceItem — a tinted chess piece on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtWidgets import QGraphicsPixmapItem

from chessgui.core.piece import Piece
from chessgui.core.types import BoardPosition
from chessgui.ui.resources import piece_pixmap
from chessgui.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsPixmapItem):
    """A single chess piece on the board.

    Stores its logical *cell*; positioning is done by the scene.
    """

    def __init__(
        self, piece: Piece, cell: BoardPosition, tile_size: int, theme: BoardTheme
    ) -> None:
        super().__init__(
            piece_pixmap(piece.piece_type, tile_size, theme.piece_tint(piece.color))
        )
        self.piece = piece
        self.cell = cell
        self.setZValue(1)
