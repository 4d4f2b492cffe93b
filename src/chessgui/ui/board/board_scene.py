"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessgui.core.types import BoardPosition, all_cells
from chessgui.interaction.controller import (
    ClickResult,
    InteractionController,
    InteractionView,
)
from chessgui.ui.board.piece_item import PieceItem
from chessgui.ui.resources import load_piece_renderers
from chessgui.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class BoardScene(QGraphicsScene):
    """Renders the board, highlights, pieces and the end-of-game banner.

    Every left click is handed to the :class:`InteractionController`; the
    whole scene is then redrawn from a single :class:`InteractionView`
    snapshot, so what is drawn always matches one board state.

    Signals:
        move_made(BoardPosition, BoardPosition): a click completed a legal move.
        game_over(): the position became terminal.
    """

    move_made = pyqtSignal(object, object)
    game_over = pyqtSignal()

    BANNER_TEXT = "Checkmate!"

    def __init__(
        self,
        controller: InteractionController,
        *,
        theme: BoardTheme | None = None,
        show_legal_moves: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        # Fatal on missing assets: nothing below works without piece images.
        load_piece_renderers()

        self._controller = controller
        self._theme = theme if theme is not None else BoardTheme.default()
        self._show_legal_moves = show_legal_moves
        self._view: InteractionView | None = None

        # Visual layers
        self._square_items: dict[BoardPosition, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[BoardPosition, PieceItem] = {}
        self._banner_item: QGraphicsSimpleTextItem | None = None

        controller.events.on_move.append(
            lambda origin, target, _orientation: self.move_made.emit(origin, target)
        )
        controller.events.on_game_over.append(self.game_over.emit)

        side = controller.mapper.board_pixels
        self.setSceneRect(0, 0, side, side)
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def current_view(self) -> InteractionView | None:
        """The snapshot used for the last redraw."""
        return self._view

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-move highlights."""
        self._show_legal_moves = visible
        self.refresh()

    def click(self, x: float, y: float) -> ClickResult:
        """Run one input cycle at scene coordinates, then redraw."""
        result = self._controller.handle_click(x, y)
        _LOGGER.debug("Click (%.0f, %.0f) -> %s", x, y, result.name)
        if result not in (ClickResult.IGNORED, ClickResult.OUT_OF_BOUNDS):
            self.refresh()
        return result

    def refresh(self) -> None:
        """Redraw everything from a fresh controller snapshot."""
        view = self._controller.view()
        self._view = view
        self._draw_board(view)
        self._draw_highlights(view)
        self._sync_pieces(view)
        self._draw_banner(view)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        pos = event.scenePos()
        self.click(pos.x(), pos.y())
        event.accept()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_board(self, view: InteractionView) -> None:
        """Draw or redraw the squares for the current orientation."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        size = self._controller.mapper.board_size
        for cell in all_cells(size):
            # a1 is dark
            is_dark = (cell.x + cell.y) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = self._make_rect(cell, view, color)
            rect.setZValue(0)
            self._square_items[cell] = rect

    def _draw_highlights(self, view: InteractionView) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)

        selected = view.selected_cell
        if selected is None:
            return

        rect = self._make_rect(selected, view, self._theme.highlight_selected)
        rect.setZValue(0.8)
        self._highlight_items.append(rect)

        if not self._show_legal_moves:
            return
        for cell in view.legal_targets:
            dot = self._make_rect(cell, view, self._theme.highlight_legal)
            dot.setZValue(0.8)
            self._legal_dot_items.append(dot)

    def _sync_pieces(self, view: InteractionView) -> None:
        """Re-create all piece items from the engine's board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        mapper = self._controller.mapper
        for cell, piece in self._controller.pieces():
            item = PieceItem(piece, cell, mapper.square_size, self._theme)
            x, y = mapper.cell_to_screen(cell, view.orientation)
            item.setPos(x, y)
            self.addItem(item)
            self._piece_items[cell] = item

    def _draw_banner(self, view: InteractionView) -> None:
        if self._banner_item is not None:
            self.removeItem(self._banner_item)
            self._banner_item = None
        if not view.terminal:
            return

        mapper = self._controller.mapper
        font = QFont()
        font.setPixelSize(max(12, mapper.square_size * 100 // 96))
        font.setBold(True)

        banner = QGraphicsSimpleTextItem(self.BANNER_TEXT)
        banner.setFont(font)
        banner.setBrush(QBrush(self._theme.banner_text))
        bounds = banner.boundingRect()
        side = mapper.board_pixels
        banner.setPos((side - bounds.width()) / 2, (side - bounds.height()) / 2)
        banner.setZValue(5)
        self.addItem(banner)
        self._banner_item = banner

    # ── Helpers ──────────────────────────────────────────────────────────

    def _make_rect(
        self, cell: BoardPosition, view: InteractionView, color: QColor
    ) -> QGraphicsRectItem:
        """Create a filled square covering *cell*."""
        t = self._controller.mapper.square_size
        x, y = self._controller.mapper.cell_to_screen(cell, view.orientation)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        self.addItem(rect)
        return rect

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
