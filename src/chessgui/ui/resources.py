"""Piece images: SVG silhouettes tinted per side."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QColor, QImage, QPainter, QPixmap
from PyQt6.QtSvg import QSvgRenderer

from chessgui.core.enums import PieceType

_LOGGER = logging.getLogger(__name__)

_BUNDLED_PIECES_DIR = Path(__file__).resolve().parents[1] / "assets" / "pieces"

_PIECE_NAMES: dict[PieceType, str] = {
    PieceType.PAWN: "pawn",
    PieceType.KNIGHT: "knight",
    PieceType.BISHOP: "bishop",
    PieceType.ROOK: "rook",
    PieceType.QUEEN: "queen",
    PieceType.KING: "king",
}

# One renderer per piece type; both sides share it and differ by tint.
_renderers: dict[PieceType, QSvgRenderer] = {}


def pieces_dir() -> Path:
    """Directory holding the piece SVGs (``CHESSGUI_PIECES_DIR`` overrides)."""
    override = os.environ.get("CHESSGUI_PIECES_DIR")
    if override:
        return Path(override)
    return _BUNDLED_PIECES_DIR


def load_piece_renderers(directory: Path | None = None) -> None:
    """Load every piece SVG up front.

    Raises:
        FileNotFoundError: an SVG is missing or invalid. The application
            cannot start without its piece images.
    """
    directory = directory if directory is not None else pieces_dir()
    loaded: dict[PieceType, QSvgRenderer] = {}
    for piece_type, name in _PIECE_NAMES.items():
        path = directory / f"{name}.svg"
        renderer = QSvgRenderer(str(path))
        if not renderer.isValid():
            raise FileNotFoundError(f"SVG asset not found or invalid: {path}")
        loaded[piece_type] = renderer

    _renderers.clear()
    _renderers.update(loaded)
    _tinted_pixmap.cache_clear()
    _LOGGER.debug("Loaded %d piece images from %s", len(loaded), directory)


def piece_renderer(piece_type: PieceType) -> QSvgRenderer:
    """Return the cached SVG renderer for *piece_type*, loading on first use."""
    if not _renderers:
        load_piece_renderers()
    return _renderers[piece_type]


def piece_pixmap(piece_type: PieceType, size: int, tint: QColor) -> QPixmap:
    """Render a piece as a *size* × *size* pixmap multiplied by *tint*."""
    return _tinted_pixmap(piece_type, size, tint.rgba())


@lru_cache(maxsize=128)
def _tinted_pixmap(piece_type: PieceType, size: int, rgba: int) -> QPixmap:
    renderer = piece_renderer(piece_type)

    image = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

    # Slight padding so pieces don't touch square edges
    margin = int(size * 0.06)
    target = QRectF(margin, margin, size - 2 * margin, size - 2 * margin)
    renderer.render(painter, target)

    # Tint, then cut the tint back to the silhouette's alpha.
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Multiply)
    painter.fillRect(image.rect(), QColor.fromRgba(rgba))
    painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_DestinationIn)
    renderer.render(painter, target)

    painter.end()
    return QPixmap.fromImage(image)
