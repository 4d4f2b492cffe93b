"""Visual theme constants and QSS styles."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from chessgui.core.enums import Color


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_legal: QColor  # legal move targets
    white_piece: QColor  # tint for white silhouettes
    black_piece: QColor  # tint for black silhouettes
    banner_text: QColor  # end-of-game overlay

    def piece_tint(self, color: Color) -> QColor:
        return self.white_piece if color == Color.WHITE else self.black_piece

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 255, 102),  # white, 40%
            highlight_legal=QColor(255, 255, 0, 51),  # yellow, 20%
            white_piece=QColor(252, 216, 111),  # gold
            black_piece=QColor(126, 108, 55),  # bronze
            banner_text=QColor(255, 255, 255),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=QColor(255, 255, 255, 102),
            highlight_legal=QColor(255, 255, 0, 51),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(60, 60, 60),
            banner_text=QColor(255, 255, 255),
        )

    @classmethod
    def named(cls, name: str) -> BoardTheme:
        theme_map = {
            "Classic": cls.default,
            "Blue": cls.blue,
        }
        factory = theme_map.get(name)
        if factory is None:
            raise ValueError(f"Unknown board theme: {name!r}")
        return factory()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #000000;
}

QStatusBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}

QMenuBar::item:selected {
    background: #264f78;
}
"""
