"""Fixed application configuration consumed at construction time."""

from __future__ import annotations

from dataclasses import dataclass

from chessgui.core.enums import Orientation
from chessgui.core.types import BOARD_SIZE
from chessgui.interaction.oracle import ScanScope

BOARD_THEMES = ("Classic", "Blue")


@dataclass(frozen=True)
class GuiConfig:
    """All application settings.

    The board dimension is not configurable; the window is always exactly
    ``BOARD_SIZE`` squares wide and tall.
    """

    # Window
    square_size: int = 96
    window_title: str = "Chess"

    # Board
    board_theme: str = "Classic"
    start_flipped: bool = False
    show_legal_moves: bool = True
    start_fen: str | None = None

    # Terminal detection
    scan_scope: ScanScope = ScanScope.ALL_PIECES
    oracle_cache_size: int = 128

    def __post_init__(self) -> None:
        if self.square_size <= 0:
            raise ValueError(f"square_size must be positive, got {self.square_size}")
        if self.oracle_cache_size < 0:
            raise ValueError(
                f"oracle_cache_size must be >= 0, got {self.oracle_cache_size}"
            )
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")

    @property
    def window_width(self) -> int:
        return BOARD_SIZE * self.square_size

    @property
    def window_height(self) -> int:
        return BOARD_SIZE * self.square_size

    @property
    def initial_orientation(self) -> Orientation:
        return Orientation.FLIPPED if self.start_flipped else Orientation.NORMAL
