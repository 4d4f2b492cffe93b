"""MainWindow — hosts the board view, status bar and game menu."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget

from chessgui.config import GuiConfig
from chessgui.core.types import BoardPosition
from chessgui.engine.python_chess import PythonChessEngine
from chessgui.interaction.controller import InteractionController
from chessgui.interaction.coords import CoordinateMapper
from chessgui.interaction.oracle import CheckmateOracle
from chessgui.ui.board.board_scene import BoardScene
from chessgui.ui.board.board_view import BoardView
from chessgui.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


def build_controller(config: GuiConfig) -> InteractionController:
    """Wire a controller for a fresh game according to *config*."""
    return InteractionController(
        PythonChessEngine(config.start_fen),
        mapper=CoordinateMapper(square_size=config.square_size),
        oracle=CheckmateOracle(
            config.scan_scope, cache_size=config.oracle_cache_size
        ),
        orientation=config.initial_orientation,
    )


class MainWindow(QMainWindow):
    """Top-level window with a fixed-size board."""

    def __init__(
        self, config: GuiConfig | None = None, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._config = config if config is not None else GuiConfig()
        self._controller = build_controller(self._config)

        self._board_scene = BoardScene(
            self._controller,
            theme=BoardTheme.named(self._config.board_theme),
            show_legal_moves=self._config.show_legal_moves,
        )
        self._board_view = BoardView(self._board_scene, self)
        self.setCentralWidget(self._board_view)

        self._board_view.move_made.connect(self._on_move_made)
        self._board_scene.game_over.connect(self._on_game_over)

        self._build_menu()
        self.setWindowTitle(self._config.window_title)
        self._update_status()
        self.adjustSize()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def board_scene(self) -> BoardScene:
        return self._board_scene

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current game and start from the configured position."""
        self._controller.reset(PythonChessEngine(self._config.start_fen))
        self._board_scene.refresh()
        self._update_status()
        _LOGGER.info("New game")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _build_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        game_menu = menu_bar.addMenu("&Game")
        assert game_menu is not None

        new_action = QAction("&New Game", self)
        new_action.setShortcut(QKeySequence.StandardKey.New)
        new_action.triggered.connect(self.new_game)
        game_menu.addAction(new_action)

        game_menu.addSeparator()

        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(quit_action)

    def _on_move_made(self, origin: BoardPosition, target: BoardPosition) -> None:
        self._update_status()

    def _on_game_over(self) -> None:
        self._update_status()

    def _update_status(self) -> None:
        status_bar = self.statusBar()
        if status_bar is None:
            return
        if self._controller.is_terminal():
            status_bar.showMessage(BoardScene.BANNER_TEXT)
            return
        side = self._controller.engine.player_to_move()
        status_bar.showMessage(f"{side.name.title()} to move")
