"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QFrame, QGraphicsView, QWidget

from chessgui.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene at its native size.

    Signals:
        move_made(BoardPosition, BoardPosition): Bubbled up from BoardScene.
    """

    move_made = pyqtSignal(object, object)

    def __init__(self, scene: BoardScene, parent: QWidget | None = None) -> None:
        self._scene = scene
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setFrameShape(QFrame.Shape.NoFrame)

        # Scene pixels are board pixels; the view must not rescale them.
        rect = self._scene.sceneRect()
        self.setFixedSize(int(rect.width()), int(rect.height()))

        # Bubble scene signal
        self._scene.move_made.connect(self.move_made.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene
