"""Interaction layer — click handling, coordinate mapping, terminal detection.

Quick start::

    from chessgui.engine import PythonChessEngine
    from chessgui.interaction import ClickResult, InteractionController

    ctrl = InteractionController(PythonChessEngine())
    assert ctrl.handle_click(480, 96) == ClickResult.SELECTED   # f2
    assert ctrl.handle_click(480, 288) == ClickResult.MOVED     # f2-f4
"""

from chessgui.interaction.controller import (
    ClickResult,
    InteractionController,
    InteractionEvents,
    InteractionView,
)
from chessgui.interaction.coords import CoordinateMapper, flip_row
from chessgui.interaction.oracle import CheckmateOracle, ScanScope, scan_for_terminal
from chessgui.interaction.selection import (
    IDLE,
    Idle,
    MoveAttempt,
    Selected,
    SelectionState,
    SelectionStateMachine,
)

__all__ = [
    # Selection
    "IDLE",
    "Idle",
    "MoveAttempt",
    "Selected",
    "SelectionState",
    "SelectionStateMachine",
    # Coordinates
    "CoordinateMapper",
    "flip_row",
    # Terminal detection
    "CheckmateOracle",
    "ScanScope",
    "scan_for_terminal",
    # Controller
    "ClickResult",
    "InteractionController",
    "InteractionEvents",
    "InteractionView",
]
