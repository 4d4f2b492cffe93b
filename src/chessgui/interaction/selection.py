"""Click-driven selection state machine.

States::

    Idle ──click own piece──▶ Selected(origin)
    Selected(origin) ──click origin──▶ Idle
    Selected(origin) ──click elsewhere──▶ MoveAttempt(origin, target)
        accepted ──▶ Idle          (caller flips the orientation)
        rejected ──▶ Selected(origin)

All transitions are pure: the current state is passed in and the next
state is returned, nothing is mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from chessgui.core.enums import Color
from chessgui.core.piece import Piece
from chessgui.core.types import BoardPosition


@dataclass(frozen=True, slots=True)
class Idle:
    """No cell selected."""


@dataclass(frozen=True, slots=True)
class Selected:
    """Exactly one cell selected, holding a piece of the player to move."""

    origin: BoardPosition


SelectionState: TypeAlias = Idle | Selected

IDLE = Idle()

BoardLookup = Callable[[BoardPosition], Piece | None]


@dataclass(frozen=True, slots=True)
class MoveAttempt:
    """Request to the caller: try moving the piece on *origin* to *target*."""

    origin: BoardPosition
    target: BoardPosition


class SelectionStateMachine:
    """Static transition functions over :data:`SelectionState`."""

    @staticmethod
    def handle_click(
        state: SelectionState,
        clicked: BoardPosition,
        current_player: Color,
        board_lookup: BoardLookup,
    ) -> tuple[SelectionState, MoveAttempt | None]:
        """Decide the next state for a click on an in-bounds cell.

        When a :class:`MoveAttempt` is returned the state is left as
        ``Selected(origin)``; the caller reports the engine's verdict
        through :meth:`resolve`.
        """
        if isinstance(state, Selected):
            if clicked == state.origin:
                return IDLE, None
            return state, MoveAttempt(state.origin, clicked)

        piece = board_lookup(clicked)
        if piece is not None and piece.color == current_player:
            return Selected(clicked), None
        return IDLE, None

    @staticmethod
    def resolve(state: SelectionState, accepted: bool) -> SelectionState:
        """Next state once the engine accepted or rejected a move attempt.

        A rejected target is absorbed silently: the selection stays put.
        """
        if accepted:
            return IDLE
        return state
