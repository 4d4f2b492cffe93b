"""InteractionController — turns pointer clicks into selections and moves.

Coordinates: CoordinateMapper, SelectionStateMachine, CheckmateOracle and
the rules engine. Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum, auto

from chessgui.core.enums import Color, Orientation
from chessgui.core.piece import Piece
from chessgui.core.types import BoardPosition
from chessgui.engine.interfaces import IRulesEngine
from chessgui.interaction.coords import CoordinateMapper
from chessgui.interaction.oracle import CheckmateOracle
from chessgui.interaction.selection import (
    IDLE,
    MoveAttempt,
    Selected,
    SelectionState,
    SelectionStateMachine,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[SelectionState], None]
MoveCallback = Callable[[BoardPosition, BoardPosition, Orientation], None]
GameOverCallback = Callable[[], None]


@dataclass
class InteractionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class ClickResult(IntEnum):
    """What a single click did."""

    IGNORED = auto()  # game is over, input is inert
    OUT_OF_BOUNDS = auto()
    NO_CHANGE = auto()  # empty or opponent cell with nothing selected
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    REJECTED = auto()  # engine refused the move, selection kept


@dataclass(frozen=True, slots=True)
class InteractionView:
    """Render-facing snapshot, all fields taken from the same board state."""

    selection: SelectionState
    legal_targets: frozenset[BoardPosition]
    orientation: Orientation
    terminal: bool
    player_to_move: Color

    @property
    def selected_cell(self) -> BoardPosition | None:
        if isinstance(self.selection, Selected):
            return self.selection.origin
        return None


# ── Controller ───────────────────────────────────────────────────────────────


class InteractionController:
    """Owns the interaction state and runs one decision cycle per click.

    Thread-safety: designed to be driven from a single thread (the Qt main
    thread); each click runs to completion before the next redraw.
    """

    __slots__ = (
        "_engine",
        "_mapper",
        "_oracle",
        "_selection",
        "_orientation",
        "_initial_orientation",
        "_game_over_notified",
        "events",
    )

    def __init__(
        self,
        engine: IRulesEngine,
        *,
        mapper: CoordinateMapper | None = None,
        oracle: CheckmateOracle | None = None,
        orientation: Orientation = Orientation.NORMAL,
    ) -> None:
        self._engine = engine
        self._mapper = mapper if mapper is not None else CoordinateMapper()
        self._oracle = oracle if oracle is not None else CheckmateOracle()
        self._selection: SelectionState = IDLE
        self._orientation = orientation
        self._initial_orientation = orientation
        self._game_over_notified = False
        self.events = InteractionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def engine(self) -> IRulesEngine:
        return self._engine

    @property
    def mapper(self) -> CoordinateMapper:
        return self._mapper

    @property
    def oracle(self) -> CheckmateOracle:
        return self._oracle

    @property
    def selection(self) -> SelectionState:
        return self._selection

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def is_terminal(self) -> bool:
        return self._oracle.is_terminal(self._engine)

    # ── Input ────────────────────────────────────────────────────────────

    def handle_click(self, px: float, py: float) -> ClickResult:
        """Process one pointer press at pixel ``(px, py)``."""
        if self.is_terminal():
            return ClickResult.IGNORED

        cell = self._mapper.screen_to_cell(px, py, self._orientation)
        if not self._mapper.contains(cell):
            _LOGGER.debug("Click at (%s, %s) is off the board", px, py)
            return ClickResult.OUT_OF_BOUNDS

        return self._handle_cell(cell)

    def _handle_cell(self, cell: BoardPosition) -> ClickResult:
        previous = self._selection
        state, attempt = SelectionStateMachine.handle_click(
            previous,
            cell,
            self._engine.player_to_move(),
            self.piece_at,
        )

        if attempt is not None:
            return self._attempt_move(state, attempt)

        self._set_selection(state)
        if isinstance(state, Selected):
            return ClickResult.SELECTED
        if isinstance(previous, Selected):
            return ClickResult.DESELECTED
        return ClickResult.NO_CHANGE

    def _attempt_move(self, state: SelectionState, attempt: MoveAttempt) -> ClickResult:
        origin, target = attempt.origin, attempt.target
        accepted = self._engine.try_make_move(origin.x, origin.y, target.x, target.y)
        self._set_selection(SelectionStateMachine.resolve(state, accepted))
        if not accepted:
            _LOGGER.debug("Rejected move %s-%s", origin, target)
            return ClickResult.REJECTED

        self._orientation = self._orientation.toggled()
        _LOGGER.info("Move %s-%s", origin, target)
        self._emit_move(origin, target)
        if self.is_terminal():
            self._emit_game_over()
        return ClickResult.MOVED

    # ── Render-facing queries ────────────────────────────────────────────

    def piece_at(self, cell: BoardPosition) -> Piece | None:
        return self._engine.get_piece(cell.x, cell.y)

    def pieces(self) -> Iterator[tuple[BoardPosition, Piece]]:
        """Yield every occupied cell with its piece."""
        size = self._mapper.board_size
        for y in range(size):
            for x in range(size):
                piece = self._engine.get_piece(x, y)
                if piece is not None:
                    yield BoardPosition(x, y), piece

    def legal_targets(self) -> frozenset[BoardPosition]:
        """Fresh legal destinations for the selected cell (empty if none)."""
        if not isinstance(self._selection, Selected):
            return frozenset()
        origin = self._selection.origin
        return frozenset(
            BoardPosition(x, y) for x, y in self._engine.get_legal_moves(origin.x, origin.y)
        )

    def view(self) -> InteractionView:
        return InteractionView(
            selection=self._selection,
            legal_targets=self.legal_targets(),
            orientation=self._orientation,
            terminal=self.is_terminal(),
            player_to_move=self._engine.player_to_move(),
        )

    # ── Lifecycle ────────────────────────────────────────────────────────

    def reset(self, engine: IRulesEngine | None = None) -> None:
        """Start over, optionally with a fresh engine."""
        if engine is not None:
            self._engine = engine
        self._oracle.clear_cache()
        self._orientation = self._initial_orientation
        self._game_over_notified = False
        self._set_selection(IDLE)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_selection(self, state: SelectionState) -> None:
        if state == self._selection:
            return
        self._selection = state
        for cb in self.events.on_selection_changed:
            cb(state)

    def _emit_move(self, origin: BoardPosition, target: BoardPosition) -> None:
        for cb in self.events.on_move:
            cb(origin, target, self._orientation)

    def _emit_game_over(self) -> None:
        if self._game_over_notified:
            return
        self._game_over_notified = True
        for cb in self.events.on_game_over:
            cb()
