"""Tests for InteractionController — the per-click decision cycle."""

from __future__ import annotations

import pytest
from fakes import FakeRulesEngine

from chessgui.core.enums import Color, Orientation, PieceType
from chessgui.core.piece import Piece
from chessgui.core.types import BoardPosition
from chessgui.engine.python_chess import PythonChessEngine
from chessgui.interaction.controller import ClickResult, InteractionController
from chessgui.interaction.selection import IDLE, Selected

SQ = 96


def _cell(name: str) -> BoardPosition:
    return BoardPosition(ord(name[0]) - ord("a"), int(name[1]) - 1)


def _click_cell(ctrl: InteractionController, name: str) -> ClickResult:
    """Click the middle of the named square in the current orientation."""
    px, py = ctrl.mapper.cell_to_screen(_cell(name), ctrl.orientation)
    return ctrl.handle_click(px + SQ / 2, py + SQ / 2)


@pytest.fixture
def ctrl() -> InteractionController:
    return InteractionController(PythonChessEngine())


class TestExampleScenarios:
    def test_select_own_piece(self, ctrl: InteractionController) -> None:
        assert ctrl.handle_click(480, 96) == ClickResult.SELECTED
        assert ctrl.selection == Selected(BoardPosition(5, 1))

    def test_click_selected_cell_again_deselects(
        self, ctrl: InteractionController
    ) -> None:
        ctrl.handle_click(480, 96)
        assert ctrl.handle_click(480, 96) == ClickResult.DESELECTED
        assert ctrl.selection == IDLE

    def test_two_step_advance_flips_board(self, ctrl: InteractionController) -> None:
        ctrl.handle_click(480, 96)
        assert ctrl.handle_click(480, 288) == ClickResult.MOVED
        assert ctrl.selection == IDLE
        assert ctrl.orientation == Orientation.FLIPPED
        assert ctrl.engine.get_piece(5, 3) == Piece(Color.WHITE, PieceType.PAWN)


class TestSelection:
    def test_empty_cell_is_no_change(self, ctrl: InteractionController) -> None:
        assert _click_cell(ctrl, "e4") == ClickResult.NO_CHANGE
        assert ctrl.selection == IDLE

    def test_opponent_piece_is_no_change(self, ctrl: InteractionController) -> None:
        assert _click_cell(ctrl, "e7") == ClickResult.NO_CHANGE
        assert ctrl.selection == IDLE

    def test_rejected_move_keeps_selection(self, ctrl: InteractionController) -> None:
        _click_cell(ctrl, "f2")
        assert _click_cell(ctrl, "f6") == ClickResult.REJECTED
        assert ctrl.selection == Selected(_cell("f2"))
        assert ctrl.orientation == Orientation.NORMAL

    def test_clicking_other_own_piece_is_a_rejected_attempt(
        self, ctrl: InteractionController
    ) -> None:
        _click_cell(ctrl, "f2")
        assert _click_cell(ctrl, "g2") == ClickResult.REJECTED
        assert ctrl.selection == Selected(_cell("f2"))

    def test_black_selects_after_flip(self, ctrl: InteractionController) -> None:
        _click_cell(ctrl, "f2")
        _click_cell(ctrl, "f4")
        # Flipped: rank 7 is now the second screen row from the top.
        assert ctrl.handle_click(4 * SQ + 10, SQ + 10) == ClickResult.SELECTED
        assert ctrl.selection == Selected(_cell("e7"))


class TestOrientation:
    def test_flips_once_per_accepted_move(self, ctrl: InteractionController) -> None:
        seen = []
        for origin, target in [("e2", "e4"), ("e7", "e5"), ("g1", "f3")]:
            _click_cell(ctrl, origin)
            _click_cell(ctrl, target)
            seen.append(ctrl.orientation)
        assert seen == [Orientation.FLIPPED, Orientation.NORMAL, Orientation.FLIPPED]

    def test_no_flip_on_noop_deselect_or_reject(
        self, ctrl: InteractionController
    ) -> None:
        _click_cell(ctrl, "e5")  # no-op
        _click_cell(ctrl, "e2")
        _click_cell(ctrl, "e2")  # deselect
        _click_cell(ctrl, "e2")
        _click_cell(ctrl, "e6")  # rejected
        assert ctrl.orientation == Orientation.NORMAL

    def test_initial_orientation_is_configurable(self) -> None:
        ctrl = InteractionController(
            PythonChessEngine(), orientation=Orientation.FLIPPED
        )
        # Flipped: rank 2 sits on the second row from the bottom.
        assert ctrl.handle_click(480, 6 * SQ + 1) == ClickResult.SELECTED
        assert ctrl.selection == Selected(BoardPosition(5, 1))


class TestBounds:
    def test_outside_board_ignored(self, ctrl: InteractionController) -> None:
        assert ctrl.handle_click(800, 10) == ClickResult.OUT_OF_BOUNDS
        assert ctrl.handle_click(10, 768) == ClickResult.OUT_OF_BOUNDS
        assert ctrl.selection == IDLE

    def test_outside_board_keeps_selection(self, ctrl: InteractionController) -> None:
        _click_cell(ctrl, "f2")
        assert ctrl.handle_click(10, 900) == ClickResult.OUT_OF_BOUNDS
        assert ctrl.selection == Selected(_cell("f2"))


class TestTerminal:
    def _stuck_engine(self) -> FakeRulesEngine:
        return FakeRulesEngine(
            {
                (0, 0): Piece(Color.WHITE, PieceType.KING),
                (7, 7): Piece(Color.BLACK, PieceType.KING),
            },
            accept=True,
        )

    def test_input_is_inert(self) -> None:
        engine = self._stuck_engine()
        ctrl = InteractionController(engine)
        assert ctrl.is_terminal()
        for px, py in [(10, 10), (700, 700), (300, 300), (5000, 5000)]:
            assert ctrl.handle_click(px, py) == ClickResult.IGNORED
        assert ctrl.selection == IDLE
        assert ctrl.orientation == Orientation.NORMAL
        assert engine.move_calls == []

    def test_fools_mate_played_by_clicks(self, ctrl: InteractionController) -> None:
        over: list[bool] = []
        ctrl.events.on_game_over.append(lambda: over.append(True))

        for origin, target in [("f2", "f3"), ("e7", "e5"), ("g2", "g4"), ("d8", "h4")]:
            assert _click_cell(ctrl, origin) == ClickResult.SELECTED
            assert _click_cell(ctrl, target) == ClickResult.MOVED

        assert ctrl.is_terminal()
        assert over == [True]
        assert ctrl.orientation == Orientation.NORMAL
        assert _click_cell(ctrl, "e2") == ClickResult.IGNORED
        assert over == [True]


class TestView:
    def test_idle_view(self, ctrl: InteractionController) -> None:
        view = ctrl.view()
        assert view.selection == IDLE
        assert view.selected_cell is None
        assert view.legal_targets == frozenset()
        assert view.orientation == Orientation.NORMAL
        assert not view.terminal
        assert view.player_to_move == Color.WHITE

    def test_selected_view_lists_legal_targets(
        self, ctrl: InteractionController
    ) -> None:
        _click_cell(ctrl, "f2")
        view = ctrl.view()
        assert view.selected_cell == BoardPosition(5, 1)
        assert view.legal_targets == {BoardPosition(5, 2), BoardPosition(5, 3)}

    def test_legal_targets_recomputed_on_every_query(self) -> None:
        engine = FakeRulesEngine(
            {(0, 0): Piece(Color.WHITE, PieceType.ROOK)},
            legal={(0, 0): {(0, 1)}},
        )
        ctrl = InteractionController(engine)
        ctrl.handle_click(10, 10)
        engine.legal_queries.clear()
        ctrl.legal_targets()
        ctrl.legal_targets()
        assert engine.legal_queries == [(0, 0), (0, 0)]

    def test_pieces_lists_every_occupied_cell(
        self, ctrl: InteractionController
    ) -> None:
        pieces = dict(ctrl.pieces())
        assert len(pieces) == 32
        assert pieces[BoardPosition(4, 7)] == Piece(Color.BLACK, PieceType.KING)


class TestEvents:
    def test_selection_events(self, ctrl: InteractionController) -> None:
        states = []
        ctrl.events.on_selection_changed.append(states.append)
        _click_cell(ctrl, "e4")  # no-op, no event
        _click_cell(ctrl, "e2")
        _click_cell(ctrl, "e2")
        assert states == [Selected(_cell("e2")), IDLE]

    def test_move_event(self, ctrl: InteractionController) -> None:
        moves = []
        ctrl.events.on_move.append(lambda o, t, orient: moves.append((o, t, orient)))
        _click_cell(ctrl, "e2")
        _click_cell(ctrl, "e4")
        assert moves == [
            (_cell("e2"), _cell("e4"), Orientation.FLIPPED)
        ]


class TestReset:
    def test_reset_restores_initial_state(self, ctrl: InteractionController) -> None:
        _click_cell(ctrl, "e2")
        _click_cell(ctrl, "e4")
        _click_cell(ctrl, "e7")
        fresh = PythonChessEngine()
        ctrl.reset(fresh)
        assert ctrl.engine is fresh
        assert ctrl.selection == IDLE
        assert ctrl.orientation == Orientation.NORMAL
        assert ctrl.engine.player_to_move() == Color.WHITE

    def test_reset_clears_oracle_cache(self, ctrl: InteractionController) -> None:
        ctrl.is_terminal()
        scans = ctrl.oracle.scans
        ctrl.reset()
        ctrl.is_terminal()
        assert ctrl.oracle.scans == scans + 1
