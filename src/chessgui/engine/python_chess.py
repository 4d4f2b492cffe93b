"""Rules engine backed by the python-chess library."""

from __future__ import annotations

import logging

import chess
import chess.polyglot

from chessgui.core.enums import Color, PieceType
from chessgui.core.piece import Piece
from chessgui.core.types import BOARD_SIZE
from chessgui.engine.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)

_PIECE_TYPES: dict[chess.PieceType, PieceType] = {
    chess.PAWN: PieceType.PAWN,
    chess.KNIGHT: PieceType.KNIGHT,
    chess.BISHOP: PieceType.BISHOP,
    chess.ROOK: PieceType.ROOK,
    chess.QUEEN: PieceType.QUEEN,
    chess.KING: PieceType.KING,
}


def _square(x: int, y: int) -> chess.Square:
    if not (0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE):
        raise ValueError(f"Cell outside the board: ({x}, {y})")
    return chess.square(x, y)


def _cell(square: chess.Square) -> tuple[int, int]:
    return chess.square_file(square), chess.square_rank(square)


class PythonChessEngine(IRulesEngine):
    """Adapts :class:`chess.Board` to :class:`IRulesEngine`.

    Cells map directly onto python-chess squares: ``x`` is the file and
    ``y`` the rank, so ``(0, 0)`` is a1.

    ``chess.Board.legal_moves`` only yields moves for the side to move,
    so pieces of the waiting side always report an empty destination set.

    Args:
        fen: Starting position. Defaults to the standard initial setup.
    """

    __slots__ = ("_board",)

    def __init__(self, fen: str | None = None) -> None:
        self._board = chess.Board(fen) if fen else chess.Board()

    @property
    def board(self) -> chess.Board:
        """A copy of the underlying board."""
        return self._board.copy()

    def fen(self) -> str:
        return self._board.fen()

    # ── IRulesEngine impl ────────────────────────────────────────────────

    def get_piece(self, x: int, y: int) -> Piece | None:
        piece = self._board.piece_at(_square(x, y))
        if piece is None:
            return None
        color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
        return Piece(color, _PIECE_TYPES[piece.piece_type])

    def player_to_move(self) -> Color:
        return Color.WHITE if self._board.turn == chess.WHITE else Color.BLACK

    def try_make_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        move = self._find_move(_square(from_x, from_y), _square(to_x, to_y))
        if move is None:
            return False
        self._board.push(move)
        _LOGGER.debug("Applied %s, %s to move", move.uci(), self.player_to_move())
        return True

    def get_legal_moves(self, x: int, y: int) -> set[tuple[int, int]]:
        origin = _square(x, y)
        return {
            _cell(move.to_square)
            for move in self._board.legal_moves
            if move.from_square == origin
        }

    def position_key(self) -> int:
        return chess.polyglot.zobrist_hash(self._board)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _find_move(self, origin: chess.Square, target: chess.Square) -> chess.Move | None:
        """Legal move from *origin* to *target*; promotions pick a queen."""
        candidates = [
            move
            for move in self._board.legal_moves
            if move.from_square == origin and move.to_square == target
        ]
        if not candidates:
            return None
        for move in candidates:
            if move.promotion == chess.QUEEN:
                return move
        return candidates[0]

    def __repr__(self) -> str:
        return f"PythonChessEngine({self._board.fen()!r})"
