"""Abstract interface for the rules engine collaborator.

The interaction layer depends on this ABC only; legality, check detection
and piece movement semantics all live behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessgui.core.enums import Color
    from chessgui.core.piece import Piece


class IRulesEngine(ABC):
    """Interface for a two-player chess rules engine."""

    @abstractmethod
    def get_piece(self, x: int, y: int) -> Piece | None:
        """Piece occupying cell ``(x, y)``, or ``None`` if empty."""

    @abstractmethod
    def player_to_move(self) -> Color:
        """Whose turn it currently is."""

    @abstractmethod
    def try_make_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """Apply a move if legal. Returns True if it was applied.

        On success the board and the side to move change; on failure
        nothing changes.
        """

    @abstractmethod
    def get_legal_moves(self, x: int, y: int) -> set[tuple[int, int]]:
        """Legal destination cells for the piece on ``(x, y)``.

        Empty when the cell is unoccupied or the piece cannot move.
        """

    @abstractmethod
    def position_key(self) -> Hashable:
        """Fingerprint of the current position.

        Two calls return equal keys iff nothing that affects move
        generation changed in between.
        """
