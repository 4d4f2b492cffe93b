"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgui.core.enums import Color, PieceType


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType
