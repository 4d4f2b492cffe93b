"""Terminal-position detection by exhaustive legal-move enumeration.

The rules engine exposes no game-over predicate, so the oracle asks it
for the destinations of every occupied cell and declares the position
terminal when none has any.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Hashable
from enum import IntEnum, auto

from chessgui.core.types import BOARD_SIZE
from chessgui.engine.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)


class ScanScope(IntEnum):
    """Which pieces the scan considers."""

    # Both colors. This is coarser than real checkmate/stalemate detection:
    # it stays non-terminal while *either* side has a move. Kept as the
    # default on purpose; engines that only generate moves for the side to
    # move (python-chess does) make it equivalent to SIDE_TO_MOVE.
    ALL_PIECES = auto()
    SIDE_TO_MOVE = auto()


class CheckmateOracle:
    """Memoizing terminal-state predicate.

    Results are cached per ``engine.position_key()`` in a bounded LRU, so
    polling an unchanged position on every click and redraw costs one
    fingerprint computation instead of a full board scan.

    Args:
        scope: Which pieces to scan, see :class:`ScanScope`.
        cache_size: Maximum number of cached fingerprints (0 disables).
        board_size: Board dimension.
    """

    __slots__ = ("_scope", "_cache", "_cache_size", "_board_size", "scans")

    def __init__(
        self,
        scope: ScanScope = ScanScope.ALL_PIECES,
        *,
        cache_size: int = 128,
        board_size: int = BOARD_SIZE,
    ) -> None:
        if cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {cache_size}")
        self._scope = scope
        self._cache: OrderedDict[Hashable, bool] = OrderedDict()
        self._cache_size = cache_size
        self._board_size = board_size
        self.scans = 0  # full scans actually performed

    @property
    def scope(self) -> ScanScope:
        return self._scope

    def is_terminal(self, engine: IRulesEngine) -> bool:
        """True when no scanned piece has a legal destination."""
        if self._cache_size == 0:
            return self._scan(engine)

        key = engine.position_key()
        cached = self._cache.get(key)
        if cached is not None:
            self._cache.move_to_end(key)
            return cached

        result = self._scan(engine)
        self._cache[key] = result
        if len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    def _scan(self, engine: IRulesEngine) -> bool:
        self.scans += 1
        return scan_for_terminal(engine, self._scope, self._board_size)


def scan_for_terminal(
    engine: IRulesEngine,
    scope: ScanScope = ScanScope.ALL_PIECES,
    board_size: int = BOARD_SIZE,
) -> bool:
    """Uncached full-board scan; short-circuits on the first movable piece."""
    mover = engine.player_to_move() if scope == ScanScope.SIDE_TO_MOVE else None
    for y in range(board_size):
        for x in range(board_size):
            piece = engine.get_piece(x, y)
            if piece is None:
                continue
            if mover is not None and piece.color != mover:
                continue
            if engine.get_legal_moves(x, y):
                return False
    _LOGGER.info("No legal moves left (scope=%s)", scope.name)
    return True
