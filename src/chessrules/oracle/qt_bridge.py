"""Qt bridge to run best-move lookups in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.oracle.base import BestMoveOracle, OracleError, request_best_move
from chessrules.oracle.settings import MAX_DEPTH, MIN_DEPTH, OracleSettings
from chessrules.oracle.stockfish_online import StockfishOnlineOracle

_LOGGER = logging.getLogger(__name__)


class OracleWorker(QObject):
    """Thread-affine worker that asks the oracle for moves on demand.

    Move it to a ``QThread`` and drive :meth:`request_move` through a queued
    connection. Every request carries an id so stale answers can be dropped.
    """

    best_move_ready = pyqtSignal(int, object)
    lookup_cancelled = pyqtSignal(int)
    lookup_failed = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_oracle", "_depth")

    def __init__(
        self,
        oracle: BestMoveOracle | None = None,
        *,
        settings: OracleSettings | None = None,
    ) -> None:
        super().__init__()
        settings = settings if settings is not None else OracleSettings()
        self._oracle = oracle if oracle is not None else StockfishOnlineOracle(settings)
        self._depth = settings.depth
        self._cancel_event = threading.Event()

    @pyqtSlot(object, object, int)
    def request_move(
        self, board_obj: object, context_obj: object, request_id: int
    ) -> None:
        """Look up the best move for the given position and emit the result."""
        if not isinstance(board_obj, Board) or not isinstance(context_obj, GameContext):
            self.lookup_failed.emit(request_id, "Oracle received invalid position")
            return

        self._cancel_event.clear()
        try:
            move = request_best_move(self._oracle, board_obj, context_obj, self._depth)
        except OracleError as exc:
            _LOGGER.warning("Oracle request %d failed: %s", request_id, exc)
            self.lookup_failed.emit(request_id, str(exc))
            return
        except Exception as exc:
            _LOGGER.exception("Oracle request %d raised unexpectedly", request_id)
            self.lookup_failed.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.lookup_cancelled.emit(request_id)
            return

        self.best_move_ready.emit(request_id, move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Drop the answer of the lookup in flight."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, depth: int) -> None:
        """Update search depth (takes effect on the next lookup)."""
        if not (MIN_DEPTH <= depth <= MAX_DEPTH):
            raise ValueError(f"Oracle depth must be in [{MIN_DEPTH}, {MAX_DEPTH}]")
        self._depth = depth
