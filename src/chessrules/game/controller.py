"""GameController: headless owner of one game's board and context.

Validates and applies moves, holds a pawn promotion until the piece is
chosen, keeps the status line and, in computer mode, applies the moves
suggested by a best-move oracle for black.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import IntEnum, auto

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.legality import is_legal
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.rules import game_status, needs_pawn_promotion
from chessrules.core.transition import annotate_move, play
from chessrules.core.types import Square, is_valid_square
from chessrules.oracle.base import BestMoveOracle, OracleError, request_best_move
from chessrules.oracle.settings import OracleSettings

_LOGGER = logging.getLogger(__name__)

COMPUTER_COLOR = Color.BLACK


class GameMode(IntEnum):
    PLAYER = auto()
    COMPUTER = auto()


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, "GameController"], None]
GameOverCallback = Callable[[GameStatus, str], None]  # status, status text
StatusCallback = Callable[[str], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)


def status_text(status: GameStatus, side_to_move: Color) -> str:
    """Human-readable status line for *side_to_move*."""
    if status == GameStatus.CHECKMATE:
        return f"{str(side_to_move.opposite).capitalize()} wins by checkmate!"
    if status == GameStatus.STALEMATE:
        return "Game drawn by stalemate!"
    if status == GameStatus.CHECK:
        return f"{str(side_to_move).capitalize()} is in check!"
    return ""


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Single-threaded game session. Oracle answers arrive on this thread."""

    __slots__ = (
        "_mode",
        "_oracle",
        "_settings",
        "_board",
        "_context",
        "_status",
        "_pending_promotion",
        "_history",
        "events",
    )

    def __init__(
        self,
        mode: GameMode = GameMode.PLAYER,
        oracle: BestMoveOracle | None = None,
        settings: OracleSettings | None = None,
    ) -> None:
        self._mode = mode
        self._oracle = oracle
        self._settings = settings if settings is not None else OracleSettings()
        self._board = Board.initial()
        self._context = GameContext.initial()
        self._status = GameStatus.IN_PROGRESS
        self._pending_promotion: Move | None = None
        self._history: list[Move] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def board(self) -> Board:
        return self._board

    @property
    def context(self) -> GameContext:
        return self._context

    @property
    def side_to_move(self) -> Color:
        return self._context.current_player

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def status_text(self) -> str:
        return status_text(self._status, self.side_to_move)

    @property
    def is_game_over(self) -> bool:
        return self._status in (GameStatus.CHECKMATE, GameStatus.STALEMATE)

    @property
    def pending_promotion(self) -> Move | None:
        return self._pending_promotion

    @property
    def move_history(self) -> list[Move]:
        return list(self._history)

    @property
    def is_computer_turn(self) -> bool:
        return self._mode == GameMode.COMPUTER and self.side_to_move == COMPUTER_COLOR

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(
        self,
        mode: GameMode | None = None,
        *,
        board: Board | None = None,
        context: GameContext | None = None,
    ) -> None:
        """Reset to a freshly allocated starting position, or a given one."""
        if mode is not None:
            self._mode = mode
        self._board = board if board is not None else Board.initial()
        self._context = context if context is not None else GameContext.initial()
        self._status = game_status(self._board, self._context)
        self._pending_promotion = None
        self._history = []
        self._emit_status()

    # ── Human moves ──────────────────────────────────────────────────────

    def valid_moves(self, sq: Square) -> list[Square]:
        """Destinations to highlight for the piece on *sq*."""
        if self.is_game_over or self._pending_promotion is not None:
            return []
        return MoveGenerator(self._board, self._context).valid_moves(sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a human move. Returns ``False`` when it is not accepted.

        A pawn reaching the last row is held in :attr:`pending_promotion`
        and the turn does not pass until :meth:`promote` is called.
        """
        if self.is_game_over or self._pending_promotion is not None:
            return False
        if self.is_computer_turn:
            return False
        if not is_valid_square(from_sq) or not is_valid_square(to_sq):
            return False

        piece = self._board[from_sq]
        if piece is None or piece.color != self.side_to_move:
            return False
        if not is_legal(from_sq, to_sq, piece, self._board, self._context):
            return False

        move = annotate_move(self._board, self._context, from_sq, to_sq)
        if needs_pawn_promotion(to_sq, piece):
            self._pending_promotion = move
            return True

        self._commit(move)
        return True

    def promote(self, piece_type: PieceType) -> bool:
        """Complete a pending promotion with *piece_type*."""
        pending = self._pending_promotion
        if pending is None or piece_type not in PROMOTION_TYPES:
            return False
        self._commit(replace(pending, promotion=piece_type))
        return True

    # ── Computer moves ───────────────────────────────────────────────────

    def request_computer_move(self) -> Move:
        """Ask the oracle for black's move and play it.

        :class:`OracleError` propagates and leaves the turn unresolved.
        """
        if self._oracle is None:
            raise RuntimeError("No best-move oracle configured")
        self._ensure_computer_turn()
        move = request_best_move(
            self._oracle, self._board, self._context, self._settings.depth
        )
        return self.apply_computer_move(move)

    def apply_computer_move(self, move: Move) -> Move:
        """Validate and play an oracle-suggested *move*."""
        self._ensure_computer_turn()
        piece = self._board[move.from_sq]
        if (
            piece is None
            or piece.color != self.side_to_move
            or not is_legal(move.from_sq, move.to_sq, piece, self._board, self._context)
        ):
            raise OracleError(f"Oracle suggested an illegal move: {move}")

        promotion = move.promotion
        if not needs_pawn_promotion(move.to_sq, piece):
            if promotion is not None:
                raise OracleError(f"Oracle suggested a needless promotion: {move}")
        elif promotion is None:
            promotion = PieceType.QUEEN
        elif promotion not in PROMOTION_TYPES:
            raise OracleError(f"Oracle suggested an invalid promotion: {move}")
        played = annotate_move(
            self._board, self._context, move.from_sq, move.to_sq, promotion
        )
        self._commit(played)
        return played

    def _ensure_computer_turn(self) -> None:
        if self.is_game_over:
            raise RuntimeError("Game is over")
        if not self.is_computer_turn:
            raise RuntimeError("Not the computer's turn")

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, move: Move) -> None:
        self._board, self._context = play(self._board, self._context, move)
        self._history.append(move)
        self._pending_promotion = None
        self._status = game_status(self._board, self._context)
        _LOGGER.debug("Played %s, status %s", move, self._status.name)

        for cb in self.events.on_move:
            cb(move, self)
        self._emit_status()

        if self.is_game_over:
            _LOGGER.info("Game over: %s", self.status_text)
            for cb in self.events.on_game_over:
                cb(self._status, self.status_text)

    def _emit_status(self) -> None:
        text = self.status_text
        for cb in self.events.on_status_changed:
            cb(text)
