"""Best-move oracle protocol and the position hand-off helper."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chessrules.core.move import Move
from chessrules.core.notation import board_to_fen

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.context import GameContext


class OracleError(RuntimeError):
    """The oracle could not produce a usable move."""


class BestMoveOracle(Protocol):
    """Black-box engine: FEN in, UCI move string out."""

    def best_move(self, fen: str, depth: int) -> str: ...


def request_best_move(
    oracle: BestMoveOracle,
    board: Board,
    context: GameContext,
    depth: int,
) -> Move:
    """Ask *oracle* for a move in the given position.

    The answer is parsed but not checked for legality. A malformed answer
    raises :class:`OracleError`.
    """
    fen = board_to_fen(board, context)
    answer = oracle.best_move(fen, depth)
    try:
        return Move.from_uci(answer)
    except ValueError as exc:
        raise OracleError(f"Oracle returned a malformed move: {answer!r}") from exc
