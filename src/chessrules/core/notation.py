"""FEN serialisation and UCI move parsing.

Only the direction needed to hand a position to a best-move oracle is
implemented; FEN is never parsed back.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingRights, Color
from chessrules.core.move import Move
from chessrules.core.types import BOARD_SIZE, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: tuple[tuple[CastlingRights, str], ...] = (
    (CastlingRights.WHITE_KINGSIDE, "K"),
    (CastlingRights.WHITE_QUEENSIDE, "Q"),
    (CastlingRights.BLACK_KINGSIDE, "k"),
    (CastlingRights.BLACK_QUEENSIDE, "q"),
)


def board_to_fen(
    board: Board,
    context: GameContext,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> str:
    """Serialise *board* and *context* to FEN."""
    # 1. Board (row 0 is rank 8, which FEN lists first)
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if context.current_player == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for right, ch in _CASTLING_CHARS if context.castling_rights & right
    )
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep = context.en_passant_target
    ep_str = square_name(ep) if ep is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {halfmove_clock} {fullmove_number}"


def parse_uci_move(text: str) -> Move:
    """``"e2e4"`` → :class:`Move`; raises ``ValueError`` on malformed text."""
    return Move.from_uci(text)
