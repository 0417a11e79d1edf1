"""Geometry and per-piece movement predicates.

Each predicate answers whether a displacement fits the piece's movement
pattern on the given board. None of them looks at king safety; that is
:mod:`chessrules.core.legality`'s job.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_same_square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.context import GameContext

MovePredicate = Callable[
    [Square, Square, Piece, "Board", "GameContext | None"], bool
]

_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# -- Geometry ---------------------------------------------------------------


def is_path_clear(from_sq: Square, to_sq: Square, board: Board) -> bool:
    """No piece strictly between two aligned squares.

    Only meaningful for squares sharing a row, a column or a diagonal.
    """
    row_step = _sign(to_sq[0] - from_sq[0])
    col_step = _sign(to_sq[1] - from_sq[1])
    row = from_sq[0] + row_step
    col = from_sq[1] + col_step
    while (row, col) != to_sq:
        if board[(row, col)] is not None:
            return False
        row += row_step
        col += col_step
    return True


# -- Piece predicates -------------------------------------------------------


def is_pawn_move(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
) -> bool:
    direction = piece.color.pawn_direction
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]

    # Single step
    if d_col == 0 and d_row == direction:
        return board[to_sq] is None

    # Double step from the starting row
    if d_col == 0 and d_row == 2 * direction:
        return (
            not piece.has_moved
            and from_sq[0] == _PAWN_START_ROW[piece.color]
            and board[(from_sq[0] + direction, from_sq[1])] is None
            and board[to_sq] is None
        )

    if d_row != direction or abs(d_col) != 1:
        return False

    target = board[to_sq]
    if target is not None:
        return target.color != piece.color

    # En passant: the passed pawn sits beside us, not on the target square
    if context is None or context.en_passant_target is None:
        return False
    if not is_same_square(to_sq, context.en_passant_target):
        return False
    passed = board[(from_sq[0], to_sq[1])]
    return (
        passed is not None
        and passed.piece_type == PieceType.PAWN
        and passed.color != piece.color
    )


def is_rook_move(from_sq: Square, to_sq: Square, board: Board) -> bool:
    if from_sq[0] != to_sq[0] and from_sq[1] != to_sq[1]:
        return False
    return is_path_clear(from_sq, to_sq, board)


def is_bishop_move(from_sq: Square, to_sq: Square, board: Board) -> bool:
    if abs(to_sq[0] - from_sq[0]) != abs(to_sq[1] - from_sq[1]):
        return False
    return is_path_clear(from_sq, to_sq, board)


def is_knight_move(from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq[0] - from_sq[0])
    d_col = abs(to_sq[1] - from_sq[1])
    return (d_row, d_col) in ((1, 2), (2, 1))


def is_queen_move(from_sq: Square, to_sq: Square, board: Board) -> bool:
    return is_rook_move(from_sq, to_sq, board) or is_bishop_move(
        from_sq, to_sq, board
    )


def is_king_move(from_sq: Square, to_sq: Square) -> bool:
    """One step in any direction. Castling is decided elsewhere."""
    return abs(to_sq[0] - from_sq[0]) <= 1 and abs(to_sq[1] - from_sq[1]) <= 1


# -- Dispatch ---------------------------------------------------------------

PIECE_PREDICATES: dict[PieceType, MovePredicate] = {
    PieceType.PAWN: is_pawn_move,
    PieceType.KNIGHT: lambda f, t, _p, _b, _c: is_knight_move(f, t),
    PieceType.BISHOP: lambda f, t, _p, b, _c: is_bishop_move(f, t, b),
    PieceType.ROOK: lambda f, t, _p, b, _c: is_rook_move(f, t, b),
    PieceType.QUEEN: lambda f, t, _p, b, _c: is_queen_move(f, t, b),
    PieceType.KING: lambda f, t, _p, _b, _c: is_king_move(f, t),
}

if set(PIECE_PREDICATES) != set(PieceType):  # pragma: no cover
    raise RuntimeError("Movement predicate table does not cover every PieceType")


def matches_movement(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
) -> bool:
    """Dispatch to the predicate for ``piece.piece_type``."""
    return PIECE_PREDICATES[piece.piece_type](from_sq, to_sq, piece, board, context)
