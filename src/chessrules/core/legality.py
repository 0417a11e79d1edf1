"""Move legality: pseudo-legal / legal checks, castling and attack detection.

Attack detection only ever asks :func:`is_pseudo_legal`, never
:func:`is_legal`, so asking whether a square is attacked cannot recurse into
the attacker's own king safety.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.movement import matches_movement
from chessrules.core.piece import Piece
from chessrules.core.transition import en_passant_capture_square
from chessrules.core.types import Square, is_same_square, is_valid_square

_KING_HOME_COL = 4


# -- Pseudo-legal / legal ---------------------------------------------------


def is_pseudo_legal(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
    allow_castling: bool = True,
) -> bool:
    """Geometry and occupancy only; may leave the mover's king in check."""
    if is_same_square(from_sq, to_sq):
        return False
    if not is_valid_square(from_sq) or not is_valid_square(to_sq):
        return False

    target = board[to_sq]
    if target is not None and target.color == piece.color:
        return False

    if matches_movement(from_sq, to_sq, piece, board, context):
        return True

    if piece.piece_type == PieceType.KING and allow_castling:
        return _is_castling_attempt_valid(from_sq, to_sq, piece, board, context)
    return False


def is_legal(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
    allow_castling: bool = True,
) -> bool:
    """Pseudo-legal and does not leave the mover's own king in check."""
    if not is_pseudo_legal(from_sq, to_sq, piece, board, context, allow_castling):
        return False
    after = simulate_move(from_sq, to_sq, piece, board, context)
    return not is_king_in_check(piece.color, after)


def is_valid_move(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    *,
    context: GameContext | None = None,
    check_for_own_check: bool = True,
    allow_castling: bool = True,
) -> bool:
    """Single entry point mirroring the orchestrator options."""
    if check_for_own_check:
        return is_legal(from_sq, to_sq, piece, board, context, allow_castling)
    return is_pseudo_legal(from_sq, to_sq, piece, board, context, allow_castling)


def simulate_move(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
) -> Board:
    """Private what-if copy of *board* with *piece* moved."""
    changes: dict[Square, Piece | None] = {from_sq: None, to_sq: piece}
    victim = en_passant_capture_square(from_sq, to_sq, piece, board, context)
    if victim is not None:
        changes[victim] = None
    return board.with_pieces(changes)


# -- Castling ---------------------------------------------------------------


def _is_castling_attempt_valid(
    from_sq: Square,
    to_sq: Square,
    king: Piece,
    board: Board,
    context: GameContext | None,
) -> bool:
    if king.has_moved or context is None:
        return False
    if from_sq != (king.color.home_row, _KING_HOME_COL):
        return False
    if to_sq[0] != from_sq[0] or abs(to_sq[1] - from_sq[1]) != 2:
        return False
    side = CastlingSide.KINGSIDE if to_sq[1] > from_sq[1] else CastlingSide.QUEENSIDE
    if not context.can_castle(king.color, side):
        return False
    return is_castling_valid(from_sq, to_sq, king.color, board)


def is_castling_valid(
    from_sq: Square, to_sq: Square, color: Color, board: Board
) -> bool:
    """Board-level castling check; castling rights are the caller's concern.

    Requires an unmoved king on its home square, an unmoved same-color rook
    in the corner, empty squares between them, and no attacked square on
    the king's path (start and end included).
    """
    row = color.home_row
    side = CastlingSide.KINGSIDE if to_sq[1] > from_sq[1] else CastlingSide.QUEENSIDE
    rook_col = side.rook_col

    rook = board[(row, rook_col)]
    if (
        rook is None
        or rook.piece_type != PieceType.ROOK
        or rook.color != color
        or rook.has_moved
    ):
        return False

    king = board[(row, _KING_HOME_COL)]
    if (
        king is None
        or king.piece_type != PieceType.KING
        or king.color != color
        or king.has_moved
    ):
        return False

    start, end = sorted((from_sq[1], rook_col))
    for col in range(start + 1, end):
        if board[(row, col)] is not None:
            return False

    step = 1 if side == CastlingSide.KINGSIDE else -1
    without_king = board.with_pieces({from_sq: None})
    for col in range(from_sq[1], to_sq[1] + step, step):
        probe = without_king.with_pieces({(row, col): Piece(color, PieceType.KING)})
        if is_king_in_check(color, probe, (row, col)):
            return False
    return True


# -- Attack detection -------------------------------------------------------


def is_square_attacked(sq: Square, by_color: Color, board: Board) -> bool:
    """Can any *by_color* piece pseudo-legally move onto *sq*?

    Pawns only attack diagonally, so an empty *sq* is probed with a
    placeholder of the defending color.
    """
    probe_board = board
    if board[sq] is None:
        probe_board = board.with_pieces({sq: Piece(by_color.opposite, PieceType.PAWN)})
    for from_sq, piece in probe_board:
        if piece.color != by_color:
            continue
        if is_pseudo_legal(from_sq, sq, piece, probe_board, allow_castling=False):
            return True
    return False


def is_king_in_check(
    color: Color, board: Board, king_sq: Square | None = None
) -> bool:
    """Whether *color*'s king can be captured by the opponent.

    A board without a *color* king answers ``False``.
    """
    if king_sq is None:
        king_sq = board.king_square(color)
        if king_sq is None:
            return False
    return is_square_attacked(king_sq, color.opposite, board)
