"""State transitions: applying a confirmed move to a board and its context.

Both halves are pure. :func:`apply_move` is the single owner of castling
right revocation and the en-passant target lifecycle.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingRights, PieceType
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_same_square

# Rook home squares → the right lost when anything leaves or lands on them.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    (7, 0): CastlingRights.WHITE_QUEENSIDE,
    (7, 7): CastlingRights.WHITE_KINGSIDE,
    (0, 0): CastlingRights.BLACK_QUEENSIDE,
    (0, 7): CastlingRights.BLACK_KINGSIDE,
}


# ── Special-move geometry ────────────────────────────────────────────────────


def needs_pawn_promotion(to_sq: Square, piece: Piece) -> bool:
    """A pawn arriving on either back rank must promote."""
    return piece.piece_type == PieceType.PAWN and to_sq[0] in (0, 7)


def en_passant_capture_square(
    from_sq: Square,
    to_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None,
) -> Square | None:
    """Square of the pawn removed by an en-passant capture, else ``None``."""
    if piece.piece_type != PieceType.PAWN or from_sq[1] == to_sq[1]:
        return None
    if context is None or context.en_passant_target is None:
        return None
    if not is_same_square(to_sq, context.en_passant_target):
        return None
    if board[to_sq] is not None:
        return None
    return (from_sq[0], to_sq[1])


def castling_rook_move(
    from_sq: Square, to_sq: Square, piece: Piece
) -> tuple[Square, Square] | None:
    """(rook_from, rook_to) when a king move is a castling jump."""
    if piece.piece_type != PieceType.KING or from_sq[0] != to_sq[0]:
        return None
    d_col = to_sq[1] - from_sq[1]
    if abs(d_col) != 2:
        return None
    row = from_sq[0]
    if d_col > 0:
        return (row, 7), (row, to_sq[1] - 1)
    return (row, 0), (row, to_sq[1] + 1)


def annotate_move(
    board: Board,
    context: GameContext | None,
    from_sq: Square,
    to_sq: Square,
    promotion: PieceType | None = None,
) -> Move:
    """Build a :class:`Move` with descriptive castling / en-passant flags."""
    piece = board[from_sq]
    if piece is None:
        return Move(from_sq, to_sq, promotion)
    return Move(
        from_sq,
        to_sq,
        promotion,
        is_castling=castling_rook_move(from_sq, to_sq, piece) is not None,
        is_en_passant=en_passant_capture_square(from_sq, to_sq, piece, board, context)
        is not None,
    )


# ── Transitions ──────────────────────────────────────────────────────────────


def apply_move_to_board(
    board: Board, move: Move, context: GameContext | None = None
) -> Board:
    """Board after *move*: captures, castling rook, en passant, promotion."""
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    changes: dict[Square, Piece | None] = {move.from_sq: None}

    victim = en_passant_capture_square(
        move.from_sq, move.to_sq, piece, board, context
    )
    if victim is not None:
        changes[victim] = None

    rook_move = castling_rook_move(move.from_sq, move.to_sq, piece)
    if rook_move is not None:
        rook_from, rook_to = rook_move
        rook = board[rook_from]
        if rook is not None:
            changes[rook_from] = None
            changes[rook_to] = rook.moved()

    if move.promotion is None:
        changes[move.to_sq] = piece.moved()
    elif not needs_pawn_promotion(move.to_sq, piece):
        raise ValueError(f"{move} names a promotion but does not promote a pawn")
    elif move.promotion not in PROMOTION_TYPES:
        raise ValueError(f"Cannot promote to {move.promotion.name}")
    else:
        changes[move.to_sq] = piece.promoted(move.promotion)

    return board.with_pieces(changes)


def apply_move(context: GameContext, board: Board, move: Move) -> GameContext:
    """Context after *move*, given the board *before* it was played."""
    piece = board[move.from_sq]
    if piece is None:
        raise ValueError(f"No piece on {move.from_sq}")

    rights = context.castling_rights
    if piece.piece_type == PieceType.KING:
        rights &= ~CastlingRights.both(piece.color)
    # Covers a rook leaving its corner and a rook captured in place.
    for sq in (move.from_sq, move.to_sq):
        corner_right = _ROOK_CORNERS.get(sq)
        if corner_right is not None:
            rights &= ~corner_right

    en_passant: Square | None = None
    if piece.piece_type == PieceType.PAWN and abs(move.to_sq[0] - move.from_sq[0]) == 2:
        en_passant = ((move.from_sq[0] + move.to_sq[0]) // 2, move.from_sq[1])

    return GameContext(
        current_player=context.current_player.opposite,
        en_passant_target=en_passant,
        castling_rights=CastlingRights(rights),
    )


def play(board: Board, context: GameContext, move: Move) -> tuple[Board, GameContext]:
    """Apply *move* to both halves of the game state."""
    return apply_move_to_board(board, move, context), apply_move(context, board, move)
