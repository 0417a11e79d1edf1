"""Legal move enumeration."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import Color, PieceType
from chessrules.core.legality import is_legal
from chessrules.core.move import PROMOTION_TYPES, Move
from chessrules.core.piece import Piece
from chessrules.core.transition import annotate_move, needs_pawn_promotion
from chessrules.core.types import Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


def _offset_targets(
    from_sq: Square, offsets: tuple[tuple[int, int], ...]
) -> list[Square]:
    return [(from_sq[0] + dr, from_sq[1] + dc) for dr, dc in offsets]


def _pawn_targets(
    from_sq: Square, piece: Piece, context: GameContext | None
) -> list[Square]:
    row, col = from_sq
    step = piece.color.pawn_direction
    targets = [
        (row + step, col),
        (row + 2 * step, col),
        (row + step, col - 1),
        (row + step, col + 1),
    ]
    if context is not None and context.en_passant_target is not None:
        ep = (row + step, context.en_passant_target[1])
        if ep not in targets:
            targets.append(ep)
    return targets


def _king_targets(from_sq: Square, piece: Piece) -> list[Square]:
    targets = _offset_targets(from_sq, KING_OFFSETS)
    if not piece.has_moved:
        row, col = from_sq
        targets += [(row, col - 2), (row, col + 2)]
    return targets


def _slider_moves(
    from_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None,
    directions: tuple[tuple[int, int], ...],
) -> list[Square]:
    moves: list[Square] = []
    for dr, dc in directions:
        sq = (from_sq[0] + dr, from_sq[1] + dc)
        while is_valid_square(sq):
            if is_legal(from_sq, sq, piece, board, context):
                moves.append(sq)
            if board[sq] is not None:
                break
            sq = (sq[0] + dr, sq[1] + dc)
    return moves


def get_valid_moves(
    from_sq: Square,
    piece: Piece,
    board: Board,
    context: GameContext | None = None,
) -> list[Square]:
    """Every square *piece* on *from_sq* may legally move to.

    Includes castling destinations for an unmoved king when eligible and
    filters out moves that leave the mover in check. Order is deterministic.
    """
    directions = _SLIDER_DIRS.get(piece.piece_type)
    if directions is not None:
        return _slider_moves(from_sq, piece, board, context, directions)

    if piece.piece_type == PieceType.PAWN:
        candidates = _pawn_targets(from_sq, piece, context)
    elif piece.piece_type == PieceType.KNIGHT:
        candidates = _offset_targets(from_sq, KNIGHT_OFFSETS)
    elif piece.piece_type == PieceType.KING:
        candidates = _king_targets(from_sq, piece)
    else:  # pragma: no cover
        raise AssertionError(f"Unhandled piece type: {piece.piece_type!r}")

    return [
        sq
        for sq in candidates
        if is_valid_square(sq) and is_legal(from_sq, sq, piece, board, context)
    ]


def legal_moves(
    color: Color, board: Board, context: GameContext | None = None
) -> list[Move]:
    """All legal moves of *color*, one per promotion choice."""
    moves: list[Move] = []
    for from_sq in board.squares_of(color):
        piece = board[from_sq]
        if piece is None:
            continue
        for to_sq in get_valid_moves(from_sq, piece, board, context):
            if needs_pawn_promotion(to_sq, piece):
                moves.extend(
                    annotate_move(board, context, from_sq, to_sq, pt)
                    for pt in PROMOTION_TYPES
                )
            else:
                moves.append(annotate_move(board, context, from_sq, to_sq))
    return moves


def has_legal_move(
    color: Color, board: Board, context: GameContext | None = None
) -> bool:
    for from_sq in board.squares_of(color):
        piece = board[from_sq]
        if piece is not None and get_valid_moves(from_sq, piece, board, context):
            return True
    return False


class MoveGenerator:
    """Enumerates legal moves for a board/context pair.

    The side to move comes from ``context.current_player``.
    """

    __slots__ = ("_board", "_context")

    def __init__(self, board: Board, context: GameContext) -> None:
        self._board = board
        self._context = context

    def valid_moves(self, from_sq: Square) -> list[Square]:
        """Destinations for the side-to-move's piece on *from_sq*."""
        if not is_valid_square(from_sq):
            return []
        piece = self._board[from_sq]
        if piece is None or piece.color != self._context.current_player:
            return []
        return get_valid_moves(from_sq, piece, self._board, self._context)

    def generate_legal_moves(self) -> list[Move]:
        return legal_moves(self._context.current_player, self._board, self._context)

    def has_legal_move(self) -> bool:
        return has_legal_move(self._context.current_player, self._board, self._context)
