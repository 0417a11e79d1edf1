"""High-level chess rules: check, checkmate, stalemate, promotion."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import Color, GameStatus
from chessrules.core.legality import is_king_in_check, is_pseudo_legal, simulate_move
from chessrules.core.move import PROMOTION_TYPES
from chessrules.core.move_generator import has_legal_move
from chessrules.core.piece import Piece
from chessrules.core.transition import needs_pawn_promotion
from chessrules.core.types import all_squares


def can_move_prevent_check(
    color: Color, board: Board, context: GameContext | None = None
) -> bool:
    """Whether any *color* move leaves its king out of check.

    Every pseudo-legal move is tried on a private copy and the copy is
    re-tested for check.
    """
    targets = all_squares()
    for from_sq, piece in board:
        if piece.color != color:
            continue
        for to_sq in targets:
            if not is_pseudo_legal(
                from_sq, to_sq, piece, board, context, allow_castling=False
            ):
                continue
            after = simulate_move(from_sq, to_sq, piece, board, context)
            if not is_king_in_check(color, after):
                return True
    return False


def is_checkmate(
    color: Color, board: Board, context: GameContext | None = None
) -> bool:
    if not is_king_in_check(color, board):
        return False
    return not can_move_prevent_check(color, board, context)


def is_stalemate(
    color: Color, board: Board, context: GameContext | None = None
) -> bool:
    if is_king_in_check(color, board):
        return False
    return not has_legal_move(color, board, context)


def promotion_pieces(color: Color) -> list[Piece]:
    """Choices offered to a promoting pawn, strongest first."""
    return [Piece(color, pt, has_moved=True) for pt in PROMOTION_TYPES]


def game_status(board: Board, context: GameContext) -> GameStatus:
    """Rule status of ``context.current_player``."""
    color = context.current_player
    if is_king_in_check(color, board):
        if can_move_prevent_check(color, board, context):
            return GameStatus.CHECK
        return GameStatus.CHECKMATE
    if not has_legal_move(color, board, context):
        return GameStatus.STALEMATE
    return GameStatus.IN_PROGRESS


class Rules:
    """Static rule-checker grouping the functions above."""

    is_king_in_check = staticmethod(is_king_in_check)
    is_checkmate = staticmethod(is_checkmate)
    is_stalemate = staticmethod(is_stalemate)
    can_move_prevent_check = staticmethod(can_move_prevent_check)
    needs_pawn_promotion = staticmethod(needs_pawn_promotion)
    promotion_pieces = staticmethod(promotion_pieces)
    game_status = staticmethod(game_status)
