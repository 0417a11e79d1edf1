"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, GameContext, get_valid_moves, parse_square

    board = Board.initial()
    e2 = parse_square("e2")
    print(get_valid_moves(e2, board[e2], board, GameContext.initial()))
"""

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import (
    CastlingRights,
    CastlingSide,
    Color,
    GameStatus,
    PieceType,
)
from chessrules.core.legality import (
    is_castling_valid,
    is_king_in_check,
    is_legal,
    is_pseudo_legal,
    is_square_attacked,
    is_valid_move,
    simulate_move,
)
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    MoveGenerator,
    get_valid_moves,
    has_legal_move,
    legal_moves,
)
from chessrules.core.movement import (
    is_bishop_move,
    is_king_move,
    is_knight_move,
    is_path_clear,
    is_pawn_move,
    is_queen_move,
    is_rook_move,
)
from chessrules.core.notation import STARTING_FEN, board_to_fen, parse_uci_move
from chessrules.core.piece import Piece
from chessrules.core.rules import (
    Rules,
    can_move_prevent_check,
    game_status,
    is_checkmate,
    is_stalemate,
    needs_pawn_promotion,
    promotion_pieces,
)
from chessrules.core.transition import apply_move, apply_move_to_board, play
from chessrules.core.types import (
    Square,
    is_same_square,
    is_valid_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "Square",
    "is_same_square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameContext",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Movement predicates
    "is_bishop_move",
    "is_king_move",
    "is_knight_move",
    "is_path_clear",
    "is_pawn_move",
    "is_queen_move",
    "is_rook_move",
    # Legality
    "is_castling_valid",
    "is_king_in_check",
    "is_legal",
    "is_pseudo_legal",
    "is_square_attacked",
    "is_valid_move",
    "simulate_move",
    # Rules / enumeration
    "can_move_prevent_check",
    "game_status",
    "get_valid_moves",
    "has_legal_move",
    "is_checkmate",
    "is_stalemate",
    "legal_moves",
    "needs_pawn_promotion",
    "promotion_pieces",
    # Transitions
    "apply_move",
    "apply_move_to_board",
    "play",
    # Notation
    "STARTING_FEN",
    "board_to_fen",
    "parse_uci_move",
]
