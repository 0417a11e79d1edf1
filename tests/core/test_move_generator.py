"""Tests for legal move enumeration.

Perft counts: https://www.chessprogramming.org/Perft_Results
"""

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.move_generator import (
    MoveGenerator,
    get_valid_moves,
    has_legal_move,
    legal_moves,
)
from chessrules.core.piece import Piece
from chessrules.core.transition import play

WK = Piece(Color.WHITE, PieceType.KING)
WR = Piece(Color.WHITE, PieceType.ROOK)
WN = Piece(Color.WHITE, PieceType.KNIGHT)
WP = Piece(Color.WHITE, PieceType.PAWN)
BK = Piece(Color.BLACK, PieceType.KING)
BR = Piece(Color.BLACK, PieceType.ROOK)
BP = Piece(Color.BLACK, PieceType.PAWN)


def perft(board: Board, ctx: GameContext, depth: int) -> int:
    """Count leaf nodes at *depth*."""
    if depth == 0:
        return 1
    nodes = 0
    for move in legal_moves(ctx.current_player, board, ctx):
        next_board, next_ctx = play(board, ctx, move)
        nodes += perft(next_board, next_ctx, depth - 1)
    return nodes


class TestPerftStarting:
    def test_depth_1(self) -> None:
        assert perft(Board.initial(), GameContext.initial(), 1) == 20

    def test_depth_2(self) -> None:
        assert perft(Board.initial(), GameContext.initial(), 2) == 400


class TestPieceMoves:
    def test_knight_from_start(self) -> None:
        board = Board.initial()
        assert get_valid_moves((7, 1), WN, board, GameContext()) == [(5, 0), (5, 2)]

    def test_pawn_from_start(self) -> None:
        board = Board.initial()
        assert get_valid_moves((6, 4), WP, board, GameContext()) == [(5, 4), (4, 4)]

    def test_blocked_pieces_have_no_moves(self) -> None:
        board = Board.initial()
        assert get_valid_moves((7, 0), WR, board, GameContext()) == []
        assert get_valid_moves((7, 4), WK, board, GameContext()) == []

    def test_rook_on_open_board(self) -> None:
        board = Board.from_pieces({(4, 4): WR, (7, 0): WK.moved(), (0, 7): BK})
        assert len(get_valid_moves((4, 4), WR, board)) == 14

    def test_rook_stops_before_own_piece(self) -> None:
        board = Board.from_pieces(
            {(4, 4): WR, (4, 6): WN, (7, 0): WK.moved(), (0, 7): BK}
        )
        moves = get_valid_moves((4, 4), WR, board)
        assert (4, 5) in moves
        assert (4, 6) not in moves
        assert (4, 7) not in moves
        assert len(moves) == 12

    def test_rook_includes_capture_then_stops(self) -> None:
        board = Board.from_pieces(
            {(4, 4): WR, (4, 6): BP.moved(), (7, 0): WK.moved(), (0, 7): BK}
        )
        moves = get_valid_moves((4, 4), WR, board)
        assert (4, 6) in moves
        assert (4, 7) not in moves
        assert len(moves) == 13

    def test_pinned_rook_stays_on_the_pin(self) -> None:
        board = Board.from_pieces({(7, 4): WK.moved(), (5, 4): WR, (0, 4): BR})
        moves = get_valid_moves((5, 4), WR, board)
        assert sorted(moves) == [(0, 4), (1, 4), (2, 4), (3, 4), (4, 4), (6, 4)]

    def test_king_cannot_step_into_check(self) -> None:
        board = Board.from_pieces({(7, 4): WK.moved(), (0, 3): BR})
        moves = get_valid_moves((7, 4), WK.moved(), board)
        assert (7, 3) not in moves
        assert (6, 3) not in moves
        assert (6, 4) in moves


class TestSpecialMoves:
    def _castling_board(self) -> Board:
        return Board.from_pieces({(7, 4): WK, (7, 0): WR, (7, 7): WR, (0, 4): BK})

    def test_castling_destinations_included(self) -> None:
        moves = get_valid_moves((7, 4), WK, self._castling_board(), GameContext())
        assert (7, 6) in moves
        assert (7, 2) in moves

    def test_castling_needs_rights(self) -> None:
        ctx = GameContext(castling_rights=CastlingRights.BLACK_BOTH)
        moves = get_valid_moves((7, 4), WK, self._castling_board(), ctx)
        assert (7, 6) not in moves
        assert (7, 2) not in moves

    def test_en_passant_destination(self) -> None:
        pawn = WP.moved()
        board = Board.from_pieces(
            {(3, 4): pawn, (3, 3): BP.moved(), (7, 4): WK.moved(), (0, 4): BK}
        )
        ctx = GameContext(Color.WHITE, en_passant_target=(2, 3))
        assert get_valid_moves((3, 4), pawn, board, ctx) == [(2, 4), (2, 3)]

    def test_legal_moves_flags_and_promotions(self) -> None:
        pawn = WP.moved()
        board = Board.from_pieces(
            {(1, 0): pawn, (7, 4): WK, (7, 7): WR, (2, 6): BK}
        )
        moves = legal_moves(Color.WHITE, board, GameContext())
        promotions = [m for m in moves if m.from_sq == (1, 0)]
        assert {m.promotion for m in promotions} == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }
        castles = [m for m in moves if m.is_castling]
        assert [m.uci for m in castles] == ["e1g1"]

    def test_legal_moves_en_passant_flag(self) -> None:
        board = Board.initial()
        ctx = GameContext.initial()
        for uci in ("e2e4", "a7a6", "e4e5", "d7d5"):
            board, ctx = play(board, ctx, Move.from_uci(uci))
        ep = [m for m in legal_moves(Color.WHITE, board, ctx) if m.is_en_passant]
        assert [m.uci for m in ep] == ["e5d6"]


class TestPurity:
    def test_repeated_calls_match_and_board_is_untouched(self) -> None:
        board = Board.initial()
        ctx = GameContext.initial()
        snapshot = board.rows()
        first = get_valid_moves((7, 6), board[(7, 6)], board, ctx)
        second = get_valid_moves((7, 6), board[(7, 6)], board, ctx)
        assert first == second
        assert board.rows() == snapshot

    def test_has_legal_move(self) -> None:
        assert has_legal_move(Color.WHITE, Board.initial(), GameContext())
        stalemated = Board.from_pieces(
            {(0, 7): BK, (2, 5): WK, (2, 6): Piece(Color.WHITE, PieceType.QUEEN)}
        )
        assert not has_legal_move(Color.BLACK, stalemated, GameContext(Color.BLACK))


class TestMoveGenerator:
    def test_side_to_move_only(self) -> None:
        gen = MoveGenerator(Board.initial(), GameContext.initial())
        assert gen.valid_moves((6, 4)) == [(5, 4), (4, 4)]
        assert gen.valid_moves((1, 4)) == []

    def test_empty_and_off_board_squares(self) -> None:
        gen = MoveGenerator(Board.initial(), GameContext.initial())
        assert gen.valid_moves((4, 4)) == []
        assert gen.valid_moves((9, 9)) == []

    def test_generate_legal_moves(self) -> None:
        gen = MoveGenerator(Board.initial(), GameContext(Color.BLACK))
        assert len(gen.generate_legal_moves()) == 20
        assert gen.has_legal_move()
