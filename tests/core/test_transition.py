"""Tests for move application: board effects and context bookkeeping."""

import pytest

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.transition import (
    annotate_move,
    apply_move,
    apply_move_to_board,
    play,
)

WK = Piece(Color.WHITE, PieceType.KING)
WR = Piece(Color.WHITE, PieceType.ROOK)
WP = Piece(Color.WHITE, PieceType.PAWN)
BK = Piece(Color.BLACK, PieceType.KING)
BR = Piece(Color.BLACK, PieceType.ROOK)
BP = Piece(Color.BLACK, PieceType.PAWN)
BB = Piece(Color.BLACK, PieceType.BISHOP)


def _castling_board() -> Board:
    return Board.from_pieces(
        {(7, 4): WK, (7, 0): WR, (7, 7): WR, (0, 4): BK, (0, 0): BR, (0, 7): BR}
    )


class TestEnPassantTarget:
    def test_double_step_sets_target(self) -> None:
        ctx = apply_move(GameContext(), Board.initial(), Move((6, 4), (4, 4)))
        assert ctx.en_passant_target == (5, 4)
        assert ctx.current_player == Color.BLACK

    def test_black_double_step(self) -> None:
        ctx = apply_move(GameContext(Color.BLACK), Board.initial(), Move((1, 2), (3, 2)))
        assert ctx.en_passant_target == (2, 2)
        assert ctx.current_player == Color.WHITE

    def test_single_step_clears_target(self) -> None:
        ctx = GameContext(Color.BLACK, en_passant_target=(5, 4))
        ctx = apply_move(ctx, Board.initial(), Move((1, 0), (2, 0)))
        assert ctx.en_passant_target is None

    def test_target_lives_for_one_reply(self) -> None:
        board, ctx = Board.initial(), GameContext()
        board, ctx = play(board, ctx, Move.from_uci("e2e4"))
        assert ctx.en_passant_target == (5, 4)
        board, ctx = play(board, ctx, Move.from_uci("g8f6"))
        assert ctx.en_passant_target is None


class TestCastlingRights:
    def test_king_move_revokes_both(self) -> None:
        ctx = apply_move(GameContext(), _castling_board(), Move((7, 4), (6, 4)))
        assert ctx.castling_rights == CastlingRights.BLACK_BOTH

    def test_rook_move_revokes_one_side(self) -> None:
        ctx = apply_move(GameContext(), _castling_board(), Move((7, 7), (5, 7)))
        assert not ctx.castling_rights & CastlingRights.WHITE_KINGSIDE
        assert ctx.castling_rights & CastlingRights.WHITE_QUEENSIDE

    def test_queenside_rook_move(self) -> None:
        ctx = apply_move(GameContext(Color.BLACK), _castling_board(), Move((0, 0), (3, 0)))
        assert ctx.castling_rights == (
            CastlingRights.WHITE_BOTH | CastlingRights.BLACK_KINGSIDE
        )

    def test_rook_captured_in_place_revokes(self) -> None:
        board = _castling_board().with_pieces({(1, 1): Piece(Color.WHITE, PieceType.BISHOP)})
        ctx = apply_move(GameContext(), board, Move((1, 1), (0, 0)))
        assert not ctx.castling_rights & CastlingRights.BLACK_QUEENSIDE
        assert ctx.castling_rights & CastlingRights.BLACK_KINGSIDE

    def test_white_rook_captured_in_place_revokes(self) -> None:
        board = _castling_board().with_pieces({(6, 6): BB})
        ctx = apply_move(GameContext(Color.BLACK), board, Move((6, 6), (7, 7)))
        assert ctx.castling_rights == (
            CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_BOTH
        )

    def test_unrelated_move_keeps_rights(self) -> None:
        ctx = apply_move(GameContext(), Board.initial(), Move((7, 6), (5, 5)))
        assert ctx.castling_rights == CastlingRights.ALL

    def test_missing_piece_raises(self) -> None:
        with pytest.raises(ValueError):
            apply_move(GameContext(), Board.empty(), Move((6, 4), (4, 4)))


class TestBoardEffects:
    def test_moved_piece_is_flagged(self) -> None:
        board = apply_move_to_board(Board.initial(), Move((6, 4), (4, 4)))
        assert board[(4, 4)] == WP.moved()
        assert board[(6, 4)] is None

    def test_input_board_untouched(self) -> None:
        board = Board.initial()
        apply_move_to_board(board, Move((6, 4), (4, 4)))
        assert board == Board.initial()

    def test_kingside_castle_moves_rook(self) -> None:
        board = apply_move_to_board(_castling_board(), Move((7, 4), (7, 6)))
        assert board[(7, 6)] == WK.moved()
        assert board[(7, 5)] == WR.moved()
        assert board[(7, 7)] is None
        assert board[(7, 4)] is None

    def test_queenside_castle_moves_rook(self) -> None:
        board = apply_move_to_board(_castling_board(), Move((0, 4), (0, 2)))
        assert board[(0, 2)] == BK.moved()
        assert board[(0, 3)] == BR.moved()
        assert board[(0, 0)] is None

    def test_en_passant_removes_passed_pawn(self) -> None:
        board = Board.from_pieces({(3, 4): WP.moved(), (3, 3): BP.moved()})
        ctx = GameContext(Color.WHITE, en_passant_target=(2, 3))
        after = apply_move_to_board(board, Move((3, 4), (2, 3)), ctx)
        assert after[(2, 3)] == WP.moved()
        assert after[(3, 3)] is None
        assert after[(3, 4)] is None

    def test_promotion(self) -> None:
        board = Board.from_pieces({(1, 0): WP.moved()})
        after = apply_move_to_board(board, Move((1, 0), (0, 0), PieceType.KNIGHT))
        assert after[(0, 0)] == Piece(Color.WHITE, PieceType.KNIGHT, has_moved=True)

    def test_promotion_off_back_rank_rejected(self) -> None:
        with pytest.raises(ValueError, match="does not promote"):
            apply_move_to_board(Board.initial(), Move((6, 0), (5, 0), PieceType.KING))

    def test_promotion_of_non_pawn_rejected(self) -> None:
        board = Board.from_pieces({(1, 0): WR.moved()})
        with pytest.raises(ValueError, match="does not promote"):
            apply_move_to_board(board, Move((1, 0), (0, 0), PieceType.QUEEN))

    @pytest.mark.parametrize("piece_type", [PieceType.KING, PieceType.PAWN])
    def test_promotion_to_invalid_kind_rejected(self, piece_type: PieceType) -> None:
        board = Board.from_pieces({(1, 0): WP.moved()})
        with pytest.raises(ValueError, match="Cannot promote"):
            apply_move_to_board(board, Move((1, 0), (0, 0), piece_type))

    def test_back_rank_pawn_without_promotion_stays_pawn(self) -> None:
        board = Board.from_pieces({(1, 0): WP.moved()})
        after = apply_move_to_board(board, Move((1, 0), (0, 0)))
        assert after[(0, 0)] == WP.moved()

    def test_capture_replaces_occupant(self) -> None:
        board = Board.from_pieces({(7, 0): WR, (2, 0): BP})
        after = apply_move_to_board(board, Move((7, 0), (2, 0)))
        assert after[(2, 0)] == WR.moved()
        assert len(after.squares_of(Color.BLACK)) == 0


class TestAnnotateMove:
    def test_castling_flag(self) -> None:
        move = annotate_move(_castling_board(), GameContext(), (7, 4), (7, 6))
        assert move.is_castling
        assert not move.is_en_passant

    def test_en_passant_flag(self) -> None:
        board = Board.from_pieces({(3, 4): WP.moved(), (3, 3): BP.moved()})
        ctx = GameContext(Color.WHITE, en_passant_target=(2, 3))
        move = annotate_move(board, ctx, (3, 4), (2, 3))
        assert move.is_en_passant

    def test_plain_move_has_no_flags(self) -> None:
        move = annotate_move(Board.initial(), GameContext(), (6, 4), (4, 4))
        assert move == Move((6, 4), (4, 4))
