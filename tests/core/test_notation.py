"""Tests for FEN serialisation and UCI parsing."""

import pytest

from chessrules.core.board import Board
from chessrules.core.context import GameContext
from chessrules.core.enums import CastlingRights, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import STARTING_FEN, board_to_fen, parse_uci_move
from chessrules.core.piece import Piece
from chessrules.core.transition import play


class TestBoardToFen:
    def test_starting_position(self) -> None:
        assert board_to_fen(Board.initial(), GameContext.initial()) == STARTING_FEN

    def test_after_double_step(self) -> None:
        board, ctx = play(Board.initial(), GameContext.initial(), Move.from_uci("e2e4"))
        assert (
            board_to_fen(board, ctx)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )

    def test_partial_castling_rights(self) -> None:
        ctx = GameContext(
            Color.BLACK,
            castling_rights=CastlingRights.WHITE_QUEENSIDE | CastlingRights.BLACK_KINGSIDE,
        )
        assert board_to_fen(Board.initial(), ctx).split()[1:3] == ["b", "Qk"]

    def test_no_castling_rights(self) -> None:
        board = Board.from_pieces(
            {(7, 4): Piece(Color.WHITE, PieceType.KING), (0, 4): Piece(Color.BLACK, PieceType.KING)}
        )
        ctx = GameContext(castling_rights=CastlingRights.NONE)
        assert board_to_fen(board, ctx) == "4k3/8/8/8/8/8/8/4K3 w - - 0 1"

    def test_clocks(self) -> None:
        fen = board_to_fen(Board.initial(), GameContext(), halfmove_clock=3, fullmove_number=12)
        assert fen.endswith(" 3 12")


class TestParseUciMove:
    def test_plain_move(self) -> None:
        assert parse_uci_move("e2e4") == Move((6, 4), (4, 4))

    def test_promotion(self) -> None:
        move = parse_uci_move("e7e8q")
        assert move.to_sq == (0, 4)
        assert move.promotion == PieceType.QUEEN

    def test_surrounding_whitespace(self) -> None:
        assert parse_uci_move(" g8f6\n") == Move((0, 6), (2, 5))

    @pytest.mark.parametrize("text", ["", "e2", "z9e4", "e7e8x", "bestmove"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_uci_move(text)
