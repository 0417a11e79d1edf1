"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def home_row(self) -> int:
        """Row of this side's back rank."""
        return 7 if self == Color.WHITE else 0

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn step (white moves toward row 0)."""
        return -1 if self == Color.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(IntEnum):
    KINGSIDE = 0
    QUEENSIDE = 1

    @property
    def rook_col(self) -> int:
        return 7 if self == CastlingSide.KINGSIDE else 0


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @staticmethod
    def flag(color: Color, side: CastlingSide) -> CastlingRights:
        """Single right for *color* on *side*."""
        if color == Color.WHITE:
            if side == CastlingSide.KINGSIDE:
                return CastlingRights.WHITE_KINGSIDE
            return CastlingRights.WHITE_QUEENSIDE
        if side == CastlingSide.KINGSIDE:
            return CastlingRights.BLACK_KINGSIDE
        return CastlingRights.BLACK_QUEENSIDE

    @staticmethod
    def both(color: Color) -> CastlingRights:
        return (
            CastlingRights.WHITE_BOTH
            if color == Color.WHITE
            else CastlingRights.BLACK_BOTH
        )

    def has(self, color: Color, side: CastlingSide) -> bool:
        return bool(self & CastlingRights.flag(color, side))


class GameStatus(IntEnum):
    """Rule status of the side to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3
