"""GameContext: the move-history facts a board alone cannot express."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import CastlingRights, CastlingSide, Color
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class GameContext:
    """Side to move, en-passant target and castling rights.

    ``en_passant_target`` is the square a pawn skipped over on the previous
    ply; it is valid for exactly one reply.
    """

    current_player: Color = Color.WHITE
    en_passant_target: Square | None = None
    castling_rights: CastlingRights = CastlingRights.ALL

    @classmethod
    def initial(cls) -> GameContext:
        return cls()

    def can_castle(self, color: Color, side: CastlingSide) -> bool:
        return self.castling_rights.has(color, side)
