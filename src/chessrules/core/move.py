"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, parse_square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_PROMO_CHARS_REV: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``is_castling`` / ``is_en_passant`` are descriptive only: legality and
    board effects are always re-derived from the position.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None
    is_castling: bool = False
    is_en_passant: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``"e2e4"`` / ``"e7e8q"``."""
        text = text.strip()
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {text!r}")
        from_sq = parse_square(text[0:2])
        to_sq = parse_square(text[2:4])
        promotion: PieceType | None = None
        if len(text) == 5:
            try:
                promotion = _PROMO_CHARS_REV[text[4].lower()]
            except KeyError:
                raise ValueError(f"Invalid UCI promotion: {text!r}") from None
        return cls(from_sq, to_sq, promotion)
