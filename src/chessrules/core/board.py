"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, is_valid_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(sq: Square) -> int:
    if not is_valid_square(sq):
        raise IndexError(f"Square off the board: {sq!r}")
    return sq[0] * BOARD_SIZE + sq[1]


class Board:
    """Immutable 64-square snapshot addressed by ``(row, col)``.

    Every "mutation" returns a new board, so a board handed to the rules
    can never be altered behind the caller's back.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Sequence[Piece | None] | None = None) -> None:
        if squares is None:
            self._squares: tuple[Piece | None, ...] = (None,) * 64
            return
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 squares, got {len(squares)}")
        self._squares = tuple(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[_index(sq)] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order."""
        for idx, piece in enumerate(self._squares):
            if piece is not None:
                yield (idx // BOARD_SIZE, idx % BOARD_SIZE), piece

    # -- Query helpers ------------------------------------------------------

    def squares_of(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self if piece.color == color]

    def king_square(self, color: Color) -> Square | None:
        """The first *color* king found scanning row-major, or ``None``."""
        for sq, piece in self:
            if piece.piece_type == PieceType.KING and piece.color == color:
                return sq
        return None

    def rows(self) -> list[list[Piece | None]]:
        """Fresh 8x8 nested list, row 0 first (display order)."""
        return [
            list(self._squares[r * BOARD_SIZE : (r + 1) * BOARD_SIZE])
            for r in range(BOARD_SIZE)
        ]

    # -- Derivation ---------------------------------------------------------

    def with_pieces(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with each square in *changes* set (``None`` clears)."""
        squares = list(self._squares)
        for sq, piece in changes.items():
            squares[_index(sq)] = piece
        return Board(squares)

    def move_piece(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the occupant of *from_sq* relocated to *to_sq*."""
        return self.with_pieces({to_sq: self[from_sq], from_sq: None})

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, freshly allocated on every call."""
        squares: list[Piece | None] = [None] * 64
        for col, pt in enumerate(_BACK_RANK):
            squares[_index((0, col))] = Piece(Color.BLACK, pt)
            squares[_index((1, col))] = Piece(Color.BLACK, PieceType.PAWN)
            squares[_index((6, col))] = Piece(Color.WHITE, PieceType.PAWN)
            squares[_index((7, col))] = Piece(Color.WHITE, pt)
        return cls(squares)

    @classmethod
    def from_pieces(cls, pieces: Mapping[Square, Piece]) -> Board:
        return cls().with_pieces(pieces)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build from an 8x8 nested sequence, row 0 = black's back rank."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board rows must be 8x8")
        return cls([piece for row in rows for piece in row])

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._squares[row * BOARD_SIZE + col]
                cells.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
