"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece
from chesslet.core.types import Square, make_square, validate_square

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


class Board:
    """Mutable 64-square board stored row-major."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[validate_square(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[validate_square(sq)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def at(self, row: int, col: int) -> Piece | None:
        """Piece on (*row*, *col*), or None."""
        return self._squares[make_square(row, col)]

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> list[Square]:
        """All occupied squares in index order."""
        return [sq for sq, piece in enumerate(self._squares) if piece is not None]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[make_square(0, col)] = Piece(Color.BLACK, pt)
            b[make_square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(8):
            cells = [str(p) if p else "." for p in self._squares[row * 8 : row * 8 + 8]]
            rows.append(f"{8 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
