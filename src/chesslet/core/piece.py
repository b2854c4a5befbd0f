"""Piece value object and its one-character forms."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color, PieceType

# kind -> (setup letter, white glyph, black glyph)
_FORMS: dict[PieceType, tuple[str, str, str]] = {
    PieceType.PAWN: ("p", "♙", "♟"),
    PieceType.KNIGHT: ("n", "♘", "♞"),
    PieceType.BISHOP: ("b", "♗", "♝"),
    PieceType.ROOK: ("r", "♖", "♜"),
    PieceType.QUEEN: ("q", "♕", "♛"),
    PieceType.KING: ("k", "♔", "♚"),
}

_KIND_BY_LETTER: dict[str, PieceType] = {
    letter: kind for kind, (letter, _, _) in _FORMS.items()
}


def kind_letter(piece_type: PieceType) -> str:
    """Lowercase letter for *piece_type*, e.g. ``"n"`` for a knight."""
    return _FORMS[piece_type][0]


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece. Pieces are replaced on the board, never mutated."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Setup letter: uppercase for White, lowercase for Black."""
        letter = kind_letter(self.piece_type)
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Inverse of :meth:`__str__`; ``"N"`` is a white knight."""
        kind = _KIND_BY_LETTER.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

    @property
    def symbol(self) -> str:
        """Unicode glyph drawn on the board."""
        _, white, black = _FORMS[self.piece_type]
        return white if self.color == Color.WHITE else black

    def promoted(self) -> Piece:
        """The queen this piece becomes on the far rank."""
        return Piece(self.color, PieceType.QUEEN)
