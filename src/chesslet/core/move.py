"""Move, destination and history value objects."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.core.enums import Color, PieceType
from chesslet.core.piece import Piece, kind_letter
from chesslet.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += kind_letter(self.promotion)
        return base


@dataclass(frozen=True, slots=True)
class Destination:
    """A reachable square for the piece being inspected."""

    square: Square
    is_capture: bool = False
    promotes: bool = False


@dataclass(frozen=True, slots=True)
class HistoryRecord:
    """Snapshot pushed for each committed move so it can be undone."""

    from_sq: Square
    to_sq: Square
    moved_piece: Piece
    captured_piece: Piece | None
    promotion: PieceType | None
    turn_before: Color

    @property
    def is_capture(self) -> bool:
        return self.captured_piece is not None
