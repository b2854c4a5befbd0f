"""Board setup text: a FEN-style placement field plus the side to move.

Example (the starting position)::

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w

The first placement group is row 0 (rank 8). Castling, en passant and
clock fields do not exist in this ruleset; extra trailing fields are
rejected.
"""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import make_square

STARTING_LAYOUT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_text(text: str) -> Position:
    """Parse setup text into a :class:`Position` with empty history."""
    parts = text.split()
    if not 1 <= len(parts) <= 2:
        raise ValueError(f"Invalid layout (need 1-2 fields): {text!r}")

    rows = parts[0].split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid layout board (must contain 8 rows): {text!r}")
    board = Board()
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not 1 <= step <= 8:
                    raise ValueError(f"Invalid layout digit {ch!r}: {text!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid layout row width: {text!r}")
                board[make_square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid layout row width: {text!r}")
        if col != 8:
            raise ValueError(f"Invalid layout row width: {text!r}")

    side_part = parts[1] if len(parts) == 2 else "w"
    try:
        side = _SIDES[side_part]
    except KeyError:
        raise ValueError(f"Invalid side-to-move field: {side_part!r}") from None

    return Position(board=board, side_to_move=side)


def position_to_text(position: Position) -> str:
    """Serialise the board and side to move of *position*."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        row_text = ""
        for col in range(8):
            piece = position.board.at(row, col)
            if piece is None:
                empty += 1
                continue
            if empty:
                row_text += str(empty)
                empty = 0
            row_text += str(piece)
        if empty:
            row_text += str(empty)
        rows.append(row_text)
    side = "w" if position.side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side}"
