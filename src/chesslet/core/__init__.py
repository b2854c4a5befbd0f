"""Core domain layer: pure chess logic with zero external dependencies.

Quick start::

    from chesslet.core import Position, legal_destinations, parse_square

    pos = Position()
    for dest in legal_destinations(pos, parse_square("g1")):
        print(dest)
"""

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.errors import ChessletError, IllegalMoveError, InvalidSquareError
from chesslet.core.move import Destination, HistoryRecord, Move
from chesslet.core.move_generator import MoveGenerator, legal_destinations
from chesslet.core.notation import (
    STARTING_LAYOUT,
    format_move_list,
    move_notation,
    position_from_text,
    position_to_text,
    record_notation,
)
from chesslet.core.piece import Piece
from chesslet.core.position import Position
from chesslet.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "ChessletError",
    "IllegalMoveError",
    "InvalidSquareError",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Destination",
    "HistoryRecord",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "legal_destinations",
    # Notation
    "STARTING_LAYOUT",
    "format_move_list",
    "move_notation",
    "position_from_text",
    "position_to_text",
    "record_notation",
]
