"""Notation package: move strings, move-list formatting and board setup text."""

from chesslet.core.notation.algebraic import (
    format_move_list,
    move_notation,
    record_notation,
)
from chesslet.core.notation.layout import (
    STARTING_LAYOUT,
    position_from_text,
    position_to_text,
)

__all__ = [
    "STARTING_LAYOUT",
    "format_move_list",
    "move_notation",
    "position_from_text",
    "position_to_text",
    "record_notation",
]
