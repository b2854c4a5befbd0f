"""Coordinate notation for committed moves, e.g. ``e2-e4``, ``d4xe5``, ``d7-d8=Q``."""

from __future__ import annotations

from collections.abc import Sequence

from chesslet.core.move import HistoryRecord
from chesslet.core.types import Square, square_name


def move_notation(
    from_sq: Square,
    to_sq: Square,
    *,
    capture: bool = False,
    promoted: bool = False,
) -> str:
    """``<from><x|-><to>[=Q]``; a promoted pawn always becomes a queen."""
    text = f"{square_name(from_sq)}{'x' if capture else '-'}{square_name(to_sq)}"
    if promoted:
        text += "=Q"
    return text


def record_notation(record: HistoryRecord) -> str:
    """Notation of the move a :class:`HistoryRecord` describes."""
    return move_notation(
        record.from_sq,
        record.to_sq,
        capture=record.is_capture,
        promoted=record.promotion is not None,
    )


def format_move_list(notations: Sequence[str]) -> list[str]:
    """Numbered move pairs for display: ``["1. e2-e4 e7-e5", "2. g1-f3"]``."""
    lines: list[str] = []
    for idx in range(0, len(notations), 2):
        pair = " ".join(notations[idx : idx + 2])
        lines.append(f"{idx // 2 + 1}. {pair}")
    return lines
