"""Game session state: board, turn, move history and undo."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.errors import IllegalMoveError
from chesslet.core.move import Destination, HistoryRecord, Move
from chesslet.core.move_generator import MoveGenerator
from chesslet.core.notation import (
    STARTING_LAYOUT,
    position_from_text,
    record_notation,
)
from chesslet.core.position import Position
from chesslet.core.types import Square, square_name

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveRecord:
    """A single entry in the move history."""

    history: HistoryRecord
    notation: str


@dataclass
class GameState:
    """One local game session: position, history and display notation.

    This is a pure data/logic class with no threading and no UI. The session
    owns its position exclusively; callers must serialise access.
    """

    position: Position = field(default_factory=Position, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    start_layout: str = field(default=STARTING_LAYOUT, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, layout: str | None = None) -> None:
        """Initialise (or reset) the game.

        Raises ``ValueError`` for malformed setup text, leaving the
        session untouched.
        """
        start_layout = layout or STARTING_LAYOUT
        position = position_from_text(start_layout)
        self.start_layout = start_layout
        self.position = position
        self.move_history.clear()
        _LOGGER.debug("New game from %r", start_layout)

    # ── Move generation ──────────────────────────────────────────────────

    def legal_destinations(self, sq: Square) -> list[Destination]:
        """Pseudo-legal destinations of the piece on *sq* (either color)."""
        return MoveGenerator(self.position).destinations(sq)

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Validate and apply *move*, returning its history entry.

        Raises :class:`IllegalMoveError` if the move is not pseudo-legal for
        the side to move.
        """
        self._validate(move)
        history = self.position.make_move(move)
        record = MoveRecord(history=history, notation=record_notation(history))
        self.move_history.append(record)
        _LOGGER.debug("Move %d: %s", len(self.move_history), record.notation)
        return record

    def undo_last_move(self) -> HistoryRecord | None:
        """Undo the last move. Returns the undone record, or None if empty."""
        if not self.move_history:
            return None
        self.move_history.pop()
        history = self.position.unmake_move()
        _LOGGER.debug("Undid %s", history)
        return history

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self.position.board

    @property
    def side_to_move(self) -> Color:
        return self.position.side_to_move

    @property
    def notations(self) -> list[str]:
        return [record.notation for record in self.move_history]

    @property
    def last_record(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return self.position.ply_count

    @property
    def has_moves(self) -> bool:
        """Whether the side to move has any destination at all."""
        return bool(MoveGenerator(self.position).all_destinations())

    # ── Internal ─────────────────────────────────────────────────────────

    def _validate(self, move: Move) -> Destination:
        piece = self.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {square_name(move.from_sq)}")
        if piece.color != self.side_to_move:
            raise IllegalMoveError(
                f"{piece.color} piece on {square_name(move.from_sq)} "
                f"cannot move on {self.side_to_move}'s turn"
            )
        dest = self._find_destination(move)
        if dest is None:
            raise IllegalMoveError(f"Move {move} is not pseudo-legal")
        if move.promotion is not None and (
            move.promotion != PieceType.QUEEN or not dest.promotes
        ):
            raise IllegalMoveError(f"Unsupported promotion in {move}")
        return dest

    def _find_destination(self, move: Move) -> Destination | None:
        for dest in self.legal_destinations(move.from_sq):
            if dest.square == move.to_sq:
                return dest
        return None


def new_game(layout: str | None = None) -> GameState:
    """A fresh session: canonical start (or *layout*), White to move."""
    state = GameState()
    state.setup(layout)
    return state
