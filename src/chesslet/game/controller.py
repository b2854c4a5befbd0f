"""GameController: selection handling and event fan-out for one session.

Translates square clicks into selections and moves, and emits events via
simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chesslet.core.errors import IllegalMoveError
from chesslet.core.move import Destination, HistoryRecord, Move
from chesslet.core.types import Square, square_name
from chesslet.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
UndoCallback = Callable[[HistoryRecord, GameState], None]
NewGameCallback = Callable[[GameState], None]
SelectionCallback = Callable[[Square | None, list[Destination]], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_undo: list[UndoCallback] = field(default_factory=list)
    on_new_game: list[NewGameCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a local two-player game.

    A click on a highlighted destination commits the move; a click on a
    piece of the side to move selects it; any other click clears the
    selection.

    Thread-safety: methods must be called from a single thread (the
    main/UI thread).
    """

    __slots__ = ("_state", "_selected", "_destinations", "events", "__weakref__")

    def __init__(self) -> None:
        self._state = GameState()
        self._selected: Square | None = None
        self._destinations: list[Destination] = []
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    @property
    def destinations(self) -> list[Destination]:
        """Destinations of the selected piece (empty without a selection)."""
        return list(self._destinations)

    # ── Session lifecycle ────────────────────────────────────────────────

    def new_game(self, layout: str | None = None) -> None:
        """Start a fresh session.

        Malformed *layout* text raises ``ValueError`` and keeps the current one.
        """
        state = GameState()
        state.setup(layout)
        self._state = state
        self._set_selection(None, [])
        for cb in self.events.on_new_game:
            cb(self._state)

    def submit_move(self, move: Move) -> bool:
        """Apply *move*. Returns True if it was pseudo-legal and applied."""
        try:
            record = self._state.apply_move(move)
        except IllegalMoveError as exc:
            _LOGGER.debug("Rejected move %s: %s", move, exc)
            return False

        self._set_selection(None, [])
        for cb in self.events.on_move:
            cb(record, self._state)
        return True

    def undo_move(self) -> bool:
        """Undo the last move. Returns True on success."""
        history = self._state.undo_last_move()
        if history is None:
            return False
        self._set_selection(None, [])
        for cb in self.events.on_undo:
            cb(history, self._state)
        return True

    # ── Selection ────────────────────────────────────────────────────────

    def click(self, sq: Square) -> bool:
        """Handle a click on *sq*. Returns True if a move was committed."""
        if self._selected is not None and any(
            dest.square == sq for dest in self._destinations
        ):
            return self.submit_move(Move(self._selected, sq))

        piece = self._state.board[sq]
        if piece is not None and piece.color == self._state.side_to_move:
            self.select(sq)
        else:
            self.clear_selection()
        return False

    def select(self, sq: Square) -> list[Destination]:
        """Select the piece on *sq* and compute its destinations."""
        destinations = self._state.legal_destinations(sq)
        _LOGGER.debug(
            "Selected %s: %d destinations", square_name(sq), len(destinations)
        )
        self._set_selection(sq, destinations)
        return self.destinations

    def clear_selection(self) -> None:
        if self._selected is None:
            return
        self._set_selection(None, [])

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_selection(
        self, sq: Square | None, destinations: list[Destination]
    ) -> None:
        self._selected = sq
        self._destinations = destinations
        for cb in self.events.on_selection_changed:
            cb(sq, self.destinations)
