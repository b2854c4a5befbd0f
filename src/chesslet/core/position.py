"""Position: board + side to move with make/unmake."""

from __future__ import annotations

from chesslet.core.board import Board
from chesslet.core.enums import Color, PieceType
from chesslet.core.errors import IllegalMoveError
from chesslet.core.move import HistoryRecord, Move
from chesslet.core.types import is_promotion_square, square_name


class Position:
    """Board + side to move.

    Supports :meth:`make_move` / :meth:`unmake_move` via an internal
    history stack (Command pattern). A position is owned by a single
    session; nothing here is thread-safe.
    """

    __slots__ = ("board", "side_to_move", "_history")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self._history: list[HistoryRecord] = []

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> HistoryRecord:
        """Apply *move* unconditionally and push its undo record.

        The move is trusted to be pseudo-legal; only a missing piece on the
        origin square is rejected.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {square_name(move.from_sq)}")
        captured = self.board[move.to_sq]

        promotion: PieceType | None = None
        placed_piece = piece
        if piece.piece_type == PieceType.PAWN and is_promotion_square(move.to_sq):
            placed_piece = piece.promoted()
            promotion = placed_piece.piece_type

        record = HistoryRecord(
            from_sq=move.from_sq,
            to_sq=move.to_sq,
            moved_piece=piece,
            captured_piece=captured,
            promotion=promotion,
            turn_before=self.side_to_move,
        )
        self._history.append(record)

        self.board[move.from_sq] = None
        self.board[move.to_sq] = placed_piece
        self.side_to_move = self.side_to_move.opposite
        return record

    def unmake_move(self) -> HistoryRecord | None:
        """Undo the last :meth:`make_move`. Returns None if nothing to undo."""
        if not self._history:
            return None
        record = self._history.pop()
        self.board[record.from_sq] = record.moved_piece
        self.board[record.to_sq] = record.captured_piece
        self.side_to_move = record.turn_before
        return record

    # ── Utilities ────────────────────────────────────────────────────────

    @property
    def ply_count(self) -> int:
        return len(self._history)

    def copy(self) -> Position:
        """Independent copy including history."""
        pos = Position(board=self.board.copy(), side_to_move=self.side_to_move)
        pos._history = self._history.copy()
        return pos

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self._history == other._history
        )

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"

