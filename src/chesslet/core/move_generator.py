"""Pseudo-legal destination generation.

Moves that leave the mover's own king attacked are *not* filtered out:
this ruleset has no notion of check.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Destination
from chesslet.core.types import (
    Square,
    col_of,
    is_promotion_square,
    make_square,
    on_board,
    row_of,
    validate_square,
)

if TYPE_CHECKING:
    from chesslet.core.board import Board
    from chesslet.core.piece import Piece
    from chesslet.core.position import Position


# (row delta, column delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        row, col = row_of(sq), col_of(sq)
        targets.append(
            tuple(
                make_square(row + dr, col + dc)
                for dr, dc in offsets
                if on_board(row + dr, col + dc)
            )
        )
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            row, col = row_of(sq) + dr, col_of(sq) + dc
            ray: list[Square] = []
            while on_board(row, col):
                ray.append(make_square(row, col))
                row += dr
                col += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Computes pseudo-legal destinations for pieces of a :class:`Position`.

    The generator never mutates the position.
    """

    __slots__ = ("_pos", "_board", "_dispatch")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board: Board = position.board
        self._dispatch: dict[
            PieceType, Callable[[Square, Color, list[Destination]], None]
        ] = {
            PieceType.PAWN: self._gen_pawn,
            PieceType.KNIGHT: self._gen_knight,
            PieceType.BISHOP: self._gen_bishop,
            PieceType.ROOK: self._gen_rook,
            PieceType.QUEEN: self._gen_queen,
            PieceType.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: Square) -> list[Destination]:
        """Reachable squares for whatever piece stands on *sq*.

        Raises :class:`~chesslet.core.errors.InvalidSquareError` for an
        off-board index; an empty square yields an empty list.
        """
        piece = self._board[validate_square(sq)]
        if piece is None:
            return []
        result: list[Destination] = []
        self._dispatch[piece.piece_type](sq, piece.color, result)
        return result

    def all_destinations(self) -> list[tuple[Square, Destination]]:
        """Every (origin, destination) pair for the side to move."""
        color = self._pos.side_to_move
        return [
            (sq, dest)
            for sq in self._board.all_pieces(color)
            for dest in self.destinations(sq)
        ]

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        board = self._board
        row, col = row_of(sq), col_of(sq)
        step = color.pawn_direction
        ahead = row + step
        if not 0 <= ahead < 8:
            return
        one_step = make_square(ahead, col)
        promotes = is_promotion_square(one_step)

        if board.is_empty(one_step):
            moves.append(Destination(one_step, promotes=promotes))
            if row == color.pawn_start_row:
                two_step = make_square(row + 2 * step, col)
                if board.is_empty(two_step):
                    moves.append(Destination(two_step))

        for dc in (-1, 1):
            if not 0 <= col + dc < 8:
                continue
            cap_sq = make_square(ahead, col + dc)
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(
                    Destination(cap_sq, is_capture=True, promotes=promotes)
                )

    def _gen_knight(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        self._gen_stepping(_KNIGHT_TARGETS[sq], color, moves)

    def _gen_king(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        self._gen_stepping(_KING_TARGETS[sq], color, moves)

    def _gen_bishop(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        self._gen_sliding(_BISHOP_RAYS[sq], color, moves)

    def _gen_rook(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        self._gen_sliding(_ROOK_RAYS[sq], color, moves)

    def _gen_queen(self, sq: Square, color: Color, moves: list[Destination]) -> None:
        self._gen_sliding(_QUEEN_RAYS[sq], color, moves)

    def _gen_stepping(
        self,
        targets: tuple[Square, ...],
        color: Color,
        moves: list[Destination],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None:
                moves.append(Destination(to_sq))
            elif target.color != color:
                moves.append(Destination(to_sq, is_capture=True))

    def _gen_sliding(
        self,
        rays: tuple[tuple[Square, ...], ...],
        color: Color,
        moves: list[Destination],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target: Piece | None = board[to_sq]
                if target is None:
                    moves.append(Destination(to_sq))
                    continue
                if target.color != color:
                    moves.append(Destination(to_sq, is_capture=True))
                break


def legal_destinations(position: Position, sq: Square) -> list[Destination]:
    """Pseudo-legal destinations of the piece on *sq* in *position*."""
    return MoveGenerator(position).destinations(sq)
