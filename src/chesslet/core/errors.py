"""Error kinds raised by the engine."""

from __future__ import annotations


class ChessletError(Exception):
    """Base class for engine errors."""


class InvalidSquareError(ChessletError, ValueError):
    """A square index or name lies outside the 8x8 board."""


class IllegalMoveError(ChessletError, ValueError):
    """A move is not pseudo-legal in the current position."""
