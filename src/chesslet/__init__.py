"""Chesslet: a local two-player chess board with pseudo-legal move rules."""

__version__ = "0.1.0"
