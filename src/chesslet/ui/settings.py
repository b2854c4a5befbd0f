"""User-configurable front-end settings."""

from __future__ import annotations

from dataclasses import dataclass

from chesslet.ui.styles.theme import DEFAULT_THEME, BoardTheme


@dataclass
class AppSettings:
    """All user-configurable settings."""

    board_theme: str = DEFAULT_THEME
    show_coordinates: bool = True
    show_legal_moves: bool = True
    start_flipped: bool = False

    def theme(self) -> BoardTheme:
        return BoardTheme.by_name(self.board_theme)
