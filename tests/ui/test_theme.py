"""Tests for board colour presets."""

from __future__ import annotations

from PyQt6.QtGui import QColor

from chesslet.ui.settings import AppSettings
from chesslet.ui.styles.theme import BoardTheme


def test_unknown_name_falls_back_to_default() -> None:
    assert BoardTheme.by_name("Neon") == BoardTheme.default()


def test_presets_differ_only_in_square_colours() -> None:
    blue, green = BoardTheme.by_name("Blue"), BoardTheme.by_name("Green")
    assert blue.light_square != green.light_square
    assert blue.highlight_capture == green.highlight_capture
    assert blue.highlight_capture != blue.highlight_to


def test_coordinates_use_the_opposite_square_colour() -> None:
    theme = BoardTheme.by_name("Classic")
    assert theme.coord_light == theme.dark_square
    assert theme.coord_dark == theme.light_square
    assert theme.light_square == QColor(240, 217, 181)


def test_settings_resolve_their_theme() -> None:
    assert AppSettings(board_theme="Green").theme() == BoardTheme.by_name("Green")
    assert AppSettings().theme() == BoardTheme.default()
