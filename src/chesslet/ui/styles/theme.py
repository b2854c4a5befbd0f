"""Board colour presets and the application style sheet."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

# Overlays shared by every preset
_SELECTED = (255, 255, 0, 100)
_QUIET_TARGET = (0, 0, 0, 40)
_CAPTURE_TARGET = (220, 40, 40, 110)
_LAST_MOVE = (155, 199, 0, 105)
_INK = (20, 20, 20)

# name -> (light square, dark square)
_PRESETS: dict[str, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    "Classic": ((240, 217, 181), (181, 136, 99)),
    "Blue": ((222, 227, 230), (140, 162, 173)),
    "Green": ((236, 238, 220), (112, 149, 120)),
}

DEFAULT_THEME = "Classic"


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor
    highlight_to: QColor
    highlight_capture: QColor
    last_move: QColor
    piece_ink: QColor  # white and black glyphs differ by shape, not colour
    coord_light: QColor  # text drawn on light squares
    coord_dark: QColor  # text drawn on dark squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls.by_name(DEFAULT_THEME)

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Preset called *name*; unknown names give the default preset."""
        light, dark = _PRESETS.get(name, _PRESETS[DEFAULT_THEME])
        return cls(
            light_square=QColor(*light),
            dark_square=QColor(*dark),
            highlight_from=QColor(*_SELECTED),
            highlight_to=QColor(*_QUIET_TARGET),
            highlight_capture=QColor(*_CAPTURE_TARGET),
            last_move=QColor(*_LAST_MOVE),
            piece_ink=QColor(*_INK),
            coord_light=QColor(*dark),
            coord_dark=QColor(*light),
        )


APP_STYLE = """
QMainWindow, QMenuBar, QMenu, QStatusBar { background: #303030; color: #ececec; }
QMenuBar::item:selected, QMenu::item:selected { background: #4a6a8a; }
QLabel { color: #ececec; }
QListWidget { background: #242424; color: #dcdcdc; font-family: monospace; }
QPushButton {
    background: #404040;
    color: #ececec;
    border: 1px solid #5a5a5a;
    border-radius: 3px;
    padding: 5px 12px;
}
QPushButton:hover { background: #4e4e4e; }
QPushButton:disabled { color: #777; }
"""
