"""ControlPanel: game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: new game, flip, undo."""

    new_game_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)
        self._btn_new = self._add_button(layout, "New game", btn_font)
        self._btn_new.clicked.connect(self.new_game_clicked)
        self._btn_flip = self._add_button(layout, "Flip board", btn_font)
        self._btn_flip.clicked.connect(self.flip_clicked)
        self._btn_undo = self._add_button(layout, "Undo", btn_font)
        self._btn_undo.clicked.connect(self.undo_clicked)

    @staticmethod
    def _add_button(layout: QHBoxLayout, text: str, font: QFont) -> QPushButton:
        btn = QPushButton(text)
        btn.setFont(font)
        btn.setMinimumHeight(36)
        layout.addWidget(btn)
        return btn

    def set_can_undo(self, enabled: bool) -> None:
        self._btn_undo.setEnabled(enabled)
