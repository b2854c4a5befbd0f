"""MovePanel: scrollable list of numbered move pairs."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QListWidget, QVBoxLayout, QWidget

from chesslet.core.notation import format_move_list


class MovePanel(QWidget):
    """Displays the game's move history as ``1. e2-e4 e7-e5`` rows."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._notations: list[str] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Helvetica Neue", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def rows(self) -> list[str]:
        """Text of every displayed row."""
        return [self._list.item(i).text() for i in range(self._list.count())]

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._list.addItems(format_move_list(self._notations))
        self._list.scrollToBottom()

    def add_move(self, notation: str) -> None:
        """Append a move to the panel."""
        self._notations.append(notation)
        self._rebuild_list()

    def remove_last(self) -> None:
        """Remove the last move entry (for undo)."""
        if self._notations:
            self._notations.pop()
            self._rebuild_list()

    def set_history(self, notations: list[str]) -> None:
        """Rebuild the entire move list."""
        self._notations = list(notations)
        self._rebuild_list()
