"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chesslet.core.enums import Color
from chesslet.core.move import Destination, HistoryRecord
from chesslet.core.types import Square
from chesslet.game.controller import GameController
from chesslet.game.state import GameState, MoveRecord
from chesslet.ui.board.board_view import BoardView
from chesslet.ui.panels.control_panel import ControlPanel
from chesslet.ui.panels.move_panel import MovePanel
from chesslet.ui.settings import AppSettings


class MainWindow(QMainWindow):
    """Main application window for Chesslet."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Chesslet")
        self.setMinimumSize(760, 560)
        self.resize(960, 680)

        self._controller = GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        self._controller.new_game()

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        right = QVBoxLayout()
        right.setSpacing(6)

        self._move_panel = MovePanel()
        right.addWidget(self._move_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(300)
        root.addWidget(right_widget)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("&Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_undo = QAction("Undo move", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_game.addAction(self._act_undo)

        self._act_flip = QAction("Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._controller.click)
        self._control_panel.new_game_clicked.connect(self._on_new_game)
        self._control_panel.undo_clicked.connect(self._on_undo)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_undo.append(self._on_game_undo)
        events.on_new_game.append(self._on_game_started)
        events.on_selection_changed.append(self._on_selection_changed)

    def _apply_settings(self) -> None:
        scene = self._board_view.board_scene
        scene.set_theme(self._settings.theme())
        scene.set_show_coordinates(self._settings.show_coordinates)
        scene.set_show_legal_moves(self._settings.show_legal_moves)
        scene.set_flipped(self._settings.start_flipped)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.new_game()

    def _on_undo(self) -> None:
        self._controller.undo_move()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_game_started(self, state: GameState) -> None:
        scene = self._board_view.board_scene
        scene.set_position(state.position)
        scene.highlight_last_move(None)
        self._move_panel.set_history(state.notations)
        self._refresh_status(state)

    def _on_game_move(self, record: MoveRecord, state: GameState) -> None:
        scene = self._board_view.board_scene
        scene.set_position(state.position)
        scene.highlight_last_move(record.history)
        self._move_panel.add_move(record.notation)
        self._refresh_status(state)

    def _on_game_undo(self, _undone: HistoryRecord, state: GameState) -> None:
        scene = self._board_view.board_scene
        scene.set_position(state.position)
        last = state.last_record
        scene.highlight_last_move(last.history if last is not None else None)
        self._move_panel.remove_last()
        self._refresh_status(state)

    def _on_selection_changed(
        self, sq: Square | None, destinations: list[Destination]
    ) -> None:
        scene = self._board_view.board_scene
        if sq is None:
            scene.clear_selection()
        else:
            scene.show_selection(sq, destinations)

    def _refresh_status(self, state: GameState) -> None:
        side = "White" if state.side_to_move == Color.WHITE else "Black"
        text = f"Turn: {side}"
        if not state.has_moves:
            text += " (no moves available)"
        self._status_label.setText(text)
        can_undo = state.ply_count > 0
        self._control_panel.set_can_undo(can_undo)
        self._act_undo.setEnabled(can_undo)
