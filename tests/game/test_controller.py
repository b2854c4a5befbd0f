"""Tests for GameController (click handling and events)."""

import pytest

from chesslet.core.enums import Color, PieceType
from chesslet.core.move import Destination, HistoryRecord, Move
from chesslet.core.piece import Piece
from chesslet.core.types import (
    A3, B1, C3, D3, E2, E3, E4, E5, E7, F3, G1, Square,
)
from chesslet.game.controller import GameController
from chesslet.game.state import GameState, MoveRecord


def _controller(layout: str | None = None) -> GameController:
    ctrl = GameController()
    ctrl.new_game(layout)
    return ctrl


class TestClickFlow:
    def test_click_own_piece_selects(self) -> None:
        ctrl = _controller()
        assert ctrl.click(E2) is False
        assert ctrl.selected_square == E2
        assert {d.square for d in ctrl.destinations} == {E3, E4}

    def test_click_destination_commits_move(self) -> None:
        ctrl = _controller()
        ctrl.click(E2)
        assert ctrl.click(E4) is True
        assert ctrl.selected_square is None
        assert ctrl.state.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert ctrl.state.side_to_move == Color.BLACK

    def test_click_opponent_piece_does_not_select(self) -> None:
        ctrl = _controller()
        ctrl.click(E7)
        assert ctrl.selected_square is None
        assert ctrl.destinations == []

    def test_click_empty_square_deselects(self) -> None:
        ctrl = _controller()
        ctrl.click(G1)
        assert ctrl.selected_square == G1
        ctrl.click(E5)
        assert ctrl.selected_square is None

    def test_click_other_own_piece_switches_selection(self) -> None:
        ctrl = _controller()
        ctrl.click(E2)
        ctrl.click(B1)
        assert ctrl.selected_square == B1
        assert {d.square for d in ctrl.destinations} == {A3, C3}

    def test_click_capture(self) -> None:
        ctrl = _controller("4k3/8/8/8/8/3p4/4P3/4K3 w")
        ctrl.click(E2)
        captures = [d for d in ctrl.destinations if d.is_capture]
        assert [d.square for d in captures] == [D3]
        assert ctrl.click(D3) is True
        assert ctrl.state.notations == ["e2xd3"]

    def test_select_returns_copy(self) -> None:
        ctrl = _controller()
        dests = ctrl.select(G1)
        dests.clear()
        assert len(ctrl.destinations) == 2


class TestSubmitAndUndo:
    def test_submit_legal(self) -> None:
        ctrl = _controller()
        assert ctrl.submit_move(Move(G1, F3)) is True
        assert ctrl.state.ply_count == 1

    def test_submit_illegal_returns_false(self) -> None:
        ctrl = _controller()
        assert ctrl.submit_move(Move(E2, E5)) is False
        assert ctrl.submit_move(Move(E7, E5)) is False
        assert ctrl.state.ply_count == 0
        assert ctrl.state.side_to_move == Color.WHITE

    def test_undo(self) -> None:
        ctrl = _controller()
        ctrl.submit_move(Move(E2, E4))
        assert ctrl.undo_move() is True
        assert ctrl.state.ply_count == 0
        assert ctrl.state.board[E2] == Piece(Color.WHITE, PieceType.PAWN)

    def test_undo_empty_returns_false(self) -> None:
        ctrl = _controller()
        assert ctrl.undo_move() is False

    def test_new_game_replaces_state(self) -> None:
        ctrl = _controller()
        ctrl.submit_move(Move(E2, E4))
        old = ctrl.state
        ctrl.new_game()
        assert ctrl.state is not old
        assert ctrl.state.ply_count == 0

    def test_new_game_with_bad_layout_keeps_current_game(self) -> None:
        ctrl = _controller()
        ctrl.submit_move(Move(E2, E4))
        ctrl.click(E7)
        old = ctrl.state
        started: list[GameState] = []
        ctrl.events.on_new_game.append(started.append)

        with pytest.raises(ValueError):
            ctrl.new_game("not a layout")

        assert ctrl.state is old
        assert ctrl.state.notations == ["e2-e4"]
        assert ctrl.state.start_layout != "not a layout"
        assert ctrl.selected_square == E7
        assert started == []


class TestEvents:
    def test_new_game_event(self) -> None:
        ctrl = GameController()
        seen: list[GameState] = []
        ctrl.events.on_new_game.append(seen.append)
        ctrl.new_game()
        assert seen == [ctrl.state]

    def test_move_event(self) -> None:
        ctrl = _controller()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda rec, _state: seen.append(rec))
        ctrl.click(E2)
        ctrl.click(E4)
        assert [r.notation for r in seen] == ["e2-e4"]

    def test_rejected_move_fires_nothing(self) -> None:
        ctrl = _controller()
        seen: list[MoveRecord] = []
        ctrl.events.on_move.append(lambda rec, _state: seen.append(rec))
        ctrl.submit_move(Move(E2, E5))
        assert seen == []

    def test_undo_event(self) -> None:
        ctrl = _controller()
        seen: list[HistoryRecord] = []
        ctrl.events.on_undo.append(lambda rec, _state: seen.append(rec))
        ctrl.submit_move(Move(E2, E4))
        ctrl.undo_move()
        assert len(seen) == 1
        assert seen[0].from_sq == E2 and seen[0].to_sq == E4

    def test_selection_events(self) -> None:
        ctrl = _controller()
        seen: list[tuple[Square | None, list[Destination]]] = []
        ctrl.events.on_selection_changed.append(
            lambda sq, dests: seen.append((sq, dests))
        )
        ctrl.click(E2)
        ctrl.click(E4)
        assert seen[0][0] == E2
        assert {d.square for d in seen[0][1]} == {E3, E4}
        assert seen[-1] == (None, [])

    def test_clear_selection_without_selection_is_silent(self) -> None:
        ctrl = _controller()
        seen: list[Square | None] = []
        ctrl.events.on_selection_changed.append(lambda sq, _d: seen.append(sq))
        ctrl.clear_selection()
        assert seen == []
