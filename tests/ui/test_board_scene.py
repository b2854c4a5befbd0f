"""Tests for BoardScene drawing and click reporting."""

from __future__ import annotations

from PyQt6.QtCore import QPointF

from chesslet.core.move import Destination, Move
from chesslet.core.notation import position_from_text
from chesslet.core.position import Position
from chesslet.core.types import A8, D3, E2, E3, E4, H1, parse_square
from chesslet.ui.board.board_scene import BoardScene
from chesslet.ui.styles.theme import BoardTheme


def _center(scene: BoardScene, vc: int, vr: int) -> QPointF:
    t = scene.TILE
    return QPointF(vc * t + t / 2, vr * t + t / 2)


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == A8

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == H1


def test_pos_to_square_outside_board_is_none() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-5, 10)) is None
    assert scene._pos_to_square(QPointF(8 * scene.TILE + 1, 10)) is None


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_set_position_draws_one_glyph_per_piece() -> None:
    scene = BoardScene()
    scene.set_position(Position())
    assert len(scene._piece_items) == 32
    assert scene._piece_items[E2].text() == "♙"
    assert scene._piece_items[parse_square("e8")].text() == "♚"


def test_show_selection_marks_captures_with_capture_color() -> None:
    scene = BoardScene()
    scene.set_position(position_from_text("4k3/8/8/8/8/3p4/4P3/4K3 w"))
    dests = [Destination(E3), Destination(E4), Destination(D3, is_capture=True)]

    scene.show_selection(E2, dests)

    assert len(scene._highlight_items) == 1
    assert len(scene._legal_dot_items) == 3
    colors = [item.brush().color() for item in scene._legal_dot_items]
    assert colors.count(scene._theme.highlight_capture) == 1


def test_set_show_legal_moves_false_clears_existing_dots() -> None:
    scene = BoardScene()
    scene.set_position(Position())
    scene.show_selection(E2, [Destination(E3), Destination(E4)])

    scene.set_show_legal_moves(False)
    assert scene._legal_dot_items == []
    assert len(scene._highlight_items) == 1

    scene.set_show_legal_moves(True)
    assert len(scene._legal_dot_items) == 2


def test_clear_selection_removes_highlights() -> None:
    scene = BoardScene()
    scene.show_selection(E2, [Destination(E4)])
    scene.clear_selection()
    assert scene._highlight_items == []
    assert scene._legal_dot_items == []


def test_highlight_last_move_survives_flip() -> None:
    pos = Position()
    record = pos.make_move(Move(E2, E4))
    scene = BoardScene()
    scene.set_position(pos)

    scene.highlight_last_move(record)
    assert len(scene._last_move_highlights) == 2

    scene.set_flipped(True)
    assert len(scene._last_move_highlights) == 2

    scene.highlight_last_move(None)
    assert scene._last_move_highlights == []


def test_set_theme_recolors_squares() -> None:
    scene = BoardScene()
    theme = BoardTheme.by_name("Green")
    scene.set_theme(theme)
    assert scene._square_items[A8].brush().color() == theme.light_square


def test_click_emits_square() -> None:
    scene = BoardScene()
    scene.set_position(Position())
    clicked: list[int] = []
    scene.square_clicked.connect(clicked.append)

    scene._emit_square_at(_center(scene, 4, 6))
    assert clicked == [E2]

    scene.set_flipped(True)
    scene._emit_square_at(_center(scene, 3, 1))
    assert clicked == [E2, E2]


def test_click_before_any_position_is_ignored() -> None:
    scene = BoardScene()
    clicked: list[int] = []
    scene.square_clicked.connect(clicked.append)

    scene._emit_square_at(_center(scene, 4, 6))
    assert clicked == []
