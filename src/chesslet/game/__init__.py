"""Game management layer: session state and click-driven controller.

Quick start::

    from chesslet.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))
"""

from chesslet.game.controller import GameController, GameEvents
from chesslet.game.state import GameState, MoveRecord, new_game

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "new_game",
]
