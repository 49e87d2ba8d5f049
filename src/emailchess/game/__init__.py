"""Game management layer — selection state machine, settings, events.

Quick start::

    from emailchess.core import Square
    from emailchess.game import GameController

    ctrl = GameController()
    ctrl.events.on_board_exported.append(send_to_host)
    ctrl.click(Square(4, 6))  # select the e-pawn
    ctrl.click(Square(4, 4))  # double step

The Qt signal bridge lives in :mod:`emailchess.game.qt_bridge` and is not
imported here so the pure game layer does not require PyQt6 at import time.
"""

from emailchess.game.controller import GameController, GameEvents
from emailchess.game.interfaces import IGameController, SelectionPhase
from emailchess.game.settings import GameSettings
from emailchess.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "IGameController",
    "SelectionPhase",
    # Concrete
    "GameController",
    "GameEvents",
    "GameSettings",
    "GameState",
    "MoveRecord",
]
