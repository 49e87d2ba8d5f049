"""Qt bridge relaying game events to a host application as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from emailchess.core.board import Board
from emailchess.core.types import Square, is_on_board
from emailchess.game.controller import GameController
from emailchess.game.settings import GameSettings


class GameBridge(QObject):
    """Owns a :class:`GameController` and re-emits its events as Qt signals.

    ``board_exported`` carries the 256-byte board payload after each
    committed move; the host decides how to compress and transport it.
    """

    move_committed = pyqtSignal(object)  # MoveRecord
    selection_changed = pyqtSignal(object)  # Square | None
    board_exported = pyqtSignal(object)  # bytes

    __slots__ = ("_controller",)

    def __init__(self, settings: GameSettings | None = None) -> None:
        super().__init__()
        self._controller = GameController(settings)
        events = self._controller.events
        events.on_move.append(self.move_committed.emit)
        events.on_selection_changed.append(self.selection_changed.emit)
        events.on_board_exported.append(self.board_exported.emit)

    @property
    def controller(self) -> GameController:
        return self._controller

    @pyqtSlot(int, int)
    def click(self, col: int, row: int) -> None:
        """Handle a click on board cell (*col*, *row*); off-board clicks are ignored."""
        if not is_on_board(col, row):
            return
        self._controller.click(Square(col, row))

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot(object)
    def load_board(self, board_obj: object) -> None:
        """Restart from a given :class:`Board`; other objects are ignored."""
        if not isinstance(board_obj, Board):
            return
        self._controller.new_game(board_obj)
