"""Abstract interfaces for the game layer.

The Qt bridge and tests depend on :class:`IGameController`, not on the
concrete controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from emailchess.core.board import Board
    from emailchess.core.types import Square
    from emailchess.game.state import MoveRecord


# ── Selection FSM states ─────────────────────────────────────────────────────


class SelectionPhase(IntEnum):
    """Input state machine: either nothing or one square is selected."""

    NO_SELECTION = auto()
    SELECTED = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """Interface for the select-then-move orchestrator."""

    @abstractmethod
    def new_game(self, board: Board | None = None) -> None:
        """Start over from *board* (default: the starting layout)."""

    @abstractmethod
    def click(self, square: Square) -> MoveRecord | None:
        """Feed one square click. Returns the record if a move was committed."""

    @abstractmethod
    def legal_targets(self) -> list[Square]:
        """Squares the selected piece may move to (empty when nothing is selected)."""
