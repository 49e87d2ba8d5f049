"""Game state: the board plus the transient input selection."""

from __future__ import annotations

from dataclasses import dataclass, field

from emailchess.core.board import Board
from emailchess.core.enums import Side
from emailchess.core.move_applicator import apply_move
from emailchess.core.move_validator import MoveVerdict
from emailchess.core.piece import Piece
from emailchess.core.types import Square
from emailchess.game.interfaces import SelectionPhase


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Description of one committed move, handed to listeners."""

    origin: Square
    target: Square
    piece: Piece
    captured: Piece | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass
class GameState:
    """Board ownership and selection tracking.

    This is a pure data/logic class — no Qt, no I/O.
    """

    board: Board = field(default_factory=Board.initial)
    selected: Square | None = field(default=None, init=False)

    # ── Selection ────────────────────────────────────────────────────────

    @property
    def phase(self) -> SelectionPhase:
        if self.selected is None:
            return SelectionPhase.NO_SELECTION
        return SelectionPhase.SELECTED

    def select(self, square: Square) -> bool:
        """Select *square* if a live piece stands on it."""
        if self.board.piece_at(square) is None:
            return False
        self.selected = square
        return True

    def clear_selection(self) -> None:
        self.selected = None

    # ── Move application ─────────────────────────────────────────────────

    def commit(
        self, origin: Square, target: Square, verdict: MoveVerdict
    ) -> MoveRecord | None:
        """Apply a validated move. Returns ``None`` if it was not committed."""
        captured = self.board.piece_at(target) if verdict.can_capture else None
        moved = apply_move(self.board, origin, target, verdict)
        if moved is None:
            return None
        return MoveRecord(origin, target, moved, captured)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def side_to_move(self) -> Side:
        return self.board.turn
