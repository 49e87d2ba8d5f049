"""GameController — drives the select-then-move input protocol.

Coordinates: GameState, the move validator and the board codec.
Emits events via simple callbacks so a host UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from emailchess.core.board import Board
from emailchess.core.codec import encode_board
from emailchess.core.move_validator import legal_targets, validate_move
from emailchess.core.types import Square
from emailchess.game.interfaces import IGameController
from emailchess.game.settings import GameSettings
from emailchess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
SelectionCallback = Callable[[Square | None], None]
ExportCallback = Callable[[bytes], None]  # 256-byte board payload


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_board_exported: list[ExportCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Turns square clicks into validated, committed moves.

    A first click on a live piece selects it. The next click, wherever it
    lands, attempts the move and clears the selection whether or not the
    move was legal.

    Thread-safety: all methods are expected to run on the host's frame /
    UI thread; the board is never shared across threads.
    """

    __slots__ = ("_state", "_settings", "events")

    def __init__(self, settings: GameSettings | None = None) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._state = GameState()
        self._state.board.turn = self._settings.starting_side
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def settings(self) -> GameSettings:
        return self._settings

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(self, board: Board | None = None) -> None:
        if board is None:
            board = Board.initial()
            board.turn = self._settings.starting_side
        self._state = GameState(board)
        self._emit_selection(None)

    def click(self, square: Square) -> MoveRecord | None:
        state = self._state
        origin = state.selected
        if origin is None:
            if state.select(square):
                self._emit_selection(square)
            return None

        verdict = validate_move(state.board, origin, square)
        record = state.commit(origin, square, verdict) if verdict.can_move else None
        if record is None:
            _LOGGER.debug("Move %s -> %s not committed (%s)", origin, square, verdict)

        state.clear_selection()
        self._emit_selection(None)

        if record is not None:
            _LOGGER.info(
                "%s %s moved %s -> %s%s",
                record.piece.side,
                record.piece.kind.name.lower(),
                origin,
                square,
                " capturing" if record.was_capture else "",
            )
            self._emit_move(record)
            if self._settings.export_on_commit:
                self.export_board()
        return record

    def legal_targets(self) -> list[Square]:
        origin = self._state.selected
        if origin is None:
            return []
        return legal_targets(self._state.board, origin)

    # ── Export ───────────────────────────────────────────────────────────

    def export_board(self) -> bytes:
        """Encode the current board and hand it to export listeners."""
        payload = encode_board(self._state.board)
        _LOGGER.debug("Exporting board snapshot (%d bytes)", len(payload))
        for cb in self.events.on_board_exported:
            cb(payload)
        return payload

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_selection(self, square: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(square)
