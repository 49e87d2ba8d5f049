"""Commit a validated move onto the board."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from emailchess.core.errors import BoardDesyncError, SelectionError

if TYPE_CHECKING:
    from emailchess.core.board import Board
    from emailchess.core.move_validator import MoveVerdict
    from emailchess.core.piece import Piece
    from emailchess.core.types import Square

_LOGGER = logging.getLogger(__name__)


def apply_move(
    board: Board, origin: Square, target: Square, verdict: MoveVerdict
) -> Piece | None:
    """Apply the move *origin* → *target* described by *verdict*.

    Nothing changes when ``verdict.can_move`` is false or when the mover
    does not belong to the side whose turn it is. Otherwise the defender (if
    capturing) is marked dead, the mover is relocated with its move counter
    bumped, and the turn passes to the other side.

    Returns:
        The mover's updated record, or ``None`` if the move was not committed.
    """
    if not verdict.can_move:
        return None

    mover_index = board.index_at(origin)
    if mover_index is None:
        raise SelectionError(f"No live piece on selected square {origin}")
    mover = board[mover_index]

    if mover.side != board.turn:
        _LOGGER.debug(
            "Rejected %s move %s -> %s: %s to play",
            mover.side,
            origin,
            target,
            board.turn,
        )
        return None

    if verdict.can_capture:
        defender_index = board.index_at(target)
        if defender_index is None:
            raise BoardDesyncError(f"Capture on {target} but the square is empty")
        board[defender_index] = board[defender_index].killed()
    elif board.is_occupied(target):
        raise BoardDesyncError(f"Non-capturing move onto occupied square {target}")

    moved = mover.moved_to(target)
    board[mover_index] = moved
    board.flip_turn()
    return moved
