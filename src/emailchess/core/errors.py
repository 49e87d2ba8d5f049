"""Exception hierarchy for contract and boundary failures.

Illegal moves are never exceptions; they come back as a negative
:class:`~emailchess.core.move_validator.MoveVerdict`.
"""

from __future__ import annotations


class ChessEngineError(Exception):
    """Base class for engine errors."""


class SelectionError(ChessEngineError):
    """The selected square does not hold a live piece."""


class BoardDesyncError(ChessEngineError):
    """Caller state and board occupancy disagree (e.g. capture with no defender)."""


class BoardDecodeError(ChessEngineError, ValueError):
    """A serialized board could not be decoded."""
