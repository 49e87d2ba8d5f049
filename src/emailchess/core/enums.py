"""Core enumerations for the chess domain.

Enum values double as the byte values of the board wire format.
"""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color."""

    BLACK = 0
    WHITE = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a pawn advance: White moves up the rows, Black down."""
        return -1 if self is Side.WHITE else 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Piece kinds. ``DEAD`` marks a slot that holds no active piece."""

    DEAD = 0
    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    KING = 5
    QUEEN = 6
