"""Square type and coordinate helpers.

Board layout (column, row), both zero-indexed::

    (0,0) (1,0) ... (7,0)    <- Black back rank
    ...
    (0,7) (1,7) ... (7,7)    <- White back rank
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A (column, row) coordinate on the 8x8 grid."""

    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col},{self.row})"


def is_on_board(col: int, row: int) -> bool:
    """Check whether both coordinates lie in ``[0, 7]``."""
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


def make_square(col: int, row: int) -> Square:
    """Create a square, rejecting coordinates outside the board."""
    if not is_on_board(col, row):
        raise ValueError(f"Square out of range: ({col}, {row})")
    return Square(col, row)


def offset_square(sq: Square, d_col: int, d_row: int) -> Square | None:
    """Square shifted by (*d_col*, *d_row*), or ``None`` if it leaves the board."""
    col, row = sq.col + d_col, sq.row + d_row
    if not is_on_board(col, row):
        return None
    return Square(col, row)


def all_squares() -> list[Square]:
    """Every square, row by row."""
    return [Square(col, row) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)]
