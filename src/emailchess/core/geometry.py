"""Integer helpers shared by the movement rules and board colouring."""

from __future__ import annotations

from emailchess.core.types import Square


def is_even(n: int) -> bool:
    # Low bit clear means even.
    return n & 1 == 0


def is_odd(n: int) -> bool:
    return not is_even(n)


def abs_distance(a: int, b: int) -> int:
    """Unsigned distance between two board-axis coordinates."""
    if a < b:
        return b - a
    return a - b


def is_dark_square(sq: Square) -> bool:
    """Checkerboard colouring: (0,0) is light."""
    if is_even(sq.row):
        return is_odd(sq.col)
    return is_even(sq.col)
