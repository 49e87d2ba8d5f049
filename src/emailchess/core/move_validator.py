"""Move legality: per-kind movement geometry plus capture resolution.

Each rule is a pure function of the moving piece, the target square and an
:class:`Occupancy` query, so it can be exercised without a full board.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, NamedTuple, Protocol

from emailchess.core.enums import PieceKind
from emailchess.core.errors import SelectionError
from emailchess.core.geometry import abs_distance
from emailchess.core.types import Square, all_squares, is_on_board, offset_square

if TYPE_CHECKING:
    from emailchess.core.board import Board
    from emailchess.core.piece import Piece

_KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, -2),
    (-1, -2),
    (1, 2),
    (-1, 2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)


class Occupancy(Protocol):
    """Read-only view answering "is a live piece standing here?"."""

    def is_occupied(self, sq: Square) -> bool: ...

    def any_occupied(self, squares: Iterable[Square]) -> bool: ...


class MoveVerdict(NamedTuple):
    """Outcome of evaluating one proposed move."""

    can_move: bool
    can_capture: bool


ILLEGAL = MoveVerdict(False, False)


class KindVerdict(NamedTuple):
    """Geometry-only result of a per-kind rule."""

    legal: bool
    capture_capable: bool


_NO = KindVerdict(False, False)


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def squares_between(a: Square, b: Square) -> list[Square]:
    """Squares strictly between *a* and *b* along a row, column or diagonal.

    Returns an empty list when the squares are not aligned or adjacent.
    """
    d_col = b.col - a.col
    d_row = b.row - a.row
    diagonal = abs_distance(a.col, b.col) == abs_distance(a.row, b.row)
    if not (d_col == 0 or d_row == 0 or diagonal):
        return []
    step_col, step_row = _sign(d_col), _sign(d_row)
    steps = max(abs_distance(a.col, b.col), abs_distance(a.row, b.row))
    return [
        Square(a.col + step_col * i, a.row + step_row * i) for i in range(1, steps)
    ]


# ── Per-kind rules ───────────────────────────────────────────────────────────


def pawn_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    """Straight advance onto an empty square, or a one-step diagonal capture.

    The double step on a pawn's first move does not look at the square it
    passes over.
    """
    advance = (target.row - mover.square.row) * mover.side.forward
    same_col = target.col == mover.square.col

    if same_col:
        if advance == 1 or (advance == 2 and mover.move_count == 0):
            if not occupancy.is_occupied(target):
                return KindVerdict(True, False)
        return _NO

    if advance == 1 and abs_distance(target.col, mover.square.col) == 1:
        if occupancy.is_occupied(target):
            return KindVerdict(True, True)
    return _NO


def rook_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    same_col = target.col == mover.square.col
    same_row = target.row == mover.square.row
    # Exactly one axis may be shared; sharing both is the zero-length move.
    if same_col == same_row:
        return _NO
    if occupancy.any_occupied(squares_between(mover.square, target)):
        return _NO
    return KindVerdict(True, True)


def bishop_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    if target == mover.square:
        return _NO
    if abs_distance(target.col, mover.square.col) != abs_distance(
        target.row, mover.square.row
    ):
        return _NO
    if occupancy.any_occupied(squares_between(mover.square, target)):
        return _NO
    return KindVerdict(True, True)


def queen_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    if abs_distance(target.col, mover.square.col) == abs_distance(
        target.row, mover.square.row
    ):
        return bishop_rule(mover, target, occupancy)
    return rook_rule(mover, target, occupancy)


def king_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    # dx == dy == 0 passes here; the occupied own square refuses it later.
    del occupancy
    legal = (
        abs_distance(target.col, mover.square.col) <= 1
        and abs_distance(target.row, mover.square.row) <= 1
    )
    return KindVerdict(legal, True)


def knight_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    del occupancy
    candidates = (offset_square(mover.square, dc, dr) for dc, dr in _KNIGHT_OFFSETS)
    return KindVerdict(target in candidates, True)


def dead_rule(mover: Piece, target: Square, occupancy: Occupancy) -> KindVerdict:
    del mover, target, occupancy
    return _NO


KindRule = Callable[["Piece", Square, Occupancy], KindVerdict]

RULES: dict[PieceKind, KindRule] = {
    PieceKind.PAWN: pawn_rule,
    PieceKind.ROOK: rook_rule,
    PieceKind.KNIGHT: knight_rule,
    PieceKind.BISHOP: bishop_rule,
    PieceKind.QUEEN: queen_rule,
    PieceKind.KING: king_rule,
    PieceKind.DEAD: dead_rule,
}


# ── Validator ────────────────────────────────────────────────────────────────


def validate_move(board: Board, origin: Square, target: Square) -> MoveVerdict:
    """Evaluate moving the live piece on *origin* to *target*.

    Whose turn it is does not affect the verdict; the applicator checks it.
    A target off the board is simply illegal.

    Raises:
        SelectionError: *origin* holds no live piece.
    """
    mover = board.piece_at(origin)
    if mover is None:
        raise SelectionError(f"No live piece on selected square {origin}")
    if not is_on_board(target.col, target.row):
        return ILLEGAL

    kind_verdict = RULES[mover.kind](mover, target, board)
    if not kind_verdict.legal:
        return ILLEGAL

    defender = board.piece_at(target)
    if defender is None:
        return MoveVerdict(True, False)
    if defender.side != mover.side and kind_verdict.capture_capable:
        return MoveVerdict(True, True)
    # Never share a square with another live piece.
    return ILLEGAL


def legal_targets(board: Board, origin: Square) -> list[Square]:
    """All squares the piece on *origin* may move to, row by row."""
    return [sq for sq in all_squares() if validate_move(board, origin, sq).can_move]
