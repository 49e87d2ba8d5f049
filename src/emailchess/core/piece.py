"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass, replace

from emailchess.core.enums import PieceKind, Side
from emailchess.core.types import Square

# Stored on the wire as an unsigned 32-bit integer.
MAX_MOVE_COUNT = 2**32 - 1

_LABELS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.ROOK: "R",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}

_KINDS_BY_LABEL: dict[str, PieceKind] = {v: k for k, v in _LABELS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable record of one board slot.

    ``move_count`` only matters for pawns (first-move double step) but is
    tracked for every piece.
    """

    kind: PieceKind
    square: Square
    side: Side
    move_count: int = 0

    @property
    def is_alive(self) -> bool:
        return self.kind != PieceKind.DEAD

    # ── Derived copies ───────────────────────────────────────────────────

    def killed(self) -> Piece:
        """Same slot, now dead. The square is kept but no longer matters."""
        return replace(self, kind=PieceKind.DEAD)

    def moved_to(self, square: Square) -> Piece:
        """Relocated copy with the move counter bumped (saturating)."""
        return replace(
            self,
            square=square,
            move_count=min(self.move_count + 1, MAX_MOVE_COUNT),
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """One-letter label (uppercase = white), ``.`` for a dead slot."""
        if not self.is_alive:
            return "."
        label = _LABELS[self.kind]
        return label if self.side == Side.WHITE else label.lower()

    @classmethod
    def from_char(cls, char: str, square: Square, move_count: int = 0) -> Piece:
        """Create a live piece from its label, e.g. ``'N'`` → white knight."""
        try:
            kind = _KINDS_BY_LABEL[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        side = Side.WHITE if char.isupper() else Side.BLACK
        return cls(kind, square, side, move_count)
