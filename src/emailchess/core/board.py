"""Board - the fixed 32-slot piece arena plus whose turn it is."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from emailchess.core.enums import PieceKind, Side
from emailchess.core.piece import Piece
from emailchess.core.types import BOARD_SIZE, Square, is_on_board

PIECE_SLOTS = 32

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.KING,
    PieceKind.QUEEN,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

# Placeholder for unused slots of a partially populated board.
_EMPTY_SLOT = Piece(PieceKind.DEAD, Square(0, 0), Side.BLACK)


class Board:
    """Mutable arena of exactly 32 piece slots with a live-square index.

    Slot indexes are stable for the lifetime of the board and define the
    serialization order. Only live pieces are present in the square index,
    so a dead slot never counts as occupying its last square.
    """

    __slots__ = ("_slots", "_by_square", "turn")

    def __init__(self, pieces: Sequence[Piece], turn: Side = Side.WHITE) -> None:
        if len(pieces) != PIECE_SLOTS:
            raise ValueError(
                f"Board needs {PIECE_SLOTS} piece slots, got {len(pieces)}"
            )
        self._slots: list[Piece] = list(pieces)
        self._by_square: dict[Square, int] = {}
        self.turn = turn
        for index, piece in enumerate(self._slots):
            if not is_on_board(piece.square.col, piece.square.row):
                raise ValueError(f"Slot {index} is off the board: {piece.square}")
            if piece.is_alive:
                self._index(index, piece)

    def _index(self, index: int, piece: Piece) -> None:
        other = self._by_square.get(piece.square)
        if other is not None and other != index:
            raise ValueError(
                f"Slots {other} and {index} both occupy {piece.square}"
            )
        self._by_square[piece.square] = index

    # -- Element access -----------------------------------------------------

    def __getitem__(self, index: int) -> Piece:
        return self._slots[index]

    def __setitem__(self, index: int, piece: Piece) -> None:
        """Replace slot *index*, keeping the square index in sync."""
        if not is_on_board(piece.square.col, piece.square.row):
            raise ValueError(f"Slot {index} would leave the board: {piece.square}")
        old = self._slots[index]
        if old.is_alive and self._by_square.get(old.square) == index:
            del self._by_square[old.square]
        if piece.is_alive:
            try:
                self._index(index, piece)
            except ValueError:
                if old.is_alive:
                    self._by_square[old.square] = index
                raise
        self._slots[index] = piece

    def __len__(self) -> int:
        return PIECE_SLOTS

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._slots)

    # -- Query helpers ------------------------------------------------------

    def index_at(self, sq: Square) -> int | None:
        """Slot index of the live piece on *sq*, if any."""
        return self._by_square.get(sq)

    def piece_at(self, sq: Square) -> Piece | None:
        """Live piece on *sq*, if any."""
        index = self._by_square.get(sq)
        return None if index is None else self._slots[index]

    def is_occupied(self, sq: Square) -> bool:
        return sq in self._by_square

    def any_occupied(self, squares: Iterable[Square]) -> bool:
        """Whether a live piece stands on any of *squares*."""
        return any(sq in self._by_square for sq in squares)

    def live_pieces(self, side: Side | None = None) -> list[Piece]:
        """Live pieces, optionally restricted to *side*, in slot order."""
        return [
            p
            for p in self._slots
            if p.is_alive and (side is None or p.side == side)
        ]

    @property
    def pieces(self) -> tuple[Piece, ...]:
        """All 32 slots in serialization order."""
        return tuple(self._slots)

    # -- Mutation / copying -------------------------------------------------

    def flip_turn(self) -> None:
        self.turn = self.turn.opposite

    def copy(self) -> Board:
        return Board(self._slots, self.turn)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout, White to move."""
        pieces: list[Piece] = []
        for col in range(BOARD_SIZE):
            pieces.append(Piece(PieceKind.PAWN, Square(col, 1), Side.BLACK))
        for col in range(BOARD_SIZE):
            pieces.append(Piece(PieceKind.PAWN, Square(col, 6), Side.WHITE))
        for col, kind in enumerate(_BACK_RANK):
            pieces.append(Piece(kind, Square(col, 7), Side.WHITE))
        for col, kind in enumerate(_BACK_RANK):
            pieces.append(Piece(kind, Square(col, 0), Side.BLACK))
        return cls(pieces)

    @classmethod
    def from_pieces(cls, live: Iterable[Piece], turn: Side = Side.WHITE) -> Board:
        """Board holding *live* pieces, remaining slots padded as dead."""
        pieces = list(live)
        if len(pieces) > PIECE_SLOTS:
            raise ValueError(f"At most {PIECE_SLOTS} pieces fit on a board")
        pieces.extend([_EMPTY_SLOT] * (PIECE_SLOTS - len(pieces)))
        return cls(pieces, turn)

    @classmethod
    def from_diagram(cls, rows: Sequence[str], turn: Side = Side.WHITE) -> Board:
        """Build a board from 8 strings of 8 labels, row 0 first; ``.`` is empty."""
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Diagram must be 8 rows of 8 characters")
        live = [
            Piece.from_char(char, Square(col, row))
            for row, text in enumerate(rows)
            for col, char in enumerate(text)
            if char != "."
        ]
        return cls.from_pieces(live, turn)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._slots == other._slots and self.turn == other.turn

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at(Square(col, row))
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        rows.append(f"turn: {self.turn}")
        return "\n".join(rows)
