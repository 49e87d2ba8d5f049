"""Fixed-width binary encoding of a board.

Layout: 32 records of 8 bytes, in slot order::

    [kind:1][col:1][row:1][side:1][move_count:4 big-endian]

``turn`` is not part of the payload; decoders are told whose move it is.
"""

from __future__ import annotations

import struct

from emailchess.core.board import PIECE_SLOTS, Board
from emailchess.core.enums import PieceKind, Side
from emailchess.core.errors import BoardDecodeError
from emailchess.core.piece import Piece
from emailchess.core.types import Square, is_on_board

_RECORD = struct.Struct(">BBBBI")

RECORD_SIZE_BYTES = _RECORD.size
BOARD_SIZE_BYTES = RECORD_SIZE_BYTES * PIECE_SLOTS


def encode_piece(piece: Piece) -> bytes:
    return _RECORD.pack(
        int(piece.kind),
        piece.square.col,
        piece.square.row,
        int(piece.side),
        piece.move_count,
    )


def decode_piece(record: bytes) -> Piece:
    """Decode one 8-byte record."""
    if len(record) != RECORD_SIZE_BYTES:
        raise BoardDecodeError(
            f"Piece record must be {RECORD_SIZE_BYTES} bytes, got {len(record)}"
        )
    kind_byte, col, row, side_byte, move_count = _RECORD.unpack(record)
    try:
        kind = PieceKind(kind_byte)
    except ValueError:
        raise BoardDecodeError(f"Unknown piece kind byte: {kind_byte}") from None
    try:
        side = Side(side_byte)
    except ValueError:
        raise BoardDecodeError(f"Unknown side byte: {side_byte}") from None
    if not is_on_board(col, row):
        raise BoardDecodeError(f"Square out of range: ({col}, {row})")
    return Piece(kind, Square(col, row), side, move_count)


def encode_board(board: Board) -> bytes:
    """Serialize all 32 slots into exactly 256 bytes."""
    return b"".join(encode_piece(p) for p in board)


def decode_board(data: bytes, turn: Side = Side.WHITE) -> Board:
    """Rebuild a board from its 256-byte form.

    Raises:
        BoardDecodeError: wrong length, unknown byte values, off-board
            coordinates, or two live pieces sharing a square.
    """
    if len(data) != BOARD_SIZE_BYTES:
        raise BoardDecodeError(
            f"Board payload must be {BOARD_SIZE_BYTES} bytes, got {len(data)}"
        )
    view = memoryview(data)
    pieces = [
        decode_piece(bytes(view[offset : offset + RECORD_SIZE_BYTES]))
        for offset in range(0, BOARD_SIZE_BYTES, RECORD_SIZE_BYTES)
    ]
    try:
        return Board(pieces, turn)
    except ValueError as exc:
        raise BoardDecodeError(str(exc)) from exc
