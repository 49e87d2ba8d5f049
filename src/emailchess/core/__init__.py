"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from emailchess.core import Board, Square, apply_move, validate_move

    board = Board.initial()
    verdict = validate_move(board, Square(4, 6), Square(4, 4))
    apply_move(board, Square(4, 6), Square(4, 4), verdict)
"""

from emailchess.core.board import PIECE_SLOTS, Board
from emailchess.core.codec import (
    BOARD_SIZE_BYTES,
    RECORD_SIZE_BYTES,
    decode_board,
    encode_board,
)
from emailchess.core.enums import PieceKind, Side
from emailchess.core.errors import (
    BoardDecodeError,
    BoardDesyncError,
    ChessEngineError,
    SelectionError,
)
from emailchess.core.geometry import abs_distance, is_dark_square, is_even, is_odd
from emailchess.core.move_applicator import apply_move
from emailchess.core.move_validator import (
    ILLEGAL,
    MoveVerdict,
    Occupancy,
    legal_targets,
    validate_move,
)
from emailchess.core.piece import MAX_MOVE_COUNT, Piece
from emailchess.core.types import Square, is_on_board, make_square, offset_square

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "Square",
    "abs_distance",
    "is_dark_square",
    "is_even",
    "is_odd",
    "is_on_board",
    "make_square",
    "offset_square",
    # Domain objects
    "MAX_MOVE_COUNT",
    "PIECE_SLOTS",
    "Board",
    "Piece",
    # Rules
    "ILLEGAL",
    "MoveVerdict",
    "Occupancy",
    "apply_move",
    "legal_targets",
    "validate_move",
    # Codec
    "BOARD_SIZE_BYTES",
    "RECORD_SIZE_BYTES",
    "decode_board",
    "encode_board",
    # Errors
    "BoardDecodeError",
    "BoardDesyncError",
    "ChessEngineError",
    "SelectionError",
]
