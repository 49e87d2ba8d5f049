"""Tests for Board."""

import pytest

from emailchess.core.board import PIECE_SLOTS, Board
from emailchess.core.enums import PieceKind, Side
from emailchess.core.piece import MAX_MOVE_COUNT, Piece
from emailchess.core.types import Square


class TestBoardInitial:
    def test_slot_count(self, initial_board: Board) -> None:
        assert len(initial_board) == PIECE_SLOTS
        assert len(initial_board.live_pieces()) == 32

    def test_white_to_move(self, initial_board: Board) -> None:
        assert initial_board.turn == Side.WHITE

    def test_kings_and_queens(self, initial_board: Board) -> None:
        assert initial_board.piece_at(Square(3, 7)) == Piece(
            PieceKind.KING, Square(3, 7), Side.WHITE
        )
        assert initial_board.piece_at(Square(4, 7)) == Piece(
            PieceKind.QUEEN, Square(4, 7), Side.WHITE
        )
        assert initial_board.piece_at(Square(3, 0)) == Piece(
            PieceKind.KING, Square(3, 0), Side.BLACK
        )
        assert initial_board.piece_at(Square(4, 0)) == Piece(
            PieceKind.QUEEN, Square(4, 0), Side.BLACK
        )

    def test_back_ranks(self, initial_board: Board) -> None:
        expected = [
            PieceKind.ROOK, PieceKind.KNIGHT, PieceKind.BISHOP, PieceKind.KING,
            PieceKind.QUEEN, PieceKind.BISHOP, PieceKind.KNIGHT, PieceKind.ROOK,
        ]
        for col, kind in enumerate(expected):
            white = initial_board.piece_at(Square(col, 7))
            black = initial_board.piece_at(Square(col, 0))
            assert white is not None and white.kind == kind
            assert black is not None and black.kind == kind
            assert white.side == Side.WHITE
            assert black.side == Side.BLACK

    def test_pawns(self, initial_board: Board) -> None:
        for col in range(8):
            assert initial_board.piece_at(Square(col, 1)).side == Side.BLACK
            assert initial_board.piece_at(Square(col, 6)).side == Side.WHITE
            assert initial_board.piece_at(Square(col, 6)).kind == PieceKind.PAWN

    def test_empty_middle(self, initial_board: Board) -> None:
        for row in range(2, 6):
            for col in range(8):
                assert not initial_board.is_occupied(Square(col, row))

    def test_all_move_counts_zero(self, initial_board: Board) -> None:
        assert all(p.move_count == 0 for p in initial_board)


class TestBoardConstruction:
    def test_wrong_slot_count_raises(self) -> None:
        with pytest.raises(ValueError, match="32 piece slots"):
            Board([Piece(PieceKind.PAWN, Square(0, 0), Side.WHITE)])

    def test_shared_square_raises(self) -> None:
        pieces = [
            Piece(PieceKind.PAWN, Square(2, 2), Side.WHITE),
            Piece(PieceKind.ROOK, Square(2, 2), Side.BLACK),
        ]
        with pytest.raises(ValueError, match="both occupy"):
            Board.from_pieces(pieces)

    def test_dead_pieces_may_share_squares(self) -> None:
        pieces = [
            Piece(PieceKind.PAWN, Square(2, 2), Side.WHITE),
            Piece(PieceKind.DEAD, Square(2, 2), Side.BLACK),
        ]
        board = Board.from_pieces(pieces)
        assert board.piece_at(Square(2, 2)) == pieces[0]

    def test_off_board_slot_raises(self) -> None:
        with pytest.raises(ValueError, match="off the board"):
            Board.from_pieces([Piece(PieceKind.KING, Square(8, 0), Side.WHITE)])

    def test_too_many_pieces_raises(self) -> None:
        pieces = [
            Piece(PieceKind.PAWN, Square(i % 8, i // 8), Side.WHITE) for i in range(33)
        ]
        with pytest.raises(ValueError, match="At most 32"):
            Board.from_pieces(pieces)

    def test_from_diagram(self) -> None:
        board = Board.from_diagram(
            [
                "r.......",
                "........",
                "........",
                "...Q....",
                "........",
                "........",
                "........",
                ".......K",
            ],
            turn=Side.BLACK,
        )
        assert board.turn == Side.BLACK
        assert board.piece_at(Square(0, 0)) == Piece(
            PieceKind.ROOK, Square(0, 0), Side.BLACK
        )
        assert board.piece_at(Square(3, 3)).kind == PieceKind.QUEEN
        assert board.piece_at(Square(7, 7)).side == Side.WHITE
        assert len(board.live_pieces()) == 3

    def test_from_diagram_bad_shape(self) -> None:
        with pytest.raises(ValueError, match="8 rows"):
            Board.from_diagram(["........"])


class TestBoardOperations:
    def test_dead_piece_not_occupying(self) -> None:
        piece = Piece(PieceKind.DEAD, Square(4, 4), Side.WHITE)
        board = Board.from_pieces([piece])
        assert board.piece_at(Square(4, 4)) is None
        assert not board.is_occupied(Square(4, 4))

    def test_setitem_updates_index(self, initial_board: Board) -> None:
        index = initial_board.index_at(Square(4, 6))
        assert index is not None
        initial_board[index] = initial_board[index].moved_to(Square(4, 4))
        assert not initial_board.is_occupied(Square(4, 6))
        assert initial_board.index_at(Square(4, 4)) == index

    def test_setitem_kill_removes_from_index(self, initial_board: Board) -> None:
        index = initial_board.index_at(Square(0, 0))
        initial_board[index] = initial_board[index].killed()
        assert initial_board.piece_at(Square(0, 0)) is None
        assert initial_board[index].square == Square(0, 0)

    def test_setitem_collision_keeps_board_intact(self, initial_board: Board) -> None:
        index = initial_board.index_at(Square(0, 0))
        with pytest.raises(ValueError):
            initial_board[index] = initial_board[index].moved_to(Square(0, 1))
        assert initial_board.index_at(Square(0, 0)) == index
        assert initial_board[index].move_count == 0

    def test_any_occupied(self, initial_board: Board) -> None:
        assert initial_board.any_occupied([Square(3, 3), Square(0, 1)])
        assert not initial_board.any_occupied([Square(3, 3), Square(4, 4)])
        assert not initial_board.any_occupied([])

    def test_live_pieces_by_side(self, initial_board: Board) -> None:
        assert len(initial_board.live_pieces(Side.WHITE)) == 16
        assert len(initial_board.live_pieces(Side.BLACK)) == 16

    def test_copy_independence(self, initial_board: Board) -> None:
        copy = initial_board.copy()
        assert copy == initial_board
        copy.flip_turn()
        assert copy != initial_board
        assert initial_board.turn == Side.WHITE

    def test_flip_turn(self, initial_board: Board) -> None:
        initial_board.flip_turn()
        assert initial_board.turn == Side.BLACK
        initial_board.flip_turn()
        assert initial_board.turn == Side.WHITE

    def test_repr_not_empty(self, initial_board: Board) -> None:
        text = repr(initial_board)
        assert "K" in text and "k" in text
        assert "0 1 2 3 4 5 6 7" in text
        assert "turn: white" in text

    def test_setitem_off_board_raises(self) -> None:
        board = Board.from_pieces([Piece(PieceKind.KING, Square(0, 0), Side.WHITE)])
        with pytest.raises(ValueError, match="leave the board"):
            board[0] = board[0].moved_to(Square(-1, -1))
        assert board.piece_at(Square(0, 0)) == board[0]
        assert board[0].move_count == 0


class TestPiece:
    def test_labels(self) -> None:
        assert str(Piece(PieceKind.KNIGHT, Square(0, 0), Side.WHITE)) == "N"
        assert str(Piece(PieceKind.KNIGHT, Square(0, 0), Side.BLACK)) == "n"
        assert str(Piece(PieceKind.DEAD, Square(0, 0), Side.BLACK)) == "."

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x", Square(0, 0))

    def test_moved_to_bumps_counter(self) -> None:
        piece = Piece(PieceKind.PAWN, Square(4, 6), Side.WHITE)
        moved = piece.moved_to(Square(4, 5))
        assert moved.square == Square(4, 5)
        assert moved.move_count == 1
        assert piece.move_count == 0

    def test_move_count_saturates(self) -> None:
        piece = Piece(PieceKind.KING, Square(4, 4), Side.WHITE, MAX_MOVE_COUNT)
        assert piece.moved_to(Square(4, 5)).move_count == MAX_MOVE_COUNT

    def test_killed_keeps_square(self) -> None:
        piece = Piece(PieceKind.ROOK, Square(2, 3), Side.BLACK)
        dead = piece.killed()
        assert not dead.is_alive
        assert dead.square == Square(2, 3)
