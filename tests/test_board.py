"""Tests for the Board geometric primitives."""

import numpy as np
import pytest

from othellocore.board import Board, is_in_board
from othellocore.constants import BOARD_DIM, EMPTY
from othellocore.piece import Piece


def empty_board() -> Board:
    """A board with every square cleared."""
    board = Board()
    board.cells[:] = EMPTY
    return board


class TestStartingLayout:
    """Test the canonical starting position."""

    def test_width(self) -> None:
        """Board.width() is 8, on the class and on instances."""
        assert Board.width() == 8
        assert Board().width() == BOARD_DIM

    def test_storage_is_flat(self) -> None:
        """Cells are stored in a flat array of 64 entries."""
        board = Board()
        assert board.cells.shape == (64,)

    def test_piece_placement(self) -> None:
        """WHITE at (3,3) and (4,4), BLACK at (4,3) and (3,4)."""
        board = Board()
        assert board[3, 3] is Piece.WHITE
        assert board[4, 4] is Piece.WHITE
        assert board[4, 3] is Piece.BLACK
        assert board[3, 4] is Piece.BLACK

    def test_other_squares_empty(self) -> None:
        """Exactly 4 occupied squares, the other 60 empty."""
        board = Board()
        occupied = [(x, y) for y in range(8) for x in range(8) if board[x, y] is not None]
        assert sorted(occupied) == [(3, 3), (3, 4), (4, 3), (4, 4)]
        assert board.count() == 4
        assert board.count(Piece.BLACK) == 2
        assert board.count(Piece.WHITE) == 2

    def test_row_major_layout(self) -> None:
        """(x, y) lives at flat index x + 8 * y."""
        board = Board()
        assert board.cells[3 + 8 * 3] == Piece.WHITE
        assert board.cells[4 + 8 * 3] == Piece.BLACK
        assert board.cells[3 + 8 * 4] == Piece.BLACK

    def test_to_array_indexed_by_row(self) -> None:
        """to_array() is an (8, 8) copy indexed [y, x]."""
        board = Board()
        arr = board.to_array()
        assert arr.shape == (8, 8)
        assert arr[3, 4] == Piece.BLACK  # (x=4, y=3)
        arr[0, 0] = Piece.BLACK
        assert board[0, 0] is None


class TestAccess:
    """Test reading and writing squares."""

    def test_set_and_clear(self) -> None:
        """Squares can be set to a piece and cleared with None."""
        board = Board()
        board[0, 7] = Piece.BLACK
        assert board[0, 7] is Piece.BLACK
        board[0, 7] = None
        assert board[0, 7] is None

    def test_get(self) -> None:
        """get() matches indexing."""
        board = Board()
        assert board.get(3, 3) is Piece.WHITE
        assert board.get(0, 0) is None

    def test_get_off_board_raises(self) -> None:
        """get() off the board raises IndexError."""
        with pytest.raises(IndexError):
            Board().get(8, 0)

    @pytest.mark.parametrize("pos", [(8, 3), (11, 3), (-5, 4), (-1, 0), (0, 8), (3, -1)])
    def test_index_off_board_raises(self, pos: tuple[int, int]) -> None:
        """Off-board coordinates never wrap onto another square."""
        with pytest.raises(IndexError, match="off the board"):
            Board()[pos]

    @pytest.mark.parametrize("pos", [(8, 3), (11, 3), (-5, 4), (0, 8)])
    def test_set_off_board_raises(self, pos: tuple[int, int]) -> None:
        """Writing off the board raises and leaves every cell untouched."""
        board = Board()
        with pytest.raises(IndexError):
            board[pos] = Piece.BLACK
        assert board == Board()

    def test_is_in_board_boundary_values(self) -> None:
        """is_in_board(0,0)=True, (-1,0)=False, (8,0)=False, (7,7)=True."""
        assert is_in_board(0, 0)
        assert is_in_board(7, 7)
        assert not is_in_board(-1, 0)
        assert not is_in_board(0, -1)
        assert not is_in_board(8, 0)
        assert not is_in_board(0, 8)


class TestAdjacent:
    """Test the 8-neighborhood check."""

    def test_corner_not_adjacent(self) -> None:
        """adjacent(0, 0) is False on a fresh board."""
        assert not Board().adjacent(0, 0)

    def test_next_to_cluster(self) -> None:
        """adjacent(2, 3) is True on a fresh board."""
        assert Board().adjacent(2, 3)

    def test_diagonal_counts(self) -> None:
        """A diagonal neighbor is enough."""
        assert Board().adjacent(2, 2)
        assert Board().adjacent(5, 5)

    def test_either_color_counts(self) -> None:
        """Neighbors of either color count."""
        board = empty_board()
        board[1, 1] = Piece.WHITE
        assert board.adjacent(0, 0)
        board[1, 1] = Piece.BLACK
        assert board.adjacent(0, 0)

    def test_corners_and_edges_clip(self) -> None:
        """Neighbors off the board are ignored rather than wrapped."""
        board = empty_board()
        board[0, 1] = Piece.BLACK  # would be the wrap-around neighbor of (7, 0)
        assert not board.adjacent(7, 0)
        board[7, 7] = Piece.WHITE
        assert board.adjacent(6, 6)
        assert not board.adjacent(5, 5)

    @pytest.mark.parametrize("pos", [(8, 0), (0, 8), (-1, 3)])
    def test_off_board_asserts(self, pos: tuple[int, int]) -> None:
        """Calling with off-board coordinates is a programming error."""
        with pytest.raises(AssertionError):
            Board().adjacent(*pos)


class TestFlips:
    """Test counting captures without modifying the board."""

    def test_opening_moves(self) -> None:
        """Each of Black's four opening moves captures exactly one piece."""
        board = Board()
        for x, y in [(3, 2), (2, 3), (5, 4), (4, 5)]:
            assert board.flips(x, y, Piece.BLACK) == 1

    def test_non_capturing_square(self) -> None:
        """(2, 2) is adjacent but flanks nothing for Black."""
        assert Board().flips(2, 2, Piece.BLACK) == 0

    def test_read_only(self) -> None:
        """Repeated calls never change the board."""
        board = Board()
        before = board.cells.copy()
        for _ in range(5):
            board.flips(2, 3, Piece.BLACK)
            board.flips(4, 2, Piece.WHITE)
        assert np.array_equal(board.cells, before)

    def test_long_run(self) -> None:
        """A run of several opponent pieces closed by the mover counts in full."""
        board = empty_board()
        for x in range(1, 6):
            board[x, 0] = Piece.WHITE
        board[6, 0] = Piece.BLACK
        assert board.flips(0, 0, Piece.BLACK) == 5

    def test_run_ended_by_empty(self) -> None:
        """A run followed by an empty square contributes nothing."""
        board = empty_board()
        board[1, 0] = Piece.WHITE
        board[2, 0] = Piece.WHITE
        board[4, 0] = Piece.BLACK  # beyond the gap at (3, 0)
        assert board.flips(0, 0, Piece.BLACK) == 0

    def test_run_ended_by_edge(self) -> None:
        """A run reaching the edge contributes nothing."""
        board = empty_board()
        for x in range(1, 8):
            board[x, 0] = Piece.WHITE
        assert board.flips(0, 0, Piece.BLACK) == 0

    def test_own_piece_next_to_origin(self) -> None:
        """An own piece with no opponent run in between captures nothing."""
        board = empty_board()
        board[1, 0] = Piece.BLACK
        board[2, 0] = Piece.WHITE
        board[3, 0] = Piece.BLACK
        assert board.flips(0, 0, Piece.BLACK) == 0

    def test_multiple_directions(self) -> None:
        """Captures add up across directions; open directions add nothing."""
        board = empty_board()
        board[4, 3] = Piece.WHITE  # right
        board[5, 3] = Piece.BLACK
        board[3, 4] = Piece.WHITE  # down
        board[3, 5] = Piece.BLACK
        board[4, 4] = Piece.WHITE  # diagonal
        board[5, 5] = Piece.WHITE
        board[6, 6] = Piece.BLACK
        board[2, 3] = Piece.WHITE  # left, never closed
        assert board.flips(3, 3, Piece.BLACK) == 4

    def test_diagonal_from_corner(self) -> None:
        """Only in-board directions are walked from a corner."""
        board = empty_board()
        board[6, 6] = Piece.BLACK
        board[5, 5] = Piece.BLACK
        board[4, 4] = Piece.WHITE
        assert board.flips(7, 7, Piece.WHITE) == 2

    def test_off_board_asserts(self) -> None:
        """Calling with off-board coordinates is a programming error."""
        with pytest.raises(AssertionError):
            Board().flips(0, 8, Piece.BLACK)


class TestFlip:
    """Test applying captures."""

    def test_flips_runs_but_not_origin(self) -> None:
        """Flanked runs change color; the placed square is left to the caller."""
        board = Board()
        board.flip(2, 3, Piece.BLACK)
        assert board[3, 3] is Piece.BLACK
        assert board[2, 3] is None
        assert board[4, 4] is Piece.WHITE

    def test_only_closed_directions_flip(self) -> None:
        """Open runs are left alone."""
        board = empty_board()
        board[4, 3] = Piece.WHITE
        board[5, 3] = Piece.BLACK
        board[2, 3] = Piece.WHITE
        board[3, 4] = Piece.WHITE
        board.flip(3, 3, Piece.BLACK)
        assert board[4, 3] is Piece.BLACK
        assert board[2, 3] is Piece.WHITE
        assert board[3, 4] is Piece.WHITE

    def test_flip_matches_flips(self) -> None:
        """The number of converted squares equals flips()."""
        board = empty_board()
        for x in range(1, 6):
            board[x, 0] = Piece.WHITE
            board[x, x] = Piece.WHITE
        board[6, 0] = Piece.BLACK
        board[6, 6] = Piece.BLACK
        expected = board.flips(0, 0, Piece.BLACK)
        before = board.count(Piece.BLACK)
        board.flip(0, 0, Piece.BLACK)
        assert expected == 10
        assert board.count(Piece.BLACK) == before + expected

    def test_off_board_asserts(self) -> None:
        """Calling with off-board coordinates is a programming error."""
        with pytest.raises(AssertionError):
            Board().flip(-1, 0, Piece.BLACK)


class TestValueSemantics:
    """Test copies, equality and text rendering."""

    def test_copy_is_independent(self) -> None:
        """Changing a copy leaves the original alone."""
        board = Board()
        clone = board.copy()
        assert clone == board
        clone[0, 0] = Piece.BLACK
        assert clone != board
        assert board[0, 0] is None

    def test_str(self) -> None:
        """Text rendering shows the legend and the pieces."""
        lines = str(Board()).splitlines()
        assert lines[0] == "  a b c d e f g h"
        assert lines[4] == "4 . . . W B . . ."
        assert lines[5] == "5 . . . B W . . ."
        assert len(lines) == 9
