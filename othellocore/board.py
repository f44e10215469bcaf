"""The 8x8 Othello board and its geometric primitives."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from .constants import BOARD_DIM, DIRECTIONS, EMPTY, NUM_SQUARES
from .piece import Piece


def is_in_board(x: int, y: int) -> bool:
    """Check if coordinates are within the board boundaries."""
    return 0 <= x < BOARD_DIM and 0 <= y < BOARD_DIM


class Board:
    """An 8x8 grid of cells stored row-major in a flat array.

    Cells are addressed by ``(x, y)`` with the origin in the top-left corner,
    x to the right and y downward. A new board holds the standard starting
    position::

          a b c d e f g h
        1 . . . . . . . .
        2 . . . . . . . .
        3 . . . . . . . .
        4 . . . W B . . .
        5 . . . B W . . .
        6 . . . . . . . .
        7 . . . . . . . .
        8 . . . . . . . .

    ``adjacent``, ``flips`` and ``flip`` assume in-bounds coordinates; the
    caller is responsible for checking bounds first.
    """

    def __init__(self) -> None:
        """Create a board in the standard starting position."""
        self.cells = np.zeros(NUM_SQUARES, dtype=np.int8)
        self[3, 3] = Piece.WHITE
        self[4, 3] = Piece.BLACK
        self[3, 4] = Piece.BLACK
        self[4, 4] = Piece.WHITE

    @staticmethod
    def width() -> int:
        """The width of the board. A standard Othello board is an 8x8 grid."""
        return BOARD_DIM

    @staticmethod
    def _index(x: int, y: int) -> int:
        return x + y * BOARD_DIM

    def __getitem__(self, pos: tuple[int, int]) -> Piece | None:
        x, y = pos
        if not is_in_board(x, y):
            raise IndexError(f"({x}, {y}) is off the board")
        return Piece.from_cell(self.cells[self._index(x, y)])

    def __setitem__(self, pos: tuple[int, int], piece: Piece | None) -> None:
        x, y = pos
        if not is_in_board(x, y):
            raise IndexError(f"({x}, {y}) is off the board")
        self.cells[self._index(x, y)] = EMPTY if piece is None else int(piece)

    def get(self, x: int, y: int) -> Piece | None:
        """Return the piece at ``(x, y)``, or None if the square is empty."""
        return self[x, y]

    def adjacent(self, x: int, y: int) -> bool:
        """Check whether any of the eight neighbors of ``(x, y)`` holds a piece."""
        assert is_in_board(x, y), f"({x}, {y}) is off the board"
        return any(
            self.cells[self._index(x + dx, y + dy)] != EMPTY
            for dx, dy in DIRECTIONS
            if is_in_board(x + dx, y + dy)
        )

    def flips(self, x: int, y: int, piece: Piece) -> int:
        """Count the opponent pieces that placing ``piece`` at ``(x, y)`` would capture.

        The board is not modified.
        """
        assert is_in_board(x, y), f"({x}, {y}) is off the board"
        count = 0

        def tally(_i: int) -> None:
            nonlocal count
            count += 1

        for direction in self._directions(x, y):
            if self._on(x, y, direction, piece):
                self._walk(x, y, direction, piece, tally)
        return count

    def flip(self, x: int, y: int, piece: Piece) -> None:
        """Convert every run of opponent pieces flanked from ``(x, y)`` to ``piece``.

        The square ``(x, y)`` itself is left for the caller to fill. Calling this
        twice applies the flips twice, so decide legality with :meth:`flips` first.
        """
        assert is_in_board(x, y), f"({x}, {y}) is off the board"
        code = int(piece)

        def convert(i: int) -> None:
            self.cells[i] = code

        for direction in self._directions(x, y):
            if self._on(x, y, direction, piece):
                self._walk(x, y, direction, piece, convert)

    @staticmethod
    def _directions(x: int, y: int) -> list[tuple[int, int]]:
        """Directions whose first step from ``(x, y)`` stays on the board."""
        return [(dx, dy) for dx, dy in DIRECTIONS if is_in_board(x + dx, y + dy)]

    def _on(self, x: int, y: int, direction: tuple[int, int], piece: Piece) -> bool:
        """Check that a run of opponent pieces in ``direction`` is closed by ``piece``."""
        dx, dy = direction
        opponent = int(piece.opponent())
        nx, ny = x + dx, y + dy
        run = 0
        while is_in_board(nx, ny):
            cell = self.cells[self._index(nx, ny)]
            if cell == opponent:
                run += 1
            elif cell == piece:
                return run > 0
            else:
                return False
            nx, ny = nx + dx, ny + dy
        return False

    def _walk(
        self,
        x: int,
        y: int,
        direction: tuple[int, int],
        piece: Piece,
        action: Callable[[int], None],
    ) -> None:
        """Call ``action`` with the flat index of each opponent cell in ``direction``.

        The walk stops at the first cell that is not the opponent's, or at the edge.
        """
        dx, dy = direction
        opponent = int(piece.opponent())
        nx, ny = x + dx, y + dy
        while is_in_board(nx, ny):
            i = self._index(nx, ny)
            if self.cells[i] != opponent:
                break
            action(i)
            nx, ny = nx + dx, ny + dy

    def count(self, piece: Piece | None = None) -> int:
        """Count the squares holding ``piece``, or all occupied squares if None."""
        if piece is None:
            return int(np.count_nonzero(self.cells))
        return int(np.count_nonzero(self.cells == int(piece)))

    def to_array(self) -> np.ndarray:
        """Return a copy of the cell codes as an ``(8, 8)`` array indexed ``[y, x]``."""
        return self.cells.reshape(BOARD_DIM, BOARD_DIM).copy()

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        new = Board.__new__(Board)
        new.cells = self.cells.copy()
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the board as its width and a row-major list of cells."""
        return {
            "width": BOARD_DIM,
            "cells": [None if c == EMPTY else Piece(int(c)).to_json() for c in self.cells],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Board:
        """Rebuild a board from :meth:`to_dict` output."""
        width = data.get("width", BOARD_DIM)
        if width != BOARD_DIM:
            raise ValueError(f"Board width must be {BOARD_DIM}, got {width}.")
        cells = data.get("cells")
        if not isinstance(cells, list) or len(cells) != NUM_SQUARES:
            raise ValueError(f"Board cells must be a list of {NUM_SQUARES} entries.")
        board = cls.__new__(cls)
        board.cells = np.array(
            [EMPTY if c is None else int(Piece.from_json(c)) for c in cells], dtype=np.int8
        )
        return board

    def __str__(self) -> str:
        lines = ["  " + " ".join(chr(ord("a") + x) for x in range(BOARD_DIM))]
        for y in range(BOARD_DIM):
            row = []
            for x in range(BOARD_DIM):
                piece = self[x, y]
                row.append("." if piece is None else str(piece)[0])
            lines.append(f"{y + 1} " + " ".join(row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board(black={self.count(Piece.BLACK)}, white={self.count(Piece.WHITE)})"
