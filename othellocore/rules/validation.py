from __future__ import annotations

from typing import TYPE_CHECKING

from ..board import is_in_board
from ..errors import NoFlips, NotAdjacent, Occupied, OutOfBounds, PlaceError, Turn
from ..piece import Piece
from .base import ValidationRule

if TYPE_CHECKING:
    from ..game import GameState


class InBoundsRule(ValidationRule):
    """Checks that the move is on the board."""

    @staticmethod
    def check(state: GameState, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Reject coordinates outside the grid, negative ones included."""
        if not is_in_board(x, y):
            return OutOfBounds(x, y)
        return None


class TurnRule(ValidationRule):
    """Checks that the piece belongs to the side due to move."""

    checks_turn = True

    @staticmethod
    def check(state: GameState, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Reject a piece that is not the side to move."""
        if piece != state.turn:
            return Turn(piece)
        return None


class AvailableRule(ValidationRule):
    """Checks if the move is made on an empty square."""

    @staticmethod
    def check(state: GameState, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Reject an occupied square."""
        if state.board[x, y] is not None:
            return Occupied(x, y)
        return None


class NeighborRule(ValidationRule):
    """Checks if the move touches at least one piece of either color."""

    @staticmethod
    def check(state: GameState, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Reject a square with no occupied neighbor."""
        if not state.board.adjacent(x, y):
            return NotAdjacent(x, y)
        return None


class FlankingRule(ValidationRule):
    """Checks if the move captures at least one opponent piece."""

    @staticmethod
    def check(state: GameState, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Reject a move that flanks nothing."""
        if state.board.flips(x, y, piece) == 0:
            return NoFlips(x, y)
        return None
