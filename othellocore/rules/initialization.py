from __future__ import annotations

from typing import TYPE_CHECKING

from ..board import Board
from ..piece import Piece
from .base import InitializeBoard

if TYPE_CHECKING:
    from ..game import GameState


class ClassicInitialization(InitializeBoard):
    """Classic Othello initialization with 4 pieces in the center.

    Starting position: W[d4, e5], B[e4, d5]. Black moves first.
    """

    @staticmethod
    def init_board(state: GameState) -> None:
        """Reset to the classic starting position with Black to move."""
        state.board = Board()
        state.turn = Piece.BLACK
        state.history = []
