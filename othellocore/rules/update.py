from __future__ import annotations

from typing import TYPE_CHECKING

from ..piece import Piece
from .base import UpdateRule

if TYPE_CHECKING:
    from ..game import GameState


class FlankingUpdateRule(UpdateRule):
    """Standard Othello update rule that flips flanked opponent pieces."""

    @staticmethod
    def update(state: GameState, x: int, y: int, piece: Piece) -> None:
        """Flip all flanked opponent pieces, then place the piece."""
        state.board.flip(x, y, piece)
        state.board[x, y] = piece
