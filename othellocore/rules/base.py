"""Abstract base classes for Othello game rules."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import PlaceError
    from ..game import GameState
    from ..piece import Piece


class InitializeBoard(ABC):
    """Abstract base class for game initialization rules."""

    @staticmethod
    @abstractmethod
    def init_board(state: "GameState") -> None:
        """Set up the starting board and the side to move."""
        pass


class ValidationRule(ABC):
    """Abstract base class for move validation rules.

    Rules run in order and the first failure is reported, so a rule may assume
    every rule before it has passed.
    """

    # Rules about whose turn it is are skipped when asking whether a move
    # would be legal for a given side.
    checks_turn: bool = False

    @staticmethod
    @abstractmethod
    def check(state: "GameState", x: int, y: int, piece: "Piece") -> "PlaceError | None":
        """Return the error for placing ``piece`` at (x, y), or None if the rule holds."""
        pass


class UpdateRule(ABC):
    """Abstract base class for board update rules."""

    @staticmethod
    @abstractmethod
    def update(state: "GameState", x: int, y: int, piece: "Piece") -> None:
        """Update the board after a validated move at (x, y)."""
        pass
