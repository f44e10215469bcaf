from __future__ import annotations

import copy
import json
import logging
from typing import Any

import numpy as np
from matplotlib.axes import Axes

from .board import Board
from .constants import BOARD_DIM, square2tuple, tuple2square
from .errors import PlaceError
from .piece import Piece
from .plotting import plot_board
from .rules.base import InitializeBoard, UpdateRule, ValidationRule
from .rules.initialization import ClassicInitialization
from .rules.update import FlankingUpdateRule
from .rules.validation import (
    AvailableRule,
    FlankingRule,
    InBoundsRule,
    NeighborRule,
    TurnRule,
)

logger = logging.getLogger(__name__)

Move = tuple[int, int, Piece]


class GameState:
    """One game of Othello: a board, the side to move and the moves played so far.

    :meth:`place` is the only way to change the board. It runs the validation
    rules in order and raises the first :class:`~othellocore.errors.PlaceError`
    found, leaving the game untouched. Turns alternate strictly after every
    successful placement; there is no pass move, so callers use
    :meth:`has_legal_move` and :meth:`is_over` to detect stuck positions.
    """

    initialization_rule: type[InitializeBoard] = ClassicInitialization
    validation_rules: list[type[ValidationRule]] = [
        InBoundsRule,
        TurnRule,
        AvailableRule,
        NeighborRule,
        FlankingRule,
    ]
    update_rules: list[type[UpdateRule]] = [FlankingUpdateRule]

    def __init__(self) -> None:
        """Start a new game from the classic position with Black to move."""
        self.board: Board
        self.turn: Piece
        self.history: list[Move]
        self.initialization_rule.init_board(self)

    def width(self) -> int:
        """The width of the board."""
        return self.board.width()

    def get(self, x: int, y: int) -> Piece | None:
        """Return the piece at (x, y), or None if the square is empty."""
        return self.board.get(x, y)

    def check(self, x: int, y: int, piece: Piece) -> PlaceError | None:
        """Return the first rule ``piece`` at (x, y) would break, ignoring whose turn it is."""
        return self._first_error(x, y, piece, include_turn=False)

    def is_legal(self, x: int, y: int, piece: Piece | None = None) -> bool:
        """Check if ``piece`` (default: the side to move) may be placed at (x, y)."""
        return self.check(x, y, self.turn if piece is None else piece) is None

    def _first_error(self, x: int, y: int, piece: Piece, include_turn: bool) -> PlaceError | None:
        piece = Piece(piece)
        for rule in self.validation_rules:
            if rule.checks_turn and not include_turn:
                continue
            error = rule.check(self, x, y, piece)
            if error is not None:
                return error
        return None

    def place(self, x: int, y: int, piece: Piece) -> None:
        """Place ``piece`` at (x, y), flip the flanked pieces and pass the turn.

        Raises:
            OutOfBounds: (x, y) is off the board.
            Turn: ``piece`` is not the side to move.
            Occupied: the square already holds a piece.
            NotAdjacent: no neighboring square holds a piece.
            NoFlips: the move would capture nothing.
        """
        piece = Piece(piece)
        error = self._first_error(x, y, piece, include_turn=True)
        if error is not None:
            logger.debug("Rejected %s at (%d, %d): %s", piece, x, y, error)
            raise error

        for rule in self.update_rules:
            rule.update(self, x, y, piece)

        self.history.append((x, y, piece))
        self.turn = piece.opponent()
        logger.debug("%s placed at (%d, %d), %s to move", piece, x, y, self.turn)

    def play(self, square: str) -> None:
        """Place the side to move on a square given in notation, e.g. ``"c4"``."""
        if square not in square2tuple:
            raise ValueError(f"Unknown square {square!r}, expected a1 through h8.")
        x, y = square2tuple[square]
        self.place(x, y, self.turn)

    def legal_moves(self, piece: Piece | None = None) -> list[tuple[int, int]]:
        """Return every (x, y) where ``piece`` (default: the side to move) could be placed."""
        piece = self.turn if piece is None else piece
        return [
            (x, y)
            for y in range(BOARD_DIM)
            for x in range(BOARD_DIM)
            if self.check(x, y, piece) is None
        ]

    def has_legal_move(self, piece: Piece | None = None) -> bool:
        """Check if ``piece`` (default: the side to move) has any legal move."""
        piece = self.turn if piece is None else piece
        return any(
            self.check(x, y, piece) is None for y in range(BOARD_DIM) for x in range(BOARD_DIM)
        )

    def is_over(self) -> bool:
        """Check if neither side has a legal move left."""
        return not self.has_legal_move(Piece.BLACK) and not self.has_legal_move(Piece.WHITE)

    def score(self) -> dict[Piece, int]:
        """Return the number of pieces of each color."""
        return {piece: self.board.count(piece) for piece in Piece}

    def winner(self) -> Piece | None:
        """Return the color with more pieces once the game is over, else None (draws too)."""
        if not self.is_over():
            return None
        score = self.score()
        if score[Piece.BLACK] == score[Piece.WHITE]:
            return None
        return max(score, key=score.__getitem__)

    def random_move(self, rng: np.random.Generator | None = None) -> tuple[int, int] | None:
        """Returns a random legal move for the side to move, or None if it has none."""
        moves = self.legal_moves()
        if not moves:
            return None
        rng = np.random.default_rng() if rng is None else rng
        return moves[int(rng.integers(len(moves)))]

    def play_random_game(self, rng: np.random.Generator | None = None) -> None:
        """Plays random legal moves until the side to move is stuck."""
        rng = np.random.default_rng() if rng is None else rng
        while (move := self.random_move(rng)) is not None:
            self.place(*move, self.turn)
        logger.debug("Random game stopped after %d moves", len(self.history))

    def get_history(self) -> list[Move]:
        """Returns the moves played so far."""
        return self.history.copy()

    def get_square_history(self) -> list[str]:
        """Returns the moves played so far in square notation."""
        return [tuple2square[(x, y)] for x, y, _piece in self.history]

    def recover_from_history(self, history: list[Move]) -> None:
        """Replay ``history`` on top of the current position."""
        for x, y, piece in history:
            self.place(x, y, piece)

    def copy(self) -> GameState:
        """Return a fully independent copy of the game."""
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.board == other.board
            and self.turn == other.turn
            and self.history == other.history
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the game to plain JSON-compatible types."""
        return {
            **self.board.to_dict(),
            "turn": self.turn.to_json(),
            "history": [[x, y, piece.to_json()] for x, y, piece in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """Rebuild a game from :meth:`to_dict` output.

        The position is restored as stored; the history is not replayed.
        """
        if "turn" not in data:
            raise ValueError("Game state is missing field 'turn'.")
        state = cls()
        state.board = Board.from_dict(data)
        state.turn = Piece.from_json(data["turn"])
        try:
            state.history = [
                (int(x), int(y), Piece.from_json(piece)) for x, y, piece in data.get("history", [])
            ]
        except (TypeError, ValueError) as e:
            raise ValueError(f"Malformed game history: {e}") from e
        return state

    def to_json(self, **kwargs: Any) -> str:
        """Serialize the game to a JSON string."""
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> GameState:
        """Rebuild a game from :meth:`to_json` output."""
        return cls.from_dict(json.loads(text))

    def print_board(self) -> None:
        """Prints the board state."""
        print(self.board)
        print(f"{self.turn} to move.")

    def plot_board(
        self,
        ax: Axes | None = None,
        shading: np.ndarray | str | None = None,
        **kwargs: Any,
    ) -> Axes:
        """Plot the board, see :func:`othellocore.plotting.plot_board`.

        ``shading="valid"`` highlights the legal moves of the side to move, and the
        last move played is highlighted unless ``move`` is given.
        """
        if isinstance(shading, str):
            if shading != "valid":
                raise ValueError(f"Unknown shading {shading!r}, expected 'valid' or an array.")
            shading = np.zeros((BOARD_DIM, BOARD_DIM))
            for x, y in self.legal_moves():
                shading[y, x] = 1
        if "move" not in kwargs and self.history:
            kwargs["move"] = self.history[-1][:2]
        return plot_board(self.board, ax=ax, shading=shading, **kwargs)

    def __repr__(self) -> str:
        return f"GameState(turn={self.turn}, moves={len(self.history)}, board={self.board!r})"
