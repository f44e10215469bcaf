"""Pytest configuration and fixtures for othellocore tests."""

import numpy as np
import pytest

from othellocore.constants import BLACK, EMPTY, WHITE
from othellocore.game import GameState


@pytest.fixture
def game() -> GameState:
    """Fresh GameState instance."""
    return GameState()


@pytest.fixture
def empty_game() -> GameState:
    """GameState with every square cleared and Black to move."""
    game = GameState()
    game.board.cells[:] = EMPTY
    return game


@pytest.fixture
def game_with_moves() -> GameState:
    """GameState after a known opening sequence."""
    game = GameState()
    game.play("c4")  # BLACK
    game.play("c3")  # WHITE
    game.play("d3")  # BLACK
    return game


@pytest.fixture
def full_board_game() -> GameState:
    """GameState with every square Black and White to move."""
    game = GameState()
    game.board.cells = np.full(64, BLACK, dtype=np.int8)
    game.turn = game.turn.opponent()
    return game


@pytest.fixture
def drawn_board_game() -> GameState:
    """GameState with a full board split evenly between the colors."""
    game = GameState()
    game.board.cells = np.array([BLACK] * 32 + [WHITE] * 32, dtype=np.int8)
    return game
