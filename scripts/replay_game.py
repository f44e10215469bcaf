"""Replay a sequence of Othello moves and report the resulting position.

Moves are given in square notation (``c4`` is x=2, y=3) and are played for
the side to move, starting from a fresh game or from a saved JSON state.

Usage::

    python scripts/replay_game.py --moves "c4 c3 d3"
    python scripts/replay_game.py --state game.json --moves "e6" --json out.json --plot figs/out
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from othellocore.errors import PlaceError
from othellocore.game import GameState
from othellocore.plotting import save_figure

logger = logging.getLogger(__name__)


def load_state(path: Path | None) -> GameState:
    """Load a saved game, or start a new one if ``path`` is None."""
    if path is None:
        return GameState()
    logger.info("Loading game state from %s", path)
    with path.open() as f:
        return GameState.from_json(f.read())


def replay(state: GameState, moves: list[str]) -> GameState:
    """Play ``moves`` in order for the side to move.

    Raises:
        PlaceError: On the first illegal move; earlier moves stay applied.
        ValueError: On a malformed square name.
    """
    for i, square in enumerate(moves, 1):
        mover = state.turn
        state.play(square)
        logger.info("Move %d: %s plays %s", i, mover, square)
        if not state.has_legal_move():
            logger.warning("%s has no legal move after %s", state.turn, square)
    return state


def main(args: argparse.Namespace) -> int:
    try:
        state = load_state(args.state)
    except (OSError, ValueError) as e:
        logger.error("Could not load game state from %s: %s", args.state, e)
        return 1
    try:
        replay(state, args.moves.split())
    except PlaceError as e:
        logger.error("Illegal move after %s: %s", state.get_square_history(), e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    state.print_board()
    score = state.score()
    logger.info("Score: %s", ", ".join(f"{piece} {count}" for piece, count in score.items()))
    if state.is_over():
        winner = state.winner()
        logger.info("Game over: %s", "draw" if winner is None else f"{winner} wins")

    if args.json is not None:
        args.json.parent.mkdir(parents=True, exist_ok=True)
        with args.json.open("w") as f:
            f.write(state.to_json(indent=2))
        logger.info("Game state saved to %s", args.json)

    if args.plot is not None:
        fig, ax = plt.subplots(figsize=(4, 4))
        state.plot_board(ax=ax, shading="valid")
        save_figure(fig, args.plot)

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Replay Othello moves and report the position.")
    parser.add_argument(
        "--moves",
        type=str,
        default="",
        help='Space-separated squares to play, e.g. "c4 c3 d3"',
    )
    parser.add_argument(
        "--state",
        type=Path,
        default=None,
        help="JSON game state to start from (default: a new game)",
    )
    parser.add_argument(
        "--json",
        type=Path,
        default=None,
        help="Write the final game state to this JSON file",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Save a board figure to this path (without extension; .pdf and .png are written)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug-level logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    sys.exit(main(args))
