"""Board rendering and figure helpers.

:func:`plot_board` draws a board on matplotlib axes, optionally shading squares
(for instance the legal moves) and highlighting the last move.
:func:`save_figure` writes a figure as both PDF and PNG.
"""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.colors import Normalize
from matplotlib.figure import Figure

from .board import Board
from .constants import BOARD_DIM
from .piece import Piece

logger = logging.getLogger(__name__)

PIECE_COLORS: dict[Piece, str] = {
    Piece.BLACK: "black",
    Piece.WHITE: "white",
}


def plot_board(
    board: Board,
    ax: Axes | None = None,
    shading: np.ndarray | None = None,
    move: tuple[int, int] | None = None,
    vmin: float | None = 0,
    vmax: float | None = None,
    cmap: str = "Reds",
    annotate_cells: bool = False,
) -> Axes:
    """Plot the board.

    The board is shown as a grid with black or white circles in the appropriate places.

    Args:
        board: Board to draw.
        ax: Axes to draw on. A new figure is created if None.
        shading: Optional ``(8, 8)`` array indexed ``[y, x]``; nonzero squares are
            filled using ``cmap``.
        move: Optional ``(x, y)`` square to highlight.
        vmin: Lower bound of the shading color scale (None uses the minimum).
        vmax: Upper bound of the shading color scale (None uses the maximum).
        cmap: Matplotlib colormap name for the shading.
        annotate_cells: If True, write each non-NaN shading value in its square.

    Returns:
        The axes drawn on.

    Raises:
        ValueError: If ``shading`` is not ``(8, 8)``.
    """
    if ax is None:
        _fig, ax = plt.subplots()

    ax.set_aspect("equal")
    ax.set_xlim(0, BOARD_DIM)
    ax.set_ylim(0, BOARD_DIM)

    if shading is not None:
        if shading.shape != (BOARD_DIM, BOARD_DIM):
            raise ValueError("Shading must be the same shape as the board")
        if vmax is None:
            vmax = np.nanmax(shading)
        if vmin is None:
            vmin = np.nanmin(shading)

        norm = Normalize(vmin=vmin, vmax=vmax)
        colormap = plt.get_cmap(cmap)

        for y, x in np.ndindex(BOARD_DIM, BOARD_DIM):
            if shading[y, x] != 0 and not np.isnan(shading[y, x]):
                rect = plt.Rectangle(
                    (x, y), 1, 1, fill=True, color=colormap(norm(shading[y, x])), alpha=0.7
                )
                ax.add_artist(rect)
            if annotate_cells and not np.isnan(shading[y, x]):
                ax.text(
                    x + 0.5,
                    y + 0.5,
                    f"{shading[y, x]:.2f}",
                    ha="center",
                    va="center",
                    color="black",
                    fontsize=8,
                )

    if move is not None:
        move_rect = plt.Rectangle((move[0], move[1]), 1, 1, fill=True, color="cornflowerblue", alpha=0.7)
        ax.add_artist(move_rect)

    for y, x in np.ndindex(BOARD_DIM, BOARD_DIM):
        piece = board[x, y]
        if piece is not None:
            circle = plt.Circle((x + 0.5, y + 0.5), 0.35, color=PIECE_COLORS[piece], ec="black", lw=1)
            ax.add_artist(circle)

    ax.invert_yaxis()
    ax.axis("off")
    outline = plt.Rectangle((0, 0), BOARD_DIM, BOARD_DIM, edgecolor="black", facecolor="none")
    ax.add_artist(outline)

    for i in range(1, BOARD_DIM):
        ax.axhline(i, color="black", lw=0.5)
        ax.axvline(i, color="black", lw=0.5)

    # Columns a-h along the top, rows 1-8 down the side.
    for i in range(BOARD_DIM):
        ax.text(i + 0.5, -0.5, chr(ord("a") + i), ha="center", va="center", fontsize=12)
        ax.text(-0.5, i + 0.5, str(i + 1), ha="center", va="center", fontsize=12)

    return ax


def save_figure(fig: Figure, path: Path, *, tight: bool = True) -> None:
    """Save a figure as both PDF and PNG.

    Args:
        fig: Matplotlib Figure to save.
        path: Output path **without** extension.  Both ``path.pdf`` and
            ``path.png`` are written.
        tight: If True, use ``bbox_inches="tight"`` when saving.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    bbox = "tight" if tight else None
    fig.savefig(path.with_suffix(".pdf"), bbox_inches=bbox)
    fig.savefig(
        path.with_suffix(".png"),
        bbox_inches=bbox,
        dpi=matplotlib.rcParams.get("figure.dpi", 300),
    )
    logger.info("Saved figure: %s (.pdf + .png)", path)
    plt.close(fig)
