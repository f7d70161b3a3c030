"""Keyboard controls: rotating the piece and pausing the game."""

from __future__ import annotations

import enum
import logging

from blockfall.game import GameState, State
from blockfall.grid import Grid
from blockfall.piece import Piece

log = logging.getLogger(__name__)


class Key(enum.Enum):
    """The keys the game reacts to."""

    SPACE = "space"
    ENTER = "enter"
    ARROW_DOWN = "arrow_down"
    F1 = "f1"


def rotate_active_piece(
    piece: Piece | None, grid: Grid, block_size: float
) -> list[tuple[float, float, float]] | None:
    """Rotate the piece to its next disposition.

    Returns the new canvas positions of its blocks, or ``None`` when there is
    no piece to rotate.
    """
    if piece is None:
        log.info("No piece available for rotation.")
        return None
    log.info("Found piece to rotate.")
    piece.rotate()
    return piece.block_positions(grid, block_size)


def toggle_game_state(game_state: GameState) -> State:
    """Pause a running game or resume a paused one; returns the new state."""
    state = game_state.toggle()
    log.info("Game is %s!", "running" if state is State.RUNNING else "paused")
    return state