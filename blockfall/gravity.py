"""Gravity pulling the active piece down the grid at a steady pace."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from blockfall.game import GameState
from blockfall.grid import Grid
from blockfall.piece import Piece

log = logging.getLogger(__name__)

INITIAL_INTERVAL = 0.5
"""Seconds between two steps before the speed is ever raised."""
INITIAL_SPEED = 1.0
SPEED_STEP = 0.5
"""How much each speed increase adds."""
BASE_INTERVAL = 2.0
"""Interval at speed 1 once the speed has been raised; divided by the speed."""


@dataclass
class Gravity:
    """A repeating timer that moves the active piece down one row per period."""

    speed: float = INITIAL_SPEED
    interval: float = INITIAL_INTERVAL
    elapsed: float = 0.0

    def increase(self) -> float:
        """Raise the speed, restart the timer with a shorter period, return the speed."""
        self.speed += SPEED_STEP
        log.info("New gravity speed: %s", self.speed)
        self.interval = BASE_INTERVAL / self.speed
        self.elapsed = 0.0
        return self.speed

    def tick(self, dt: float) -> bool:
        """Advance the timer by ``dt`` seconds; true when a period has just finished."""
        if dt < 0:
            raise ValueError(f"time step must not be negative: {dt}")
        self.elapsed += dt
        if self.elapsed >= self.interval:
            self.elapsed %= self.interval
            return True
        return False

    def apply(
        self, piece: Piece | None, grid: Grid, game_state: GameState, dt: float
    ) -> bool:
        """Let time pass and drop the active piece a row when due.

        The timer only advances while the game is running. A piece whose lowest
        block reaches the bottom row stops being active. Returns whether the
        piece moved.
        """
        if not game_state.running or not self.tick(dt):
            return False
        if piece is None or not piece.active:
            return False
        piece.grid_position.row += 1
        lowest = max((offset.row for offset in piece.blocks), default=None)
        if lowest is not None and piece.grid_position.row + lowest >= grid.rows - 1:
            log.warning("Removed active piece!")
            piece.active = False
        return True