"""Whether the game is running or paused."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class State(enum.Enum):
    """The two states a game can be in."""

    PAUSED = enum.auto()
    RUNNING = enum.auto()


@dataclass
class GameState:
    """The current state of the game; a new game is running."""

    state: State = State.RUNNING

    @property
    def running(self) -> bool:
        return self.state is State.RUNNING

    def toggle(self) -> State:
        """Switch between running and paused, returning the new state."""
        self.state = State.PAUSED if self.state is State.RUNNING else State.RUNNING
        return self.state