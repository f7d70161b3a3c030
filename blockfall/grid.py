"""The playing field and positions on it."""

from __future__ import annotations

from dataclasses import dataclass

GRID_COLS = 10
GRID_ROWS = 20
INITIAL_GRID_POSITION = (5, 0)
"""Column and row at which new pieces appear."""


@dataclass
class GridPosition:
    """A cell of the grid, counted from the top-left corner."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if self.col < 0 or self.row < 0:
            raise ValueError(f"grid position must not be negative: {self!r}")


@dataclass(frozen=True)
class Grid:
    """A grid of ``cols`` by ``rows`` cells whose top-left corner is at ``(x, y)``.

    Canvas coordinates grow upwards, so rows extend towards smaller ``y``.
    """

    cols: int
    rows: int
    x: float = 0.0
    y: float = 0.0
    z: float = -1.0

    def __post_init__(self) -> None:
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"grid must have at least one cell: {self.cols}x{self.rows}")

    @classmethod
    def centered(cls, window_width: float, block_size: float) -> Grid:
        """A standard grid centred horizontally, one block below the top."""
        grid_width = GRID_COLS * block_size
        x = window_width / 2 - grid_width / 2
        return cls(cols=GRID_COLS, rows=GRID_ROWS, x=x, y=-block_size, z=-1.0)

    def outline(self, block_size: float) -> tuple[float, float, float, float]:
        """The grid border as ``(left, top, width, height)``."""
        return (self.x, self.y, self.cols * block_size, self.rows * block_size)