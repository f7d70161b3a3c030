"""Optional grid lines drawn over the playing field."""

from __future__ import annotations

from dataclasses import dataclass

from blockfall.grid import Grid

DEBUG_LINE_COLOR = (138, 43, 226)
"""Blue violet."""

Point = tuple[float, float]


@dataclass
class DebugLines:
    """Whether the cell lines of the grid are shown; off by default."""

    enabled: bool = False

    def toggle(self) -> bool:
        """Switch the lines on or off, returning whether they are now shown."""
        self.enabled = not self.enabled
        return self.enabled

    def lines(self, grid: Grid, block_size: float) -> list[tuple[Point, Point]]:
        """Segments between the cells of the grid in canvas coordinates.

        Vertical lines come first, left to right, then horizontal lines, top
        to bottom. Empty while the lines are switched off.
        """
        if not self.enabled:
            return []
        _, _, width, height = grid.outline(block_size)
        vertical = [
            ((grid.x + block_size * col, grid.y), (grid.x + block_size * col, grid.y - height))
            for col in range(1, grid.cols)
        ]
        horizontal = [
            ((grid.x, grid.y - block_size * row), (grid.x + width, grid.y - block_size * row))
            for row in range(1, grid.rows)
        ]
        return vertical + horizontal