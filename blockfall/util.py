"""Helpers placing blocks on the canvas."""

from __future__ import annotations

from blockfall.block import BlockOffset
from blockfall.grid import Grid, GridPosition


def block_position(
    offset: BlockOffset,
    grid: Grid,
    grid_position: GridPosition,
    block_size: float,
) -> tuple[float, float, float]:
    """Canvas coordinates of the top-left corner of a block of a piece."""
    x = grid.x + (grid_position.col + offset.col) * block_size
    y = grid.y - (grid_position.row + offset.row) * block_size
    return (x, y, 0.0)