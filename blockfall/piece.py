"""Pieces: shapes made of blocks, with the dispositions they rotate through."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from blockfall.block import BlockOffset, offsets_from_pairs
from blockfall.grid import INITIAL_GRID_POSITION, Grid, GridPosition
from blockfall.util import block_position

STANDARD_NUM_OF_BLOCKS = 4


class ShapeKind(enum.Enum):
    """The kinds of shape a piece can have."""

    T = "T"


@dataclass(frozen=True)
class PieceDispositions:
    """The block layouts a piece cycles through when rotated."""

    dispositions: tuple[tuple[BlockOffset, ...], ...]

    def __post_init__(self) -> None:
        if not self.dispositions:
            raise ValueError("a piece needs at least one disposition")
        sizes = {len(d) for d in self.dispositions}
        if len(sizes) != 1:
            raise ValueError("every disposition must have the same number of blocks")

    @classmethod
    def from_pairs(
        cls, dispositions: Sequence[Sequence[tuple[int, int]]]
    ) -> PieceDispositions:
        """Build dispositions from lists of ``(col, row)`` pairs."""
        return cls(tuple(offsets_from_pairs(pairs) for pairs in dispositions))

    def __len__(self) -> int:
        return len(self.dispositions)

    def get(self, disposition: int) -> tuple[BlockOffset, ...]:
        """The layout with the given index, wrapping around."""
        return self.dispositions[disposition % len(self.dispositions)]


@dataclass(frozen=True)
class ShapeData:
    """A shape: its kind and its dispositions."""

    dispositions: PieceDispositions
    kind: ShapeKind

    @property
    def num_dispositions(self) -> int:
        return len(self.dispositions)


@dataclass
class Piece:
    """A piece on the grid with its current disposition."""

    shape: ShapeData
    grid_position: GridPosition
    disposition: int = 0
    active: bool = True
    color: str = field(default="red")

    @property
    def blocks(self) -> tuple[BlockOffset, ...]:
        """Offsets of the blocks in the current disposition."""
        return self.shape.dispositions.get(self.disposition)

    def rotate(self) -> tuple[BlockOffset, ...]:
        """Advance to the next disposition and return its blocks."""
        self.disposition = (self.disposition + 1) % self.shape.num_dispositions
        return self.blocks

    def block_positions(
        self, grid: Grid, block_size: float
    ) -> list[tuple[float, float, float]]:
        """Canvas positions of every block, ordered by block index."""
        return [
            block_position(offset, grid, self.grid_position, block_size)
            for offset in sorted(self.blocks, key=lambda o: o.idx)
        ]


def shape_t() -> ShapeData:
    """The T shape and its four rotations."""
    return ShapeData(
        dispositions=PieceDispositions.from_pairs(
            [
                [(0, 0), (-1, 0), (1, 0), (0, 1)],
                [(0, 0), (0, -1), (0, 1), (1, 0)],
                [(0, 0), (-1, 0), (1, 0), (0, -1)],
                [(0, 0), (0, -1), (0, 1), (-1, 0)],
            ]
        ),
        kind=ShapeKind.T,
    )


def spawn_piece(shape: ShapeData, grid_position: GridPosition | None = None) -> Piece:
    """A new active piece in its first disposition."""
    if grid_position is None:
        grid_position = GridPosition(*INITIAL_GRID_POSITION)
    else:
        grid_position = GridPosition(grid_position.col, grid_position.row)
    return Piece(shape=shape, grid_position=grid_position)