"""Single blocks and their offsets relative to the centre of a piece."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

BLOCK_SIZE = 30.0
"""Default edge length of a block, in canvas units."""


@dataclass(frozen=True)
class BlockOffset:
    """Offset of one block from the centre of its piece.

    ``idx`` is the index of the block within the piece it belongs to.
    """

    col: int
    row: int
    idx: int = 0

    @classmethod
    def from_tuple(cls, value: tuple[int, int, int]) -> BlockOffset:
        """Build an offset from a ``(col, row, idx)`` triple."""
        col, row, idx = value
        return cls(col=col, row=row, idx=idx)


def offsets_from_pairs(pairs: Iterable[tuple[int, int]]) -> tuple[BlockOffset, ...]:
    """Turn ``(col, row)`` pairs into offsets indexed by their position."""
    return tuple(
        BlockOffset(col=col, row=row, idx=idx) for idx, (col, row) in enumerate(pairs)
    )