import pytest

from blockfall.block import BlockOffset
from blockfall.grid import Grid, GridPosition
from blockfall.piece import (
    STANDARD_NUM_OF_BLOCKS,
    PieceDispositions,
    ShapeKind,
    shape_t,
    spawn_piece,
)
from blockfall.util import block_position


def _pairs(blocks):
    return [(b.col, b.row) for b in blocks]


def test_shape_t_first_disposition():
    shape = shape_t()
    assert shape.kind is ShapeKind.T
    assert _pairs(shape.dispositions.get(0)) == [(0, 0), (-1, 0), (1, 0), (0, 1)]


def test_shape_t_has_four_standard_dispositions():
    shape = shape_t()
    assert shape.num_dispositions == 4
    for i in range(shape.num_dispositions):
        blocks = shape.dispositions.get(i)
        assert len(blocks) == STANDARD_NUM_OF_BLOCKS
        assert blocks[0] == BlockOffset(0, 0, 0)
        assert [b.idx for b in blocks] == list(range(STANDARD_NUM_OF_BLOCKS))


def test_get_wraps_around():
    dispositions = shape_t().dispositions
    assert dispositions.get(4) == dispositions.get(0)
    assert dispositions.get(7) == dispositions.get(3)


def test_from_pairs_rejects_uneven_dispositions():
    with pytest.raises(ValueError):
        PieceDispositions.from_pairs([[(0, 0), (1, 0)], [(0, 0)]])


def test_from_pairs_rejects_empty():
    with pytest.raises(ValueError):
        PieceDispositions.from_pairs([])


def test_spawn_defaults_to_initial_position():
    piece = spawn_piece(shape_t())
    assert (piece.grid_position.col, piece.grid_position.row) == (5, 0)
    assert piece.disposition == 0
    assert piece.active


def test_spawn_copies_position():
    position = GridPosition(2, 3)
    piece = spawn_piece(shape_t(), position)
    piece.grid_position.row += 1
    assert position.row == 3


def test_rotate_cycles_through_all_dispositions():
    shape = shape_t()
    piece = spawn_piece(shape)
    seen = [piece.blocks]
    for _ in range(shape.num_dispositions - 1):
        seen.append(piece.rotate())
    assert seen == [shape.dispositions.get(i) for i in range(4)]
    piece.rotate()
    assert piece.disposition == 0
    assert piece.blocks == seen[0]


def test_block_positions_follow_blocks():
    grid = Grid(cols=10, rows=20, x=250.0, y=-30.0)
    piece = spawn_piece(shape_t())
    positions = piece.block_positions(grid, 30.0)
    assert len(positions) == STANDARD_NUM_OF_BLOCKS
    assert positions[0] == block_position(
        BlockOffset(0, 0), grid, piece.grid_position, 30.0
    )
    assert len(set(positions)) == STANDARD_NUM_OF_BLOCKS


def test_block_positions_change_after_rotation():
    grid = Grid(cols=10, rows=20)
    piece = spawn_piece(shape_t(), GridPosition(5, 5))
    before = piece.block_positions(grid, 30.0)
    piece.rotate()
    after = piece.block_positions(grid, 30.0)
    assert before[0] == after[0]
    assert set(before) != set(after)