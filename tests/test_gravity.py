import pytest

from blockfall.game import GameState, State
from blockfall.grid import Grid, GridPosition
from blockfall.gravity import (
    BASE_INTERVAL,
    INITIAL_INTERVAL,
    INITIAL_SPEED,
    SPEED_STEP,
    Gravity,
)
from blockfall.piece import shape_t, spawn_piece


@pytest.fixture
def grid():
    return Grid.centered(1280.0, 30.0)


def test_defaults_match_source():
    gravity = Gravity()
    assert gravity.speed == 1.0
    assert gravity.interval == 0.5


def test_tick_finishes_only_after_interval():
    gravity = Gravity()
    assert gravity.tick(INITIAL_INTERVAL / 2) is False
    assert gravity.tick(INITIAL_INTERVAL / 2) is True
    assert gravity.tick(INITIAL_INTERVAL / 4) is False


def test_tick_rejects_negative_step():
    with pytest.raises(ValueError):
        Gravity().tick(-0.1)


def test_increase_shortens_interval():
    gravity = Gravity()
    speed = gravity.increase()
    assert speed == INITIAL_SPEED + SPEED_STEP
    assert gravity.interval == BASE_INTERVAL / speed
    assert gravity.elapsed == 0.0


def test_increase_restarts_timer():
    gravity = Gravity()
    gravity.tick(INITIAL_INTERVAL * 0.9)
    gravity.increase()
    assert gravity.tick(gravity.interval * 0.5) is False


def test_apply_moves_piece_down_one_row(grid):
    piece = spawn_piece(shape_t())
    start = piece.grid_position.row
    moved = Gravity().apply(piece, grid, GameState(), INITIAL_INTERVAL)
    assert moved is True
    assert piece.grid_position.row == start + 1


def test_apply_does_nothing_when_paused(grid):
    piece = spawn_piece(shape_t())
    gravity = Gravity()
    start = piece.grid_position.row
    assert gravity.apply(piece, grid, GameState(State.PAUSED), INITIAL_INTERVAL) is False
    assert piece.grid_position.row == start
    assert gravity.elapsed == 0.0


def test_apply_before_interval_does_not_move(grid):
    piece = spawn_piece(shape_t())
    start = piece.grid_position.row
    assert Gravity().apply(piece, grid, GameState(), INITIAL_INTERVAL / 3) is False
    assert piece.grid_position.row == start


def test_piece_lands_and_stops(grid):
    piece = spawn_piece(shape_t(), GridPosition(5, 0))
    gravity = Gravity()
    for _ in range(grid.rows * 2):
        gravity.apply(piece, grid, GameState(), INITIAL_INTERVAL)
    assert piece.active is False
    lowest = max(offset.row for offset in piece.blocks)
    assert piece.grid_position.row + lowest == grid.rows - 1


def test_inactive_piece_does_not_move(grid):
    piece = spawn_piece(shape_t())
    piece.active = False
    start = piece.grid_position.row
    assert Gravity().apply(piece, grid, GameState(), INITIAL_INTERVAL) is False
    assert piece.grid_position.row == start


def test_apply_without_piece(grid):
    assert Gravity().apply(None, grid, GameState(), INITIAL_INTERVAL) is False