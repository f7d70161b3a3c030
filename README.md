# blockfall

A small falling-blocks game drawn with pygame. One T piece appears at
column 5, row 0 of a 10 × 20 grid and falls one row at a time. It stops
being active once its lowest block reaches the bottom row.

## Installing

```
pip install .
```

## Playing

```
blockfall
```

The window is 1280 × 720 at 60 frames per second by default. The options
`--width`, `--height` and `--fps` change that:

```
blockfall --width 800 --height 700 --fps 30
```

These keys control the game:

| Key        | Action                                                           |
|------------|------------------------------------------------------------------|
| Space      | Rotate the piece to its next disposition                         |
| Arrow Down | Raise the gravity speed by 0.5, which shortens the fall interval |
| Enter      | Pause or resume the game                                         |
| F1         | Show or hide the lines that mark the grid cells                  |

The piece falls every 0.5 seconds at first. Each press of Arrow Down
raises the speed by 0.5 and restarts the timer, and the fall interval
becomes `2.0 / speed` seconds. While the game is paused the timer stands
still.

## What the game does not do

There is only the T piece, and only one of it: once it stops no new piece
appears. Pieces cannot be moved left or right, blocks do not collide with
one another, rows are never cleared and there is no score. A rotation is
not checked against the edges of the grid.

## Using the pieces in code

The game logic works without opening a window:

```python
from blockfall.grid import Grid, GridPosition
from blockfall.piece import shape_t, spawn_piece

grid = Grid.centered(window_width=800, block_size=30.0)
piece = spawn_piece(shape_t(), GridPosition(col=5, row=0))
piece.rotate()
for x, y, z in piece.block_positions(grid, 30.0):
    print(x, y)
```

`block_positions` gives the canvas position of the top-left corner of
each block, in block order; canvas `y` grows upwards, so lower rows have
smaller `y`.

`blockfall.app.World` holds a whole game. `World.create(window_width)`
builds one with a centred grid and a T piece; `handle_key` takes a
`blockfall.control.Key` that has just been pressed, and `update(dt)`
lets `dt` seconds pass and returns whether the piece moved.

## Running the tests

```
pip install .[test]
pytest
```