# mazeman

A small arcade game: a yellow player moves around an 800×800 board while
wall pieces are laid out on it. A 4×4 grid of sensors sweeps across the
board; at each stop it scans which cells are free of walls and places an
L, T, plus or I shaped piece in the first rotation that fits. The game
window places at most one piece per second. Once the sweep has covered
two rows of stops, the walls are scaled down to three quarters, shifted
slightly, and their collision boxes are padded by 20 pixels on every
side.

## Installing

```
pip install .
```

## Playing

```
mazeman
mazeman --seed 42
```

`--seed` fixes the random choice of wall pieces so a layout can be
repeated.

Use the arrow keys to steer. The player only changes to a direction when
it touches a junction marker (the small white circles) that allows it,
though it may always reverse straight back. It keeps moving until it
reaches the edge of the board. Close the window to quit.

The sensor grid (green), the walls, and the wall collision boxes
(yellow outlines) are all drawn on screen.

## What it does not do

There is no scoring, no pellets, no enemies and no win or lose
condition. Walls are not solid for the player: movement is governed by
the junction markers alone, and the collision boxes are only drawn.

## Using the pieces from code

The layout logic does not need a window:

- `mazeman.geometry` provides `Rect` (with `intersects` and `inflate`),
  `Transform` (with `combine`, `transform_point` and `transform_rect`)
  and `make_transform`.
- `mazeman.objects.WallType`, `WallPiece` (with `transform`,
  `collision_boxes` and `move`) and `rotated_patterns`, which gives the
  occupancy pattern of every rotation of each wall piece.
- `mazeman.sensor.find_fit` finds the first (row, column) in a boolean
  grid where a pattern fits; `mazeman.sensor.SensorGrid` scans wall
  boxes with `scan`, moves with `shift` and checks fits with
  `check_fit`.
- `mazeman.generator.MazeGenerator` runs the layout sweep, with `step`,
  `placements`, `finalize` and `run`.
- `mazeman.entity.default_shadows` returns the board's junction markers,
  and `mazeman.game.allowed_moves` reports which directions they open at
  a given player box. `mazeman.game.Player.update` advances the player
  by one frame.

## Running the tests

```
pip install .[test]
pytest
```