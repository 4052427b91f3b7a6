import random

from mazeman.generator import MazeGenerator
from mazeman.objects import WallType


def test_first_step_places_wall_at_first_sensor():
    gen = MazeGenerator(random.Random(1))
    wall = gen.step()
    assert wall is not None
    assert gen.walls == [wall]
    assert wall.rotation == 0.0
    assert wall.position == gen.sensors[0, 0].position
    assert gen.wall_boxes == wall.collision_boxes()


def test_step_type_is_a_wall_type():
    gen = MazeGenerator(random.Random(3))
    wall = gen.step()
    assert wall.wall_type in set(WallType)


def test_run_terminates_and_finishes_sweep():
    gen = MazeGenerator(random.Random(7))
    walls = gen.run()
    assert gen.done
    assert len(walls) >= 1
    assert gen.sensors[0, 0].x == 0.0
    assert gen.sensors[0, 0].y == 160.0 + 2 * 240.0


def test_finalize_scales_and_inflates_boxes():
    gen = MazeGenerator(random.Random(11))
    gen.run()
    assert all(wall.scale == (0.75, 0.75) for wall in gen.walls)
    expected = [box.inflate(20.0) for wall in gen.walls for box in wall.collision_boxes()]
    assert gen.wall_boxes == expected


def test_finalize_is_applied_once():
    gen = MazeGenerator(random.Random(13))
    gen.run()
    positions = [wall.position for wall in gen.walls]
    boxes = list(gen.wall_boxes)
    gen.finalize()
    assert [wall.position for wall in gen.walls] == positions
    assert gen.wall_boxes == boxes


def test_step_after_done_returns_none():
    gen = MazeGenerator(random.Random(2))
    gen.run()
    count = len(gen.walls)
    assert gen.step() is None
    assert len(gen.walls) == count


def test_same_seed_gives_same_layout():
    first = MazeGenerator(random.Random(42)).run()
    second = MazeGenerator(random.Random(42)).run()
    assert [(w.wall_type, w.position, w.rotation) for w in first] == [
        (w.wall_type, w.position, w.rotation) for w in second
    ]


def test_finalize_before_done_does_nothing():
    gen = MazeGenerator(random.Random(5))
    gen.step()
    boxes = list(gen.wall_boxes)
    gen.finalize()
    assert gen.wall_boxes == boxes
    assert gen.walls[0].scale == (1.0, 1.0)