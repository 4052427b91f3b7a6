"""Procedural placement of wall pieces using a sweeping sensor grid."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from mazeman.geometry import Rect
from mazeman.objects import WallPiece, WallType, rotated_patterns
from mazeman.sensor import SensorGrid

log = logging.getLogger(__name__)

BOARD_WIDTH = 800.0
SENSOR_SIZE = 80.0
SWEEP_STEP = 240.0
SWEEP_ROWS = 2
FINAL_SCALE = (0.75, 0.75)
FINAL_SHIFT = (10.0, 10.0)
COLLISION_MARGIN = 20.0

_ROTATION_OFFSETS: dict[tuple[WallType, int], tuple[float, float]] = {
    (WallType.I_SHAPE, 1): (240.0, 0.0),
    (WallType.L_SHAPE, 3): (0.0, 160.0),
    (WallType.L_SHAPE, 2): (160.0, 240.0),
    (WallType.T_SHAPE, 2): (240.0, 240.0),
}


class MazeGenerator:
    """Sweeps a sensor grid over the board and drops wall pieces where they fit."""

    def __init__(
        self, rng: random.Random | None = None, sensors: SensorGrid | None = None
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sensors = sensors if sensors is not None else SensorGrid()
        self.walls: list[WallPiece] = []
        self.wall_boxes: list[Rect] = []
        self.done = False
        self._needs_scaling = False
        self._sweeps_completed = 0

    def _rebuild_boxes(self) -> None:
        self.wall_boxes = [box for wall in self.walls for box in wall.collision_boxes()]

    def _try_place(self, wall_type: WallType) -> WallPiece | None:
        self.sensors.scan(self.wall_boxes)
        for rotation, pattern in enumerate(rotated_patterns(wall_type)):
            fit = self.sensors.check_fit(pattern)
            if fit is None:
                continue
            x, y = self.sensors[fit].position
            dx, dy = _ROTATION_OFFSETS.get((wall_type, rotation), (0.0, 0.0))
            wall = WallPiece(
                wall_type, position=(x + dx, y + dy), rotation=rotation * 90.0
            )
            self.walls.append(wall)
            self._rebuild_boxes()
            log.debug("placed %s at %s", wall_type.name, wall.position)
            return wall
        return None

    def _advance_sensors(self) -> None:
        self.sensors.shift(SWEEP_STEP)
        last_in_row = self.sensors[0, self.sensors.cols - 1]
        if last_in_row.x + SENSOR_SIZE > BOARD_WIDTH:
            for index, sensor in enumerate(self.sensors):
                sensor.y += SWEEP_STEP
                sensor.x = (index % self.sensors.cols) * SENSOR_SIZE
            self._sweeps_completed += 1
        if self._sweeps_completed == SWEEP_ROWS:
            self.done = True
            self._needs_scaling = True

    def step(self) -> WallPiece | None:
        """Place at most one wall; return it, or None if nothing was placed."""
        if self.done:
            return None
        type_index = self.rng.randrange(4)
        attempts = 0
        retry = False
        while True:
            if retry:
                type_index = (type_index + 1) % 4
            wall = self._try_place(WallType(type_index))
            if wall is not None:
                return wall
            retry = True
            attempts += 1
            if attempts >= 4:
                attempts = 0
                self._advance_sensors()
            if self.done:
                return None

    def finalize(self) -> None:
        """Shrink the finished layout and grow its collision boxes by a margin."""
        if not self._needs_scaling:
            return
        boxes: list[Rect] = []
        for wall in self.walls:
            wall.origin = (0.0, 0.0)
            wall.scale = FINAL_SCALE
            wall.move(*FINAL_SHIFT)
            boxes.extend(box.inflate(COLLISION_MARGIN) for box in wall.collision_boxes())
        self.wall_boxes = boxes
        self._needs_scaling = False

    def placements(self) -> Iterator[WallPiece]:
        """Yield walls as they are placed until the sweep ends."""
        while not self.done:
            wall = self.step()
            if wall is not None:
                yield wall

    def run(self) -> list[WallPiece]:
        """Generate the whole layout, finalize it and return the walls."""
        for _ in self.placements():
            pass
        self.finalize()
        return self.walls