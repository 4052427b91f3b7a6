"""Grid of free-space sensors used to find room for wall pieces."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from mazeman.geometry import Rect, Vector

Grid = tuple[tuple[bool, ...], ...]


@dataclass
class Sensor:
    """A square probe that reports whether its area is free of walls."""

    x: float = 0.0
    y: float = 0.0
    width: float = 80.0
    height: float = 80.0

    @property
    def position(self) -> Vector:
        return (self.x, self.y)

    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def scan(self, wall_boxes: Iterable[Rect]) -> bool:
        """Return True if no wall box overlaps this sensor."""
        box = self.bounds()
        return not any(box.intersects(wall) for wall in wall_boxes)


def find_fit(
    grid: Sequence[Sequence[bool]], pattern: Sequence[Sequence[bool]]
) -> tuple[int, int] | None:
    """Return the first (row, column) where every set cell of ``pattern`` is free.

    Positions are tried row by row, left to right.
    """
    if not pattern or not grid:
        return None
    rows, cols = len(grid), len(grid[0])
    height, width = len(pattern), len(pattern[0])
    cells = [
        (r, c)
        for r, row in enumerate(pattern)
        for c, cell in enumerate(row[:width])
        if cell
    ]
    for top in range(rows - height + 1):
        for left in range(cols - width + 1):
            if all(grid[top + r][left + c] for r, c in cells):
                return (top, left)
    return None


class SensorGrid:
    """A rectangular block of sensors sharing one set of readings."""

    def __init__(
        self,
        rows: int = 4,
        cols: int = 4,
        spacing: float = 80.0,
        origin: Vector = (0.0, 160.0),
        size: float = 80.0,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.spacing = spacing
        ox, oy = origin
        self.sensors = [
            Sensor(ox + col * spacing, oy + row * spacing, size, size)
            for row in range(rows)
            for col in range(cols)
        ]
        self.readings: Grid = tuple((False,) * cols for _ in range(rows))

    def __iter__(self) -> Iterator[Sensor]:
        return iter(self.sensors)

    def __len__(self) -> int:
        return len(self.sensors)

    def __getitem__(self, cell: tuple[int, int]) -> Sensor:
        row, col = cell
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"no sensor at {cell}")
        return self.sensors[row * self.cols + col]

    def scan(self, wall_boxes: Iterable[Rect]) -> Grid:
        """Probe every sensor, store and return the free/blocked grid."""
        boxes = list(wall_boxes)
        free = iter([sensor.scan(boxes) for sensor in self.sensors])
        self.readings = tuple(zip(*[free] * self.cols))
        return self.readings

    def shift(self, dx: float) -> None:
        for sensor in self.sensors:
            sensor.x += dx

    def check_fit(self, pattern: Sequence[Sequence[bool]]) -> tuple[int, int] | None:
        return find_fit(self.readings, pattern)