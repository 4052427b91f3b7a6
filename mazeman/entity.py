"""The player entity and the junction markers that permit turns."""

from __future__ import annotations

from dataclasses import dataclass

from mazeman.geometry import Rect


def color_vector(r: int, g: int, b: int) -> list[int]:
    """Return the colour components as a list."""
    return [r, g, b]


@dataclass
class Entity:
    """A drawable thing with a position, a size and a colour."""

    x: float
    y: float
    size: float
    r: int
    g: int
    b: int

    @property
    def color(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Shadow:
    """A junction marker telling which directions may be taken from it."""

    x: float
    y: float
    up: bool
    down: bool
    left: bool
    right: bool
    shadow_id: int
    radius: float = 5.0
    size: float = 10.0

    def bounds(self) -> Rect:
        return Rect(self.x, self.y, 2 * self.radius, 2 * self.radius)


def default_shadows() -> list[Shadow]:
    """Return the junction markers of the standard board."""
    layout = [
        (400.0, 690.0, False, False, True, True, 0),
        (45.0, 690.0, True, False, False, True, 1),
        (45.0, 624.0, False, True, False, True, 2),
        (173.0, 624.0, True, False, True, False, 3),
        (177.0, 500.0, True, True, False, True, 4),
        (177.0, 437.0, True, True, True, False, 5),
        (179.0, 250.0, True, True, True, True, 6),
        (44.0, 246.0, True, False, False, True, 7),
        (44.0, 100.0, False, True, False, True, 8),
        (312.0, 100.0, False, True, True, False, 9),
        (320.0, 250.0, True, False, True, True, 10),
        (250.0, 256.0, False, True, True, True, 11),
        (250.0, 360.0, True, False, False, True, 12),
        (310.0, 365.0, False, True, True, False, 13),
        (317.0, 432.0, True, False, True, True, 14),
        (245.0, 440.0, False, True, False, True, 15),
        (245.0, 500.0, True, True, True, False, 16),
        (250.0, 628.0, True, False, False, True, 17),
        (312.0, 100.0, False, True, True, False, 9),
    ]
    return [Shadow(*entry) for entry in layout]