"""Wall pieces and the occupancy patterns of their rotations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mazeman.geometry import Rect, Transform, Vector, make_transform

Color = tuple[int, int, int]
Pattern = tuple[tuple[bool, ...], ...]

CYAN: Color = (0, 255, 255)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
MAGENTA: Color = (255, 0, 255)


class WallType(Enum):
    L_SHAPE = 0
    T_SHAPE = 1
    PLUS_SHAPE = 2
    I_SHAPE = 3


@dataclass(frozen=True)
class Segment:
    """One rectangle of a wall piece, in the piece's local coordinates."""

    x: float
    y: float
    width: float
    height: float
    color: Color

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


_SEGMENTS: dict[WallType, tuple[Segment, ...]] = {
    WallType.L_SHAPE: (
        Segment(0.0, 0.0, 80.0, 240.0, CYAN),
        Segment(0.0, 160.0, 160.0, 80.0, CYAN),
    ),
    WallType.T_SHAPE: (
        Segment(0.0, 0.0, 240.0, 80.0, WHITE),
        Segment(80.0, 80.0, 80.0, 160.0, WHITE),
    ),
    WallType.I_SHAPE: (Segment(0.0, 0.0, 80.0, 240.0, RED),),
    WallType.PLUS_SHAPE: (
        Segment(80.0, 0.0, 80.0, 240.0, MAGENTA),
        Segment(0.0, 80.0, 240.0, 80.0, MAGENTA),
    ),
}


@dataclass
class WallPiece:
    """A wall made of segments, placed with a position, rotation and scale."""

    wall_type: WallType
    position: Vector = (0.0, 0.0)
    rotation: float = 0.0
    scale: Vector = (1.0, 1.0)
    origin: Vector = (0.0, 0.0)

    @property
    def segments(self) -> tuple[Segment, ...]:
        return _SEGMENTS[self.wall_type]

    def transform(self) -> Transform:
        return make_transform(self.position, self.rotation, self.scale, self.origin)

    def collision_boxes(self) -> list[Rect]:
        """Return the world-space bounding box of every segment."""
        placed = self.transform()
        return [placed.transform_rect(segment.rect) for segment in self.segments]

    def move(self, dx: float, dy: float) -> None:
        x, y = self.position
        self.position = (x + dx, y + dy)


def _pattern(*rows: tuple[int, ...]) -> Pattern:
    return tuple(tuple(bool(cell) for cell in row) for row in rows)


_PLUS = _pattern((0, 1, 0), (1, 1, 1), (0, 1, 0))

_PATTERNS: dict[WallType, tuple[Pattern, ...]] = {
    WallType.L_SHAPE: (
        _pattern((1, 0), (1, 0), (1, 1)),
        _pattern((1, 1, 1), (1, 0, 0)),
        _pattern((1, 1), (0, 1), (0, 1)),
        _pattern((0, 0, 1), (1, 1, 1)),
    ),
    WallType.T_SHAPE: (
        _pattern((1, 1, 1), (0, 1, 0), (0, 1, 0)),
        _pattern((0, 0, 1), (1, 1, 1), (0, 0, 1)),
        _pattern((0, 1, 0), (0, 1, 0), (1, 1, 1)),
        _pattern((1, 0, 0), (1, 1, 1), (1, 0, 0)),
    ),
    WallType.I_SHAPE: (
        _pattern((1,), (1,), (1,), (1,)),
        _pattern((1, 1, 1, 1)),
    ),
    WallType.PLUS_SHAPE: (_PLUS, _PLUS, _PLUS, _PLUS),
}


def rotated_patterns(wall_type: WallType | int) -> list[Pattern]:
    """Return the occupancy pattern of each quarter-turn rotation, in order."""
    return list(_PATTERNS[WallType(wall_type)])