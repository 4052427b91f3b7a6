"""Axis-aligned rectangles and 2D affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vector = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def position(self) -> Vector:
        return (self.left, self.top)

    @property
    def size(self) -> Vector:
        return (self.width, self.height)

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Return True if the rectangles overlap with a non-empty area."""
        left1, right1 = self._span_x()
        left2, right2 = other._span_x()
        top1, bottom1 = self._span_y()
        top2, bottom2 = other._span_y()
        return max(left1, left2) < min(right1, right2) and max(top1, top2) < min(
            bottom1, bottom2
        )

    def inflate(self, margin: float) -> Rect:
        """Return a copy grown by ``margin`` on every side."""
        return Rect(
            self.left - margin,
            self.top - margin,
            self.width + 2 * margin,
            self.height + 2 * margin,
        )


@dataclass(frozen=True)
class Transform:
    """An affine transform: x' = a*x + b*y + tx, y' = c*x + d*y + ty."""

    a: float = 1.0
    b: float = 0.0
    tx: float = 0.0
    c: float = 0.0
    d: float = 1.0
    ty: float = 0.0

    @classmethod
    def translation(cls, dx: float, dy: float) -> Transform:
        return cls(tx=dx, ty=dy)

    def combine(self, other: Transform) -> Transform:
        """Return the transform that applies ``other`` first, then ``self``."""
        return Transform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            tx=self.a * other.tx + self.b * other.ty + self.tx,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            ty=self.c * other.tx + self.d * other.ty + self.ty,
        )

    def transform_point(self, x: float, y: float) -> Vector:
        return (self.a * x + self.b * y + self.tx, self.c * x + self.d * y + self.ty)

    def transform_rect(self, rect: Rect) -> Rect:
        """Return the axis-aligned bounding box of the transformed rectangle."""
        corners = [
            self.transform_point(x, y)
            for x in (rect.left, rect.right)
            for y in (rect.top, rect.bottom)
        ]
        xs = [x for x, _ in corners]
        ys = [y for _, y in corners]
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


def _cos_sin(degrees: float) -> tuple[float, float]:
    quarter, remainder = divmod(degrees, 90.0)
    if remainder == 0:
        return ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))[int(quarter) % 4]
    radians = math.radians(degrees)
    return math.cos(radians), math.sin(radians)


def make_transform(
    position: Vector = (0.0, 0.0),
    rotation: float = 0.0,
    scale: Vector = (1.0, 1.0),
    origin: Vector = (0.0, 0.0),
) -> Transform:
    """Build the transform of an object placed at ``position``.

    ``rotation`` is in degrees, clockwise on a y-down screen; ``origin`` is
    the local point that lands on ``position``.
    """
    cos, sin = _cos_sin(rotation)
    sx, sy = scale
    ox, oy = origin
    px, py = position
    a = sx * cos
    b = -sy * sin
    c = sx * sin
    d = sy * cos
    return Transform(
        a=a,
        b=b,
        tx=px - ox * a - oy * b,
        c=c,
        d=d,
        ty=py - ox * c - oy * d,
    )