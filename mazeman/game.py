"""Player movement rules and the interactive game loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Collection, Iterable
from dataclasses import dataclass
from enum import Enum

from mazeman.entity import Entity, Shadow, default_shadows
from mazeman.generator import MazeGenerator
from mazeman.geometry import Rect

WINDOW_SIZE = 800
FRAME_RATE = 60
PLACEMENT_DELAY_MS = 1000
LIMIT = 700.0


class Direction(Enum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


_STEP = {
    Direction.LEFT: (-1.0, 0.0),
    Direction.RIGHT: (1.0, 0.0),
    Direction.UP: (0.0, -1.0),
    Direction.DOWN: (0.0, 1.0),
}

_OPPOSITE = (
    (Direction.LEFT, Direction.RIGHT),
    (Direction.RIGHT, Direction.LEFT),
    (Direction.UP, Direction.DOWN),
    (Direction.DOWN, Direction.UP),
)


def allowed_moves(box: Rect, shadows: Iterable[Shadow]) -> frozenset[Direction]:
    """Return the directions permitted by every junction the box touches."""
    allowed: set[Direction] = set()
    for shadow in shadows:
        if box.intersects(shadow.bounds()):
            if shadow.left:
                allowed.add(Direction.LEFT)
            if shadow.right:
                allowed.add(Direction.RIGHT)
            if shadow.up:
                allowed.add(Direction.UP)
            if shadow.down:
                allowed.add(Direction.DOWN)
    return frozenset(allowed)


@dataclass
class Player:
    """The player token: moves on its own and turns only at junctions."""

    x: float = 380.0
    y: float = 670.0
    direction: Direction = Direction.NONE
    intent: Direction | None = None
    speed: float = 2.0

    @property
    def bounding_box(self) -> Rect:
        return Rect(self.x + 20.0, self.y + 20.0, 5.0, 5.0)

    def _blocked(self) -> bool:
        if self.direction is Direction.LEFT:
            return self.x < 0.0
        if self.direction is Direction.RIGHT:
            return self.x > LIMIT
        if self.direction is Direction.UP:
            return self.y < 0.0
        return self.y > LIMIT

    def update(
        self, pressed: Collection[Direction], shadows: Iterable[Shadow]
    ) -> Direction:
        """Advance one frame given the held direction keys; return the heading."""
        allowed = allowed_moves(self.bounding_box, shadows)
        for key in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
            if key in pressed:
                self.intent = key
        if self.intent is not None and self.intent in allowed:
            self.direction = self.intent
        for current, reverse in _OPPOSITE:
            if self.direction is current and reverse in pressed:
                self.direction = reverse
        if self.direction is not Direction.NONE:
            if self._blocked():
                self.direction = Direction.NONE
            else:
                dx, dy = _STEP[self.direction]
                self.x += dx * self.speed
                self.y += dy * self.speed
        return self.direction


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="mazeman")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
    pygame.display.set_caption("My cute window")
    clock = pygame.time.Clock()

    look = Entity(380.0, 670.0, 20.0, 237, 234, 42)
    player = Player(look.x, look.y)
    shadows = default_shadows()
    generator = MazeGenerator(random.Random(args.seed))
    key_map = {
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_UP: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
    }
    next_placement = 0

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        now = pygame.time.get_ticks()
        if not generator.done and now >= next_placement:
            if generator.step() is not None:
                next_placement = now + PLACEMENT_DELAY_MS
        generator.finalize()

        keys = pygame.key.get_pressed()
        pressed = {direction for key, direction in key_map.items() if keys[key]}
        player.update(pressed, shadows)

        screen.fill((0, 0, 0))
        for sensor in generator.sensors:
            pygame.draw.rect(
                screen, (0, 255, 0), pygame.Rect(sensor.x, sensor.y, sensor.width, sensor.height)
            )
        radius = look.size
        pygame.draw.circle(
            screen, look.color, (player.x + radius, player.y + radius), radius
        )
        for shadow in shadows:
            pygame.draw.circle(
                screen,
                (255, 255, 255),
                (shadow.x + shadow.radius, shadow.y + shadow.radius),
                shadow.radius,
            )
        for wall in generator.walls:
            placed = wall.transform()
            for segment in wall.segments:
                rect = segment.rect
                corners = [
                    placed.transform_point(x, y)
                    for x, y in (
                        (rect.left, rect.top),
                        (rect.right, rect.top),
                        (rect.right, rect.bottom),
                        (rect.left, rect.bottom),
                    )
                ]
                pygame.draw.polygon(screen, segment.color, corners)
        for box in generator.wall_boxes:
            pygame.draw.rect(
                screen,
                (255, 255, 0),
                pygame.Rect(box.left, box.top, box.width, box.height),
                2,
            )
        pygame.display.flip()
        clock.tick(FRAME_RATE)

    pygame.quit()
    return 0