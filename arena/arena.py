"""
Arena Boundaries

Static elastic walls around the window so bodies stay on screen, plus the
background rendering and a bounds check used by the playground.

**Layout**:
- Walls sit just outside the visible area (thickness from PhysicsConfig)
- Full bounce (elasticity = 1.0), gravity-free top-down space
"""

import pygame
import pymunk

from common.Vector2 import Vector2, Vector2f
from config.framework_config import DisplayConfig, PhysicsConfig, DEFAULT_CONFIG


class Arena:
    """
    Rectangular playing area with physics walls.

    **Key Features**:
    1. **Physics Walls**: Four static segments around the window
    2. **Rendering**: Background fill
    3. **Bounds**: contains() checks a vector against the playable area
    """

    def __init__(self, space: pymunk.Space,
                 display: DisplayConfig = DEFAULT_CONFIG.display,
                 physics: PhysicsConfig = DEFAULT_CONFIG.physics) -> None:
        self.display = display
        self.top_left = Vector2f(0, 0)
        self.bottom_right = Vector2f(display.WIDTH, display.HEIGHT)

        width, height = display.WIDTH, display.HEIGHT
        t = physics.WALL_THICKNESS
        # Segment radius is t, so the inner wall surface lines up with the window edge
        self.walls = [
            pymunk.Segment(space.static_body, (0, -t), (width, -t), t),
            pymunk.Segment(space.static_body, (0, height + t), (width, height + t), t),
            pymunk.Segment(space.static_body, (-t, 0), (-t, height), t),
            pymunk.Segment(space.static_body, (width + t, 0), (width + t, height), t),
        ]
        for wall in self.walls:
            wall.elasticity = 1.0
            space.add(wall)

    def center(self) -> Vector2f:
        return (self.top_left + self.bottom_right) / 2

    def contains(self, point: Vector2) -> bool:
        """True if point lies inside the playable area (edges included)."""
        x, y = float(point.x), float(point.y)
        return (float(self.top_left.x) <= x <= float(self.bottom_right.x)
                and float(self.top_left.y) <= y <= float(self.bottom_right.y))

    def draw(self, surface):
        surface.fill(self.display.BACKGROUND_COLOR)
