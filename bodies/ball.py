import pygame
import pymunk

from common.Vector2 import Vector2f
from config.framework_config import PhysicsConfig, DEFAULT_CONFIG


class Ball:
    """
    Bouncing ball backed by a pymunk body.

    Position and velocity are handed out as Vector2f values; the body
    itself stays the source of truth.
    """

    def __init__(self, position: Vector2f, space: pymunk.Space, color,
                 config: PhysicsConfig = DEFAULT_CONFIG.physics) -> None:
        self.initial_position = Vector2f(position)
        self.config = config
        self.radius = config.BALL_RADIUS
        self.body = pymunk.Body(config.BALL_MASS, pymunk.moment_for_circle(config.BALL_MASS, 0, self.radius))
        self.body.position = self.initial_position.to_tuple()
        shape = pymunk.Circle(self.body, self.radius)
        shape.elasticity = config.BALL_ELASTICITY
        space.add(self.body, shape)
        self.shape = shape
        self.color = color

    def draw(self, surface):
        x, y = self.position().to_tuple()
        pygame.draw.circle(surface, self.color, (int(x), int(y)), int(self.radius))

    def simulate(self):
        velocity = self.velocity()
        if velocity.length > self.config.MAX_SPEED:
            velocity.normalize()
            velocity *= self.config.MAX_SPEED
            self.body.velocity = velocity.to_tuple()

    def push(self, direction: Vector2f, strength: float):
        """Apply an impulse of the given strength along direction (any length)."""
        impulse = Vector2f(direction).normalize()
        impulse *= strength
        self.body.apply_impulse_at_local_point(impulse.to_tuple())

    def position(self) -> Vector2f:
        return Vector2f(self.body.position)

    def velocity(self) -> Vector2f:
        return Vector2f(self.body.velocity)

    def reset(self):
        self.body.position = self.initial_position.to_tuple()
        self.body.velocity = (0, 0)
