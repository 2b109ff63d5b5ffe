import pygame

from common.Vector2 import Vector2f

ARROW_HEAD_LENGTH = 6.0


def draw_velocity(surface, origin: Vector2f, velocity: Vector2f, scale, color):
    """Draw velocity as an arrow starting at origin, scaled by scale."""
    if velocity.is_empty():
        return
    tip = origin + velocity * scale
    pygame.draw.line(surface, color, _point(origin), _point(tip), 2)

    # Arrow head: two short strokes back from the tip
    back = velocity.negated().normalize()
    back *= ARROW_HEAD_LENGTH
    side = Vector2f(-back.y, back.x)
    side *= 0.5
    pygame.draw.line(surface, color, _point(tip), _point(tip + back + side), 2)
    pygame.draw.line(surface, color, _point(tip), _point(tip + back - side), 2)


def draw_fps(surface, font, fps, color):
    text_surface = font.render(f"FPS: {fps}", True, color)
    surface.blit(text_surface, (10, 10))


def _point(vector: Vector2f):
    x, y = vector.to_tuple()
    return int(x), int(y)
