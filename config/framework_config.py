"""
Framework Configuration Constants

This module centralizes the tunable values used by the frame clock, the
physics playground and the renderer, so demos and tests can swap them
without touching the code that reads them.

**Categories**:
1. **Clock**: FPS sampling interval
2. **Physics**: Ball mass, radius, bounce, speed limit, space damping
3. **Display**: Window size, target frame rate, colors, fonts
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ClockConfig:
    """Frame clock constants"""
    FPS_SAMPLE_INTERVAL_MS: int = 1000


@dataclass(frozen=True)
class PhysicsConfig:
    """Physics-related constants"""
    BALL_MASS: float = 1.0
    BALL_RADIUS: float = 10.0
    BALL_ELASTICITY: float = 0.95
    MAX_SPEED: float = 600.0
    SPACE_DAMPING: float = 0.9
    WALL_THICKNESS: float = 20.0
    PUSH_STRENGTH: float = 400.0


@dataclass(frozen=True)
class DisplayConfig:
    """Visual rendering constants"""
    WIDTH: int = 800
    HEIGHT: int = 600
    FPS: int = 60
    FONT_SIZE: int = 16
    BACKGROUND_COLOR: Tuple[int, int, int] = (34, 139, 34)   # Green
    BALL_COLOR: Tuple[int, int, int] = (255, 255, 0)         # Yellow
    TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)       # White
    VELOCITY_COLOR: Tuple[int, int, int] = (255, 0, 0)       # Red
    VELOCITY_SCALE: float = 0.1
    SHOW_VELOCITY: bool = True


class FrameworkConfig:
    """
    Central configuration container.

    **Usage**:
    ```python
    from config.framework_config import FrameworkConfig

    config = FrameworkConfig()
    interval = config.clock.FPS_SAMPLE_INTERVAL_MS
    max_speed = config.physics.MAX_SPEED
    ```
    """

    def __init__(self):
        self.clock = ClockConfig()
        self.physics = PhysicsConfig()
        self.display = DisplayConfig()

    @classmethod
    def create_default(cls) -> 'FrameworkConfig':
        """Create default configuration"""
        return cls()

    @classmethod
    def create_headless(cls) -> 'FrameworkConfig':
        """Create configuration for simulation without a window"""
        config = cls()
        # No arrows to draw, no speed cap so physics results are unaltered
        object.__setattr__(config.display, 'SHOW_VELOCITY', False)
        object.__setattr__(config.physics, 'MAX_SPEED', float("inf"))
        return config


DEFAULT_CONFIG = FrameworkConfig.create_default()
