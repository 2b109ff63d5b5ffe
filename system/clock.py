"""
Frame Clock

Timer helpers for the game loop: elapsed time since a reset, raw ticks,
sleeping, the high resolution counter, and a once-per-frame FPS counter.
Ticks come from pygame.time, the same SDL timer the window loop runs on.
"""

import time
from typing import Optional

import pygame

from config.framework_config import ClockConfig, DEFAULT_CONFIG

PERFORMANCE_FREQUENCY = 1_000_000_000  # perf_counter_ns counts per second


class Clock:
    """
    Measures elapsed time and the current frame rate.

    **Usage**:
    ```python
    clock = Clock()
    while running:
        ...
        fps = clock.get_current_fps()   # call exactly once per frame
    ```

    The FPS value is published once per sample interval (1 second by
    default) and is 0 until the first interval has passed.
    """

    def __init__(self, config: Optional[ClockConfig] = None):
        self.config = config or DEFAULT_CONFIG.clock
        self._start_time = 0
        self._num_frames = 0
        self._current_fps = 0
        self.reset()

    def reset(self):
        """Restart the elapsed time origin."""
        self._start_time = pygame.time.get_ticks()

    def get_elapsed_time(self) -> int:
        """Milliseconds since construction or the last reset."""
        return pygame.time.get_ticks() - self._start_time

    @staticmethod
    def get_ticks() -> int:
        """Milliseconds since pygame.init() was called."""
        return pygame.time.get_ticks()

    @staticmethod
    def wait(msecs: int) -> int:
        """Sleep the process for msecs milliseconds. Returns the time actually waited."""
        return pygame.time.wait(msecs)

    @staticmethod
    def get_performance_counter() -> int:
        return time.perf_counter_ns()

    @staticmethod
    def get_performance_frequency() -> int:
        return PERFORMANCE_FREQUENCY

    def get_current_fps(self) -> int:
        """Count this frame and return the most recently published frame rate."""
        if self.get_elapsed_time() >= self.config.FPS_SAMPLE_INTERVAL_MS:
            self._current_fps = self._num_frames
            self._num_frames = 0
            self.reset()

        self._num_frames += 1

        return self._current_fps
