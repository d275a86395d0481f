"""
frame_driver.py: Drives one simulation step per display refresh.
"""

from typing import Callable, Optional

import pygame

from .constants import RENDER_FPS
from .logger import get_logger

log = get_logger(__name__)


class FrameDriver:
    """
    Calls step(timestamp_ms) once per frame. Timestamps never go backwards.
    Once stopped, no further step runs and the clock is released.
    """

    def __init__(self, step: Callable[[float], object],
                 time_source: Optional[Callable[[], float]] = None,
                 fps: int = RENDER_FPS):
        self.step = step
        self.time_source = time_source or pygame.time.get_ticks
        self.fps = fps
        self.running = False
        self.last_timestamp = 0.0
        self.frames = 0
        self.clock: Optional[pygame.time.Clock] = None

    def start(self):
        self.running = True
        self.clock = pygame.time.Clock()
        log.debug("Driver started at %d fps", self.fps)

    def stop(self):
        if self.running:
            log.debug("Driver stopped after %d frames", self.frames)
        self.running = False
        self.clock = None

    def tick(self) -> bool:
        """Runs one step with the current timestamp; False once stopped."""
        if not self.running:
            return False
        self.last_timestamp = max(float(self.time_source()), self.last_timestamp)
        self.frames += 1
        self.step(self.last_timestamp)
        return True

    def run(self, poll_input: Callable[[], None], render: Callable[[], None]):
        """
        The main loop: wait for the next frame, deliver input, step, draw.
        poll_input may call stop(); the step for that frame is then skipped.
        """
        if not self.running:
            self.start()
        while self.running:
            self.clock.tick(self.fps)
            poll_input()
            if not self.tick():
                break
            render()
