"""
pipe_spawner.py: Time-based pipe generation with a randomized gap.
"""

import random
from typing import Optional

from .constants import CANVAS_HEIGHT, PIPE_SPAWN_MARGIN, PIPE_SPAWN_X
from .data_models import Difficulty, Pipe, SimulationState
from .logger import get_logger

log = get_logger(__name__)


class PipeSpawner:
    """
    Appends at most one pipe per tick once the difficulty's spawn interval
    has elapsed. A late tick never spawns more than one pipe.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def gap_range(self, difficulty: Difficulty) -> tuple[float, float]:
        low = PIPE_SPAWN_MARGIN
        high = CANVAS_HEIGHT - difficulty.gap - PIPE_SPAWN_MARGIN
        return low, high

    def _draw_gap_y(self, difficulty: Difficulty) -> float:
        low, high = self.gap_range(difficulty)
        return min(max(self.rng.uniform(low, high), low), high)

    def due(self, state: SimulationState, timestamp: float) -> bool:
        return timestamp - state.last_spawn_ms > state.difficulty.spawn_interval

    def maybe_spawn(self, state: SimulationState, timestamp: float) -> Optional[Pipe]:
        if not self.due(state, timestamp):
            return None
        pipe = Pipe(
            x=float(PIPE_SPAWN_X),
            gap_y=self._draw_gap_y(state.difficulty),
            gap=state.difficulty.gap,
        )
        state.pipes.append(pipe)
        state.last_spawn_ms = timestamp
        log.debug("Spawned pipe gap_y=%.1f at t=%.0fms", pipe.gap_y, timestamp)
        return pipe
