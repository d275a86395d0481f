"""
game_engine.py: The per-tick simulation step for a single play session.
"""

from dataclasses import dataclass, field
from typing import Optional

from .data_models import SimulationState
from .physics_core import PhysicsCore
from .pipe_spawner import PipeSpawner
from .scoring import score_passed_pipes


@dataclass
class TickResult:
    collision: Optional[str] = None
    scored: int = 0

    @property
    def terminal(self) -> bool:
        return self.collision is not None


@dataclass
class GameEngine(PhysicsCore):
    """
    Advances a SimulationState by one fixed step.
    Inherits core physics and collision from PhysicsCore.
    """
    spawner: PipeSpawner = field(default_factory=PipeSpawner)

    def step(self, state: SimulationState, timestamp: float) -> TickResult:
        """
        Mutates the state in place. Order: bird, spawn, move, score,
        prune, collide. At most one collision is reported per tick.
        """
        state.tick_count += 1

        # 1. Bird
        self.step_bird(state.bird)

        # 2. Spawn and move pipes
        self.spawner.maybe_spawn(state, timestamp)
        self.step_pipes(state.pipes, state.difficulty.speed)

        # 3. Score before pruning so every pipe is counted while still live
        scored = score_passed_pipes(state)
        state.pipes[:] = self.prune_pipes(state.pipes)

        # 4. Collision
        collision = self.find_collision(state.bird, state.pipes)

        return TickResult(collision=collision, scored=scored)

    def jump(self, state: SimulationState):
        state.bird.velocity = self.flap()
