"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable, List, Optional

from .constants import CANVAS_HEIGHT, GRAVITY, JUMP_FORCE
from .data_models import Bird, Pipe

# Collision reasons, in reporting priority
CEILING = "ceiling"
FLOOR = "floor"
PIPE = "pipe"


class PhysicsCore:
    """
    Fixed-step physics shared by the engine and the game flow.
    Nothing here knows about scoring, rendering or game states.
    """

    GRAVITY = GRAVITY
    JUMP_FORCE = JUMP_FORCE
    FLOOR_Y = CANVAS_HEIGHT
    CEILING_Y = 0

    def apply_gravity_and_movement(self, y: float, velocity: float) -> tuple[float, float]:
        """
        Velocity first gains one gravity increment, then position advances
        by the new velocity. No time-delta scaling.
        """
        velocity += self.GRAVITY
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a flap (overrides, never adds)."""
        return self.JUMP_FORCE

    def step_bird(self, bird: Bird):
        bird.y, bird.velocity = self.apply_gravity_and_movement(bird.y, bird.velocity)

    def step_pipes(self, pipes: Iterable[Pipe], speed: float):
        for pipe in pipes:
            pipe.x += speed

    def prune_pipes(self, pipes: List[Pipe]) -> List[Pipe]:
        """Keeps only pipes whose right edge is still inside the playfield."""
        return [p for p in pipes if p.right > 0]

    def hits_bounds(self, bird: Bird) -> Optional[str]:
        if bird.top <= self.CEILING_Y:
            return CEILING
        if bird.bottom >= self.FLOOR_Y:
            return FLOOR
        return None

    def hits_pipe(self, bird: Bird, pipe: Pipe) -> bool:
        # Edge equality counts as touching on every axis
        overlaps_x = bird.left <= pipe.right and bird.right >= pipe.x
        if not overlaps_x:
            return False
        return bird.top <= pipe.gap_y or bird.bottom >= pipe.gap_bottom

    def find_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> Optional[str]:
        """Returns the first collision reason, or None when the bird is clear."""
        reason = self.hits_bounds(bird)
        if reason:
            return reason
        for pipe in pipes:
            if self.hits_pipe(bird, pipe):
                return PIPE
        return None

    def check_collision(self, bird: Bird, pipes: Iterable[Pipe]) -> bool:
        """Checks for collisions with floor, ceiling, or pipes."""
        return self.find_collision(bird, pipes) is not None
