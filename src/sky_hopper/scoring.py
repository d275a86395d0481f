"""
scoring.py: One point per pipe whose trailing edge falls behind the bird.
"""

from .data_models import SimulationState


def score_passed_pipes(state: SimulationState) -> int:
    """Flags newly cleared pipes and returns how many were scored this call."""
    cleared = 0
    for pipe in state.pipes:
        if not pipe.passed and pipe.right < state.bird.left:
            pipe.passed = True
            cleared += 1
    state.score += cleared
    return cleared
