"""
data_models.py: Data structures for the simulation, difficulty tiers and player profiles.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .constants import (
    BIRD_HEIGHT, BIRD_WIDTH, BIRD_X, CANVAS_HEIGHT, DIFFICULTY_PRESETS,
    PIPE_WIDTH, RESPAWN_Y
)


@dataclass(frozen=True)
class Difficulty:
    """An immutable difficulty tier, locked in for a whole session."""
    name: str
    gap: int
    speed: float            # Negative: pipes travel leftward
    spawn_interval: float   # Milliseconds between spawns

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        try:
            gap, speed, interval = DIFFICULTY_PRESETS[name]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None
        return cls(name=name, gap=gap, speed=speed, spawn_interval=interval)


DIFFICULTIES = {name: Difficulty.from_name(name) for name in DIFFICULTY_PRESETS}


@dataclass
class Bird:
    """The falling body: a fixed-x box that only moves vertically."""
    y: float = RESPAWN_Y
    velocity: float = 0.0
    x: float = BIRD_X
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Pipe:
    """A top/bottom pipe pair with a passable gap starting at gap_y."""
    x: float
    gap_y: float
    gap: int
    passed: bool = False
    width: int = PIPE_WIDTH

    @property
    def top_height(self) -> float:
        return self.gap_y

    @property
    def bottom_height(self) -> float:
        return CANVAS_HEIGHT - self.gap_y - self.gap

    @property
    def gap_bottom(self) -> float:
        return self.gap_y + self.gap

    @property
    def right(self) -> float:
        return self.x + self.width

    def to_render_state(self) -> dict:
        return {
            "x": self.x,
            "width": self.width,
            "top_height": self.top_height,
            "bottom_y": self.gap_bottom,
            "bottom_height": self.bottom_height,
            "passed": self.passed,
        }


@dataclass
class SimulationState:
    """
    Per-session mutable state. One instance is owned by the game flow and
    handed to every tick; nothing here lives at module level.
    """
    difficulty: Difficulty
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    last_spawn_ms: float = 0.0
    tick_count: int = 0

    def reset(self, difficulty: Optional[Difficulty] = None):
        """Puts the session back at its canonical start."""
        if difficulty is not None:
            self.difficulty = difficulty
        self.bird = Bird()
        self.pipes = []
        self.score = 0
        self.last_spawn_ms = 0.0
        self.tick_count = 0


@dataclass
class PlayerProfile:
    name: str
    high_score: int = 0

    def to_record(self) -> dict:
        return {"name": self.name, "highScore": self.high_score}


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a presentation layer needs to draw one frame."""
    state: str
    bird: Tuple[float, float, int, int]
    pipes: Tuple[dict, ...]
    score: int
    difficulty: str
    profile_name: Optional[str] = None
    high_score: Optional[int] = None
    final_score: Optional[int] = None
    collision_reason: Optional[str] = None
    new_best: bool = False
    draft_name: str = ""
    error: Optional[str] = None
    profile_names: Tuple[str, ...] = ()
    selected_index: int = 0
    leaderboard: Tuple[Tuple[str, int], ...] = ()
