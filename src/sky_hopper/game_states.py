"""
game_states.py: The closed set of game states. Each state is its own type and
carries only the data that makes sense while it is active.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ProfileMenu:
    name = "profile_menu"


@dataclass(frozen=True)
class CreateProfile:
    name = "create_profile"
    draft: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class SelectProfile:
    name = "select_profile"
    names: Tuple[str, ...] = ()
    index: int = 0

    @property
    def highlighted(self) -> Optional[str]:
        return self.names[self.index] if self.names else None


@dataclass(frozen=True)
class Leaderboard:
    name = "leaderboard"
    rows: Tuple[Tuple[str, int], ...] = ()


@dataclass(frozen=True)
class DifficultySelect:
    name = "difficulty_select"


@dataclass(frozen=True)
class Playing:
    name = "playing"


@dataclass(frozen=True)
class GameOver:
    name = "game_over"
    final_score: int = 0
    reason: Optional[str] = None
    new_best: bool = False


GameState = Union[
    ProfileMenu, CreateProfile, SelectProfile, Leaderboard,
    DifficultySelect, Playing, GameOver,
]
