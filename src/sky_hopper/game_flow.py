"""
game_flow.py: The finite-state controller that ties input, the engine and the
profile store together. Exactly one state is active; every transition happens
synchronously inside a method call, never in the middle of a tick.
"""

from typing import Optional

from .constants import DEFAULT_DIFFICULTY, PROFILE_NAME_MAX_LEN
from .data_models import DIFFICULTIES, FrameSnapshot, SimulationState
from .errors import InvalidStateTransition, ValidationError
from .game_engine import GameEngine, TickResult
from .game_states import (
    CreateProfile, DifficultySelect, GameOver, GameState, Leaderboard,
    ProfileMenu, Playing, SelectProfile
)
from .logger import get_logger
from .profile_store import ProfileStore

log = get_logger(__name__)


class GameFlow:
    """
    Owns the active state, the session's SimulationState and the selected
    profile. Profile menus exist only when a ProfileStore is supplied.
    """

    def __init__(self, profile_store: Optional[ProfileStore] = None,
                 engine: Optional[GameEngine] = None):
        self.store = profile_store
        self.engine = engine or GameEngine()
        self.sim = SimulationState(difficulty=DIFFICULTIES[DEFAULT_DIFFICULTY])
        self.active_profile: Optional[str] = None
        self.state: GameState = self._home()

    @property
    def profiles_enabled(self) -> bool:
        return self.store is not None

    def _home(self) -> GameState:
        return ProfileMenu() if self.profiles_enabled else DifficultySelect()

    def _transition(self, new_state: GameState):
        if type(new_state) is not type(self.state):
            log.info("State %s -> %s", self.state.name, new_state.name)
        self.state = new_state

    def _drop(self, action: str) -> bool:
        # Inputs that don't apply to the current state are ignored
        log.debug("Ignored: %s", InvalidStateTransition(self.state.name, action))
        return False

    # -------- Profile menu --------

    def open_create_profile(self) -> bool:
        if not isinstance(self.state, ProfileMenu):
            return self._drop("create_profile")
        self._transition(CreateProfile())
        return True

    def open_select_profile(self) -> bool:
        if not isinstance(self.state, ProfileMenu):
            return self._drop("select_profile")
        names = tuple(p.name for p in self.store.list())
        if not names:
            return self._drop("select_profile")
        self._transition(SelectProfile(names=names))
        return True

    def open_leaderboard(self) -> bool:
        if not isinstance(self.state, ProfileMenu):
            return self._drop("leaderboard")
        self._transition(Leaderboard(rows=tuple(self.store.leaderboard())))
        return True

    def back(self) -> bool:
        backable = (CreateProfile, SelectProfile, Leaderboard)
        if isinstance(self.state, backable) or (
                isinstance(self.state, DifficultySelect) and self.profiles_enabled):
            self._transition(ProfileMenu())
            return True
        return self._drop("back")

    # -------- Create profile --------

    def type_text(self, text: str) -> bool:
        if not isinstance(self.state, CreateProfile):
            return self._drop("type_text")
        draft = (self.state.draft + text)[:PROFILE_NAME_MAX_LEN]
        self._transition(CreateProfile(draft=draft))
        return True

    def backspace(self) -> bool:
        if not isinstance(self.state, CreateProfile):
            return self._drop("backspace")
        self._transition(CreateProfile(draft=self.state.draft[:-1]))
        return True

    def submit_profile(self) -> bool:
        """Creates the drafted profile; stays on CreateProfile with an error on failure."""
        if not isinstance(self.state, CreateProfile):
            return self._drop("submit_profile")
        draft = self.state.draft
        try:
            profile = self.store.create(draft)
        except ValidationError as e:
            self._transition(CreateProfile(draft=draft, error=str(e)))
            return False
        self.active_profile = profile.name
        self._transition(DifficultySelect())
        return True

    # -------- Select profile --------

    def move_selection(self, delta: int) -> bool:
        if not isinstance(self.state, SelectProfile):
            return self._drop("move_selection")
        names = self.state.names
        self._transition(SelectProfile(names=names, index=(self.state.index + delta) % len(names)))
        return True

    def choose_profile(self, index: Optional[int] = None) -> bool:
        if not isinstance(self.state, SelectProfile):
            return self._drop("choose_profile")
        if index is None:
            index = self.state.index
        if not 0 <= index < len(self.state.names):
            return self._drop("choose_profile")
        self.active_profile = self.state.names[index]
        self._transition(DifficultySelect())
        return True

    # -------- Session --------

    def choose_difficulty(self, name: str) -> bool:
        """Locks in a difficulty and starts a fresh session."""
        if not isinstance(self.state, DifficultySelect):
            return self._drop("choose_difficulty")
        difficulty = DIFFICULTIES.get(name)
        if difficulty is None:
            return self._drop(f"choose_difficulty({name!r})")
        self._start_session(difficulty)
        return True

    def _start_session(self, difficulty=None):
        self.sim.reset(difficulty)
        self._transition(Playing())

    def jump(self) -> bool:
        if not isinstance(self.state, Playing):
            return self._drop("jump")
        self.engine.jump(self.sim)
        return True

    def tick(self, timestamp: float) -> Optional[TickResult]:
        """One driver tick. The simulation only moves while Playing."""
        if not isinstance(self.state, Playing):
            return None
        result = self.engine.step(self.sim, timestamp)
        if result.terminal:
            self._game_over(result.collision)
        return result

    def _game_over(self, reason: Optional[str]):
        final_score = self.sim.score
        new_best = False
        if self.store is not None and self.active_profile is not None:
            previous = self.store.get(self.active_profile)
            try:
                self.store.record_score(self.active_profile, final_score)
            except ValidationError as e:
                log.warning("Score not recorded: %s", e)
            else:
                new_best = previous is not None and final_score > previous.high_score
        log.info("Game over (%s) with score %d", reason, final_score)
        self._transition(GameOver(final_score=final_score, reason=reason, new_best=new_best))

    def restart(self) -> bool:
        """Plays again with the same difficulty."""
        if not isinstance(self.state, GameOver):
            return self._drop("restart")
        self._start_session()
        return True

    def main_menu(self) -> bool:
        if not isinstance(self.state, GameOver):
            return self._drop("main_menu")
        self._transition(self._home())
        return True

    def handle_input(self) -> bool:
        """
        The single jump/tap/click input: jumps while playing, dismisses the
        leaderboard, and does nothing anywhere else.
        """
        if isinstance(self.state, Playing):
            return self.jump()
        if isinstance(self.state, Leaderboard):
            return self.back()
        return self._drop("handle_input")

    # -------- Rendering contract --------

    def high_score(self) -> Optional[int]:
        if self.store is None or self.active_profile is None:
            return None
        profile = self.store.get(self.active_profile)
        return profile.high_score if profile else None

    def snapshot(self) -> FrameSnapshot:
        bird = self.sim.bird
        state = self.state
        extra = {}
        if isinstance(state, GameOver):
            extra.update(final_score=state.final_score,
                         collision_reason=state.reason, new_best=state.new_best)
        elif isinstance(state, CreateProfile):
            extra.update(draft_name=state.draft, error=state.error)
        elif isinstance(state, ProfileMenu):
            extra.update(profile_names=tuple(p.name for p in self.store.list()))
        elif isinstance(state, SelectProfile):
            extra.update(profile_names=state.names, selected_index=state.index)
        elif isinstance(state, Leaderboard):
            extra.update(leaderboard=state.rows)
        return FrameSnapshot(
            state=state.name,
            bird=(bird.x, bird.y, bird.width, bird.height),
            pipes=tuple(p.to_render_state() for p in self.sim.pipes),
            score=self.sim.score,
            difficulty=self.sim.difficulty.name,
            profile_name=self.active_profile,
            high_score=self.high_score(),
            **extra,
        )
