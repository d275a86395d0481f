"""Sky Hopper: a side-scrolling pipe-dodging arcade game."""

from .data_models import DIFFICULTIES, Bird, Difficulty, Pipe, PlayerProfile, SimulationState
from .errors import (
    DuplicateNameError, InvalidStateTransition, PersistenceError, SkyHopperError, ValidationError
)
from .game_engine import GameEngine, TickResult
from .game_flow import GameFlow
from .profile_store import ProfileStore

__version__ = "0.1.0"
