import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from sky_hopper.data_models import DIFFICULTIES, SimulationState
from sky_hopper.game_engine import GameEngine
from sky_hopper.game_flow import GameFlow
from sky_hopper.kv_store import KeyValueStore
from sky_hopper.pipe_spawner import PipeSpawner
from sky_hopper.profile_store import ProfileStore


class FixedRng:
    """Stands in for random.Random and always draws the same gap."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return self.value


@pytest.fixture
def kv():
    store = KeyValueStore(":memory:")
    yield store
    store.close()


@pytest.fixture
def profiles(kv):
    return ProfileStore(kv)


@pytest.fixture
def sim():
    return SimulationState(difficulty=DIFFICULTIES["hard"])


@pytest.fixture
def engine():
    return GameEngine(spawner=PipeSpawner(rng=FixedRng(200)))


@pytest.fixture
def flow(engine):
    return GameFlow(engine=engine)


@pytest.fixture
def profile_flow(profiles, engine):
    return GameFlow(profile_store=profiles, engine=engine)


@pytest.fixture
def fixed_rng():
    return FixedRng
