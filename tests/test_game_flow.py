import pytest

from sky_hopper.constants import CANVAS_HEIGHT, RESPAWN_Y
from sky_hopper.data_models import Pipe
from sky_hopper.game_flow import GameFlow
from sky_hopper.game_states import (
    CreateProfile, DifficultySelect, GameOver, Leaderboard, ProfileMenu, Playing, SelectProfile
)


def crash(flow):
    """Puts the bird on the floor and runs one tick."""
    flow.sim.bird.y = CANVAS_HEIGHT
    return flow.tick(0)


def create(flow, name):
    flow.open_create_profile()
    flow.type_text(name)
    return flow.submit_profile()


# -------- Without profiles --------

def test_starts_at_difficulty_select(flow):
    assert isinstance(flow.state, DifficultySelect)
    assert not flow.profiles_enabled


def test_choose_difficulty_starts_a_fresh_session(flow):
    flow.sim.score = 9
    flow.sim.pipes.append(Pipe(x=100, gap_y=200, gap=120))
    flow.sim.bird.y, flow.sim.bird.velocity = 12.0, 4.0
    flow.sim.last_spawn_ms = 777

    assert flow.choose_difficulty("easy")

    assert isinstance(flow.state, Playing)
    assert flow.sim.difficulty.name == "easy"
    assert flow.sim.score == 0
    assert flow.sim.pipes == []
    assert flow.sim.bird.y == RESPAWN_Y
    assert flow.sim.bird.velocity == 0
    assert flow.sim.last_spawn_ms == 0


def test_unknown_difficulty_is_ignored(flow):
    assert not flow.choose_difficulty("impossible")
    assert isinstance(flow.state, DifficultySelect)


def test_no_simulation_outside_playing(flow):
    assert flow.tick(5000) is None
    assert flow.sim.bird.y == RESPAWN_Y
    assert flow.sim.pipes == []


@pytest.mark.parametrize("prior", [-30.0, 0.0, 9.0])
def test_jump_sets_fixed_velocity(flow, prior):
    flow.choose_difficulty("hard")
    flow.sim.bird.velocity = prior
    assert flow.jump()
    assert flow.sim.bird.velocity == -8.0


def test_jump_outside_playing_is_a_noop(flow):
    flow.sim.bird.velocity = 3.0
    assert not flow.jump()
    assert not flow.handle_input()
    assert flow.sim.bird.velocity == 3.0
    assert isinstance(flow.state, DifficultySelect)


def test_handle_input_jumps_while_playing(flow):
    flow.choose_difficulty("hard")
    assert flow.handle_input()
    assert flow.sim.bird.velocity == -8.0


def test_collision_ends_session_once(flow):
    flow.choose_difficulty("medium")
    flow.sim.score = 4
    flow.sim.pipes.extend([Pipe(x=60, gap_y=300, gap=120), Pipe(x=55, gap_y=300, gap=120)])

    result = crash(flow)

    assert result.terminal
    assert isinstance(flow.state, GameOver)
    assert flow.state.final_score == 4
    assert flow.state.reason == "floor"
    assert flow.tick(0) is None


def test_restart_keeps_difficulty(flow):
    flow.choose_difficulty("easy")
    flow.sim.score = 3
    crash(flow)

    assert flow.restart()
    assert isinstance(flow.state, Playing)
    assert flow.sim.difficulty.name == "easy"
    assert flow.sim.score == 0
    assert flow.sim.bird.y == RESPAWN_Y


def test_main_menu_without_profiles(flow):
    flow.choose_difficulty("hard")
    crash(flow)
    assert flow.main_menu()
    assert isinstance(flow.state, DifficultySelect)
    assert not flow.back()


def test_game_over_actions_only_apply_in_game_over(flow):
    assert not flow.restart()
    assert not flow.main_menu()
    assert isinstance(flow.state, DifficultySelect)


# -------- With profiles --------

def test_starts_at_profile_menu(profile_flow):
    assert isinstance(profile_flow.state, ProfileMenu)


def test_select_profile_needs_a_profile(profile_flow):
    assert not profile_flow.open_select_profile()
    assert isinstance(profile_flow.state, ProfileMenu)


def test_create_profile_sets_active_profile(profile_flow, profiles):
    assert create(profile_flow, "Ada")
    assert isinstance(profile_flow.state, DifficultySelect)
    assert profile_flow.active_profile == "Ada"
    assert [p.name for p in profiles.list()] == ["Ada"]


def test_duplicate_name_stays_on_create_profile(profile_flow):
    create(profile_flow, "Ada")
    profile_flow.back()

    assert not create(profile_flow, "Ada")
    assert isinstance(profile_flow.state, CreateProfile)
    assert profile_flow.state.draft == "Ada"
    assert "already exists" in profile_flow.state.error


def test_blank_name_is_rejected(profile_flow):
    assert not create(profile_flow, "   ")
    assert isinstance(profile_flow.state, CreateProfile)
    assert profile_flow.state.error


def test_draft_editing(profile_flow):
    profile_flow.open_create_profile()
    profile_flow.type_text("Grace")
    profile_flow.backspace()
    assert profile_flow.state.draft == "Grac"
    profile_flow.type_text("x" * 30)
    assert len(profile_flow.state.draft) == 12


def test_select_profile_wraps_and_chooses(profiles, engine):
    for name in ("Ada", "Grace", "Linus"):
        profiles.create(name)
    flow = GameFlow(profile_store=profiles, engine=engine)

    assert flow.open_select_profile()
    assert isinstance(flow.state, SelectProfile)
    flow.move_selection(-1)
    assert flow.state.highlighted == "Linus"
    flow.move_selection(1)
    assert flow.state.highlighted == "Ada"

    assert flow.choose_profile(1)
    assert flow.active_profile == "Grace"
    assert isinstance(flow.state, DifficultySelect)


def test_select_profile_back(profiles, engine):
    profiles.create("Ada")
    flow = GameFlow(profile_store=profiles, engine=engine)
    flow.open_select_profile()
    assert flow.back()
    assert isinstance(flow.state, ProfileMenu)
    assert flow.active_profile is None


def test_leaderboard_is_dismissed_by_input(profiles, engine):
    profiles.create("Ada")
    profiles.create("Grace")
    profiles.record_score("Grace", 4)
    flow = GameFlow(profile_store=profiles, engine=engine)

    assert flow.open_leaderboard()
    assert isinstance(flow.state, Leaderboard)
    assert flow.state.rows == (("Grace", 4), ("Ada", 0))

    assert flow.handle_input()
    assert isinstance(flow.state, ProfileMenu)


def test_game_over_records_best_score(profile_flow, profiles):
    create(profile_flow, "Ada")
    profile_flow.choose_difficulty("hard")
    profile_flow.sim.score = 5
    crash(profile_flow)

    assert profile_flow.state.new_best
    assert profiles.get("Ada").high_score == 5

    profile_flow.restart()
    profile_flow.sim.score = 3
    crash(profile_flow)

    assert profile_flow.state.final_score == 3
    assert not profile_flow.state.new_best
    assert profiles.get("Ada").high_score == 5


def test_main_menu_returns_to_profile_menu(profile_flow):
    create(profile_flow, "Ada")
    profile_flow.choose_difficulty("hard")
    crash(profile_flow)

    assert profile_flow.main_menu()
    assert isinstance(profile_flow.state, ProfileMenu)


def test_back_from_difficulty_select(profile_flow):
    create(profile_flow, "Ada")
    assert profile_flow.back()
    assert isinstance(profile_flow.state, ProfileMenu)


def test_menu_actions_outside_profile_menu_are_ignored(profile_flow):
    create(profile_flow, "Ada")
    assert not profile_flow.open_create_profile()
    assert not profile_flow.open_leaderboard()
    assert not profile_flow.type_text("x")
    assert isinstance(profile_flow.state, DifficultySelect)


# -------- Rendering contract --------

def test_snapshot_while_playing(profile_flow):
    create(profile_flow, "Ada")
    profile_flow.choose_difficulty("easy")
    profile_flow.tick(2500)

    snap = profile_flow.snapshot()
    assert snap.state == "playing"
    assert snap.bird == (60, 240.5, 34, 24)
    assert len(snap.pipes) == 1
    assert snap.pipes[0]["top_height"] == 200
    assert snap.difficulty == "easy"
    assert snap.profile_name == "Ada"
    assert snap.high_score == 0


def test_snapshot_after_game_over(flow):
    flow.choose_difficulty("hard")
    flow.sim.score = 2
    crash(flow)

    snap = flow.snapshot()
    assert snap.state == "game_over"
    assert snap.final_score == 2
    assert snap.collision_reason == "floor"
    assert snap.high_score is None


def test_snapshot_lists_profiles_on_profile_menu(profiles, engine):
    profiles.create("Ada")
    snap = GameFlow(profile_store=profiles, engine=engine).snapshot()
    assert snap.state == "profile_menu"
    assert snap.profile_names == ("Ada",)
