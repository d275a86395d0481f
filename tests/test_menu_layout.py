import pygame

from sky_hopper.data_models import FrameSnapshot
from sky_hopper.menu_layout import (
    button_at, buttons_for, difficulty_buttons, game_over_buttons, profile_menu_buttons
)


def snapshot(state, **extra):
    return FrameSnapshot(state=state, bird=(60, 240, 34, 24), pipes=(), score=0,
                         difficulty="hard", **extra)


def test_difficulty_buttons_hit_testing():
    buttons = difficulty_buttons()
    # Original layout: easy starts at 40, medium at 120, hard at 200; row 225..255
    assert button_at(buttons, (50, 230)) == "difficulty:easy"
    assert button_at(buttons, (130, 240)) == "difficulty:medium"
    assert button_at(buttons, (210, 250)) == "difficulty:hard"
    assert button_at(buttons, (210, 260)) is None
    assert button_at(buttons, (10, 240)) is None


def test_game_over_buttons():
    buttons = game_over_buttons()
    assert button_at(buttons, (60, 290)) == "restart"
    assert button_at(buttons, (200, 290)) == "main_menu"
    assert button_at(buttons, (160, 290)) is None


def test_select_is_hidden_without_profiles():
    assert [b.action for b in profile_menu_buttons(False)] == ["create_profile", "leaderboard"]
    assert [b.action for b in profile_menu_buttons(True)] == [
        "create_profile", "select_profile", "leaderboard"]


def test_buttons_for_each_state():
    assert [b.action for b in buttons_for(snapshot("profile_menu", profile_names=("Ada",)))] == [
        "create_profile", "select_profile", "leaderboard"]
    assert [b.action for b in buttons_for(snapshot("select_profile", profile_names=("Ada", "Bo")))] == [
        "profile:0", "profile:1", "back"]
    assert [b.action for b in buttons_for(snapshot("leaderboard"))] == ["back"]
    assert "back" not in [b.action for b in buttons_for(snapshot("difficulty_select"), False)]
    assert buttons_for(snapshot("playing")) == []


def test_buttons_are_rects():
    for button in buttons_for(snapshot("create_profile")):
        assert isinstance(button.rect, pygame.Rect)


def test_long_profile_list_is_paged_onto_the_canvas():
    names = tuple(f"P{i}" for i in range(25))
    first = buttons_for(snapshot("select_profile", profile_names=names, selected_index=0))
    third = buttons_for(snapshot("select_profile", profile_names=names, selected_index=23))

    assert [b.action for b in first][:-1] == [f"profile:{i}" for i in range(10)]
    assert [b.action for b in third][:-1] == [f"profile:{i}" for i in range(20, 25)]
    for button in first + third:
        assert button.rect.bottom <= 480
