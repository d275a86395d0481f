"""
menu_layout.py: On-screen button geometry for every menu and pointer hit-testing.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pygame

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH
from .data_models import FrameSnapshot

GREEN = (76, 175, 80)
AMBER = (255, 193, 7)
RED = (244, 67, 54)
GREY = (96, 125, 139)

PROFILES_PER_PAGE = 10


@dataclass(frozen=True)
class Button:
    action: str
    label: str
    rect: pygame.Rect
    color: Tuple[int, int, int]


def _stack(items: Sequence[Tuple[str, str, tuple]], top: int, width: int = 180,
           height: int = 34, spacing: int = 12) -> List[Button]:
    x = (CANVAS_WIDTH - width) // 2
    return [
        Button(action, label, pygame.Rect(x, top + i * (height + spacing), width, height), color)
        for i, (action, label, color) in enumerate(items)
    ]


def back_button() -> Button:
    return Button("back", "Back", pygame.Rect(10, 10, 70, 28), GREY)


def profile_menu_buttons(has_profiles: bool) -> List[Button]:
    items = [("create_profile", "New Profile", GREEN)]
    if has_profiles:
        items.append(("select_profile", "Select Profile", AMBER))
    items.append(("leaderboard", "Leaderboard", RED))
    return _stack(items, top=CANVAS_HEIGHT // 2 - 40)


def difficulty_buttons(with_back: bool = False) -> List[Button]:
    y = CANVAS_HEIGHT // 2 - 15
    w, h = 80, 30
    cx = CANVAS_WIDTH // 2
    buttons = [
        Button("difficulty:easy", "Easy", pygame.Rect(cx - 120, y, w, h), GREEN),
        Button("difficulty:medium", "Medium", pygame.Rect(cx - 40, y, w, h), AMBER),
        Button("difficulty:hard", "Hard", pygame.Rect(cx + 40, y, w, h), RED),
    ]
    if with_back:
        buttons.append(back_button())
    return buttons


def game_over_buttons() -> List[Button]:
    y = CANVAS_HEIGHT // 2 + 40
    w, h = 110, 30
    cx = CANVAS_WIDTH // 2
    return [
        Button("restart", "Restart", pygame.Rect(cx - 120, y, w, h), GREEN),
        Button("main_menu", "Main Menu", pygame.Rect(cx + 10, y, w, h), AMBER),
    ]


def select_profile_buttons(names: Sequence[str], selected: int = 0) -> List[Button]:
    """Shows the page of PROFILES_PER_PAGE names that holds the selected one."""
    start = (selected // PROFILES_PER_PAGE) * PROFILES_PER_PAGE
    page = names[start:start + PROFILES_PER_PAGE]
    items = [(f"profile:{start + i}", name, AMBER) for i, name in enumerate(page)]
    return _stack(items, top=100, height=28, spacing=8) + [back_button()]


def create_profile_buttons() -> List[Button]:
    return _stack([("submit_profile", "Create", GREEN)], top=CANVAS_HEIGHT // 2 + 30) + [back_button()]


def buttons_for(snapshot: FrameSnapshot, profiles_enabled: bool = True) -> List[Button]:
    """The clickable buttons for the state in the snapshot."""
    state = snapshot.state
    if state == "profile_menu":
        return profile_menu_buttons(bool(snapshot.profile_names))
    if state == "create_profile":
        return create_profile_buttons()
    if state == "select_profile":
        return select_profile_buttons(snapshot.profile_names, snapshot.selected_index)
    if state == "leaderboard":
        return [back_button()]
    if state == "difficulty_select":
        return difficulty_buttons(with_back=profiles_enabled)
    if state == "game_over":
        return game_over_buttons()
    return []


def button_at(buttons: Sequence[Button], pos: Tuple[int, int]) -> Optional[str]:
    """Returns the action of the button under pos, if any."""
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button.action
    return None
