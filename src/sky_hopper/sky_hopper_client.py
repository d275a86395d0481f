"""
sky_hopper_client.py

Window, input mapping and the main loop. Uses the modular core:
game_flow for state, frame_driver for timing, renderer for drawing.
"""

from typing import Optional, Tuple

import pygame

from .config import profiles_enabled
from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, RENDER_FPS
from .errors import PersistenceError
from .frame_driver import FrameDriver
from .game_flow import GameFlow
from .kv_store import KeyValueStore
from .logger import get_logger, setup_logging
from .menu_layout import button_at, buttons_for
from .profile_store import ProfileStore
from .renderer import Renderer

log = get_logger(__name__)

DIFFICULTY_KEYS = {
    pygame.K_1: "easy", pygame.K_e: "easy",
    pygame.K_2: "medium", pygame.K_m: "medium",
    pygame.K_3: "hard", pygame.K_h: "hard",
}


def dispatch_action(flow: GameFlow, action: str) -> bool:
    """Routes a menu button action to the matching game-flow call."""
    if action.startswith("difficulty:"):
        return flow.choose_difficulty(action.split(":", 1)[1])
    if action.startswith("profile:"):
        return flow.choose_profile(int(action.split(":", 1)[1]))
    handler = {
        "create_profile": flow.open_create_profile,
        "select_profile": flow.open_select_profile,
        "leaderboard": flow.open_leaderboard,
        "submit_profile": flow.submit_profile,
        "back": flow.back,
        "restart": flow.restart,
        "main_menu": flow.main_menu,
    }.get(action)
    if handler is None:
        log.debug("Unknown button action %r", action)
        return False
    return handler()


class SkyHopperClient:
    def __init__(self, flow: GameFlow):
        pygame.init()
        self.flow = flow
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption("Sky Hopper")
        self.renderer = Renderer(self.screen)
        self.driver = FrameDriver(self.flow.tick, fps=RENDER_FPS)

    def run(self):
        """The main client execution loop."""
        pygame.key.start_text_input()
        try:
            self.driver.run(self._handle_events, self._draw)
        finally:
            self.driver.stop()
            if self.flow.store is not None and self.flow.store.kv is not None:
                self.flow.store.kv.close()
            pygame.quit()

    def _draw(self):
        snap = self.flow.snapshot()
        self.renderer.draw(snap, buttons_for(snap, self.flow.profiles_enabled))

    def _pointer(self, pos: Tuple[int, int]):
        """Mouse press or touch start at pos."""
        snap = self.flow.snapshot()
        if snap.state == "playing":
            self.flow.handle_input()
            return
        action = button_at(buttons_for(snap, self.flow.profiles_enabled), pos)
        if action:
            dispatch_action(self.flow, action)
        else:
            self.flow.handle_input()

    def _handle_events(self):
        # The TEXTINPUT that follows a state-switching KEYDOWN belongs to the old state
        skip_text = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.driver.stop()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Touch also produces synthetic mouse events; FINGERDOWN handles those
                if not getattr(event, "touch", False):
                    self._pointer(event.pos)
            elif event.type == pygame.FINGERDOWN:
                self._pointer((int(event.x * CANVAS_WIDTH), int(event.y * CANVAS_HEIGHT)))
            elif event.type == pygame.TEXTINPUT:
                if skip_text:
                    skip_text = False
                else:
                    self.flow.type_text(event.text)
            elif event.type == pygame.KEYDOWN:
                before = type(self.flow.state)
                self._key(event.key)
                skip_text = type(self.flow.state) is not before

    def _key(self, key: int):
        state = self.flow.snapshot().state
        if key == pygame.K_ESCAPE:
            if not self.flow.back():
                self.driver.stop()
        elif key == pygame.K_SPACE:
            self.flow.handle_input()
        elif state == "create_profile":
            if key == pygame.K_RETURN:
                self.flow.submit_profile()
            elif key == pygame.K_BACKSPACE:
                self.flow.backspace()
        elif state == "select_profile":
            if key in (pygame.K_UP, pygame.K_DOWN):
                self.flow.move_selection(-1 if key == pygame.K_UP else 1)
            elif key == pygame.K_RETURN:
                self.flow.choose_profile()
        elif state == "profile_menu":
            action = {pygame.K_n: "create_profile", pygame.K_s: "select_profile",
                      pygame.K_l: "leaderboard"}.get(key)
            if action:
                dispatch_action(self.flow, action)
        elif state == "difficulty_select" and key in DIFFICULTY_KEYS:
            self.flow.choose_difficulty(DIFFICULTY_KEYS[key])
        elif state == "game_over":
            if key == pygame.K_r:
                self.flow.restart()
            elif key == pygame.K_m:
                self.flow.main_menu()


def build_flow(db_file: Optional[str] = None) -> GameFlow:
    """Builds the game flow, falling back to unsaved profiles if storage fails."""
    if not profiles_enabled():
        return GameFlow()
    try:
        kv = KeyValueStore(db_file)
    except PersistenceError as e:
        log.error("Profiles will not be saved: %s", e)
        kv = None
    return GameFlow(profile_store=ProfileStore(kv))


def main():
    setup_logging()
    client = SkyHopperClient(build_flow())
    try:
        client.run()
    except KeyboardInterrupt:
        log.info("Interrupted, exiting.")


if __name__ == "__main__":
    main()
