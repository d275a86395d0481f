"""
renderer.py: Draws a FrameSnapshot with pygame. Reads snapshots only.
"""

from typing import Sequence

import pygame

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH
from .data_models import FrameSnapshot
from .menu_layout import Button

SKY_COLOR = (176, 226, 255)
BIRD_COLOR = (255, 218, 51)
BIRD_BORDER_COLOR = (198, 166, 0)
PIPE_COLOR = (34, 139, 34)
PIPE_BORDER_COLOR = (28, 116, 28)
TEXT_COLOR = (255, 255, 255)
TEXT_SHADOW_COLOR = (0, 0, 0)
ERROR_COLOR = (255, 90, 90)

REASON_TEXT = {
    "ceiling": "Hit the ceiling!",
    "floor": "Hit the ground!",
    "pipe": "Hit a pipe!",
}


class Renderer:
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self.font_title = pygame.font.Font(None, 48)
        self.font_large = pygame.font.Font(None, 32)
        self.font = pygame.font.Font(None, 24)
        self.font_small = pygame.font.Font(None, 20)

    def _text(self, text: str, font: pygame.font.Font, center: tuple, color=TEXT_COLOR):
        # Shadowed text so it reads over both sky and pipes
        shadow = font.render(text, True, TEXT_SHADOW_COLOR)
        self.screen.blit(shadow, shadow.get_rect(center=(center[0] + 2, center[1] + 2)))
        rendered = font.render(text, True, color)
        self.screen.blit(rendered, rendered.get_rect(center=center))

    def _buttons(self, buttons: Sequence[Button], selected: str = ""):
        for button in buttons:
            pygame.draw.rect(self.screen, button.color, button.rect, border_radius=6)
            if button.action == selected:
                pygame.draw.rect(self.screen, TEXT_COLOR, button.rect, width=2, border_radius=6)
            self._text(button.label, self.font_small, button.rect.center)

    def draw_world(self, snap: FrameSnapshot):
        self.screen.fill(SKY_COLOR)
        for pipe in snap.pipes:
            top = pygame.Rect(pipe["x"], 0, pipe["width"], pipe["top_height"])
            bottom = pygame.Rect(pipe["x"], pipe["bottom_y"], pipe["width"], pipe["bottom_height"])
            for rect in (top, bottom):
                pygame.draw.rect(self.screen, PIPE_COLOR, rect)
                pygame.draw.rect(self.screen, PIPE_BORDER_COLOR, rect, width=4)

        x, y, w, h = snap.bird
        bird = pygame.Rect(x, y, w, h)
        pygame.draw.rect(self.screen, BIRD_COLOR, bird)
        pygame.draw.rect(self.screen, BIRD_BORDER_COLOR, bird, width=2)

    def draw(self, snap: FrameSnapshot, buttons: Sequence[Button]):
        self.draw_world(snap)
        cx = CANVAS_WIDTH // 2
        state = snap.state

        if state == "playing":
            self._text(str(snap.score), self.font_title, (cx, 60))

        elif state == "profile_menu":
            self._text("Sky Hopper", self.font_title, (cx, CANVAS_HEIGHT // 3 - 30))
            self._buttons(buttons)

        elif state == "create_profile":
            self._text("New Profile", self.font_large, (cx, 120))
            box = pygame.Rect(cx - 100, CANVAS_HEIGHT // 2 - 30, 200, 36)
            pygame.draw.rect(self.screen, TEXT_COLOR, box, border_radius=6)
            name = self.font.render(snap.draft_name + "_", True, TEXT_SHADOW_COLOR)
            self.screen.blit(name, name.get_rect(midleft=(box.x + 10, box.centery)))
            if snap.error:
                self._text(snap.error, self.font_small, (cx, box.bottom + 100), ERROR_COLOR)
            self._buttons(buttons)

        elif state == "select_profile":
            self._text("Select Profile", self.font_large, (cx, 70))
            self._buttons(buttons, selected=f"profile:{snap.selected_index}")

        elif state == "leaderboard":
            self._text("Leaderboard", self.font_large, (cx, 70))
            for i, (name, score) in enumerate(snap.leaderboard[:10]):
                self._text(f"{i + 1}. {name} - {score}", self.font, (cx, 120 + i * 28))
            if not snap.leaderboard:
                self._text("No profiles yet", self.font, (cx, 120))
            self._buttons(buttons)

        elif state == "difficulty_select":
            self._text("Sky Hopper", self.font_title, (cx, CANVAS_HEIGHT // 3))
            self._text("Select Difficulty", self.font, (cx, CANVAS_HEIGHT // 2 - 50))
            if snap.profile_name:
                best = f"{snap.profile_name}  Best: {snap.high_score}"
                self._text(best, self.font_small, (cx, CANVAS_HEIGHT // 2 + 40))
            self._buttons(buttons)

        elif state == "game_over":
            self._text("Game Over", self.font_title, (cx, CANVAS_HEIGHT // 2 - 80))
            self._text(REASON_TEXT.get(snap.collision_reason, ""), self.font, (cx, CANVAS_HEIGHT // 2 - 45))
            self._text(f"Score: {snap.final_score}", self.font_large, (cx, CANVAS_HEIGHT // 2 - 15))
            if snap.new_best:
                self._text("New best!", self.font, (cx, CANVAS_HEIGHT // 2 + 12), BIRD_COLOR)
            elif snap.high_score is not None:
                self._text(f"Best: {snap.high_score}", self.font_small, (cx, CANVAS_HEIGHT // 2 + 12))
            self._buttons(buttons)

        pygame.display.flip()
