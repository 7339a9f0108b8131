from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from engine.core.mode_handlers.base import BaseModeHandler
from systems.input import InputAction
from ui.screen_constants import (
    COLOR_ACCENT_DANGER,
    COLOR_GOLD,
    COLOR_GRADIENT_END,
    COLOR_GRADIENT_START,
    COLOR_TEXT,
    FONT_MONO,
)
from ui.screen_helpers import draw_gradient_background, draw_screen_footer, draw_text_with_shadow

if TYPE_CHECKING:
    from engine.core.game import Game


class OutcomeScene(BaseModeHandler):
    """End-of-session screen: outcome label, final score and high score."""

    def __init__(self, game: "Game") -> None:
        super().__init__(game)
        self.font_title = pygame.font.SysFont(FONT_MONO, 48, bold=True)
        self.font_main = pygame.font.SysFont(FONT_MONO, 26)
        self.font_small = pygame.font.SysFont(FONT_MONO, 18)
        self.label: str = ""
        self.final_score: int = 0
        self.high_score: int = 0

    def show(self, label: str, final_score: int) -> None:
        self.label = label
        self.final_score = final_score
        self.high_score = self.game.high_scores.get_high_score() or 0

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        im = self.game.input_manager
        if im.event_matches_action(InputAction.RESTART, event):
            self.game.restart()
            return True
        if im.event_matches_action(InputAction.CANCEL, event):
            self.game.return_to_menu()
            return True
        return False

    def draw(self) -> None:
        screen = self.game.screen
        w, h = screen.get_size()
        draw_gradient_background(screen, COLOR_GRADIENT_START, COLOR_GRADIENT_END)

        draw_text_with_shadow(screen, self.font_title, self.label, w // 2, h // 3, COLOR_ACCENT_DANGER)
        draw_text_with_shadow(screen, self.font_main, f"Score: {self.final_score}", w // 2, h // 3 + 80, COLOR_TEXT)
        draw_text_with_shadow(
            screen, self.font_main, f"High Score: {self.high_score}", w // 2, h // 3 + 120, COLOR_GOLD
        )
        draw_screen_footer(screen, self.font_small, ["Enter/R: play again   Esc: back to menu"])
