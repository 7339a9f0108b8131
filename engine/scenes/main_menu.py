from __future__ import annotations

import random
from typing import TYPE_CHECKING, List

import pygame

from engine.core.mode_handlers.base import BaseModeHandler
from systems.input import InputAction
from ui.screen_constants import (
    COLOR_GOLD,
    COLOR_GRADIENT_END,
    COLOR_GRADIENT_START,
    COLOR_SUBTITLE,
    COLOR_TITLE,
    FONT_MONO,
)
from ui.screen_helpers import (
    draw_gradient_background,
    draw_menu_options,
    draw_screen_footer,
    draw_text_with_shadow,
)

if TYPE_CHECKING:
    from engine.core.game import Game


class Particle:
    """A small particle drifting around the menu background."""

    def __init__(self, screen_width: int, screen_height: int, rng: random.Random):
        self.x = rng.uniform(0, screen_width)
        self.y = rng.uniform(0, screen_height)
        self.vx = rng.uniform(-20, 20)
        self.vy = rng.uniform(-20, 20)
        self.size = rng.uniform(1, 2.5)
        self.color = rng.choice([
            (0, 255, 153),   # typed green
            (0, 255, 231),   # cyan
            (150, 170, 200),  # soft blue
        ])
        self.screen_width = screen_width
        self.screen_height = screen_height

    def update(self, dt: float) -> None:
        self.x = (self.x + self.vx * dt) % max(1, self.screen_width)
        self.y = (self.y + self.vy * dt) % max(1, self.screen_height)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, self.color, (int(self.x), int(self.y)), max(1, int(self.size)))


class MainMenuScene(BaseModeHandler):
    """
    Start screen.

    Options:
    - Battle: timed mode, the enemy attacks when the countdown runs out
    - Practice: no countdown
    - Quit
    """

    OPTIONS = [
        ("battle", "Start Battle"),
        ("practice", "Practice Mode"),
        ("quit", "Quit"),
    ]

    def __init__(self, game: "Game") -> None:
        super().__init__(game)
        self.font_title = pygame.font.SysFont(FONT_MONO, 48, bold=True)
        self.font_main = pygame.font.SysFont(FONT_MONO, 24)
        self.font_small = pygame.font.SysFont(FONT_MONO, 18)
        self.selected_index = 0
        self.high_score: int = 0

        w, h = game.screen.get_size()
        rng = random.Random()
        self.particles: List[Particle] = [Particle(w, h, rng) for _ in range(40)]

    def enter(self) -> None:
        self.refresh_high_score()

    def refresh_high_score(self) -> None:
        self.high_score = self.game.high_scores.get_high_score() or 0

    def update(self, dt: float) -> None:
        for particle in self.particles:
            particle.update(dt)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        im = self.game.input_manager

        if im.event_matches_action(InputAction.MENU_UP, event):
            self.selected_index = (self.selected_index - 1) % len(self.OPTIONS)
            return True
        if im.event_matches_action(InputAction.MENU_DOWN, event):
            self.selected_index = (self.selected_index + 1) % len(self.OPTIONS)
            return True
        if im.event_matches_action(InputAction.START_BATTLE, event):
            return self._select("battle")
        if im.event_matches_action(InputAction.START_PRACTICE, event):
            return self._select("practice")
        if im.event_matches_action(InputAction.QUIT, event) or im.event_matches_action(InputAction.CANCEL, event):
            return self._select("quit")
        if im.event_matches_action(InputAction.CONFIRM, event):
            option_id, _ = self.OPTIONS[self.selected_index]
            return self._select(option_id)
        return False

    def _select(self, option_id: str) -> bool:
        if option_id == "battle":
            self.game.start_battle()
        elif option_id == "practice":
            self.game.start_practice()
        elif option_id == "quit":
            self.game.quit()
        return True

    def draw(self) -> None:
        screen = self.game.screen
        w, h = screen.get_size()
        draw_gradient_background(screen, COLOR_GRADIENT_START, COLOR_GRADIENT_END)
        for particle in self.particles:
            particle.draw(screen)

        draw_text_with_shadow(screen, self.font_title, "CODE KNIGHT", w // 2, h // 5, COLOR_TITLE)
        draw_text_with_shadow(
            screen, self.font_small, "Type code to slay monsters", w // 2, h // 5 + 64, COLOR_SUBTITLE
        )
        draw_text_with_shadow(
            screen, self.font_main, f"High Score: {self.high_score}", w // 2, h // 5 + 110, COLOR_GOLD
        )
        draw_menu_options(
            screen,
            self.font_main,
            [label for _, label in self.OPTIONS],
            self.selected_index,
            w // 2,
            h // 2 + 20,
        )
        draw_screen_footer(screen, self.font_small, ["Up/Down: choose   Enter: select   B/P: quick start"])

    @property
    def selected_option(self) -> str:
        return self.OPTIONS[self.selected_index][0]
