"""
Battle screen presenter.

BattleView receives render calls from the state machine (through the
EffectRouter) and keeps the latest values; draw() paints them every frame.
It never reads the BattleSession directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import pygame

from engine.battle.effects import Presenter
from engine.battle.visual_effects import VisualEffectsManager
from settings import COLOR_COMBO, COLOR_ENEMY, COLOR_PENDING, COLOR_PLAYER, COLOR_TYPED, COLOR_WRONG
from ui.hud_utils import blit_centered, calculate_hp_color, draw_bar, scaled_rect
from ui.screen_constants import (
    COLOR_BAR_BACK,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    FONT_EMOJI,
    FONT_MONO,
    HEALTH_BAR_HEIGHT,
    HEALTH_BAR_WIDTH,
    MARGIN_X,
    MARGIN_Y_TOP,
    PROGRESS_BAR_HEIGHT,
    SNIPPET_PANEL_HEIGHT,
)
from ui.screen_helpers import draw_panel, draw_screen_footer


@dataclass
class SnippetView:
    text: str = ""
    cursor: int = 0
    mistake_at_cursor: bool = False
    hint: str = ""
    progress: float = 0.0


@dataclass
class HudView:
    player_health_pct: float = 100.0
    enemy_health_pct: float = 100.0
    level: int = 1
    score: int = 0
    combo_label: str = ""


class BattleView(Presenter):
    """Draws the battle: health bars, enemy, snippet, HUD line and combo."""

    def __init__(self, screen: pygame.Surface, effects: VisualEffectsManager) -> None:
        self.screen = screen
        self.effects = effects
        self.font_code = pygame.font.SysFont(FONT_MONO, 26)
        self.font_ui = pygame.font.SysFont(FONT_MONO, 20)
        self.font_small = pygame.font.SysFont(FONT_MONO, 16)
        self.font_combo = pygame.font.SysFont(FONT_MONO, 30, bold=True)
        self.font_avatar = pygame.font.SysFont(FONT_EMOJI, 96)

        self.snippet = SnippetView()
        self.hud = HudView()
        self.enemy_name: str = ""
        self.enemy_glyph: str = ""
        self.outcome: Optional[Tuple[str, int]] = None
        self.mode_label: str = ""

    # ------------------------------------------------------------------
    # Presenter
    # ------------------------------------------------------------------

    def render_snippet(self, text: str, cursor: int, mistake_at_cursor: bool, hint: str, progress: float) -> None:
        self.snippet = SnippetView(text, cursor, mistake_at_cursor, hint, progress)

    def render_hud(
        self,
        player_health_pct: float,
        enemy_health_pct: float,
        level: int,
        score: int,
        combo_label: str,
    ) -> None:
        self.hud = HudView(player_health_pct, enemy_health_pct, level, score, combo_label)

    def render_enemy(self, name: str, avatar_glyph: str) -> None:
        self.enemy_name = name
        self.enemy_glyph = avatar_glyph

    def render_outcome(self, label: str, final_score: int) -> None:
        self.outcome = (label, final_score)

    def show_combo_streak(self, label: str) -> None:
        self.effects.show_popup(label)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def snippet_rect(self) -> pygame.Rect:
        w, h = self.screen.get_size()
        return pygame.Rect(MARGIN_X, h - SNIPPET_PANEL_HEIGHT - 90, w - 2 * MARGIN_X, SNIPPET_PANEL_HEIGHT)

    def anchor(self, origin: str) -> Tuple[int, int]:
        """Screen point for a named anchor ("snippet", "enemy", "player")."""
        w, _ = self.screen.get_size()
        if origin == "enemy":
            return (w // 2, MARGIN_Y_TOP + 150)
        if origin == "player":
            return (MARGIN_X + HEALTH_BAR_WIDTH // 2, MARGIN_Y_TOP + 30)
        return self.snippet_rect().center

    def wrap_snippet(self, text: str, max_width: int) -> List[Tuple[int, str]]:
        """Split into lines that fit; returns (start index, line) pairs."""
        char_w = max(1, self.font_code.size("M")[0])
        per_line = max(1, max_width // char_w)
        return [(i, text[i:i + per_line]) for i in range(0, len(text), per_line)] or [(0, "")]

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self) -> None:
        self._draw_health_bars()
        self._draw_enemy()
        self._draw_hud_line()
        self._draw_snippet()
        self.effects.draw_particles(self.screen)
        self._draw_combo_popup()
        draw_screen_footer(self.screen, self.font_small, ["Type the code exactly. ESC: back to menu"])

    def _draw_health_bars(self) -> None:
        w, _ = self.screen.get_size()
        y = MARGIN_Y_TOP + 24

        player_rect = pygame.Rect(MARGIN_X, y, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT)
        frac = self.hud.player_health_pct / 100.0
        draw_bar(
            self.screen,
            scaled_rect(player_rect, self.effects.pulse_scale("player")),
            frac,
            COLOR_BAR_BACK,
            calculate_hp_color(frac),
        )
        label = self.font_ui.render("Code Knight", True, COLOR_PLAYER)
        self.screen.blit(label, (MARGIN_X, MARGIN_Y_TOP))

        enemy_rect = pygame.Rect(w - MARGIN_X - HEALTH_BAR_WIDTH, y, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT)
        frac = self.hud.enemy_health_pct / 100.0
        draw_bar(
            self.screen,
            scaled_rect(enemy_rect, self.effects.pulse_scale("enemy")),
            frac,
            COLOR_BAR_BACK,
            COLOR_ENEMY,
        )
        name = self.font_ui.render(self.enemy_name, True, COLOR_ENEMY)
        self.screen.blit(name, (enemy_rect.right - name.get_width(), MARGIN_Y_TOP))

    def _draw_enemy(self) -> None:
        if not self.enemy_glyph:
            return
        cx, cy = self.anchor("enemy")
        avatar = self.font_avatar.render(self.enemy_glyph, True, COLOR_TEXT)
        x = cx - avatar.get_width() // 2 + int(self.effects.enemy_offset())
        self.screen.blit(avatar, (x, cy - avatar.get_height() // 2))

    def _draw_hud_line(self) -> None:
        w, _ = self.screen.get_size()
        y = MARGIN_Y_TOP + 250
        parts = [f"Level {self.hud.level}", f"Score {self.hud.score}"]
        if self.mode_label:
            parts.append(self.mode_label)
        blit_centered(self.screen, self.font_ui.render("    ".join(parts), True, COLOR_TEXT), w // 2, y)
        if self.hud.combo_label:
            combo = self.font_ui.render(self.hud.combo_label, True, COLOR_COMBO)
            blit_centered(self.screen, combo, w // 2, y + 28)

    def _draw_snippet(self) -> None:
        rect = self.snippet_rect()
        draw_panel(self.screen, rect)

        snip = self.snippet
        char_w, line_h = self.font_code.size("M")
        lines = self.wrap_snippet(snip.text, rect.width - 40)
        y = rect.y + 20
        for start, line in lines:
            x = rect.x + 20
            for offset, ch in enumerate(line):
                index = start + offset
                if index < snip.cursor:
                    color = COLOR_TYPED
                elif index == snip.cursor and snip.mistake_at_cursor:
                    color = COLOR_WRONG
                else:
                    color = COLOR_PENDING
                self.screen.blit(self.font_code.render(ch, True, color), (x, y))
                if index == snip.cursor:
                    underline = COLOR_WRONG if snip.mistake_at_cursor else COLOR_TYPED
                    pygame.draw.line(self.screen, underline, (x, y + line_h), (x + char_w, y + line_h), 2)
                x += char_w
            y += line_h + 4

        hint = self.font_small.render(snip.hint, True, COLOR_TEXT_DIM)
        self.screen.blit(hint, (rect.x + 20, rect.bottom - 46))

        progress_rect = pygame.Rect(rect.x + 20, rect.bottom - 20, rect.width - 40, PROGRESS_BAR_HEIGHT)
        draw_bar(self.screen, progress_rect, snip.progress, COLOR_BAR_BACK, COLOR_TYPED, None)

    def _draw_combo_popup(self) -> None:
        if not self.effects.popup_text:
            return
        w, _ = self.screen.get_size()
        popup = self.font_combo.render(self.effects.popup_text, True, COLOR_COMBO)
        blit_centered(self.screen, popup, w // 2, self.snippet_rect().y - 50)
