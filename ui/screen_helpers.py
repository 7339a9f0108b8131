"""
Reusable drawing helpers shared by the menu, battle and outcome screens.
"""

from __future__ import annotations

from typing import List, Tuple
import pygame

from ui.screen_constants import (
    COLOR_BG_PANEL,
    COLOR_BORDER_BRIGHT,
    COLOR_FOOTER,
    COLOR_SELECTED_BG,
    COLOR_SELECTED_TEXT,
    COLOR_SHADOW,
    COLOR_TEXT_DIM,
    COLOR_TITLE,
    LINE_HEIGHT_MEDIUM,
    LINE_HEIGHT_SMALL,
    MARGIN_X,
    MARGIN_Y_FOOTER,
    SHADOW_OFFSET_X,
    SHADOW_OFFSET_Y,
)


def draw_gradient_background(
    screen: pygame.Surface,
    start_color: Tuple[int, int, int],
    end_color: Tuple[int, int, int],
) -> None:
    """Vertical gradient over the whole surface, one line at a time."""
    w, h = screen.get_size()
    for y in range(h):
        t = y / max(1, h - 1)
        color = tuple(int(start_color[i] + (end_color[i] - start_color[i]) * t) for i in range(3))
        pygame.draw.line(screen, color, (0, y), (w, y))


def draw_panel(
    screen: pygame.Surface,
    rect: pygame.Rect,
    bg_color: Tuple[int, int, int, int] = COLOR_BG_PANEL,
    border_color: Tuple[int, int, int] = COLOR_BORDER_BRIGHT,
    border_width: int = 2,
    shadow: bool = True,
) -> None:
    """Semi-transparent panel with an optional drop shadow."""
    if shadow:
        shadow_surf = pygame.Surface((rect.width + 4, rect.height + 4), pygame.SRCALPHA)
        shadow_surf.fill((0, 0, 0, 100))
        screen.blit(shadow_surf, (rect.x - 2, rect.y - 2))

    panel_surf = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel_surf.fill(bg_color)
    pygame.draw.rect(panel_surf, border_color, (0, 0, rect.width, rect.height), border_width)
    screen.blit(panel_surf, rect.topleft)


def draw_text_with_shadow(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    center_x: int,
    y: int,
    color: Tuple[int, int, int] = COLOR_TITLE,
) -> pygame.Rect:
    """Horizontally centered text with a drop shadow. Returns its rect."""
    text_surf = font.render(text, True, color)
    x = center_x - text_surf.get_width() // 2
    shadow_surf = font.render(text, True, COLOR_SHADOW[:3])
    screen.blit(shadow_surf, (x + SHADOW_OFFSET_X, y + SHADOW_OFFSET_Y))
    screen.blit(text_surf, (x, y))
    return text_surf.get_rect(topleft=(x, y))


def draw_menu_options(
    screen: pygame.Surface,
    font: pygame.font.Font,
    labels: List[str],
    selected_index: int,
    center_x: int,
    top_y: int,
) -> None:
    """Vertical list of options with the selected one highlighted."""
    for i, label in enumerate(labels):
        y = top_y + i * (LINE_HEIGHT_MEDIUM + 12)
        selected = i == selected_index
        color = COLOR_SELECTED_TEXT if selected else COLOR_TEXT_DIM
        text_surf = font.render(label, True, color)
        if selected:
            highlight = pygame.Surface((text_surf.get_width() + 40, LINE_HEIGHT_MEDIUM + 6), pygame.SRCALPHA)
            highlight.fill(COLOR_SELECTED_BG)
            screen.blit(highlight, (center_x - highlight.get_width() // 2, y - 3))
        screen.blit(text_surf, (center_x - text_surf.get_width() // 2, y))


def draw_screen_footer(screen: pygame.Surface, font: pygame.font.Font, hints: List[str]) -> None:
    """Draw footer with key hints."""
    h = screen.get_height()
    footer_y = h - MARGIN_Y_FOOTER - (len(hints) - 1) * LINE_HEIGHT_SMALL
    for i, hint in enumerate(hints):
        hint_surf = font.render(hint, True, COLOR_FOOTER)
        screen.blit(hint_surf, (MARGIN_X, footer_y + i * LINE_HEIGHT_SMALL))
