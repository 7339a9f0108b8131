from __future__ import annotations

import pygame


def calculate_hp_color(hp_fraction: float) -> tuple[int, int, int]:
    """
    HP bar color for a health fraction.

    - Green (100, 255, 100) at 100% HP
    - Yellow (255, 255, 100) at 50% HP
    - Red (255, 100, 100) at 0% HP
    """
    hp_fraction = max(0.0, min(1.0, hp_fraction))

    if hp_fraction > 0.5:
        t = (hp_fraction - 0.5) * 2.0  # Maps 0.5-1.0 to 0.0-1.0
        return (int(100 + 155 * (1 - t)), 255, 100)
    t = hp_fraction * 2.0  # Maps 0.0-0.5 to 0.0-1.0
    return (255, int(255 - 155 * (1 - t)), 100)


def draw_bar(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fraction: float,
    back_color: tuple[int, int, int],
    fill_color: tuple[int, int, int],
    border_color: tuple[int, int, int] | None = (255, 255, 255),
) -> None:
    """Utility: draw a simple filled bar (HP, snippet progress)."""
    fraction = max(0.0, min(1.0, float(fraction)))
    pygame.draw.rect(surface, back_color, rect)
    if fraction > 0.0:
        fill = pygame.Rect(rect.x, rect.y, int(rect.width * fraction), rect.height)
        pygame.draw.rect(surface, fill_color, fill)
    if border_color is not None and rect.width > 2 and rect.height > 2:
        pygame.draw.rect(surface, border_color, rect, 1)


def scaled_rect(rect: pygame.Rect, scale: float) -> pygame.Rect:
    """Grow `rect` around its center (used for health-bar pulses)."""
    if scale == 1.0:
        return rect
    grown = rect.inflate(int(rect.width * (scale - 1.0)), int(rect.height * (scale - 1.0) * 2))
    grown.center = rect.center
    return grown


def blit_centered(surface: pygame.Surface, text_surf: pygame.Surface, center_x: int, y: int) -> None:
    surface.blit(text_surf, (center_x - text_surf.get_width() // 2, y))
