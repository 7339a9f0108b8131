"""
Visual effects for the typing battle.

Particle bursts on every hit, health-bar pulses, the enemy lunge on an
enemy-side attack and the short-lived combo popup.
"""

from typing import Dict, List, Optional, Tuple
import math
import random
import pygame


# kind -> (start color, end color)
PARTICLE_COLORS: Dict[str, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = {
    "slash": ((0, 255, 153), (0, 255, 231)),
    "spark": ((255, 77, 77), (255, 224, 102)),
}

PARTICLES_PER_BURST = 12
PARTICLE_LIFETIME = 0.7
PULSE_DURATION = 0.3
LUNGE_DURATION = 0.35
POPUP_DURATION = 1.2


class Particle:
    """A single streak particle flying out of a burst."""

    def __init__(
        self,
        x: float,
        y: float,
        vx: float = 0.0,
        vy: float = 0.0,
        color: Tuple[int, int, int] = (255, 255, 255),
        length: float = 6.0,
        lifetime: float = PARTICLE_LIFETIME,
    ):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.color = color
        self.length = length
        self.lifetime = lifetime
        self.max_lifetime = lifetime

    def update(self, dt: float) -> bool:
        """Update particle position and lifetime. Returns False if particle should be removed."""
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.lifetime -= dt
        return self.lifetime > 0

    def get_alpha(self) -> int:
        ratio = self.lifetime / self.max_lifetime if self.max_lifetime > 0 else 0.0
        return int(204 * max(0.0, ratio))  # starts at 0.8 opacity


def _lerp_color(a: Tuple[int, int, int], b: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class VisualEffectsManager:
    """Manages all visual effects for the battle screen."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.pulse_timers: Dict[str, float] = {"player": 0.0, "enemy": 0.0}
        self.lunge_timer: float = 0.0
        self.popup_text: str = ""
        self.popup_timer: float = 0.0

    def add_particles(self, kind: str, x: float, y: float) -> None:
        """Radial burst: green slashes for player hits, red sparks for enemy hits."""
        start, end = PARTICLE_COLORS.get(kind, PARTICLE_COLORS["spark"])
        for _ in range(PARTICLES_PER_BURST):
            angle = self.rng.uniform(0, 2 * math.pi)
            dist = 24 + self.rng.uniform(0, 16)
            speed = dist / PARTICLE_LIFETIME
            self.particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=math.cos(angle) * speed,
                    vy=math.sin(angle) * speed,
                    color=_lerp_color(start, end, self.rng.random()),
                )
            )

    def pulse(self, side: str) -> None:
        self.pulse_timers[side] = PULSE_DURATION

    def pulse_scale(self, side: str) -> float:
        """1.0 at rest, up to 1.15 at the start of a pulse."""
        t = self.pulse_timers.get(side, 0.0)
        if t <= 0:
            return 1.0
        return 1.0 + 0.15 * math.sin(math.pi * t / PULSE_DURATION)

    def enemy_attack(self) -> None:
        self.lunge_timer = LUNGE_DURATION

    def enemy_offset(self) -> float:
        """Horizontal lunge offset for the enemy avatar (towards the player)."""
        if self.lunge_timer <= 0:
            return 0.0
        progress = 1.0 - self.lunge_timer / LUNGE_DURATION
        return -30.0 * math.sin(math.pi * progress)

    def show_popup(self, text: str) -> None:
        self.popup_text = text
        self.popup_timer = POPUP_DURATION

    def update(self, dt: float) -> None:
        self.particles = [p for p in self.particles if p.update(dt)]
        for side in self.pulse_timers:
            self.pulse_timers[side] = max(0.0, self.pulse_timers[side] - dt)
        self.lunge_timer = max(0.0, self.lunge_timer - dt)
        if self.popup_timer > 0:
            self.popup_timer = max(0.0, self.popup_timer - dt)
            if self.popup_timer == 0:
                self.popup_text = ""

    def draw_particles(self, surface: pygame.Surface) -> None:
        for particle in self.particles:
            alpha = particle.get_alpha()
            if alpha <= 0:
                continue
            speed = math.hypot(particle.vx, particle.vy) or 1.0
            dx = particle.vx / speed * particle.length
            dy = particle.vy / speed * particle.length
            size = int(particle.length * 2 + 4)
            streak = pygame.Surface((size, size), pygame.SRCALPHA)
            c = size / 2
            pygame.draw.line(streak, (*particle.color, alpha), (c - dx / 2, c - dy / 2), (c + dx / 2, c + dy / 2), 2)
            surface.blit(streak, (int(particle.x - c), int(particle.y - c)))

    def clear(self) -> None:
        self.particles.clear()
        for side in self.pulse_timers:
            self.pulse_timers[side] = 0.0
        self.lunge_timer = 0.0
        self.popup_text = ""
        self.popup_timer = 0.0
