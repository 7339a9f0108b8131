"""Sound and visual feedback for battle hits."""

from __future__ import annotations

from typing import Callable, Tuple

from engine.audio import SoundBank
from .effects import Feedback, ParticleKind, Side
from .visual_effects import VisualEffectsManager


class BattleFeedback(Feedback):
    """
    Plays generated sounds and drives VisualEffectsManager.

    `anchor` resolves a named origin ("snippet", ...) to screen coordinates;
    the battle view owns the layout.
    """

    def __init__(
        self,
        sounds: SoundBank,
        effects: VisualEffectsManager,
        anchor: Callable[[str], Tuple[int, int]],
    ) -> None:
        self.sounds = sounds
        self.effects = effects
        self.anchor = anchor

    def play_attack_sound(self) -> None:
        self.sounds.play("attack")

    def play_hurt_sound(self) -> None:
        self.sounds.play("hurt")

    def pulse_health_bar(self, side: Side) -> None:
        self.effects.pulse(side)

    def spawn_particles(self, kind: ParticleKind, origin: str) -> None:
        x, y = self.anchor(origin)
        self.effects.add_particles(kind, x, y)

    def animate_enemy_attack(self) -> None:
        self.effects.enemy_attack()
