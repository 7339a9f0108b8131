"""
Outbound effects produced by the battle state machine.

Handlers never touch pygame, audio or the disk directly. They return a list of
effect records; EffectRouter then forwards each one to the presenter, the
feedback collaborator (sound/particles/pulses) or the high-score store.
Collaborator failures are logged and swallowed so they can never stall a
battle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Literal, Optional, Union

from engine.error_handler import log_error

if TYPE_CHECKING:
    from engine.utils.high_scores import HighScoreStore


logger = logging.getLogger("code_knight.effects")

Side = Literal["player", "enemy"]
ParticleKind = Literal["slash", "spark"]
SoundName = Literal["attack", "hurt"]


# ----------------------------------------------------------------------
# Effect records
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class RenderSnippet:
    text: str
    cursor: int
    mistake_at_cursor: bool
    hint: str = ""

    @property
    def progress(self) -> float:
        return self.cursor / len(self.text) if self.text else 0.0


@dataclass(frozen=True)
class RenderHUD:
    player_health_pct: float
    enemy_health_pct: float
    level: int
    score: int
    combo_label: str = ""


@dataclass(frozen=True)
class RenderEnemy:
    name: str
    avatar_glyph: str


@dataclass(frozen=True)
class RenderOutcome:
    label: str
    final_score: int


@dataclass(frozen=True)
class ShowComboStreak:
    """Explicit popup fired on exact streak milestones."""
    label: str


@dataclass(frozen=True)
class PlaySound:
    sound: SoundName


@dataclass(frozen=True)
class PulseHealthBar:
    side: Side


@dataclass(frozen=True)
class SpawnParticles:
    kind: ParticleKind
    # Anchor name resolved by the presenter; the core has no screen geometry.
    origin: str = "snippet"


@dataclass(frozen=True)
class AnimateEnemyAttack:
    pass


@dataclass(frozen=True)
class SubmitScore:
    score: int


Effect = Union[
    RenderSnippet,
    RenderHUD,
    RenderEnemy,
    RenderOutcome,
    ShowComboStreak,
    PlaySound,
    PulseHealthBar,
    SpawnParticles,
    AnimateEnemyAttack,
    SubmitScore,
]


# ----------------------------------------------------------------------
# Collaborator interfaces
# ----------------------------------------------------------------------

class Presenter:
    """Draws battle state. All calls are fire-and-forget."""

    def render_snippet(self, text: str, cursor: int, mistake_at_cursor: bool, hint: str, progress: float) -> None:
        pass

    def render_hud(
        self,
        player_health_pct: float,
        enemy_health_pct: float,
        level: int,
        score: int,
        combo_label: str,
    ) -> None:
        pass

    def render_enemy(self, name: str, avatar_glyph: str) -> None:
        pass

    def render_outcome(self, label: str, final_score: int) -> None:
        pass

    def show_combo_streak(self, label: str) -> None:
        pass


class Feedback:
    """Sound, particles and health-bar pulses."""

    def play_attack_sound(self) -> None:
        pass

    def play_hurt_sound(self) -> None:
        pass

    def pulse_health_bar(self, side: Side) -> None:
        pass

    def spawn_particles(self, kind: ParticleKind, origin: str) -> None:
        pass

    def animate_enemy_attack(self) -> None:
        pass


# ----------------------------------------------------------------------
# Router
# ----------------------------------------------------------------------

class EffectRouter:
    """
    Forwards effects to collaborators.

    Every collaborator call is isolated: an exception is logged and the
    remaining effects still go out.
    """

    def __init__(
        self,
        presenter: Optional[Presenter] = None,
        feedback: Optional[Feedback] = None,
        high_scores: Optional["HighScoreStore"] = None,
    ) -> None:
        self.presenter = presenter or Presenter()
        self.feedback = feedback or Feedback()
        self.high_scores = high_scores
        self._handlers: Dict[type, Callable[[Effect], None]] = {
            RenderSnippet: self._render_snippet,
            RenderHUD: self._render_hud,
            RenderEnemy: lambda e: self.presenter.render_enemy(e.name, e.avatar_glyph),
            RenderOutcome: lambda e: self.presenter.render_outcome(e.label, e.final_score),
            ShowComboStreak: lambda e: self.presenter.show_combo_streak(e.label),
            PlaySound: self._play_sound,
            PulseHealthBar: lambda e: self.feedback.pulse_health_bar(e.side),
            SpawnParticles: lambda e: self.feedback.spawn_particles(e.kind, e.origin),
            AnimateEnemyAttack: lambda e: self.feedback.animate_enemy_attack(),
            SubmitScore: self._submit_score,
        }

    def route(self, effects: List[Effect]) -> None:
        for effect in effects:
            handler = self._handlers.get(type(effect))
            if handler is None:
                logger.warning("No route for effect %r", effect)
                continue
            try:
                handler(effect)
            except Exception as e:
                log_error(e, context=f"effect_{type(effect).__name__}")

    def _render_snippet(self, e: RenderSnippet) -> None:
        self.presenter.render_snippet(e.text, e.cursor, e.mistake_at_cursor, e.hint, e.progress)

    def _render_hud(self, e: RenderHUD) -> None:
        self.presenter.render_hud(
            e.player_health_pct,
            e.enemy_health_pct,
            e.level,
            e.score,
            e.combo_label,
        )

    def _play_sound(self, e: PlaySound) -> None:
        if e.sound == "attack":
            self.feedback.play_attack_sound()
        else:
            self.feedback.play_hurt_sound()

    def _submit_score(self, e: SubmitScore) -> None:
        """Persist the score only when it beats the stored one (absent counts as 0)."""
        if self.high_scores is None:
            return
        best = self.high_scores.get_high_score() or 0
        if e.score > best:
            self.high_scores.set_high_score(e.score)
            logger.info("New high score %d (was %d)", e.score, best)
