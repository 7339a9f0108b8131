"""
Typing battle state machine.

Drives a BattleSession from three kinds of input: keystrokes, the per-snippet
countdown expiring, and restart commands. Two more events (SnippetCompleted,
PenaltyElapsed) are posted back to itself by deferred actions.

Every handler takes (event, session) and returns the session it leaves behind
plus the list of effects to send out. dispatch() runs one event to completion
before the next one is admitted, so session updates never interleave.

States:
- awaiting input (the only steady state)
- mistake penalty (input_locked, left automatically after MISTAKE_PENALTY_DELAY)
- ended (player health reached 0; only a Restart leaves it)

There is no victory state: defeating an enemy always starts the next level.
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Deque, List, Optional, Sequence, Tuple

from settings import (
    MAX_TIME_LIMIT,
    MISTAKE_PENALTY_DELAY,
    SECONDS_PER_CHAR,
    SNIPPET_COMPLETE_DELAY,
    TIMEOUT_DAMAGE,
)
from systems.enemy_roster import ENEMY_ROSTER, EnemyTemplate, select_enemy
from systems.snippet_bank import SNIPPETS, Snippet, select_snippet
from telemetry.logger import telemetry

from .effects import (
    AnimateEnemyAttack,
    Effect,
    EffectRouter,
    PlaySound,
    PulseHealthBar,
    RenderEnemy,
    RenderHUD,
    RenderOutcome,
    RenderSnippet,
    ShowComboStreak,
    SpawnParticles,
    SubmitScore,
)
from .events import BattleEvent, Keystroke, PenaltyElapsed, Restart, SnippetCompleted, Timeout
from .session import BattleMode, BattleSession, new_session
from .timers import Scheduler, TimerController


logger = logging.getLogger("code_knight.battle")

HandlerResult = Tuple[BattleSession, List[Effect]]

DEFEAT_LABEL = "Game Over"


def time_limit_for(text: str) -> int:
    """Seconds allowed for a snippet: 2 per character, capped at 40."""
    return min(MAX_TIME_LIMIT, SECONDS_PER_CHAR * len(text))


class BattleStateMachine:
    """
    Owns the current BattleSession and the countdown.

    Args:
        scheduler: Clock the countdown and deferred actions run on
        router: Where effects are sent (presenter, feedback, high scores)
        rng: Random source for snippet selection; inject a seeded
             random.Random for reproducible sessions
        snippets / roster: Catalog overrides, mostly for tests
    """

    def __init__(
        self,
        scheduler: Scheduler,
        router: Optional[EffectRouter] = None,
        rng: Optional[random.Random] = None,
        snippets: Optional[Sequence[Snippet]] = None,
        roster: Optional[Sequence[EnemyTemplate]] = None,
    ) -> None:
        self.scheduler = scheduler
        self.timer = TimerController(scheduler)
        self.router = router or EffectRouter()
        self.rng = rng or random.Random()
        self.snippets: Sequence[Snippet] = snippets if snippets is not None else SNIPPETS
        self.roster: Sequence[EnemyTemplate] = roster if roster is not None else ENEMY_ROSTER

        self.session: Optional[BattleSession] = None
        self._generation = 0
        self._queue: Deque[BattleEvent] = deque()
        self._dispatching = False

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, event: BattleEvent) -> List[Effect]:
        """
        Process an event (and anything queued while it runs) to completion.

        Returns every effect emitted, after they have been routed.
        """
        self._queue.append(event)
        if self._dispatching:
            return []

        emitted: List[Effect] = []
        self._dispatching = True
        try:
            while self._queue:
                current = self._queue.popleft()
                self.session, effects = self._handle(current, self.session)
                emitted.extend(effects)
                self.router.route(effects)
        finally:
            self._dispatching = False
        return emitted

    def restart(self, mode: BattleMode) -> List[Effect]:
        return self.dispatch(Restart(mode))

    def on_key(self, key: str, ctrl_held: bool = False, meta_held: bool = False) -> List[Effect]:
        return self.dispatch(Keystroke(key, ctrl_held, meta_held))

    def stop(self) -> None:
        """Abandon the current session (back to menu). Pending deferred actions become no-ops."""
        self.timer.cancel()
        self._generation += 1
        if self.session is not None:
            self.session.ended = True

    @property
    def time_remaining(self) -> Optional[float]:
        return self.timer.remaining

    # ------------------------------------------------------------------
    # Dispatch table
    # ------------------------------------------------------------------

    def _handle(self, event: BattleEvent, session: Optional[BattleSession]) -> Tuple[Optional[BattleSession], List[Effect]]:
        if isinstance(event, Restart):
            return self._on_restart(event, session)
        if session is None:
            return session, []
        if isinstance(event, Keystroke):
            return self._on_keystroke(event, session)
        if self._is_stale(event.generation, session):
            logger.debug("Dropping stale %s", type(event).__name__)
            return session, []
        if isinstance(event, Timeout):
            return self._on_timeout(event, session)
        if isinstance(event, SnippetCompleted):
            return self._on_snippet_completed(event, session)
        if isinstance(event, PenaltyElapsed):
            return self._on_penalty_elapsed(event, session)
        logger.warning("Unknown battle event %r", event)
        return session, []

    def _is_stale(self, generation: int, session: BattleSession) -> bool:
        return session.ended or generation != session.generation or generation != self._generation

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_restart(self, event: Restart, session: Optional[BattleSession]) -> HandlerResult:
        self.timer.cancel()
        self._generation += 1
        fresh = new_session(event.mode, self._generation)
        self.timer.enabled = event.mode is BattleMode.BATTLE
        logger.info("New %s session (generation %d)", event.mode.value, fresh.generation)
        return fresh, self._start_battle(fresh, 1)

    def _on_keystroke(self, event: Keystroke, session: BattleSession) -> HandlerResult:
        if session.ended or session.input_locked or not event.is_typeable:
            return session, []
        if session.current_snippet is None or session.snippet_complete:
            return session, []

        text = session.current_snippet.text
        if event.char != text[session.cursor]:
            return session, self._mistake(session)

        session.cursor += 1
        session.mistake_pending = False
        serial = session.battle_serial
        effects = self._player_attack(session)

        if session.battle_serial != serial:
            # Enemy fell; a new battle is already installed.
            return session, effects

        effects.append(self._render_snippet(session))
        if session.snippet_complete:
            # The countdown no longer applies once every character is in.
            self.timer.cancel()
            generation = session.generation
            self.scheduler.call_later(
                SNIPPET_COMPLETE_DELAY,
                lambda: self.dispatch(SnippetCompleted(generation, serial)),
            )
            telemetry.log("snippet_complete", level=session.level, length=len(text))
        return session, effects

    def _on_timeout(self, event: Timeout, session: BattleSession) -> HandlerResult:
        session.player_health = max(0, session.player_health - TIMEOUT_DAMAGE)
        telemetry.log("enemy_attack", level=session.level, player_health=session.player_health)
        effects: List[Effect] = [
            PulseHealthBar("player"),
            AnimateEnemyAttack(),
            SpawnParticles("spark"),
        ]

        if session.player_health <= 0:
            return session, effects + self._end_session(session)

        effects.append(self._render_hud(session))
        effects.append(PlaySound("hurt"))
        session.combo_tracker.reset()
        # Same level, fresh enemy and snippet.
        effects.extend(self._start_battle(session, session.level))
        return session, effects

    def _on_snippet_completed(self, event: SnippetCompleted, session: BattleSession) -> HandlerResult:
        if event.battle_serial != session.battle_serial:
            return session, []
        return session, self._start_battle(session, session.level + 1)

    def _on_penalty_elapsed(self, event: PenaltyElapsed, session: BattleSession) -> HandlerResult:
        session.input_locked = False
        session.mistake_pending = False
        return session, [self._render_snippet(session)]

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _start_battle(self, session: BattleSession, level: int) -> List[Effect]:
        session.level = level
        enemy = select_enemy(level, self.roster)
        session.enemy = enemy
        session.enemy_health = enemy.max_health

        snippet = select_snippet(level, self.rng, self.snippets)
        session.current_snippet = snippet
        session.cursor = 0
        session.mistake_pending = False
        session.time_limit_seconds = time_limit_for(snippet.text)
        session.battle_serial += 1

        generation = session.generation
        self.timer.schedule(
            session.time_limit_seconds,
            lambda: self.dispatch(Timeout(generation)),
        )

        logger.debug(
            "Battle %d: level %d vs %s, %d chars, %ds",
            session.battle_serial,
            level,
            enemy.name,
            len(snippet.text),
            session.time_limit_seconds,
        )
        telemetry.log(
            "battle_start",
            level=level,
            enemy=enemy.name,
            snippet_length=len(snippet.text),
            time_limit=session.time_limit_seconds,
            mode=session.mode.value,
        )
        return [
            RenderEnemy(enemy.name, enemy.avatar_glyph),
            self._render_snippet(session),
            self._render_hud(session),
        ]

    def _player_attack(self, session: BattleSession) -> List[Effect]:
        session.enemy_health -= 1
        session.score += 1
        session.combo_tracker.hit()

        effects: List[Effect] = [
            PlaySound("attack"),
            PulseHealthBar("enemy"),
            SpawnParticles("slash"),
        ]
        if session.combo_tracker.is_streak_milestone():
            effects.append(ShowComboStreak(f"Combo! x{session.combo}"))

        if session.enemy_health <= 0:
            session.enemy_health = 0
            telemetry.log("enemy_defeated", level=session.level, enemy=session.enemy.name, score=session.score)
            logger.info("%s defeated at level %d", session.enemy.name, session.level)
            effects.extend(self._start_battle(session, session.level + 1))

        effects.append(self._render_hud(session))
        return effects

    def _mistake(self, session: BattleSession) -> List[Effect]:
        session.mistake_pending = True
        session.combo_tracker.reset()
        session.input_locked = True

        generation = session.generation
        self.scheduler.call_later(
            MISTAKE_PENALTY_DELAY,
            lambda: self.dispatch(PenaltyElapsed(generation)),
        )
        # Player-side hit feedback only; player_health is untouched.
        return [
            self._render_snippet(session),
            self._render_hud(session),
            PlaySound("hurt"),
            PulseHealthBar("player"),
            AnimateEnemyAttack(),
            SpawnParticles("spark"),
        ]

    def _end_session(self, session: BattleSession) -> List[Effect]:
        self.timer.cancel()
        session.ended = True
        session.outcome = "defeat"
        logger.info("Session over: score %d, max combo %d, level %d", session.score, session.max_combo, session.level)
        telemetry.log(
            "session_end",
            outcome=session.outcome,
            score=session.score,
            max_combo=session.max_combo,
            level=session.level,
        )
        return [
            self._render_hud(session),
            SubmitScore(session.score),
            RenderOutcome(DEFEAT_LABEL, session.score),
        ]

    # ------------------------------------------------------------------
    # Effect builders
    # ------------------------------------------------------------------

    @staticmethod
    def _render_snippet(session: BattleSession) -> RenderSnippet:
        snippet = session.current_snippet
        return RenderSnippet(snippet.text, session.cursor, session.mistake_pending, snippet.hint)

    @staticmethod
    def _render_hud(session: BattleSession) -> RenderHUD:
        return RenderHUD(
            session.player_health_pct,
            session.enemy_health_pct,
            session.level,
            session.score,
            session.combo_tracker.streak_label(),
        )
