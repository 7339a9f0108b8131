"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os
import random
from typing import Generator, List, Tuple

# Headless pygame: no window, no audio device needed.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from engine.battle import BattleMode, BattleStateMachine, EffectRouter, Feedback, Presenter, Scheduler
from engine.utils.high_scores import HighScoreStore
from systems.enemy_roster import EnemyTemplate
from systems.snippet_bank import Snippet


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    pygame.display.set_mode((800, 600))
    yield
    pygame.quit()


class RecordingCollaborator(Presenter, Feedback):
    """Presenter + feedback double that records every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))

    def render_snippet(self, text, cursor, mistake_at_cursor, hint, progress):
        self._record("render_snippet", text, cursor, mistake_at_cursor, hint, progress)

    def render_hud(self, player_health_pct, enemy_health_pct, level, score, combo_label):
        self._record("render_hud", player_health_pct, enemy_health_pct, level, score, combo_label)

    def render_enemy(self, name, avatar_glyph):
        self._record("render_enemy", name, avatar_glyph)

    def render_outcome(self, label, final_score):
        self._record("render_outcome", label, final_score)

    def show_combo_streak(self, label):
        self._record("show_combo_streak", label)

    def play_attack_sound(self):
        self._record("play_attack_sound")

    def play_hurt_sound(self):
        self._record("play_hurt_sound")

    def pulse_health_bar(self, side):
        self._record("pulse_health_bar", side)

    def spawn_particles(self, kind, origin):
        self._record("spawn_particles", kind, origin)

    def animate_enemy_attack(self):
        self._record("animate_enemy_attack")

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def last(self, name: str) -> tuple:
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        raise AssertionError(f"{name} was never called")

    def clear(self) -> None:
        self.calls.clear()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def recorder() -> RecordingCollaborator:
    return RecordingCollaborator()


@pytest.fixture
def high_scores(tmp_path) -> HighScoreStore:
    return HighScoreStore(tmp_path / "high_score.json")


@pytest.fixture
def short_snippet() -> Snippet:
    """11 characters -> 22 second countdown."""
    return Snippet("let x = 10;", "Variable declaration.")


@pytest.fixture
def long_snippet() -> Snippet:
    """42 characters -> countdown capped at 40 seconds."""
    return Snippet("for(let i=0; i<5; i++) { console.log(i); }", "This is a for loop.")


@pytest.fixture
def make_machine(scheduler, recorder, high_scores, rng):
    """
    Build a BattleStateMachine over a fixed snippet catalog.

    Usage: machine = make_machine([snippet], roster=[...], mode=BattleMode.BATTLE)
    The returned machine has already started a session.
    """
    def _make(snippets, roster=None, mode=BattleMode.BATTLE) -> BattleStateMachine:
        router = EffectRouter(recorder, recorder, high_scores)
        machine = BattleStateMachine(scheduler, router, rng=rng, snippets=snippets, roster=roster)
        machine.restart(mode)
        return machine
    return _make


@pytest.fixture
def slime_roster() -> List[EnemyTemplate]:
    return [
        EnemyTemplate("Slime", "S", 30),
        EnemyTemplate("Goblin", "G", 40),
    ]
