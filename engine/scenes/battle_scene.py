"""
Battle screen: wires the state machine to pygame input, the frame clock,
the BattleView presenter and sound/visual feedback.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from engine.battle import (
    BattleFeedback,
    BattleMode,
    BattleStateMachine,
    EffectRouter,
    Scheduler,
    VisualEffectsManager,
)
from engine.core.mode_handlers.base import BaseModeHandler
from systems.input import InputAction, keystroke_from_event
from ui.battle_view import BattleView

if TYPE_CHECKING:
    from engine.core.game import Game


logger = logging.getLogger("code_knight.scenes")


class BattleScene(BaseModeHandler):
    """
    The game screen.

    Every KEYDOWN except the cancel key is handed to the state machine as a
    Keystroke; the machine decides what counts as a typing attempt.
    """

    def __init__(self, game: "Game") -> None:
        super().__init__(game)
        self.scheduler = Scheduler()
        self.effects = VisualEffectsManager()
        self.view = BattleView(game.screen, self.effects)
        self.feedback = BattleFeedback(game.sounds, self.effects, self.view.anchor)
        self.router = EffectRouter(self.view, self.feedback, game.high_scores)
        self.machine = BattleStateMachine(self.scheduler, self.router, rng=game.rng)

    def begin(self, mode: BattleMode) -> None:
        """Start a fresh session in `mode`."""
        self.effects.clear()
        self.view.outcome = None
        self.view.mode_label = "Practice" if mode is BattleMode.PRACTICE else ""
        self.machine.restart(mode)

    def stop(self) -> None:
        self.machine.stop()

    @property
    def mode(self) -> BattleMode:
        session = self.machine.session
        return session.mode if session is not None else BattleMode.BATTLE

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        if self.game.input_manager.event_matches_action(InputAction.CANCEL, event):
            self.game.return_to_menu()
            return True
        keystroke = keystroke_from_event(event)
        if keystroke is None:
            return False
        self.machine.dispatch(keystroke)
        return True

    def update(self, dt: float) -> None:
        self.scheduler.update(dt)
        self.effects.update(dt)
        if self.view.outcome is not None:
            label, score = self.view.outcome
            self.view.outcome = None
            self.game.show_outcome(label, score)

    def draw(self) -> None:
        self.view.draw()
