"""
Unit tests for input mapping and keystroke conversion.
"""

import pygame
import pytest

from engine.battle.events import Keystroke
from engine.controllers.input import create_default_input_manager
from systems.input import InputAction, InputManager, keystroke_from_event


def _keydown(key, unicode="", mod=0):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=mod)


class TestKeystrokeFromEvent:

    def test_plain_character(self):
        assert keystroke_from_event(_keydown(pygame.K_a, "a")) == Keystroke("a", False, False)

    def test_shifted_character_keeps_unicode(self):
        ks = keystroke_from_event(_keydown(pygame.K_9, "(", pygame.KMOD_LSHIFT))
        assert ks.char == "("
        assert ks.is_typeable

    def test_ctrl_flag(self):
        ks = keystroke_from_event(_keydown(pygame.K_c, "\x03", pygame.KMOD_LCTRL))
        assert ks.ctrl is True
        assert not ks.is_typeable

    def test_non_keydown_returns_none(self):
        event = pygame.event.Event(pygame.KEYUP, key=pygame.K_a, unicode="a", mod=0)
        assert keystroke_from_event(event) is None


class TestKeystroke:

    @pytest.mark.parametrize("ks", [
        Keystroke("ab"),
        Keystroke(""),
        Keystroke("\r"),
        Keystroke("\t"),
        Keystroke("x", ctrl=True),
        Keystroke("x", meta=True),
    ])
    def test_not_typeable(self, ks):
        assert ks.is_typeable is False

    @pytest.mark.parametrize("char", ["a", "Z", " ", "{", ";", "#"])
    def test_typeable(self, char):
        assert Keystroke(char).is_typeable is True


class TestInputManager:

    def test_bind_and_match(self):
        mgr = InputManager()
        mgr.bind_key(InputAction.CONFIRM, pygame.K_RETURN)
        assert mgr.event_matches_action(InputAction.CONFIRM, _keydown(pygame.K_RETURN))
        assert not mgr.event_matches_action(InputAction.CONFIRM, _keydown(pygame.K_a))

    def test_string_actions_are_normalised(self):
        mgr = InputManager()
        mgr.bind_key("cancel", pygame.K_ESCAPE)
        assert mgr.get_bindings(InputAction.CANCEL) == {pygame.K_ESCAPE}

    def test_unknown_action_raises(self):
        with pytest.raises(ValueError):
            InputManager().bind_key("fly", pygame.K_f)

    def test_unbind_removes_empty_action(self):
        mgr = InputManager()
        mgr.bind_key(InputAction.QUIT, pygame.K_q)
        mgr.unbind_key(InputAction.QUIT, pygame.K_q)
        assert mgr.get_bindings(InputAction.QUIT) == set()

    def test_default_bindings(self):
        mgr = create_default_input_manager()
        assert pygame.K_ESCAPE in mgr.get_bindings(InputAction.CANCEL)
        assert pygame.K_r in mgr.get_bindings(InputAction.RESTART)
        assert pygame.K_p in mgr.get_bindings(InputAction.START_PRACTICE)
