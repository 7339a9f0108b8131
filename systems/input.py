from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Set, Union

import pygame

from engine.battle.events import Keystroke


ActionType = Union["InputAction", str]

# pygame 2 names the Cmd/Windows key GUI; META is kept for older builds.
_META_MASK = getattr(pygame, "KMOD_GUI", 0) | getattr(pygame, "KMOD_META", 0)


class InputAction(str, Enum):
    """
    Logical menu actions.

    Typing during a battle bypasses these: every printable key goes to the
    battle as a Keystroke instead.
    """

    MENU_UP = "menu_up"
    MENU_DOWN = "menu_down"
    CONFIRM = "confirm"
    CANCEL = "cancel"

    START_BATTLE = "start_battle"
    START_PRACTICE = "start_practice"
    RESTART = "restart"
    QUIT = "quit"


class InputManager:
    """
    Maps logical InputActions to one or more pygame key codes.
    """

    def __init__(self) -> None:
        self._bindings: Dict[InputAction, Set[int]] = {}

    def _normalise_action(self, action: ActionType) -> InputAction:
        if isinstance(action, InputAction):
            return action
        # Unknown strings raise ValueError rather than creating a dead binding.
        return InputAction(action)

    def bind_key(self, action: ActionType, key: int) -> None:
        """Bind a pygame key constant to the given logical action."""
        act = self._normalise_action(action)
        self._bindings.setdefault(act, set()).add(int(key))

    def unbind_key(self, action: ActionType, key: int) -> None:
        act = self._normalise_action(action)
        if act in self._bindings:
            self._bindings[act].discard(int(key))
            if not self._bindings[act]:
                del self._bindings[act]

    def get_bindings(self, action: ActionType) -> Set[int]:
        """Return a *copy* of the key set bound to the given action."""
        act = self._normalise_action(action)
        return set(self._bindings.get(act, set()))

    def event_matches_action(self, action: ActionType, event: pygame.event.Event) -> bool:
        """True for a KEYDOWN whose key is bound to `action`."""
        if event.type != pygame.KEYDOWN:
            return False
        key = getattr(event, "key", None)
        if key is None:
            return False
        return int(key) in self._bindings.get(self._normalise_action(action), set())


def keystroke_from_event(event: pygame.event.Event) -> Optional[Keystroke]:
    """
    Turn a KEYDOWN into a battle Keystroke.

    Returns None for anything that is not a key press. Modifier state is
    passed through untouched; the battle decides what to ignore.
    """
    if event.type != pygame.KEYDOWN:
        return None
    mods = int(getattr(event, "mod", 0))
    return Keystroke(
        char=getattr(event, "unicode", "") or "",
        ctrl=bool(mods & pygame.KMOD_CTRL),
        meta=bool(mods & _META_MASK),
    )
