from __future__ import annotations

import pygame

from systems.input import InputManager, InputAction


def create_default_input_manager() -> InputManager:
    """
    Create an InputManager with the default menu bindings.

    Only menu/outcome screens use these. During a battle every key is a
    typing attempt, so no battle keys are bound here.
    """
    mgr = InputManager()

    # Menu navigation
    mgr.bind_key(InputAction.MENU_UP, pygame.K_UP)
    mgr.bind_key(InputAction.MENU_UP, pygame.K_w)
    mgr.bind_key(InputAction.MENU_DOWN, pygame.K_DOWN)
    mgr.bind_key(InputAction.MENU_DOWN, pygame.K_s)

    # Confirm / cancel
    mgr.bind_key(InputAction.CONFIRM, pygame.K_RETURN)
    mgr.bind_key(InputAction.CONFIRM, pygame.K_KP_ENTER)
    mgr.bind_key(InputAction.CONFIRM, pygame.K_SPACE)
    mgr.bind_key(InputAction.CANCEL, pygame.K_ESCAPE)

    # Shortcuts on the start screen
    mgr.bind_key(InputAction.START_BATTLE, pygame.K_b)
    mgr.bind_key(InputAction.START_PRACTICE, pygame.K_p)
    mgr.bind_key(InputAction.QUIT, pygame.K_q)

    # Outcome screen: R restarts in the same mode
    mgr.bind_key(InputAction.RESTART, pygame.K_r)
    mgr.bind_key(InputAction.RESTART, pygame.K_RETURN)

    return mgr
