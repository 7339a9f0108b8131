"""
Screen handlers for the main game loop.

Each screen (menu, battle, outcome) has a handler that encapsulates
update(), draw(), and handle_event() logic. Game delegates to the active handler.
"""

from .base import BaseModeHandler

__all__ = ["BaseModeHandler"]
