"""
Base interface for screen mode handlers.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from engine.core.game import Game


class BaseModeHandler(ABC):
    """
    Abstract base for a screen (menu, battle, outcome).

    Each handler receives a reference to the Game and implements the
    screen-specific part of the main loop.
    """

    def __init__(self, game: "Game") -> None:
        self.game = game

    def enter(self) -> None:
        """Called when the Game switches to this screen."""
        pass

    def update(self, dt: float) -> None:
        """Advance timers/animations. Called every frame while active."""
        pass

    @abstractmethod
    def draw(self) -> None:
        """Draw the screen. Does not flip."""
        ...

    def handle_event(self, event: "pygame.event.Event") -> bool:
        """
        Handle input for this screen.

        Returns:
            True if the event was consumed, False otherwise.
        """
        return False
