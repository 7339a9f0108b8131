"""Inbound events consumed by BattleStateMachine.dispatch."""

from dataclasses import dataclass
from typing import Union

from .session import BattleMode


@dataclass(frozen=True)
class Keystroke:
    """A key press from the input layer."""
    char: str
    ctrl: bool = False
    meta: bool = False

    @property
    def is_typeable(self) -> bool:
        """Single printable character with no ctrl/meta modifier."""
        return (
            len(self.char) == 1
            and self.char.isprintable()
            and not self.ctrl
            and not self.meta
        )


@dataclass(frozen=True)
class Timeout:
    """The per-snippet countdown expired."""
    generation: int


@dataclass(frozen=True)
class SnippetCompleted:
    """Deferred level advance after the whole snippet was typed."""
    generation: int
    battle_serial: int


@dataclass(frozen=True)
class PenaltyElapsed:
    """The mistake input lock is over."""
    generation: int


@dataclass(frozen=True)
class Restart:
    """Begin a brand new session in the given mode."""
    mode: BattleMode


BattleEvent = Union[Keystroke, Timeout, SnippetCompleted, PenaltyElapsed, Restart]
