"""
Battle engine module.

- session.py: BattleSession / BattleMode
- events.py: inbound events (Keystroke, Timeout, Restart, ...)
- effects.py: outbound effects, collaborator interfaces and EffectRouter
- timers.py: Scheduler (deferred actions) and TimerController (countdown)
- state_machine.py: BattleStateMachine
- feedback.py / visual_effects.py: sound, particles and pulses
"""

from .effects import EffectRouter, Feedback, Presenter
from .events import Keystroke, PenaltyElapsed, Restart, SnippetCompleted, Timeout
from .feedback import BattleFeedback
from .session import BattleMode, BattleSession
from .state_machine import BattleStateMachine, time_limit_for
from .timers import Scheduler, TimerController
from .visual_effects import VisualEffectsManager

__all__ = [
    "BattleFeedback",
    "BattleMode",
    "BattleSession",
    "BattleStateMachine",
    "EffectRouter",
    "Feedback",
    "Keystroke",
    "PenaltyElapsed",
    "Presenter",
    "Restart",
    "Scheduler",
    "SnippetCompleted",
    "Timeout",
    "TimerController",
    "VisualEffectsManager",
    "time_limit_for",
]
