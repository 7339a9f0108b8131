"""
Battle session state.

A BattleSession is one play-through from start/restart to defeat. It is
replaced wholesale on restart and only ever mutated by BattleStateMachine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional

from settings import MAX_PLAYER_HEALTH
from systems.combo import ComboTracker
from systems.enemy_roster import EnemyTemplate
from systems.snippet_bank import Snippet


Outcome = Literal["defeat"]


class BattleMode(str, Enum):
    BATTLE = "battle"
    PRACTICE = "practice"


@dataclass
class BattleSession:
    """
    Mutable battle state.

    - generation:    id of this session; deferred actions scheduled against an
                     older generation are dropped
    - battle_serial: bumped by every StartBattle so a pending snippet-complete
                     advance can tell that a newer battle already began
    - cursor:        count of correctly typed characters of current_snippet
    - input_locked:  True during the mistake penalty
    """
    mode: BattleMode = BattleMode.BATTLE
    generation: int = 0
    level: int = 1
    score: int = 0
    combo_tracker: ComboTracker = field(default_factory=ComboTracker)
    player_health: int = MAX_PLAYER_HEALTH

    enemy: Optional[EnemyTemplate] = None
    enemy_health: int = 0
    current_snippet: Optional[Snippet] = None
    cursor: int = 0

    input_locked: bool = False
    mistake_pending: bool = False
    time_limit_seconds: int = 0
    battle_serial: int = 0

    ended: bool = False
    outcome: Optional[Outcome] = None

    @property
    def combo(self) -> int:
        return self.combo_tracker.combo

    @property
    def max_combo(self) -> int:
        return self.combo_tracker.max_combo

    @property
    def snippet_complete(self) -> bool:
        """Every character typed; waiting for the level-advance delay."""
        return self.current_snippet is not None and self.cursor >= len(self.current_snippet.text)

    @property
    def player_health_pct(self) -> float:
        return 100.0 * self.player_health / MAX_PLAYER_HEALTH

    @property
    def enemy_health_pct(self) -> float:
        if self.enemy is None:
            return 0.0
        return 100.0 * self.enemy_health / self.enemy.max_health


def new_session(mode: BattleMode, generation: int) -> BattleSession:
    """Fresh session with every field at its starting value."""
    return BattleSession(mode=mode, generation=generation)
