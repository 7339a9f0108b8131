"""
Enemy templates, ordered weakest to strongest.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class EnemyTemplate:
    """
    Defines an enemy the player can face.

    - name:          display name
    - avatar_glyph:  single emoji drawn as the enemy portrait
    - max_health:    HP at the start of a battle; one correct keystroke deals 1
    """
    name: str
    avatar_glyph: str
    max_health: int

    def __post_init__(self):
        if self.max_health <= 0:
            raise ValueError(f"Enemy {self.name!r} needs positive max_health")


ENEMY_ROSTER: List[EnemyTemplate] = [
    EnemyTemplate("Slime", "\U0001F7E2", 30),
    EnemyTemplate("Goblin", "\U0001F47A", 40),
    EnemyTemplate("Skeleton", "\U0001F480", 50),
    EnemyTemplate("Orc", "\U0001F479", 60),
    EnemyTemplate("Sorcerer", "\U0001F9D9", 70),
    EnemyTemplate("Dragon", "\U0001F409", 100),
]


def roster_index(level: int, roster_size: int) -> int:
    """Levels past the end of the roster keep facing the last enemy."""
    return max(0, min(level - 1, roster_size - 1))


def select_enemy(level: int, roster: Optional[Sequence[EnemyTemplate]] = None) -> EnemyTemplate:
    """Return the enemy for `level`. Deterministic."""
    if roster is None:
        roster = ENEMY_ROSTER
    return roster[roster_index(level, len(roster))]
