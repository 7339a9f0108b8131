# systems/combo.py

from dataclasses import dataclass

from settings import COMBO_STREAK_THRESHOLD


@dataclass
class ComboTracker:
    """
    Consecutive correct keystrokes since the last mistake or timeout.

    combo:
        Current streak. Reset by a mismatch or an enemy attack.
    max_combo:
        Best streak this session. Never reset until a new session starts.
    """
    combo: int = 0
    max_combo: int = 0

    def hit(self) -> int:
        self.combo += 1
        self.max_combo = max(self.combo, self.max_combo)
        return self.combo

    def reset(self) -> None:
        self.combo = 0

    def is_streak_milestone(self) -> bool:
        """True on exact multiples of the threshold (fires the "Combo!" popup)."""
        return self.combo > 0 and self.combo % COMBO_STREAK_THRESHOLD == 0

    def streak_label(self) -> str:
        """HUD label; shown for every combo at or above the threshold."""
        return combo_label(self.combo)


def combo_label(combo: int) -> str:
    if combo >= COMBO_STREAK_THRESHOLD:
        return f"Combo! x{combo}"
    return ""
