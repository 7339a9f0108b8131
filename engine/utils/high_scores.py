"""
High-score storage.

Stores a single best score as JSON. Reads and writes are best-effort: any
I/O or parse problem is logged and the game carries on.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from engine.error_handler import HighScoreError, log_error


logger = logging.getLogger("code_knight.high_scores")

# Default location (in project root / saves)
SAVE_DIR = Path(__file__).resolve().parent.parent.parent / "saves"
HIGH_SCORE_FILE = SAVE_DIR / "high_score.json"


class HighScoreStore:
    """JSON-file backed best score."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = path or HIGH_SCORE_FILE

    def get_high_score(self) -> Optional[int]:
        """
        Return the stored best score, or None if there is none yet
        (or the file is unreadable).
        """
        if not self.path.exists():
            return None
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            value = data.get("high_score") if isinstance(data, dict) else None
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise HighScoreError(f"Bad high score payload in {self.path}: {data!r}")
            return value
        except (OSError, ValueError, HighScoreError) as e:
            log_error(e, "get_high_score")
            return None

    def set_high_score(self, score: int) -> bool:
        """
        Store `score` as the best score.

        Returns True if the write succeeded.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write to a temporary file first, then rename (atomic write)
            temp_path = self.path.with_suffix(".tmp")
            with temp_path.open("w", encoding="utf-8") as f:
                json.dump({"high_score": int(score)}, f, indent=2)
            temp_path.replace(self.path)
            logger.debug("High score %d written to %s", score, self.path)
            return True
        except OSError as e:
            log_error(e, "set_high_score")
            return False
