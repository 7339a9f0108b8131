from __future__ import annotations

import json
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


@dataclass
class TelemetryLogger:
    """
    Append-only JSON-lines log of gameplay events (battle_start,
    enemy_defeated, session_end, ...).

    Does nothing until init() is given a path. Write failures are dropped:
    telemetry must never break a battle.
    """
    path: Optional[Path] = None
    enabled: bool = True
    flush_each_write: bool = False
    counts: Counter = field(default_factory=Counter)
    _started_at: float = field(default_factory=time.time)

    def init(self, path: Path, enabled: bool = True) -> None:
        self.path = path
        self.enabled = enabled
        if not enabled:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        self.log("telemetry_init", file=str(self.path))

    def log(self, event: str, **fields: Any) -> None:
        self.counts[event] += 1
        if not self.enabled or self.path is None:
            return

        row: Dict[str, Any] = {
            "t": round(time.time() - self._started_at, 3),
            "ts": _now_iso(),
            "event": event,
            **fields,
        }

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
                if self.flush_each_write:
                    f.flush()
        except (OSError, TypeError, ValueError):
            return

    def reset_counts(self) -> None:
        self.counts.clear()


# global singleton (easy import everywhere)
telemetry = TelemetryLogger()
