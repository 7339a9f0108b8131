"""
Unit tests for the JSON-lines telemetry logger.
"""

import json

from telemetry.logger import TelemetryLogger


class TestTelemetryLogger:

    def test_uninitialised_logger_only_counts(self):
        tl = TelemetryLogger()
        tl.log("battle_start", level=1)
        tl.log("battle_start", level=2)
        assert tl.counts["battle_start"] == 2

    def test_writes_json_lines(self, tmp_path):
        path = tmp_path / "logs" / "telemetry.jsonl"
        tl = TelemetryLogger()
        tl.init(path)
        tl.log("enemy_defeated", enemy="Slime", score=30)

        rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
        assert [r["event"] for r in rows] == ["telemetry_init", "enemy_defeated"]
        assert rows[1]["enemy"] == "Slime"
        assert rows[1]["score"] == 30
        assert "ts" in rows[1]

    def test_disabled_logger_writes_nothing(self, tmp_path):
        path = tmp_path / "telemetry.jsonl"
        tl = TelemetryLogger()
        tl.init(path, enabled=False)
        tl.log("session_end", score=3)
        assert not path.exists()
        assert tl.counts["session_end"] == 1

    def test_unserialisable_field_is_dropped(self, tmp_path):
        path = tmp_path / "telemetry.jsonl"
        tl = TelemetryLogger()
        tl.init(path)
        tl.log("weird", value=object())
        assert len(path.read_text(encoding="utf-8").splitlines()) == 1

    def test_reset_counts(self):
        tl = TelemetryLogger()
        tl.log("x")
        tl.reset_counts()
        assert tl.counts["x"] == 0
