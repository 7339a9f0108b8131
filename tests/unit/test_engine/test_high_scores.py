"""
Unit tests for HighScoreStore.
"""

import json

import pytest

from engine.utils.high_scores import HighScoreStore


class TestHighScoreStore:

    def test_missing_file_means_no_score(self, high_scores):
        assert high_scores.get_high_score() is None

    def test_set_then_get(self, high_scores):
        assert high_scores.set_high_score(42) is True
        assert high_scores.get_high_score() == 42
        assert json.loads(high_scores.path.read_text(encoding="utf-8")) == {"high_score": 42}

    def test_creates_parent_directories(self, tmp_path):
        store = HighScoreStore(tmp_path / "nested" / "dir" / "best.json")
        assert store.set_high_score(3)
        assert store.get_high_score() == 3

    def test_no_temp_file_left_behind(self, high_scores):
        high_scores.set_high_score(1)
        assert not high_scores.path.with_suffix(".tmp").exists()

    @pytest.mark.parametrize("payload", [
        "{not json",
        '{"high_score": "ten"}',
        '{"high_score": true}',
        '{"high_score": -4}',
        "[1, 2, 3]",
        "{}",
    ])
    def test_unreadable_payload_is_treated_as_absent(self, high_scores, payload):
        high_scores.path.write_text(payload, encoding="utf-8")
        assert high_scores.get_high_score() is None

    def test_unwritable_location_reports_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory", encoding="utf-8")
        store = HighScoreStore(blocker / "high_score.json")
        assert store.set_high_score(5) is False
