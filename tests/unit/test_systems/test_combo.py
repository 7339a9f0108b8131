"""
Unit tests for ComboTracker.
"""

from systems.combo import ComboTracker, combo_label


class TestComboTracker:

    def test_defaults(self):
        tracker = ComboTracker()
        assert tracker.combo == 0
        assert tracker.max_combo == 0

    def test_hit_increments_and_tracks_max(self):
        tracker = ComboTracker()
        for _ in range(4):
            tracker.hit()
        assert tracker.combo == 4
        assert tracker.max_combo == 4

    def test_reset_keeps_max_combo(self):
        tracker = ComboTracker()
        for _ in range(7):
            tracker.hit()
        tracker.reset()
        tracker.hit()
        assert tracker.combo == 1
        assert tracker.max_combo == 7

    def test_milestone_only_on_exact_multiples(self):
        tracker = ComboTracker()
        milestones = []
        for _ in range(25):
            tracker.hit()
            if tracker.is_streak_milestone():
                milestones.append(tracker.combo)
        assert milestones == [10, 20]

    def test_zero_combo_is_not_a_milestone(self):
        assert ComboTracker().is_streak_milestone() is False


class TestComboLabel:

    def test_hidden_below_threshold(self):
        assert combo_label(0) == ""
        assert combo_label(9) == ""

    def test_shown_for_every_value_from_threshold(self):
        assert combo_label(10) == "Combo! x10"
        assert combo_label(13) == "Combo! x13"

    def test_tracker_label_follows_combo(self):
        tracker = ComboTracker(combo=12, max_combo=12)
        assert tracker.streak_label() == "Combo! x12"
