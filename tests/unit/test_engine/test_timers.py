"""
Unit tests for the cooperative scheduler and the countdown controller.
"""

from engine.battle.timers import Scheduler, TimerController


class TestScheduler:

    def test_callbacks_run_when_due(self, scheduler):
        fired = []
        scheduler.call_later(1.0, lambda: fired.append("a"))
        scheduler.advance(0.5)
        assert fired == []
        scheduler.advance(0.5)
        assert fired == ["a"]

    def test_order_by_due_time_then_insertion(self, scheduler):
        fired = []
        scheduler.call_later(2.0, lambda: fired.append("late"))
        scheduler.call_later(1.0, lambda: fired.append("first"))
        scheduler.call_later(1.0, lambda: fired.append("second"))
        assert scheduler.advance(5.0) == 3
        assert fired == ["first", "second", "late"]

    def test_clock_is_at_due_time_inside_callback(self, scheduler):
        seen = []
        scheduler.call_later(1.0, lambda: seen.append(scheduler.now))
        scheduler.advance(3.0)
        assert seen == [1.0]
        assert scheduler.now == 3.0

    def test_cancelled_action_never_runs(self, scheduler):
        fired = []
        action = scheduler.call_later(1.0, lambda: fired.append(1))
        action.cancel()
        action.cancel()
        scheduler.advance(2.0)
        assert fired == []
        assert not action.pending

    def test_nested_schedule_runs_in_same_advance_when_due(self, scheduler):
        fired = []

        def first():
            fired.append("first")
            scheduler.call_later(0.5, lambda: fired.append("nested"))

        scheduler.call_later(1.0, first)
        scheduler.advance(2.0)
        assert fired == ["first", "nested"]

    def test_pending_count_and_clear(self, scheduler):
        scheduler.call_later(1.0, lambda: None)
        keep = scheduler.call_later(2.0, lambda: None)
        assert scheduler.pending_count() == 2
        scheduler.clear()
        assert scheduler.pending_count() == 0
        assert keep.cancelled

    def test_negative_delay_is_immediate(self, scheduler):
        fired = []
        scheduler.call_later(-3, lambda: fired.append(1))
        scheduler.advance(0)
        assert fired == [1]


class TestTimerController:

    def test_schedule_replaces_previous_countdown(self, scheduler):
        fired = []
        timer = TimerController(scheduler)
        timer.schedule(5, lambda: fired.append("old"))
        timer.schedule(10, lambda: fired.append("new"))
        assert scheduler.pending_count() == 1
        scheduler.advance(5)
        assert fired == []
        scheduler.advance(5)
        assert fired == ["new"]

    def test_remaining_counts_down(self, scheduler):
        timer = TimerController(scheduler)
        timer.schedule(22, lambda: None)
        scheduler.advance(2)
        assert timer.active
        assert timer.remaining == 20

    def test_handle_cleared_after_firing(self, scheduler):
        timer = TimerController(scheduler)
        timer.schedule(1, lambda: None)
        scheduler.advance(1)
        assert not timer.active
        assert timer.remaining is None

    def test_cancel(self, scheduler):
        fired = []
        timer = TimerController(scheduler)
        timer.schedule(1, lambda: fired.append(1))
        timer.cancel()
        timer.cancel()
        scheduler.advance(2)
        assert fired == []

    def test_disabled_controller_never_schedules(self):
        scheduler = Scheduler()
        timer = TimerController(scheduler, enabled=False)
        assert timer.schedule(3, lambda: None) is None
        assert scheduler.pending_count() == 0
        assert timer.remaining is None

    def test_disabling_still_cancels_running_countdown(self, scheduler):
        fired = []
        timer = TimerController(scheduler)
        timer.schedule(3, lambda: fired.append(1))
        timer.enabled = False
        timer.schedule(3, lambda: fired.append(2))
        scheduler.advance(10)
        assert fired == []
