"""Tests for SessionManager outside of day rollover."""

import datetime
import logging

import pytest

from factories import WEEKDAYS, make_plan
from fitform.schemas.profile import FitnessGoal, UserProfile
from fitform.schemas.session_state import SessionState
from fitform.session.state import SessionManager


def _profile() -> UserProfile:
    return UserProfile(name="Alex", age=30, goals=[FitnessGoal.STRENGTH])


# ======================================================================
# Today's workout
# ======================================================================


class TestCurrentWorkout:
    def test_none_without_plan(self, manager):
        assert manager.get_current_workout() is None

    def test_none_for_empty_plan(self, manager):
        manager.save_workout_plan(make_plan([]))
        assert manager.get_current_workout() is None

    def test_monday_first_plan_on_wednesday(self, manager, full_week_plan):
        manager.save_workout_plan(full_week_plan)
        assert manager.today_index(full_week_plan) == 2
        assert manager.get_current_workout().day == "Wednesday"

    def test_sunday_first_plan_on_wednesday(self, manager):
        plan = make_plan(WEEKDAYS[-1:] + WEEKDAYS[:-1])
        manager.save_workout_plan(plan)
        assert manager.today_index(plan) == 3
        assert manager.get_current_workout().day == "Wednesday"

    def test_numbered_full_week_uses_sunday_first(self, manager):
        plan = make_plan([f"Day {i}" for i in range(1, 8)])
        manager.save_workout_plan(plan)
        assert manager.get_current_workout().day == "Day 4"

    @pytest.mark.parametrize("label", ["monday", "MON - Push", " Mon"])
    def test_monday_detection_is_case_insensitive(self, label):
        plan = make_plan([label] + WEEKDAYS[1:])
        assert plan.is_monday_first is True

    def test_partial_plan_follows_day_index(self, clock, three_day_plan):
        m = SessionManager(
            state=SessionState(active_plan=three_day_plan, current_day_index=1), clock=clock
        )
        assert m.get_current_workout().day == "Day 2"

    def test_partial_plan_index_is_bounded(self, clock, three_day_plan):
        m = SessionManager(
            state=SessionState(active_plan=three_day_plan, current_day_index=5), clock=clock
        )
        assert m.get_current_workout().day == "Day 3"


# ======================================================================
# Attempt / complete
# ======================================================================


class TestAttemptAndComplete:
    def test_attempt_is_idempotent(self, manager):
        assert manager.attempt_workout() is True
        assert manager.attempt_workout() is False
        state = manager.state
        assert state.streak_count == 1
        assert state.attempted_today is True
        assert state.last_workout_date == datetime.date(2025, 1, 15)

    def test_attempt_on_rest_day_does_not_count(self, clock, three_day_plan):
        m = SessionManager(
            state=SessionState(active_plan=three_day_plan, current_day_index=4, streak_count=2),
            clock=clock,
        )
        assert m.attempt_workout() is True
        assert m.state.streak_count == 2
        assert m.state.last_workout_date is None

    def test_complete_records_minutes_without_touching_streak(self, manager):
        manager.attempt_workout()
        manager.complete_workout(minutes=35)
        state = manager.state
        assert state.completed_today is True
        assert state.workout_minutes_today == 35
        assert state.streak_count == 1

    def test_complete_with_zero_keeps_timer_total(self, manager, clock):
        manager.resume()
        clock.advance(minutes=12)
        manager.pause()
        manager.complete_workout(minutes=0)
        assert manager.state.workout_minutes_today == 12

    def test_record_set_progress(self, manager):
        manager.record_set_progress("ex-1", 2)
        manager.record_set_progress("ex-2", -1)
        assert manager.state.set_progress == {"ex-1": 2, "ex-2": 0}


# ======================================================================
# Session timer
# ======================================================================


class TestTimer:
    def test_pause_folds_elapsed_time(self, manager, clock):
        assert manager.resume() is True
        clock.advance(seconds=150)
        manager.pause()
        state = manager.state
        assert state.accumulated_seconds_today == 150
        assert state.workout_minutes_today == 2
        assert state.session_start_time is None

    def test_resume_is_idempotent(self, manager, clock):
        manager.resume()
        clock.advance(seconds=30)
        assert manager.resume() is False
        clock.advance(seconds=30)
        manager.pause()
        assert manager.state.accumulated_seconds_today == 60

    def test_pause_without_timer_is_noop(self, manager):
        manager.pause()
        assert manager.state.accumulated_seconds_today == 0

    def test_no_double_counting(self, store, clock):
        split = SessionManager.from_store(store, clock=clock)
        split.resume()
        clock.advance(seconds=300)
        split.pause()
        split.resume()
        split.pause()
        split.resume()
        clock.advance(seconds=120)
        split.pause()

        single = SessionManager(clock=clock)
        single.resume()
        clock.advance(seconds=420)
        single.pause()

        assert split.state.accumulated_seconds_today == 420
        assert single.state.accumulated_seconds_today == 420

    def test_elapsed_includes_running_segment(self, manager, clock):
        manager.resume()
        clock.advance(seconds=90)
        manager.pause()
        manager.resume()
        clock.advance(seconds=10)
        assert manager.is_timer_running is True
        assert manager.elapsed_seconds() == 100


# ======================================================================
# Profile, plan and reset
# ======================================================================


class TestProfileAndPlan:
    def test_complete_onboarding(self, manager):
        manager.complete_onboarding(_profile())
        state = manager.state
        assert state.onboarded is True
        assert state.user_profile.name == "Alex"

    def test_save_plan_resets_rotation(self, clock, three_day_plan):
        m = SessionManager(
            state=SessionState(current_day_index=2, set_progress={"x": 1}), clock=clock
        )
        m.save_workout_plan(three_day_plan, "My split")
        state = m.state
        assert state.active_plan.id == three_day_plan.id
        assert state.active_plan_name == "My split"
        assert state.current_day_index == 0
        assert state.set_progress == {}

    def test_save_plan_defaults_name_to_title(self, manager, three_day_plan):
        manager.save_workout_plan(three_day_plan)
        assert manager.state.active_plan_name == "Test plan"

    def test_clear_plan(self, manager, three_day_plan):
        manager.save_workout_plan(three_day_plan)
        manager.clear_workout_plan()
        assert manager.state.active_plan is None
        assert manager.get_current_workout() is None

    def test_delete_all_data(self, manager, three_day_plan):
        manager.complete_onboarding(_profile())
        manager.save_workout_plan(three_day_plan)
        manager.attempt_workout()
        manager.delete_all_data()
        state = manager.state
        assert state.onboarded is False
        assert state.user_profile is None
        assert state.active_plan is None
        assert state.streak_count == 0
        assert state.last_rollover_date == datetime.date(2025, 1, 15)

    def test_state_is_a_copy(self, manager):
        snapshot = manager.state
        snapshot.streak_count = 99
        assert manager.state.streak_count == 0


# ======================================================================
# Save failures
# ======================================================================


class TestSaveFailure:
    def test_failed_save_is_logged_and_state_advances(self, clock, caplog):
        def broken_save(_state):
            raise OSError("disk full")

        m = SessionManager(save=broken_save, clock=clock)
        with caplog.at_level(logging.ERROR):
            m.attempt_workout()
        assert m.state.streak_count == 1
        assert "Failed to persist session state" in caplog.text
