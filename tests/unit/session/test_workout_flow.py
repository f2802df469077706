"""Tests for the workout flow state machine."""

import random

import pytest

from factories import make_plan
from fitform.schemas.workout_flow import FlowState, FlowStep
from fitform.session import messages
from fitform.session.flow import FlowTransitionError, WorkoutFlow


# ======================================================================
# Helpers
# ======================================================================


@pytest.fixture
def flow(manager, three_day_plan) -> WorkoutFlow:
    manager.roll_over()
    manager.save_workout_plan(three_day_plan)
    return WorkoutFlow(manager, rng=random.Random(7))


def _run_exercise(flow: WorkoutFlow, state: FlowState, exercise_id: str) -> FlowState:
    """Select an exercise and complete every remaining set."""
    state = flow.select_exercise(state, exercise_id)
    while True:
        state = flow.complete_set(state)
        if state.step != FlowStep.RESTING:
            return state
        state = flow.start_next_set(state)


def _ready(flow: WorkoutFlow) -> FlowState:
    return flow.confirm_ready(flow.start())


# ======================================================================
# Start and ready
# ======================================================================


class TestStart:
    def test_opens_on_todays_workout(self, flow, three_day_plan):
        state = flow.start()
        assert state.step == FlowStep.READY
        assert state.workout_id == three_day_plan.workouts[0].id
        assert state.day_index == 0
        assert state.message in messages.READY_TO_WORKOUT

    def test_confirm_ready_attempts_and_starts_timer(self, flow, manager):
        state = _ready(flow)
        assert state.step == FlowStep.EXERCISE_SELECTION
        assert manager.state.attempted_today is True
        assert manager.state.streak_count == 1
        assert manager.is_timer_running is True

    def test_confirm_ready_without_plan_fails(self, manager):
        manager.roll_over()
        wf = WorkoutFlow(manager)
        with pytest.raises(FlowTransitionError):
            wf.confirm_ready(wf.start())

    def test_start_seeds_finished_exercises(self, flow, manager, three_day_plan):
        first = three_day_plan.workouts[0].exercises[0]
        manager.record_set_progress(first.id, first.sets)
        assert flow.start().completed_exercise_ids == [first.id]


# ======================================================================
# Sets and rest
# ======================================================================


class TestSets:
    def test_select_starts_first_set(self, flow, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = flow.select_exercise(_ready(flow), exercise.id)
        assert state.step == FlowStep.ACTIVE_EXERCISE
        assert state.exercise_id == exercise.id
        assert state.set_number == 1
        assert state.total_sets == 3
        assert state.message in messages.DURING_WORKOUT

    def test_set_done_enters_rest(self, flow, manager, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = flow.select_exercise(_ready(flow), exercise.id)
        state = flow.complete_set(state)
        assert state.step == FlowStep.RESTING
        assert state.set_number == 2
        assert state.completed_sets == 1
        assert state.rest_target_seconds == 90
        assert state.message in messages.REST_PERIOD
        assert manager.state.set_progress[exercise.id] == 1

    def test_next_set_is_manual(self, flow, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = flow.complete_set(flow.select_exercise(_ready(flow), exercise.id))
        state = flow.start_next_set(state)
        assert state.step == FlowStep.ACTIVE_EXERCISE
        assert state.set_number == 2
        assert state.rest_target_seconds is None
        assert state.message in messages.TIME_TO_START

    def test_last_set_skips_rest(self, flow, manager, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = _run_exercise(flow, _ready(flow), exercise.id)
        assert state.step == FlowStep.EXERCISE_SELECTION
        assert state.completed_exercise_ids == [exercise.id]
        assert manager.state.set_progress[exercise.id] == 3

    @pytest.mark.parametrize(
        "transition",
        ["complete_set", "start_next_set"],
    )
    def test_illegal_transition_from_ready(self, flow, transition):
        with pytest.raises(FlowTransitionError):
            getattr(flow, transition)(flow.start())

    def test_unknown_exercise_rejected(self, flow):
        with pytest.raises(FlowTransitionError):
            flow.select_exercise(_ready(flow), "not-an-exercise")

    def test_finished_exercise_cannot_be_reselected(self, flow, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = _run_exercise(flow, _ready(flow), exercise.id)
        with pytest.raises(FlowTransitionError):
            flow.select_exercise(state, exercise.id)


# ======================================================================
# Completion
# ======================================================================


class TestCompletion:
    def test_last_exercise_completes_workout(self, flow, manager, clock, three_day_plan):
        first, second = three_day_plan.workouts[0].exercises
        state = _run_exercise(flow, _ready(flow), first.id)
        clock.advance(minutes=20)
        state = _run_exercise(flow, state, second.id)

        assert state.step == FlowStep.COMPLETED
        assert state.message == messages.WORKOUT_COMPLETE
        session = manager.state
        assert session.completed_today is True
        assert session.workout_minutes_today == 20
        assert manager.is_timer_running is False
        assert session.streak_count == 1

    def test_ready_on_finished_workout_goes_straight_to_completed(self, flow, manager, three_day_plan):
        for exercise in three_day_plan.workouts[0].exercises:
            manager.record_set_progress(exercise.id, exercise.sets)
        state = _ready(flow)
        assert state.step == FlowStep.COMPLETED
        assert manager.state.completed_today is True


# ======================================================================
# Early termination and abort
# ======================================================================


class TestEarlyTermination:
    @pytest.fixture
    def four_exercise_flow(self, manager):
        manager.roll_over()
        manager.save_workout_plan(make_plan(["Day 1"], exercises=4, sets=3))
        return WorkoutFlow(manager, rng=random.Random(1))

    def test_end_with_two_of_four_done(self, four_exercise_flow, manager):
        wf = four_exercise_flow
        exercises = manager.get_current_workout().exercises
        state = _ready(wf)
        state = _run_exercise(wf, state, exercises[0].id)
        state = _run_exercise(wf, state, exercises[1].id)
        state = wf.complete_set(wf.select_exercise(state, exercises[2].id))

        state = wf.end_exercise(state, elapsed_minutes=25)

        assert state.step == FlowStep.EXERCISE_SELECTION
        assert state.exercise_id is None
        session = manager.state
        assert session.set_progress == {exercises[0].id: 3, exercises[1].id: 3, exercises[2].id: 1}
        assert session.workout_minutes_today == 25
        assert session.completed_today is False

    def test_partial_exercise_resumes_from_next_set(self, four_exercise_flow, manager):
        wf = four_exercise_flow
        exercise = manager.get_current_workout().exercises[0]
        state = wf.complete_set(wf.select_exercise(_ready(wf), exercise.id))
        state = wf.end_exercise(state)

        state = wf.select_exercise(state, exercise.id)
        assert state.set_number == 2
        assert state.completed_sets == 1

    def test_zero_minutes_leaves_duration_alone(self, four_exercise_flow, manager):
        wf = four_exercise_flow
        manager.set_workout_minutes(7)
        exercise = manager.get_current_workout().exercises[0]
        state = wf.select_exercise(_ready(wf), exercise.id)
        wf.end_exercise(state, elapsed_minutes=0)
        assert manager.state.workout_minutes_today == 7

    def test_exit_keeps_partial_progress_and_pauses(self, flow, manager, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = flow.complete_set(flow.select_exercise(_ready(flow), exercise.id))
        state = flow.exit(state)
        assert state.step == FlowStep.EXITED
        assert manager.state.set_progress[exercise.id] == 1
        assert manager.is_timer_running is False

    def test_exit_from_terminal_step_is_noop(self, flow):
        state = flow.exit(flow.start())
        assert flow.exit(state) is state


# ======================================================================
# Day change while the flow is open
# ======================================================================


class TestDayChange:
    def test_rollover_resets_open_flow(self, flow, manager, clock, three_day_plan):
        exercise = three_day_plan.workouts[0].exercises[0]
        state = flow.complete_set(flow.select_exercise(_ready(flow), exercise.id))

        clock.next_day()
        manager.roll_over()
        synced = flow.sync_day(state)

        assert synced.step == FlowStep.READY
        assert synced.day_index == 1
        assert synced.workout_id == three_day_plan.workouts[1].id
        assert synced.completed_exercise_ids == []
        assert manager.state.set_progress == {}

    def test_completion_screen_survives_rollover(self, flow, manager, clock, three_day_plan):
        state = _ready(flow)
        for exercise in three_day_plan.workouts[0].exercises:
            state = _run_exercise(flow, state, exercise.id)
        assert state.step == FlowStep.COMPLETED

        clock.next_day()
        manager.roll_over()
        assert flow.sync_day(state) is state

    def test_same_day_is_unchanged(self, flow):
        state = _ready(flow)
        assert flow.sync_day(state) is state

    def test_stale_flow_transition_rejected(self, flow, manager, clock):
        state = _ready(flow)
        clock.next_day()
        manager.roll_over()
        with pytest.raises(FlowTransitionError):
            flow.select_exercise(state, "anything")
