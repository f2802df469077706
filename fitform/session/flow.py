"""
Workout flow state machine.

Walks the user through today's workout::

    READY -> EXERCISE_SELECTION -> ACTIVE_EXERCISE <-> RESTING
                 ^                        |
                 +------------------------+   (exercise done / ended early)
    EXERCISE_SELECTION -> COMPLETED           (last exercise finished)
    any non-terminal step -> EXITED           (user aborts)

The flow holds no state of its own: every transition takes a
:class:`FlowState` and returns the next one, reading and writing the
session through :class:`SessionManager`.  Rest durations are targets
only; the user always advances manually.
"""

import logging
import random
from typing import Optional

from fitform.schemas.plan import Exercise, Workout
from fitform.schemas.workout_flow import FlowState, FlowStep
from fitform.session import messages
from fitform.session.state import SessionManager

logger = logging.getLogger(__name__)


class FlowTransitionError(ValueError):
    """Raised when a transition is not legal from the current step."""


class WorkoutFlow:
    """Transition functions over :class:`FlowState`."""

    def __init__(self, session: SessionManager, rng: Optional[random.Random] = None):
        self.session = session
        self.rng = rng

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def start(self) -> FlowState:
        """Open the flow on today's workout."""
        workout = self.session.get_current_workout()
        state = self.session.state
        completed: list[str] = []
        if workout is not None:
            completed = [
                e.id for e in workout.exercises
                if state.set_progress.get(e.id, 0) >= e.sets
            ]
        return FlowState(
            step=FlowStep.READY,
            workout_id=workout.id if workout else None,
            day_index=state.current_day_index,
            completed_exercise_ids=completed,
            message=self._pick(messages.READY_TO_WORKOUT),
        )

    def sync_day(self, flow: FlowState) -> FlowState:
        """Reset the flow if today's workout changed underneath it.

        A completion screen is left alone so a rollover cannot erase it.
        """
        if flow.step == FlowStep.COMPLETED:
            return flow
        workout = self.session.get_current_workout()
        workout_id = workout.id if workout else None
        if flow.day_index == self.session.state.current_day_index and flow.workout_id == workout_id:
            return flow
        logger.info("Workout day changed, resetting flow")
        self.session.clear_set_progress()
        return FlowState(
            step=FlowStep.READY,
            workout_id=workout_id,
            day_index=self.session.state.current_day_index,
            message=self._pick(messages.READY_TO_WORKOUT),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def confirm_ready(self, flow: FlowState) -> FlowState:
        self._require(flow, FlowStep.READY)
        workout = self._workout(flow)

        self.session.attempt_workout()
        self.session.resume()

        new = flow.model_copy(deep=True)
        if self._all_done(workout, new.completed_exercise_ids):
            return self._complete(new)
        new.step = FlowStep.EXERCISE_SELECTION
        new.message = ""
        return new

    def select_exercise(self, flow: FlowState, exercise_id: str) -> FlowState:
        self._require(flow, FlowStep.EXERCISE_SELECTION)
        workout = self._workout(flow)
        exercise = workout.exercise_by_id(exercise_id)
        if exercise is None:
            raise FlowTransitionError(f"Exercise '{exercise_id}' is not part of today's workout")

        done = self.session.state.set_progress.get(exercise.id, 0)
        if exercise.id in flow.completed_exercise_ids or done >= exercise.sets:
            raise FlowTransitionError(f"'{exercise.name}' is already completed today")

        self.session.resume()

        new = flow.model_copy(deep=True)
        new.step = FlowStep.ACTIVE_EXERCISE
        new.exercise_id = exercise.id
        new.total_sets = exercise.sets
        new.completed_sets = done
        new.set_number = done + 1
        new.rest_target_seconds = None
        new.message = self._pick(messages.DURING_WORKOUT)
        return new

    def complete_set(self, flow: FlowState) -> FlowState:
        """Mark the current set done and rest, or finish the exercise."""
        self._require(flow, FlowStep.ACTIVE_EXERCISE)
        exercise = self._exercise(flow)

        self.session.attempt_workout()

        new = flow.model_copy(deep=True)
        new.completed_sets += 1
        new.set_number += 1
        if new.set_number > exercise.sets:
            return self._finish_exercise(new, exercise)

        self.session.record_set_progress(exercise.id, new.completed_sets)
        new.step = FlowStep.RESTING
        new.rest_target_seconds = exercise.rest_time
        new.message = self._pick(messages.REST_PERIOD)
        return new

    def start_next_set(self, flow: FlowState) -> FlowState:
        self._require(flow, FlowStep.RESTING)
        new = flow.model_copy(deep=True)
        new.step = FlowStep.ACTIVE_EXERCISE
        new.rest_target_seconds = None
        new.message = self._pick(messages.TIME_TO_START)
        return new

    def end_exercise(self, flow: FlowState, elapsed_minutes: int = 0) -> FlowState:
        """Leave the current exercise early, keeping the sets done so far."""
        self._require(flow, FlowStep.ACTIVE_EXERCISE, FlowStep.RESTING)
        exercise = self._exercise(flow)

        self.session.record_set_progress(exercise.id, flow.completed_sets)
        if elapsed_minutes > 0:
            self.session.set_workout_minutes(elapsed_minutes)
        return self._back_to_selection(flow.model_copy(deep=True))

    def exit(self, flow: FlowState) -> FlowState:
        """Abort the flow from any step."""
        if flow.is_terminal:
            return flow
        if flow.step in (FlowStep.ACTIVE_EXERCISE, FlowStep.RESTING) and flow.exercise_id:
            self.session.record_set_progress(flow.exercise_id, flow.completed_sets)
        self.session.pause()
        new = flow.model_copy(deep=True)
        new.step = FlowStep.EXITED
        new.rest_target_seconds = None
        new.message = ""
        return new

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _finish_exercise(self, flow: FlowState, exercise: Exercise) -> FlowState:
        self.session.record_set_progress(exercise.id, exercise.sets)
        if exercise.id not in flow.completed_exercise_ids:
            flow.completed_exercise_ids.append(exercise.id)
        flow.completed_sets = exercise.sets

        workout = self._workout(flow)
        if self._all_done(workout, flow.completed_exercise_ids):
            return self._complete(flow)
        return self._back_to_selection(flow)

    def _complete(self, flow: FlowState) -> FlowState:
        self.session.pause()
        if not self.session.state.completed_today:
            self.session.complete_workout(minutes=0)
        flow.step = FlowStep.COMPLETED
        flow.exercise_id = None
        flow.rest_target_seconds = None
        flow.message = messages.WORKOUT_COMPLETE
        return flow

    @staticmethod
    def _back_to_selection(flow: FlowState) -> FlowState:
        flow.step = FlowStep.EXERCISE_SELECTION
        flow.exercise_id = None
        flow.set_number = 1
        flow.total_sets = 0
        flow.completed_sets = 0
        flow.rest_target_seconds = None
        flow.message = ""
        return flow

    @staticmethod
    def _all_done(workout: Workout, completed_ids: list[str]) -> bool:
        return all(e.id in completed_ids for e in workout.exercises)

    @staticmethod
    def _require(flow: FlowState, *steps: FlowStep) -> None:
        if flow.step not in steps:
            allowed = ", ".join(s.value for s in steps)
            raise FlowTransitionError(f"Cannot do that from '{flow.step.value}' (expected {allowed})")

    def _workout(self, flow: FlowState) -> Workout:
        workout = self.session.get_current_workout()
        if workout is None:
            raise FlowTransitionError("No workout is scheduled for today")
        if flow.workout_id is not None and workout.id != flow.workout_id:
            raise FlowTransitionError("Today's workout changed; restart the flow")
        return workout

    def _exercise(self, flow: FlowState) -> Exercise:
        if flow.exercise_id is None:
            raise FlowTransitionError("No exercise selected")
        exercise = self._workout(flow).exercise_by_id(flow.exercise_id)
        if exercise is None:
            raise FlowTransitionError(f"Exercise '{flow.exercise_id}' is not part of today's workout")
        return exercise

    def _pick(self, options: tuple[str, ...]) -> str:
        return messages.pick(options, self.rng)
