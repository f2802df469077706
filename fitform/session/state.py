"""
Session state manager.

Owns the :class:`SessionState` snapshot for the single active user on a
device and is the only thing that mutates it.  Every mutation builds a
new snapshot, swaps it in, and hands it to the injected ``save``
callback, so the fields changed by one operation are persisted together.

Day rollover
------------
``roll_over()`` runs once per calendar-day boundary (at startup, from
the midnight scheduler, and defensively before API reads).  For each day
that closed since the last rollover it:

1. decides whether the closing day was a scheduled workout day,
2. credits the streak if the day was attempted and not already credited
   by ``attempt_workout()``, or breaks a running streak if it was not
   attempted,
3. clears the daily flags, timers and set progress,
4. advances the plan's day index through a 7-day cycle.

Rest days under a partial-week plan leave the streak untouched.  A
process that was not running at midnight catches up by evaluating every
missed day in order; a day that has already been rolled over is never
evaluated again.

Scheduled-day rule
------------------
A day counts as a workout day when no plan is active, when the plan has
an entry for every weekday, or when the day index still points inside a
partial-week plan's entry list.  Indices past the end of the list are
the rest days of the cycle.
"""

import datetime
import functools
import logging
import threading
from typing import Callable, Optional

from fitform.schemas.plan import DAYS_IN_WEEK, Workout, WorkoutPlan
from fitform.schemas.profile import UserProfile
from fitform.schemas.session_state import SessionState
from fitform.session.persistence import load_session_state, save_session_state
from fitform.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime.datetime]
SaveCallback = Callable[[SessionState], None]

# Held across load, mutate and save by request handlers and the midnight
# rollover so neither overwrites the other's snapshot.
session_lock = threading.Lock()


def _discard(_state: SessionState) -> None:
    return None


class SessionManager:
    """Controlled interface over the persisted session fields."""

    def __init__(
        self,
        state: Optional[SessionState] = None,
        save: Optional[SaveCallback] = None,
        clock: Optional[Clock] = None,
    ):
        self._state = state if state is not None else SessionState()
        self._save = save or _discard
        self._clock = clock or datetime.datetime.now

    @classmethod
    def from_store(cls, store: KeyValueStore, clock: Optional[Clock] = None) -> "SessionManager":
        """Load state from *store* and persist every mutation back to it."""
        return cls(
            state=load_session_state(store),
            save=functools.partial(save_session_state, store),
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        """A copy of the current snapshot."""
        return self._state.model_copy(deep=True)

    def now(self) -> datetime.datetime:
        return self._clock()

    def today(self) -> datetime.date:
        return self._clock().date()

    def is_scheduled_workout_day(self) -> bool:
        return _is_scheduled_day(self._state)

    def is_rest_day(self) -> bool:
        plan = self._state.active_plan
        if plan is None or plan.is_full_week:
            return False
        return self._state.current_day_index >= len(plan.workouts)

    def today_index(self, plan: WorkoutPlan) -> int:
        """Index of today's entry in a full-week plan."""
        weekday = self._clock().weekday()  # Monday == 0
        if plan.is_monday_first:
            return weekday
        return (weekday + 1) % DAYS_IN_WEEK

    def get_current_workout(self) -> Optional[Workout]:
        plan = self._state.active_plan
        if plan is None or not plan.workouts:
            return None
        if plan.is_full_week:
            return plan.workouts[self.today_index(plan)]
        index = min(self._state.current_day_index, len(plan.workouts) - 1)
        return plan.workouts[index]

    def elapsed_seconds(self) -> int:
        """Time worked out today, including the live segment if running."""
        total = self._state.accumulated_seconds_today
        start = self._state.session_start_time
        if start is not None:
            total += max(0, int((self._clock() - start).total_seconds()))
        return total

    # ------------------------------------------------------------------
    # Day rollover
    # ------------------------------------------------------------------

    def roll_over(self) -> bool:
        """Close every calendar day that ended since the last rollover.

        Returns ``True`` if at least one day boundary was processed.
        """
        today = self.today()
        new = self._state.model_copy(deep=True)
        changed = False

        start = new.session_start_time
        if start is not None and start.date() != today:
            # A session never carries across midnight.
            new.session_start_time = None
            new.workout_minutes_today = 0
            new.accumulated_seconds_today = 0
            changed = True

        anchor = new.last_rollover_date
        if anchor is None and new.last_workout_date is not None and new.last_workout_date < today:
            anchor = new.last_workout_date

        if anchor is None:
            new.last_rollover_date = today
            self._commit(new)
            return False

        if anchor >= today:
            if changed:
                self._commit(new)
            return False

        for offset in range((today - anchor).days):
            _close_day(new, anchor + datetime.timedelta(days=offset))

        new.last_rollover_date = today
        self._commit(new)
        logger.info(
            "Rolled over to %s: streak=%d day_index=%d broken=%s",
            today, new.streak_count, new.current_day_index, new.streak_just_broken,
        )
        return True

    # ------------------------------------------------------------------
    # Workout bookkeeping
    # ------------------------------------------------------------------

    def attempt_workout(self) -> bool:
        """Record today's first attempt.  Returns ``True`` on the first call of the day."""
        if self._state.attempted_today:
            return False
        new = self._state.model_copy(deep=True)
        new.attempted_today = True
        if _is_scheduled_day(new):
            new.streak_count += 1
            new.last_workout_date = self.today()
        self._commit(new)
        return True

    def complete_workout(self, minutes: int = 0) -> None:
        """Mark today's workout complete.

        A positive *minutes* replaces today's recorded duration.  Zero keeps
        whatever the session timer has accumulated instead of overwriting it
        with 0, so a completion reached without an explicit duration still
        reports the timed minutes.
        """
        new = self._state.model_copy(deep=True)
        new.completed_today = True
        if minutes > 0:
            new.workout_minutes_today = minutes
            new.accumulated_seconds_today = minutes * 60
        self._commit(new)

    def set_workout_minutes(self, minutes: int) -> None:
        new = self._state.model_copy(deep=True)
        new.workout_minutes_today = max(0, minutes)
        self._commit(new)

    def record_set_progress(self, exercise_id: str, completed_sets: int) -> None:
        new = self._state.model_copy(deep=True)
        new.set_progress[exercise_id] = max(0, completed_sets)
        self._commit(new)

    def clear_set_progress(self) -> None:
        if not self._state.set_progress:
            return
        new = self._state.model_copy(deep=True)
        new.set_progress = {}
        self._commit(new)

    def dismiss_streak_broken(self) -> None:
        if not self._state.streak_just_broken:
            return
        new = self._state.model_copy(deep=True)
        new.streak_just_broken = False
        self._commit(new)

    # ------------------------------------------------------------------
    # Session timer
    # ------------------------------------------------------------------

    def pause(self) -> None:
        """Fold the running segment into today's total and stop the timer."""
        start = self._state.session_start_time
        if start is None:
            return
        new = self._state.model_copy(deep=True)
        elapsed = int((self._clock() - start).total_seconds())
        new.accumulated_seconds_today += max(0, elapsed)
        new.workout_minutes_today = new.accumulated_seconds_today // 60
        new.session_start_time = None
        self._commit(new)

    def resume(self) -> bool:
        """Start the timer unless it is already running."""
        if self._state.session_start_time is not None:
            return False
        new = self._state.model_copy(deep=True)
        new.session_start_time = self._clock()
        self._commit(new)
        return True

    @property
    def is_timer_running(self) -> bool:
        return self._state.session_start_time is not None

    # ------------------------------------------------------------------
    # Profile and plan
    # ------------------------------------------------------------------

    def complete_onboarding(self, profile: UserProfile) -> None:
        new = self._state.model_copy(deep=True)
        new.user_profile = profile
        new.onboarded = True
        self._commit(new)

    def update_profile(self, profile: UserProfile) -> None:
        new = self._state.model_copy(deep=True)
        new.user_profile = profile
        self._commit(new)

    def save_workout_plan(self, plan: WorkoutPlan, name: Optional[str] = None) -> None:
        """Activate *plan*, starting its rotation from the first entry."""
        new = self._state.model_copy(deep=True)
        new.active_plan = plan
        new.active_plan_name = name or plan.title
        new.current_day_index = 0
        new.set_progress = {}
        self._commit(new)

    def clear_workout_plan(self) -> None:
        new = self._state.model_copy(deep=True)
        new.active_plan = None
        new.active_plan_name = ""
        new.current_day_index = 0
        new.set_progress = {}
        self._commit(new)

    def delete_all_data(self) -> None:
        """Return to a fresh install, which sends the user back to onboarding."""
        self._commit(SessionState(last_rollover_date=self.today()))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _commit(self, new: SessionState) -> None:
        self._state = new
        try:
            self._save(new.model_copy(deep=True))
        except Exception:
            logger.exception("Failed to persist session state")


def _is_scheduled_day(state: SessionState) -> bool:
    plan = state.active_plan
    if plan is None:
        return True
    if plan.is_full_week:
        return True
    return state.current_day_index < len(plan.workouts)


def _advance_day_index(state: SessionState) -> None:
    plan = state.active_plan
    if plan is None:
        return
    # Partial-week plans still cycle over a week: a 3-entry plan runs
    # 0, 1, 2 then four rest days before returning to 0.
    cycle_length = max(DAYS_IN_WEEK, len(plan.workouts))
    if state.current_day_index < cycle_length - 1:
        state.current_day_index += 1
    else:
        state.current_day_index = 0


def _close_day(state: SessionState, day: datetime.date) -> None:
    """Apply the end-of-day rules for *day* to *state* in place."""
    if _is_scheduled_day(state):
        if state.attempted_today:
            if state.last_workout_date != day:
                state.streak_count += 1
                state.last_workout_date = day
        elif state.streak_count > 0:
            logger.info("Streak of %d broken on %s", state.streak_count, day)
            state.streak_just_broken = True
            state.streak_count = 0

    state.attempted_today = False
    state.completed_today = False
    state.workout_minutes_today = 0
    state.accumulated_seconds_today = 0
    state.session_start_time = None
    state.set_progress = {}
    _advance_day_index(state)
