"""
Session state persistence.

Each field of :class:`SessionState` lives under its own key so it can be
read and written independently.  Loading is forgiving: a key that is
missing, or whose value no longer validates, falls back to the field's
default while every other field loads normally.
"""

import logging
from typing import Any

from pydantic import ValidationError

from fitform.schemas.session_state import SessionState
from fitform.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

# Field name -> storage key.
SESSION_KEYS: dict[str, str] = {
    "onboarded": "hasCompletedOnboarding",
    "user_profile": "userProfile",
    "active_plan": "currentWorkoutPlan",
    "active_plan_name": "currentPlanName",
    "current_day_index": "currentWorkoutDayIndex",
    "streak_count": "streakCount",
    "last_workout_date": "lastWorkoutDate",
    "streak_just_broken": "isStreakBroken",
    "completed_today": "completedWorkoutToday",
    "attempted_today": "hasAttemptedWorkoutToday",
    "workout_minutes_today": "workoutMinutesToday",
    "accumulated_seconds_today": "accumulatedWorkoutSecondsToday",
    "session_start_time": "currentWorkoutStartTime",
    "set_progress": "exerciseSetProgress",
    "last_rollover_date": "lastRolloverDate",
}

_MISSING = object()


def _decode_field(name: str, raw: Any) -> Any:
    """Validate one stored value against its field, or return the default."""
    try:
        return getattr(SessionState.model_validate({name: raw}), name)
    except ValidationError:
        logger.warning("Stored value for %r is malformed, using default", name)
        return SessionState.model_fields[name].get_default(call_default_factory=True)


def load_session_state(store: KeyValueStore) -> SessionState:
    """Read every session field from *store*."""
    values: dict[str, Any] = {}
    for name, key in SESSION_KEYS.items():
        raw = store.get(key, _MISSING)
        if raw is _MISSING or raw is None:
            continue
        values[name] = _decode_field(name, raw)
    return SessionState(**values)


def save_session_state(store: KeyValueStore, state: SessionState) -> None:
    """Write every session field to *store* in one batch."""
    dumped = state.model_dump(mode="json")
    store.set_many({key: dumped[name] for name, key in SESSION_KEYS.items()})


def clear_session_state(store: KeyValueStore) -> None:
    """Remove every session key from *store*."""
    store.remove_many(SESSION_KEYS.values())
