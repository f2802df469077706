"""
Session state schema.

Everything the device remembers between launches: onboarding, the
active plan, streak bookkeeping, today's flags and timers, and per-exercise
set progress for today's workout.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from fitform.schemas.plan import Workout, WorkoutPlan
from fitform.schemas.profile import UserProfile


class SessionState(BaseModel):
    """Snapshot of the persisted session fields."""

    onboarded: bool = False
    user_profile: Optional[UserProfile] = None

    active_plan: Optional[WorkoutPlan] = None
    active_plan_name: str = ""
    current_day_index: int = Field(0, ge=0)

    streak_count: int = Field(0, ge=0)
    last_workout_date: Optional[datetime.date] = None
    streak_just_broken: bool = False

    completed_today: bool = False
    attempted_today: bool = False

    workout_minutes_today: int = Field(0, ge=0)
    accumulated_seconds_today: int = Field(0, ge=0)
    session_start_time: Optional[datetime.datetime] = None

    # exercise id -> sets completed today
    set_progress: dict[str, int] = Field(default_factory=dict)

    # Calendar day the last rollover ran for (or the day state was created).
    last_rollover_date: Optional[datetime.date] = None


class SessionStateResponse(BaseModel):
    """Session state plus values derived at read time."""

    state: SessionState
    today_workout: Optional[Workout] = None
    is_scheduled_workout_day: bool
    is_rest_day: bool
    elapsed_seconds: int


class ActivatePlanRequest(BaseModel):
    plan: WorkoutPlan
    name: Optional[str] = Field(None, max_length=100, description="Display name; defaults to the plan title")
