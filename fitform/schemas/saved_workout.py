"""Saved workout slot schemas."""

import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field

from fitform.schemas.plan import WorkoutPlan


class SavedWorkout(BaseModel):
    """A named plan snapshot kept in a numbered slot."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    workout_plan: WorkoutPlan
    saved_date: datetime.datetime = Field(default_factory=datetime.datetime.now)
    slot_number: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=100)


class SaveWorkoutRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    workout_plan: Optional[WorkoutPlan] = Field(
        None, description="Plan to save; defaults to the active plan"
    )


class SlotResponse(BaseModel):
    slot: int
    workout: Optional[SavedWorkout] = None
