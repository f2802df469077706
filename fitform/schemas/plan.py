"""
Workout plan schemas.

Plans are produced by the AI service and treated as opaque data once
parsed; the session core only reads ``workouts[i].exercises[j]``.
"""

import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, Field

DAYS_IN_WEEK = 7


def _new_id() -> str:
    return str(uuid.uuid4())


class Exercise(BaseModel):
    """A single exercise prescription within a workout."""

    id: str = Field(default_factory=_new_id)
    name: str
    sets: int = Field(3, ge=1)
    reps: str = Field("10", description="Free text, e.g. '8-12' or '30 seconds'")
    rest_time: int = Field(60, ge=0, description="Rest between sets (seconds)")
    notes: Optional[str] = None
    muscle_groups: list[str] = Field(default_factory=list)
    difficulty: str = "Intermediate"

    @property
    def youtube_search_url(self) -> str:
        query = self.name.replace(" ", "+")
        return f"https://www.youtube.com/results?search_query={query}+form+tutorial"


class Workout(BaseModel):
    """One day's workout."""

    id: str = Field(default_factory=_new_id)
    day: str = Field(..., description="Day label, e.g. 'Monday' or 'Day 1'")
    title: str
    exercises: list[Exercise] = Field(default_factory=list)
    estimated_duration: int = Field(60, ge=0, description="Minutes")

    def exercise_by_id(self, exercise_id: str) -> Optional[Exercise]:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        return None


class WorkoutPlan(BaseModel):
    """An ordered list of workouts."""

    id: str = Field(default_factory=_new_id)
    title: str
    description: str = ""
    duration_weeks: int = Field(4, ge=1)
    workouts: list[Workout] = Field(default_factory=list)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.now)

    @property
    def is_full_week(self) -> bool:
        """True when every day of the week has its own entry."""
        return len(self.workouts) == DAYS_IN_WEEK

    @property
    def is_monday_first(self) -> bool:
        """Whether the first entry's day label reads as Monday."""
        if not self.workouts:
            return False
        return self.workouts[0].day.strip().lower().startswith("mon")


class CustomizationResult(BaseModel):
    """Outcome of a free-text plan modification request."""

    is_harmful: bool = False
    warning_message: Optional[str] = None
    modified_plan: Optional[WorkoutPlan] = None
    explanation: str = ""
