"""
Workout flow schemas.

The flow is a client-held snapshot: each transition takes the current
``FlowState`` and returns the next one.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FlowStep(str, Enum):
    READY = "ready"
    EXERCISE_SELECTION = "exercise_selection"
    ACTIVE_EXERCISE = "active_exercise"
    RESTING = "resting"
    COMPLETED = "completed"
    EXITED = "exited"


TERMINAL_STEPS = frozenset({FlowStep.COMPLETED, FlowStep.EXITED})


class FlowState(BaseModel):
    """Where the user is in today's workout."""

    step: FlowStep = FlowStep.READY
    workout_id: Optional[str] = None
    day_index: int = 0

    exercise_id: Optional[str] = None
    # Set being performed (ACTIVE_EXERCISE) or up next (RESTING), 1-based.
    set_number: int = 1
    total_sets: int = 0
    # Sets finished for the selected exercise, including earlier visits today.
    completed_sets: int = 0
    rest_target_seconds: Optional[int] = None

    completed_exercise_ids: list[str] = Field(default_factory=list)
    message: str = ""

    @property
    def is_terminal(self) -> bool:
        return self.step in TERMINAL_STEPS


class SelectExerciseRequest(BaseModel):
    flow: FlowState
    exercise_id: str


class EndExerciseRequest(BaseModel):
    flow: FlowState
    elapsed_minutes: int = Field(0, ge=0)
