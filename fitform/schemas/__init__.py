"""Pydantic schemas for request/response validation."""

from fitform.schemas.profile import (
    Equipment,
    FitnessGoal,
    FitnessLevel,
    ProfileForm,
    UserProfile,
    WorkoutFrequency,
    WorkoutType,
)
from fitform.schemas.plan import CustomizationResult, Exercise, Workout, WorkoutPlan
from fitform.schemas.form_analysis import (
    CameraAngle,
    CameraPosition,
    FeedbackRating,
    FormAnalysis,
    FormFeedback,
)
from fitform.schemas.session_state import ActivatePlanRequest, SessionState, SessionStateResponse
from fitform.schemas.workout_flow import FlowState, FlowStep
from fitform.schemas.saved_workout import SavedWorkout

__all__ = [
    "Equipment",
    "FitnessGoal",
    "FitnessLevel",
    "ProfileForm",
    "UserProfile",
    "WorkoutFrequency",
    "WorkoutType",
    "CustomizationResult",
    "Exercise",
    "Workout",
    "WorkoutPlan",
    "CameraAngle",
    "CameraPosition",
    "FeedbackRating",
    "FormAnalysis",
    "FormFeedback",
    "ActivatePlanRequest",
    "SessionState",
    "SessionStateResponse",
    "FlowState",
    "FlowStep",
    "SavedWorkout",
]
