"""
AI proxy request/response schemas.

The proxy builds prompts server-side and returns the raw chat completion
so the client keeps its own permissive parsing.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from fitform.schemas.form_analysis import CameraPosition
from fitform.schemas.plan import WorkoutPlan
from fitform.schemas.profile import UserProfile


class GeneratePlanRequest(BaseModel):
    profile: UserProfile
    user_notes: Optional[str] = Field(None, max_length=2000)


class CustomizePlanRequest(BaseModel):
    current_plan: WorkoutPlan
    request: str = Field(..., min_length=1, max_length=2000)


class CameraPositionRequest(BaseModel):
    exercise_name: str = Field(..., min_length=1, max_length=200)


class AnalyzeFormRequest(BaseModel):
    frames: list[str] = Field(..., min_length=1, description="Base64-encoded JPEG frames")
    exercise_name: str = Field(..., min_length=1, max_length=200)
    camera_position: CameraPosition


class ProxyResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]
