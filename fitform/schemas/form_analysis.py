"""
Form-check schemas.

Camera guidance tells the user where to film from; the analysis report
scores a recorded set on a 0-100 scale with per-aspect feedback.
"""

import datetime
import re
import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

# Splits "1. Do this 2. Do that" into separate numbered lines.
_NUMBERED_STEP = re.compile(r"(?<!^)(?<!\d)(?=\d+\.)")


class CameraAngle(str, Enum):
    FRONT = "Front View"
    SIDE = "Side View"
    BACK = "Back View"
    DIAGONAL = "45° Diagonal"
    OVERHEAD = "Overhead View"


class FeedbackRating(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"
    POOR = "Poor"


class CameraPosition(BaseModel):
    angle: CameraAngle = CameraAngle.SIDE
    distance: str = "6-8 feet away"
    height: str = "Waist height"
    instructions: str = "Position camera at side view"
    visual_guide_prompt: str = "Camera setup diagram"

    @property
    def instruction_lines(self) -> list[str]:
        normalized = _NUMBERED_STEP.sub("\n", self.instructions)
        return [line.strip() for line in normalized.splitlines() if line.strip()]


class FormFeedback(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    aspect: str = "General"
    rating: FeedbackRating = FeedbackRating.GOOD
    description: str = ""


class FormAnalysis(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    exercise_name: str
    video_url: Optional[str] = None
    overall_score: int = Field(70, ge=0, le=100)
    analysis: str = "Form analysis complete"
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    detailed_feedback: list[FormFeedback] = Field(default_factory=list)
    camera_position_used: Optional[CameraPosition] = None
    analyzed_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
