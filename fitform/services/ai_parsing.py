"""
Permissive parsing of AI responses.

The model is asked for JSON but individual fields are unreliable: a
missing or mistyped field falls back to a default instead of failing the
whole response.  Only an unreadable envelope (no message content, or
content that is not a JSON object) is an error.
"""

import json
from typing import Any, Optional

from fitform.schemas.form_analysis import (
    CameraAngle,
    CameraPosition,
    FeedbackRating,
    FormAnalysis,
    FormFeedback,
)
from fitform.schemas.plan import CustomizationResult, Exercise, Workout, WorkoutPlan
from fitform.services.errors import InvalidAIResponseError

DEFAULT_PLAN_TITLE = "Your Workout Plan"
DEFAULT_DURATION_WEEKS = 4
DEFAULT_WORKOUT_MINUTES = 60


# ======================================================================
# Field helpers
# ======================================================================


def _str(data: dict, key: str, default: str) -> str:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _opt_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _int(data: dict, key: str, default: int, minimum: int = 0, maximum: Optional[int] = None) -> int:
    value = data.get(key)
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        result = int(value)
    elif isinstance(value, str):
        try:
            result = int(float(value.strip()))
        except ValueError:
            return default
    else:
        return default
    result = max(minimum, result)
    if maximum is not None:
        result = min(maximum, result)
    return result


def _str_list(data: dict, key: str) -> list[str]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def _dict_list(data: dict, key: str) -> list[dict]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)
    return text


# ======================================================================
# Envelope
# ======================================================================


def extract_content(response: dict[str, Any]) -> dict[str, Any]:
    """Pull the JSON object out of a chat completion response."""
    try:
        content = response["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise InvalidAIResponseError("missing message content")
    if not isinstance(content, str):
        raise InvalidAIResponseError("message content is not text")
    try:
        payload = json.loads(_strip_code_fence(content))
    except ValueError:
        raise InvalidAIResponseError("message content is not valid JSON")
    if not isinstance(payload, dict):
        raise InvalidAIResponseError("expected a JSON object")
    return payload


# ======================================================================
# Workout plans
# ======================================================================


def parse_exercise(data: dict) -> Exercise:
    return Exercise(
        name=_str(data, "name", "Exercise"),
        sets=_int(data, "sets", 3, minimum=1),
        reps=_str(data, "reps", "10"),
        rest_time=_int(data, "restTime", 60),
        notes=_opt_str(data, "notes"),
        muscle_groups=_str_list(data, "muscleGroups"),
        difficulty=_str(data, "difficulty", "Intermediate"),
    )


def parse_workout(data: dict) -> Workout:
    return Workout(
        day=_str(data, "day", "Day"),
        title=_str(data, "title", "Workout"),
        exercises=[parse_exercise(e) for e in _dict_list(data, "exercises")],
        estimated_duration=_int(data, "estimatedDuration", DEFAULT_WORKOUT_MINUTES),
    )


def parse_plan(data: dict, default_title: str = DEFAULT_PLAN_TITLE) -> WorkoutPlan:
    return WorkoutPlan(
        title=_str(data, "title", default_title),
        description=_str(data, "description", ""),
        duration_weeks=_int(data, "durationWeeks", DEFAULT_DURATION_WEEKS, minimum=1),
        workouts=[parse_workout(w) for w in _dict_list(data, "workouts")],
    )


def parse_customization(data: dict, current_plan: WorkoutPlan) -> CustomizationResult:
    is_harmful = data.get("isHarmful") is True
    modified = data.get("modifiedPlan")
    modified_plan = None
    if not is_harmful and isinstance(modified, dict):
        modified_plan = parse_plan(modified, default_title=current_plan.title)
    return CustomizationResult(
        is_harmful=is_harmful,
        warning_message=_opt_str(data, "warningMessage"),
        modified_plan=modified_plan,
        explanation=_str(data, "explanation", ""),
    )


# ======================================================================
# Form check
# ======================================================================


def _enum_value(enum_cls, raw: Any, default):
    try:
        return enum_cls(raw)
    except ValueError:
        return default


def parse_camera_position(data: dict) -> CameraPosition:
    defaults = CameraPosition()
    return CameraPosition(
        angle=_enum_value(CameraAngle, data.get("angle"), CameraAngle.SIDE),
        distance=_str(data, "distance", defaults.distance),
        height=_str(data, "height", defaults.height),
        instructions=_str(data, "instructions", defaults.instructions),
        visual_guide_prompt=_str(data, "visualGuidePrompt", defaults.visual_guide_prompt),
    )


def parse_form_analysis(data: dict, exercise_name: str, camera_position: Optional[CameraPosition]) -> FormAnalysis:
    feedback = [
        FormFeedback(
            aspect=_str(item, "aspect", "General"),
            rating=_enum_value(FeedbackRating, item.get("rating"), FeedbackRating.GOOD),
            description=_str(item, "description", ""),
        )
        for item in _dict_list(data, "detailedFeedback")
    ]
    return FormAnalysis(
        exercise_name=exercise_name,
        overall_score=_int(data, "overallScore", 70, minimum=0, maximum=100),
        analysis=_str(data, "analysis", "Form analysis complete"),
        strengths=_str_list(data, "strengths"),
        improvements=_str_list(data, "improvements"),
        detailed_feedback=feedback,
        camera_position_used=camera_position,
    )
