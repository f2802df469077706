"""
AI proxy endpoints.

Keeps the API key on the server: each endpoint builds the prompt,
forwards it to the AI API and returns the raw completion wrapped as
``{"success": true, "data": ...}``.
"""

from typing import Any, Callable

from fastapi import APIRouter, Depends, HTTPException, status

from fitform.api.dependencies import get_ai_service
from fitform.schemas.ai import (
    AnalyzeFormRequest,
    CameraPositionRequest,
    CustomizePlanRequest,
    GeneratePlanRequest,
    ProxyResponse,
)
from fitform.services.ai_service import AIPlanService
from fitform.services.errors import AIServiceError, MissingAPIKeyError

router = APIRouter()


def _proxy(call: Callable[[], dict[str, Any]]) -> ProxyResponse:
    try:
        return ProxyResponse(data=call())
    except MissingAPIKeyError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except AIServiceError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)


@router.post("/generate-workout-plan", summary="Generate a workout plan for a profile.", response_model=ProxyResponse)
def generate_workout_plan(data: GeneratePlanRequest, ai: AIPlanService = Depends(get_ai_service)):
    return _proxy(lambda: ai.request_workout_plan(data.profile, data.user_notes))


@router.post("/customize-workout-plan", summary="Request a change to a workout plan.", response_model=ProxyResponse)
def customize_workout_plan(data: CustomizePlanRequest, ai: AIPlanService = Depends(get_ai_service)):
    return _proxy(lambda: ai.request_plan_customization(data.current_plan, data.request))


@router.post("/get-camera-position", summary="Get camera placement for an exercise.", response_model=ProxyResponse)
def get_camera_position(data: CameraPositionRequest, ai: AIPlanService = Depends(get_ai_service)):
    return _proxy(lambda: ai.request_camera_position(data.exercise_name))


@router.post("/analyze-form", summary="Analyze exercise form from video frames.", response_model=ProxyResponse)
def analyze_form(data: AnalyzeFormRequest, ai: AIPlanService = Depends(get_ai_service)):
    return _proxy(lambda: ai.request_form_analysis(data.frames, data.exercise_name, data.camera_position))
