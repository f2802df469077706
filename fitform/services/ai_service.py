"""
AI plan service.

Talks to an OpenAI-compatible chat completions API for four requests:
plan generation, plan customization, camera placement guidance and form
analysis.  Each request has two layers:

- ``request_*`` builds the prompt and returns the raw completion as a
  dict.  The proxy endpoints return this untouched.
- the public method (``generate_workout_plan`` etc.) parses the raw
  completion into schemas with per-field defaults.

Failures surface as :class:`AIServiceError` subclasses carrying a
user-facing message.
"""

import logging
from typing import Any, Optional

import openai

from fitform.core.config import settings
from fitform.schemas.form_analysis import CameraPosition, FormAnalysis
from fitform.schemas.plan import CustomizationResult, WorkoutPlan
from fitform.schemas.profile import UserProfile
from fitform.services import ai_parsing, prompts
from fitform.services.errors import AIHTTPError, AIServiceError, MissingAPIKeyError

logger = logging.getLogger(__name__)


def select_key_frames(frames: list[str], count: int) -> list[str]:
    """Pick *count* evenly spaced frames, always starting from the first.

    Returns all frames when there are no more than *count* of them.
    """
    if count <= 0:
        return []
    if len(frames) <= count:
        return list(frames)
    interval = len(frames) // count
    return [frames[i * interval] for i in range(count)]


class AIPlanService:
    """Client for the AI plan and form-check requests."""

    def __init__(
        self,
        client: Any = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        self._client = client
        self.api_key = settings.OPENAI_API_KEY if api_key is None else api_key
        self.model = model or settings.OPENAI_MODEL
        self.base_url = base_url or settings.OPENAI_BASE_URL or None

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError()
            self._client = openai.OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=settings.OPENAI_TIMEOUT_SECONDS,
            )
        return self._client

    # ------------------------------------------------------------------
    # Raw requests
    # ------------------------------------------------------------------

    def request_workout_plan(self, profile: UserProfile, user_notes: Optional[str] = None) -> dict[str, Any]:
        return self._chat(
            [
                {"role": "system", "content": prompts.PLAN_SYSTEM_PROMPT},
                {"role": "user", "content": prompts.build_workout_plan_prompt(profile, user_notes)},
            ],
            temperature=settings.PLAN_TEMPERATURE,
        )

    def request_plan_customization(self, current_plan: WorkoutPlan, request: str) -> dict[str, Any]:
        return self._chat(
            [
                {"role": "system", "content": prompts.CUSTOMIZE_SYSTEM_PROMPT},
                {"role": "user", "content": prompts.build_customization_prompt(current_plan, request)},
            ],
            temperature=settings.PLAN_TEMPERATURE,
        )

    def request_camera_position(self, exercise_name: str) -> dict[str, Any]:
        return self._chat(
            [
                {"role": "system", "content": prompts.CAMERA_SYSTEM_PROMPT},
                {"role": "user", "content": prompts.build_camera_position_prompt(exercise_name)},
            ],
            temperature=settings.ANALYSIS_TEMPERATURE,
        )

    def request_form_analysis(
        self, frames: list[str], exercise_name: str, camera_position: CameraPosition
    ) -> dict[str, Any]:
        """Send sampled frames (base64 JPEG) for analysis."""
        key_frames = select_key_frames(frames, settings.FORM_KEY_FRAMES)[: settings.FORM_MAX_FRAMES]
        content: list[dict[str, Any]] = [
            {"type": "text", "text": prompts.build_form_analysis_prompt(exercise_name, camera_position)}
        ]
        for frame in key_frames:
            content.append(
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:image/jpeg;base64,{frame}", "detail": "high"},
                }
            )
        return self._chat(
            [
                {"role": "system", "content": prompts.FORM_SYSTEM_PROMPT},
                {"role": "user", "content": content},
            ],
            temperature=settings.ANALYSIS_TEMPERATURE,
            max_tokens=settings.ANALYSIS_MAX_TOKENS,
        )

    # ------------------------------------------------------------------
    # Parsed requests
    # ------------------------------------------------------------------

    def generate_workout_plan(self, profile: UserProfile, user_notes: Optional[str] = None) -> WorkoutPlan:
        data = ai_parsing.extract_content(self.request_workout_plan(profile, user_notes))
        plan = ai_parsing.parse_plan(data)
        logger.info("Generated plan %r with %d workouts", plan.title, len(plan.workouts))
        return plan

    def customize_workout_plan(self, current_plan: WorkoutPlan, request: str) -> CustomizationResult:
        data = ai_parsing.extract_content(self.request_plan_customization(current_plan, request))
        result = ai_parsing.parse_customization(data, current_plan)
        if result.is_harmful:
            logger.info("Plan customization rejected as harmful")
        return result

    def get_camera_position(self, exercise_name: str) -> CameraPosition:
        data = ai_parsing.extract_content(self.request_camera_position(exercise_name))
        return ai_parsing.parse_camera_position(data)

    def analyze_form(self, frames: list[str], exercise_name: str, camera_position: CameraPosition) -> FormAnalysis:
        raw = self.request_form_analysis(frames, exercise_name, camera_position)
        data = ai_parsing.extract_content(raw)
        return ai_parsing.parse_form_analysis(data, exercise_name, camera_position)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _chat(
        self, messages: list[dict[str, Any]], temperature: float, max_tokens: Optional[int] = None
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature,
            "response_format": {"type": "json_object"},
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            completion = self.client.chat.completions.create(**kwargs)
        except openai.APIStatusError as e:
            logger.warning("AI request failed with HTTP %s", e.status_code)
            raise AIHTTPError(e.status_code, e.message)
        except openai.APIError as e:
            logger.warning("AI request failed: %s", e.message)
            raise AIServiceError(f"AI service request failed: {e.message}")
        return completion.model_dump()
