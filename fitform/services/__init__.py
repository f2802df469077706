"""Service layer: AI plan client and saved workout slots."""

from fitform.services.ai_service import AIPlanService
from fitform.services.errors import AIHTTPError, AIServiceError, InvalidAIResponseError, MissingAPIKeyError
from fitform.services.saved_workouts import SavedWorkoutsService

__all__ = [
    "AIPlanService",
    "AIHTTPError",
    "AIServiceError",
    "InvalidAIResponseError",
    "MissingAPIKeyError",
    "SavedWorkoutsService",
]
