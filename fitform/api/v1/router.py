"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from fitform.api.v1.endpoints import ai, saved_workouts, session, workout_flow

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    session.router, prefix="/session", tags=["Session"]
)
api_router.include_router(
    workout_flow.router, prefix="/workout/flow", tags=["Workout flow"]
)
api_router.include_router(
    saved_workouts.router, prefix="/saved-workouts", tags=["Saved workouts"]
)
api_router.include_router(
    ai.router, prefix="/ai", tags=["AI proxy"]
)
