"""
Session endpoints.

Onboarding, profile and plan management, the session timer and streak
state.  Every request rolls the day over first (see
``get_session_manager``), so reads always reflect the current calendar day.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from fitform.api.dependencies import get_saved_workouts, get_session_manager
from fitform.schemas.plan import Workout
from fitform.schemas.profile import ProfileForm
from fitform.schemas.session_state import ActivatePlanRequest, SessionStateResponse
from fitform.services.saved_workouts import SavedWorkoutsService
from fitform.session.state import SessionManager

router = APIRouter()


def build_state_response(manager: SessionManager) -> SessionStateResponse:
    return SessionStateResponse(
        state=manager.state,
        today_workout=manager.get_current_workout(),
        is_scheduled_workout_day=manager.is_scheduled_workout_day(),
        is_rest_day=manager.is_rest_day(),
        elapsed_seconds=manager.elapsed_seconds(),
    )


@router.get("", summary="Get the current session state.", response_model=SessionStateResponse)
def get_state(manager: SessionManager = Depends(get_session_manager)):
    return build_state_response(manager)


@router.post("/onboarding", summary="Finish onboarding with the user's profile.", response_model=SessionStateResponse)
def complete_onboarding(form: ProfileForm, manager: SessionManager = Depends(get_session_manager)):
    manager.complete_onboarding(form.to_profile())
    return build_state_response(manager)


@router.put("/profile", summary="Replace the user's profile.", response_model=SessionStateResponse)
def update_profile(form: ProfileForm, manager: SessionManager = Depends(get_session_manager)):
    if not manager.state.onboarded:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Onboarding is not complete")
    manager.update_profile(form.to_profile())
    return build_state_response(manager)


@router.put("/plan", summary="Activate a workout plan.", response_model=SessionStateResponse)
def activate_plan(data: ActivatePlanRequest, manager: SessionManager = Depends(get_session_manager)):
    manager.save_workout_plan(data.plan, data.name)
    return build_state_response(manager)


@router.delete("/plan", summary="Clear the active workout plan.", response_model=SessionStateResponse)
def clear_plan(manager: SessionManager = Depends(get_session_manager)):
    manager.clear_workout_plan()
    return build_state_response(manager)


@router.get("/workout/today", summary="Get today's workout.", response_model=Workout)
def get_today_workout(manager: SessionManager = Depends(get_session_manager)):
    workout = manager.get_current_workout()
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active workout plan")
    return workout


@router.post("/timer/pause", summary="Pause the workout timer.", response_model=SessionStateResponse)
def pause_timer(manager: SessionManager = Depends(get_session_manager)):
    manager.pause()
    return build_state_response(manager)


@router.post("/timer/resume", summary="Resume the workout timer.", response_model=SessionStateResponse)
def resume_timer(manager: SessionManager = Depends(get_session_manager)):
    manager.resume()
    return build_state_response(manager)


@router.post("/streak/dismiss", summary="Acknowledge the broken-streak message.", response_model=SessionStateResponse)
def dismiss_streak_broken(manager: SessionManager = Depends(get_session_manager)):
    manager.dismiss_streak_broken()
    return build_state_response(manager)


@router.delete("", summary="Delete all data and return to onboarding.", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_data(
    manager: SessionManager = Depends(get_session_manager),
    saved: SavedWorkoutsService = Depends(get_saved_workouts),
):
    manager.delete_all_data()
    saved.delete_all()
