"""
Saved workout endpoints.

Slot management for named plan snapshots.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from fitform.api.dependencies import get_saved_workouts, get_session_manager
from fitform.api.v1.endpoints.session import build_state_response
from fitform.schemas.saved_workout import SavedWorkout, SaveWorkoutRequest, SlotResponse
from fitform.schemas.session_state import SessionStateResponse
from fitform.services.saved_workouts import SavedWorkoutsService
from fitform.session.state import SessionManager

router = APIRouter()


@router.get("", summary="List every slot with its saved workout, if any.", response_model=list[SlotResponse])
def list_slots(saved: SavedWorkoutsService = Depends(get_saved_workouts)):
    return saved.get_all_slots()


@router.get("/available", summary="List empty slot numbers.", response_model=list[int])
def available_slots(saved: SavedWorkoutsService = Depends(get_saved_workouts)):
    return saved.get_available_slots()


@router.get("/{slot}", summary="Get the workout saved in a slot.", response_model=SavedWorkout)
def get_slot(slot: int, saved: SavedWorkoutsService = Depends(get_saved_workouts)):
    return saved.load_workout(slot)


@router.put("/{slot}", summary="Save a plan into a slot, replacing its contents.", response_model=SavedWorkout)
def save_slot(
    slot: int,
    data: SaveWorkoutRequest,
    saved: SavedWorkoutsService = Depends(get_saved_workouts),
    manager: SessionManager = Depends(get_session_manager),
):
    plan = data.workout_plan or manager.state.active_plan
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active workout plan to save")
    return saved.save_workout(plan, slot, data.name)


@router.delete("/{slot}", summary="Empty a slot.", status_code=status.HTTP_204_NO_CONTENT)
def delete_slot(slot: int, saved: SavedWorkoutsService = Depends(get_saved_workouts)):
    saved.delete_workout(slot)


@router.post("/{slot}/activate", summary="Make a saved workout the active plan.", response_model=SessionStateResponse)
def activate_slot(
    slot: int,
    saved: SavedWorkoutsService = Depends(get_saved_workouts),
    manager: SessionManager = Depends(get_session_manager),
):
    entry = saved.load_workout(slot)
    manager.save_workout_plan(entry.workout_plan, entry.name)
    return build_state_response(manager)
