"""
Workout flow endpoints.

The client holds the :class:`FlowState` and posts it back with each
transition.  A flow opened on an earlier day is reset to ``ready`` for
today's workout instead of being advanced.
"""

from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, status

from fitform.api.dependencies import get_workout_flow
from fitform.schemas.workout_flow import EndExerciseRequest, FlowState, SelectExerciseRequest
from fitform.session.flow import FlowTransitionError, WorkoutFlow

router = APIRouter()


def _transition(flow: WorkoutFlow, state: FlowState, step: Callable[[FlowState], FlowState]) -> FlowState:
    synced = flow.sync_day(state)
    if synced is not state:
        return synced
    try:
        return step(state)
    except FlowTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/start", summary="Open the flow on today's workout.", response_model=FlowState)
def start_flow(flow: WorkoutFlow = Depends(get_workout_flow)):
    return flow.start()


@router.post("/ready", summary="Confirm the user is ready to begin.", response_model=FlowState)
def confirm_ready(state: FlowState, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, state, flow.confirm_ready)


@router.post("/select", summary="Pick the next exercise.", response_model=FlowState)
def select_exercise(data: SelectExerciseRequest, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, data.flow, lambda s: flow.select_exercise(s, data.exercise_id))


@router.post("/complete-set", summary="Finish the current set.", response_model=FlowState)
def complete_set(state: FlowState, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, state, flow.complete_set)


@router.post("/next-set", summary="End the rest period and start the next set.", response_model=FlowState)
def start_next_set(state: FlowState, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, state, flow.start_next_set)


@router.post("/end-exercise", summary="End the current exercise early.", response_model=FlowState)
def end_exercise(data: EndExerciseRequest, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, data.flow, lambda s: flow.end_exercise(s, data.elapsed_minutes))


@router.post("/exit", summary="Leave the workout.", response_model=FlowState)
def exit_flow(state: FlowState, flow: WorkoutFlow = Depends(get_workout_flow)):
    return _transition(flow, state, flow.exit)
