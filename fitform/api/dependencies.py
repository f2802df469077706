"""
Shared API dependencies.

Reusable FastAPI dependencies for storage, the session manager and the
service layer.  Tests override ``get_store``, ``get_clock`` and
``get_ai_service``.
"""

import datetime
from typing import Callable, Iterator

from fastapi import Depends
from sqlmodel import Session

from fitform.db.session import get_db
from fitform.services.ai_service import AIPlanService
from fitform.services.saved_workouts import SavedWorkoutsService
from fitform.session.flow import WorkoutFlow
from fitform.session.state import SessionManager, session_lock
from fitform.storage.base import KeyValueStore
from fitform.storage.sql import SQLModelStore


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    return SQLModelStore(db)


def get_clock() -> Callable[[], datetime.datetime]:
    return datetime.datetime.now


def get_session_manager(
    store: KeyValueStore = Depends(get_store),
    clock: Callable[[], datetime.datetime] = Depends(get_clock),
) -> Iterator[SessionManager]:
    """Load the session and apply any day rollover that is due.

    The session lock is held until the request finishes so the midnight
    rollover cannot land between this request's load and its save.
    """
    with session_lock:
        manager = SessionManager.from_store(store, clock=clock)
        manager.roll_over()
        yield manager


def get_workout_flow(manager: SessionManager = Depends(get_session_manager)) -> WorkoutFlow:
    return WorkoutFlow(manager)


def get_saved_workouts(store: KeyValueStore = Depends(get_store)) -> SavedWorkoutsService:
    return SavedWorkoutsService(store)


def get_ai_service() -> AIPlanService:
    return AIPlanService()
