"""Session core: persisted day state, streaks and the workout flow."""

from fitform.session.flow import FlowTransitionError, WorkoutFlow
from fitform.session.scheduler import MidnightScheduler
from fitform.session.state import SessionManager

__all__ = ["FlowTransitionError", "MidnightScheduler", "SessionManager", "WorkoutFlow"]
