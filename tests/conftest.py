"""Shared fixtures: a fixed clock, an in-memory store and sample plans."""

import datetime

import pytest

from factories import WEEKDAYS, FakeClock, make_plan
from fitform.schemas.plan import WorkoutPlan
from fitform.session.state import SessionManager
from fitform.storage.memory import InMemoryStore


@pytest.fixture
def clock() -> FakeClock:
    # Wednesday 2025-01-15, 09:00
    return FakeClock(datetime.datetime(2025, 1, 15, 9, 0))


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def manager(store, clock) -> SessionManager:
    return SessionManager.from_store(store, clock=clock)


@pytest.fixture
def full_week_plan() -> WorkoutPlan:
    return make_plan(WEEKDAYS)


@pytest.fixture
def three_day_plan() -> WorkoutPlan:
    return make_plan(["Day 1", "Day 2", "Day 3"])
