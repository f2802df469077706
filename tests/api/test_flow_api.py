"""API tests for the workout flow endpoints."""

import pytest

from factories import make_plan

BASE = "/api/v1/workout/flow"


@pytest.fixture
def plan(client):
    plan = make_plan(["Day 1", "Day 2", "Day 3"], exercises=1, sets=2)
    client.put("/api/v1/session/plan", json={"plan": plan.model_dump(mode="json")})
    return plan


class TestWorkoutFlowAPI:
    def test_full_workout(self, client, plan):
        exercise_id = plan.workouts[0].exercises[0].id

        state = client.post(f"{BASE}/start").json()
        assert state["step"] == "ready"

        state = client.post(f"{BASE}/ready", json=state).json()
        assert state["step"] == "exercise_selection"

        state = client.post(f"{BASE}/select", json={"flow": state, "exercise_id": exercise_id}).json()
        assert state["step"] == "active_exercise"

        state = client.post(f"{BASE}/complete-set", json=state).json()
        assert state["step"] == "resting"
        assert state["rest_target_seconds"] == 90

        state = client.post(f"{BASE}/next-set", json=state).json()
        state = client.post(f"{BASE}/complete-set", json=state).json()
        assert state["step"] == "completed"

        session = client.get("/api/v1/session").json()["state"]
        assert session["completed_today"] is True
        assert session["streak_count"] == 1

    def test_illegal_transition_is_conflict(self, client, plan):
        state = client.post(f"{BASE}/start").json()
        response = client.post(f"{BASE}/complete-set", json=state)
        assert response.status_code == 409

    def test_end_exercise(self, client, plan):
        exercise_id = plan.workouts[0].exercises[0].id
        state = client.post(f"{BASE}/ready", json=client.post(f"{BASE}/start").json()).json()
        state = client.post(f"{BASE}/select", json={"flow": state, "exercise_id": exercise_id}).json()
        state = client.post(f"{BASE}/complete-set", json=state).json()

        state = client.post(f"{BASE}/end-exercise", json={"flow": state, "elapsed_minutes": 9}).json()
        assert state["step"] == "exercise_selection"
        session = client.get("/api/v1/session").json()["state"]
        assert session["set_progress"] == {exercise_id: 1}
        assert session["workout_minutes_today"] == 9

    def test_flow_from_previous_day_is_reset(self, client, clock, plan):
        state = client.post(f"{BASE}/ready", json=client.post(f"{BASE}/start").json()).json()
        clock.next_day()
        response = client.post(
            f"{BASE}/select", json={"flow": state, "exercise_id": plan.workouts[0].exercises[0].id}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["step"] == "ready"
        assert body["day_index"] == 1
        assert body["workout_id"] == plan.workouts[1].id

    def test_exit(self, client, plan):
        state = client.post(f"{BASE}/start").json()
        assert client.post(f"{BASE}/exit", json=state).json()["step"] == "exited"
