"""API tests for saved workout slots."""

from factories import make_plan

BASE = "/api/v1/saved-workouts"


class TestSavedWorkoutsAPI:
    def test_save_active_plan(self, client):
        plan = make_plan(["Day 1"])
        client.put("/api/v1/session/plan", json={"plan": plan.model_dump(mode="json")})

        response = client.put(f"{BASE}/2", json={"name": "Winter block"})
        assert response.status_code == 200
        assert response.json()["workout_plan"]["id"] == plan.id

        slots = client.get(BASE).json()
        assert [s["slot"] for s in slots] == [1, 2, 3]
        assert slots[1]["workout"]["name"] == "Winter block"
        assert client.get(f"{BASE}/available").json() == [1, 3]

    def test_save_without_active_plan(self, client):
        response = client.put(f"{BASE}/1", json={"name": "Nothing"})
        assert response.status_code == 404

    def test_slot_out_of_range(self, client):
        plan = make_plan(["Day 1"])
        response = client.put(
            f"{BASE}/4", json={"name": "Too far", "workout_plan": plan.model_dump(mode="json")}
        )
        assert response.status_code == 422

    def test_activate_and_delete(self, client):
        plan = make_plan(["Day 1", "Day 2"])
        client.put(f"{BASE}/1", json={"name": "Split", "workout_plan": plan.model_dump(mode="json")})

        body = client.post(f"{BASE}/1/activate").json()
        assert body["state"]["active_plan"]["id"] == plan.id
        assert body["state"]["active_plan_name"] == "Split"

        assert client.delete(f"{BASE}/1").status_code == 204
        assert client.get(f"{BASE}/1").status_code == 404
