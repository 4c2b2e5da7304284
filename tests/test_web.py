"""Tests for the JSON API."""

import pytest
from fastapi.testclient import TestClient

from gym_helper.web import create_app


@pytest.fixture
def client(demo_store, settings):
    """API client over the demo data, with startup and shutdown run."""
    with TestClient(create_app(store=demo_store, settings=settings)) as client:
        yield client


class TestExerciseRoutes:
    """Tests for /exercises."""

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_list_and_search(self, client):
        assert len(client.get("/exercises").json()) == 4
        found = client.get("/exercises", params={"q": "жим"}).json()
        assert [e["id"] for e in found] == ["1"]

    def test_filters(self, client):
        data = client.get("/exercises/filters").json()
        assert "Грудь" in data["muscle_groups"]
        assert "Беговая дорожка" in data["equipment"]

    def test_get_missing_exercise(self, client):
        response = client.get("/exercises/999")
        assert response.status_code == 404

    def test_stats(self, client):
        data = client.get("/exercises/1/stats").json()
        assert data["sets"] == 3
        assert data["reps"] == "6-12"
        assert data["weight"] == "60-100 кг"
        assert data["rest_time"] == "120 сек"
        assert data["difficulty"] == "Легкий"
        assert data["muscle_groups"] == ["Грудь"]

    def test_history(self, client):
        groups = client.get("/exercises/1/history").json()
        assert [g["workout_id"] for g in groups] == ["user1", "2", "1"]
        assert groups[0]["sets"][0]["set_number"] == 1


class TestWorkoutRoutes:
    """Tests for /workouts."""

    def test_list_user_and_all(self, client):
        assert {w["id"] for w in client.get("/workouts").json()} == {"user1", "user2"}
        assert len(client.get("/workouts", params={"all": "true"}).json()) == 5

    def test_get_workout(self, client):
        data = client.get("/workouts/1").json()
        assert data["title"] == "Тренировка груди"
        assert data["origin"] == "catalog"
        assert client.get("/workouts/nope").status_code == 404

    def test_stage_then_create(self, client):
        staged = client.post("/exercises/1/stage", json={"sets": [{"reps": 5, "weight": 90}]})
        assert staged.json()["status"] == "staged"
        assert client.get("/workouts/pending").json()["exercise"]["id"] == "1"

        response = client.post(
            "/workouts",
            json={"title": "Утро", "date": "2024-06-01", "time": "08:00", "gym": "FitnessPro"},
        )
        assert response.status_code == 201
        workout = response.json()
        assert workout["origin"] == "user"
        assert workout["created_by"] == 1
        assert workout["exercises"][0]["exercise_id"] == "1"
        assert workout["exercises"][0]["sets"][0]["weight"] == 90
        assert client.get("/workouts/pending").json()["exercise"] is None

    def test_clear_pending(self, client):
        client.post("/exercises/2/stage")
        assert client.delete("/workouts/pending").status_code == 204
        assert client.get("/workouts/pending").json() == {"exercise": None, "sets": []}

    def test_create_with_exercises_and_friends(self, client):
        response = client.post(
            "/workouts",
            json={
                "title": "Ноги",
                "date": "2024-06-02",
                "time": "19:00",
                "gym": "PowerGym",
                "exercises": [{"exercise_id": "2", "sets": [{"reps": 8, "weight": 120}]}],
                "friend_ids": [101],
            },
        )
        workout = response.json()
        assert workout["participants"][0]["user_id"] == 101
        assert workout["participants"][0]["status"] == "pending"

    def test_create_missing_fields(self, client):
        response = client.post("/workouts", json={"title": "Без даты"})
        assert response.status_code == 422
        assert "gym is required" in response.json()["detail"]

    def test_create_rejects_wrong_types(self, client):
        response = client.post(
            "/workouts",
            json={"title": 5, "date": "2024-06-02", "time": "19:00", "gym": "PowerGym"},
        )
        assert response.status_code == 422
        assert client.get("/workouts").json()[-1]["id"] == "user2"

    def test_stage_rejects_malformed_sets(self, client):
        response = client.post("/exercises/1/stage", json={"sets": [5]})
        assert response.status_code == 422
        assert client.get("/workouts/pending").json()["exercise"] is None

    def test_create_unknown_exercise(self, client):
        response = client.post(
            "/workouts",
            json={
                "title": "x",
                "date": "2024-06-02",
                "time": "19:00",
                "gym": "PowerGym",
                "exercises": [{"exercise_id": "999"}],
            },
        )
        assert response.status_code == 422

    def test_patch(self, client):
        response = client.patch("/workouts/user1", json={"title": "Переименовано", "date": "2025-08-10"})
        assert response.status_code == 200
        assert response.json()["title"] == "Переименовано"
        assert response.json()["date"] == "2025-08-10"

    def test_patch_rejects_protected_fields(self, client):
        assert client.patch("/workouts/user1", json={"origin": "catalog"}).status_code == 422
        assert client.patch("/workouts/nope", json={"title": "x"}).status_code == 404

    def test_reopening_clears_completion_time(self, client):
        data = client.patch("/workouts/user1", json={"completed": False}).json()
        assert data["completed"] is False
        assert data["completed_at"] is None

        data = client.patch("/workouts/user1", json={"completed": True}).json()
        assert data["completed_at"] is not None

    def test_delete_is_idempotent(self, client):
        assert client.delete("/workouts/1").status_code == 204
        assert client.get("/workouts/1").status_code == 404
        assert client.delete("/workouts/1").status_code == 204

    def test_complete_catalog_workout(self, client):
        data = client.post("/workouts/2/complete").json()
        assert data["completed"] is True
        assert data["completed_at"] is not None

    def test_invitation_flow(self, client):
        invited = client.post("/workouts/user1/participants", json={"friend_id": 101})
        assert invited.status_code == 201
        assert invited.json()["status"] == "pending"

        accepted = client.post("/workouts/user1/participants/101", json={"status": "accepted"})
        assert accepted.json()["status"] == "accepted"

        invalid = client.post("/workouts/user1/participants/101", json={"status": "pending"})
        assert invalid.status_code == 422

    def test_invite_unknown_friend(self, client):
        response = client.post("/workouts/user1/participants", json={"friend_id": 555})
        assert response.status_code == 404


class TestProfileRoutes:
    """Tests for the current user and social routes."""

    def test_me_after_startup(self, client):
        data = client.get("/me").json()
        assert data["user"]["id"] == 1
        assert data["user"]["first_name"] == "Тестовый"
        assert data["show_onboarding_modal"] is True

    def test_complete_onboarding(self, client):
        response = client.post("/me/onboarding/complete")
        assert response.json()["show_onboarding_modal"] is False
        assert client.get("/me").json()["user"]["first_login"] is False

    def test_update_me(self, client):
        data = client.patch("/me", json={"main_gym": "PowerGym", "level": "advanced"}).json()
        assert data["main_gym"] == "PowerGym"
        assert data["level"] == "advanced"
        assert client.patch("/me", json={"id": 5}).status_code == 422

    def test_friends(self, client):
        assert [f["id"] for f in client.get("/friends").json()] == [101, 102]

    def test_leaderboard(self, client):
        entries = client.get("/leaderboard").json()
        assert {e["user_id"] for e in entries} == {1, 101, 102}
        assert [e["position"] for e in entries] == [1, 2, 3]

    def test_achievements(self, client):
        assert client.get("/achievements").json()["total_workouts"] == 2
