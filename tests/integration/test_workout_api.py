"""
Integration tests for the workout API.

Tests the full POST /workout endpoint through the FastAPI test client with
the text generator replaced by fakes, so every response contract can be
exercised without calling OpenAI.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_settings, get_text_generator
from backend.settings import Settings
from tests.fakes import DEFAULT_WORKOUT, FailingWorkoutGenerator


@pytest.mark.integration
class TestHealthEndpoint:
    """Test GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "workout-api"}


@pytest.mark.integration
class TestGenerateWorkoutSuccess:
    """Successful generation returns the workout document itself."""

    def test_returns_workout(self, client, generation_request):
        response = client.post("/workout", json=generation_request)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == DEFAULT_WORKOUT["id"]
        assert data["title"] == DEFAULT_WORKOUT["title"]
        assert data["blocks"][0]["type"] == "amrap"
        assert data["blocks"][0]["duration"] == "PT20M"

    def test_response_is_not_wrapped(self, client, generation_request):
        data = client.post("/workout", json=generation_request).json()
        assert "success" not in data
        assert "workout" not in data

    def test_passes_request_to_generator(self, client, fake_generator):
        client.post(
            "/workout",
            json={
                "minutes": 45,
                "target": "upper body",
                "equipment": "dumbbells",
                "notes": "no overhead pressing",
            },
        )

        assert fake_generator.call_count == 1
        request = fake_generator.last_request
        assert request.minutes == 45
        assert request.target == "upper body"
        assert request.equipment == "dumbbells"
        assert request.notes == "no overhead pressing"

    def test_repairs_durations(self, client, fake_generator, generation_request, every_block):
        block = every_block["amrap"]
        block["duration"] = "12:00"
        fake_generator.set_response({"id": "w1", "title": "Repaired", "blocks": [block]})

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 200
        assert response.json()["blocks"][0]["duration"] == "PT12M"

    def test_all_block_kinds(self, client, fake_generator, generation_request, every_block):
        fake_generator.set_response(
            {"id": "w1", "title": "Everything", "blocks": list(every_block.values())}
        )

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 200
        types = [block["type"] for block in response.json()["blocks"]]
        assert types == ["amrap", "for_time", "emom", "sets", "superset"]


@pytest.mark.integration
class TestGenerateWorkoutFailures:
    """Each pipeline failure maps to its own status and body."""

    def test_upstream_error(self, app, generation_request):
        app.dependency_overrides[get_text_generator] = lambda: FailingWorkoutGenerator(
            "OpenAI error 429: Rate limit exceeded", 429
        )
        try:
            response = TestClient(app).post("/workout", json=generation_request)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 502
        assert response.json() == {
            "error": "Upstream model error",
            "detail": "OpenAI error 429: Rate limit exceeded",
        }

    def test_missing_api_key(self, app, generation_request):
        """Without an override the real client reports the missing key."""
        app.dependency_overrides[get_settings] = lambda: Settings(
            environment="test", openai_api_key=None, _env_file=None
        )
        try:
            response = TestClient(app).post("/workout", json=generation_request)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 502
        data = response.json()
        assert data["error"] == "Upstream model error"
        assert "OPENAI_API_KEY" in data["detail"]

    def test_malformed_output(self, client, fake_generator, generation_request):
        fake_generator.set_response("Here is your workout: {")

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 502
        assert response.json() == {"error": "Model did not return valid JSON"}

    def test_schema_violation(self, client, fake_generator, generation_request, every_block):
        block = every_block["amrap"]
        del block["duration"]
        fake_generator.set_response({"id": "w1", "title": "Broken", "blocks": [block]})

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "Schema validation failed"
        assert len(data["issues"]) == 1
        issue = data["issues"][0]
        assert issue["path"] == "blocks.0.duration"
        assert issue["code"] == "missing"
        assert issue["message"]


@pytest.mark.integration
class TestGenerateWorkoutInput:
    """Invalid input is rejected before the generator is called."""

    @pytest.mark.parametrize(
        "overrides",
        [
            {"minutes": 4},
            {"minutes": 121},
            {"minutes": "twenty"},
            {"target": ""},
            {"target": "   "},
            {"equipment": ""},
            {"notes": "x" * 501},
        ],
    )
    def test_invalid_request(self, client, fake_generator, generation_request, overrides):
        generation_request.update(overrides)

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 422
        assert "detail" in response.json()
        assert fake_generator.call_count == 0

    @pytest.mark.parametrize("missing", ["minutes", "target", "equipment"])
    def test_missing_field(self, client, fake_generator, generation_request, missing):
        del generation_request[missing]

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 422
        assert fake_generator.call_count == 0

    @pytest.mark.parametrize("minutes", [5, 120])
    def test_minutes_bounds_inclusive(self, client, generation_request, minutes):
        generation_request["minutes"] = minutes

        response = client.post("/workout", json=generation_request)

        assert response.status_code == 200
