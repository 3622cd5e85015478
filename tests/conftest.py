"""
Pytest fixtures for workout-api tests.
"""

import copy
import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_text_generator
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import DEFAULT_WORKOUT, FakeWorkoutGenerator


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set mock environment variables for tests."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def fake_generator() -> FakeWorkoutGenerator:
    """Fake text generator returning a valid workout by default."""
    return FakeWorkoutGenerator()


@pytest.fixture
def client(app, fake_generator) -> Generator[TestClient, None, None]:
    """
    Per-test FastAPI TestClient with the fake text generator wired in.
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_text_generator] = lambda: fake_generator
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def generation_request() -> Dict[str, Any]:
    """Valid payload for POST /workout."""
    return {"minutes": 20, "target": "full body", "equipment": "none"}


@pytest.fixture
def valid_workout() -> Dict[str, Any]:
    """A valid workout document (private copy per test)."""
    return copy.deepcopy(DEFAULT_WORKOUT)


@pytest.fixture
def movement() -> Dict[str, Any]:
    """A minimal movement."""
    return {"name": "Air Squat", "reps": 15}


@pytest.fixture
def every_block(movement) -> Dict[str, Dict[str, Any]]:
    """One valid block per variant, keyed by type."""
    return {
        "amrap": {
            "type": "amrap",
            "title": "AMRAP 12",
            "duration": "PT12M",
            "sequence": [movement],
        },
        "for_time": {
            "type": "for_time",
            "title": "Chipper",
            "rounds": 1,
            "time_cap": "PT15M",
            "sequence": [movement, {"name": "Row", "distance": 500, "distance_unit": "m"}],
        },
        "emom": {
            "type": "emom",
            "title": "EMOM 10",
            "minutes": 10,
            "slots": [
                {"minute_mod": 1, "work": [{"name": "Kettlebell Swing", "reps": 12}]},
                {"minute_mod": 2, "work": [{"name": "Burpee", "reps": 8}]},
            ],
        },
        "sets": {
            "type": "sets",
            "title": "Back Squat",
            "exercise": "Back Squat",
            "scheme": [
                {
                    "sets": 5,
                    "reps": 5,
                    "load": {"value": 75, "percent_of": "1RM"},
                    "rpe": 8,
                    "rest": "PT2M",
                }
            ],
            "score": {"type": "load"},
        },
        "superset": {
            "type": "superset",
            "title": "Pull / Push",
            "sets": 3,
            "rest_between_sets": "PT1M",
            "pair": [
                {"name": "Pull-up", "reps": 8},
                {"name": "Push-up", "reps": 12},
            ],
        },
    }
