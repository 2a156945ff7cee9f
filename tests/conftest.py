"""
Shared test fixtures.

Provides a test app built with create_app(), an authenticated TestClient
and fresh fake repositories wired in through dependency_overrides.

Usage:
    def test_something(client, fake_climbing_repo):
        fake_climbing_repo.seed([...])
        response = client.get("/climbing/performance")
        assert response.status_code == 200
"""

from typing import Any, Callable, Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api import deps
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakeCalendarRepository,
    FakeExerciseLogRepository,
    FakeGoalsRepository,
    FakeProfileRepository,
    FakeWellnessRepository,
    create_climbing_repo,
)

TEST_OWNER = "athlete@example.com"

RepoGetter = Callable[..., Any]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        calendar_timezone="UTC",
        _env_file=None,
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Test app with the current user fixed to TEST_OWNER."""
    application = create_app(settings=test_settings)
    application.dependency_overrides[deps.get_current_user] = lambda: TEST_OWNER
    application.dependency_overrides[deps.get_settings] = lambda: test_settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def override_deps(app: FastAPI) -> Callable[[RepoGetter, Any], Any]:
    """
    Fixture that provides a dependency override helper.

    Usage:
        def test_something(override_deps):
            fake = override_deps(get_climbing_repo, FakeClimbingLogRepository())
    """
    def _override(getter: RepoGetter, implementation: Any) -> Any:
        app.dependency_overrides[getter] = lambda: implementation
        return implementation

    return _override


@pytest.fixture
def fake_climbing_repo(override_deps):
    return override_deps(deps.get_climbing_repo, create_climbing_repo())


@pytest.fixture
def fake_calendar_repo(override_deps):
    return override_deps(deps.get_calendar_repo, FakeCalendarRepository())


@pytest.fixture
def fake_goals_repo(override_deps):
    return override_deps(deps.get_goals_repo, FakeGoalsRepository())


@pytest.fixture
def fake_exercise_repo(override_deps):
    return override_deps(deps.get_exercise_log_repo, FakeExerciseLogRepository())


@pytest.fixture
def fake_wellness_repo(override_deps):
    return override_deps(deps.get_wellness_repo, FakeWellnessRepository())


@pytest.fixture
def fake_profile_repo(override_deps):
    return override_deps(deps.get_profile_repo, FakeProfileRepository())


@pytest.fixture
def app_with_fake_repos(
    fake_climbing_repo,
    fake_calendar_repo,
    fake_goals_repo,
    fake_exercise_repo,
    fake_wellness_repo,
    fake_profile_repo,
) -> Dict[str, Any]:
    """
    Override every repository dependency with a fake.

    Returns a dict with the fake instances for seeding test data.
    """
    return {
        "climbing_repo": fake_climbing_repo,
        "calendar_repo": fake_calendar_repo,
        "goals_repo": fake_goals_repo,
        "exercise_repo": fake_exercise_repo,
        "wellness_repo": fake_wellness_repo,
        "profile_repo": fake_profile_repo,
    }


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
