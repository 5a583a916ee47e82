"""Shared fixtures for all tests."""

from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def mock_env_clear(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear Hop-related environment variables for testing.

    This ensures tests don't accidentally use real credentials from the environment.
    """
    for var in ("HOP_TOKEN", "HOP_API_URL"):
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def bearer_token() -> str:
    """Mock interactive session token."""
    return "bearer_test123456789"


@pytest.fixture
def pat_token() -> str:
    """Mock personal access token."""
    return "pat_test123456789"


@pytest.fixture
def secret_key() -> str:
    """Mock project secret key."""
    return "ptk_test123456789"


@pytest.fixture
def team_id() -> str:
    """Mock team ID for testing."""
    return "team_test123456789"


@pytest.fixture
def project_id() -> str:
    """Mock project ID for testing."""
    return "project_test123456789"


@pytest.fixture
def deployment_payload() -> dict:
    """A deployment as returned by the API, including a field the SDK does not model."""
    return {
        "id": "deployment_abc123",
        "name": "my-app",
        "container_count": 2,
        "created_at": "2022-06-01T12:00:00.000Z",
        "target_container_count": 2,
        "config": {
            "name": "my-app",
            "type": "persistent",
            "version": "2022-05-17",
            "container_strategy": "manual",
            "image": {"name": "registry.hop.io/acme/my-app"},
            "env": {"PORT": "8080"},
            "resources": {"vcpu": 0.5, "ram": "128mb"},
            "restart_policy": "on-failure",
        },
    }


@pytest.fixture
def deployment_config() -> dict:
    """Deployment config suitable for create_deployment."""
    return {
        "name": "my-app",
        "type": "persistent",
        "version": "2022-05-17",
        "container_strategy": "manual",
        "image": {"name": "registry.hop.io/acme/my-app"},
        "env": {"PORT": "8080"},
        "resources": {"vcpu": 0.5, "ram": "128mb"},
        "restart_policy": "on-failure",
    }

