"""Tests for health check endpoints."""

from unittest.mock import MagicMock

import pytest

from esg_api.config import Settings
from esg_api.dependencies import get_settings
from esg_api.health import check_auth_config, check_database
from esg_api.main import app


@pytest.fixture
def configured_client(client, settings):
    """Client whose settings carry a production-grade signing key."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield client
    app.dependency_overrides.pop(get_settings, None)


class TestBasicHealthCheck:
    def test_health_endpoint(self, client):
        """Health check returns status, service name and version."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": "esg-sustainability-api",
            "version": "1.0.0",
        }

    def test_liveness(self, client):
        assert client.get("/health/live").json() == {"alive": True}

    def test_readiness(self, client):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json() == {"ready": True}


class TestDetailedHealthCheck:
    def test_all_checks_healthy(self, configured_client):
        data = configured_client.get("/health/detailed").json()

        assert data["status"] == "healthy"
        assert data["checks"]["database"]["healthy"] is True
        assert data["checks"]["auth"]["healthy"] is True

    def test_default_secret_degrades(self, client):
        """The shipped development key is reported as unhealthy."""
        app.dependency_overrides[get_settings] = lambda: Settings()
        try:
            data = client.get("/health/detailed").json()
        finally:
            app.dependency_overrides.pop(get_settings, None)

        assert data["status"] == "degraded"
        assert data["checks"]["auth"]["healthy"] is False


class TestCheckFunctions:
    def test_check_database_failure(self):
        db = MagicMock()
        db.execute.side_effect = RuntimeError("disk I/O error")

        result = check_database(db)

        assert result["healthy"] is False
        assert "disk I/O error" in result["message"]

    @pytest.mark.parametrize("secret,healthy", [
        ("", False),
        ("change-me-but-long-enough-to-pass-the-length-check", False),
        ("short-secret", False),
        ("x" * 32, True),
    ])
    def test_check_auth_config(self, secret, healthy):
        assert check_auth_config(Settings(jwt_secret_key=secret))["healthy"] is healthy

    def test_readiness_fails_without_database(self, client):
        from esg_api.database import get_db

        def broken_db():
            db = MagicMock()
            db.execute.side_effect = RuntimeError("unreachable")
            yield db

        app.dependency_overrides[get_db] = broken_db
        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["message"] == "Database unavailable"
        assert response.json()["statusCode"] == 503
