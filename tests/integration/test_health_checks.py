"""
Integration tests de los endpoints de health check.

- /health - Liveness básico
- /health/ready - Readiness (configuración completa y almacén accesible)
"""

import pytest
from fastapi.testclient import TestClient

from app.api.routers import health
from app.domain.errors import ConfigurationError


class TestHealthChecks:
    def test_basic_health_endpoint(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "property-reservations-api"}

    def test_ready_when_store_answers(self, client: TestClient, container, monkeypatch):
        monkeypatch.setattr(health, "get_container", lambda: container)

        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_not_ready_when_configuration_is_missing(self, client: TestClient, monkeypatch):
        def misconfigured():
            raise ConfigurationError(["DATABASE_URL"])

        monkeypatch.setattr(health, "get_container", misconfigured)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["configuration"] == "missing settings"

    def test_not_ready_when_store_is_down(self, client: TestClient, container, monkeypatch):
        async def broken_ping():
            raise ConnectionError("connection refused")

        monkeypatch.setattr(container.reservation_repo, "ping", broken_ping)
        monkeypatch.setattr(health, "get_container", lambda: container)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["checks"]["database"] == "Database connection failed"


@pytest.mark.parametrize("path", ["/health", "/health/ready"])
def test_health_endpoints_do_not_require_api_prefix(client: TestClient, path, container, monkeypatch):
    monkeypatch.setattr(health, "get_container", lambda: container)
    assert client.get(path).status_code == 200
