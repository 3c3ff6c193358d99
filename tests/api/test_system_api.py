"""HTTP tests for system routes, unknown routes and cross-cutting behaviour."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apihub.core.container import get_list_categories_handler
from apihub.main import app


@pytest.mark.api
class TestSystemRoutes:
    """Root, health and config."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "APIHub"
        assert response.json()["status"] == "operational"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_v1_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"]

    def test_config_hidden_outside_development(self, client):
        assert client.get("/config").status_code == 403


@pytest.mark.api
class TestCrossCutting:
    """Problem details and trace ids."""

    def test_unknown_route_is_problem_details(self, client):
        response = client.get("/api/v1/nothing-here", headers={"X-Trace-Id": "trace-404"})

        body = response.json()
        assert response.status_code == 404
        assert body["type"] == "https://apihub.test/errors/not-found"
        assert body["status"] == 404
        assert body["instance"] == "/api/v1/nothing-here"
        assert body["trace_id"] == "trace-404"

    def test_trace_id_echoed(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "abc-123"})

        assert response.headers["X-Trace-Id"] == "abc-123"

    def test_trace_id_generated(self, client):
        response = client.get("/health")

        assert len(response.headers["X-Trace-Id"]) == 36

    def test_unexpected_exception_is_generic_500(self):
        handler = AsyncMock()
        handler.handle.side_effect = RuntimeError("database exploded")
        app.dependency_overrides[get_list_categories_handler] = lambda: handler
        try:
            response = TestClient(app, raise_server_exceptions=False).get(
                "/api/v1/categories"
            )
        finally:
            app.dependency_overrides.clear()

        body = response.json()
        assert response.status_code == 500
        assert body["title"] == "Internal Server Error"
        assert "database exploded" not in body["detail"]
