"""
tests/api/test_health.py

Smoke tests for the /health endpoint.

These are intentionally minimal — they verify that:
  1. The app builds from explicit settings without errors.
  2. The health route is reachable and returns the expected shape.
"""

from fastapi.testclient import TestClient


class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_body_is_healthy(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.json() == {"status": "healthy"}

    def test_health_content_type_is_json(self, client: TestClient) -> None:
        response = client.get("/health")
        assert "application/json" in response.headers["content-type"]
