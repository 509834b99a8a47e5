"""
tests/integration/test_health_routes.py

Integration tests for routes/health_routes.py.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from app import app


def test_health_endpoint_returns_ok():
    """GET /health must return {"status": "ok"} with HTTP 200."""
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
