"""
Tests for world service endpoints
"""

from fastapi.testclient import TestClient

from services.world_service.main import app
from services.world_service.utils.config import WorldConfig, get_world_config

client = TestClient(app)


def test_world_returns_payload():
    """Test the world endpoint answers the default payload as text"""
    response = client.get("/api/World")
    assert response.status_code == 200
    assert response.text == "Hark"
    assert response.headers["content-type"].startswith("text/plain")


def test_world_payload_is_configurable():
    """Test the payload comes from configuration"""
    app.dependency_overrides[get_world_config] = lambda: WorldConfig(world_payload="Earth")
    try:
        response = client.get("/api/World")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.text == "Earth"


def test_world_payload_from_environment(monkeypatch):
    """Test WORLD_PAYLOAD overrides the default"""
    monkeypatch.setenv("WORLD_PAYLOAD", "Mars")
    assert WorldConfig().world_payload == "Mars"


def test_world_rejects_post():
    """Test the endpoint is read-only"""
    response = client.post("/api/World")
    assert response.status_code == 405


def test_health_check():
    """Test basic health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "world-service"
    assert data["status"] == "healthy"


def test_root_endpoint():
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data["service"] == "world-service"
    assert data["status"] == "running"
    assert data["version"] == "1.0.0"


def test_openapi_spec():
    """Test that OpenAPI spec is accessible"""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    assert "/api/World" in response.json()["paths"]
