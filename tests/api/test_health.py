import pytest
from fastapi.testclient import TestClient
from backend.main import create_app

@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)

def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy"}

def test_health_check_has_correlation_header(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "health-1"})
    assert response.headers["X-Correlation-ID"] == "health-1"

def test_health_check_generates_correlation_id(client):
    response = client.get("/api/v1/health")
    assert len(response.headers["X-Correlation-ID"]) == 36
