"""Test main application."""


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_endpoint(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Ponsectors"


def test_request_id_header(client):
    response = client.get("/health", headers={"X-Request-ID": "0f3c5a9e8b7d4c2a9e1f0b3c5d7e9a1b"})
    assert response.headers["X-Request-ID"] == "0f3c5a9e8b7d4c2a9e1f0b3c5d7e9a1b"
