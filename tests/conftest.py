import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.core.store import reset_store
from bookstore_api.app.main import create_app


@pytest.fixture(autouse=True)
def store():
    """Every test starts from the seed data with nobody logged in."""
    return reset_store()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def login(client):
    """Log in over HTTP and return the Authorization header for that user."""

    def _login(email="user1@example.com", password="password123"):
        response = client.post("/api/v1/users/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _login
