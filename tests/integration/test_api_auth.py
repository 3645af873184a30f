"""
Integration tests for auth API endpoints.
Uses TestClient with the in-memory store (no real DB).
"""
import pytest

from openchat.core.security import JwtTokenService

pytestmark = pytest.mark.integration


def _register(client, username="johndoe", password="testpassword"):
    return client.post(
        "/api/v1/auth/register",
        json={"username": username, "password": password},
    )


class TestAuthAPI:
    """Tests for /api/v1/auth endpoints"""

    def test_register_success(self, client, container):
        response = _register(client, "testuser")
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "testuser"
        assert isinstance(data["token"], str)

        identity = container.get(JwtTokenService).verify(data["token"])
        assert identity.username == "testuser"

    def test_register_duplicate_returns_400(self, client):
        assert _register(client, "johndoe").status_code == 200

        response = _register(client, "johndoe", "different")
        assert response.status_code == 400
        assert response.json()["message"] == "Username already taken"

    def test_register_empty_username_rejected(self, client):
        response = _register(client, "", "testpassword")
        assert response.status_code == 422

    def test_login_success(self, client):
        _register(client, "janedoe", "s3cret")
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "janedoe", "password": "s3cret"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "janedoe"
        assert data["token_type"] == "bearer"

    def test_login_unknown_user_returns_401(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "testuser", "password": "testpassword"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "User doesn't exist"

    def test_login_wrong_password_returns_401(self, client):
        _register(client, "janedoe", "s3cret")
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "janedoe", "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Wrong password"

    def test_me_with_token(self, client):
        token = _register(client, "johndoe").json()["token"]
        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "johndoe"}

    def test_me_with_bad_token_returns_401(self, client):
        response = client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not.a.token"})
        assert response.status_code == 401


def test_greeting(client):
    response = client.get("/api/v1/greeting")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to OPENCHAT!"}
