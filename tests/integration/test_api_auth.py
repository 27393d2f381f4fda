"""
Integration tests for the /v1/login endpoint.
Uses TestClient against a fresh in-memory store per test.
"""
import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from users_api.di.container import reset_container


@pytest.fixture
def client():
    from users_api.main import app

    reset_container()
    with TestClient(app) as c:
        c.post("/v1/users", json={"username": "alice", "email": "a@x.com", "password": "abc123"})
        yield c


class TestLoginAPI:
    """Tests for GET/POST /v1/login"""

    def test_login_with_get_body(self, client):
        response = client.request(
            "GET", "/v1/login", json={"username": "alice", "password": "abc123"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "User logged in"
        assert data["user"] == {"id": 1, "username": "alice", "email": "a@x.com"}
        timestamp, _, random_part = data["token"].partition("-")
        assert timestamp.isdigit() and random_part.isdigit()

    def test_login_with_post(self, client):
        response = client.post("/v1/login", json={"username": "alice", "password": "abc123"})
        assert response.status_code == 200
        assert "password" not in response.json()["user"]

    def test_wrong_password_looks_like_unknown_user(self, client):
        wrong_password = client.post("/v1/login", json={"username": "alice", "password": "abc999"})
        unknown_user = client.post("/v1/login", json={"username": "nobody", "password": "abc123"})
        assert wrong_password.status_code == 404
        assert unknown_user.status_code == 404
        assert wrong_password.json() == unknown_user.json() == {"message": "User not found"}

    def test_missing_fields(self, client):
        response = client.request("GET", "/v1/login")
        assert response.status_code == 400
        assert response.json() == {"message": "Must have valid username and password"}

    def test_email_is_not_a_login_field(self, client):
        response = client.post("/v1/login", json={"email": "a@x.com", "password": "abc123"})
        assert response.status_code == 400

    def test_invalid_password_format(self, client):
        response = client.post("/v1/login", json={"username": "alice", "password": "ab#123"})
        assert response.status_code == 400
        assert response.json()["message"].startswith("Password must be")

    @pytest.mark.parametrize("username", ["  alice  ", " alice", "alice "])
    def test_padded_username_is_not_found(self, client, username):
        response = client.post("/v1/login", json={"username": username, "password": "abc123"})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_short_username_padded_to_length_is_looked_up(self, client):
        response = client.post("/v1/login", json={"username": "  ab  ", "password": "abc123"})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}
