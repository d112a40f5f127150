"""
Tests for authentication endpoints.
"""
from board_api.auth import create_access_token, create_tokens

PASSWORD = "testpassword123"


class TestAuthEndpoints:
    """Test auth endpoints."""

    def test_register_user(self, client):
        """Test member registration."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "newuser@example.com",
                "password": "securepassword123",
                "name": "newbie",
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "newuser@example.com"
        assert data["name"] == "newbie"
        assert "id" in data

    def test_register_duplicate_email(self, client, writer):
        """Test registration with existing email fails."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "writer@example.com",
                "password": "anotherpassword",
                "name": "someone-else",
            },
        )
        assert response.status_code == 400
        assert "already registered" in response.json()["error"]

    def test_register_duplicate_name(self, client, writer):
        """Test registration with a taken name fails."""
        response = client.post(
            "/api/auth/register",
            json={
                "email": "fresh@example.com",
                "password": "anotherpassword",
                "name": "writer",
            },
        )
        assert response.status_code == 400
        assert response.json()["ok"] is False

    def test_login_success(self, client, writer):
        """Test successful login."""
        response = client.post(
            "/api/auth/login/json",
            json={"email": "writer@example.com", "password": PASSWORD},
        )
        assert response.status_code == 200
        data = response.json()
        assert "access_token" in data
        assert "refresh_token" in data
        assert data["token_type"] == "bearer"

    def test_login_form(self, client, writer):
        """Test OAuth2 form login."""
        response = client.post(
            "/api/auth/login",
            data={"username": "writer@example.com", "password": PASSWORD},
        )
        assert response.status_code == 200
        assert "access_token" in response.json()

    def test_login_wrong_password(self, client, writer):
        """Test login with wrong password fails."""
        response = client.post(
            "/api/auth/login/json",
            json={"email": "writer@example.com", "password": "wrongpassword"},
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == "HTTP_401"

    def test_login_nonexistent_user(self, client):
        """Test login with non-existent user fails."""
        response = client.post(
            "/api/auth/login/json",
            json={"email": "nobody@example.com", "password": "anypassword"},
        )
        assert response.status_code == 401

    def test_get_current_user(self, client, writer, writer_headers):
        """Test getting current member info."""
        response = client.get("/api/auth/me", headers=writer_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == writer.email
        assert data["id"] == writer.id
        assert data["name"] == "writer"

    def test_get_current_user_unauthenticated(self, client):
        """Test getting current member without auth fails."""
        response = client.get("/api/auth/me")
        assert response.status_code == 401

    def test_refresh_token_cannot_be_used_as_access_token(self, client, writer):
        """Test that a refresh token is rejected on protected routes."""
        _, refresh_token = create_tokens(writer.id)
        response = client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {refresh_token}"},
        )
        assert response.status_code == 401

    def test_token_for_inactive_user_rejected(self, client, writer, db):
        """Test that deactivated members are treated as anonymous."""
        writer.is_active = False
        db.commit()
        token = create_access_token({"sub": str(writer.id)})
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_refresh_token(self, client, writer):
        """Test token refresh."""
        login_response = client.post(
            "/api/auth/login/json",
            json={"email": "writer@example.com", "password": PASSWORD},
        )
        refresh_token = login_response.json()["refresh_token"]

        response = client.post(
            "/api/auth/refresh",
            json={"refresh_token": refresh_token},
        )
        assert response.status_code == 200
        data = response.json()
        assert "access_token" in data
        assert "refresh_token" in data
