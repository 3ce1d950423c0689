"""Tests for admin token issuing and the admin dependency.

Run with: pytest tests/test_auth.py -v
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from museum_api.auth import security
from museum_api.config import settings


@pytest.fixture
def admin_password(monkeypatch) -> str:
    password = "correct horse battery staple"
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "curator")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", security.get_password_hash(password))
    return password


class TestSecurity:
    """Tests for token helpers."""

    def test_token_round_trip_keeps_role(self):
        token = security.create_access_token({"sub": "curator", "role": "admin"})

        token_data = security.decode_access_token(token)

        assert token_data.subject == "curator"
        assert token_data.role == "admin"

    def test_expired_token_is_rejected(self):
        token = security.create_access_token({"sub": "curator"}, expires_delta=timedelta(minutes=-1))

        assert security.decode_access_token(token) is None

    def test_garbage_token_is_rejected(self):
        assert security.decode_access_token("not.a.token") is None

    def test_generated_hash_verifies_for_admin_setting(self):
        hashed = security.get_password_hash("gallery-key")

        assert hashed != "gallery-key"
        assert security.verify_password("gallery-key", hashed)
        assert not security.verify_password("wrong", hashed)

    def test_empty_hash_never_verifies(self):
        assert security.verify_password("anything", "") is False


class TestTokenEndpoint:
    """Tests for POST /v1/auth/token"""

    async def test_login_issues_admin_token(self, client: AsyncClient, admin_password):
        response = await client.post(
            "/v1/auth/token", data={"username": "curator", "password": admin_password}
        )

        assert response.status_code == 200
        token = response.json()["access_token"]
        assert security.decode_access_token(token).role == security.ADMIN_ROLE

    async def test_wrong_password_returns_401(self, client: AsyncClient, admin_password):
        response = await client.post(
            "/v1/auth/token", data={"username": "curator", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Incorrect username or password"

    async def test_issued_token_opens_admin_routes(self, client: AsyncClient, admin_password):
        login = await client.post(
            "/v1/auth/token", data={"username": "curator", "password": admin_password}
        )
        headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

        response = await client.post(
            "/v1/admin/specialevents",
            json={"eventName": "Members Preview", "eventDescription": "", "price": "0.00"},
            headers=headers,
        )

        assert response.status_code == 201

    async def test_invalid_bearer_token_returns_401(self, client: AsyncClient):
        response = await client.delete(
            "/v1/admin/specialevents/00000000-0000-0000-0000-000000000000",
            headers={"Authorization": "Bearer nonsense"},
        )

        assert response.status_code == 401
