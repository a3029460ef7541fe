"""Tests for login / logout / current-user endpoints and the session cookie."""

import pytest
from httpx import AsyncClient

from app.core.config import settings
from app.core.i18n import translate
from app.core.security import sign_session_token
from app.core.sessions import session_manager

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.mark.asyncio
async def test_login_returns_identity_and_sets_cookie(async_client: AsyncClient, admin_user):
    """POST /auth/login with valid credentials returns the identity."""
    resp = await async_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data == {"id": admin_user.id, "username": ADMIN_USERNAME, "isAdmin": True}
    assert settings.SESSION_COOKIE_NAME in resp.cookies
    assert len(session_manager) == 1


@pytest.mark.asyncio
async def test_session_cookie_attributes(async_client: AsyncClient, admin_user):
    """The session cookie is HttpOnly, SameSite=strict and lives for the TTL."""
    resp = await async_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    set_cookie = resp.headers.get("set-cookie")
    assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
    assert "HttpOnly" in set_cookie
    assert "samesite=strict" in set_cookie.lower()
    assert f"Max-Age={8 * 60 * 60}" in set_cookie
    # Tests run in development mode
    assert "Secure" not in set_cookie


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_user_look_identical(
    async_client: AsyncClient, admin_user
):
    """Unknown usernames and wrong passwords get the same 401 body."""
    wrong_pw = await async_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": "not-the-password"}
    )
    unknown = await async_client.post(
        "/api/auth/login", json={"username": "nobody-here", "password": ADMIN_PASSWORD}
    )
    assert wrong_pw.status_code == 401
    assert unknown.status_code == 401
    assert wrong_pw.json() == unknown.json()
    assert wrong_pw.json()["message"] == translate("auth.invalid_credentials", "fa")
    assert settings.SESSION_COOKIE_NAME not in wrong_pw.cookies
    assert len(session_manager) == 0


@pytest.mark.asyncio
async def test_username_is_case_sensitive(async_client: AsyncClient, admin_user):
    resp = await async_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME.upper(), "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_login_validation(async_client: AsyncClient):
    """Too-short usernames / passwords are rejected with 400 before any lookup."""
    resp = await async_client.post("/api/auth/login", json={"username": "ab", "password": "secret1"})
    assert resp.status_code == 400
    assert "username" in resp.json()["fields"]

    resp = await async_client.post("/api/auth/login", json={"username": "admin", "password": "123"})
    assert resp.status_code == 400

    resp = await async_client.post("/api/auth/login", json={"username": "admin"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_session_round_trip(admin_client: AsyncClient, admin_user):
    """GET /auth/user with the issued cookie returns the same identity."""
    resp = await admin_client.get("/api/auth/user")
    assert resp.status_code == 200
    assert resp.json() == {"id": admin_user.id, "username": ADMIN_USERNAME, "isAdmin": True}


@pytest.mark.asyncio
async def test_current_user_without_session(async_client: AsyncClient):
    resp = await async_client.get("/api/auth/user")
    assert resp.status_code == 401
    assert resp.json()["message"] == translate("auth.not_logged_in", "fa")
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_logout_destroys_server_side_session(admin_client: AsyncClient):
    """After logout, replaying the old cookie resolves to 401."""
    old_cookie = admin_client.cookies.get(settings.SESSION_COOKIE_NAME)
    assert old_cookie

    resp = await admin_client.post("/api/auth/logout")
    assert resp.status_code == 200
    assert resp.json()["message"] == translate("auth.logged_out", "fa")
    assert len(session_manager) == 0

    admin_client.cookies.set(settings.SESSION_COOKIE_NAME, old_cookie)
    resp = await admin_client.get("/api/auth/user")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_logout_without_session_is_harmless(async_client: AsyncClient):
    resp = await async_client.post("/api/auth/logout", headers={"Accept-Language": "en"})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Logged out successfully"


@pytest.mark.asyncio
async def test_relogin_replaces_previous_session(admin_client: AsyncClient):
    """Logging in again discards the session the client arrived with."""
    first = admin_client.cookies.get(settings.SESSION_COOKIE_NAME)
    resp = await admin_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200
    second = admin_client.cookies.get(settings.SESSION_COOKIE_NAME)
    assert first != second
    assert len(session_manager) == 1


@pytest.mark.asyncio
async def test_tampered_cookie_is_rejected(async_client: AsyncClient, admin_user):
    """A raw (unsigned) token or a forged signature does not authenticate."""
    from app.core.credentials import Identity

    token = session_manager.create(Identity(id=admin_user.id, username="admin", is_admin=True))

    async_client.cookies.set(settings.SESSION_COOKIE_NAME, token)
    assert (await async_client.get("/api/auth/user")).status_code == 401

    forged = sign_session_token(token)[:-4] + "AAAA"
    async_client.cookies.set(settings.SESSION_COOKIE_NAME, forged)
    assert (await async_client.get("/api/auth/user")).status_code == 401

    async_client.cookies.set(settings.SESSION_COOKIE_NAME, sign_session_token(token))
    assert (await async_client.get("/api/auth/user")).status_code == 200


@pytest.mark.asyncio
async def test_expired_session_is_treated_as_absent(admin_client: AsyncClient, monkeypatch):
    """A session resolved after its TTL behaves as if it was never issued."""
    from datetime import timedelta

    real_clock = session_manager._clock
    monkeypatch.setattr(
        session_manager, "_clock", lambda: real_clock() + session_manager.ttl + timedelta(seconds=1)
    )
    resp = await admin_client.get("/api/auth/user")
    assert resp.status_code == 401
    assert len(session_manager) == 0


@pytest.mark.asyncio
async def test_login_rate_limit(async_client: AsyncClient, admin_user):
    """The sixth login attempt inside a minute from one client gets 429."""
    for _ in range(5):
        resp = await async_client.post(
            "/api/auth/login", json={"username": ADMIN_USERNAME, "password": "wrong-pass"}
        )
        assert resp.status_code == 401
    resp = await async_client.post(
        "/api/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
        headers={"Accept-Language": "en"},
    )
    assert resp.status_code == 429
    assert resp.json()["message"] == translate("auth.rate_limited", "en")


@pytest.mark.asyncio
async def test_failed_relogin_keeps_current_session(admin_client: AsyncClient):
    """A mistyped password does not sign out the session the client already holds."""
    resp = await admin_client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": "mistyped-pw"}
    )
    assert resp.status_code == 401
    assert len(session_manager) == 1

    resp = await admin_client.get("/api/auth/user")
    assert resp.status_code == 200
    assert resp.json()["username"] == ADMIN_USERNAME
