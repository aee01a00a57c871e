"""Auth API tests — login and current user.

Learn: Tests cover:
1. Login → signed token + user record (never the password hash)
2. Wrong password / unknown email → 401 with the same message
3. The minted token authorizes admin routes and /auth/user
4. Tokens for users that no longer exist
"""

import pytest

from tredumo.auth.jwt import create_access_token, verify_credential


# ═══════════════════════════════════════════════════════════
# Login
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_login_success(client, admin_user):
    r = await client.post(
        "/api/auth/login",
        json={"email": "admin@tredumo.com", "password": "admin-password-123"},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["user"]["username"] == "admin"
    assert data["user"]["role"] == "admin"
    assert "password" not in data["user"]

    identity = verify_credential(data["token"])
    assert identity.id == admin_user.id
    assert identity.role == "admin"


@pytest.mark.asyncio
async def test_login_wrong_password(client, admin_user):
    r = await client.post(
        "/api/auth/login",
        json={"email": "admin@tredumo.com", "password": "wrong"},
    )
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_nonexistent_user(client):
    r = await client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_token_authorizes_admin_routes(client, admin_user):
    r = await client.post(
        "/api/auth/login",
        json={"email": "admin@tredumo.com", "password": "admin-password-123"},
    )
    token = r.json()["token"]

    r = await client.post(
        "/api/content",
        json={
            "type": "page", "title": "Home", "content": "Welcome",
            "slug": "home", "author": "Admin",
        },
        headers={"x-auth-token": token},
    )
    assert r.status_code == 201


# ═══════════════════════════════════════════════════════════
# Current user
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_current_user(client, admin_user):
    token = create_access_token(admin_user.id, admin_user.role)
    r = await client.get("/api/auth/user", headers={"x-auth-token": token})
    assert r.status_code == 200
    assert r.json()["email"] == "admin@tredumo.com"
    assert "password" not in r.json()


@pytest.mark.asyncio
async def test_current_user_without_token(client):
    r = await client.get("/api/auth/user")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_current_user_deleted_account(client):
    """A valid token for a user that doesn't exist (anymore) → 404."""
    token = create_access_token(999, "viewer")
    r = await client.get("/api/auth/user", headers={"x-auth-token": token})
    assert r.status_code == 404
