"""Tests for middleware — security headers, request IDs, rate limiting.

Learn: Redis isn't running in tests, so the rate-limit tests swap a tiny
in-memory stand-in into the redis pool module.
"""

import pytest

from tredumo.db import redis as redis_pool


class CountingRedis:
    """Implements just the two commands the rate limiter uses."""

    def __init__(self):
        self.counts: dict[str, int] = {}

    async def incr(self, key: str) -> int:
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]

    async def expire(self, key: str, seconds: int) -> bool:
        return True


@pytest.mark.asyncio
async def test_security_headers(client):
    r = await client.get("/api/content")
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["Referrer-Policy"] == "strict-origin-when-cross-origin"
    assert "Strict-Transport-Security" not in r.headers


@pytest.mark.asyncio
async def test_auth_responses_not_cacheable(client):
    r = await client.post("/api/auth/login", json={"email": "a@b.c", "password": "x"})
    assert r.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_request_id_generated(client):
    r1 = await client.get("/api/content")
    r2 = await client.get("/api/content")
    assert r1.headers["X-Request-ID"] != r2.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_request_id_propagated(client):
    r = await client.get("/api/content", headers={"X-Request-ID": "trace-123"})
    assert r.headers["X-Request-ID"] == "trace-123"


@pytest.mark.asyncio
async def test_rate_limit_skipped_without_redis(client):
    r = await client.get("/api/content")
    assert "X-RateLimit-Limit" not in r.headers


@pytest.mark.asyncio
async def test_login_rate_limited(client, monkeypatch):
    from tredumo.config import settings

    monkeypatch.setattr(redis_pool, "_redis", CountingRedis())
    body = {"email": "nobody@example.com", "password": "guess"}

    for _ in range(settings.rate_limit_auth_rpm):
        r = await client.post("/api/auth/login", json=body)
        assert r.status_code == 401

    r = await client.post("/api/auth/login", json=body)
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "60"

    # Other routes are counted separately, with a higher limit
    r = await client.get("/api/content")
    assert r.status_code == 200
    assert r.headers["X-RateLimit-Limit"] == str(settings.rate_limit_rpm)
