"""Health and dashboard stats endpoints."""

import pytest


@pytest.mark.asyncio
async def test_health_returns_ok(client):
    """Health endpoint should return server status and version."""
    r = await client.get("/api/health")
    assert r.status_code == 200
    data = r.json()
    assert data["server"] == "ok"
    assert "version" in data
    assert data["redis"].startswith("unavailable")


@pytest.mark.asyncio
async def test_stats_counts_by_kind(client, admin_headers):
    r = await client.get("/api/stats")
    assert r.json() == {"pages": 0, "blog_posts": 0, "testimonials": 0, "media": 0}

    await client.post(
        "/api/content",
        json={"type": "page", "title": "Home", "content": "Hi", "slug": "home", "author": "A"},
        headers=admin_headers,
    )
    await client.post(
        "/api/content",
        json={"type": "blog", "title": "Post", "content": "Hi", "author": "A", "tags": ["t"]},
        headers=admin_headers,
    )
    await client.post(
        "/api/media",
        json={"type": "document", "title": "Brochure", "url": "/files/b.pdf", "uploaded_by": "A"},
        headers=admin_headers,
    )

    r = await client.get("/api/stats")
    assert r.status_code == 200
    assert r.json() == {"pages": 1, "blog_posts": 1, "testimonials": 0, "media": 1}
