"""Media API tests."""

import pytest


def image(**overrides) -> dict:
    body = {
        "type": "image",
        "title": "Dashboard Preview",
        "url": "https://images.example.com/dashboard.png",
        "thumbnail_url": "https://images.example.com/dashboard-200.png",
        "dimensions": "1920x1080",
        "uploaded_by": "Admin",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_create_media(client, admin_headers):
    r = await client.post("/api/media", json=image(file_size=2048), headers=admin_headers)
    assert r.status_code == 201
    data = r.json()
    assert isinstance(data["id"], int)
    assert data["title"] == "Dashboard Preview"
    assert data["file_size"] == 2048
    assert "created_at" in data


@pytest.mark.asyncio
async def test_get_media(client, admin_headers):
    r = await client.post("/api/media", json=image(), headers=admin_headers)
    media_id = r.json()["id"]

    r = await client.get(f"/api/media/{media_id}")
    assert r.status_code == 200
    assert r.json()["url"] == "https://images.example.com/dashboard.png"


@pytest.mark.asyncio
async def test_get_media_not_found(client):
    r = await client.get("/api/media/4242")
    assert r.status_code == 404
    assert r.json()["detail"] == "Media not found"


@pytest.mark.asyncio
async def test_list_media_newest_first_and_filtered(client, admin_headers):
    first = (await client.post("/api/media", json=image(), headers=admin_headers)).json()
    video = (
        await client.post(
            "/api/media",
            json=image(type="video", title="Demo", url="https://v.example.com/demo.mp4"),
            headers=admin_headers,
        )
    ).json()

    r = await client.get("/api/media")
    assert [m["id"] for m in r.json()] == [video["id"], first["id"]]

    r = await client.get("/api/media", params={"type": "video"})
    assert [m["id"] for m in r.json()] == [video["id"]]


@pytest.mark.asyncio
async def test_create_media_rejects_unknown_type(client, admin_headers):
    r = await client.post("/api/media", json=image(type="audio"), headers=admin_headers)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_delete_media(client, admin_headers):
    r = await client.post("/api/media", json=image(), headers=admin_headers)
    media_id = r.json()["id"]

    r = await client.delete(f"/api/media/{media_id}", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == {"message": "Media deleted"}

    r = await client.delete(f"/api/media/{media_id}", headers=admin_headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_non_numeric_media_id_is_404(client, admin_headers):
    r = await client.get("/api/media/abc")
    assert r.status_code == 404
    assert r.json()["detail"] == "Media not found"

    r = await client.delete("/api/media/abc", headers=admin_headers)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_media_has_no_update_route(client, admin_headers):
    r = await client.post("/api/media", json=image(), headers=admin_headers)
    media_id = r.json()["id"]

    r = await client.put(f"/api/media/{media_id}", json=image(), headers=admin_headers)
    assert r.status_code == 405


@pytest.mark.asyncio
async def test_media_mutations_require_admin(client, admin_headers, editor_headers):
    r = await client.post("/api/media", json=image())
    assert r.status_code == 401

    r = await client.post("/api/media", json=image(), headers=editor_headers)
    assert r.status_code == 403

    r = await client.post("/api/media", json=image(), headers=admin_headers)
    media_id = r.json()["id"]

    r = await client.delete(f"/api/media/{media_id}")
    assert r.status_code == 401
    r = await client.delete(f"/api/media/{media_id}", headers=editor_headers)
    assert r.status_code == 403

    r = await client.get("/api/media")
    assert len(r.json()) == 1
