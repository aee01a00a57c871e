"""Tredumo CLI — run the server, manage accounts, inspect content.

Usage:
    tredumo serve --reload                      # Run the API with uvicorn
    tredumo init-db                             # Create tables (dev; prod uses alembic)
    tredumo init-db --seed                      # ...plus starter pages, posts, media
    tredumo create-user admin admin@x.com --role admin
    tredumo token 1 --role admin                # Mint a credential for scripts
    tredumo content --type blog                 # List content via the API
    tredumo media                               # List media via the API
    tredumo stats                               # Dashboard counters
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from typing import Optional

import click
import httpx

from tredumo import __version__

DEFAULT_API_URL = "http://localhost:8000"


def _api_url() -> str:
    return os.environ.get("TREDUMO_API_URL", DEFAULT_API_URL).rstrip("/")


def _get(path: str, params: Optional[dict] = None) -> dict | list:
    """GET an /api path and return the decoded JSON, exiting on failure."""
    try:
        resp = httpx.get(f"{_api_url()}/api{path}", params=params, timeout=30.0)
    except httpx.ConnectError:
        click.secho(f"Error: API not reachable at {_api_url()}", fg="red", err=True)
        sys.exit(1)
    if resp.status_code != 200:
        click.secho(f"Error: {resp.status_code} {resp.text}", fg="red", err=True)
        sys.exit(1)
    return resp.json()


def _print_table(rows: list[dict], columns: list[tuple[str, str, int]]):
    """Print a simple ASCII table.

    columns: list of (header, dict_key, width)
    """
    header = "  ".join(h.ljust(w) for h, _, w in columns)
    click.secho(header, bold=True)
    click.echo("-" * len(header))
    for row in rows:
        line = "  ".join(str(row.get(k, "—"))[:w].ljust(w) for _, k, w in columns)
        click.echo(line)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(version=__version__, prog_name="tredumo")
def main():
    """Tredumo CMS — content and media API."""


# ---------------------------------------------------------------------------
# Server / database
# ---------------------------------------------------------------------------


@main.command()
@click.option("--host", default=None, help="Bind address (default: TREDUMO_HOST)")
@click.option("--port", type=int, default=None, help="Port (default: TREDUMO_PORT)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host: Optional[str], port: Optional[int], reload: bool):
    """Run the API server."""
    import uvicorn

    from tredumo.config import settings

    uvicorn.run(
        "tredumo.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@main.command("init-db")
@click.option("--seed", is_flag=True, help="Add starter content to an empty database")
def init_db(seed: bool):
    """Create any missing tables from the ORM models."""
    from tredumo.db.engine import async_session_factory, engine
    from tredumo.db.models import Base
    from tredumo.services.seed import seed_defaults

    async def _create():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        seeded = False
        if seed:
            async with async_session_factory() as session:
                seeded = await seed_defaults(session)
        await engine.dispose()
        return seeded

    seeded = asyncio.run(_create())
    click.secho("Tables created.", fg="green")
    if seed:
        click.echo("Starter content added." if seeded else "Database not empty; seed skipped.")


@main.command("create-user")
@click.argument("username")
@click.argument("email")
@click.option("--role", type=click.Choice(["admin", "editor", "viewer"]), default="viewer")
@click.password_option()
def create_user(username: str, email: str, role: str, password: str):
    """Create a user account (password is prompted for)."""
    from tredumo.db.engine import async_session_factory, engine
    from tredumo.services.user_service import UserService

    async def _create():
        async with async_session_factory() as session:
            user = await UserService(session).create_user(
                username=username, email=email, password=password, role=role
            )
        await engine.dispose()
        return user

    user = asyncio.run(_create())
    click.secho(f"Created {user.role} '{user.username}' (id {user.id})", fg="green")


@main.command()
@click.argument("user_id", type=int)
@click.option("--role", type=click.Choice(["admin", "editor", "viewer"]), default="viewer")
@click.option("--expires-minutes", type=int, default=None, help="Token lifetime")
def token(user_id: int, role: str, expires_minutes: Optional[int]):
    """Mint a signed credential for USER_ID (for scripts and smoke tests)."""
    from tredumo.auth.jwt import create_access_token

    click.echo(create_access_token(user_id, role, expires_minutes=expires_minutes))


# ---------------------------------------------------------------------------
# Read-only views over the API
# ---------------------------------------------------------------------------


@main.command()
@click.option("--type", "content_type", type=click.Choice(["page", "blog", "testimonial"]))
@click.option("--json", "as_json", is_flag=True, help="Raw JSON output")
def content(content_type: Optional[str], as_json: bool):
    """List content, most recently updated first."""
    params = {"type": content_type} if content_type else None
    items = _get("/content", params)
    if as_json:
        click.echo(json.dumps(items, indent=2, default=str))
        return
    for item in items:
        item["tags"] = ", ".join(item.get("tags", []))
    _print_table(items, [
        ("ID", "id", 5),
        ("TYPE", "type", 12),
        ("SLUG", "slug", 30),
        ("TITLE", "title", 40),
        ("TAGS", "tags", 30),
    ])


@main.command()
@click.option("--type", "media_type", type=click.Choice(["image", "video", "document"]))
@click.option("--json", "as_json", is_flag=True, help="Raw JSON output")
def media(media_type: Optional[str], as_json: bool):
    """List media, newest first."""
    params = {"type": media_type} if media_type else None
    items = _get("/media", params)
    if as_json:
        click.echo(json.dumps(items, indent=2, default=str))
        return
    _print_table(items, [
        ("ID", "id", 5),
        ("TYPE", "type", 10),
        ("TITLE", "title", 30),
        ("URL", "url", 50),
    ])


@main.command()
def stats():
    """Show content and media counts."""
    data = _get("/stats")
    for key in ("pages", "blog_posts", "testimonials", "media"):
        click.echo(f"{key.replace('_', ' '):<14}{data[key]}")
