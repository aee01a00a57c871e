"""Health check endpoint.

Learn: Simple GET endpoint that verifies the server is running and
whether its dependencies are reachable. Redis is optional, so only the
database decides between "healthy" and "degraded".
"""

from fastapi import APIRouter
from sqlalchemy import text

from tredumo import __version__
from tredumo.db import redis as redis_pool
from tredumo.db.engine import engine

router = APIRouter()


@router.get("/health")
async def health_check():
    """Check server health and dependency connectivity."""
    checks = {"server": "ok", "version": __version__}

    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        checks["database"] = "ok"
    except Exception as e:
        checks["database"] = f"error: {e}"

    try:
        await redis_pool.get_redis().ping()
        checks["redis"] = "ok"
    except Exception as e:
        checks["redis"] = f"unavailable: {e}"

    status = "healthy" if checks["database"] == "ok" else "degraded"
    return {"status": status, **checks}
