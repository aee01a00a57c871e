"""API route aggregation.

All routers registered here get mounted in main.py.

Learn: Unlike a fully private API, auth here is per route, not per
router: GET routes on content and media are public, while their
POST/PUT/DELETE routes declare require_admin themselves.
"""

from fastapi import APIRouter

from tredumo.api.auth import router as auth_router
from tredumo.api.content import router as content_router
from tredumo.api.health import router as health_router
from tredumo.api.media import router as media_router
from tredumo.api.stats import router as stats_router

api_router = APIRouter(prefix="/api")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(content_router, tags=["content"])
api_router.include_router(media_router, tags=["media"])
api_router.include_router(stats_router, tags=["stats"])
