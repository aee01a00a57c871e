"""FastAPI application factory.

Learn: App factory pattern — create_app() returns a configured FastAPI
instance. Lifespan manages startup/shutdown (Redis pool, database engine).
Middleware, CORS, exception handlers, and routers all registered here.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tredumo import __version__
from tredumo.api import api_router
from tredumo.config import settings
from tredumo.middleware.rate_limit import RateLimitMiddleware
from tredumo.middleware.request_id import RequestIdMiddleware
from tredumo.middleware.security import SecurityHeadersMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle.

    Learn: Anything before `yield` runs at startup, after `yield` runs
    at shutdown. Settings were already validated at import time, so a
    missing JWT secret never gets this far.
    """
    logger.info(
        "tredumo.starting",
        version=__version__,
        environment=settings.environment,
        port=settings.port,
    )

    from tredumo.db.redis import close_redis, init_redis
    try:
        await init_redis()
        logger.info("tredumo.redis_connected", url=settings.redis_url)
    except Exception as e:
        logger.warning("tredumo.redis_unavailable", error=str(e))
        # Redis is optional; the app runs without rate limiting

    yield

    logger.info("tredumo.shutdown")
    await close_redis()

    from tredumo.db.engine import engine
    await engine.dispose()


async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Any database fault becomes a bare 500. Details stay in the logs."""
    logger.error(
        "storage.error",
        method=request.method,
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Server error"})


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Tredumo CMS",
        description="Content and media API for the Tredumo site and its admin UI",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Middleware stack ──────────────────────────────────────
    # Starlette middleware executes in reverse order of registration.
    # Request flow: CORS → RateLimit → Security → RequestId → handler
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        default_rpm=settings.rate_limit_rpm,
        auth_rpm=settings.rate_limit_auth_rpm,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SQLAlchemyError, storage_error_handler)

    app.include_router(api_router)

    return app


# Default app instance (used by uvicorn: tredumo.main:app)
app = create_app()
