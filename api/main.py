"""
Blog Seed - FastAPI API Service Entry Point
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from api.routes import content, media
from database.connection import close_db, get_async_session, init_db
from database.roles import ensure_default_roles
from database.seeds.run_all_seeds import bootstrap
from shared.config import get_settings
from shared.fastapi_errors import register_error_handlers
from shared.logging_config import configure_logging

# Configure structured JSON logging on startup
configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Blog Seed API",
    description="Public read API for the seeded blog content",
    version="1.0.0",
)

settings = get_settings()
origins = settings.CORS_ORIGINS.split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

# 403/404/500 responses share the APIErrorResponse body
register_error_handlers(app)

# Public content API (tags, authors, blog posts)
app.include_router(content.router, tags=["content"])

# Public media serving (no auth)
app.include_router(media.router, prefix=settings.MEDIA_BASE_URL, tags=["media"])


@app.on_event("startup")
async def startup_event():
    """Log startup information and seed initial data."""
    logger.info(f"Starting {settings.PROJECT_NAME} API...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    try:
        await init_db()
        await ensure_default_roles()
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        return

    if not settings.SEED_ON_STARTUP:
        logger.info("SEED_ON_STARTUP disabled, skipping seed import")
        return

    # Seeding is best-effort: failures are logged and startup continues
    try:
        await bootstrap()
    except Exception as e:
        logger.error(f"Seed bootstrap failed: {e}", exc_info=True)


@app.on_event("shutdown")
async def shutdown_event():
    await close_db()


@app.get("/health")
async def health_check() -> JSONResponse:
    """
    Health check endpoint for Docker health checks and monitoring.

    Returns:
        200 OK if the database answers
        503 Service Unavailable otherwise
    """
    health_status = {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "postgres": "unknown",
    }
    status_code = 200

    try:
        async with get_async_session() as session:
            await session.execute(text("SELECT 1"))
        health_status["postgres"] = "connected"
    except Exception:
        health_status["postgres"] = "disconnected"
        health_status["status"] = "degraded"
        status_code = 503

    return JSONResponse(status_code=status_code, content=health_status)
