"""Forum API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ForumError/EntityError → JSON envelope
    - CORS configured from settings (not hardcoded)
    - Database and container built on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Container stored on app.state: routes read it through a dependency,
      tests replace it without touching module globals
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.api.error_handlers import register_error_handlers
from forum.api.routes import (
    authentications, comments, health, likes, replies, threads, users,
)
from forum.config import get_settings
from forum.container import build_container
from forum.infrastructure.database import DatabaseSessionManager
from forum.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.container = build_container(settings, db)
    logger.info("Forum API started")
    yield
    logger.info("Forum API shutting down")
    await db.dispose()


app = FastAPI(title="Forum API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(authentications.router)
app.include_router(threads.router)
app.include_router(comments.router)
app.include_router(replies.router)
app.include_router(likes.router)

register_error_handlers(app)
