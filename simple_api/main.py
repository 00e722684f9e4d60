"""Simple API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SimpleApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and schema created on startup via lifespan
    - One AtomicCounter per app instance (app.state.counter), never persisted
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from simple_api.api.error_handlers import register_error_handlers
from simple_api.api.routes import greeting, health, info, messages
from simple_api.config import get_settings
from simple_api.core.counter import AtomicCounter
from simple_api.infrastructure.database import init_db
from simple_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    await manager.create_schema()
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    logger.info(f"{settings.app_name} shutting down")
    await manager.dispose()


settings = get_settings()

app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)
app.state.counter = AtomicCounter()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(greeting.router)
app.include_router(messages.router)
app.include_router(info.router)

register_error_handlers(app)
