"""Sports Events API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the envelope shape
    - CORS configured from settings (not hardcoded)
    - Database and auth provider client created on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Route guard registered as HTTP middleware so it also covers the static SPA mount
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from sports_events.api.error_handlers import register_error_handlers
from sports_events.api.route_guard import route_guard
from sports_events.api.routes import auth, events, health, sports
from sports_events.config import get_settings
from sports_events.infrastructure.database import init_db
from sports_events.infrastructure.observability import setup_logging
from sports_events.infrastructure.supabase_auth import SupabaseAuthClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    auth_client = SupabaseAuthClient(
        settings.supabase_url,
        settings.supabase_anon_key,
        timeout_seconds=settings.auth_timeout_seconds,
    )
    app.state.identity_provider = auth_client
    logger.info("Sports Events API started")
    yield
    logger.info("Sports Events API shutting down")
    await auth_client.aclose()
    await db.dispose()


app = FastAPI(
    title="Sports Events API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Invalidate-Paths"],
)
app.middleware("http")(route_guard)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(events.router)
app.include_router(sports.router)

register_error_handlers(app)

# Static files: serves the SPA build in production.
# Mounted AFTER API routes so /api/v1/* takes precedence.
if os.path.isdir("static"):
    app.mount("/", StaticFiles(directory="static", html=True), name="static")
