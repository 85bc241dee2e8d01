"""FastAPI application entry point"""

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from inspiration_list import __version__
from inspiration_list.api.errors import register_exception_handlers
from inspiration_list.api.middleware import CorsMiddleware
from inspiration_list.api.routes import health, inspirations
from inspiration_list.config import Settings
from inspiration_list.config import settings as default_settings
from inspiration_list.core import RecordStore
from inspiration_list.enrichment import EnrichmentClient
from inspiration_list.providers import KeyValueProviderFactory

# Configure logging
logging.basicConfig(
    level=default_settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def build_record_store(settings: Settings) -> RecordStore:
    """Wire the configured key-value provider and enrichment client together"""
    kv = KeyValueProviderFactory.create(settings)
    return RecordStore(kv, EnrichmentClient(settings), settings)


def create_app(settings: Settings | None = None, record_store: RecordStore | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Defaults to the global settings instance
        record_store: Prebuilt store (tests); built from settings when omitted
    """
    settings = settings or default_settings
    if record_store is None:
        record_store = build_record_store(settings)

    app = FastAPI(
        title="Inspiration List API",
        description="Voice-captured ideas, enriched and stored",
        version=__version__
    )
    app.state.settings = settings
    app.state.record_store = record_store

    app.add_middleware(CorsMiddleware, allow_origin=settings.cors_allow_origin)
    register_exception_handlers(app)

    # Include routers; the unknown-endpoint catch-all must come last
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(inspirations.router, prefix="/api", tags=["inspirations"])
    app.include_router(inspirations.unknown_router, prefix="/api")

    # Serve the frontend for every non-API path
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting Inspiration List API...")
        logger.info(f"Key-value provider: {record_store.get_provider_name()}")
        logger.info(f"Enrichment: {record_store.enricher.get_name()}")
        logger.info(f"List filter mode: {settings.list_filter_mode}")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Inspiration List API...")
        record_store.enricher.close()

    return app


app = create_app()
