"""SmartSales API — FastAPI application entry point.

Invariants:
    - Routers are registered explicitly, in the order below
    - Every SmartSalesError leaves as the uniform envelope (api/error_handlers.py)
    - The database engine lives exactly as long as the lifespan context
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartsales import __version__
from smartsales.api.error_handlers import register_error_handlers
from smartsales.api.routes import app_settings, categories, health, wizard
from smartsales.config import get_settings
from smartsales.infrastructure.database import close_db, init_db
from smartsales.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

ROUTERS = (health.router, app_settings.router, wizard.router, categories.router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"SmartSales API {__version__} started")
    try:
        yield
    finally:
        await close_db()
        logger.info("SmartSales API stopped")


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title="SmartSales API", version=__version__, lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    for router in ROUTERS:
        application.include_router(router)
    register_error_handlers(application)
    return application


app = create_app()
