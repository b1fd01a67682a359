"""Yojana Saathi FastAPI application entry point.

Creates the FastAPI app, configures structured logging, loads the scheme
catalog and demo households, and exposes the welfare engine under
``/api/v1``.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

import orjson
import structlog
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from config.settings import Settings, settings
from src.api.router import api_router
from src.data.seed import DemoData, load_demo_households, load_schemes
from src.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryNotificationRepository,
    InMemoryProfileRepository,
)
from src.services.welfare import WelfareService

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

APP_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Structured logging configuration
# ---------------------------------------------------------------------------


def _orjson_dumps(obj: object, **kwargs: object) -> str:
    return orjson.dumps(obj, **kwargs).decode()


def configure_logging(config: Settings = settings) -> None:
    """Install the structlog pipeline.

    ``log_format="json"`` emits one orjson-encoded object per line for log
    shippers; ``"console"`` renders human-readable lines for local runs.
    """
    shared: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.dev.set_exc_info,
    ]

    if config.log_format == "json":
        processors = [
            *shared,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(serializer=_orjson_dumps),
        ]
    else:
        processors = [*shared, structlog.dev.ConsoleRenderer(colors=False)]

    min_level = logging.getLevelNamesMapping().get(config.log_level.upper(), logging.INFO)
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(min_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------


def build_service(config: Settings = settings) -> WelfareService:
    """Load the catalog (and optionally the demo households) and wire a
    ``WelfareService`` backed by in-memory repositories."""
    catalog = load_schemes(config.scheme_catalog_path)
    demo = load_demo_households() if config.seed_demo_data else DemoData()

    return WelfareService(
        catalog,
        InMemoryProfileRepository(demo.profiles),
        InMemoryApplicationRepository(demo.applications),
        InMemoryNotificationRepository(demo.notifications),
        top_n=config.top_recommendations,
    )


# ---------------------------------------------------------------------------
# Application lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and store the welfare service on ``app.state``."""
    configure_logging()
    logger.info("app.startup", env=settings.env)

    app.state.start_time = time.time()
    app.state.service = build_service()
    logger.info(
        "app.service_initialised",
        schemes=len(app.state.service.catalog),
        profiles=len(app.state.service.profiles.list()),
    )

    yield

    logger.info("app.shutdown")


app = FastAPI(
    title="Yojana Saathi API",
    description="Rule-based welfare scheme recommendations for Indian households",
    version=APP_VERSION,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
)

app.include_router(api_router)


@app.get("/api")
async def api_info() -> dict:
    """API information endpoint."""
    return {
        "name": "Yojana Saathi API",
        "version": APP_VERSION,
        "docs": "/docs",
        "endpoints": {
            "health": "/api/v1/health",
            "schemes": "/api/v1/schemes",
            "profiles": "/api/v1/profiles",
            "applications": "/api/v1/applications",
            "engine": "/api/v1/engine",
            "admin": "/api/v1/admin",
        },
    }


def run() -> None:
    import uvicorn

    uvicorn.run("src.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
