"""Liveness and readiness probes for the Yojana Saathi API v1."""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from src.services.welfare import WelfareService

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float
    schemes_loaded: int = 0


class ReadinessResponse(BaseModel):
    status: str
    checks: dict[str, str] = Field(default_factory=dict)


def _service(request: Request) -> WelfareService | None:
    return getattr(request.app.state, "service", None)


@router.get("", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe; always 200 while the process is serving."""
    started_at: float = getattr(request.app.state, "start_time", time.time())
    service = _service(request)

    return HealthResponse(
        status="healthy",
        version=request.app.version,
        uptime_seconds=round(time.time() - started_at, 2),
        schemes_loaded=len(service.catalog) if service is not None else 0,
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(request: Request) -> ReadinessResponse:
    """Ready once the service is wired and the scheme catalog is non-empty."""
    service = _service(request)
    if service is None:
        logger.warning("health.not_ready", reason="service_missing")
        return ReadinessResponse(status="degraded", checks={"service": "not_initialised"})

    checks = {
        "service": "ok",
        "catalog": "ok" if service.catalog else "empty",
    }
    ready = all(v == "ok" for v in checks.values())
    if not ready:
        logger.warning("health.not_ready", checks=checks)
    return ReadinessResponse(status="ready" if ready else "degraded", checks=checks)
