"""Administrative overview endpoints for the Yojana Saathi API v1."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends

from src.api.dependencies import get_service
from src.services.welfare import PopulationSummary, WelfareService

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/summary", response_model=PopulationSummary)
async def population_summary(
    service: WelfareService = Depends(get_service),
) -> PopulationSummary:
    """Average welfare score, risk mix, regions and flagged profiles."""
    summary = service.population_summary()
    logger.info(
        "api.admin.summary",
        profiles=summary.total_profiles,
        flagged=len(summary.flagged_profiles),
    )
    return summary
