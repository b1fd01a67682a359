"""Scheme catalog endpoints for the Yojana Saathi API v1.

Lists the catalog (optionally filtered by domain or narrowed to the
schemes a stored profile qualifies for) and returns scheme details.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from src.api.dependencies import get_service
from src.models.enums import SchemeDomain
from src.models.scheme import Scheme
from src.services.welfare import ProfileNotFoundError, SchemeNotFoundError, WelfareService

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/schemes", tags=["schemes"])


class SchemeListResponse(BaseModel):
    schemes: list[Scheme]
    total: int
    domain: SchemeDomain | None = None
    eligible_for: str | None = None


@router.get("", response_model=SchemeListResponse)
async def list_schemes(
    domain: SchemeDomain | None = Query(default=None, description="Filter by scheme domain"),
    eligible_for: str | None = Query(
        default=None,
        description="Only schemes this user's profile qualifies for",
    ),
    service: WelfareService = Depends(get_service),
) -> SchemeListResponse:
    """List catalog schemes, optionally by domain and/or eligibility."""
    try:
        schemes = service.browse(domain=domain, eligible_for=eligible_for)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return SchemeListResponse(
        schemes=schemes,
        total=len(schemes),
        domain=domain,
        eligible_for=eligible_for,
    )


@router.get("/{scheme_id}", response_model=Scheme)
async def get_scheme(
    scheme_id: str,
    service: WelfareService = Depends(get_service),
) -> Scheme:
    try:
        return service.get_scheme(scheme_id)
    except SchemeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
