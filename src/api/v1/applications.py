"""Scheme application endpoints for the Yojana Saathi API v1."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.api.dependencies import get_service
from src.models.application import Application
from src.services.welfare import (
    ApplicationNotFoundError,
    DuplicateApplicationError,
    ProfileNotFoundError,
    SchemeNotFoundError,
    WelfareService,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/applications", tags=["applications"])


class ApplyRequest(BaseModel):
    user_id: str
    scheme_id: str


@router.post("", response_model=Application, status_code=201)
async def apply_for_scheme(
    body: ApplyRequest,
    service: WelfareService = Depends(get_service),
) -> Application:
    """Record an application; each citizen may apply to a scheme once."""
    try:
        return service.apply(body.user_id, body.scheme_id)
    except (ProfileNotFoundError, SchemeNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DuplicateApplicationError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@router.post("/{application_id}/complete", response_model=Application)
async def complete_application(
    application_id: str,
    service: WelfareService = Depends(get_service),
) -> Application:
    """Mark an application completed; this raises the citizen's completion bonus."""
    try:
        return service.complete(application_id)
    except ApplicationNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
