from __future__ import annotations

from fastapi import HTTPException, Request

from src.services.welfare import WelfareService


def get_service(request: Request) -> WelfareService:
    """The ``WelfareService`` created during application startup."""
    service: WelfareService | None = getattr(request.app.state, "service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Welfare service is not initialised")
    return service
