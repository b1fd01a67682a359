"""Household profile endpoints for the Yojana Saathi API v1.

Provides endpoints for:
    * Creating, replacing, reading and deleting profiles
    * Resizing the household (family members are trimmed to fit)
    * The welfare assessment shown on the citizen dashboard
    * "What-if" scenario simulation, optionally saved back to the profile
    * The citizen's applications and notifications
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.api.dependencies import get_service
from src.models.application import Application, Notification
from src.models.enums import EducationLevel, Gender, Occupation, Residence
from src.models.user_profile import FamilyMember, Profile
from src.services.welfare import (
    ProfileNotFoundError,
    ScenarioResult,
    WelfareAssessment,
    WelfareService,
)

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

router = APIRouter(prefix="/profiles", tags=["profiles"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class ProfileRequest(BaseModel):
    """Request body for creating or replacing a profile."""

    age: int = Field(ge=0)
    income: float = Field(default=0.0, ge=0)
    occupation: Occupation
    education: EducationLevel
    gender: Gender
    residence: Residence = Residence.RURAL
    state: str = ""
    family_size: int = Field(default=1, ge=1)
    family_members: list[FamilyMember] = Field(default_factory=list)
    has_health_insurance: bool = False
    has_pension: bool = False


class ProfileResponse(BaseModel):
    profile: Profile
    warnings: list[str] = Field(default_factory=list)


class FamilySizeRequest(BaseModel):
    family_size: int = Field(ge=1)


class ScenarioRequest(BaseModel):
    """Hypothetical change to evaluate."""

    income: float | None = Field(default=None, ge=0)
    age_offset: int = Field(default=0, ge=-100, le=100)


class DeleteProfileResponse(BaseModel):
    user_id: str
    deleted: bool


def _get_or_404(service: WelfareService, user_id: str) -> Profile:
    try:
        return service.get_profile(user_id)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------


@router.post("", response_model=ProfileResponse, status_code=201)
async def create_profile(
    body: ProfileRequest,
    service: WelfareService = Depends(get_service),
) -> ProfileResponse:
    """Create a profile with a generated user id."""
    profile = Profile(**body.model_dump())
    warnings = service.save_profile(profile)
    logger.info("api.profile.created", user_id=profile.user_id)
    return ProfileResponse(profile=profile, warnings=warnings)


@router.put("/{user_id}", response_model=ProfileResponse)
async def replace_profile(
    user_id: str,
    body: ProfileRequest,
    service: WelfareService = Depends(get_service),
) -> ProfileResponse:
    """Create or replace the profile for *user_id*.

    Advisory warnings are returned alongside the saved profile; they never
    prevent the save.
    """
    profile = Profile(user_id=user_id, **body.model_dump())
    warnings = service.save_profile(profile)
    return ProfileResponse(profile=profile, warnings=warnings)


@router.get("/{user_id}", response_model=Profile)
async def get_profile(
    user_id: str,
    service: WelfareService = Depends(get_service),
) -> Profile:
    return _get_or_404(service, user_id)


@router.delete("/{user_id}", response_model=DeleteProfileResponse)
async def delete_profile(
    user_id: str,
    service: WelfareService = Depends(get_service),
) -> DeleteProfileResponse:
    if not service.profiles.delete(user_id):
        raise HTTPException(status_code=404, detail=f"No profile for user '{user_id}'")
    logger.info("api.profile.deleted", user_id=user_id)
    return DeleteProfileResponse(user_id=user_id, deleted=True)


@router.patch("/{user_id}/family-size", response_model=Profile)
async def resize_family(
    user_id: str,
    body: FamilySizeRequest,
    service: WelfareService = Depends(get_service),
) -> Profile:
    """Change the household size; surplus family members are dropped."""
    try:
        return service.resize_family(user_id, body.family_size)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# Assessment & simulation
# ---------------------------------------------------------------------------


@router.get("/{user_id}/assessment", response_model=WelfareAssessment)
async def get_assessment(
    user_id: str,
    service: WelfareService = Depends(get_service),
) -> WelfareAssessment:
    try:
        return service.assess(user_id)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/{user_id}/scenario", response_model=ScenarioResult)
async def simulate_scenario(
    user_id: str,
    body: ScenarioRequest,
    service: WelfareService = Depends(get_service),
) -> ScenarioResult:
    """Evaluate a hypothetical income / age change without saving it."""
    try:
        return service.simulate(user_id, income=body.income, age_offset=body.age_offset)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/{user_id}/scenario/apply", response_model=Profile)
async def apply_scenario(
    user_id: str,
    body: ScenarioRequest,
    service: WelfareService = Depends(get_service),
) -> Profile:
    """Save the simulated profile as the citizen's profile."""
    try:
        return service.apply_scenario(user_id, income=body.income, age_offset=body.age_offset)
    except ProfileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# ---------------------------------------------------------------------------
# Applications & notifications
# ---------------------------------------------------------------------------


@router.get("/{user_id}/applications", response_model=list[Application])
async def list_applications(
    user_id: str,
    service: WelfareService = Depends(get_service),
) -> list[Application]:
    _get_or_404(service, user_id)
    return service.applications.for_user(user_id)


@router.get("/{user_id}/notifications", response_model=list[Notification])
async def list_notifications(
    user_id: str,
    service: WelfareService = Depends(get_service),
) -> list[Notification]:
    _get_or_404(service, user_id)
    return service.notifications.for_user(user_id)
