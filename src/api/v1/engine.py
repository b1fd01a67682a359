"""Stateless engine endpoints for the Yojana Saathi API v1.

Evaluate an inline profile against the loaded catalog without storing
anything.  Useful for form previews before a profile is saved.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.dependencies import get_service
from src.models.user_profile import Profile, ProfileDraft
from src.models.welfare import FutureRecommendation, SchemeRecommendation, WelfareScore
from src.services.coverage import detect_coverage_gaps
from src.services.eligibility import filter_eligible_schemes, rank_schemes
from src.services.planner import plan_future_recommendations
from src.services.profile_validator import validate_profile
from src.services.scoring import aggregate_household_income, calculate_welfare_score
from src.services.welfare import WelfareService

router = APIRouter(prefix="/engine", tags=["engine"])


class EvaluateRequest(BaseModel):
    profile: Profile
    completed_schemes: int = Field(default=0, ge=0)


class EvaluateResponse(BaseModel):
    """``eligible_scheme_ids`` is in catalog order; ``recommendations`` is ranked."""

    household_income: float
    score: WelfareScore
    eligible_scheme_ids: list[str]
    recommendations: list[SchemeRecommendation]
    coverage_gaps: list[str]
    warnings: list[str]
    future_plan: list[FutureRecommendation]


class ValidateResponse(BaseModel):
    warnings: list[str]


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    service: WelfareService = Depends(get_service),
) -> EvaluateResponse:
    profile = body.profile
    score = calculate_welfare_score(profile, body.completed_schemes)
    eligible = filter_eligible_schemes(profile, service.catalog)
    ranked = rank_schemes(profile, eligible, score)

    return EvaluateResponse(
        household_income=aggregate_household_income(profile),
        score=score,
        eligible_scheme_ids=[s.scheme_id for s in eligible],
        recommendations=ranked,
        coverage_gaps=detect_coverage_gaps(profile),
        warnings=validate_profile(profile),
        future_plan=plan_future_recommendations(profile),
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate(draft: ProfileDraft) -> ValidateResponse:
    """Advisory warnings for a partially filled profile."""
    return ValidateResponse(warnings=validate_profile(draft))
