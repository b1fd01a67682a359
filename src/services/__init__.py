"""Yojana Saathi service layer -- the welfare engine and its collaborators.

The engine functions are pure; ``WelfareService`` composes them with the
profile, application and notification repositories.
"""

from __future__ import annotations

from src.services.catalog import browse_schemes, find_scheme
from src.services.coverage import detect_coverage_gaps
from src.services.eligibility import filter_eligible_schemes, rank_schemes
from src.services.planner import plan_future_recommendations
from src.services.profile_validator import validate_profile
from src.services.repositories import (
    InMemoryApplicationRepository,
    InMemoryNotificationRepository,
    InMemoryProfileRepository,
)
from src.services.scoring import aggregate_household_income, calculate_welfare_score
from src.services.welfare import (
    ApplicationNotFoundError,
    DuplicateApplicationError,
    ProfileNotFoundError,
    SchemeNotFoundError,
    WelfareError,
    WelfareService,
)

__all__ = [
    "ApplicationNotFoundError",
    "DuplicateApplicationError",
    "InMemoryApplicationRepository",
    "InMemoryNotificationRepository",
    "InMemoryProfileRepository",
    "ProfileNotFoundError",
    "SchemeNotFoundError",
    "WelfareError",
    "WelfareService",
    "aggregate_household_income",
    "browse_schemes",
    "calculate_welfare_score",
    "detect_coverage_gaps",
    "filter_eligible_schemes",
    "find_scheme",
    "plan_future_recommendations",
    "rank_schemes",
    "validate_profile",
]
