"""Welfare service: wires the stateless engine to its collaborators.

The engine functions (scoring, eligibility, ranking, gaps, validation,
planning) are pure and know nothing about storage.  ``WelfareService``
reads profiles and application history from the repositories it is
given, feeds them through the engine and returns composite views:

* ``assess``       -- the citizen dashboard (score, top schemes, gaps, plan)
* ``simulate``     -- "what if my income / age changed?" comparison
* ``apply`` / ``complete`` -- application tracking with notifications
* ``population_summary`` -- aggregate view across all profiles
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

import structlog
from pydantic import BaseModel, Field

from src.models.application import Application
from src.models.enums import ApplicationStatus, RiskCategory, SchemeDomain
from src.models.scheme import Scheme
from src.models.user_profile import Profile
from src.models.welfare import FutureRecommendation, SchemeRecommendation, WelfareScore
from src.services.catalog import browse_schemes, find_scheme
from src.services.coverage import detect_coverage_gaps
from src.services.eligibility import filter_eligible_schemes, rank_schemes
from src.services.planner import plan_future_recommendations
from src.services.profile_validator import validate_profile
from src.services.repositories import (
    ApplicationRepository,
    NotificationRepository,
    ProfileRepository,
)
from src.services.scoring import aggregate_household_income, calculate_welfare_score

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class WelfareError(Exception):
    """Base class for service-level failures."""


class ProfileNotFoundError(WelfareError, LookupError):
    def __init__(self, user_id: str) -> None:
        super().__init__(f"No profile for user '{user_id}'")
        self.user_id = user_id


class SchemeNotFoundError(WelfareError, LookupError):
    def __init__(self, scheme_id: str) -> None:
        super().__init__(f"Unknown scheme '{scheme_id}'")
        self.scheme_id = scheme_id


class ApplicationNotFoundError(WelfareError, LookupError):
    def __init__(self, application_id: str) -> None:
        super().__init__(f"Unknown application '{application_id}'")
        self.application_id = application_id


class DuplicateApplicationError(WelfareError):
    def __init__(self, user_id: str, scheme_id: str) -> None:
        super().__init__(f"User '{user_id}' has already applied for '{scheme_id}'")
        self.user_id = user_id
        self.scheme_id = scheme_id


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------


class WelfareAssessment(BaseModel):
    """Everything the citizen dashboard shows for one profile."""

    user_id: str
    household_income: float
    completed_schemes: int
    score: WelfareScore
    recommendations: list[SchemeRecommendation] = Field(default_factory=list)
    top_recommendations: list[SchemeRecommendation] = Field(default_factory=list)
    coverage_gaps: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    future_plan: list[FutureRecommendation] = Field(default_factory=list)


class ScenarioResult(BaseModel):
    """Current vs. simulated outcome for a hypothetical profile change."""

    user_id: str
    simulated_profile: Profile
    current_score: WelfareScore
    simulated_score: WelfareScore
    score_delta: int
    current_household_income: float
    simulated_household_income: float
    top_recommendations: list[SchemeRecommendation] = Field(default_factory=list)
    future_plan: list[FutureRecommendation] = Field(default_factory=list)


class FlaggedProfile(BaseModel):
    user_id: str
    warnings: list[str]


class ProfileScore(BaseModel):
    user_id: str
    state: str
    score: WelfareScore


class PopulationSummary(BaseModel):
    """Aggregate welfare indicators across every stored profile."""

    total_profiles: int
    average_score: int
    high_risk_percentage: int
    top_scheme: Scheme | None = None
    region_distribution: dict[str, int] = Field(default_factory=dict)
    risk_distribution: dict[RiskCategory, int] = Field(default_factory=dict)
    flagged_profiles: list[FlaggedProfile] = Field(default_factory=list)
    scores: list[ProfileScore] = Field(default_factory=list)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class WelfareService:
    """Facade over the welfare engine and its storage collaborators."""

    __slots__ = ("_applications", "_catalog", "_notifications", "_profiles", "_top_n")

    def __init__(
        self,
        catalog: Sequence[Scheme],
        profiles: ProfileRepository,
        applications: ApplicationRepository,
        notifications: NotificationRepository,
        *,
        top_n: int = 3,
    ) -> None:
        self._catalog: tuple[Scheme, ...] = tuple(catalog)
        self._profiles = profiles
        self._applications = applications
        self._notifications = notifications
        self._top_n = top_n

    @property
    def catalog(self) -> tuple[Scheme, ...]:
        return self._catalog

    @property
    def profiles(self) -> ProfileRepository:
        return self._profiles

    @property
    def applications(self) -> ApplicationRepository:
        return self._applications

    @property
    def notifications(self) -> NotificationRepository:
        return self._notifications

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_profile(self, user_id: str) -> Profile:
        profile = self._profiles.get(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    def get_scheme(self, scheme_id: str) -> Scheme:
        scheme = find_scheme(self._catalog, scheme_id)
        if scheme is None:
            raise SchemeNotFoundError(scheme_id)
        return scheme

    def browse(
        self,
        *,
        domain: SchemeDomain | None = None,
        eligible_for: str | None = None,
    ) -> list[Scheme]:
        """Catalog view; *eligible_for* is a user id."""
        profile = self.get_profile(eligible_for) if eligible_for is not None else None
        return browse_schemes(self._catalog, domain=domain, eligible_for=profile)

    # ------------------------------------------------------------------
    # Profiles
    # ------------------------------------------------------------------

    def save_profile(self, profile: Profile) -> list[str]:
        """Store *profile* and return its advisory warnings."""
        warnings = validate_profile(profile)
        self._profiles.save(profile)
        logger.info(
            "welfare.profile_saved",
            user_id=profile.user_id,
            family_size=profile.family_size,
            warnings=len(warnings),
        )
        return warnings

    def resize_family(self, user_id: str, family_size: int) -> Profile:
        profile = self.get_profile(user_id).resize_family(family_size)
        self._profiles.save(profile)
        return profile

    # ------------------------------------------------------------------
    # Assessment
    # ------------------------------------------------------------------

    def recommend(self, profile: Profile, score: WelfareScore) -> list[SchemeRecommendation]:
        eligible = filter_eligible_schemes(profile, self._catalog)
        return rank_schemes(profile, eligible, score)

    def assess(self, user_id: str) -> WelfareAssessment:
        profile = self.get_profile(user_id)
        completed = self._applications.completed_count(user_id)
        score = calculate_welfare_score(profile, completed)
        ranked = self.recommend(profile, score)

        assessment = WelfareAssessment(
            user_id=user_id,
            household_income=aggregate_household_income(profile),
            completed_schemes=completed,
            score=score,
            recommendations=ranked,
            top_recommendations=ranked[: self._top_n],
            coverage_gaps=detect_coverage_gaps(profile),
            warnings=validate_profile(profile),
            future_plan=plan_future_recommendations(profile),
        )

        logger.info(
            "welfare.assessed",
            user_id=user_id,
            total=score.total,
            risk=score.risk_category.value,
            eligible=len(ranked),
            gaps=len(assessment.coverage_gaps),
        )
        return assessment

    # ------------------------------------------------------------------
    # Scenario simulation
    # ------------------------------------------------------------------

    def simulate(
        self,
        user_id: str,
        *,
        income: float | None = None,
        age_offset: int = 0,
    ) -> ScenarioResult:
        """Score a copy of the profile with a different primary income
        and/or an age shifted by *age_offset* years.  Nothing is stored."""
        profile = self.get_profile(user_id)
        completed = self._applications.completed_count(user_id)

        data = profile.model_dump()
        if income is not None:
            data["income"] = income
        data["age"] = max(profile.age + age_offset, 0)
        simulated = Profile.model_validate(data)

        current_score = calculate_welfare_score(profile, completed)
        simulated_score = calculate_welfare_score(simulated, completed)
        ranked = self.recommend(simulated, simulated_score)

        logger.info(
            "welfare.simulated",
            user_id=user_id,
            income=simulated.income,
            age_offset=age_offset,
            delta=simulated_score.total - current_score.total,
        )

        return ScenarioResult(
            user_id=user_id,
            simulated_profile=simulated,
            current_score=current_score,
            simulated_score=simulated_score,
            score_delta=simulated_score.total - current_score.total,
            current_household_income=aggregate_household_income(profile),
            simulated_household_income=aggregate_household_income(simulated),
            top_recommendations=ranked[: self._top_n],
            future_plan=plan_future_recommendations(simulated),
        )

    def apply_scenario(
        self,
        user_id: str,
        *,
        income: float | None = None,
        age_offset: int = 0,
    ) -> Profile:
        """Persist the simulated profile as the citizen's new profile."""
        result = self.simulate(user_id, income=income, age_offset=age_offset)
        self._profiles.save(result.simulated_profile)
        return result.simulated_profile

    # ------------------------------------------------------------------
    # Applications
    # ------------------------------------------------------------------

    def apply(self, user_id: str, scheme_id: str) -> Application:
        self.get_profile(user_id)
        scheme = self.get_scheme(scheme_id)

        if any(a.scheme_id == scheme_id for a in self._applications.for_user(user_id)):
            raise DuplicateApplicationError(user_id, scheme_id)

        application = self._applications.add(user_id, scheme_id)
        self._notifications.add(
            user_id,
            f"You have applied for {scheme.name}. We will review your application shortly.",
        )
        logger.info(
            "applications.created",
            application_id=application.application_id,
            user_id=user_id,
            scheme_id=scheme_id,
        )
        return application

    def complete(self, application_id: str) -> Application:
        application = self._applications.update_status(application_id, ApplicationStatus.COMPLETED)
        if application is None:
            raise ApplicationNotFoundError(application_id)

        scheme = find_scheme(self._catalog, application.scheme_id)
        scheme_name = scheme.name if scheme is not None else application.scheme_id
        self._notifications.add(
            application.user_id,
            f"Your {scheme_name} application has been marked as completed. "
            "Your welfare score has been updated.",
        )
        logger.info(
            "applications.completed",
            application_id=application_id,
            user_id=application.user_id,
        )
        return application

    # ------------------------------------------------------------------
    # Population view
    # ------------------------------------------------------------------

    def population_summary(self) -> PopulationSummary:
        profiles = self._profiles.list()

        scores: list[ProfileScore] = []
        top_scheme_counts: Counter[str] = Counter()
        flagged: list[FlaggedProfile] = []

        for profile in profiles:
            completed = self._applications.completed_count(profile.user_id)
            score = calculate_welfare_score(profile, completed)
            scores.append(ProfileScore(user_id=profile.user_id, state=profile.state, score=score))

            ranked = self.recommend(profile, score)
            if ranked:
                top_scheme_counts[ranked[0].scheme.scheme_id] += 1

            warnings = validate_profile(profile)
            if warnings:
                flagged.append(FlaggedProfile(user_id=profile.user_id, warnings=warnings))

        total = len(scores)
        risk_counts = Counter(s.score.risk_category for s in scores)
        average = _round_half_up(sum(s.score.total for s in scores) / total) if total else 0
        high_risk_pct = _round_half_up(risk_counts[RiskCategory.HIGH] / total * 100) if total else 0

        top_scheme = None
        if top_scheme_counts:
            top_scheme_id, _ = top_scheme_counts.most_common(1)[0]
            top_scheme = find_scheme(self._catalog, top_scheme_id)

        regions = Counter(p.state for p in profiles)
        region_distribution = dict(sorted(regions.items(), key=lambda kv: kv[1], reverse=True))

        return PopulationSummary(
            total_profiles=total,
            average_score=average,
            high_risk_percentage=high_risk_pct,
            top_scheme=top_scheme,
            region_distribution=region_distribution,
            risk_distribution={risk: risk_counts.get(risk, 0) for risk in RiskCategory},
            flagged_profiles=flagged,
            scores=scores,
        )
