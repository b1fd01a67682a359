"""Welfare-need scoring.

Converts a household profile into a 0-100 composite score where a
*higher* score means *greater* need.  Five weighted factors contribute:

=============  ====  ==================================================
Factor          Max  Driven by
=============  ====  ==================================================
income           30  household income bracket (lower -> higher)
dependents       20  family size (larger -> higher)
insurance        25  missing health insurance / pension
occupation       15  occupational stability (less stable -> higher)
education        10  highest education (less -> higher)
=============  ====  ==================================================

A completion bonus of 2 points per completed scheme application (capped
at 10) is added before the total is clamped to 100.
"""

from __future__ import annotations

from typing import Final

import structlog

from src.models.enums import EducationLevel, Occupation, RiskCategory
from src.models.user_profile import Profile
from src.models.welfare import WelfareScore

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# (upper bound inclusive, points), evaluated top to bottom
_INCOME_BRACKETS: Final[tuple[tuple[float, int], ...]] = (
    (100_000, 30),
    (200_000, 25),
    (300_000, 20),
    (500_000, 15),
    (800_000, 10),
)
_INCOME_FLOOR_POINTS: Final[int] = 5

# (minimum family size, points), evaluated top to bottom
_DEPENDENT_TIERS: Final[tuple[tuple[int, int], ...]] = (
    (7, 20),
    (5, 16),
    (4, 12),
    (3, 8),
)
_DEPENDENT_FLOOR_POINTS: Final[int] = 4

_OCCUPATION_SCORES: Final[dict[Occupation, int]] = {
    Occupation.UNEMPLOYED: 15,
    Occupation.DAILY_WAGE_WORKER: 14,
    Occupation.FARMER: 12,
    Occupation.STUDENT: 10,
    Occupation.HOUSEWIFE: 10,
    Occupation.HOMEMAKER: 10,
    Occupation.RETIRED: 10,
    Occupation.SELF_EMPLOYED: 8,
    Occupation.SALARIED: 4,
    Occupation.GOVERNMENT: 2,
}
DEFAULT_OCCUPATION_SCORE: Final[int] = 8

_EDUCATION_SCORES: Final[dict[EducationLevel, int]] = {
    EducationLevel.NONE: 10,
    EducationLevel.PRIMARY: 8,
    EducationLevel.SECONDARY: 6,
    EducationLevel.HIGHER_SECONDARY: 5,
    EducationLevel.GRADUATE: 3,
    EducationLevel.POSTGRADUATE: 1,
}
DEFAULT_EDUCATION_SCORE: Final[int] = 5

_POINTS_PER_COMPLETED_SCHEME: Final[int] = 2
_MAX_COMPLETION_BONUS: Final[int] = 10
_MAX_TOTAL: Final[int] = 100

HIGH_RISK_THRESHOLD: Final[int] = 65
MEDIUM_RISK_THRESHOLD: Final[int] = 40


# ---------------------------------------------------------------------------
# Household income
# ---------------------------------------------------------------------------


def aggregate_household_income(profile: Profile) -> float:
    """Primary income plus every listed family member's income.

    Members without a declared income count as zero.
    """
    members = profile.family_members or []
    member_income = sum((m.annual_income or 0) for m in members)
    return (profile.income or 0) + member_income


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------


def income_score(household_income: float) -> int:
    for upper_bound, points in _INCOME_BRACKETS:
        if household_income <= upper_bound:
            return points
    return _INCOME_FLOOR_POINTS


def dependents_score(family_size: int) -> int:
    for minimum, points in _DEPENDENT_TIERS:
        if family_size >= minimum:
            return points
    return _DEPENDENT_FLOOR_POINTS


def insurance_score(has_health_insurance: bool, has_pension: bool) -> int:
    if not has_health_insurance and not has_pension:
        return 25
    if not has_health_insurance:
        return 18
    if not has_pension:
        return 12
    return 5


def occupation_score(occupation: Occupation | str | None) -> int:
    """Stability score for *occupation*; unknown values score 8."""
    try:
        return _OCCUPATION_SCORES[Occupation(occupation)]
    except (ValueError, KeyError):
        return DEFAULT_OCCUPATION_SCORE


def education_score(education: EducationLevel | str | None) -> int:
    """Need score for *education*; unknown values score 5."""
    try:
        return _EDUCATION_SCORES[EducationLevel(education)]
    except (ValueError, KeyError):
        return DEFAULT_EDUCATION_SCORE


def completion_bonus(completed_schemes: int) -> int:
    return min(max(completed_schemes, 0) * _POINTS_PER_COMPLETED_SCHEME, _MAX_COMPLETION_BONUS)


def classify_risk(total: int) -> RiskCategory:
    if total >= HIGH_RISK_THRESHOLD:
        return RiskCategory.HIGH
    if total >= MEDIUM_RISK_THRESHOLD:
        return RiskCategory.MEDIUM
    return RiskCategory.LOW


# ---------------------------------------------------------------------------
# Composite score
# ---------------------------------------------------------------------------


def calculate_welfare_score(profile: Profile, completed_schemes: int = 0) -> WelfareScore:
    """Compute the composite welfare score for *profile*.

    Parameters
    ----------
    profile:
        The household profile to score.
    completed_schemes:
        Number of scheme applications the citizen has completed.  Each
        adds 2 points, up to 10.

    Returns
    -------
    WelfareScore
        Sub-scores, the clamped total and the derived risk category.
    """
    household_income = aggregate_household_income(profile)

    income = income_score(household_income)
    dependents = dependents_score(profile.family_size)
    insurance = insurance_score(profile.has_health_insurance, profile.has_pension)
    occupation = occupation_score(profile.occupation)
    education = education_score(profile.education)
    bonus = completion_bonus(completed_schemes)

    total = min(income + dependents + insurance + occupation + education + bonus, _MAX_TOTAL)
    risk = classify_risk(total)

    logger.debug(
        "scoring.welfare_score",
        user_id=profile.user_id,
        household_income=household_income,
        total=total,
        risk=risk.value,
    )

    return WelfareScore(
        total=total,
        income=income,
        dependents=dependents,
        insurance=insurance,
        occupation=occupation,
        education=education,
        completion_bonus=bonus,
        risk_category=risk,
    )
