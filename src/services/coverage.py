"""Coverage-gap detection.

Each gap is an independent check against the primary profile; a household
can have any combination of them.  Output order is fixed.
"""

from __future__ import annotations

from typing import Final

from src.models.enums import BASIC_EDUCATION_LEVELS, HOMEMAKER_OCCUPATIONS, Occupation
from src.models.user_profile import Profile

HEALTH_INSURANCE: Final[str] = "Health Insurance"
PENSION_COVERAGE: Final[str] = "Pension Coverage"
EDUCATION_SUPPORT: Final[str] = "Education Support"
INCOME_SUPPORT: Final[str] = "Income Support"
EMPLOYMENT_ASSISTANCE: Final[str] = "Employment Assistance"
WOMEN_LIVELIHOOD_SUPPORT: Final[str] = "Women & Livelihood Support"
FAMILY_WELFARE_SUPPORT: Final[str] = "Family Welfare Support"

_LOW_INCOME: Final[float] = 200_000
_LARGE_FAMILY_INCOME: Final[float] = 300_000
_LARGE_FAMILY_SIZE: Final[int] = 5

_PRECARIOUS_OCCUPATIONS: Final[frozenset[Occupation]] = frozenset({
    Occupation.UNEMPLOYED,
    Occupation.DAILY_WAGE_WORKER,
})


def detect_coverage_gaps(profile: Profile) -> list[str]:
    """Return the labels of every welfare category *profile* is missing.

    Income checks use the primary income, not household income.
    """
    gaps: list[str] = []

    if not profile.has_health_insurance:
        gaps.append(HEALTH_INSURANCE)
    if not profile.has_pension:
        gaps.append(PENSION_COVERAGE)
    if profile.education in BASIC_EDUCATION_LEVELS:
        gaps.append(EDUCATION_SUPPORT)
    if profile.income < _LOW_INCOME:
        gaps.append(INCOME_SUPPORT)
    if profile.occupation in _PRECARIOUS_OCCUPATIONS:
        gaps.append(EMPLOYMENT_ASSISTANCE)
    if profile.occupation in HOMEMAKER_OCCUPATIONS:
        gaps.append(WOMEN_LIVELIHOOD_SUPPORT)
    if profile.family_size >= _LARGE_FAMILY_SIZE and profile.income < _LARGE_FAMILY_INCOME:
        gaps.append(FAMILY_WELFARE_SUPPORT)

    return gaps
