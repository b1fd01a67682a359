"""Scheme eligibility filtering and relevance ranking.

Eligibility is a hard, conjunctive gate: a scheme qualifies only when the
citizen's age falls inside its band, the *household* income is within its
ceiling, the occupation is on its allow-list (if it has one) and the gender
matches (if one is required).  There are no partial matches.

Ranking then orders the qualifying schemes by a weighted relevance score
built from four independent terms:

1. Income fit (0-30): how far household income sits below the ceiling.
2. Domain relevance (25 or 10): whether the occupation is a natural
   beneficiary of the scheme's domain.
3. Risk priority (25 / 15 / 8): the welfare score's risk category.
4. Family size (20 / 12 / 5).

The terms are not normalised; the sum is used for ordering only.  Each
term contributes a reason fragment, and fragments are joined into one
human-readable sentence list.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Final

import structlog

from src.models.enums import Occupation, RiskCategory, SchemeDomain
from src.models.scheme import Scheme
from src.models.user_profile import Profile
from src.models.welfare import SchemeRecommendation, WelfareScore
from src.services.scoring import aggregate_household_income

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Domain -> natural beneficiary occupations
# ---------------------------------------------------------------------------

_DOMAIN_OCCUPATIONS: Final[dict[SchemeDomain, frozenset[Occupation]]] = {
    SchemeDomain.EDUCATION: frozenset({
        Occupation.STUDENT,
        Occupation.UNEMPLOYED,
    }),
    SchemeDomain.AGRICULTURE: frozenset({
        Occupation.FARMER,
        Occupation.DAILY_WAGE_WORKER,
    }),
    SchemeDomain.HEALTH: frozenset({
        Occupation.FARMER,
        Occupation.UNEMPLOYED,
        Occupation.STUDENT,
        Occupation.HOUSEWIFE,
        Occupation.HOMEMAKER,
        Occupation.RETIRED,
    }),
    SchemeDomain.WOMEN: frozenset({
        Occupation.STUDENT,
        Occupation.FARMER,
        Occupation.UNEMPLOYED,
        Occupation.SELF_EMPLOYED,
        Occupation.HOUSEWIFE,
        Occupation.HOMEMAKER,
    }),
    SchemeDomain.SENIOR: frozenset({
        Occupation.UNEMPLOYED,
        Occupation.FARMER,
        Occupation.RETIRED,
        Occupation.HOUSEWIFE,
        Occupation.HOMEMAKER,
    }),
    SchemeDomain.MSME: frozenset({
        Occupation.SELF_EMPLOYED,
        Occupation.FARMER,
        Occupation.DAILY_WAGE_WORKER,
    }),
    SchemeDomain.FINANCIAL: frozenset({
        Occupation.STUDENT,
        Occupation.FARMER,
        Occupation.SALARIED,
        Occupation.SELF_EMPLOYED,
        Occupation.GOVERNMENT,
        Occupation.UNEMPLOYED,
        Occupation.HOUSEWIFE,
        Occupation.HOMEMAKER,
        Occupation.RETIRED,
    }),
}

_INCOME_FIT_WEIGHT: Final[int] = 30
_COMFORTABLE_INCOME_RATIO: Final[float] = 0.5

_DOMAIN_MATCH_POINTS: Final[int] = 25
_DOMAIN_SUPPLEMENTARY_POINTS: Final[int] = 10

_RISK_PRIORITY: Final[dict[RiskCategory, tuple[int, str]]] = {
    RiskCategory.HIGH: (25, "Priority recommended due to high welfare need"),
    RiskCategory.MEDIUM: (15, "Beneficial for improving welfare coverage"),
    RiskCategory.LOW: (8, "Additional welfare enhancement opportunity"),
}


def is_domain_relevant(domain: SchemeDomain | str, occupation: Occupation | str) -> bool:
    """True if *occupation* is a natural beneficiary of *domain*."""
    try:
        return Occupation(occupation) in _DOMAIN_OCCUPATIONS.get(SchemeDomain(domain), frozenset())
    except ValueError:
        return False


# ---------------------------------------------------------------------------
# Eligibility
# ---------------------------------------------------------------------------


def is_eligible(profile: Profile, scheme: Scheme, household_income: float | None = None) -> bool:
    """Check every hard predicate of *scheme* against *profile*."""
    if household_income is None:
        household_income = aggregate_household_income(profile)

    if profile.age < scheme.min_age or profile.age > scheme.max_age:
        return False
    if household_income > scheme.income_limit:
        return False
    if scheme.occupation_required and profile.occupation not in scheme.occupation_required:
        return False
    if scheme.gender_required is not None and scheme.gender_required != profile.gender:
        return False
    return True


def filter_eligible_schemes(profile: Profile, catalog: Iterable[Scheme]) -> list[Scheme]:
    """Return the schemes from *catalog* that *profile* qualifies for.

    Catalog order is preserved.
    """
    household_income = aggregate_household_income(profile)
    eligible = [s for s in catalog if is_eligible(profile, s, household_income)]

    logger.debug(
        "eligibility.filtered",
        user_id=profile.user_id,
        household_income=household_income,
        eligible=len(eligible),
    )
    return eligible


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _income_fit(household_income: float, income_limit: float) -> tuple[int, str | None]:
    if income_limit <= 0:
        return 0, None
    ratio = 1 - household_income / income_limit
    reason = "Your income qualifies you well within the limit" if ratio > _COMFORTABLE_INCOME_RATIO else None
    return _round_half_up(ratio * _INCOME_FIT_WEIGHT), reason


def _domain_relevance(scheme: Scheme, occupation: Occupation) -> tuple[int, str]:
    if is_domain_relevant(scheme.domain, occupation):
        return (
            _DOMAIN_MATCH_POINTS,
            f"Highly relevant for {occupation} in {scheme.domain} domain",
        )
    return _DOMAIN_SUPPLEMENTARY_POINTS, f"{scheme.domain} domain provides supplementary support"


def _family_weight(family_size: int) -> tuple[int, str | None]:
    if family_size >= 5:
        return 20, "Large family size increases benefit value"
    if family_size >= 3:
        return 12, "Family coverage benefits apply"
    return 5, None


def score_scheme(
    profile: Profile,
    scheme: Scheme,
    welfare_score: WelfareScore,
    household_income: float | None = None,
) -> SchemeRecommendation:
    """Compute the match score and rationale for a single scheme."""
    if household_income is None:
        household_income = aggregate_household_income(profile)

    reasons: list[str] = []
    match_score = 0

    points, reason = _income_fit(household_income, scheme.income_limit)
    match_score += points
    if reason:
        reasons.append(reason)

    points, reason = _domain_relevance(scheme, profile.occupation)
    match_score += points
    reasons.append(reason)

    points, reason = _RISK_PRIORITY[welfare_score.risk_category]
    match_score += points
    reasons.append(reason)

    points, reason = _family_weight(profile.family_size)
    match_score += points
    if reason:
        reasons.append(reason)

    return SchemeRecommendation(
        scheme=scheme,
        match_score=match_score,
        reason=". ".join(reasons) + ".",
    )


def rank_schemes(
    profile: Profile,
    eligible_schemes: Sequence[Scheme],
    welfare_score: WelfareScore,
) -> list[SchemeRecommendation]:
    """Score every eligible scheme and sort by match score, highest first.

    The sort is stable: schemes with equal scores keep their catalog order.
    """
    household_income = aggregate_household_income(profile)
    recommendations = [
        score_scheme(profile, scheme, welfare_score, household_income)
        for scheme in eligible_schemes
    ]
    return sorted(recommendations, key=lambda r: r.match_score, reverse=True)
