"""Future action planning.

Builds a short, ordered list of time-boxed recommendations for the next
decade of the household's life.  Rules are evaluated in a fixed order;
when more than ``MAX_FUTURE_RECOMMENDATIONS`` fire, the earliest ones win.
"""

from __future__ import annotations

from typing import Final

from src.models.enums import BASIC_EDUCATION_LEVELS, HOMEMAKER_OCCUPATIONS, Occupation
from src.models.user_profile import Profile
from src.models.welfare import FutureRecommendation
from src.services.scoring import aggregate_household_income

MAX_FUTURE_RECOMMENDATIONS: Final[int] = 8

_PENSION_PLANNING_AGE: Final[int] = 45
_PENSION_URGENT_AGE: Final[int] = 55
_SENIOR_WINDOW: Final[range] = range(58, 65)
_FAMILY_WELFARE_SIZE: Final[int] = 4
_FAMILY_WELFARE_INCOME: Final[float] = 300_000


def plan_future_recommendations(profile: Profile) -> list[FutureRecommendation]:
    """Return at most eight advisory actions for *profile*, in priority order."""
    recs: list[FutureRecommendation] = []
    age = profile.age
    household_income = aggregate_household_income(profile)
    occupations = profile.household_occupations

    if not profile.has_health_insurance:
        recs.append(FutureRecommendation(
            year_range="0–2 years",
            title="Health coverage",
            action=(
                "Apply for Ayushman Bharat (PM-JAY) on the official portal "
                "to get Rs 5 lakh family health cover."
            ),
        ))

    if not profile.has_pension and age >= _PENSION_PLANNING_AGE:
        recs.append(FutureRecommendation(
            year_range="0–1 year" if age >= _PENSION_URGENT_AGE else "5–10 years",
            title="Pension planning",
            action=(
                "Enroll in Indira Gandhi National Old Age Pension (IGNOAP) when "
                "you turn 60. Check NSAP portal for eligibility."
            ),
        ))

    if age in _SENIOR_WINDOW:
        recs.append(FutureRecommendation(
            year_range="0–2 years",
            title="Senior citizen schemes",
            action=(
                "You will be eligible for senior pension and Rashtriya Vayoshri "
                "Yojana soon. Keep Aadhaar and BPL documents ready."
            ),
        ))

    if Occupation.STUDENT in occupations:
        recs.append(FutureRecommendation(
            year_range="0–5 years",
            title="Education support",
            action=(
                "Apply for National Scholarship Portal (NSP) when the student is "
                "in class 9 or above. Renew annually with mark sheets."
            ),
        ))

    if Occupation.FARMER in occupations:
        recs.append(FutureRecommendation(
            year_range="0–10 years",
            title="Agriculture schemes",
            action=(
                "Keep PM-KISAN and Kisan Credit Card (KCC) updated. Get Soil "
                "Health Card every 2 years for better crop planning."
            ),
        ))

    if profile.family_size >= _FAMILY_WELFARE_SIZE and household_income < _FAMILY_WELFARE_INCOME:
        recs.append(FutureRecommendation(
            year_range="0–5 years",
            title="Family welfare",
            action=(
                "Apply for PM-JAY for entire family. Consider Skill India or "
                "MUDRA if any member wants to start a small business."
            ),
        ))

    if any(o in HOMEMAKER_OCCUPATIONS for o in occupations):
        recs.append(FutureRecommendation(
            year_range="0–10 years",
            title="Women & livelihood",
            action=(
                "Check Beti Bachao Beti Padhao for girl children and Mahila "
                "Shakti Kendra for skill development on WCD portal."
            ),
        ))

    recs.append(FutureRecommendation(
        year_range="0–10 years",
        title="Financial inclusion",
        action=(
            "Ensure all family members have PM Jan Dhan accounts. Link "
            "Aadhaar for direct benefit transfers."
        ),
    ))

    if profile.education in BASIC_EDUCATION_LEVELS:
        recs.append(FutureRecommendation(
            year_range="0–5 years",
            title="Adult education",
            action=(
                "Enroll in Digital Literacy or Skill India programs to improve "
                "employability and access to more schemes."
            ),
        ))

    return recs[:MAX_FUTURE_RECOMMENDATIONS]
