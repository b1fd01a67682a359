"""Advisory plausibility checks for profile data.

The validator never raises and never blocks a save; it only returns
human-readable warnings for values that look implausible together (for
example a student declaring a very high income).  Every rule is
independent and only fires when the fields it needs are present.
"""

from __future__ import annotations

from src.models.enums import HOMEMAKER_OCCUPATIONS, Occupation
from src.models.user_profile import Profile, ProfileDraft

INCOME_LOW_FOR_GOVERNMENT = "Income seems low for a Government employee"
INCOME_LOW_FOR_SALARIED = "Income seems unusually low for salaried employment"
INCOME_HIGH_FOR_STUDENT = "Income seems high for a Student"
INCOME_HIGH_FOR_HOMEMAKER = (
    "Income seems high for Homemaker/Housewife "
    "(consider listing as other occupation if self-employed)"
)
AGE_INVALID = "Age value appears invalid"
AGE_HIGH_FOR_STUDENT = "Age seems high for Student occupation"
FAMILY_SIZE_UNUSUAL = "Family size value appears unusual"


def _income_warnings(income: float, occupation: Occupation) -> list[str]:
    warnings: list[str] = []
    if occupation == Occupation.GOVERNMENT and income < 100_000:
        warnings.append(INCOME_LOW_FOR_GOVERNMENT)
    if occupation == Occupation.SALARIED and income < 50_000:
        warnings.append(INCOME_LOW_FOR_SALARIED)
    if occupation == Occupation.STUDENT and income > 500_000:
        warnings.append(INCOME_HIGH_FOR_STUDENT)
    if occupation in HOMEMAKER_OCCUPATIONS and income > 800_000:
        warnings.append(INCOME_HIGH_FOR_HOMEMAKER)
    return warnings


def validate_profile(draft: ProfileDraft | Profile) -> list[str]:
    """Return advisory warnings for *draft*; an empty list means plausible."""
    if isinstance(draft, Profile):
        draft = draft.to_draft()

    warnings: list[str] = []

    if draft.income is not None and draft.occupation is not None:
        warnings.extend(_income_warnings(draft.income, draft.occupation))

    if draft.age is not None:
        if draft.age < 14 or draft.age > 120:
            warnings.append(AGE_INVALID)
        if draft.occupation == Occupation.STUDENT and draft.age > 50:
            warnings.append(AGE_HIGH_FOR_STUDENT)

    if draft.family_size is not None and (draft.family_size < 1 or draft.family_size > 20):
        warnings.append(FAMILY_SIZE_UNUSUAL)

    return warnings
