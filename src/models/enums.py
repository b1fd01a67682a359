from __future__ import annotations

from enum import StrEnum


class Occupation(StrEnum):
    __slots__ = ()

    STUDENT = "Student"
    FARMER = "Farmer"
    SALARIED = "Salaried"
    SELF_EMPLOYED = "Self-employed"
    GOVERNMENT = "Government"
    UNEMPLOYED = "Unemployed"
    HOUSEWIFE = "Housewife"
    HOMEMAKER = "Homemaker"
    RETIRED = "Retired"
    DAILY_WAGE_WORKER = "Daily wage worker"


class EducationLevel(StrEnum):
    """Highest completed education, least to most."""

    __slots__ = ()

    NONE = "None"
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    HIGHER_SECONDARY = "Higher Secondary"
    GRADUATE = "Graduate"
    POSTGRADUATE = "Postgraduate"


class Gender(StrEnum):
    __slots__ = ()

    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class Residence(StrEnum):
    __slots__ = ()

    RURAL = "Rural"
    URBAN = "Urban"


class SchemeDomain(StrEnum):
    __slots__ = ()

    EDUCATION = "Education"
    AGRICULTURE = "Agriculture"
    HEALTH = "Health"
    WOMEN = "Women"
    SENIOR = "Senior"
    MSME = "MSME"
    FINANCIAL = "Financial"


class RiskCategory(StrEnum):
    __slots__ = ()

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ApplicationStatus(StrEnum):
    __slots__ = ()

    APPLIED = "Applied"
    APPROVED = "Approved"
    COMPLETED = "Completed"


# Occupations treated as home-based caregiving work.
HOMEMAKER_OCCUPATIONS: frozenset[Occupation] = frozenset({
    Occupation.HOUSEWIFE,
    Occupation.HOMEMAKER,
})

# Education levels that signal a basic-literacy gap.
BASIC_EDUCATION_LEVELS: frozenset[EducationLevel] = frozenset({
    EducationLevel.NONE,
    EducationLevel.PRIMARY,
})
