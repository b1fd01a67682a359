from src.models.application import Application, Notification
from src.models.enums import (
    ApplicationStatus,
    EducationLevel,
    Gender,
    Occupation,
    Residence,
    RiskCategory,
    SchemeDomain,
)
from src.models.scheme import Scheme
from src.models.user_profile import FamilyMember, Profile, ProfileDraft
from src.models.welfare import FutureRecommendation, SchemeRecommendation, WelfareScore

__all__ = [
    "Application",
    "ApplicationStatus",
    "EducationLevel",
    "FamilyMember",
    "FutureRecommendation",
    "Gender",
    "Notification",
    "Occupation",
    "Profile",
    "ProfileDraft",
    "Residence",
    "RiskCategory",
    "Scheme",
    "SchemeDomain",
    "SchemeRecommendation",
    "WelfareScore",
]
