"""Household profile models for Yojana Saathi.

A ``Profile`` describes one citizen (the primary earner) together with the
earning members of their household.  The household, not the individual,
is the unit for income ceilings: every eligibility and ranking decision
uses primary income plus the declared incomes of family members.

Invariant: ``len(family_members) <= family_size - 1``.  The primary
citizen counts toward ``family_size`` but never appears in
``family_members``.  Oversized member lists are truncated, not rejected,
so that shrinking the household never blocks a profile update.  Profiles
are frozen; every change goes through a validated copy.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

import structlog
from pydantic import BaseModel, Field, model_validator

from src.models.enums import EducationLevel, Gender, Occupation, Residence

logger = structlog.get_logger(__name__)


class FamilyMember(BaseModel):
    """An earning (or dependent) member of the household."""

    occupation: Occupation
    annual_income: float | None = Field(default=0.0, ge=0)  # None counts as 0


class Profile(BaseModel):
    """Declared socio-economic profile of a citizen and their household."""

    model_config = {"frozen": True}

    user_id: str = Field(default_factory=lambda: uuid4().hex)

    # ----------------------------------------------------------------
    # Personal
    # ----------------------------------------------------------------
    age: int = Field(ge=0)
    gender: Gender
    education: EducationLevel
    occupation: Occupation

    # ----------------------------------------------------------------
    # Economic (annual, INR)
    # ----------------------------------------------------------------
    income: float = Field(default=0.0, ge=0)

    # ----------------------------------------------------------------
    # Location
    # ----------------------------------------------------------------
    residence: Residence = Residence.RURAL
    state: str = ""

    # ----------------------------------------------------------------
    # Household
    # ----------------------------------------------------------------
    family_size: int = Field(default=1, ge=1)
    family_members: tuple[FamilyMember, ...] = ()

    # ----------------------------------------------------------------
    # Existing coverage
    # ----------------------------------------------------------------
    has_health_insurance: bool = False
    has_pension: bool = False

    @model_validator(mode="before")
    @classmethod
    def _cap_family_members(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        members = data.get("family_members")
        if not isinstance(members, (list, tuple)):
            return data
        try:
            limit = max(0, int(data.get("family_size", 1)) - 1)
        except (TypeError, ValueError):
            return data  # field validation reports the bad size

        if len(members) > limit:
            logger.debug(
                "profile.family_members_trimmed",
                user_id=data.get("user_id"),
                declared=len(members),
                kept=limit,
            )
            data = {**data, "family_members": members[:limit]}
        return data

    # ----------------------------------------------------------------
    # Family helpers
    # ----------------------------------------------------------------

    @property
    def max_family_members(self) -> int:
        """How many members may be listed besides the primary citizen."""
        return max(0, self.family_size - 1)

    @property
    def can_add_family_member(self) -> bool:
        return len(self.family_members) < self.max_family_members

    def add_family_member(self, member: FamilyMember) -> Profile:
        """Return a copy with *member* appended, or ``self`` when full."""
        if not self.can_add_family_member:
            return self
        data = self.model_dump()
        data["family_members"] = [*data["family_members"], member.model_dump()]
        return Profile.model_validate(data)

    def resize_family(self, family_size: int) -> Profile:
        """Return a copy with a new ``family_size`` and a trimmed member list."""
        data = self.model_dump()
        data["family_size"] = family_size
        return Profile.model_validate(data)

    @property
    def household_occupations(self) -> list[Occupation]:
        """Primary occupation followed by each listed member's occupation."""
        return [self.occupation, *(m.occupation for m in self.family_members)]

    def to_draft(self) -> ProfileDraft:
        return ProfileDraft(
            age=self.age,
            income=self.income,
            occupation=self.occupation,
            education=self.education,
            gender=self.gender,
            family_size=self.family_size,
        )


class ProfileDraft(BaseModel):
    """A partially filled profile, as captured while a form is being edited.

    Every field is optional.  The numeric fields (``age``, ``income``,
    ``family_size``) carry no bounds, so implausible values come back as
    advisory warnings instead of being rejected.  ``occupation``,
    ``education`` and ``gender`` stay enum-typed: a value outside their
    enumerations is a validation error, not a warning.
    """

    age: int | None = None
    income: float | None = None
    occupation: Occupation | None = None
    education: EducationLevel | None = None
    gender: Gender | None = None
    family_size: int | None = None
