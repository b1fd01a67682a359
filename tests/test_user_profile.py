"""Tests for household profile models.

Covers FamilyMember, the family-size invariant on Profile, the family
helpers (add / resize) and conversion to a ProfileDraft.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.enums import EducationLevel, Gender, Occupation, Residence
from src.models.user_profile import FamilyMember, Profile, ProfileDraft


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wife() -> FamilyMember:
    return FamilyMember(occupation=Occupation.HOUSEWIFE, annual_income=0)


@pytest.fixture
def son() -> FamilyMember:
    return FamilyMember(occupation=Occupation.STUDENT, annual_income=0)


@pytest.fixture
def farmer(wife: FamilyMember, son: FamilyMember) -> Profile:
    return Profile(
        user_id="user-1",
        age=28,
        income=180_000,
        occupation=Occupation.FARMER,
        education=EducationLevel.SECONDARY,
        gender=Gender.MALE,
        state="Tamil Nadu",
        family_size=5,
        family_members=[wife, son],
    )


# ---------------------------------------------------------------------------
# FamilyMember
# ---------------------------------------------------------------------------


class TestFamilyMember:
    def test_income_defaults_to_zero(self) -> None:
        assert FamilyMember(occupation=Occupation.RETIRED).annual_income == 0

    def test_income_may_be_missing(self) -> None:
        assert FamilyMember(occupation=Occupation.STUDENT, annual_income=None).annual_income is None

    def test_negative_income_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FamilyMember(occupation=Occupation.FARMER, annual_income=-1)

    def test_unknown_occupation_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FamilyMember(occupation="Astronaut")


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


class TestProfile:
    def test_defaults(self) -> None:
        profile = Profile(
            age=30,
            occupation=Occupation.UNEMPLOYED,
            education=EducationLevel.NONE,
            gender=Gender.OTHER,
        )
        assert profile.income == 0
        assert profile.family_size == 1
        assert profile.family_members == ()
        assert profile.residence is Residence.RURAL
        assert profile.has_health_insurance is False
        assert profile.has_pension is False
        assert len(profile.user_id) == 32

    def test_generated_ids_are_unique(self) -> None:
        kwargs = {"age": 30, "occupation": "Farmer", "education": "None", "gender": "Male"}
        assert Profile(**kwargs).user_id != Profile(**kwargs).user_id

    @pytest.mark.parametrize("field", ["age", "income"])
    def test_negative_values_rejected(self, field: str) -> None:
        data = {"age": 30, "occupation": "Farmer", "education": "None", "gender": "Male", field: -1}
        with pytest.raises(ValidationError):
            Profile(**data)

    def test_family_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Profile(age=30, occupation="Farmer", education="None", gender="Male", family_size=0)

    def test_surplus_members_trimmed(self, wife: FamilyMember, son: FamilyMember) -> None:
        profile = Profile(
            age=30,
            occupation=Occupation.FARMER,
            education=EducationLevel.PRIMARY,
            gender=Gender.MALE,
            family_size=2,
            family_members=[wife, son, son],
        )
        assert profile.family_members == (wife,)

    def test_single_person_household_has_no_members(self, wife: FamilyMember) -> None:
        profile = Profile(
            age=30,
            occupation=Occupation.FARMER,
            education=EducationLevel.PRIMARY,
            gender=Gender.MALE,
            family_members=[wife],
        )
        assert profile.family_members == ()

    def test_household_occupations(self, farmer: Profile) -> None:
        assert farmer.household_occupations == [
            Occupation.FARMER,
            Occupation.HOUSEWIFE,
            Occupation.STUDENT,
        ]

    def test_json_round_trip(self, farmer: Profile) -> None:
        restored = Profile.model_validate_json(farmer.model_dump_json())
        assert restored == farmer


# ---------------------------------------------------------------------------
# Family helpers
# ---------------------------------------------------------------------------


class TestFamilyHelpers:
    def test_max_family_members(self, farmer: Profile) -> None:
        assert farmer.max_family_members == 4
        assert farmer.can_add_family_member is True

    def test_add_family_member(self, farmer: Profile, son: FamilyMember) -> None:
        updated = farmer.add_family_member(son)
        assert len(updated.family_members) == 3
        assert len(farmer.family_members) == 2, "original must be unchanged"

    def test_add_when_full_is_a_no_op(self, farmer: Profile, son: FamilyMember) -> None:
        full = farmer.add_family_member(son).add_family_member(son)
        assert len(full.family_members) == 4
        assert full.can_add_family_member is False
        assert full.add_family_member(son) is full

    def test_shrinking_family_drops_latest_members(self, farmer: Profile, wife: FamilyMember) -> None:
        smaller = farmer.resize_family(2)
        assert smaller.family_size == 2
        assert smaller.family_members == (wife,)
        assert smaller.user_id == farmer.user_id

    def test_shrink_to_one(self, farmer: Profile) -> None:
        assert farmer.resize_family(1).family_members == ()

    def test_growing_family_keeps_members(self, farmer: Profile) -> None:
        larger = farmer.resize_family(8)
        assert larger.family_members == farmer.family_members
        assert larger.max_family_members == 7

    def test_resize_to_zero_rejected(self, farmer: Profile) -> None:
        with pytest.raises(ValidationError):
            farmer.resize_family(0)

    @pytest.mark.parametrize("size", range(1, 8))
    def test_invariant_holds_after_resize(self, farmer: Profile, size: int) -> None:
        resized = farmer.resize_family(size)
        assert len(resized.family_members) <= resized.family_size - 1

    def test_family_size_cannot_be_assigned(self, farmer: Profile) -> None:
        with pytest.raises(ValidationError):
            farmer.family_size = 1
        assert farmer.family_size == 5
        assert len(farmer.family_members) <= farmer.family_size - 1

    def test_member_list_cannot_be_reassigned(self, farmer: Profile, son: FamilyMember) -> None:
        with pytest.raises(ValidationError):
            farmer.family_members = (son, son, son, son, son)
        assert len(farmer.family_members) == 2

    def test_member_list_cannot_grow_in_place(self, farmer: Profile, son: FamilyMember) -> None:
        with pytest.raises(AttributeError):
            farmer.family_members.append(son)  # type: ignore[attr-defined]
        assert len(farmer.family_members) == 2

    def test_add_family_member_revalidates(self, farmer: Profile, son: FamilyMember) -> None:
        small = farmer.resize_family(2)
        assert small.add_family_member(son) is small
        assert small.family_members == (farmer.family_members[0],)


# ---------------------------------------------------------------------------
# ProfileDraft
# ---------------------------------------------------------------------------


class TestProfileDraft:
    def test_all_fields_optional(self) -> None:
        draft = ProfileDraft()
        assert draft.age is None
        assert draft.occupation is None

    def test_accepts_implausible_values(self) -> None:
        draft = ProfileDraft(age=-5, family_size=0, income=-10)
        assert draft.age == -5

    @pytest.mark.parametrize("field", ["occupation", "education", "gender"])
    def test_enum_fields_still_validated(self, field: str) -> None:
        with pytest.raises(ValidationError):
            ProfileDraft(**{field: "Unknown value"})

    def test_from_profile(self, farmer: Profile) -> None:
        draft = farmer.to_draft()
        assert draft == ProfileDraft(
            age=28,
            income=180_000,
            occupation=Occupation.FARMER,
            education=EducationLevel.SECONDARY,
            gender=Gender.MALE,
            family_size=5,
        )
