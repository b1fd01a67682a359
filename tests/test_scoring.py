"""Tests for household income aggregation and welfare scoring.

Covers the five sub-score tables, the completion bonus cap, the 100-point
clamp and the risk-category thresholds.
"""

from __future__ import annotations

import pytest

from src.models.enums import EducationLevel, Gender, Occupation, RiskCategory
from src.models.user_profile import FamilyMember, Profile
from src.services.scoring import (
    aggregate_household_income,
    calculate_welfare_score,
    classify_risk,
    completion_bonus,
    dependents_score,
    education_score,
    income_score,
    insurance_score,
    occupation_score,
)


def _profile(**overrides) -> Profile:
    data = {
        "age": 28,
        "income": 180_000,
        "occupation": Occupation.FARMER,
        "education": EducationLevel.SECONDARY,
        "gender": Gender.MALE,
        "family_size": 5,
        "has_health_insurance": False,
        "has_pension": False,
    }
    data.update(overrides)
    return Profile(**data)


# ---------------------------------------------------------------------------
# Household income
# ---------------------------------------------------------------------------


class TestAggregateHouseholdIncome:
    def test_no_members(self) -> None:
        assert aggregate_household_income(_profile(income=120_000)) == 120_000

    def test_sums_member_incomes(self) -> None:
        profile = _profile(
            income=250_000,
            family_size=6,
            family_members=[
                FamilyMember(occupation=Occupation.HOMEMAKER, annual_income=0),
                FamilyMember(occupation=Occupation.DAILY_WAGE_WORKER, annual_income=72_000),
            ],
        )
        assert aggregate_household_income(profile) == 322_000

    def test_missing_member_income_counts_as_zero(self) -> None:
        profile = _profile(
            income=100_000,
            family_members=[FamilyMember(occupation=Occupation.STUDENT, annual_income=None)],
        )
        assert aggregate_household_income(profile) == 100_000

    def test_zero_income_household(self) -> None:
        assert aggregate_household_income(_profile(income=0)) == 0


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------


class TestIncomeScore:
    @pytest.mark.parametrize(
        ("income", "expected"),
        [
            (0, 30),
            (100_000, 30),
            (100_001, 25),
            (200_000, 25),
            (300_000, 20),
            (500_000, 15),
            (800_000, 10),
            (800_001, 5),
            (5_000_000, 5),
        ],
    )
    def test_brackets(self, income: float, expected: int) -> None:
        assert income_score(income) == expected

    def test_non_increasing(self) -> None:
        incomes = [0, 50_000, 100_000, 150_000, 250_000, 400_000, 700_000, 900_000, 2_000_000]
        scores = [income_score(i) for i in incomes]
        assert scores == sorted(scores, reverse=True)


class TestDependentsScore:
    @pytest.mark.parametrize(
        ("size", "expected"),
        [(1, 4), (2, 4), (3, 8), (4, 12), (5, 16), (6, 16), (7, 20), (12, 20)],
    )
    def test_tiers(self, size: int, expected: int) -> None:
        assert dependents_score(size) == expected


class TestInsuranceScore:
    def test_no_coverage(self) -> None:
        assert insurance_score(False, False) == 25

    def test_missing_insurance_only(self) -> None:
        assert insurance_score(False, True) == 18

    def test_missing_pension_only(self) -> None:
        assert insurance_score(True, False) == 12

    def test_fully_covered(self) -> None:
        assert insurance_score(True, True) == 5


class TestOccupationScore:
    @pytest.mark.parametrize(
        ("occupation", "expected"),
        [
            (Occupation.UNEMPLOYED, 15),
            (Occupation.DAILY_WAGE_WORKER, 14),
            (Occupation.FARMER, 12),
            (Occupation.STUDENT, 10),
            (Occupation.HOUSEWIFE, 10),
            (Occupation.HOMEMAKER, 10),
            (Occupation.RETIRED, 10),
            (Occupation.SELF_EMPLOYED, 8),
            (Occupation.SALARIED, 4),
            (Occupation.GOVERNMENT, 2),
        ],
    )
    def test_table(self, occupation: Occupation, expected: int) -> None:
        assert occupation_score(occupation) == expected

    def test_accepts_plain_string(self) -> None:
        assert occupation_score("Daily wage worker") == 14

    @pytest.mark.parametrize("unknown", ["Astronaut", "", None])
    def test_unknown_defaults_to_8(self, unknown) -> None:
        assert occupation_score(unknown) == 8


class TestEducationScore:
    @pytest.mark.parametrize(
        ("education", "expected"),
        [
            (EducationLevel.NONE, 10),
            (EducationLevel.PRIMARY, 8),
            (EducationLevel.SECONDARY, 6),
            (EducationLevel.HIGHER_SECONDARY, 5),
            (EducationLevel.GRADUATE, 3),
            (EducationLevel.POSTGRADUATE, 1),
        ],
    )
    def test_table(self, education: EducationLevel, expected: int) -> None:
        assert education_score(education) == expected

    @pytest.mark.parametrize("unknown", ["Doctorate", None])
    def test_unknown_defaults_to_5(self, unknown) -> None:
        assert education_score(unknown) == 5


class TestCompletionBonus:
    def test_two_points_each(self) -> None:
        assert completion_bonus(0) == 0
        assert completion_bonus(3) == 6

    def test_capped_at_10(self) -> None:
        assert completion_bonus(5) == 10
        assert completion_bonus(10) == 10

    def test_negative_count_gives_no_bonus(self) -> None:
        assert completion_bonus(-3) == 0


class TestClassifyRisk:
    @pytest.mark.parametrize(
        ("total", "expected"),
        [
            (100, RiskCategory.HIGH),
            (65, RiskCategory.HIGH),
            (64, RiskCategory.MEDIUM),
            (40, RiskCategory.MEDIUM),
            (39, RiskCategory.LOW),
            (0, RiskCategory.LOW),
        ],
    )
    def test_thresholds(self, total: int, expected: RiskCategory) -> None:
        assert classify_risk(total) == expected


# ---------------------------------------------------------------------------
# Composite score
# ---------------------------------------------------------------------------


class TestCalculateWelfareScore:
    def test_young_farmer_household(self) -> None:
        score = calculate_welfare_score(_profile(), 0)

        assert score.income == 25
        assert score.dependents == 16
        assert score.insurance == 25
        assert score.occupation == 12
        assert score.education == 6
        assert score.completion_bonus == 0
        assert score.total == 84
        assert score.risk_category == RiskCategory.HIGH

    def test_uses_household_income_for_bracket(self) -> None:
        profile = _profile(
            income=90_000,
            family_members=[FamilyMember(occupation=Occupation.SALARIED, annual_income=400_000)],
        )
        assert calculate_welfare_score(profile).income == 15

    def test_completion_bonus_capped_at_10(self) -> None:
        profile = _profile(
            income=1_000_000,
            occupation=Occupation.GOVERNMENT,
            education=EducationLevel.POSTGRADUATE,
            family_size=1,
            has_health_insurance=True,
            has_pension=True,
        )
        base = calculate_welfare_score(profile, 0).total
        assert calculate_welfare_score(profile, 10).total == base + 10
        assert calculate_welfare_score(profile, 10).completion_bonus == 10

    def test_total_clamped_to_100(self) -> None:
        profile = _profile(
            income=0,
            occupation=Occupation.UNEMPLOYED,
            education=EducationLevel.NONE,
            family_size=8,
        )
        score = calculate_welfare_score(profile, 10)
        assert score.income + score.dependents + score.insurance + score.occupation + score.education == 100
        assert score.total == 100
        assert score.risk_category == RiskCategory.HIGH

    def test_well_off_household_is_low_risk(self) -> None:
        profile = _profile(
            income=1_000_000,
            occupation=Occupation.GOVERNMENT,
            education=EducationLevel.POSTGRADUATE,
            family_size=1,
            has_health_insurance=True,
            has_pension=True,
        )
        score = calculate_welfare_score(profile)
        assert score.total == 5 + 4 + 5 + 2 + 1
        assert score.risk_category == RiskCategory.LOW

    def test_medium_risk_household(self) -> None:
        profile = _profile(
            income=250_000,
            occupation=Occupation.SALARIED,
            education=EducationLevel.GRADUATE,
            family_size=3,
            has_health_insurance=True,
        )
        score = calculate_welfare_score(profile)
        assert score.total == 20 + 8 + 12 + 4 + 3
        assert score.risk_category == RiskCategory.MEDIUM

    @pytest.mark.parametrize("completed", [0, 1, 4, 5, 50])
    @pytest.mark.parametrize("occupation", list(Occupation))
    def test_total_always_within_bounds(self, occupation: Occupation, completed: int) -> None:
        for income in (0, 150_000, 900_000):
            for family_size in (1, 4, 9):
                profile = _profile(income=income, occupation=occupation, family_size=family_size)
                total = calculate_welfare_score(profile, completed).total
                assert 0 <= total <= 100
