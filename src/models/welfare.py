"""Derived value objects produced by the welfare engine.

None of these are persisted: they are recomputed from a ``Profile`` and the
scheme catalog on every call.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.enums import RiskCategory
from src.models.scheme import Scheme


class WelfareScore(BaseModel):
    """Composite 0-100 welfare-need indicator with its sub-scores."""

    model_config = {"frozen": True}

    total: int = Field(ge=0, le=100)
    income: int  # 0-30
    dependents: int  # 0-20
    insurance: int  # 0-25
    occupation: int  # 0-15
    education: int  # 0-10
    completion_bonus: int = 0  # 0-10
    risk_category: RiskCategory


class SchemeRecommendation(BaseModel):
    """An eligible scheme with its relevance score and rationale."""

    model_config = {"frozen": True}

    scheme: Scheme
    match_score: int  # ordering only; not bounded
    reason: str


class FutureRecommendation(BaseModel):
    """A time-boxed advisory action."""

    model_config = {"frozen": True}

    year_range: str
    title: str
    action: str
