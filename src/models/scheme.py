from __future__ import annotations

from pydantic import BaseModel, Field

from src.models.enums import Gender, Occupation, SchemeDomain


class Scheme(BaseModel):
    """A government welfare scheme from the static catalog.

    Only the eligibility fields (age band, income ceiling, occupation
    allow-list, gender) and ``domain`` take part in computation; the
    rest is descriptive.
    """

    model_config = {"frozen": True}

    scheme_id: str
    name: str
    domain: SchemeDomain
    description: str = ""

    # -- Hard eligibility ------------------------------------------------
    min_age: int = 0
    max_age: int = 120
    income_limit: float  # household, annual INR
    occupation_required: tuple[Occupation, ...] = ()  # empty -> any occupation
    gender_required: Gender | None = None

    # -- Descriptive -----------------------------------------------------
    benefits: str = ""
    risks: str = ""
    required_documents: tuple[str, ...] = Field(default_factory=tuple)
    estimated_financial_impact: float = 0.0
    official_portal_url: str | None = None
