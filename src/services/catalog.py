"""Read-only lookups over the scheme catalog."""

from __future__ import annotations

from collections.abc import Iterable

from src.models.enums import SchemeDomain
from src.models.scheme import Scheme
from src.models.user_profile import Profile
from src.services.eligibility import filter_eligible_schemes


def find_scheme(catalog: Iterable[Scheme], scheme_id: str) -> Scheme | None:
    for scheme in catalog:
        if scheme.scheme_id == scheme_id:
            return scheme
    return None


def browse_schemes(
    catalog: Iterable[Scheme],
    *,
    domain: SchemeDomain | None = None,
    eligible_for: Profile | None = None,
) -> list[Scheme]:
    """Catalog view, optionally narrowed to one domain and/or to the
    schemes a given profile qualifies for."""
    schemes = list(catalog)
    if eligible_for is not None:
        schemes = filter_eligible_schemes(eligible_for, schemes)
    if domain is not None:
        schemes = [s for s in schemes if s.domain == domain]
    return schemes
