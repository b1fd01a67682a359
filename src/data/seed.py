"""Data seeding utilities for the scheme catalog and demo households.

Loads scheme definitions from the bundled ``schemes/catalog.json`` and the
demonstration households (profiles, applications and notifications) from
``demo_households.json``.  Designed to run once at application startup.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import structlog
from pydantic import ValidationError

from src.models.application import Application, Notification
from src.models.scheme import Scheme
from src.models.user_profile import Profile

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

_DATA_DIR: Path = Path(__file__).resolve().parent
_CATALOG_PATH: Path = _DATA_DIR / "schemes" / "catalog.json"
_DEMO_HOUSEHOLDS_PATH: Path = _DATA_DIR / "demo_households.json"


@dataclass(slots=True)
class DemoData:
    """Seed records for the in-memory repositories."""

    profiles: list[Profile] = field(default_factory=list)
    applications: list[Application] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)


def _read_json(file_path: Path) -> object:
    if not file_path.exists():
        raise FileNotFoundError(f"Seed data file not found: {file_path}")
    with file_path.open("r", encoding="utf-8") as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Scheme catalog
# ---------------------------------------------------------------------------


def load_schemes(path: Path | str | None = None) -> tuple[Scheme, ...]:
    """Load the scheme catalog from a JSON file.

    Parameters
    ----------
    path:
        Path to the JSON file.  Defaults to the bundled ``catalog.json``.

    Returns
    -------
    tuple[Scheme, ...]
        Validated, immutable scheme records in file order.  Records that
        fail validation are skipped and logged.

    Raises
    ------
    FileNotFoundError
        If the JSON file does not exist.
    json.JSONDecodeError
        If the JSON is malformed.
    """
    file_path = Path(path) if path is not None else _CATALOG_PATH
    raw_schemes = _read_json(file_path)

    schemes: list[Scheme] = []
    for raw in raw_schemes:
        try:
            schemes.append(Scheme.model_validate(raw))
        except ValidationError:
            logger.warning(
                "seed.parse_error",
                scheme_id=raw.get("scheme_id", "unknown") if isinstance(raw, dict) else "unknown",
                exc_info=True,
            )

    logger.info("seed.loaded_schemes", count=len(schemes), source=str(file_path))
    return tuple(schemes)


# ---------------------------------------------------------------------------
# Demo households
# ---------------------------------------------------------------------------


def load_demo_households(path: Path | str | None = None) -> DemoData:
    """Load the demonstration profiles, applications and notifications."""
    file_path = Path(path) if path is not None else _DEMO_HOUSEHOLDS_PATH
    raw = _read_json(file_path)

    data = DemoData(
        profiles=[Profile.model_validate(p) for p in raw.get("profiles", [])],
        applications=[Application.model_validate(a) for a in raw.get("applications", [])],
        notifications=[Notification.model_validate(n) for n in raw.get("notifications", [])],
    )

    logger.info(
        "seed.loaded_demo_households",
        profiles=len(data.profiles),
        applications=len(data.applications),
        notifications=len(data.notifications),
    )
    return data
