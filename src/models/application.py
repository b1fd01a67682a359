from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from src.models.enums import ApplicationStatus


class Application(BaseModel):
    """A citizen's application to a scheme, tracked through completion."""

    application_id: str
    user_id: str
    scheme_id: str
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_at: date = Field(default_factory=date.today)


class Notification(BaseModel):
    """A short message shown on the citizen's dashboard."""

    notification_id: str
    user_id: str
    message: str
    created_at: date = Field(default_factory=date.today)
