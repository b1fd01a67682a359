"""Storage interfaces for the collaborators the welfare engine reads from.

The engine itself is stateless.  Profiles, scheme applications and
dashboard notifications live behind the protocols below so that the
service layer can be wired to any backing store.  In-memory
implementations are provided for the API process and for tests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable
from uuid import uuid4

import structlog

from src.models.application import Application, Notification
from src.models.enums import ApplicationStatus
from src.models.user_profile import Profile

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Identifier generation
# ---------------------------------------------------------------------------

IdGenerator = Callable[[], str]


def random_id() -> str:
    """Short random identifier for applications and notifications."""
    return uuid4().hex[:13]


def sequential_ids(prefix: str = "id") -> IdGenerator:
    """Deterministic generator yielding ``prefix-1``, ``prefix-2``, ..."""
    counter = 0

    def _next() -> str:
        nonlocal counter
        counter += 1
        return f"{prefix}-{counter}"

    return _next


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ProfileRepository(Protocol):
    """Profiles keyed by user id."""

    def get(self, user_id: str) -> Profile | None: ...

    def save(self, profile: Profile) -> None: ...

    def list(self) -> list[Profile]: ...

    def delete(self, user_id: str) -> bool: ...


@runtime_checkable
class ApplicationRepository(Protocol):
    """Scheme applications and their status."""

    def add(self, user_id: str, scheme_id: str) -> Application: ...

    def get(self, application_id: str) -> Application | None: ...

    def update_status(self, application_id: str, status: ApplicationStatus) -> Application | None: ...

    def for_user(self, user_id: str) -> list[Application]: ...

    def completed_count(self, user_id: str) -> int: ...

    def all(self) -> list[Application]: ...


@runtime_checkable
class NotificationRepository(Protocol):
    """Per-user dashboard notifications."""

    def add(self, user_id: str, message: str) -> Notification: ...

    def for_user(self, user_id: str) -> list[Notification]: ...


# ---------------------------------------------------------------------------
# In-memory implementations
# ---------------------------------------------------------------------------


class InMemoryProfileRepository:
    """Dict-backed profile store; insertion order is preserved."""

    __slots__ = ("_profiles",)

    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._profiles: dict[str, Profile] = {p.user_id: p for p in profiles}

    def get(self, user_id: str) -> Profile | None:
        return self._profiles.get(user_id)

    def save(self, profile: Profile) -> None:
        self._profiles[profile.user_id] = profile
        logger.debug("profiles.saved", user_id=profile.user_id)

    def list(self) -> list[Profile]:
        return list(self._profiles.values())

    def delete(self, user_id: str) -> bool:
        return self._profiles.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._profiles)


class InMemoryApplicationRepository:
    """List-backed application tracker."""

    __slots__ = ("_applications", "_id_generator")

    def __init__(
        self,
        applications: Iterable[Application] = (),
        *,
        id_generator: IdGenerator = random_id,
    ) -> None:
        self._applications: list[Application] = list(applications)
        self._id_generator = id_generator

    def add(self, user_id: str, scheme_id: str) -> Application:
        application = Application(
            application_id=self._id_generator(),
            user_id=user_id,
            scheme_id=scheme_id,
        )
        self._applications.append(application)
        return application

    def get(self, application_id: str) -> Application | None:
        for application in self._applications:
            if application.application_id == application_id:
                return application
        return None

    def update_status(self, application_id: str, status: ApplicationStatus) -> Application | None:
        for idx, application in enumerate(self._applications):
            if application.application_id == application_id:
                updated = application.model_copy(update={"status": status})
                self._applications[idx] = updated
                return updated
        return None

    def for_user(self, user_id: str) -> list[Application]:
        return [a for a in self._applications if a.user_id == user_id]

    def completed_count(self, user_id: str) -> int:
        return sum(1 for a in self.for_user(user_id) if a.status == ApplicationStatus.COMPLETED)

    def all(self) -> list[Application]:
        return list(self._applications)


class InMemoryNotificationRepository:
    __slots__ = ("_id_generator", "_notifications")

    def __init__(
        self,
        notifications: Iterable[Notification] = (),
        *,
        id_generator: IdGenerator = random_id,
    ) -> None:
        self._notifications: list[Notification] = list(notifications)
        self._id_generator = id_generator

    def add(self, user_id: str, message: str) -> Notification:
        notification = Notification(
            notification_id=self._id_generator(),
            user_id=user_id,
            message=message,
        )
        self._notifications.append(notification)
        return notification

    def for_user(self, user_id: str) -> list[Notification]:
        """Newest first; same-day notifications keep insertion order."""
        mine = [n for n in self._notifications if n.user_id == user_id]
        return sorted(mine, key=lambda n: n.created_at, reverse=True)
