"""Abstract repository interface for sessions."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

# Both columns are NOT NULL, so an explicit None keeps the stored value
_MERGEABLE_SESSION_FIELDS = ("user_id", "expires")


@dataclass(frozen=True)
class SessionData:
    """Immutable session row."""

    id: str
    session_token: str
    user_id: str
    expires: datetime


def merge_session_changes(
    current: SessionData,
    changes: Mapping[str, Any],
) -> SessionData:
    """Overlay a partial update onto the current session.

    Only ``user_id`` and ``expires`` can change. The session token is the
    lookup key and the id is immutable.
    """
    overrides = {
        field: changes[field]
        for field in _MERGEABLE_SESSION_FIELDS
        if changes.get(field) is not None
    }
    return replace(current, **overrides)


class SessionRepository(ABC):
    """Abstract repository for sessions."""

    @abstractmethod
    async def create(
        self,
        session_token: str,
        user_id: str,
        expires: datetime,
    ) -> SessionData:
        """Insert a session row with a generated id.

        Parameters
        ----------
        session_token
            Opaque token the caller uses to resume the session
        user_id
            Owning user's identifier
        expires
            Expiry instant, stored as given

        Returns
        -------
        The persisted row
        """

    @abstractmethod
    async def find_by_token(
        self,
        session_token: str,
        *,
        for_update: bool = False,
    ) -> SessionData | None:
        """Find a session by its token, optionally locking the row."""

    @abstractmethod
    async def update(self, session: SessionData) -> SessionData:
        """Persist ``user_id`` and ``expires`` for the session's token."""

    @abstractmethod
    async def delete(self, session_token: str) -> bool:
        """Delete a session. Returns False when nothing matched."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> int:
        """Delete every session owned by a user. Returns the row count."""
