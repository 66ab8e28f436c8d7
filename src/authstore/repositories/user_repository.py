"""Abstract repository interface for users."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

# Fields a caller may clear by passing a falsy value
_CLEARABLE_USER_FIELDS = ("name", "email", "email_verified", "image")


@dataclass(frozen=True)
class UserData:
    """Immutable user row."""

    id: str
    name: str | None
    email: str | None
    email_verified: datetime | None
    image: str | None


def merge_user_changes(current: UserData, changes: Mapping[str, Any]) -> UserData:
    """Overlay a partial update onto the current user.

    Fields missing from ``changes`` keep their stored value. Fields that are
    present but falsy (``None``, ``""``) are cleared to ``None``. The id is
    immutable and any ``id`` key in ``changes`` is ignored.
    """
    overrides = {
        field: changes[field] or None
        for field in _CLEARABLE_USER_FIELDS
        if field in changes
    }
    return replace(current, **overrides)


class UserRepository(ABC):
    """Abstract repository for users."""

    @abstractmethod
    async def create(
        self,
        name: str | None,
        email: str | None,
        email_verified: datetime | None,
        image: str | None,
    ) -> UserData:
        """Insert a new user row with a generated id.

        Parameters
        ----------
        name
            Display name, or None
        email
            Email address, or None
        email_verified
            When the email was verified, or None
        image
            Avatar URI, or None

        Returns
        -------
        The persisted row including its generated id
        """

    @abstractmethod
    async def find_by_id(
        self,
        user_id: str,
        *,
        for_update: bool = False,
    ) -> UserData | None:
        """Find a user by id.

        Parameters
        ----------
        user_id
            The user's identifier
        for_update
            Lock the row until the surrounding transaction ends

        Returns
        -------
        The user if found, None otherwise
        """

    @abstractmethod
    async def find_by_email(self, email: str) -> UserData | None:
        """Find a user by exact email address."""

    @abstractmethod
    async def find_by_account(
        self,
        provider: str,
        provider_account_id: str,
    ) -> UserData | None:
        """Find the user owning a linked provider account."""

    @abstractmethod
    async def update(self, user: UserData) -> UserData:
        """Persist every mutable field of ``user``.

        Returns
        -------
        The row as stored after the update
        """

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user row.

        Returns
        -------
        True if a row was deleted, False if none matched
        """
