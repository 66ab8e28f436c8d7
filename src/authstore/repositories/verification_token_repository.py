"""Abstract repository interface for one-time verification tokens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class VerificationTokenData:
    """Immutable verification token row."""

    identifier: str
    token: str
    expires: datetime


class VerificationTokenRepository(ABC):
    """Abstract repository for verification tokens."""

    @abstractmethod
    async def create(
        self,
        identifier: str,
        expires: datetime,
        token: str,
    ) -> VerificationTokenData:
        """Store a new verification token.

        Parameters
        ----------
        identifier
            Who the token was issued to (usually an email address)
        expires
            When the token stops being valid
        token
            The opaque secret

        Returns
        -------
        The persisted row
        """

    @abstractmethod
    async def consume(
        self,
        identifier: str,
        token: str,
    ) -> VerificationTokenData | None:
        """Delete a token and return the deleted row in one statement.

        Parameters
        ----------
        identifier
            Who the token was issued to
        token
            The opaque secret

        Returns
        -------
        The consumed token, or None if no row matched
        """
