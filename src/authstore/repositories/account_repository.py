"""Abstract repository interface for linked provider accounts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class AccountData:
    """Immutable account row, keyed by (provider, provider_account_id)."""

    user_id: str
    provider: str
    provider_account_id: str
    type: str
    access_token: str | None = None
    expires_at: int | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    scope: str | None = None
    session_state: str | None = None
    token_type: str | None = None


class AccountRepository(ABC):
    """Abstract repository for linked provider accounts."""

    @abstractmethod
    async def create(self, account: AccountData) -> AccountData:
        """Insert an account row and return it as stored."""

    @abstractmethod
    async def delete(self, provider: str, provider_account_id: str) -> bool:
        """Delete one account. Returns False when nothing matched."""

    @abstractmethod
    async def delete_all_for_user(self, user_id: str) -> int:
        """Delete every account owned by a user. Returns the row count."""
