"""Identity store adapter.

Binds the authentication framework's user, account, session and
verification-token operations to the relational store. Every public
method is one unit of work: it opens a session from the shared pool,
runs inside a single transaction and commits on success or rolls back
on any exception.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from authstore.exceptions import (
    MissingIdentifierError,
    SessionNotFoundError,
    UserNotFoundError,
)
from authstore.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    create_engine_from_settings,
    create_session_maker,
)
from authstore.observability import LoggingObserver, OperationObserver, observed
from authstore.repositories import (
    AccountData,
    merge_session_changes,
    merge_user_changes,
)
from authstore.schemas import (
    AdapterAccount,
    AdapterSession,
    AdapterUser,
    SessionAndUser,
    SessionUpdate,
    UserCreate,
    UserUpdate,
    VerificationToken,
    coerce_contract,
)
from authstore_config.settings import Settings

logger = logging.getLogger(__name__)

# Optional account columns stored as NULL when the framework sends a blank
_OPTIONAL_ACCOUNT_FIELDS = (
    "access_token",
    "expires_at",
    "refresh_token",
    "id_token",
    "scope",
    "session_state",
    "token_type",
)


class IdentityStoreAdapter:
    """Persistence adapter for the authentication framework."""

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        observer: OperationObserver | None = None,
    ):
        self._session_maker = session_maker
        self._observer = observer or LoggingObserver()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        observer: OperationObserver | None = None,
    ) -> IdentityStoreAdapter:
        """Build an adapter with its own engine and connection pool."""
        engine = create_engine_from_settings(settings)
        return cls(create_session_maker(engine), observer=observer)

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[SQLAlchemyRepositoryFactory]:
        async with self._session_maker() as session, session.begin():
            yield SQLAlchemyRepositoryFactory(session)

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @observed("create_user")
    async def create_user(
        self,
        user: UserCreate | Mapping[str, Any],
    ) -> AdapterUser:
        """Insert a user. Unset or blank optional fields are stored as NULL.

        Email collisions surface as the storage layer's IntegrityError.
        """
        data = coerce_contract(UserCreate, user)
        async with self._unit_of_work() as repos:
            created = await repos.user_repository().create(
                name=data.name or None,
                email=data.email or None,
                email_verified=data.email_verified or None,
                image=data.image or None,
            )
        return AdapterUser.model_validate(created)

    @observed("get_user")
    async def get_user(self, user_id: str) -> AdapterUser | None:
        async with self._unit_of_work() as repos:
            user = await repos.user_repository().find_by_id(user_id)
        return AdapterUser.model_validate(user) if user else None

    @observed("get_user_by_email")
    async def get_user_by_email(self, email: str) -> AdapterUser | None:
        async with self._unit_of_work() as repos:
            user = await repos.user_repository().find_by_email(email)
        return AdapterUser.model_validate(user) if user else None

    @observed("get_user_by_account")
    async def get_user_by_account(
        self,
        provider: str,
        provider_account_id: str,
    ) -> AdapterUser | None:
        async with self._unit_of_work() as repos:
            user = await repos.user_repository().find_by_account(
                provider,
                provider_account_id,
            )
        return AdapterUser.model_validate(user) if user else None

    @observed("update_user")
    async def update_user(
        self,
        user_id: str | None,
        changes: UserUpdate | Mapping[str, Any],
    ) -> AdapterUser:
        """Merge ``changes`` over the stored user and persist the result.

        The read and the write share one transaction and the row is locked
        for update, so concurrent writers cannot lose each other's changes.

        Raises
        ------
        MissingIdentifierError
            If ``user_id`` is empty. Storage is not contacted.
        UserNotFoundError
            If no user has this id.
        """
        if not user_id:
            raise MissingIdentifierError("update_user")

        supplied = coerce_contract(UserUpdate, changes).model_dump(exclude_unset=True)
        async with self._unit_of_work() as repos:
            users = repos.user_repository()
            current = await users.find_by_id(user_id, for_update=True)
            if current is None:
                raise UserNotFoundError(user_id)
            updated = await users.update(merge_user_changes(current, supplied))
        return AdapterUser.model_validate(updated)

    @observed("delete_user")
    async def delete_user(self, user_id: str) -> None:
        """Delete a user with all of its sessions and accounts atomically."""
        async with self._unit_of_work() as repos:
            await repos.session_repository().delete_all_for_user(user_id)
            await repos.account_repository().delete_all_for_user(user_id)
            await repos.user_repository().delete(user_id)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    @observed("link_account")
    async def link_account(
        self,
        account: AdapterAccount | Mapping[str, Any],
    ) -> AdapterAccount:
        fields = coerce_contract(AdapterAccount, account).model_dump()
        for name in _OPTIONAL_ACCOUNT_FIELDS:
            fields[name] = fields[name] or None

        async with self._unit_of_work() as repos:
            linked = await repos.account_repository().create(AccountData(**fields))
        return AdapterAccount.model_validate(linked)

    @observed("unlink_account")
    async def unlink_account(self, provider: str, provider_account_id: str) -> None:
        """Remove a linked account. A missing account is not an error."""
        async with self._unit_of_work() as repos:
            await repos.account_repository().delete(provider, provider_account_id)

    # -------------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------------

    @observed("create_session")
    async def create_session(
        self,
        session_token: str,
        user_id: str,
        expires: datetime,
    ) -> AdapterSession:
        async with self._unit_of_work() as repos:
            session = await repos.session_repository().create(
                session_token,
                user_id,
                expires,
            )
        return AdapterSession.model_validate(session)

    @observed("get_session_and_user")
    async def get_session_and_user(self, session_token: str) -> SessionAndUser:
        """Look up a session and its owner.

        Unlike the user lookups, a missing session is an error: there is no
        absent shape for the combined result.

        Raises
        ------
        SessionNotFoundError
            If no session has this token.
        UserNotFoundError
            If the session's owner no longer exists.
        """
        async with self._unit_of_work() as repos:
            session = await repos.session_repository().find_by_token(session_token)
            if session is None:
                raise SessionNotFoundError()

            user = await repos.user_repository().find_by_id(session.user_id)
            if user is None:
                logger.error("Session %s references a missing user", session.id)
                raise UserNotFoundError(session.user_id)

        return SessionAndUser(
            session=AdapterSession.model_validate(session),
            user=AdapterUser.model_validate(user),
        )

    @observed("update_session")
    async def update_session(
        self,
        session_token: str,
        changes: SessionUpdate | Mapping[str, Any],
    ) -> AdapterSession:
        """Merge ``changes`` over the stored session, scoped by its token."""
        if not session_token:
            raise MissingIdentifierError("update_session", "session_token")

        supplied = coerce_contract(SessionUpdate, changes).model_dump(
            exclude_unset=True,
        )
        async with self._unit_of_work() as repos:
            sessions = repos.session_repository()
            current = await sessions.find_by_token(session_token, for_update=True)
            if current is None:
                raise SessionNotFoundError()
            updated = await sessions.update(merge_session_changes(current, supplied))
        return AdapterSession.model_validate(updated)

    @observed("delete_session")
    async def delete_session(self, session_token: str) -> None:
        async with self._unit_of_work() as repos:
            await repos.session_repository().delete(session_token)

    # -------------------------------------------------------------------------
    # Verification tokens
    # -------------------------------------------------------------------------

    @observed("create_verification_token")
    async def create_verification_token(
        self,
        identifier: str,
        expires: datetime,
        token: str,
    ) -> VerificationToken:
        async with self._unit_of_work() as repos:
            created = await repos.verification_token_repository().create(
                identifier,
                expires,
                token,
            )
        return VerificationToken.model_validate(created)

    @observed("use_verification_token")
    async def use_verification_token(
        self,
        identifier: str,
        token: str,
    ) -> VerificationToken | None:
        """Consume a token. Returns None if it does not exist (or was used)."""
        async with self._unit_of_work() as repos:
            consumed = await repos.verification_token_repository().consume(
                identifier,
                token,
            )
        return VerificationToken.model_validate(consumed) if consumed else None
