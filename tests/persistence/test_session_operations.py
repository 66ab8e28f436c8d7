"""Adapter tests for session operations."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from authstore import (
    AdapterSession,
    SessionNotFoundError,
    SessionUpdate,
    UserNotFoundError,
)
from authstore.infrastructure.persistence.sqlalchemy import UserRepositorySQLAlchemy

EXPIRES = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def owner(adapter):
    return await adapter.create_user({"email": "a@example.com"})


class TestCreateSession:
    """Tests for create_session."""

    @pytest.mark.asyncio
    async def test_returns_persisted_row(self, adapter, owner):
        session = await adapter.create_session("tok-1", owner.id, EXPIRES)

        assert isinstance(session, AdapterSession)
        assert session.id
        assert session.session_token == "tok-1"
        assert session.user_id == owner.id
        assert session.expires == EXPIRES
        assert session.expires.tzinfo is not None

    @pytest.mark.asyncio
    async def test_unknown_owner_is_rejected(self, adapter):
        with pytest.raises(IntegrityError):
            await adapter.create_session("tok-1", "no-such-user", EXPIRES)

        with pytest.raises(SessionNotFoundError):
            await adapter.get_session_and_user("tok-1")

    @pytest.mark.asyncio
    async def test_contract_shape(self, adapter, owner):
        session = await adapter.create_session("tok-1", owner.id, EXPIRES)

        assert set(session.to_contract()) == {"id", "sessionToken", "userId", "expires"}


class TestGetSessionAndUser:
    """Tests for get_session_and_user."""

    @pytest.mark.asyncio
    async def test_returns_session_with_owner(self, adapter, owner):
        await adapter.create_session("tok-1", owner.id, EXPIRES)

        result = await adapter.get_session_and_user("tok-1")

        assert result.session.user_id == owner.id
        assert result.session.expires == EXPIRES
        assert result.user == owner

    @pytest.mark.asyncio
    async def test_expired_session_is_still_returned(self, adapter, owner):
        """Expiry enforcement belongs to the caller."""
        past = datetime(2000, 1, 1, tzinfo=timezone.utc)
        await adapter.create_session("tok-old", owner.id, past)

        result = await adapter.get_session_and_user("tok-old")

        assert result.session.expires == past

    @pytest.mark.asyncio
    async def test_missing_session_is_an_error(self, adapter):
        with pytest.raises(SessionNotFoundError):
            await adapter.get_session_and_user("missing")

    @pytest.mark.asyncio
    async def test_error_does_not_echo_token(self, adapter):
        with pytest.raises(SessionNotFoundError) as exc_info:
            await adapter.get_session_and_user("secret-token-value")

        assert "secret-token-value" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_orphaned_session_is_an_error(self, adapter, owner, monkeypatch):
        await adapter.create_session("tok-1", owner.id, EXPIRES)

        async def find_nothing(self, user_id, *, for_update=False):
            return None

        monkeypatch.setattr(UserRepositorySQLAlchemy, "find_by_id", find_nothing)

        with pytest.raises(UserNotFoundError) as exc_info:
            await adapter.get_session_and_user("tok-1")

        assert exc_info.value.user_id == owner.id


class TestUpdateSession:
    """Tests for update_session."""

    @pytest.mark.asyncio
    async def test_extends_expiry(self, adapter, owner):
        created = await adapter.create_session("tok-1", owner.id, EXPIRES)
        later = EXPIRES + timedelta(days=30)

        updated = await adapter.update_session("tok-1", {"expires": later})

        assert updated.id == created.id
        assert updated.expires == later
        assert updated.user_id == owner.id
        assert (await adapter.get_session_and_user("tok-1")).session == updated

    @pytest.mark.asyncio
    async def test_reassigns_owner(self, adapter, owner):
        other = await adapter.create_user({"email": "b@example.com"})
        await adapter.create_session("tok-1", owner.id, EXPIRES)

        updated = await adapter.update_session("tok-1", SessionUpdate(user_id=other.id))

        assert updated.user_id == other.id
        assert updated.expires == EXPIRES
        assert (await adapter.get_session_and_user("tok-1")).user == other

    @pytest.mark.asyncio
    async def test_none_keeps_stored_values(self, adapter, owner):
        created = await adapter.create_session("tok-1", owner.id, EXPIRES)

        updated = await adapter.update_session(
            "tok-1",
            {"userId": None, "expires": None},
        )

        assert updated == created

    @pytest.mark.asyncio
    async def test_unknown_session(self, adapter):
        with pytest.raises(SessionNotFoundError):
            await adapter.update_session("missing", {"expires": EXPIRES})


class TestDeleteSession:
    """Tests for delete_session."""

    @pytest.mark.asyncio
    async def test_delete_session(self, adapter, owner):
        await adapter.create_session("tok-1", owner.id, EXPIRES)

        await adapter.delete_session("tok-1")

        with pytest.raises(SessionNotFoundError):
            await adapter.get_session_and_user("tok-1")
        assert await adapter.get_user(owner.id) == owner

    @pytest.mark.asyncio
    async def test_delete_leaves_other_sessions(self, adapter, owner):
        await adapter.create_session("tok-1", owner.id, EXPIRES)
        await adapter.create_session("tok-2", owner.id, EXPIRES)

        await adapter.delete_session("tok-1")

        assert (await adapter.get_session_and_user("tok-2")).user == owner

    @pytest.mark.asyncio
    async def test_delete_missing_session_is_noop(self, adapter):
        await adapter.delete_session("missing")
