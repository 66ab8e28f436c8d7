"""Adapter tests for single-use verification tokens."""

from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from authstore import VerificationToken

IDENTIFIER = "a@example.com"
EXPIRES = datetime(2030, 1, 1, 0, 15, tzinfo=timezone.utc)


@pytest.mark.asyncio
async def test_create_returns_persisted_token(adapter):
    created = await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")

    assert isinstance(created, VerificationToken)
    assert created.identifier == IDENTIFIER
    assert created.token == "secret"
    assert created.expires == EXPIRES


@pytest.mark.asyncio
async def test_token_is_single_use(adapter):
    """First use returns the token, the second finds nothing."""
    await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")

    first = await adapter.use_verification_token(IDENTIFIER, "secret")
    second = await adapter.use_verification_token(IDENTIFIER, "secret")

    assert first is not None
    assert first.identifier == IDENTIFIER
    assert first.token == "secret"
    assert first.expires == EXPIRES
    assert first.expires.tzinfo is not None
    assert second is None


@pytest.mark.asyncio
async def test_unknown_token_is_absent(adapter):
    assert await adapter.use_verification_token(IDENTIFIER, "missing") is None
    assert await adapter.use_verification_token(IDENTIFIER, "missing") is None


@pytest.mark.asyncio
async def test_both_key_parts_must_match(adapter):
    await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")

    assert await adapter.use_verification_token("b@example.com", "secret") is None
    assert await adapter.use_verification_token(IDENTIFIER, "other") is None

    # The mismatched attempts did not consume the real token
    assert await adapter.use_verification_token(IDENTIFIER, "secret") is not None


@pytest.mark.asyncio
async def test_only_the_used_token_is_consumed(adapter):
    await adapter.create_verification_token(IDENTIFIER, EXPIRES, "first")
    await adapter.create_verification_token(IDENTIFIER, EXPIRES, "second")

    await adapter.use_verification_token(IDENTIFIER, "first")

    assert await adapter.use_verification_token(IDENTIFIER, "second") is not None


@pytest.mark.asyncio
async def test_expired_token_is_still_returned(adapter):
    """Expiry comparison is the caller's job."""
    past = datetime(2000, 1, 1, tzinfo=timezone.utc)
    await adapter.create_verification_token(IDENTIFIER, past, "old")

    used = await adapter.use_verification_token(IDENTIFIER, "old")

    assert used.expires == past


@pytest.mark.asyncio
async def test_duplicate_key_propagates_storage_error(adapter):
    await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")

    with pytest.raises(IntegrityError):
        await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")


@pytest.mark.asyncio
async def test_contract_shape(adapter):
    created = await adapter.create_verification_token(IDENTIFIER, EXPIRES, "secret")

    assert created.to_contract() == {
        "identifier": IDENTIFIER,
        "token": "secret",
        "expires": EXPIRES,
    }
