"""Shared pytest fixtures for all test suites."""

from tests.shared.fixtures.database import (
    adapter,
    async_engine,
    database_url,
    session_maker,
)

__all__ = [
    "adapter",
    "async_engine",
    "database_url",
    "session_maker",
]
