"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── unit/           # Fast, isolated tests (no database)
    ├── persistence/    # Adapter tests against a real database
    └── shared/         # Shared fixtures and utilities

Persistence tests run on in-memory SQLite unless TEST_USE_POSTGRES=1.
Tests marked ``integration`` need row-level locking (PostgreSQL) and are
auto-skipped unless explicitly enabled.

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    TEST_USE_POSTGRES=1  Run persistence tests on PostgreSQL
    TEST_DATABASE_URL    Use this PostgreSQL URL instead of Testcontainers

Pytest Options:
    --run-integration    Run integration tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from authstore_config import clear_settings_cache
from tests.shared.fixtures.database import (
    adapter,
    async_engine,
    database_url,
    session_maker,
)

__all__ = ["adapter", "async_engine", "database_url", "session_maker"]

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Optional test-only overrides (e.g. TEST_DATABASE_URL)
if (PROJECT_ROOT / "config" / ".env.test").exists():
    load_dotenv(PROJECT_ROOT / "config" / ".env.test")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need PostgreSQL row locking (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if "integration" in {mark.name for mark in item.iter_markers()}:
            item.add_marker(skip_integration)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure no cached settings leak into or out of the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
