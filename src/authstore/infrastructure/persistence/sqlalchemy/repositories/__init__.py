# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for the identity store."""

from authstore.infrastructure.persistence.sqlalchemy.repositories.account_repository import (
    AccountRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.session_repository import (
    SessionRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.verification_token_repository import (
    VerificationTokenRepositorySQLAlchemy,
)

__all__ = [
    "AccountRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "SessionRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "VerificationTokenRepositorySQLAlchemy",
]
