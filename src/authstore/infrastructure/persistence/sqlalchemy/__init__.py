"""SQLAlchemy implementation for identity store persistence.

Provides:
- Base: Declarative base whose metadata holds the four relations
- UserModel, AccountModel, SessionModel, VerificationTokenModel
- *RepositorySQLAlchemy: Repository implementations for each entity
- SQLAlchemyRepositoryFactory: Repositories sharing one session
- create_engine_from_settings / create_session_maker: pool wiring
- enable_sqlite_foreign_keys: foreign key enforcement for SQLite
"""

from authstore.infrastructure.persistence.sqlalchemy.base import Base
from authstore.infrastructure.persistence.sqlalchemy.database import (
    create_engine_from_settings,
    create_session_maker,
    enable_sqlite_foreign_keys,
)
from authstore.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    SessionModel,
    UserModel,
    VerificationTokenModel,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories import (
    AccountRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
    SessionRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    VerificationTokenRepositorySQLAlchemy,
)

__all__ = [
    "AccountModel",
    "AccountRepositorySQLAlchemy",
    "Base",
    "SQLAlchemyRepositoryFactory",
    "SessionModel",
    "SessionRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "VerificationTokenModel",
    "VerificationTokenRepositorySQLAlchemy",
    "create_engine_from_settings",
    "create_session_maker",
    "enable_sqlite_foreign_keys",
]
