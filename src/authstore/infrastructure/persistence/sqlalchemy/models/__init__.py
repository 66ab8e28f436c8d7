# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for the identity store."""

from authstore.infrastructure.persistence.sqlalchemy.models.account_model import (
    AccountModel,
)
from authstore.infrastructure.persistence.sqlalchemy.models.session_model import (
    SessionModel,
)
from authstore.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)
from authstore.infrastructure.persistence.sqlalchemy.models.verification_token_model import (
    VerificationTokenModel,
)

__all__ = [
    "AccountModel",
    "SessionModel",
    "UserModel",
    "VerificationTokenModel",
]
