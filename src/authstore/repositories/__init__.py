"""Abstract repository interfaces for the identity store."""

from authstore.repositories.account_repository import (
    AccountData,
    AccountRepository,
)
from authstore.repositories.session_repository import (
    SessionData,
    SessionRepository,
    merge_session_changes,
)
from authstore.repositories.user_repository import (
    UserData,
    UserRepository,
    merge_user_changes,
)
from authstore.repositories.verification_token_repository import (
    VerificationTokenData,
    VerificationTokenRepository,
)

__all__ = [
    "AccountData",
    "AccountRepository",
    "SessionData",
    "SessionRepository",
    "UserData",
    "UserRepository",
    "VerificationTokenData",
    "VerificationTokenRepository",
    "merge_session_changes",
    "merge_user_changes",
]
