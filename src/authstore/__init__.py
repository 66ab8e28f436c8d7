"""authstore - relational identity store for an authentication framework.

This package persists what the framework hands it:
- Users (create, lookup by id/email/linked account, merge update, cascade delete)
- Accounts (link and unlink provider identities)
- Sessions (create, resolve with owner, merge update, delete)
- Verification tokens (create, single-use consumption)

Authentication policy, token cryptography and expiry enforcement belong
to the caller.
"""

from authstore.adapter import IdentityStoreAdapter
from authstore.exceptions import (
    IdentityStoreError,
    MissingIdentifierError,
    SessionNotFoundError,
    UserNotFoundError,
)
from authstore.observability import (
    LoggingObserver,
    OperationObserver,
    configure_logging,
)
from authstore.repositories import (
    AccountData,
    AccountRepository,
    SessionData,
    SessionRepository,
    UserData,
    UserRepository,
    VerificationTokenData,
    VerificationTokenRepository,
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
)

__all__ = [
    # Adapter
    "IdentityStoreAdapter",
    # Exceptions
    "IdentityStoreError",
    "MissingIdentifierError",
    "SessionNotFoundError",
    "UserNotFoundError",
    # Observability
    "LoggingObserver",
    "OperationObserver",
    "configure_logging",
    # Repositories
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
    # Schemas
    "AdapterAccount",
    "AdapterSession",
    "AdapterUser",
    "SessionAndUser",
    "SessionUpdate",
    "UserCreate",
    "UserUpdate",
    "VerificationToken",
]
