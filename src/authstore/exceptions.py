"""Identity store exceptions.

Only caller errors and contract-level "not found" conditions are raised
here. Storage failures (connectivity, constraint violations) propagate
unchanged as SQLAlchemy exceptions.
"""


class IdentityStoreError(Exception):
    """Base exception for all identity store errors."""

    def __init__(self, message: str = "Identity store error"):
        self.message = message
        super().__init__(self.message)


class MissingIdentifierError(IdentityStoreError, ValueError):
    """Raised when an operation is called without its required key."""

    def __init__(self, operation: str, field: str = "id"):
        self.operation = operation
        self.field = field
        super().__init__(f"{field} not provided for {operation}")


class UserNotFoundError(IdentityStoreError):
    """Raised when a user row required by the operation does not exist."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class SessionNotFoundError(IdentityStoreError):
    """Raised when no session matches the given session token."""

    def __init__(self, message: str = "Session not found"):
        super().__init__(message)
