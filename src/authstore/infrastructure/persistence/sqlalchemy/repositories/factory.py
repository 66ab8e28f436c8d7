"""SQLAlchemy repository factory for one unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from authstore.infrastructure.persistence.sqlalchemy.repositories.account_repository import (  # noqa: E501
    AccountRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.session_repository import (  # noqa: E501
    SessionRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)
from authstore.infrastructure.persistence.sqlalchemy.repositories.verification_token_repository import (  # noqa: E501
    VerificationTokenRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """Hands out repositories that all share one AsyncSession.

    Everything obtained from one factory runs inside the same transaction.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._account_repo: AccountRepositorySQLAlchemy | None = None
        self._session_repo: SessionRepositorySQLAlchemy | None = None
        self._token_repo: VerificationTokenRepositorySQLAlchemy | None = None

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def account_repository(self) -> AccountRepositorySQLAlchemy:
        if self._account_repo is None:
            self._account_repo = AccountRepositorySQLAlchemy(self._session)
        return self._account_repo

    def session_repository(self) -> SessionRepositorySQLAlchemy:
        if self._session_repo is None:
            self._session_repo = SessionRepositorySQLAlchemy(self._session)
        return self._session_repo

    def verification_token_repository(self) -> VerificationTokenRepositorySQLAlchemy:
        if self._token_repo is None:
            self._token_repo = VerificationTokenRepositorySQLAlchemy(self._session)
        return self._token_repo
