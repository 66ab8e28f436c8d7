"""SQLAlchemy model for the accounts relation."""

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from authstore.infrastructure.persistence.sqlalchemy.base import Base


class AccountModel(Base):
    """A provider identity linked to a user.

    The owning user is referenced without ON DELETE CASCADE; the adapter
    removes accounts itself when the user is deleted.
    """

    __tablename__ = "accounts"

    provider: Mapped[str] = mapped_column(String(255), primary_key=True)
    provider_account_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(255), nullable=False)
    access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    expires_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    refresh_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    id_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    scope: Mapped[str | None] = mapped_column(Text, nullable=True)
    session_state: Mapped[str | None] = mapped_column(Text, nullable=True)
    token_type: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<AccountModel(provider={self.provider}, "
            f"provider_account_id={self.provider_account_id}, "
            f"user_id={self.user_id})>"
        )
