"""SQLAlchemy model for the verification_token relation."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from authstore.infrastructure.persistence.sqlalchemy.base import Base


class VerificationTokenModel(Base):
    """Single-use verification token keyed by (identifier, token)."""

    __tablename__ = "verification_token"

    identifier: Mapped[str] = mapped_column(String(255), primary_key=True)
    token: Mapped[str] = mapped_column(String(512), primary_key=True)
    expires: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<VerificationTokenModel(identifier={self.identifier})>"
