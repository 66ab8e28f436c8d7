"""SQLAlchemy declarative base for identity store models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all identity store models."""
