"""Contract schemas exchanged with the authentication framework.

Attributes are snake_case. Fields the framework names in camelCase carry
an explicit alias, so ``model_dump(by_alias=True)`` produces the
framework's shape while either spelling is accepted on input. OAuth token
fields keep their snake_case names on both sides.
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContractModel(BaseModel):
    """Base for every contract schema."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    def to_contract(self) -> dict[str, Any]:
        """Dump using the framework's field names."""
        return self.model_dump(by_alias=True)


ContractModelT = TypeVar("ContractModelT", bound=ContractModel)


def coerce_contract(
    model: type[ContractModelT],
    value: ContractModelT | Mapping[str, Any],
) -> ContractModelT:
    """Accept either a schema instance or a plain mapping."""
    if isinstance(value, model):
        return value
    return model.model_validate(value)


class AdapterUser(ContractModel):
    """A user as returned to the framework."""

    id: str
    name: str | None = None
    email: str | None = None
    email_verified: datetime | None = Field(default=None, alias="emailVerified")
    image: str | None = None


class UserCreate(ContractModel):
    """Partial user supplied to create_user. Any id is ignored."""

    name: str | None = None
    email: str | None = None
    email_verified: datetime | None = Field(default=None, alias="emailVerified")
    image: str | None = None

    @field_validator("email_verified", mode="before")
    @classmethod
    def blank_email_verified_to_none(cls, v: Any) -> Any:
        """Treat an empty string as not verified."""
        if v == "":
            return None
        return v


class UserUpdate(UserCreate):
    """Partial user supplied to update_user.

    Only fields that were explicitly set take part in the merge.
    """


class AdapterAccount(ContractModel):
    """A provider identity linked to a user."""

    user_id: str = Field(alias="userId")
    provider: str
    provider_account_id: str = Field(alias="providerAccountId")
    type: str
    access_token: str | None = None
    expires_at: int | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    scope: str | None = None
    session_state: str | None = None
    token_type: str | None = None


class AdapterSession(ContractModel):
    """A persisted session."""

    id: str
    session_token: str = Field(alias="sessionToken")
    user_id: str = Field(alias="userId")
    expires: datetime


class SessionUpdate(ContractModel):
    """Partial session supplied to update_session."""

    user_id: str | None = Field(default=None, alias="userId")
    expires: datetime | None = None


class SessionAndUser(ContractModel):
    """Result of get_session_and_user."""

    session: AdapterSession
    user: AdapterUser


class VerificationToken(ContractModel):
    """A single-use verification token."""

    identifier: str
    token: str
    expires: datetime
