"""SQLAlchemy implementation of UserRepository."""

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.domain.shared.time import from_storage_timestamp, to_storage_timestamp
from authstore.exceptions import UserNotFoundError
from authstore.infrastructure.persistence.sqlalchemy.models import (
    AccountModel,
    UserModel,
)
from authstore.repositories import UserData, UserRepository

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        name: str | None,
        email: str | None,
        email_verified: datetime | None,
        image: str | None,
    ) -> UserData:
        model = UserModel(
            name=name,
            email=email,
            email_verified=to_storage_timestamp(email_verified),
            image=image,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Created user: %s", model.id)
        return self._map_to_data(model)

    async def find_by_id(
        self,
        user_id: str,
        *,
        for_update: bool = False,
    ) -> UserData | None:
        model = await self._find_model_by_id(user_id, for_update=for_update)

        if model is None:
            return None

        return self._map_to_data(model)

    async def find_by_email(self, email: str) -> UserData | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_data(model)

    async def find_by_account(
        self,
        provider: str,
        provider_account_id: str,
    ) -> UserData | None:
        stmt = (
            select(UserModel)
            .join(AccountModel, AccountModel.user_id == UserModel.id)
            .where(
                AccountModel.provider == provider,
                AccountModel.provider_account_id == provider_account_id,
            )
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_data(model)

    async def update(self, user: UserData) -> UserData:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            raise UserNotFoundError(user.id)

        self._update_model(model, user)
        await self._session.flush()
        logger.debug("Updated user: %s", user.id)
        return self._map_to_data(model)

    async def delete(self, user_id: str) -> bool:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        deleted = result.rowcount > 0  # type: ignore[attr-defined]
        if deleted:
            logger.info("Deleted user: %s", user_id)
        return deleted

    async def _find_model_by_id(
        self,
        user_id: str,
        *,
        for_update: bool = False,
    ) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_data(self, model: UserModel) -> UserData:
        return UserData(
            id=model.id,
            name=model.name,
            email=model.email,
            email_verified=from_storage_timestamp(model.email_verified),
            image=model.image,
        )

    def _update_model(self, model: UserModel, user: UserData) -> None:
        model.name = user.name
        model.email = user.email
        model.email_verified = to_storage_timestamp(user.email_verified)
        model.image = user.image
