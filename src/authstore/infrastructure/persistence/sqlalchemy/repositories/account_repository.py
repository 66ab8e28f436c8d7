"""SQLAlchemy implementation of AccountRepository."""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.infrastructure.persistence.sqlalchemy.models import AccountModel
from authstore.repositories import AccountData, AccountRepository

logger = logging.getLogger(__name__)


class AccountRepositorySQLAlchemy(AccountRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_data(self, model: AccountModel) -> AccountData:
        return AccountData(
            user_id=model.user_id,
            provider=model.provider,
            provider_account_id=model.provider_account_id,
            type=model.type,
            access_token=model.access_token,
            expires_at=model.expires_at,
            refresh_token=model.refresh_token,
            id_token=model.id_token,
            scope=model.scope,
            session_state=model.session_state,
            token_type=model.token_type,
        )

    async def create(self, account: AccountData) -> AccountData:
        model = AccountModel(
            user_id=account.user_id,
            provider=account.provider,
            provider_account_id=account.provider_account_id,
            type=account.type,
            access_token=account.access_token,
            expires_at=account.expires_at,
            refresh_token=account.refresh_token,
            id_token=account.id_token,
            scope=account.scope,
            session_state=account.session_state,
            token_type=account.token_type,
        )
        self._session.add(model)
        await self._session.flush()
        logger.info("Linked %s account for user: %s", model.provider, model.user_id)
        return self._to_data(model)

    async def delete(self, provider: str, provider_account_id: str) -> bool:
        stmt = delete(AccountModel).where(
            AccountModel.provider == provider,
            AccountModel.provider_account_id == provider_account_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        deleted = result.rowcount > 0  # type: ignore[attr-defined]
        if deleted:
            logger.info("Unlinked %s account", provider)
        return deleted

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(AccountModel).where(AccountModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined]
