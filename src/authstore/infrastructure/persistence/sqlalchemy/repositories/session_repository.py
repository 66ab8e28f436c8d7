"""SQLAlchemy implementation of SessionRepository."""

import logging
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.domain.shared.time import from_storage_timestamp, to_storage_timestamp
from authstore.exceptions import SessionNotFoundError
from authstore.infrastructure.persistence.sqlalchemy.models import SessionModel
from authstore.repositories import SessionData, SessionRepository

logger = logging.getLogger(__name__)


class SessionRepositorySQLAlchemy(SessionRepository):
    """SQLAlchemy implementation of SessionRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_data(self, model: SessionModel) -> SessionData:
        return SessionData(
            id=model.id,
            session_token=model.session_token,
            user_id=model.user_id,
            expires=from_storage_timestamp(model.expires),  # type: ignore[arg-type]
        )

    async def _find_model_by_token(
        self,
        session_token: str,
        *,
        for_update: bool = False,
    ) -> SessionModel | None:
        stmt = select(SessionModel).where(SessionModel.session_token == session_token)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(
        self,
        session_token: str,
        user_id: str,
        expires: datetime,
    ) -> SessionData:
        model = SessionModel(
            session_token=session_token,
            user_id=user_id,
            expires=to_storage_timestamp(expires),
        )
        self._session.add(model)
        await self._session.flush()
        logger.debug("Created session %s for user: %s", model.id, user_id)
        return self._to_data(model)

    async def find_by_token(
        self,
        session_token: str,
        *,
        for_update: bool = False,
    ) -> SessionData | None:
        model = await self._find_model_by_token(session_token, for_update=for_update)
        return self._to_data(model) if model else None

    async def update(self, session: SessionData) -> SessionData:
        model = await self._find_model_by_token(session.session_token)
        if model is None:
            raise SessionNotFoundError()

        model.user_id = session.user_id
        model.expires = to_storage_timestamp(session.expires)  # type: ignore[assignment]
        await self._session.flush()
        logger.debug("Updated session: %s", model.id)
        return self._to_data(model)

    async def delete(self, session_token: str) -> bool:
        stmt = delete(SessionModel).where(SessionModel.session_token == session_token)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_all_for_user(self, user_id: str) -> int:
        stmt = delete(SessionModel).where(SessionModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        count = result.rowcount  # type: ignore[attr-defined]
        if count:
            logger.info("Deleted %d session(s) for user: %s", count, user_id)
        return count
