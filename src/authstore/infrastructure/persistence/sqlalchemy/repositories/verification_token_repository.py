"""SQLAlchemy implementation of VerificationTokenRepository."""

from datetime import datetime

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from authstore.domain.shared.time import from_storage_timestamp, to_storage_timestamp
from authstore.infrastructure.persistence.sqlalchemy.models import (
    VerificationTokenModel,
)
from authstore.repositories import (
    VerificationTokenData,
    VerificationTokenRepository,
)


class VerificationTokenRepositorySQLAlchemy(VerificationTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(
        self,
        identifier: str,
        expires: datetime,
        token: str,
    ) -> VerificationTokenData:
        model = VerificationTokenModel(
            identifier=identifier,
            token=token,
            expires=to_storage_timestamp(expires),
        )
        self._session.add(model)
        await self._session.flush()

        return VerificationTokenData(
            identifier=model.identifier,
            token=model.token,
            expires=from_storage_timestamp(model.expires),  # type: ignore[arg-type]
        )

    async def consume(
        self,
        identifier: str,
        token: str,
    ) -> VerificationTokenData | None:
        # DELETE ... RETURNING: the lookup and the removal are one statement
        stmt = (
            delete(VerificationTokenModel)
            .where(
                VerificationTokenModel.identifier == identifier,
                VerificationTokenModel.token == token,
            )
            .returning(
                VerificationTokenModel.identifier,
                VerificationTokenModel.token,
                VerificationTokenModel.expires,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        row = result.one_or_none()

        if row is None:
            return None

        return VerificationTokenData(
            identifier=row.identifier,
            token=row.token,
            expires=from_storage_timestamp(row.expires),  # type: ignore[arg-type]
        )
