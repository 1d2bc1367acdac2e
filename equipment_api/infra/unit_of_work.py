"""Transaction boundary handed to the services."""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from equipment_api.repositories.interfaces import EquipmentRepository, EquipmentTypeRepository
from equipment_api.repositories.sqlalchemy import (
    SqlAlchemyEquipmentRepository,
    SqlAlchemyEquipmentTypeRepository,
)

logger = structlog.get_logger(__name__)


class UnitOfWork(Protocol, AbstractAsyncContextManager["UnitOfWork"]):
    equipment: EquipmentRepository
    equipment_types: EquipmentTypeRepository

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork(UnitOfWork):
    """One AsyncSession per ``async with`` block.

    Leaving the block commits whatever is pending, or rolls it back when an
    exception escapes. Bulk creation calls ``commit`` per item so rows written
    earlier in a batch survive a later rejection.
    """

    equipment: EquipmentRepository
    equipment_types: EquipmentTypeRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        self._session = self._session_factory()
        self.equipment = SqlAlchemyEquipmentRepository(self._session)
        self.equipment_types = SqlAlchemyEquipmentTypeRepository(self._session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            if exc_type is None:
                await session.commit()
            else:
                logger.debug("uow_rollback", reason=exc_type.__name__)
                await session.rollback()
        finally:
            await session.close()

    def _require_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("SqlAlchemyUnitOfWork used outside of `async with`")
        return self._session

    async def commit(self) -> None:
        await self._require_session().commit()

    async def rollback(self) -> None:
        await self._require_session().rollback()
