"""SQLAlchemy implementation of the equipment type repository."""

from __future__ import annotations

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from equipment_api.models import EquipmentType
from equipment_api.models.base import is_storable_id
from equipment_api.repositories.interfaces import EquipmentTypeRepository, PageSlice
from equipment_api.repositories.sqlalchemy.equipment import escape_like


class SqlAlchemyEquipmentTypeRepository(EquipmentTypeRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, type_id: int) -> EquipmentType | None:
        if not is_storable_id(type_id):
            return None
        return await self._session.get(EquipmentType, type_id)

    async def paginate(self, *, q: str | None, offset: int, limit: int) -> PageSlice[EquipmentType]:
        stmt = select(EquipmentType)
        if q:
            ilike = f"%{escape_like(q)}%"
            stmt = stmt.where(
                or_(
                    EquipmentType.name.ilike(ilike, escape="\\"),
                    EquipmentType.mask.ilike(ilike, escape="\\"),
                )
            )

        total = await self._session.scalar(select(func.count()).select_from(stmt.subquery()))
        rows = await self._session.scalars(
            stmt.order_by(EquipmentType.id.asc()).offset(offset).limit(limit)
        )
        return PageSlice(items=list(rows.all()), total=int(total or 0))
