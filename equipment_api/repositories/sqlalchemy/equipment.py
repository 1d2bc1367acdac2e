"""SQLAlchemy implementation of the equipment repository."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from equipment_api.models import Equipment
from equipment_api.models.base import is_storable_id
from equipment_api.repositories.interfaces import EquipmentRepository, PageSlice


def escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape + escape).replace("%", escape + "%").replace("_", escape + "_")
    )


class SqlAlchemyEquipmentRepository(EquipmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    def _active(self):
        return select(Equipment).where(Equipment.deleted_at.is_(None))

    async def paginate(
        self, *, serial_number: str | None, offset: int, limit: int
    ) -> PageSlice[Equipment]:
        stmt = self._active()
        if serial_number:
            stmt = stmt.where(
                Equipment.serial_number.like(f"%{escape_like(serial_number)}%", escape="\\")
            )

        total = await self._session.scalar(select(func.count()).select_from(stmt.subquery()))
        rows = await self._session.scalars(
            stmt.order_by(Equipment.id.asc()).offset(offset).limit(limit)
        )
        return PageSlice(items=list(rows.all()), total=int(total or 0))

    async def get(self, equipment_id: int) -> Equipment | None:
        if not is_storable_id(equipment_id):
            return None
        stmt = self._active().where(Equipment.id == equipment_id)
        return (await self._session.scalars(stmt)).first()

    async def serial_number_taken(self, serial_number: str, *, ignore_id: int | None = None) -> bool:
        stmt = (
            select(Equipment.id)
            .where(Equipment.deleted_at.is_(None), Equipment.serial_number == serial_number)
            .limit(1)
        )
        if ignore_id is not None:
            stmt = stmt.where(Equipment.id != ignore_id)
        return (await self._session.scalar(stmt)) is not None

    async def add(
        self, *, equipment_type_id: int, serial_number: str, remark: str | None
    ) -> Equipment:
        equipment = Equipment(
            equipment_type_id=equipment_type_id,
            serial_number=serial_number,
            remark=remark,
        )
        self._session.add(equipment)
        await self._session.flush()
        await self._session.refresh(equipment)
        return equipment

    async def update(self, equipment: Equipment, values: Mapping[str, Any]) -> Equipment:
        for key, value in values.items():
            setattr(equipment, key, value)
        await self._session.flush()
        await self._session.refresh(equipment)
        return equipment

    async def soft_delete(self, equipment: Equipment) -> None:
        equipment.deleted_at = datetime.now(UTC)
        await self._session.flush()
