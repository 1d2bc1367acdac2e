"""Repository abstractions for the service layer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar

from equipment_api.models import Equipment, EquipmentType

T = TypeVar("T")


@dataclass
class PageSlice(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0


class EquipmentRepository(Protocol):
    """Repository boundary for active (non-deleted) equipment rows."""

    async def paginate(
        self, *, serial_number: str | None, offset: int, limit: int
    ) -> PageSlice[Equipment]: ...

    async def get(self, equipment_id: int) -> Equipment | None: ...

    async def serial_number_taken(
        self, serial_number: str, *, ignore_id: int | None = None
    ) -> bool: ...

    async def add(
        self, *, equipment_type_id: int, serial_number: str, remark: str | None
    ) -> Equipment: ...

    async def update(self, equipment: Equipment, values: Mapping[str, Any]) -> Equipment: ...

    async def soft_delete(self, equipment: Equipment) -> None: ...


class EquipmentTypeRepository(Protocol):
    """Read-only repository boundary for the equipment type catalogue."""

    async def get(self, type_id: int) -> EquipmentType | None: ...

    async def paginate(self, *, q: str | None, offset: int, limit: int) -> PageSlice[EquipmentType]: ...
