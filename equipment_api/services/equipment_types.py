"""Read-only use cases for the equipment type catalogue."""

from __future__ import annotations

from collections.abc import Callable

from equipment_api.core.exceptions import NotFoundError
from equipment_api.dto import EquipmentTypeDTO, PageResult
from equipment_api.dto.mappers import map_equipment_type
from equipment_api.infra.unit_of_work import UnitOfWork
from equipment_api.services._db import translate_db_errors
from equipment_api.utils.paging import (
    build_next_offset_token,
    parse_offset_token,
    resolve_per_page,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]

SORT_KEY = "id-asc"


class EquipmentTypeService:
    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        *,
        default_per_page: int = 30,
        max_per_page: int = 100,
    ) -> None:
        self._uow_factory = uow_factory
        self._default_per_page = default_per_page
        self._max_per_page = max_per_page

    @translate_db_errors
    async def list(
        self,
        *,
        q: str | None = None,
        page: int = 1,
        per_page: int | None = None,
        page_token: str | None = None,
    ) -> PageResult[EquipmentTypeDTO]:
        size = resolve_per_page(per_page, default=self._default_per_page, maximum=self._max_per_page)
        offset = parse_offset_token(
            page_token, page=page, per_page=size, expected_sort_key=SORT_KEY
        )
        async with self._uow_factory() as uow:
            found = await uow.equipment_types.paginate(q=q or None, offset=offset, limit=size)
            items = [map_equipment_type(t) for t in found.items]
        return PageResult(
            items=items,
            total=found.total,
            page=offset // size + 1,
            per_page=size,
            next_page_token=build_next_offset_token(offset, size, found.total, sort_key=SORT_KEY),
            offset=offset,
        )

    @translate_db_errors
    async def show(self, type_id: int) -> EquipmentTypeDTO:
        async with self._uow_factory() as uow:
            equipment_type = await uow.equipment_types.get(type_id)
            if equipment_type is None:
                raise NotFoundError("equipment type not found")
            return map_equipment_type(equipment_type)
