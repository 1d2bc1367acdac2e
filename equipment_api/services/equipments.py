"""Equipment use cases: paginated listing, search, show, create, update, delete."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog
from sqlalchemy.exc import IntegrityError

from equipment_api.core.exceptions import NotFoundError, ValidationError
from equipment_api.dto import BulkCreateResponse, BulkItemResultDTO, EquipmentDTO, PageResult
from equipment_api.dto.mappers import map_equipment
from equipment_api.infra.unit_of_work import UnitOfWork
from equipment_api.models import Equipment
from equipment_api.models.equipment import SERIAL_NUMBER_MAX_LENGTH, SERIAL_NUMBER_UNIQUE_INDEX
from equipment_api.schemas.equipment import SerialNumberBatch, SerialNumberInput
from equipment_api.services import rules
from equipment_api.services._db import translate_db_errors
from equipment_api.utils.paging import (
    build_next_offset_token,
    parse_offset_token,
    resolve_per_page,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]

SORT_KEY = "id-asc"

logger = structlog.get_logger(__name__)


def serial_number_rules(
    uow: UnitOfWork,
    mask: str | None,
    *,
    ignore_id: int | None = None,
    check_format: bool = True,
) -> list[rules.Rule]:
    chain = [
        rules.string,
        rules.max_length(SERIAL_NUMBER_MAX_LENGTH),
        rules.unique_serial_number(uow.equipment, ignore_id=ignore_id),
    ]
    if check_format:
        chain.append(rules.matches_type_mask(mask))
    return chain


def _is_serial_number_violation(exc: IntegrityError) -> bool:
    return SERIAL_NUMBER_UNIQUE_INDEX in str(exc.orig)


class EquipmentService:
    """Use cases for the equipment resource."""

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

    async def list(
        self, *, page: int = 1, per_page: int | None = None, page_token: str | None = None
    ) -> PageResult[EquipmentDTO]:
        return await self._paginate(None, page=page, per_page=per_page, page_token=page_token)

    async def search(
        self,
        *,
        serial_number: str | None = None,
        page: int = 1,
        per_page: int | None = None,
        page_token: str | None = None,
    ) -> PageResult[EquipmentDTO]:
        return await self._paginate(
            serial_number or None, page=page, per_page=per_page, page_token=page_token
        )

    @translate_db_errors
    async def _paginate(
        self,
        serial_number: str | None,
        *,
        page: int,
        per_page: int | None,
        page_token: str | None,
    ) -> PageResult[EquipmentDTO]:
        size = resolve_per_page(per_page, default=self._default_per_page, maximum=self._max_per_page)
        offset = parse_offset_token(
            page_token, page=page, per_page=size, expected_sort_key=SORT_KEY
        )
        async with self._uow_factory() as uow:
            found = await uow.equipment.paginate(
                serial_number=serial_number, offset=offset, limit=size
            )
            items = [map_equipment(e) for e in found.items]
        return PageResult(
            items=items,
            total=found.total,
            page=offset // size + 1,
            per_page=size,
            next_page_token=build_next_offset_token(offset, size, found.total, sort_key=SORT_KEY),
            offset=offset,
        )

    @translate_db_errors
    async def show(self, equipment_id: int) -> EquipmentDTO:
        async with self._uow_factory() as uow:
            return map_equipment(await self._get_or_404(uow, equipment_id))

    @translate_db_errors
    async def create(
        self,
        *,
        equipment_type_id: Any,
        serial_number: SerialNumberInput | None,
        remark: Any = None,
    ) -> EquipmentDTO | BulkCreateResponse:
        """Create one row, or one row per element of a serial number batch.

        A batch is not atomic: each valid element is committed as soon as it
        passes its rules, invalid elements are collected under
        ``serial_number.<index>``, and a ValidationError carrying the per-item
        results is raised at the end if anything was rejected.
        """
        async with self._uow_factory() as uow:
            await rules.ensure_valid(
                {
                    "equipment_type_id": (
                        equipment_type_id,
                        [rules.required, rules.integer, rules.exists(uow.equipment_types)],
                    ),
                    "serial_number": (serial_number, [rules.required]),
                    "remark": (remark, [rules.nullable, rules.string]),
                }
            )
            equipment_type = await uow.equipment_types.get(equipment_type_id)
            mask = equipment_type.mask if equipment_type is not None else None

            if isinstance(serial_number, SerialNumberBatch):
                return await self._create_batch(uow, equipment_type_id, serial_number, remark, mask)

            value = serial_number.value
            await rules.ensure_valid({"serial_number": (value, serial_number_rules(uow, mask))})
            equipment = await self._insert(uow, "serial_number", equipment_type_id, value, remark)
            dto = map_equipment(equipment)
        logger.info("equipment_created", equipment_id=dto.id, serial_number=dto.serial_number)
        return dto

    async def _create_batch(
        self,
        uow: UnitOfWork,
        equipment_type_id: int,
        batch: SerialNumberBatch,
        remark: str | None,
        mask: str | None,
    ) -> BulkCreateResponse:
        created: list[EquipmentDTO] = []
        results: list[BulkItemResultDTO] = []
        errors: dict[str, list[str]] = {}
        chain = serial_number_rules(uow, mask)

        for index, value in enumerate(batch.values):
            attribute = f"serial_number.{index}"
            item_errors = await rules.validate_fields({attribute: (value, chain)})
            if not item_errors:
                try:
                    equipment = await self._insert(uow, attribute, equipment_type_id, value, remark)
                    # Mapped before commit so a later rollback cannot expire it
                    dto = map_equipment(equipment)
                    await uow.commit()
                except ValidationError as exc:
                    item_errors = exc.errors

            if item_errors:
                errors.update(item_errors)
                results.append(
                    BulkItemResultDTO(
                        index=index,
                        serial_number=value if isinstance(value, str) else None,
                        status="rejected",
                        errors=item_errors[attribute],
                    )
                )
                logger.info(
                    "equipment_batch_item_rejected", index=index, errors=item_errors[attribute]
                )
                continue

            created.append(dto)
            results.append(
                BulkItemResultDTO(
                    index=index, serial_number=dto.serial_number, status="created", id=dto.id
                )
            )

        logger.info(
            "equipment_batch_completed",
            equipment_type_id=equipment_type_id,
            created=len(created),
            rejected=len(results) - len(created),
        )
        if errors:
            raise ValidationError(errors, results=[r.model_dump() for r in results])
        return BulkCreateResponse(data=created, results=results)

    async def _insert(
        self,
        uow: UnitOfWork,
        attribute: str,
        equipment_type_id: int,
        serial_number: str,
        remark: str | None,
    ) -> Equipment:
        try:
            return await uow.equipment.add(
                equipment_type_id=equipment_type_id,
                serial_number=serial_number,
                remark=remark,
            )
        except IntegrityError as exc:
            await uow.rollback()
            if not _is_serial_number_violation(exc):
                raise
            # Another request won the race between the uniqueness check and the insert
            logger.warning("equipment_unique_violation", serial_number=serial_number)
            raise ValidationError.single(
                attribute, rules.TAKEN_MESSAGE.format(attribute=attribute)
            ) from exc

    @translate_db_errors
    async def update(self, equipment_id: int, values: dict[str, Any]) -> EquipmentDTO:
        """Apply the supplied fields only; absent keys keep their current value."""
        async with self._uow_factory() as uow:
            equipment = await self._get_or_404(uow, equipment_id)

            fields: dict[str, tuple[Any, list[rules.Rule]]] = {}
            if "equipment_type_id" in values:
                fields["equipment_type_id"] = (
                    values["equipment_type_id"],
                    [rules.integer, rules.exists(uow.equipment_types)],
                )
            if "remark" in values:
                fields["remark"] = (values["remark"], [rules.nullable, rules.string])
            errors = await rules.validate_fields(fields)

            type_valid = "equipment_type_id" not in errors
            type_id = values.get("equipment_type_id", equipment.equipment_type_id)
            type_changed = "equipment_type_id" in values and type_id != equipment.equipment_type_id

            if "serial_number" in values or (type_changed and type_valid):
                mask = None
                if type_valid:
                    equipment_type = await uow.equipment_types.get(type_id)
                    mask = equipment_type.mask if equipment_type is not None else None
                if "serial_number" in values:
                    chain = serial_number_rules(
                        uow, mask, ignore_id=equipment.id, check_format=type_valid
                    )
                    serial_value = values["serial_number"]
                else:
                    # The current serial number must still fit the new type's mask
                    chain = [rules.matches_type_mask(mask)]
                    serial_value = equipment.serial_number
                errors.update(await rules.validate_fields({"serial_number": (serial_value, chain)}))

            if errors:
                raise ValidationError(errors)

            try:
                equipment = await uow.equipment.update(equipment, values)
            except IntegrityError as exc:
                await uow.rollback()
                if not _is_serial_number_violation(exc):
                    raise
                logger.warning(
                    "equipment_unique_violation", serial_number=values.get("serial_number")
                )
                raise ValidationError.single(
                    "serial_number", rules.TAKEN_MESSAGE.format(attribute="serial_number")
                ) from exc
            dto = map_equipment(equipment)
        logger.info("equipment_updated", equipment_id=dto.id, fields=sorted(values))
        return dto

    @translate_db_errors
    async def destroy(self, equipment_id: int) -> None:
        async with self._uow_factory() as uow:
            equipment = await self._get_or_404(uow, equipment_id)
            await uow.equipment.soft_delete(equipment)
        logger.info("equipment_deleted", equipment_id=equipment_id)

    @staticmethod
    async def _get_or_404(uow: UnitOfWork, equipment_id: int) -> Equipment:
        equipment = await uow.equipment.get(equipment_id)
        if equipment is None:
            raise NotFoundError("equipment not found")
        return equipment
