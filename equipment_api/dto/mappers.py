"""Utilities to map ORM objects and service results into DTOs."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel
from starlette.datastructures import URL

from equipment_api.dto import (
    EquipmentDTO,
    EquipmentTypeDTO,
    PageLinksDTO,
    PageMetaDTO,
    PageResult,
)
from equipment_api.models import Equipment, EquipmentType
from equipment_api.utils.paging import last_page, page_links

P = TypeVar("P", bound=BaseModel)


def map_equipment(equipment: Equipment) -> EquipmentDTO:
    return EquipmentDTO.model_validate(equipment)


def map_equipment_type(equipment_type: EquipmentType) -> EquipmentTypeDTO:
    return EquipmentTypeDTO.model_validate(equipment_type)


def map_page(envelope: type[P], result: PageResult, url: URL) -> P:
    """Wrap a service page into a collection envelope with links and meta.

    Links are derived from ``url`` so the caller's other query parameters
    (per_page, serial_number, ...) survive navigation.
    """
    last = last_page(result.total, result.per_page)
    offset = result.offset
    count = len(result.items)
    meta = PageMetaDTO(
        current_page=result.page,
        from_=offset + 1 if count else None,
        last_page=last,
        path=str(url.replace(query="")),
        per_page=result.per_page,
        to=offset + count if count else None,
        total=result.total,
        next_page_token=result.next_page_token,
    )
    links = PageLinksDTO(**page_links(url, page=result.page, last=last))
    return envelope(data=result.items, links=links, meta=meta)
