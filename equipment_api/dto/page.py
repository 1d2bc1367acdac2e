"""Collection envelopes with pagination metadata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from .equipment import EquipmentDTO
from .equipment_type import EquipmentTypeDTO

T = TypeVar("T")


class PageLinksDTO(BaseModel):
    first: str
    last: str
    prev: str | None = None
    next: str | None = None


class PageMetaDTO(BaseModel):
    current_page: int = Field(description="Current page (1-based)")
    from_: int | None = Field(default=None, alias="from", description="Index of the first item")
    last_page: int = Field(description="Number of the last page")
    path: str = Field(description="Request path without query string")
    per_page: int = Field(description="Items per page")
    to: int | None = Field(default=None, description="Index of the last item")
    total: int = Field(description="Total number of matching items")
    next_page_token: str | None = Field(default=None, description="Offset token for the next page")

    model_config = {"populate_by_name": True}


class EquipmentPageDTO(BaseModel):
    data: list[EquipmentDTO]
    links: PageLinksDTO
    meta: PageMetaDTO


class EquipmentTypePageDTO(BaseModel):
    data: list[EquipmentTypeDTO]
    links: PageLinksDTO
    meta: PageMetaDTO


@dataclass
class PageResult(Generic[T]):
    """What a service hands back for a paginated query, before links are attached."""

    items: list[T]
    total: int
    page: int
    per_page: int
    next_page_token: str | None = None
    offset: int = 0
