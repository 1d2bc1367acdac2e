"""Public DTO exports for FastAPI response models."""

from .equipment import BulkCreateResponse, BulkItemResultDTO, EquipmentDTO, EquipmentResponse
from .equipment_type import EquipmentTypeDTO, EquipmentTypeResponse
from .page import (
    EquipmentPageDTO,
    EquipmentTypePageDTO,
    PageLinksDTO,
    PageMetaDTO,
    PageResult,
)

__all__ = [
    "BulkCreateResponse",
    "BulkItemResultDTO",
    "EquipmentDTO",
    "EquipmentResponse",
    "EquipmentTypeDTO",
    "EquipmentTypeResponse",
    "EquipmentPageDTO",
    "EquipmentTypePageDTO",
    "PageLinksDTO",
    "PageMetaDTO",
    "PageResult",
]
