from .common import ErrorResponse, OkResponse, ValidationErrorResponse
from .equipment import (
    EquipmentCreateRequest,
    EquipmentUpdateRequest,
    SerialNumberBatch,
    SerialNumberInput,
    SingleSerialNumber,
)

__all__ = [
    "ErrorResponse",
    "OkResponse",
    "ValidationErrorResponse",
    "EquipmentCreateRequest",
    "EquipmentUpdateRequest",
    "SerialNumberBatch",
    "SerialNumberInput",
    "SingleSerialNumber",
]
