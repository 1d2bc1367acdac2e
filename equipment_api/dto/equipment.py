"""DTOs for equipment resources exposed via the public API."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class EquipmentDTO(BaseModel):
    id: int = Field(description="Equipment id")
    equipment_type_id: int = Field(description="Equipment type id")
    serial_number: str = Field(description="Serial number (max 20 chars)")
    remark: str | None = Field(default=None, description="Free-text remark")
    created_at: datetime | None = Field(default=None, description="Creation time (ISO8601)")
    updated_at: datetime | None = Field(default=None, description="Last update time (ISO8601)")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 12,
                "equipment_type_id": 1,
                "serial_number": "0QWERTY1AB",
                "remark": "rack 3",
                "created_at": "2025-09-01T12:34:56Z",
                "updated_at": "2025-09-01T12:34:56Z",
            }
        },
    )


class EquipmentResponse(BaseModel):
    """Single resource wrapper."""

    data: EquipmentDTO


class BulkItemResultDTO(BaseModel):
    index: int = Field(description="Position in the submitted serial_number list")
    serial_number: str | None = Field(default=None, description="Submitted value, if a string")
    status: Literal["created", "rejected"]
    id: int | None = Field(default=None, description="Id of the created row")
    errors: list[str] = Field(default_factory=list, description="Why the item was rejected")


class BulkCreateResponse(BaseModel):
    data: list[EquipmentDTO] = Field(description="Created rows")
    results: list[BulkItemResultDTO] = Field(description="Per-item outcome, in request order")
