"""DTOs for the equipment type catalogue."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EquipmentTypeDTO(BaseModel):
    id: int = Field(description="Equipment type id")
    name: str = Field(description="Display name")
    mask: str = Field(description="Serial number mask (N, A, a, X, Z)")
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"id": 1, "name": "TP-Link TL-WR74", "mask": "XXAAAAAXAA"}},
    )


class EquipmentTypeResponse(BaseModel):
    data: EquipmentTypeDTO
