"""Request bodies for the equipment endpoints.

``serial_number`` on create is either a string or a list. The router turns it
into :class:`SingleSerialNumber` or :class:`SerialNumberBatch` before the
service sees it, so business logic never inspects the raw JSON type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class SingleSerialNumber:
    value: str


@dataclass(frozen=True)
class SerialNumberBatch:
    # Elements are validated one by one, so non-strings are kept as-is here
    values: tuple[Any, ...]


SerialNumberInput = SingleSerialNumber | SerialNumberBatch


class EquipmentCreateRequest(BaseModel):
    equipment_type_id: int | None = Field(default=None, description="Equipment type id")
    serial_number: str | list[Any] | None = Field(
        default=None,
        description="Serial number, or a list of serial numbers for bulk creation",
    )
    remark: str | None = Field(default=None, description="Free-text remark")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"equipment_type_id": 1, "serial_number": "0QWERTY1AB", "remark": "rack 3"},
                {"equipment_type_id": 1, "serial_number": ["0QWERTY1AB", "1ASDFGH2CD"]},
            ]
        }
    )

    def serial_number_input(self) -> SerialNumberInput | None:
        """Disambiguate the scalar and batch forms; None when nothing usable was sent."""
        value = self.serial_number
        if isinstance(value, list):
            return SerialNumberBatch(tuple(value)) if value else None
        if value is None or value == "":
            return None
        return SingleSerialNumber(value)


class EquipmentUpdateRequest(BaseModel):
    """Partial update; only fields present in the JSON body are applied.

    Fields stay untyped here: the row lookup runs before the rule chains, so a
    missing id answers 404 whatever the body holds.
    """

    equipment_type_id: Any = Field(default=None, description="Equipment type id (integer)")
    serial_number: Any = Field(default=None, description="New serial number (string)")
    remark: Any = Field(default=None, description="Free-text remark; null clears it")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"serial_number": "0QWERTY1AB"}, {"remark": None}]}
    )

    def supplied(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
