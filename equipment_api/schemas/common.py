# equipment_api/schemas/common.py
from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(description="Error message")

    model_config = {"json_schema_extra": {"examples": [{"detail": "Not Found"}]}}


class ValidationErrorResponse(BaseModel):
    detail: str = Field(description="Summary message")
    errors: dict[str, list[str]] = Field(
        default_factory=dict, description="Messages keyed by field path (e.g. serial_number.2)"
    )
    results: list[dict[str, Any]] | None = Field(
        default=None, description="Per-item outcome of a bulk create, when applicable"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": "The given data was invalid.",
                    "errors": {"serial_number.1": ["The serial_number.1 has already been taken."]},
                }
            ]
        }
    }


class OkResponse(BaseModel):
    ok: bool = Field(description="Always true")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}
