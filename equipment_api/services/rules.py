"""Per-field validation rule chains.

A rule is an async callable ``(attribute, value) -> message | None``. Rules of
one field run in order and stop at the first failure; every field is always
evaluated so the caller gets one aggregated report.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from equipment_api.core.exceptions import ValidationError
from equipment_api.repositories.interfaces import EquipmentRepository, EquipmentTypeRepository
from equipment_api.utils.serial_mask import matches_mask

Rule = Callable[[str, Any], Awaitable[str | None]]
FieldRules = Mapping[str, tuple[Any, Sequence[Rule]]]

__all__ = [
    "Rule",
    "validate_fields",
    "ensure_valid",
    "required",
    "nullable",
    "integer",
    "string",
    "max_length",
    "exists",
    "unique_serial_number",
    "matches_type_mask",
    "TAKEN_MESSAGE",
]

TAKEN_MESSAGE = "The {attribute} has already been taken."


class _Nullable:
    """Marker rule: a None value passes the whole chain."""

    async def __call__(self, attribute: str, value: Any) -> str | None:
        return None


nullable = _Nullable()


async def validate_fields(fields: FieldRules) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for attribute, (value, rules) in fields.items():
        if value is None and any(r is nullable for r in rules):
            continue
        for rule in rules:
            message = await rule(attribute, value)
            if message is not None:
                errors[attribute] = [message]
                break
    return errors


async def ensure_valid(fields: FieldRules) -> None:
    errors = await validate_fields(fields)
    if errors:
        raise ValidationError(errors)


async def required(attribute: str, value: Any) -> str | None:
    if value is None or value == "" or (isinstance(value, (list, tuple)) and not value):
        return f"The {attribute} field is required."
    return None


async def integer(attribute: str, value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"The {attribute} must be an integer."
    return None


async def string(attribute: str, value: Any) -> str | None:
    if not isinstance(value, str):
        return f"The {attribute} must be a string."
    return None


def max_length(limit: int) -> Rule:
    async def _rule(attribute: str, value: Any) -> str | None:
        if len(value) > limit:
            return f"The {attribute} must not be greater than {limit} characters."
        return None

    return _rule


def exists(repo: EquipmentTypeRepository) -> Rule:
    async def _rule(attribute: str, value: Any) -> str | None:
        if await repo.get(int(value)) is None:
            return f"The selected {attribute} is invalid."
        return None

    return _rule


def unique_serial_number(repo: EquipmentRepository, *, ignore_id: int | None = None) -> Rule:
    async def _rule(attribute: str, value: Any) -> str | None:
        if await repo.serial_number_taken(value, ignore_id=ignore_id):
            return TAKEN_MESSAGE.format(attribute=attribute)
        return None

    return _rule


def matches_type_mask(mask: str | None) -> Rule:
    # mask is None when the type could not be resolved; the type field reports that
    async def _rule(attribute: str, value: Any) -> str | None:
        if mask is None or not matches_mask(mask, value):
            return f"The {attribute} format is invalid."
        return None

    return _rule
