from __future__ import annotations

import pytest

from equipment_api.core.exceptions import ValidationError
from equipment_api.services import rules
from tests.fakes import FakeEquipmentRepository, FakeEquipmentTypeRepository


@pytest.mark.asyncio
async def test_chain_stops_at_first_failure():
    calls: list[str] = []

    async def spy(attribute, value):
        calls.append(attribute)
        return None

    errors = await rules.validate_fields({"serial_number": (42, [rules.string, spy])})

    assert errors == {"serial_number": ["The serial_number must be a string."]}
    assert calls == []


@pytest.mark.asyncio
async def test_all_fields_are_evaluated():
    errors = await rules.validate_fields(
        {
            "equipment_type_id": (None, [rules.required, rules.integer]),
            "serial_number": ("x" * 21, [rules.string, rules.max_length(20)]),
            "remark": ("ok", [rules.nullable, rules.string]),
        }
    )

    assert errors == {
        "equipment_type_id": ["The equipment_type_id field is required."],
        "serial_number": ["The serial_number must not be greater than 20 characters."],
    }


@pytest.mark.asyncio
async def test_nullable_skips_remaining_rules():
    errors = await rules.validate_fields({"remark": (None, [rules.nullable, rules.string])})
    assert errors == {}


@pytest.mark.parametrize("value", ["", None, [], ()])
@pytest.mark.asyncio
async def test_required_rejects_empty_values(value):
    assert await rules.required("serial_number", value) == "The serial_number field is required."


@pytest.mark.parametrize("value", [True, "1", 1.5])
@pytest.mark.asyncio
async def test_integer_rejects_non_integers(value):
    assert await rules.integer("equipment_type_id", value) is not None


@pytest.mark.asyncio
async def test_exists_uses_type_repository(store):
    exists = rules.exists(FakeEquipmentTypeRepository(store))

    assert await exists("equipment_type_id", 1) is None
    assert await exists("equipment_type_id", 99) == "The selected equipment_type_id is invalid."


@pytest.mark.asyncio
async def test_unique_serial_number_ignores_own_row(store):
    row = store.add_equipment(equipment_type_id=1, serial_number="0QWERTY1AB")
    repo = FakeEquipmentRepository(store)

    assert await rules.unique_serial_number(repo)("serial_number", "0QWERTY1AB") == (
        "The serial_number has already been taken."
    )
    assert await rules.unique_serial_number(repo, ignore_id=row.id)("serial_number", "0QWERTY1AB") is None


@pytest.mark.asyncio
async def test_mask_rule_without_resolved_type_fails():
    assert await rules.matches_type_mask(None)("serial_number.0", "0QWERTY1AB") == (
        "The serial_number.0 format is invalid."
    )
    assert await rules.matches_type_mask("XXAAAAAXAA")("serial_number.0", "0QWERTY1AB") is None


@pytest.mark.asyncio
async def test_ensure_valid_raises_with_error_map():
    with pytest.raises(ValidationError) as exc:
        await rules.ensure_valid({"serial_number": (None, [rules.required])})

    assert exc.value.errors == {"serial_number": ["The serial_number field is required."]}
    assert exc.value.results is None
