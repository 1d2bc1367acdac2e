import pytest

from equipment_api.models.base import MAX_INTEGER_ID, is_storable_id
from equipment_api.repositories.sqlalchemy import (
    SqlAlchemyEquipmentRepository,
    SqlAlchemyEquipmentTypeRepository,
)


class _UnreachableSession:
    """Fails the test if a query would be sent to the database."""

    def __getattr__(self, name):
        raise AssertionError(f"session.{name} must not be used for an out-of-range id")


@pytest.mark.parametrize("value", [0, -1, MAX_INTEGER_ID + 1, 99_999_999_999])
def test_out_of_range_ids_are_not_storable(value):
    assert not is_storable_id(value)


def test_integer_range_ids_are_storable():
    assert is_storable_id(1)
    assert is_storable_id(MAX_INTEGER_ID)


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [0, MAX_INTEGER_ID + 1])
async def test_equipment_get_skips_query_for_out_of_range_id(value):
    repo = SqlAlchemyEquipmentRepository(_UnreachableSession())
    assert await repo.get(value) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [0, MAX_INTEGER_ID + 1])
async def test_equipment_type_get_skips_query_for_out_of_range_id(value):
    repo = SqlAlchemyEquipmentTypeRepository(_UnreachableSession())
    assert await repo.get(value) is None
