import pytest

from equipment_api.api.errors import _field_path

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("loc", "expected"),
    [
        (("body", "equipment_type_id"), "equipment_type_id"),
        (("body", "serial_number", "str"), "serial_number"),
        (("body", "serial_number", "list[any]"), "serial_number"),
        (("query", "per_page"), "per_page"),
        (("body",), "body"),
    ],
)
def test_field_path_from_error_location(loc, expected):
    assert _field_path(loc) == expected
