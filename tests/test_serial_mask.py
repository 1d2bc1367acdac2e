import pytest

from equipment_api.utils.serial_mask import compile_mask, matches_mask

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("mask", "serial_number"),
    [
        ("XXAAAAAXAA", "0QWERTY1AB"),
        ("NXXAAXZXaa", "1A2BC3-4xy"),
        ("NXXAAXZXaa", "9ZZZZ9@9zz"),
        ("NAAAAXZXXX", "7ABCD1_2Z9"),
    ],
)
def test_matching_serial_numbers(mask: str, serial_number: str) -> None:
    assert matches_mask(mask, serial_number)


@pytest.mark.parametrize(
    ("mask", "serial_number"),
    [
        ("XXAAAAAXAA", "0qWERTY1AB"),  # lowercase where X expects upper/digit
        ("XXAAAAAXAA", "0QWERTY1A"),  # too short
        ("XXAAAAAXAA", "0QWERTY1ABC"),  # too long
        ("NXXAAXZXaa", "1A2BC3+4xy"),  # '+' is not in Z
        ("NXXAAXZXaa", "AA2BC3-4xy"),  # N needs a digit
    ],
)
def test_non_matching_serial_numbers(mask: str, serial_number: str) -> None:
    assert not matches_mask(mask, serial_number)


def test_unknown_mask_character_matches_nothing() -> None:
    with pytest.raises(ValueError):
        compile_mask("NNQ")
    assert not matches_mask("NNQ", "12Q")


def test_empty_mask_is_rejected() -> None:
    with pytest.raises(ValueError):
        compile_mask("")
    assert not matches_mask("", "")
