import pytest
from starlette.datastructures import URL

from equipment_api.utils.paging import (
    build_next_offset_token,
    last_page,
    page_links,
    parse_offset_token,
    resolve_per_page,
)


@pytest.mark.parametrize(("value", "expected"), [(None, 30), (0, 30), (10, 10), (500, 100)])
def test_resolve_per_page(value, expected):
    assert resolve_per_page(value, default=30, maximum=100) == expected


def test_parse_offset_token_accepts_matching_hash():
    token = build_next_offset_token(0, 10, 30, sort_key="id-asc")
    assert token == "10:id-asc"

    offset = parse_offset_token(token, page=1, per_page=10, expected_sort_key="id-asc")
    assert offset == 10


def test_parse_offset_token_defaults_to_page():
    assert parse_offset_token(None, page=3, per_page=30) == 60


def test_parse_offset_token_rejects_sort_mismatch():
    token = build_next_offset_token(0, 20, 50, sort_key="id-asc")

    with pytest.raises(ValueError):
        parse_offset_token(token, page=1, per_page=20, expected_sort_key="name-asc")


def test_parse_offset_token_handles_empty_or_negative():
    with pytest.raises(ValueError):
        parse_offset_token("", page=1, per_page=10)

    with pytest.raises(ValueError):
        parse_offset_token("-10", page=1, per_page=10)

    with pytest.raises(ValueError):
        parse_offset_token("abc", page=1, per_page=10)


def test_no_next_token_on_last_page():
    assert build_next_offset_token(30, 30, 45) is None
    assert build_next_offset_token(0, 30, 45) == "30"


def test_last_page():
    assert last_page(45, 30) == 2
    assert last_page(30, 30) == 1
    assert last_page(0, 30) == 1


def test_page_links_keep_query_string():
    url = URL("http://test/equipment/search?serial_number=12&per_page=10&page=2&page_token=10")
    links = page_links(url, page=2, last=3)

    assert links["first"] == "http://test/equipment/search?serial_number=12&per_page=10&page=1"
    assert links["prev"].endswith("page=1")
    assert links["next"] == "http://test/equipment/search?serial_number=12&per_page=10&page=3"
    assert links["last"].endswith("page=3")
    assert "page_token" not in links["next"]


def test_page_links_on_single_page():
    links = page_links(URL("http://test/equipment"), page=1, last=1)
    assert links["prev"] is None
    assert links["next"] is None
    assert links["first"] == "http://test/equipment?page=1"


def test_parse_offset_token_rejects_offset_off_page_boundary():
    with pytest.raises(ValueError):
        parse_offset_token("30:id-asc", page=1, per_page=20, expected_sort_key="id-asc")

    assert parse_offset_token("30:id-asc", page=1, per_page=15, expected_sort_key="id-asc") == 30
