# equipment_api/utils/paging.py
from __future__ import annotations

import math

from starlette.datastructures import URL

__all__ = [
    "resolve_per_page",
    "parse_offset_token",
    "build_next_offset_token",
    "page_links",
    "last_page",
]


def resolve_per_page(per_page: int | None, *, default: int, maximum: int) -> int:
    """Return the effective page size.

    Unset or falsy values (None, 0) fall back to ``default``; anything above
    ``maximum`` is clamped.
    """
    if not per_page:
        return default
    return min(int(per_page), maximum)


def last_page(total: int, per_page: int) -> int:
    return max(1, math.ceil(total / per_page))


def parse_offset_token(
    token: str | None,
    *,
    page: int,
    per_page: int,
    expected_sort_key: str | None = None,
) -> int:
    """Decode a page_token into an integer offset.

    Accepted formats:
    1. plain integer string (e.g. "40")
    2. "<offset>:<h>" where <h> is the first 8 characters of the sort key

    When ``token`` is None the offset is ``(page - 1) * per_page``. Empty,
    malformed or negative tokens, sort key mismatches and offsets that do not
    start a page of ``per_page`` rows raise ValueError; the router turns that
    into a 422.
    """
    if token is None:
        return (page - 1) * per_page

    token = token.strip()
    if not token:
        raise ValueError("empty page_token")

    raw = token
    hash_part: str | None = None
    if ":" in token:
        raw, hash_part = token.split(":", 1)
        if not raw:
            raise ValueError("empty page_token")

    offset = int(raw)
    if offset < 0:
        raise ValueError("invalid page_token")

    if expected_sort_key and hash_part:
        if hash_part != expected_sort_key[:8]:
            raise ValueError("invalid page_token")

    # A token minted for another page size would put from/to and the links off the rows
    if offset % per_page:
        raise ValueError("page_token does not match per_page")

    return offset


def build_next_offset_token(
    offset: int,
    per_page: int,
    total_len: int,
    *,
    sort_key: str | None = None,
) -> str | None:
    """Return the page_token for the page after ``offset``, or None on the last page."""
    next_offset = offset + per_page
    if next_offset >= total_len:
        return None
    if not sort_key:
        return str(next_offset)
    return f"{next_offset}:{sort_key[:8]}"


def page_links(url: URL, *, page: int, last: int) -> dict[str, str | None]:
    """Build first/last/prev/next links that keep the caller's query string.

    Only ``page`` is replaced; ``page_token`` is dropped because it would
    override the page number on the next request.
    """
    base = url.remove_query_params("page_token")

    def _at(n: int) -> str:
        return str(base.include_query_params(page=n))

    return {
        "first": _at(1),
        "last": _at(last),
        "prev": _at(page - 1) if page > 1 else None,
        "next": _at(page + 1) if page < last else None,
    }
