from __future__ import annotations

from collections.abc import Callable

from fastapi import Request, Response


async def security_headers_middleware(request: Request, call_next: Callable) -> Response:
    """Attach basic security headers to every JSON API response."""
    response = await call_next(request)
    headers = response.headers
    headers.setdefault("X-Content-Type-Options", "nosniff")
    headers.setdefault("X-Frame-Options", "DENY")
    headers.setdefault("Referrer-Policy", "no-referrer")
    headers.setdefault("Cache-Control", "no-store")
    return response
