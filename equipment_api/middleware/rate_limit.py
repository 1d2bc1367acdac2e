from __future__ import annotations

from collections.abc import Callable
from typing import TypedDict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from limits import parse as parse_limit
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter
from slowapi import Limiter

from equipment_api.core.config import settings


class RateLimitInfo(TypedDict, total=False):
    method: str
    ip: str
    limit: str


def _client_ip(request: Request) -> str:
    # First hop of X-Forwarded-For, then the ASGI client
    xff = request.headers.get("x-forwarded-for")
    if xff:
        return xff.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "local"


# slowapi supplies the RateLimitExceeded type handled in main; the per-method
# windows below use `limits` directly so routers stay untouched.
limiter = Limiter(key_func=_client_ip)

_storage = MemoryStorage()
_rate = MovingWindowRateLimiter(_storage)


def _enabled() -> bool:
    if settings.rate_limit_enabled is not None:
        return settings.rate_limit_enabled
    return not settings.testing


def _limit_for_method(method: str) -> str | None:
    m = method.upper()
    if m in {"GET", "HEAD"}:
        return "120/minute"
    if m in {"POST", "PUT", "PATCH", "DELETE"}:
        # Bulk creates count as one hit regardless of batch size
        return "30/minute"
    return None


def rate_limited_response(info: RateLimitInfo) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"detail": "Too Many Requests", "limit": dict(info)},
    )


async def rate_limit_middleware(request: Request, call_next: Callable) -> Response:
    if not _enabled():
        return await call_next(request)

    limit_str = _limit_for_method(request.method)
    if not limit_str:
        return await call_next(request)

    ip = _client_ip(request)
    key = f"ip:{ip}|m:{request.method.upper()}"
    if not _rate.hit(parse_limit(limit_str), key):
        info: RateLimitInfo = {"method": request.method.upper(), "ip": ip, "limit": limit_str}
        request.state.rate_limit_info = info
        return rate_limited_response(info)

    response = await call_next(request)
    response.headers.setdefault("X-RateLimit-Limit", limit_str)
    return response
