"""Translate driver-level database failures into domain errors."""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from equipment_api.core.exceptions import InfrastructureError

P = ParamSpec("P")
R = TypeVar("R")


def translate_db_errors(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
    """Turn connection and query failures into InfrastructureError (503).

    IntegrityError is left alone; callers map the ones they understand.
    """

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await fn(*args, **kwargs)
        except IntegrityError:
            raise
        except SQLAlchemyError as exc:
            structlog.get_logger(__name__).error(
                "database_error", operation=fn.__qualname__, exc_info=True
            )
            raise InfrastructureError("database unavailable") from exc

    return wrapper
