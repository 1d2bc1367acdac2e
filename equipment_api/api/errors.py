from typing import Any

import structlog
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from equipment_api.core import exceptions as domain_exceptions

_INVALID = "The given data was invalid."

# Request locations that are not part of the field path
_LOCATION_PREFIXES = {"body", "query", "path", "header"}
_UNION_TAGS = {"str", "int", "float", "bool", "none"}


def _field_path(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    # Union branches show up as extra loc entries (e.g. "str", "list[any]")
    parts = [p for p in parts if p not in _UNION_TAGS and not p.startswith(("list[", "function-"))]
    return ".".join(parts) or "body"


def _message(field: str, error: dict[str, Any]) -> str:
    if error.get("type") == "missing":
        return f"The {field} field is required."
    return f"The {field} is invalid: {error.get('msg', 'invalid value')}."


def request_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _field_path(tuple(error.get("loc", ())))
        message = _message(field, error)
        bucket = errors.setdefault(field, [])
        if message not in bucket:
            bucket.append(message)
    return errors


def _http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    # Normalize to a consistent JSON body
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def _request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"detail": _INVALID, "errors": request_validation_errors(exc)},
    )


def _validation_error_handler(_: Request, exc: domain_exceptions.ValidationError) -> JSONResponse:
    content: dict[str, Any] = {"detail": str(exc) or _INVALID, "errors": exc.errors}
    if exc.results is not None:
        content["results"] = exc.results
    return JSONResponse(status_code=422, content=content)


def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    structlog.get_logger(__name__).error("unhandled_exception", exc_info=exc)
    # Hide internal details by default
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def _domain_error_handler(status_code: int, default_detail: str):
    def _handler(_: Request, exc: domain_exceptions.DomainError) -> JSONResponse:
        detail = str(exc) or default_detail
        return JSONResponse(status_code=status_code, content={"detail": detail})

    return _handler


def install(app) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(HTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(domain_exceptions.ValidationError, _validation_error_handler)
    app.add_exception_handler(
        domain_exceptions.NotFoundError, _domain_error_handler(404, "Not Found")
    )
    app.add_exception_handler(
        domain_exceptions.InfrastructureError,
        _domain_error_handler(503, "Service Unavailable"),
    )
    app.add_exception_handler(Exception, _unhandled_exception_handler)
