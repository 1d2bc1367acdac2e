"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class DomainError(Exception):
    """Base class for domain-specific failures."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ValidationError(DomainError):
    """Raised when one or more fields fail their rules.

    ``errors`` maps a field path (``serial_number``, ``serial_number.2``) to the
    messages produced for it. ``results`` is set by bulk creation so callers can
    see which items were committed before the failure was reported.
    """

    def __init__(
        self,
        errors: Mapping[str, Sequence[str]],
        *,
        results: Sequence[Any] | None = None,
        message: str = "The given data was invalid.",
    ) -> None:
        super().__init__(message)
        self.errors: dict[str, list[str]] = {k: list(v) for k, v in errors.items()}
        self.results = list(results) if results is not None else None

    @classmethod
    def single(cls, attribute: str, message: str) -> ValidationError:
        return cls({attribute: [message]})


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB or external service) is unavailable."""
