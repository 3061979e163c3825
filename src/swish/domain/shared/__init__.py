"""Shared domain building blocks."""

from swish.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)
from swish.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ExternalServiceError",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
