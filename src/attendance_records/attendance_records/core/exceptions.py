from __future__ import annotations

from .enums import ErrorCode


class DomainError(Exception):
    """Base exception for failures surfaced to callers with a stable code."""

    code: ErrorCode = ErrorCode.INTERNAL
    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(DomainError):
    """Raised when required input is missing or malformed. Not retried."""

    code = ErrorCode.INVALID_ARGUMENT
    http_status = 400


class NotFoundError(DomainError):
    """Raised when the referenced record or user does not exist."""

    code = ErrorCode.NOT_FOUND
    http_status = 404


class InternalError(DomainError):
    """Raised on store or decode failures. Safe for the caller to retry."""

    code = ErrorCode.INTERNAL
    http_status = 500


class StoreError(Exception):
    """Raised by repositories when the underlying store call fails."""


class RecordDecodeError(Exception):
    """Raised when a stored document cannot be turned into a record."""
