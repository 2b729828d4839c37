"""Base exceptions and error codes shared by all domain packages.

The presentation layer turns any DomainException into an HTTP response; the
code decides the status, the message is what the client sees.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes returned to API clients. Values are a public contract."""

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE = "INVALID_DATE"

    # 404
    SONG_NOT_FOUND = "SONG_NOT_FOUND"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"

    # 409
    DUPLICATE_SONG = "DUPLICATE_SONG"

    # 500
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_MALFORMED = "UPSTREAM_MALFORMED"
    STORAGE_FAILURE = "STORAGE_FAILURE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of the domain exception tree.

    Attributes
    ----------
    message
        Text safe to show to API clients
    code
        Machine-readable error code
    details
        Extra context for logs; never sent to clients
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input rejected before anything was read or written."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EntityNotFoundError(DomainException):
    """The requested record does not exist. Subclasses name the code."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ConflictError(DomainException):
    """The change would clash with data already stored."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class ExternalServiceError(DomainException):
    """A collaborator outside the process (upstream API, database) failed."""
