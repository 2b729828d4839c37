"""Catalog domain exceptions.

These exceptions inherit from the shared DomainException base class and
provide semantic error information that maps to appropriate HTTP responses.
"""

from typing import Any

from songlib.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ExternalServiceError,
    ValidationError,
)


class SongNotFoundError(EntityNotFoundError):
    """Raised when no song exists for the given identifier."""

    def __init__(self, song_id: int) -> None:
        super().__init__(
            message=f"Song with ID {song_id} not found",
            code=ErrorCode.SONG_NOT_FOUND,
            details={"song_id": song_id},
        )


class VersePageNotFoundError(EntityNotFoundError):
    """Raised when the requested verse page lies outside the lyric text."""

    def __init__(self, page: int, limit: int, total: int) -> None:
        super().__init__(
            message="No verses found for the requested page",
            code=ErrorCode.PAGE_NOT_FOUND,
            details={"page": page, "limit": limit, "total": total},
        )


class DuplicateSongError(ConflictError):
    """Raised when a (group, song) pair is already in the catalog."""

    def __init__(self, group: str, song: str) -> None:
        super().__init__(
            message=f"Song '{song}' by '{group}' already exists",
            code=ErrorCode.DUPLICATE_SONG,
            details={"group": group, "song": song},
        )


class InvalidDateFormatError(ValidationError):
    """Raised when a release date is not in YYYY-MM-DD layout."""

    def __init__(self, value: Any) -> None:
        super().__init__(
            message="invalid date format",
            code=ErrorCode.INVALID_DATE,
            details={"value": value, "expected": "YYYY-MM-DD"},
        )


class UpstreamUnavailableError(ExternalServiceError):
    """Raised when the song info service cannot be reached or refuses."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            message="failed to retrieve song details from external API",
            code=ErrorCode.UPSTREAM_UNAVAILABLE,
            details=details,
        )


class UpstreamMalformedError(ExternalServiceError):
    """Raised when the song info service answers with an unusable body."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            message="external API returned an invalid response",
            code=ErrorCode.UPSTREAM_MALFORMED,
            details={"reason": reason},
        )


class StorageFailureError(ExternalServiceError):
    """Raised when the song store rejects a read or write."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            message="internal server error",
            code=ErrorCode.STORAGE_FAILURE,
            details={"operation": operation, "reason": reason},
        )
