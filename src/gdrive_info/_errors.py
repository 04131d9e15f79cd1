"""Error taxonomy: domain failures reported by Google Drive and caller-input errors."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumeration of failures reported by the remote service.

    Examples:
        >>> kind = ErrorKind.NOT_FOUND
        >>> kind = ErrorKind.NOT_ACCESSIBLE
        >>> kind = ErrorKind.FETCH_FAILED
    """

    NOT_FOUND = "NotFound"
    NOT_ACCESSIBLE = "NotAccessible"
    FETCH_FAILED = "FetchFailed"


NOT_FOUND_MESSAGE = "Item is not found."
NOT_ACCESSIBLE_MESSAGE = "Item is not accessible."
FETCH_INFO_FAILED_MESSAGE = "Failed to fetch info."
FETCH_THUMBNAIL_FAILED_MESSAGE = "Failed to fetch thumbnail."


class GDriveError(Exception):
    """The service refused or failed a request.

    Attributes:
        kind: Which failure the service reported.
        reason: The original HTTP error, if any. It is also chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.FETCH_FAILED,
        reason: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.reason = reason

    @property
    def message(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"GDriveError({self.message!r}, kind={self.kind.value!r})"


class InvalidInputError(ValueError):
    """The caller supplied input that cannot be sent to the service."""


class InvalidIdentifierError(InvalidInputError):
    """Input is neither a valid item id nor a recognised shareable link."""


class InvalidDimensionsError(InvalidInputError):
    """Thumbnail width or height is not a positive integer."""
