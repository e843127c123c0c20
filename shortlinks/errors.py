"""Exceptions raised by the short link service and its stores."""

from typing import Optional


class ShortLinkError(Exception):
    """Base class for all short link errors."""


class InvalidURLError(ShortLinkError, ValueError):
    """The long URL failed validation."""

    def __init__(self, message: str = "Invalid URL format"):
        super().__init__(message)


class InvalidShortCodeError(ShortLinkError, ValueError):
    """A caller-supplied short code was rejected."""


class InvalidTimeoutError(ShortLinkError, ValueError):
    """The expiration timeout is not a positive number of seconds."""


class CodeConflictError(ShortLinkError, ValueError):
    """The short code is already taken."""

    def __init__(self, short_code: str, message: str = "Custom code already exists"):
        super().__init__(message)
        self.short_code = short_code


class LinkNotFoundError(ShortLinkError):
    """No live link exists for the short code.

    Absent and expired links are reported the same way.
    """

    def __init__(self, short_code: str, message: str = "Short URL not found or expired"):
        super().__init__(message)
        self.short_code = short_code


class StorageError(ShortLinkError):
    """Wraps a failure of the underlying database driver."""

    def __init__(self, message: str = "Database error", cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause
