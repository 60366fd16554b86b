"""gravgen exception hierarchy.

All library exceptions inherit from :class:`GravgenError`.
"""

from __future__ import annotations


class GravgenError(Exception):
    """Base exception for all gravgen errors."""


class ConfigurationError(GravgenError):
    """Raised when a required external identifier generator is unavailable."""


class ValidationError(GravgenError):
    """Raised when an avatar request is constructed with invalid values."""


class InvalidStyleError(ValidationError):
    """Raised when a style is not one of the supported avatar styles."""


class InvalidSizeTypeError(ValidationError):
    """Raised when a size cannot be interpreted as an integer."""


class InvalidSizeError(ValidationError):
    """Raised when a size falls outside the allowed pixel range."""


class FetchError(GravgenError):
    """Raised on any transport failure or non-2xx response from the service."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class PersistenceError(GravgenError):
    """Raised when avatar bytes cannot be written to their destination."""


class DestinationExistsError(PersistenceError):
    """Raised when a write would silently overwrite an existing file."""

    def __init__(self, path: str) -> None:
        super().__init__(f"file exists: {path}")
        self.path = path
