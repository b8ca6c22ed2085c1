"""Exception hierarchy for cloudinary-kit.

Every error raised by the library derives from :class:`CloudinaryError`,
so callers can catch one type. HTTP failures map onto the subclasses in
``BaseClient._handle_error_response``; URL parsing failures derive from
:class:`UrlParseError`.
"""

from typing import Any


class CloudinaryError(Exception):
    """Base exception for all cloudinary-kit errors.

    Attributes:
        message: Human readable description
        details: Extra context, usually the service's error payload
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(CloudinaryError):
    """Invalid or missing configuration."""


# HTTP errors


class AuthenticationError(CloudinaryError):
    """Invalid credentials or signature (HTTP 401)."""


class AuthorizationError(CloudinaryError):
    """Credentials lack permission for the operation (HTTP 403)."""


class NotFoundError(CloudinaryError):
    """Asset or resource not found (HTTP 404)."""


class ValidationError(CloudinaryError):
    """Request rejected as invalid (HTTP 400)."""


class ConflictError(CloudinaryError):
    """Request conflicts with an existing resource (HTTP 409)."""


class ServerError(CloudinaryError):
    """Service-side failure (HTTP 5xx)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.status_code = status_code


# Network errors


class NetworkError(CloudinaryError):
    """Base class for transport-level failures."""


class ConnectionError(NetworkError):
    """Could not connect to the service."""


class TimeoutError(NetworkError):
    """The request did not complete in time."""


class RateLimitError(NetworkError):
    """Too many requests (HTTP 420 or 429).

    Attributes:
        retry_after: Seconds to wait before retrying, when the service says
    """

    def __init__(
        self,
        message: str,
        retry_after: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.retry_after = retry_after


# Payload errors


class FormatError(CloudinaryError):
    """Response body could not be decoded."""


class MediaError(CloudinaryError):
    """Upload or destroy request failed."""


# URL parsing errors


class UrlParseError(CloudinaryError):
    """A delivery URL could not be decomposed.

    Any parse failure means the URL cannot be turned into an image; no
    partial result is ever returned.
    """


class EmptyInputError(UrlParseError):
    """The URL string is empty."""


class NotThisServiceError(UrlParseError):
    """The URL host is not the delivery host."""


class UnsupportedAssetKindError(UrlParseError):
    """The asset kind segment is not ``image``."""


class InvalidDeliveryModeError(UrlParseError):
    """The delivery type segment is not a known delivery type."""


class MissingNamespaceError(UrlParseError):
    """The URL path has no cloud name."""


class MissingAssetIdError(UrlParseError):
    """No public ID remains after the transformation segments."""
