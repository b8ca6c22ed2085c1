"""Base HTTP client for the Cloudinary upload API.

This module holds everything the sync and async clients share: endpoint
URLs, request signing, error mapping and response parsing.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import (
    AuthenticationError,
    AuthorizationError,
    CloudinaryError,
    ConfigurationError,
    ConflictError,
    FormatError,
    MediaError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)
from ..models.response import DestroyResult, TagList, UploadResponse
from ..operations.signing import build_signed_params
from ..protocols import ConfigProvider
from ..transformation import DELIVERY_BASE_URL, Image

logger = logging.getLogger(__name__)

API_VERSION = "v1_1"
ASSET_KIND = "image"


class BaseClient:
    """Base client for Cloudinary API operations.

    This class provides the foundation for both synchronous and asynchronous
    clients with:
    - Endpoint URLs for the configured cloud
    - Signed parameters for authenticated calls
    - Error handling and exception mapping
    - Typed response parsing

    Not intended to be used directly - use SyncClient or AsyncClient instead.
    """

    def __init__(self, config: ConfigProvider) -> None:
        """Initialize the base client.

        Args:
            config: Configuration with credentials and HTTP options

        Raises:
            ConfigurationError: If the API key or secret is empty
        """
        self.config = config
        self.cloud_name = config.cloud_name
        self.api_base_url = config.get_api_base_url()

        if not config.api_key or not config.get_api_secret():
            raise ConfigurationError("API key and secret are required and cannot be empty")

        logger.info(f"Initialized Cloudinary client for cloud {self.cloud_name}")

    def _build_api_url(self, action: str) -> str:
        """Build the URL of an upload API action (``upload``, ``destroy``)."""
        return f"{self.api_base_url}/{API_VERSION}/{self.cloud_name}/{ASSET_KIND}/{action}"

    def _build_tags_url(self, tag: str) -> str:
        """Build the URL of the client-side resource list for a tag."""
        return f"{DELIVERY_BASE_URL}/{self.cloud_name}/{ASSET_KIND}/list/{quote(tag, safe='')}.json"

    def _sign(self, params: dict[str, str]) -> dict[str, str]:
        """Add timestamp, API key and signature to request parameters."""
        return build_signed_params(params, self.config.api_key, self.config.get_api_secret())

    def _destroy_params(self, public_id: str, invalidate: bool | None) -> dict[str, str]:
        params = {"public_id": public_id}
        if invalidate is not None:
            params["invalidate"] = "true" if invalidate else "false"
        return self._sign(params)

    def image(self, public_id: str) -> Image:
        """Create an :class:`Image` in the configured cloud.

        Args:
            public_id: Asset public ID

        Returns:
            Image ready for transformations and :meth:`Image.build`
        """
        return Image(cloud_name=self.cloud_name, public_id=public_id)

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses by raising appropriate exceptions.

        Args:
            response: HTTPX response object

        Raises:
            Appropriate CloudinaryError subclass based on status code
        """
        status_code = response.status_code

        # Error bodies look like {"error": {"message": "..."}}
        try:
            error_data = response.json()
            error = error_data.get("error", {}) if isinstance(error_data, dict) else {}
            error_message = error.get("message") or response.text or f"HTTP {status_code}"
            error_details = error if isinstance(error, dict) else {}
        except ValueError:
            error_message = response.text or f"HTTP {status_code}"
            error_details = {}

        if status_code == 400:
            raise ValidationError(f"Validation error: {error_message}", details=error_details)
        elif status_code == 401:
            raise AuthenticationError(
                f"Authentication failed: {error_message}", details=error_details
            )
        elif status_code == 403:
            raise AuthorizationError(
                f"Authorization failed: {error_message}", details=error_details
            )
        elif status_code == 404:
            raise NotFoundError(f"Resource not found: {error_message}", details=error_details)
        elif status_code == 409:
            raise ConflictError(f"Conflict: {error_message}", details=error_details)
        elif status_code in (420, 429):
            retry_after = response.headers.get("Retry-After")
            retry_seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
            raise RateLimitError(
                f"Rate limit exceeded: {error_message}",
                retry_after=retry_seconds,
                details=error_details,
            )
        elif 500 <= status_code < 600:
            raise ServerError(
                f"Server error: {error_message}",
                status_code=status_code,
                details=error_details,
            )
        else:
            raise CloudinaryError(
                f"Unexpected error (HTTP {status_code}): {error_message}",
                details=error_details,
            )

    def _parse_json(self, response: httpx.Response) -> dict[str, Any]:
        """Decode a JSON object body.

        Raises:
            FormatError: If the body is not a JSON object
        """
        try:
            data = response.json()
        except ValueError as e:
            raise FormatError(f"Invalid JSON response: {e}", details={"body": response.text}) from e

        if not isinstance(data, dict):
            raise FormatError("Expected a JSON object", details={"body": response.text})
        return data

    def _parse_upload_response(self, response_data: dict[str, Any]) -> UploadResponse:
        """Parse an upload response.

        The service sometimes answers a failed upload with a success status
        and an ``error`` body.

        Raises:
            MediaError: If the body carries an error
            FormatError: If the body doesn't describe an asset
        """
        if "error" in response_data:
            error = response_data["error"]
            message = error.get("message") if isinstance(error, dict) else str(error)
            logger.warning(f"Upload answered with an error body: {message}")
            raise MediaError(f"File upload failed: {message}", details={"error": error})

        try:
            return UploadResponse.model_validate(response_data)
        except PydanticValidationError as e:
            raise FormatError(f"Unexpected upload response: {e}") from e

    def _parse_destroy_response(self, response_data: dict[str, Any]) -> DestroyResult:
        try:
            return DestroyResult.model_validate(response_data)
        except PydanticValidationError as e:
            raise FormatError(f"Unexpected destroy response: {e}") from e

    def _parse_tag_list(self, response_data: dict[str, Any]) -> TagList:
        try:
            return TagList.model_validate(response_data)
        except PydanticValidationError as e:
            raise FormatError(f"Unexpected tag list response: {e}") from e
