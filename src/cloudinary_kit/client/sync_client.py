"""Synchronous HTTP client for the Cloudinary API.

This module provides blocking I/O operations for simpler scripts
and applications that don't require concurrency.
"""

import logging
from pathlib import Path
from typing import Any

import httpx

from ..exceptions import (
    ConnectionError as CloudinaryConnectionError,
)
from ..exceptions import (
    MediaError,
    NetworkError,
)
from ..exceptions import (
    TimeoutError as CloudinaryTimeoutError,
)
from ..models.response import DestroyResult, TagList, UploadResponse
from ..models.upload import UploadOptions
from ..operations.upload import build_upload_payload
from ..protocols import ConfigProvider, HTTPClient
from .base import BaseClient

logger = logging.getLogger(__name__)


class SyncClient(BaseClient):
    """Synchronous HTTP client for the Cloudinary API.

    Example:
        ```python
        from pathlib import Path

        from cloudinary_kit import CloudinaryConfig, SyncClient, UploadOptions

        config = CloudinaryConfig(cloud_name="demo", api_key="key", api_secret="secret")

        with SyncClient(config) as client:
            response = client.upload_image(
                Path("shoe.jpg"), UploadOptions(public_id="products/shoe")
            )
            print(response.secure_url)
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the synchronous client with dependency injection.

        Args:
            config: Configuration provider (typically CloudinaryConfig)
            http_client: HTTP client (defaults to httpx.Client with pooling)
        """
        super().__init__(config)

        self._client: HTTPClient | httpx.Client = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.Client:
        """Create default HTTP client with connection pooling.

        Returns:
            Configured httpx.Client instance
        """
        return httpx.Client(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    def __enter__(self) -> "SyncClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release connections.

        Only closes the client if it was created by this instance
        (not injected from outside).
        """
        if self._owns_client:
            self._client.close()
        logger.info("Closed synchronous Cloudinary client")

    def request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        """Send a request and decode its JSON body.

        Args:
            method: HTTP method
            url: Absolute URL
            **kwargs: Passed to the HTTP client (``data``, ``files``...)

        Returns:
            Response JSON object

        Raises:
            CloudinaryError: On API errors
            ConnectionError: On connection failures
            TimeoutError: On request timeout
            FormatError: If the body is not a JSON object
        """
        logger.debug(f"{method} {url}")

        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.ConnectError as e:
            raise CloudinaryConnectionError(f"Failed to connect to {url}: {e}") from e
        except httpx.TimeoutException as e:
            raise CloudinaryTimeoutError(
                f"Request timed out after {self.config.timeout}s: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            self._handle_error_response(response)

        logger.debug(f"Response: {response.status_code}")
        return self._parse_json(response)

    def upload_image(
        self,
        source: str | Path,
        options: UploadOptions | None = None,
    ) -> UploadResponse:
        """Upload an image.

        Args:
            source: Local file path, or a remote URL / data URI string
            options: Optional upload parameters

        Returns:
            Description of the stored asset

        Raises:
            FileNotFoundError: If a local file doesn't exist
            MediaError: If the service reports a failed upload or the file
                can't be read
            CloudinaryError: On API errors

        Examples:
            >>> response = client.upload_image(Path("shoe.jpg"))
            >>> response.public_id
            'shoe_x1y2z3'

            >>> # Remote source with options
            >>> response = client.upload_image(
            ...     "https://example.com/shoe.jpg",
            ...     UploadOptions(public_id="products/shoe", overwrite=True),
            ... )
        """
        url = self._build_api_url("upload")

        try:
            with build_upload_payload(
                source,
                options,
                self.config.api_key,
                self.config.get_api_secret(),
            ) as payload:
                response_data = self.request(
                    "POST", url, data=payload.data, files=payload.files
                )
        except FileNotFoundError:
            raise
        except OSError as e:
            raise MediaError(f"Could not read {source}: {e}") from e

        result = self._parse_upload_response(response_data)
        logger.info(f"Uploaded {result.public_id} ({result.bytes} bytes)")
        return result

    def destroy(self, public_id: str, invalidate: bool | None = None) -> DestroyResult:
        """Delete an uploaded image.

        Args:
            public_id: Public ID of the asset
            invalidate: Also invalidate CDN cached copies

        Returns:
            Destroy result; ``result.ok`` is False when nothing was deleted

        Examples:
            >>> client.destroy("products/shoe").result
            'ok'
        """
        url = self._build_api_url("destroy")
        response_data = self.request("POST", url, data=self._destroy_params(public_id, invalidate))
        result = self._parse_destroy_response(response_data)
        logger.info(f"Destroyed {public_id}: {result.result}")
        return result

    def get_tags(self, tag: str) -> TagList:
        """List the images carrying a tag.

        Uses the unauthenticated client-side list, which must be enabled in
        the account's security settings.

        Args:
            tag: Tag name

        Returns:
            Tagged resources
        """
        response_data = self.request("GET", self._build_tags_url(tag))
        return self._parse_tag_list(response_data)
