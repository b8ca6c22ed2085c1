"""Asynchronous HTTP client for the Cloudinary API.

This module provides non-blocking I/O for applications that upload or
delete many assets concurrently.
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
from ..protocols import AsyncHTTPClient, ConfigProvider
from .base import BaseClient

logger = logging.getLogger(__name__)


class AsyncClient(BaseClient):
    """Asynchronous HTTP client for the Cloudinary API.

    Example:
        ```python
        import asyncio
        from pathlib import Path

        from cloudinary_kit import AsyncClient, CloudinaryConfig

        async def main():
            config = CloudinaryConfig(cloud_name="demo", api_key="key", api_secret="secret")

            async with AsyncClient(config) as client:
                responses = await asyncio.gather(
                    client.upload_image(Path("front.jpg")),
                    client.upload_image(Path("back.jpg")),
                )

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ConfigProvider,
        http_client: AsyncHTTPClient | None = None,
    ) -> None:
        """Initialize the asynchronous client with dependency injection.

        Args:
            config: Configuration provider (typically CloudinaryConfig)
            http_client: Async HTTP client (defaults to httpx.AsyncClient with pooling)
        """
        super().__init__(config)

        self._client: AsyncHTTPClient | httpx.AsyncClient = (
            http_client or self._create_default_http_client()
        )
        self._owns_client = http_client is None

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create default async HTTP client with connection pooling."""
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            limits=httpx.Limits(
                max_connections=self.config.max_connections,
                max_keepalive_connections=self.config.max_connections,
            ),
        )

    async def __aenter__(self) -> "AsyncClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
        logger.info("Closed asynchronous Cloudinary client")

    async def request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        """Send a request and decode its JSON body.

        Raises:
            CloudinaryError: On API errors
            ConnectionError: On connection failures
            TimeoutError: On request timeout
            FormatError: If the body is not a JSON object
        """
        logger.debug(f"{method} {url}")

        try:
            response = await self._client.request(method, url, **kwargs)
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

    async def upload_image(
        self,
        source: str | Path,
        options: UploadOptions | None = None,
    ) -> UploadResponse:
        """Upload an image.

        See :meth:`SyncClient.upload_image`.
        """
        url = self._build_api_url("upload")

        try:
            with build_upload_payload(
                source,
                options,
                self.config.api_key,
                self.config.get_api_secret(),
            ) as payload:
                response_data = await self.request(
                    "POST", url, data=payload.data, files=payload.files
                )
        except FileNotFoundError:
            raise
        except OSError as e:
            raise MediaError(f"Could not read {source}: {e}") from e

        result = self._parse_upload_response(response_data)
        logger.info(f"Uploaded {result.public_id} ({result.bytes} bytes)")
        return result

    async def destroy(self, public_id: str, invalidate: bool | None = None) -> DestroyResult:
        """Delete an uploaded image."""
        url = self._build_api_url("destroy")
        response_data = await self.request(
            "POST", url, data=self._destroy_params(public_id, invalidate)
        )
        result = self._parse_destroy_response(response_data)
        logger.info(f"Destroyed {public_id}: {result.result}")
        return result

    async def get_tags(self, tag: str) -> TagList:
        """List the images carrying a tag."""
        response_data = await self.request("GET", self._build_tags_url(tag))
        return self._parse_tag_list(response_data)
