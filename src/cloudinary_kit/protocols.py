"""Protocols for dependency injection.

Clients depend on these structural types rather than on concrete
classes, so tests and applications can supply their own configuration
sources and HTTP clients.
"""

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class ConfigProvider(Protocol):
    """Anything that supplies account credentials and HTTP options.

    :class:`~cloudinary_kit.models.config.CloudinaryConfig` satisfies it.
    """

    @property
    def cloud_name(self) -> str: ...

    @property
    def api_key(self) -> str: ...

    @property
    def timeout(self) -> float: ...

    @property
    def max_connections(self) -> int: ...

    @property
    def verify_ssl(self) -> bool: ...

    def get_api_secret(self) -> str: ...

    def get_api_base_url(self) -> str: ...


@runtime_checkable
class HTTPClient(Protocol):
    """Synchronous HTTP client interface (subset of ``httpx.Client``)."""

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response: ...

    def get(self, url: str, **kwargs: Any) -> httpx.Response: ...

    def post(self, url: str, **kwargs: Any) -> httpx.Response: ...

    def close(self) -> None: ...


@runtime_checkable
class AsyncHTTPClient(Protocol):
    """Asynchronous HTTP client interface (subset of ``httpx.AsyncClient``)."""

    async def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response: ...

    async def get(self, url: str, **kwargs: Any) -> httpx.Response: ...

    async def post(self, url: str, **kwargs: Any) -> httpx.Response: ...

    async def aclose(self) -> None: ...
