"""Tests for dependency injection of configuration and HTTP clients."""

from unittest.mock import Mock

import httpx

from cloudinary_kit import (
    AsyncClient,
    AsyncHTTPClient,
    CloudinaryConfig,
    ConfigProvider,
    HTTPClient,
    SyncClient,
)


class StaticConfig:
    """Minimal configuration provider that is not a settings model."""

    cloud_name = "static-cloud"
    api_key = "static-key"
    timeout = 5.0
    max_connections = 2
    verify_ssl = True

    def get_api_secret(self) -> str:
        return "static-secret"

    def get_api_base_url(self) -> str:
        return "https://api-eu.cloudinary.com"


def mock_response(payload: dict) -> Mock:
    response = Mock()
    response.is_success = True
    response.status_code = 200
    response.json.return_value = payload
    return response


class MockHTTPClient:
    """Records requests and answers with a canned body."""

    def __init__(self, payload: dict):
        self.payload = payload
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        return mock_response(self.payload)

    def get(self, url, **kwargs):
        return self.request("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self.request("POST", url, **kwargs)

    def close(self):
        self.closed = True


class MockAsyncHTTPClient:
    """Async variant of MockHTTPClient."""

    def __init__(self, payload: dict):
        self.payload = payload
        self.requests = []
        self.closed = False

    async def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        return mock_response(self.payload)

    async def get(self, url, **kwargs):
        return await self.request("GET", url, **kwargs)

    async def post(self, url, **kwargs):
        return await self.request("POST", url, **kwargs)

    async def aclose(self):
        self.closed = True


class TestProtocols:
    """Tests for structural protocol checks."""

    def test_static_config_is_provider(self) -> None:
        """Test a plain object satisfies ConfigProvider."""
        assert isinstance(StaticConfig(), ConfigProvider)

    def test_httpx_clients_satisfy_protocols(self) -> None:
        """Test httpx clients satisfy the HTTP client protocols."""
        sync_client = httpx.Client()
        async_client = httpx.AsyncClient()

        assert isinstance(sync_client, HTTPClient)
        assert isinstance(async_client, AsyncHTTPClient)

        sync_client.close()

    def test_mocks_satisfy_protocols(self) -> None:
        """Test the test doubles satisfy the HTTP client protocols."""
        assert isinstance(MockHTTPClient({}), HTTPClient)
        assert isinstance(MockAsyncHTTPClient({}), AsyncHTTPClient)


class TestSyncInjection:
    """Tests for SyncClient with injected dependencies."""

    def test_custom_config_provider(self) -> None:
        """Test URLs come from the injected provider."""
        http_client = MockHTTPClient({"result": "ok"})

        with SyncClient(StaticConfig(), http_client=http_client) as client:
            client.destroy("sample")

        method, url, kwargs = http_client.requests[0]
        assert method == "POST"
        assert url == "https://api-eu.cloudinary.com/v1_1/static-cloud/image/destroy"
        assert kwargs["data"]["api_key"] == "static-key"

    def test_injected_client_left_open(self, cloudinary_config: CloudinaryConfig) -> None:
        """Test closing the SDK client doesn't close an injected one."""
        http_client = MockHTTPClient({"result": "ok"})

        client = SyncClient(cloudinary_config, http_client=http_client)
        client.close()

        assert http_client.closed is False

    def test_tag_list_through_mock(
        self, cloudinary_config: CloudinaryConfig, mock_tag_list: dict
    ) -> None:
        """Test responses from an injected client are parsed."""
        http_client = MockHTTPClient(mock_tag_list)

        with SyncClient(cloudinary_config, http_client=http_client) as client:
            tag_list = client.get_tags("catalog")

        assert len(tag_list.resources) == 2
        method, url, _ = http_client.requests[0]
        assert method == "GET"
        assert url == "https://res.cloudinary.com/demo/image/list/catalog.json"


class TestAsyncInjection:
    """Tests for AsyncClient with injected dependencies."""

    async def test_custom_config_provider(self) -> None:
        """Test URLs come from the injected provider."""
        http_client = MockAsyncHTTPClient({"result": "ok"})

        async with AsyncClient(StaticConfig(), http_client=http_client) as client:
            result = await client.destroy("sample", invalidate=False)

        assert result.ok
        _, url, kwargs = http_client.requests[0]
        assert url == "https://api-eu.cloudinary.com/v1_1/static-cloud/image/destroy"
        assert kwargs["data"]["invalidate"] == "false"
        assert http_client.closed is False
