"""cloudinary-kit: typed image transformations and uploads for Cloudinary.

This package provides:
- Typed transformations rendered into delivery URLs
- A best-effort parser turning delivery URLs back into images
- Signed uploads and deletes with synchronous and asynchronous clients
- Configuration from arguments, environment variables or .env files
"""

from .__version__ import __version__
from .client import AsyncClient, SyncClient
from .config_provider import ConfigFactory, create_config, load_config
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    CloudinaryError,
    ConfigurationError,
    ConflictError,
    EmptyInputError,
    FormatError,
    InvalidDeliveryModeError,
    MediaError,
    MissingAssetIdError,
    MissingNamespaceError,
    NetworkError,
    NotFoundError,
    NotThisServiceError,
    RateLimitError,
    ServerError,
    UnsupportedAssetKindError,
    UrlParseError,
    ValidationError,
)
from .models import (
    CloudinaryConfig,
    DestroyResult,
    Tag,
    TagList,
    UploadOptions,
    UploadResponse,
)
from .protocols import AsyncHTTPClient, ConfigProvider, HTTPClient
from .transformation import Image, build_url, parse_url

__all__ = [
    "__version__",
    # Clients
    "SyncClient",
    "AsyncClient",
    # Configuration
    "CloudinaryConfig",
    "ConfigFactory",
    "create_config",
    "load_config",
    # Images
    "Image",
    "build_url",
    "parse_url",
    # Upload
    "UploadOptions",
    "UploadResponse",
    "DestroyResult",
    "Tag",
    "TagList",
    # Protocols (for dependency injection)
    "ConfigProvider",
    "HTTPClient",
    "AsyncHTTPClient",
    # Exceptions
    "CloudinaryError",
    "ConfigurationError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "NetworkError",
    "RateLimitError",
    "ServerError",
    "FormatError",
    "MediaError",
    "UrlParseError",
    "EmptyInputError",
    "NotThisServiceError",
    "UnsupportedAssetKindError",
    "InvalidDeliveryModeError",
    "MissingNamespaceError",
    "MissingAssetIdError",
]
