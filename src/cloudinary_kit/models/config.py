"""Configuration models for cloudinary-kit.

Settings are read from keyword arguments, ``CLOUDINARY_*`` environment
variables and ``.env`` files, in that order of precedence.
"""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL = "https://api.cloudinary.com"


class CloudinaryConfig(BaseSettings):
    """Account credentials and HTTP options.

    Example:
        ```python
        from cloudinary_kit import CloudinaryConfig

        config = CloudinaryConfig(
            cloud_name="demo",
            api_key="1234567890",
            api_secret="secret",
        )
        ```

    Or from the environment:
        ```bash
        export CLOUDINARY_CLOUD_NAME=demo
        export CLOUDINARY_API_KEY=1234567890
        export CLOUDINARY_API_SECRET=secret
        ```
    """

    model_config = SettingsConfigDict(
        env_prefix="CLOUDINARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    cloud_name: str = Field(..., min_length=1, description="Account cloud name")
    api_key: str = Field(..., min_length=1, description="API key used for signed requests")
    api_secret: SecretStr = Field(..., description="API secret used to sign requests")
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Base URL of the upload and admin API",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_connections: int = Field(default=10, ge=1, description="Connection pool size")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    @field_validator("cloud_name")
    @classmethod
    def validate_cloud_name(cls, v: str) -> str:
        """Reject cloud names that would break URL paths."""
        if "/" in v:
            raise ValueError("cloud_name cannot contain '/'")
        return v

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Strip the trailing slash from the API base URL."""
        return v.rstrip("/")

    def get_api_secret(self) -> str:
        """Return the API secret as plain text."""
        return self.api_secret.get_secret_value()

    def get_api_base_url(self) -> str:
        """Return the API base URL without a trailing slash."""
        return self.api_base_url.rstrip("/")
