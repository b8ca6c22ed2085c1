"""HTTP clients for the Cloudinary API."""

from .async_client import AsyncClient
from .base import BaseClient
from .sync_client import SyncClient

__all__ = ["AsyncClient", "BaseClient", "SyncClient"]
