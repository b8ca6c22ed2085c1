"""Data models for cloudinary-kit."""

from .config import CloudinaryConfig
from .response import DestroyResult, ImageMetadata, Tag, TagList, UploadResponse
from .upload import (
    AccessMode,
    AllowedHeader,
    BackgroundRemoval,
    Categorization,
    DeliveryType,
    DuplicateModeration,
    Moderation,
    RawConvert,
    ResourceType,
    ResponsiveBreakpoints,
    UploadOptions,
)

__all__ = [
    "CloudinaryConfig",
    # Upload options
    "AccessMode",
    "AllowedHeader",
    "BackgroundRemoval",
    "Categorization",
    "DeliveryType",
    "DuplicateModeration",
    "Moderation",
    "RawConvert",
    "ResourceType",
    "ResponsiveBreakpoints",
    "UploadOptions",
    # Responses
    "DestroyResult",
    "ImageMetadata",
    "Tag",
    "TagList",
    "UploadResponse",
]
