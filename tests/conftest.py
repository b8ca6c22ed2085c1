"""Pytest configuration and shared fixtures."""

import pytest

from cloudinary_kit import CloudinaryConfig


@pytest.fixture
def cloudinary_config() -> CloudinaryConfig:
    """Create a test Cloudinary configuration.

    Returns:
        Test configuration with mock values
    """
    return CloudinaryConfig(
        cloud_name="demo",
        api_key="1234567890",
        api_secret="test-secret",
    )


@pytest.fixture
def mock_upload_response() -> dict:
    """Create a mock upload response in the current format.

    Returns:
        Upload response with asset folder and image metadata
    """
    return {
        "asset_id": "b5e6d2b39ba3e0869d67141ba7dba6cf",
        "public_id": "products/shoe",
        "version": 1700000000,
        "version_id": "98f52566f43d8e516a486958a45c1eb9",
        "signature": "0c4c6a1b0b8bd1b0e55ab21ca2b1e34b4a3ea3ec",
        "width": 1920,
        "height": 1080,
        "format": "jpg",
        "resource_type": "image",
        "created_at": "2024-01-01T00:00:00Z",
        "tags": ["catalog"],
        "bytes": 120253,
        "type": "upload",
        "etag": "4a4d7f7b1a8f0a0b2c6e0c0f2b1c3d4e",
        "placeholder": False,
        "url": "http://res.cloudinary.com/demo/image/upload/v1700000000/products/shoe.jpg",
        "secure_url": "https://res.cloudinary.com/demo/image/upload/v1700000000/products/shoe.jpg",
        "asset_folder": "products",
        "display_name": "shoe",
        "image_metadata": {
            "JFIFVersion": "1.01",
            "ResolutionUnit": "None",
            "XResolution": "1",
            "YResolution": "1",
            "Colorspace": "RGB",
            "DPI": "0",
        },
        "api_key": "1234567890",
    }


@pytest.fixture
def mock_legacy_upload_response() -> dict:
    """Create a mock upload response in the legacy format.

    Returns:
        Upload response with folder and original filename
    """
    return {
        "asset_id": "3515c6000a548515f1134043f9785c2f",
        "public_id": "sample",
        "version": 1312461204,
        "version_id": "7d2cc533bee9ff39f7da7414b61fce7e",
        "signature": "abcdefgc024acceb1c5baa8dca46797137fa5ae0c3",
        "width": 864,
        "height": 576,
        "format": "jpg",
        "resource_type": "image",
        "created_at": "2017-08-10T09:55:32Z",
        "tags": [],
        "bytes": 120253,
        "type": "upload",
        "etag": "3a2bc5d5e5f6a7b8c9d0e1f2a3b4c5d6",
        "placeholder": False,
        "url": "http://res.cloudinary.com/demo/image/upload/v1312461204/sample.jpg",
        "secure_url": "https://res.cloudinary.com/demo/image/upload/v1312461204/sample.jpg",
        "folder": "",
        "original_filename": "sample",
        "api_key": "1234567890",
    }


@pytest.fixture
def mock_tag_list() -> dict:
    """Create a mock client-side tag listing.

    Returns:
        Tag list with two resources
    """
    return {
        "resources": [
            {
                "public_id": "products/shoe",
                "version": 1700000000,
                "format": "jpg",
                "width": 1920,
                "height": 1080,
                "type": "upload",
                "created_at": "2024-01-01T00:00:00Z",
            },
            {
                "public_id": "products/boot",
                "version": 1700000100,
                "format": "png",
                "width": 800,
                "height": 600,
                "type": "upload",
                "created_at": "2024-01-02T00:00:00Z",
            },
        ],
        "updated_at": "2024-01-02T00:00:00Z",
    }
