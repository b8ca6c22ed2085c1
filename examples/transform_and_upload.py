#!/usr/bin/env python3
"""Transform and Upload Example

Uploads a local image, prints delivery URLs for a few resized versions
and reads an existing delivery URL back into an Image.

Usage:
    1. Set CLOUDINARY_URL, or CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY
       and CLOUDINARY_API_SECRET (a .env file works too)
    2. Run: python transform_and_upload.py path/to/image.jpg
"""

import logging
import os
import sys
from pathlib import Path

from cloudinary_kit import (
    CloudinaryConfig,
    ConfigFactory,
    Image,
    SyncClient,
    UploadOptions,
    load_config,
)
from cloudinary_kit.exceptions import CloudinaryError, ConfigurationError, UrlParseError
from cloudinary_kit.transformation import (
    Auto,
    AutoMode,
    Fill,
    Gravity,
    NamedColor,
    Pad,
    ScaleByWidth,
)

# ============================================================================
# CONFIGURATION
# ============================================================================

PUBLIC_ID = "examples/transform_and_upload"
TAGS = ["examples"]

# ============================================================================


def get_config() -> CloudinaryConfig:
    """Load configuration from CLOUDINARY_URL or CLOUDINARY_* variables."""
    account_url = os.getenv("CLOUDINARY_URL")
    if account_url:
        return ConfigFactory.from_url(account_url)
    return load_config()


def print_variants(image: Image) -> None:
    """Print delivery URLs for a few common renditions."""
    variants = {
        "thumbnail": Fill(width=150, height=150, gravity=Gravity.FACES_AUTO),
        "banner": Pad(width=1200, height=400, background=Auto(mode=AutoMode.PREDOMINANT)),
        "letterbox": Pad(width=800, height=800, background=NamedColor.BLACK),
        "scaled": ScaleByWidth(width=640),
    }

    for name, transformation in variants.items():
        variant = image.model_copy(deep=True).add_transformation(transformation)
        variant.set_format("webp")
        print(f"  {name:<10} {variant.build()}")


def main() -> None:
    """Upload an image and print transformed delivery URLs."""
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} path/to/image.jpg")
        return

    logging.basicConfig(level=logging.INFO)

    try:
        config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return

    source = Path(sys.argv[1])
    options = UploadOptions(public_id=PUBLIC_ID, overwrite=True, tags=TAGS)

    print(f"Uploading {source} to {config.cloud_name}...")
    try:
        with SyncClient(config) as client:
            response = client.upload_image(source, options)
    except FileNotFoundError as e:
        print(f"Upload failed: {e}")
        return
    except CloudinaryError as e:
        print(f"Upload failed: {e}")
        return

    print(f"  Stored as {response.public_id} ({response.width}x{response.height})")
    print(f"  Original: {response.secure_url}")

    print("\nVariants:")
    print_variants(response.as_image(config.cloud_name))

    print("\nParsing the original URL back:")
    try:
        parsed = Image.from_url(response.secure_url)
    except UrlParseError as e:
        print(f"  Could not parse {response.secure_url}: {e}")
        return
    print(f"  cloud={parsed.cloud_name} public_id={parsed.public_id} format={parsed.format}")


if __name__ == "__main__":
    main()
