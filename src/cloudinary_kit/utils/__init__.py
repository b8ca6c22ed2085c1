"""Utility modules for cloudinary-kit.

This package contains helper utilities including:
- Token rendering and joining
- Form value encoding
"""

from cloudinary_kit.utils.formatting import (
    TokenEnum,
    encode_scalar,
    format_decimal,
    join_tokens,
    optional_token,
)

__all__ = [
    "TokenEnum",
    "encode_scalar",
    "format_decimal",
    "join_tokens",
    "optional_token",
]
