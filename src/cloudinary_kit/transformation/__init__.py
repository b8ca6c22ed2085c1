"""Typed image transformations and delivery URLs."""

from .aspect_ratio import AspectRatio, AspectRatioResult, AspectRatioSides, IgnoreAspectRatio
from .background import (
    Auto,
    AutoMode,
    Background,
    Color,
    GradientColors,
    GradientDirection,
    Rgb,
    Rgba,
    background_qualifier,
)
from .crop_mode import CropMode, Fill, FillByHeight, FillByWidth
from .gravity import Gravity
from .image import DELIVERY_BASE_URL, DELIVERY_HOST, Image, build_url
from .named_color import NamedColor
from .pad_mode import Pad, PadByHeight, PadByWidth, PadMode
from .resize_mode import ResizeMode, Scale, ScaleByHeight, ScaleByWidth
from .sequence import Transformation, render_transformations
from .url_parser import DELIVERY_TYPES, parse_url

__all__ = [
    # Aspect ratio
    "AspectRatio",
    "AspectRatioResult",
    "AspectRatioSides",
    "IgnoreAspectRatio",
    # Background
    "Auto",
    "AutoMode",
    "Background",
    "Color",
    "GradientColors",
    "GradientDirection",
    "NamedColor",
    "Rgb",
    "Rgba",
    "background_qualifier",
    # Gravity
    "Gravity",
    # Modes
    "CropMode",
    "Fill",
    "FillByHeight",
    "FillByWidth",
    "Pad",
    "PadByHeight",
    "PadByWidth",
    "PadMode",
    "ResizeMode",
    "Scale",
    "ScaleByHeight",
    "ScaleByWidth",
    "Transformation",
    "render_transformations",
    # URLs
    "DELIVERY_BASE_URL",
    "DELIVERY_HOST",
    "DELIVERY_TYPES",
    "Image",
    "build_url",
    "parse_url",
]
