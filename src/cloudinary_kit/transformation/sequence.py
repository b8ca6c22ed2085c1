"""Transformation sequences.

A sequence is an ordered list of transformation variants. Insertion order
is render order: nothing is reordered, deduplicated or merged, so repeated
directives render as repeated segments.
"""

from collections.abc import Iterable

from .crop_mode import CropMode
from .pad_mode import PadMode
from .resize_mode import ResizeMode

Transformation = ResizeMode | CropMode | PadMode


def render_transformations(
    transformations: Iterable[Transformation],
    separator: str = "/",
) -> str:
    """Render transformations as one string.

    Delivery URLs and the upload ``transformation`` parameter chain
    segments with ``/``; the upload ``eager`` parameter lists independent
    transformations with ``|``.

    Args:
        transformations: Variants in render order
        separator: Separator placed between rendered segments

    Returns:
        Joined segments, or an empty string for an empty sequence

    Examples:
        >>> from cloudinary_kit.transformation import Fill, ScaleByWidth
        >>> render_transformations([ScaleByWidth(width=100), Fill(width=50, height=50)])
        'c_scale,w_100/c_fill,w_50,h_50'
    """
    return separator.join(str(transformation) for transformation in transformations)
