"""Resize transformations.

These modes adjust the size of the delivered image without cropping out
any elements of the original image.
"""

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from ..utils.formatting import join_tokens, optional_token
from .aspect_ratio import AspectRatio

LIQUID_RESCALE = "g_liquid"


class ScaleByWidth(BaseModel):
    """Resize to the given width, optionally changing the aspect ratio.

    Attributes:
        width: Target width in pixels
        ar: Aspect ratio; the original is preserved when omitted
        liquid: Enable content-aware liquid rescaling (seam carving), useful
            when the aspect ratio changes

    Examples:
        >>> str(ScaleByWidth(width=100))
        'c_scale,w_100'
    """

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    ar: AspectRatio | None = None
    liquid: bool = False

    def __str__(self) -> str:
        return join_tokens(
            optional_token(self.ar),
            "c_scale",
            f"w_{self.width}",
            LIQUID_RESCALE if self.liquid else None,
        )


class ScaleByHeight(BaseModel):
    """Resize to the given height, optionally changing the aspect ratio.

    Examples:
        >>> str(ScaleByHeight(height=100))
        'c_scale,h_100'
    """

    model_config = ConfigDict(frozen=True)

    height: NonNegativeInt
    ar: AspectRatio | None = None
    liquid: bool = False

    def __str__(self) -> str:
        return join_tokens(
            optional_token(self.ar),
            "c_scale",
            f"h_{self.height}",
            LIQUID_RESCALE if self.liquid else None,
        )


class Scale(BaseModel):
    """Resize to exact dimensions without retaining the original aspect ratio.

    Examples:
        >>> str(Scale(width=100, height=100))
        'c_scale,w_100,h_100'
    """

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    height: NonNegativeInt
    liquid: bool = False

    def __str__(self) -> str:
        return join_tokens(
            "c_scale",
            f"w_{self.width}",
            f"h_{self.height}",
            LIQUID_RESCALE if self.liquid else None,
        )


ResizeMode = ScaleByWidth | ScaleByHeight | Scale
