"""Crop transformations.

Fill modes scale the asset as much as needed to fill the requested
dimensions, then crop whatever exceeds them. Gravity selects the part of
the original to keep (the service defaults to center).
"""

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from ..utils.formatting import join_tokens, optional_token
from .aspect_ratio import AspectRatio
from .gravity import Gravity


class FillByWidth(BaseModel):
    """Fill to the given width and aspect ratio.

    Examples:
        >>> str(FillByWidth(width=100, gravity=Gravity.NORTH))
        'c_fill,g_north,w_100'
    """

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    ar: AspectRatio | None = None
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            optional_token(self.ar),
            "c_fill",
            optional_token(self.gravity),
            f"w_{self.width}",
        )


class FillByHeight(BaseModel):
    """Same as :class:`FillByWidth`, driven by the height instead."""

    model_config = ConfigDict(frozen=True)

    height: NonNegativeInt
    ar: AspectRatio | None = None
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            optional_token(self.ar),
            "c_fill",
            optional_token(self.gravity),
            f"h_{self.height}",
        )


class Fill(BaseModel):
    """Fill exact dimensions without distorting the asset.

    Examples:
        >>> str(Fill(width=100, height=100, gravity=Gravity.AUTO_CLASSIC))
        'c_fill,g_auto:classic,w_100,h_100'
    """

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    height: NonNegativeInt
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            "c_fill",
            optional_token(self.gravity),
            f"w_{self.width}",
            f"h_{self.height}",
        )


CropMode = FillByWidth | FillByHeight | Fill
