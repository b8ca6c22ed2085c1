"""Pad transformations.

Pad modes resize the asset to fit the requested dimensions while keeping
all of the original visible. When the proportions differ, padding is
added; gravity places the original inside the padded area and the
background qualifier colors the padding.
"""

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from ..utils.formatting import join_tokens, optional_token
from .aspect_ratio import AspectRatio
from .background import Background, background_qualifier
from .gravity import Gravity


def _background_token(background: Background | None) -> str | None:
    if background is None:
        return None
    return background_qualifier(background)


class PadByWidth(BaseModel):
    """Pad to the given width and aspect ratio.

    Examples:
        >>> str(PadByWidth(width=100))
        'c_pad,w_100'
    """

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    ar: AspectRatio | None = None
    background: Background | None = None
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            _background_token(self.background),
            optional_token(self.ar),
            "c_pad",
            optional_token(self.gravity),
            f"w_{self.width}",
        )


class PadByHeight(BaseModel):
    """Pad to the given height and aspect ratio."""

    model_config = ConfigDict(frozen=True)

    height: NonNegativeInt
    ar: AspectRatio | None = None
    background: Background | None = None
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            _background_token(self.background),
            optional_token(self.ar),
            "c_pad",
            optional_token(self.gravity),
            f"h_{self.height}",
        )


class Pad(BaseModel):
    """Pad to exact dimensions."""

    model_config = ConfigDict(frozen=True)

    width: NonNegativeInt
    height: NonNegativeInt
    background: Background | None = None
    gravity: Gravity | None = None

    def __str__(self) -> str:
        return join_tokens(
            _background_token(self.background),
            "c_pad",
            optional_token(self.gravity),
            f"w_{self.width}",
            f"h_{self.height}",
        )


PadMode = PadByWidth | PadByHeight | Pad
