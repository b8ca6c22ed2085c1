"""Aspect ratio qualifiers.

Three forms are supported, each rendering its own qualifier token:

- :class:`IgnoreAspectRatio` -> ``fl_ignore_aspect_ratio``
- :class:`AspectRatioSides` -> ``ar_16:9``
- :class:`AspectRatioResult` -> ``ar_0.5``
"""

from pydantic import BaseModel, ConfigDict, PositiveFloat, PositiveInt

from ..utils.formatting import format_decimal


class IgnoreAspectRatio(BaseModel):
    """Ignore the aspect ratio of the input and stretch to exactly the given width or height."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return "fl_ignore_aspect_ratio"


class AspectRatioSides(BaseModel):
    """Aspect ratio expressed as two sides, e.g. 4:3."""

    model_config = ConfigDict(frozen=True)

    width: PositiveInt
    height: PositiveInt

    def __str__(self) -> str:
        return f"ar_{self.width}:{self.height}"


class AspectRatioResult(BaseModel):
    """Aspect ratio expressed as width divided by height (e.g. 0.5)."""

    model_config = ConfigDict(frozen=True)

    value: PositiveFloat

    def __str__(self) -> str:
        return f"ar_{format_decimal(self.value)}"


AspectRatio = IgnoreAspectRatio | AspectRatioSides | AspectRatioResult
