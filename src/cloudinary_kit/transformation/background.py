"""Background qualifier.

Applies a background to empty or transparent areas. For padded cropping
the background is either an explicit color or ``auto``, which lets the
service pick solid or gradient colors from the image itself.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..utils.formatting import TokenEnum, join_tokens, optional_token
from .named_color import NamedColor

Channel = Annotated[int, Field(ge=0, le=255)]


class Rgb(BaseModel):
    """Opaque RGB color.

    Examples:
        >>> str(Rgb(r=2, g=10, b=255))
        'rgb:020aff'
    """

    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel

    def __str__(self) -> str:
        return f"rgb:{self.r:02x}{self.g:02x}{self.b:02x}"


class Rgba(BaseModel):
    """RGB color with an alpha channel.

    Examples:
        >>> str(Rgba(r=10, g=100, b=110, a=111))
        'rgb:0a646e6f'
    """

    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel
    a: Channel

    def __str__(self) -> str:
        return f"rgb:{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"


Color = NamedColor | Rgb | Rgba


class AutoMode(TokenEnum):
    """Method used to pick the solid or gradient background color(s)."""

    # Solid colors
    BORDER = "border"
    PREDOMINANT = "predominant"
    BORDER_CONTRAST = "border_contrast"
    PREDOMINANT_CONTRAST = "predominant_contrast"

    # Gradient fades
    PREDOMINANT_GRADIENT = "predominant_gradient"
    PREDOMINANT_GRADIENT_CONTRAST = "predominant_gradient_contrast"
    BORDER_GRADIENT = "border_gradient"
    BORDER_GRADIENT_CONTRAST = "border_gradient_contrast"


class GradientColors(TokenEnum):
    """Number of predominant colors to select for gradient modes."""

    TWO = "2"
    FOUR = "4"


class GradientDirection(TokenEnum):
    """Direction used to blend two gradient colors."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DESC = "diagonal_desc"
    DIAGONAL_ASC = "diagonal_asc"


class Auto(BaseModel):
    """Automatic background color selection.

    Every field is optional; present fields render colon-joined after
    ``auto`` in the order mode, number, direction, palette.

    Attributes:
        mode: Selection method (service default: border)
        number: Colors to select, only for gradient modes (service default: 2)
        direction: Blend direction, only for gradient modes with two colors
            (service default: horizontal)
        palette: Restrict the selection to these colors

    Examples:
        >>> str(Auto())
        'auto'
        >>> str(Auto(mode=AutoMode.BORDER, number=GradientColors.TWO))
        'auto:border:2'
    """

    model_config = ConfigDict(frozen=True)

    mode: AutoMode | None = None
    number: GradientColors | None = None
    direction: GradientDirection | None = None
    palette: tuple[Color, ...] | None = None

    def __str__(self) -> str:
        palette = None
        if self.palette is not None:
            palette = "palette_" + "_".join(str(color) for color in self.palette)
        return join_tokens(
            "auto",
            optional_token(self.mode),
            optional_token(self.number),
            optional_token(self.direction),
            palette,
            separator=":",
        )


Background = Color | Auto


def background_qualifier(background: Background) -> str:
    """Render a background as its ``b_`` qualifier.

    Examples:
        >>> background_qualifier(NamedColor.BLACK)
        'b_black'
        >>> background_qualifier(Auto(mode=AutoMode.PREDOMINANT))
        'b_auto:predominant'
    """
    return "b_" + str(background)
