"""Image identity and delivery URL builder.

An :class:`Image` names one asset (cloud name + public ID, with an
optional format override) and carries the transformations to apply on
delivery. Rendering is pure: :func:`build_url` only reads the image.
"""

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .sequence import Transformation, render_transformations

DELIVERY_HOST = "res.cloudinary.com"
DELIVERY_BASE_URL = f"https://{DELIVERY_HOST}"

# Characters left as-is in delivery paths. "%" keeps existing escapes intact.
_PATH_SAFE = "/:,;=@!$&'()*+%"


class Image(BaseModel):
    """An addressable image asset.

    Attributes:
        cloud_name: Account namespace; fixed once the image is created
        public_id: Asset identifier. May contain ``/`` as a virtual folder
            separator and literal ``.`` characters
        format: Optional extension override applied when the URL is built
        transformations: Transformations in render order

    Example:
        ```python
        from cloudinary_kit.transformation import (
            AspectRatioSides, Image, ScaleByWidth,
        )

        image = Image(cloud_name="demo", public_id="path/name").add_transformation(
            ScaleByWidth(width=100, ar=AspectRatioSides(width=16, height=9), liquid=True)
        )
        print(image.build())
        # https://res.cloudinary.com/demo/image/upload/ar_16:9,c_scale,w_100,g_liquid/path/name
        ```
    """

    model_config = ConfigDict(validate_assignment=True)

    cloud_name: str = Field(min_length=1, frozen=True)
    public_id: str = Field(min_length=1)
    format: str | None = Field(None, min_length=1)
    transformations: list[Transformation] = Field(default_factory=list)

    @field_validator("cloud_name")
    @classmethod
    def _check_cloud_name(cls, value: str) -> str:
        if "/" in value:
            raise ValueError("cloud_name cannot contain '/'")
        return value

    @field_validator("public_id")
    @classmethod
    def _check_public_id(cls, value: str) -> str:
        # An empty filename segment would leave nowhere to put the format
        if value.startswith("/") or value.endswith("/"):
            raise ValueError("public_id cannot begin or end with '/'")
        return value

    def set_format(self, format: str) -> None:
        """Replace the delivery format (file extension)."""
        self.format = format

    def add_transformation(self, transformation: Transformation) -> "Image":
        """Append a transformation and return this image for chaining."""
        self.transformations.append(transformation)
        return self

    def build(self) -> str:
        """Build the delivery URL for this image."""
        return build_url(self)

    @classmethod
    def from_url(cls, url: str) -> "Image":
        """Parse a delivery URL into an image.

        Unofficial and best-effort; see :func:`parse_url`.
        """
        from .url_parser import parse_url

        return parse_url(url)

    def __str__(self) -> str:
        return self.build()


def _apply_format(public_id: str, format: str) -> str:
    folder, slash, filename = public_id.rpartition("/")
    stem, dot, _extension = filename.rpartition(".")
    if not dot:
        stem = filename
    return f"{folder}{slash}{stem}.{format}"


def build_url(image: Image) -> str:
    """Render the delivery URL of an image.

    The path is ``<cloud_name>/image/upload/[<segments>/]<public_id>``.
    When ``format`` is set, whatever follows the last ``.`` of the final
    path segment of the public ID is treated as an extension and replaced;
    a public ID whose last segment legitimately contains a dot loses the
    part after it. Without a format the public ID is used verbatim.

    Args:
        image: Image to render

    Returns:
        Absolute, percent-encoded delivery URL

    Examples:
        >>> image = Image(cloud_name="demo", public_id="path/name.jpg", format="png")
        >>> build_url(image)
        'https://res.cloudinary.com/demo/image/upload/path/name.png'
    """
    public_id = image.public_id
    if image.format is not None:
        public_id = _apply_format(public_id, image.format)

    segments = render_transformations(image.transformations)
    path = f"/{image.cloud_name}/image/upload/"
    if segments:
        path += f"{segments}/"
    path += public_id

    return DELIVERY_BASE_URL + quote(path, safe=_PATH_SAFE)
