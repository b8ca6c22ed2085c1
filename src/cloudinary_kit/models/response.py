"""API response models.

Upload responses come in two shapes: older accounts get ``folder`` and
``original_filename``, newer ones ``asset_folder``, ``display_name`` and
``image_metadata``. :class:`UploadResponse` accepts both, with the
shape-specific fields optional.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from ..transformation import Image


class ImageMetadata(BaseModel):
    """Embedded image metadata (JFIF/EXIF summary)."""

    jfif_version: str | None = Field(None, alias="JFIFVersion")
    resolution_unit: str | None = Field(None, alias="ResolutionUnit")
    x_resolution: str | None = Field(None, alias="XResolution")
    y_resolution: str | None = Field(None, alias="YResolution")
    colorspace: str | None = Field(None, alias="Colorspace")
    dpi: str | None = Field(None, alias="DPI")

    model_config = {"populate_by_name": True}


class UploadResponse(BaseModel):
    """Asset description returned by the upload API.

    Example:
        ```python
        response = client.upload_image(Path("shoe.jpg"))
        print(response.public_id, response.secure_url)
        image = response.as_image(config.cloud_name)
        ```
    """

    asset_id: str
    public_id: str
    version: int
    version_id: str | None = None
    signature: str | None = None
    width: int | None = None
    height: int | None = None
    format: str | None = None
    resource_type: str
    created_at: datetime
    tags: list[str] = Field(default_factory=list)
    bytes: int
    delivery_type: str = Field(alias="type")
    etag: str | None = None
    placeholder: bool = False
    url: str
    secure_url: str
    api_key: str | None = None
    overwritten: bool | None = None

    # Legacy response shape
    folder: str | None = None
    original_filename: str | None = None
    original_extension: str | None = None

    # Current response shape
    asset_folder: str | None = None
    display_name: str | None = None
    image_metadata: ImageMetadata | None = None
    illustration_score: float | None = None
    semi_transparent: bool | None = None
    grayscale: bool | None = None

    model_config = {"populate_by_name": True}

    def as_image(self, cloud_name: str) -> Image:
        """Build an :class:`Image` addressing the uploaded asset.

        Args:
            cloud_name: Cloud the asset was uploaded to

        Returns:
            Image with the asset's public ID and format, no transformations
        """
        return Image(cloud_name=cloud_name, public_id=self.public_id, format=self.format)


class DestroyResult(BaseModel):
    """Result of a destroy call: ``ok`` or ``not found``."""

    result: str

    @property
    def ok(self) -> bool:
        """Whether the asset was deleted."""
        return self.result == "ok"


class Tag(BaseModel):
    """One asset in a tag listing."""

    public_id: str
    version: int
    format: str
    width: int
    height: int
    delivery_type: str = Field(alias="type")
    created_at: datetime

    model_config = {"populate_by_name": True}


class TagList(BaseModel):
    """Assets carrying a tag, as served by the client-side list endpoint."""

    resources: list[Tag] = Field(default_factory=list)
    updated_at: datetime | None = None
