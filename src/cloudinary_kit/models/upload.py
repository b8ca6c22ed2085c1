"""Upload request models.

:class:`UploadOptions` maps one-to-one onto the optional parameters of the
upload API. Each field is encoded to the form value the API expects by
:meth:`UploadOptions.to_params`.
"""

import json
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..transformation import Transformation, render_transformations
from ..utils.formatting import TokenEnum, encode_scalar, format_decimal

Coordinates = tuple[int, int, int, int]


class DeliveryType(TokenEnum):
    """Storage and delivery type of an asset."""

    UPLOAD = "upload"
    PRIVATE = "private"
    AUTHENTICATED = "authenticated"
    LIST = "list"
    FETCH = "fetch"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    TWITTER_NAME = "twitter_name"
    GRAVATAR = "gravatar"
    YOUTUBE = "youtube"
    HULU = "hulu"
    VIMEO = "vimeo"
    ANIMOTO = "animoto"
    WORLDSTARHIPHOP = "worldstarhiphop"
    DAILYMOTION = "dailymotion"
    MULTI = "multi"
    TEXT = "text"
    ASSET = "asset"


class AccessMode(TokenEnum):
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


class ResourceType(TokenEnum):
    IMAGE = "image"
    RAW = "raw"
    VIDEO = "video"
    AUTO = "auto"


class BackgroundRemoval(TokenEnum):
    CLOUDINARY_AI = "cloudinary_ai"
    PIXELZ = "pixelz"


class RawConvert(TokenEnum):
    ASPOSE = "aspose"
    GOOGLE_SPEECH = "google_speech"
    EXTRACT_TEXT = "extract_text"


class Categorization(TokenEnum):
    """Auto-tagging add-ons that categorize an asset."""

    GOOGLE = "google_tagging"
    GOOGLE_VIDEO = "google_video_tagging"
    IMAGGA = "imagga_tagging"
    AWS_REK = "aws_rek_tagging"


class Moderation(TokenEnum):
    """Moderation add-ons.

    ``webpurify``, ``aws_rek`` and duplicate detection apply to images only;
    ``aws_rek_video`` and ``google_video_moderation`` to videos only.
    """

    MANUAL = "manual"
    PERCEPTION_POINT = "perception_point"
    WEBPURIFY = "webpurify"
    AWS_REK = "aws_rek"
    AWS_REK_VIDEO = "aws_rek_video"
    GOOGLE_VIDEO_MODERATION = "google_video_moderation"


class DuplicateModeration(BaseModel):
    """Duplicate image detection.

    A threshold in (0, 1] sets how similar an image must be to count as a
    duplicate; 0 only adds the image to the search index.

    Examples:
        >>> str(DuplicateModeration(threshold=0.8))
        'duplicate:0.8'
    """

    model_config = ConfigDict(frozen=True)

    threshold: float = Field(ge=0.0, le=1.0)

    def __str__(self) -> str:
        return f"duplicate:{format_decimal(self.threshold)}"


class AllowedHeader(TokenEnum):
    """HTTP headers that may be attached to delivered assets."""

    LINK = "Link"
    AUTHORIZATION = "Authorization"
    X_ROBOTS_TAG = "X-Robots-Tag"


class ResponsiveBreakpoints(BaseModel):
    """Responsive breakpoint request.

    Attributes:
        create_derived: Keep the derived images of the selected breakpoints
        format: Extension of the derived assets
        transformation: Base transformation applied before finding breakpoints
        max_width: Maximum width needed (service default 1000)
        min_width: Minimum width needed (service default 50)
        bytes_step: Minimum bytes between two breakpoints (service default 20000)
        max_images: Maximum number of breakpoints (service default 20)
    """

    create_derived: bool
    format: str | None = None
    transformation: str | None = None
    max_width: int | None = Field(None, ge=1)
    min_width: int | None = Field(None, ge=1)
    bytes_step: int | None = Field(None, ge=1)
    max_images: int | None = Field(None, ge=3, le=200)


class UploadOptions(BaseModel):
    """Optional upload parameters.

    Unset fields are not sent. Field names follow the API parameter names,
    except ``delivery_type`` (sent as ``type``) and ``async_`` (sent as
    ``async``).

    Example:
        ```python
        from cloudinary_kit import UploadOptions
        from cloudinary_kit.transformation import Fill

        options = UploadOptions(
            public_id="products/shoe",
            tags=["catalog", "summer"],
            eager=[Fill(width=200, height=200)],
            overwrite=True,
        )
        options.to_params()
        # {'public_id': 'products/shoe', 'overwrite': 'true',
        #  'tags': 'catalog,summer', 'eager': 'c_fill,w_200,h_200'}
        ```
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Naming and storage
    public_id: str | None = None
    public_id_prefix: str | None = None
    display_name: str | None = None
    asset_folder: str | None = None
    use_asset_folder_as_public_id_prefix: bool | None = None
    folder: str | None = None
    use_filename: bool | None = None
    use_filename_as_display_name: bool | None = None
    unique_filename: bool | None = None
    filename_override: str | None = None
    resource_type: ResourceType | None = None
    delivery_type: DeliveryType | None = Field(None, alias="type")
    access_control: str | None = None
    access_mode: AccessMode | None = None
    discard_original_filename: bool | None = None
    overwrite: bool | None = None

    # Tags and metadata
    tags: list[str] | None = None
    context: dict[str, str] | None = None
    metadata: dict[str, str] | None = None
    clear_invalid: bool | None = None

    # Analysis
    colors: bool | None = None
    faces: bool | None = None
    quality_analysis: bool | None = None
    accessibility_analysis: bool | None = None
    cinemagraph_analysis: bool | None = None
    media_metadata: bool | None = None
    phash: bool | None = None
    responsive_breakpoints: list[ResponsiveBreakpoints] | None = None
    auto_tagging: float | None = None
    categorization: list[Categorization] | None = None
    detection: str | None = None
    auto_chaptering: bool | None = None
    auto_transcription: bool | None = None
    ocr: bool | None = None
    visual_search: bool | None = None

    # Transformations
    eager: list[Transformation] | None = None
    eager_async: bool | None = None
    eager_notification_url: str | None = None
    transformation: list[Transformation] | None = None
    format: str | None = None
    custom_coordinates: Coordinates | None = None
    regions: dict[str, list[tuple[int, int]]] | None = None
    face_coordinates: list[Coordinates] | None = None
    background_removal: BackgroundRemoval | None = None
    raw_convert: RawConvert | None = None
    allowed_formats: list[str] | None = None

    # Processing
    async_: bool | None = Field(None, alias="async")
    backup: bool | None = None
    callback: str | None = None
    eval: str | None = None
    on_success: str | None = None
    headers: dict[AllowedHeader, str] | None = None
    invalidate: bool | None = None
    moderation: list[Moderation | DuplicateModeration] | None = None
    notification_url: str | None = None
    proxy: str | None = None
    return_delete_token: bool | None = None

    @field_validator("auto_tagging")
    @classmethod
    def clamp_auto_tagging(cls, v: float | None) -> float | None:
        """Clamp the confidence threshold to [0, 1]."""
        if v is None:
            return v
        return min(max(v, 0.0), 1.0)

    def add_tags(self, *tags: str) -> "UploadOptions":
        """Add tags, ignoring ones already present.

        Returns:
            Self for method chaining
        """
        self.tags = list(dict.fromkeys([*(self.tags or []), *tags]))
        return self

    def add_context(self, key: str, value: str) -> "UploadOptions":
        """Add one contextual metadata entry.

        Returns:
            Self for method chaining
        """
        self.context = {**(self.context or {}), key: value}
        return self

    def add_transformation(self, transformation: Transformation) -> "UploadOptions":
        """Append an incoming transformation applied before storing.

        Returns:
            Self for method chaining
        """
        self.transformation = [*(self.transformation or []), transformation]
        return self

    def to_params(self) -> dict[str, str]:
        """Encode the set fields as upload form values.

        Returns:
            Parameter name to encoded value, without unset or empty values

        Examples:
            >>> UploadOptions(tags=["a", "b"], overwrite=False).to_params()
            {'overwrite': 'false', 'tags': 'a,b'}
        """
        params: dict[str, str] = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            encoder = _ENCODERS.get(name, encode_scalar)
            encoded = encoder(value)
            if encoded:
                params[field.alias or name] = encoded
        return params


def _encode_pairs(value: dict[str, str]) -> str:
    return "|".join(f"{key}={item}" for key, item in value.items())


def _encode_list(value: list[Any]) -> str:
    return ",".join(encode_scalar(item) for item in dict.fromkeys(value))


def _encode_coordinates(value: Coordinates) -> str:
    return ",".join(str(number) for number in value)


def _encode_face_coordinates(value: list[Coordinates]) -> str:
    return "|".join(_encode_coordinates(box) for box in value)


def _encode_regions(value: dict[str, list[tuple[int, int]]]) -> str:
    regions = {name: [list(point) for point in points] for name, points in value.items()}
    return json.dumps(regions, separators=(",", ":"))


def _encode_breakpoints(value: list[ResponsiveBreakpoints]) -> str:
    breakpoints = [breakpoint.model_dump(exclude_none=True) for breakpoint in value]
    return json.dumps(breakpoints, separators=(",", ":"))


def _encode_moderation(value: list[Moderation | DuplicateModeration]) -> str:
    tokens = list(dict.fromkeys(str(item) for item in value))
    # manual review runs after the automatic add-ons
    manual = str(Moderation.MANUAL)
    if manual in tokens:
        tokens.remove(manual)
        tokens.append(manual)
    return "|".join(tokens)


def _encode_headers(value: dict[AllowedHeader, str]) -> str:
    return "\n".join(f"{header.value}: {item}" for header, item in value.items())


def _encode_ocr(value: bool) -> str:
    return "adv_ocr" if value else ""


_ENCODERS: dict[str, Callable[[Any], str]] = {
    "tags": _encode_list,
    "allowed_formats": _encode_list,
    "categorization": _encode_list,
    "context": _encode_pairs,
    "metadata": _encode_pairs,
    "eager": lambda value: render_transformations(value, separator="|"),
    "transformation": lambda value: render_transformations(value, separator="/"),
    "custom_coordinates": _encode_coordinates,
    "face_coordinates": _encode_face_coordinates,
    "regions": _encode_regions,
    "responsive_breakpoints": _encode_breakpoints,
    "moderation": _encode_moderation,
    "headers": _encode_headers,
    "auto_tagging": format_decimal,
    "ocr": _encode_ocr,
}
