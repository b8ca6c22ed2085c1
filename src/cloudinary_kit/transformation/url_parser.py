"""Reverse parsing of delivery URLs.

The delivery service publishes no grammar for its URLs and offers no
endpoint to decompose them, so :func:`parse_url` is an unofficial,
heuristic and lossy parser. It recovers the cloud name, public ID and
format of an asset and throws the transformations away.
"""

import logging
import re
from urllib.parse import urlsplit

from ..exceptions import (
    EmptyInputError,
    InvalidDeliveryModeError,
    MissingAssetIdError,
    MissingNamespaceError,
    NotThisServiceError,
    UnsupportedAssetKindError,
)
from .image import DELIVERY_HOST, Image

logger = logging.getLogger(__name__)

ASSET_KIND = "image"

DELIVERY_TYPES = frozenset(
    {
        "upload",
        "fetch",
        "private",
        "authenticated",
        "sprite",
        "facebook",
        "twitter",
        "youtube",
        "vimeo",
    }
)

_VERSION_PATTERN = re.compile(r"v[0-9]{10}")


def is_version(segment: str) -> bool:
    """Check whether a path segment is a version marker (``v`` + 10 digits).

    Examples:
        >>> is_version("v1233456678")
        True
        >>> is_version("v123")
        False
    """
    return _VERSION_PATTERN.fullmatch(segment) is not None


def is_transformation(segment: str) -> bool:
    """Guess whether a path segment holds transformation directives.

    Transformation qualifiers look like ``<code>_<value>`` with a code of
    one to three characters (``c_``, ``w_``, ``ar_``...). Public IDs with
    an underscore rarely have such a short prefix, so a segment whose text
    before the first ``_`` is shorter than 4 bytes (UTF-8) is taken as a
    transformation. Asset folders like ``ab_cd`` are misread.

    Examples:
        >>> is_transformation("ar_0.5,foo")
        True
        >>> is_transformation("summer_2024")
        False
    """
    head, underscore, _rest = segment.partition("_")
    return bool(underscore) and len(head.encode()) < 4


def parse_url(url: str) -> Image:
    """Decompose a delivery URL into an :class:`Image`.

    Only the host, the ``image`` asset kind and the delivery type are
    checked. Remaining path segments are classified left to right: a
    version marker or any segment that is not a transformation ends the
    transformation block; everything from there on is the public ID.
    The text after the last ``.`` of the final segment is the format; a
    bare trailing dot stays in the public ID.

    This is best effort. A folder named like a transformation
    (``ab_cd/photo``) is silently dropped, and transformations are not
    recovered. Percent escapes are kept as they appear in the URL.

    Args:
        url: Absolute delivery URL

    Returns:
        Image with cloud name, public ID and format; no transformations

    Raises:
        EmptyInputError: If the URL is empty
        NotThisServiceError: If the host is not the delivery host
        MissingNamespaceError: If the path has no cloud name
        UnsupportedAssetKindError: If the asset kind is not ``image``
        InvalidDeliveryModeError: If the delivery type is unknown
        MissingAssetIdError: If no public ID is left after classification

    Examples:
        >>> image = parse_url(
        ...     "https://res.cloudinary.com/demo/image/upload/"
        ...     "c_scale,h_800,q_auto/v1233456678/path/name.jpg"
        ... )
        >>> image.public_id, image.format
        ('path/name', 'jpg')
    """
    if not url or not url.strip():
        raise EmptyInputError("Cannot parse an empty URL")

    parts = urlsplit(url.strip())
    if parts.hostname != DELIVERY_HOST:
        raise NotThisServiceError(
            f"Not a delivery URL: expected host {DELIVERY_HOST}",
            details={"url": url, "host": parts.hostname},
        )

    segments = [segment for segment in parts.path.split("/") if segment]
    if not segments:
        raise MissingNamespaceError("URL has no cloud name", details={"url": url})

    cloud_name = segments[0]
    if len(segments) < 2 or segments[1] != ASSET_KIND:
        kind = segments[1] if len(segments) > 1 else None
        raise UnsupportedAssetKindError(
            f"Unsupported asset kind: {kind}", details={"url": url, "kind": kind}
        )

    remaining = segments[2:]
    if remaining:
        delivery_type = remaining.pop(0)
        if delivery_type not in DELIVERY_TYPES:
            raise InvalidDeliveryModeError(
                f"Invalid delivery type: {delivery_type}",
                details={"url": url, "delivery_type": delivery_type},
            )

    asset_segments: list[str] = []
    in_asset_id = False
    for segment in remaining:
        if not in_asset_id:
            if is_version(segment):
                in_asset_id = True
                continue
            if is_transformation(segment):
                logger.debug(f"Skipping transformation segment: {segment}")
                continue
            in_asset_id = True
        asset_segments.append(segment)

    if not asset_segments:
        raise MissingAssetIdError("URL has no public ID", details={"url": url})

    stem, dot, extension = asset_segments[-1].rpartition(".")
    if not dot:
        stem, extension = asset_segments[-1], ""
    if not stem:
        raise MissingAssetIdError("URL has no public ID", details={"url": url})
    if dot and not extension:
        # A bare trailing dot belongs to the public ID
        stem += dot

    public_id = "/".join([*asset_segments[:-1], stem])
    format = extension or None
    logger.debug(f"Parsed {url} as cloud={cloud_name} public_id={public_id} format={format}")

    return Image(cloud_name=cloud_name, public_id=public_id, format=format)
