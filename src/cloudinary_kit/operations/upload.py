"""Upload payload construction shared by the sync and async clients."""

import mimetypes
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from ..models.upload import UploadOptions
from .signing import build_signed_params

FileTuple = tuple[str, BinaryIO, str]


@dataclass
class UploadPayload:
    """Multipart body of an upload request.

    Attributes:
        data: Signed form fields
        file: ``(filename, stream, content_type)`` for local files, None
            when the source travels as the ``file`` form field
    """

    data: dict[str, str]
    file: FileTuple | None = None

    @property
    def files(self) -> dict[str, FileTuple] | None:
        """Files mapping in the shape httpx expects."""
        if self.file is None:
            return None
        return {"file": self.file}


@contextmanager
def build_upload_payload(
    source: str | Path,
    options: UploadOptions | None,
    api_key: str,
    api_secret: str,
    timestamp: int | None = None,
) -> Iterator[UploadPayload]:
    """Build a signed upload payload.

    A :class:`~pathlib.Path` is opened and sent as a file part; it is
    closed when the context exits. A string is sent as-is in the ``file``
    form field, so it can be a remote URL, a data URI or a base64 string.

    Args:
        source: Local file path or remote source string
        options: Optional upload parameters
        api_key: Account API key
        api_secret: Account API secret
        timestamp: Signing time in unix seconds (defaults to now)

    Yields:
        Payload ready to post

    Raises:
        FileNotFoundError: If a local file doesn't exist

    Example:
        >>> with build_upload_payload(Path("shoe.jpg"), None, "key", "secret") as payload:
        ...     client.post(url, data=payload.data, files=payload.files)
    """
    params = options.to_params() if options is not None else {}
    resource_type = params.pop("resource_type", None)

    data = build_signed_params(params, api_key, api_secret, timestamp=timestamp)
    if resource_type is not None:
        data["resource_type"] = resource_type

    if not isinstance(source, Path):
        data["file"] = source
        yield UploadPayload(data=data)
        return

    if not source.is_file():
        raise FileNotFoundError(f"File not found: {source}")

    content_type = mimetypes.guess_type(source.name)[0] or "application/octet-stream"
    with open(source, "rb") as stream:
        yield UploadPayload(data=data, file=(source.name, stream, content_type))
