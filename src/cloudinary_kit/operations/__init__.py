"""Request building shared by the sync and async clients."""

from .signing import UNSIGNED_PARAMS, build_signed_params, sign_parameters
from .upload import UploadPayload, build_upload_payload

__all__ = [
    "UNSIGNED_PARAMS",
    "UploadPayload",
    "build_signed_params",
    "build_upload_payload",
    "sign_parameters",
]
