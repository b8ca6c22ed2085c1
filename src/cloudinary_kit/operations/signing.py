"""Request signing for the upload API.

Authenticated API calls carry a SHA-1 signature over their parameters:
every signed ``key=value`` pair sorted by key and joined with ``&``,
followed directly by the API secret.
"""

import hashlib
import time
from collections.abc import Mapping

# Sent with the request but never part of the signature
UNSIGNED_PARAMS = frozenset({"file", "resource_type", "api_key", "cloud_name", "signature"})


def sign_parameters(params: Mapping[str, str], api_secret: str) -> str:
    """Compute the signature of a set of request parameters.

    Args:
        params: Form fields of the request
        api_secret: Account API secret

    Returns:
        Lowercase hex SHA-1 digest

    Examples:
        >>> sign_parameters({"public_id": "sample", "timestamp": "1315060510"}, "abcd")
        'c3470533147774275dd37996cc4d0e68fd03cd4f'
    """
    pairs = sorted(
        (key, value)
        for key, value in params.items()
        if key not in UNSIGNED_PARAMS and value not in (None, "")
    )
    to_sign = "&".join(f"{key}={value}" for key, value in pairs)
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()


def build_signed_params(
    params: Mapping[str, str],
    api_key: str,
    api_secret: str,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Add ``timestamp``, ``api_key`` and ``signature`` to request parameters.

    Args:
        params: Encoded request parameters
        api_key: Account API key
        api_secret: Account API secret
        timestamp: Unix time in seconds (defaults to now)

    Returns:
        Form fields ready to send
    """
    fields = {key: value for key, value in params.items() if value not in (None, "")}
    fields["timestamp"] = str(int(time.time()) if timestamp is None else timestamp)
    fields["signature"] = sign_parameters(fields, api_secret)
    fields["api_key"] = api_key
    return fields
