"""Token formatting helpers.

Small helpers shared by the transformation renderers and the upload
parameter encoders. Everything here is pure and side-effect free.
"""

from enum import Enum
from typing import Any


class TokenEnum(str, Enum):
    """String enum whose ``str()`` is its wire token.

    Examples:
        >>> class Mode(TokenEnum):
        ...     BORDER = "border"
        >>> str(Mode.BORDER)
        'border'
    """

    def __str__(self) -> str:
        return self.value


def format_decimal(value: float) -> str:
    """Render a float the way the service expects it.

    Integral values drop the trailing ``.0``; other values use the
    shortest representation that round-trips.

    Args:
        value: Number to render

    Returns:
        Decimal string

    Examples:
        >>> format_decimal(0.5)
        '0.5'
        >>> format_decimal(2.0)
        '2'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def optional_token(value: Any | None) -> str | None:
    """Render ``value`` with ``str()`` unless it is None."""
    if value is None:
        return None
    return str(value)


def join_tokens(*tokens: str | None, separator: str = ",") -> str:
    """Join the tokens that are present, skipping None and empty strings.

    Examples:
        >>> join_tokens("ar_16:9", None, "c_scale", "w_100")
        'ar_16:9,c_scale,w_100'
    """
    return separator.join(token for token in tokens if token)


def encode_scalar(value: Any) -> str:
    """Encode a single form value.

    Booleans become ``true``/``false``, enums their token and floats
    use :func:`format_decimal`.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, float):
        return format_decimal(value)
    return str(value)
