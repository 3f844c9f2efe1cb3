"""Decimal-string codec for 64-bit integer fields.

JSON numbers lose precision past 2**53, so Google APIs carry int64 and
uint64 values as decimal strings. Python ints are arbitrary precision, so
the only work here is validation and range checking.
"""

import re
from typing import Union

from codec.errors import DecodeError, EncodeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_SIGNED_RE = re.compile(r"-?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")


def _bounds(signed: bool) -> tuple[int, int]:
    return (INT64_MIN, INT64_MAX) if signed else (0, UINT64_MAX)


def format_int(value: int, *, signed: bool = True) -> str:
    """Render an integer as its wire decimal string.

    Args:
        value: The native integer.
        signed: True for int64 fields, False for uint64 fields.

    Returns:
        Decimal string, e.g. '9223372036854775807'.

    Raises:
        EncodeError: If value is not an int (bools are rejected) or is
            outside the range of the field kind.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodeError("expected int", value)
    low, high = _bounds(signed)
    if not low <= value <= high:
        kind = "int64" if signed else "uint64"
        raise EncodeError(f"integer out of {kind} range", value)
    return str(value)


def parse_int(text: Union[str, int], *, signed: bool = True) -> int:
    """Parse a wire integer into a native int.

    Proto3 JSON allows 64-bit integers as either strings or numbers, so
    both are accepted.

    Args:
        text: Decimal string or JSON integer.
        signed: True for int64 fields, False for uint64 fields.

    Returns:
        The parsed integer.

    Raises:
        DecodeError: If text is not a decimal integer or is out of range.
    """
    if isinstance(text, bool):
        raise DecodeError("expected integer string", text)
    if isinstance(text, int):
        value = text
    elif isinstance(text, str):
        pattern = _SIGNED_RE if signed else _UNSIGNED_RE
        if not pattern.fullmatch(text):
            raise DecodeError("not a decimal integer", text)
        value = int(text)
    else:
        raise DecodeError("expected integer string", text)

    low, high = _bounds(signed)
    if not low <= value <= high:
        kind = "int64" if signed else "uint64"
        raise DecodeError(f"integer out of {kind} range", text)
    return value
