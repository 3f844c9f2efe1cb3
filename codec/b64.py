"""RFC 4648 base64 codec for bytes-typed wire fields.

Only the standard alphabet with '=' padding is accepted. Decoding is strict:
anything that would not be produced by encode() is rejected, which keeps
encode(decode(s)) == s for every accepted string.
"""

import base64
import binascii
import re

from codec.errors import DecodeError, EncodeError

_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")


def encode(data: bytes) -> str:
    """Encode raw bytes as a padded base64 string.

    Args:
        data: bytes, bytearray or memoryview to encode.

    Returns:
        The base64 text; empty input gives an empty string.

    Raises:
        EncodeError: If data is not a bytes-like object.

    Example:
        >>> encode(bytes([0xFF, 0xFE, 0xFD]))
        '//79'
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise EncodeError("expected bytes", data)
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """Decode a padded base64 string into raw bytes.

    Args:
        text: Base64 text using the standard alphabet.

    Returns:
        The decoded bytes.

    Raises:
        DecodeError: If text is not a string, its length is not a multiple
            of 4, it contains characters outside the alphabet, its padding
            is misplaced, or its trailing bits are not zero.

    Example:
        >>> decode("//79")
        b'\\xff\\xfe\\xfd'
    """
    if not isinstance(text, str):
        raise DecodeError("expected base64 string", text)
    if len(text) % 4:
        raise DecodeError("base64 length is not a multiple of 4", text)
    if not _BASE64_RE.fullmatch(text):
        raise DecodeError("invalid base64 character or padding", text)

    try:
        data = base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise DecodeError(f"invalid base64: {e}", text) from e

    if base64.b64encode(data).decode("ascii") != text:
        raise DecodeError("non-canonical base64 padding bits", text)
    return data
