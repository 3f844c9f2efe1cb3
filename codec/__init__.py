"""Wire codecs for bytes, 64-bit integer and timestamp fields."""

from codec.b64 import decode, encode
from codec.errors import CoercionError, DecodeError, EncodeError
from codec.integers import INT64_MAX, INT64_MIN, UINT64_MAX, format_int, parse_int
from codec.timestamps import format_timestamp, parse_timestamp

__all__ = [
    "encode",
    "decode",
    "format_int",
    "parse_int",
    "format_timestamp",
    "parse_timestamp",
    "INT64_MIN",
    "INT64_MAX",
    "UINT64_MAX",
    "CoercionError",
    "DecodeError",
    "EncodeError",
]
