"""Tests for the wire codec.

This module tests:
- Strict base64 encode/decode of bytes fields
- Decimal-string int64/uint64 handling
- RFC 3339 timestamp formatting and parsing
- CoercionError rendering

Run with: pytest tests/test_codec.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest

from codec import b64
from codec.errors import CoercionError, DecodeError, EncodeError
from codec.integers import INT64_MAX, INT64_MIN, UINT64_MAX, format_int, parse_int
from codec.timestamps import format_timestamp, parse_timestamp


class TestBase64Encode:
    """Tests for b64.encode."""

    def test_encode_three_bytes(self):
        """Test that a full group encodes without padding."""
        assert b64.encode(bytes([0xFF, 0xFE, 0xFD])) == "//79"

    def test_encode_padding(self):
        """Test one and two trailing bytes get '==' and '='."""
        assert b64.encode(b"a") == "YQ=="
        assert b64.encode(b"ab") == "YWI="

    def test_encode_empty(self):
        """Test empty input gives an empty string."""
        assert b64.encode(b"") == ""

    def test_encode_bytearray(self):
        """Test bytearray and memoryview are accepted."""
        assert b64.encode(bytearray(b"hi")) == "aGk="
        assert b64.encode(memoryview(b"hi")) == "aGk="

    def test_encode_rejects_str(self):
        """Test text input is an EncodeError."""
        with pytest.raises(EncodeError):
            b64.encode("hello")


class TestBase64Decode:
    """Tests for b64.decode."""

    def test_decode_three_bytes(self):
        """Test decoding a full group."""
        assert b64.decode("//79") == bytes([0xFF, 0xFE, 0xFD])

    def test_decode_empty(self):
        """Test empty string gives empty bytes."""
        assert b64.decode("") == b""

    def test_decode_bad_length(self):
        """Test length that is not a multiple of 4 is rejected."""
        with pytest.raises(DecodeError):
            b64.decode("abc")

    def test_decode_non_canonical_bits(self):
        """Test non-zero trailing bits are rejected."""
        with pytest.raises(DecodeError):
            b64.decode("YR==")

    @pytest.mark.parametrize("text", ["-_8=", "YQ=a", "Y===", "YW I", "=YWI", "YWI=\n", "YWJ\n"])
    def test_decode_bad_characters_or_padding(self, text):
        """Test URL-safe characters, whitespace and misplaced padding are rejected."""
        with pytest.raises(DecodeError):
            b64.decode(text)

    def test_decode_rejects_bytes(self):
        """Test non-string input is a DecodeError."""
        with pytest.raises(DecodeError):
            b64.decode(b"YQ==")

    @pytest.mark.parametrize("text", ["", "YQ==", "YWI=", "YWJj", "//79", "AAECAwQF"])
    def test_canonical_text_round_trip(self, text):
        """Test encode(decode(s)) == s for canonical padded text."""
        assert b64.encode(b64.decode(text)) == text

    @pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", bytes(range(256))])
    def test_round_trip(self, data):
        """Test decode(encode(b)) == b."""
        assert b64.decode(b64.encode(data)) == data


class TestIntegers:
    """Tests for int64/uint64 decimal strings."""

    def test_format_int64_bounds(self):
        """Test the int64 extremes format exactly."""
        assert format_int(INT64_MAX) == "9223372036854775807"
        assert format_int(INT64_MIN) == "-9223372036854775808"

    def test_format_uint64_max(self):
        """Test the uint64 maximum formats exactly."""
        assert format_int(UINT64_MAX, signed=False) == "18446744073709551615"

    def test_format_out_of_range(self):
        """Test values outside the kind's range are rejected."""
        with pytest.raises(EncodeError):
            format_int(INT64_MAX + 1)
        with pytest.raises(EncodeError):
            format_int(-1, signed=False)

    def test_format_rejects_bool_and_float(self):
        """Test bools and floats are not integers on the wire."""
        with pytest.raises(EncodeError):
            format_int(True)
        with pytest.raises(EncodeError):
            format_int(1.0)

    def test_parse_string(self):
        """Test decimal strings parse without precision loss."""
        assert parse_int("9223372036854775807") == INT64_MAX
        assert parse_int("-9223372036854775808") == INT64_MIN
        assert parse_int("18446744073709551615", signed=False) == UINT64_MAX

    def test_parse_json_number(self):
        """Test JSON integer numbers are accepted."""
        assert parse_int(42) == 42

    @pytest.mark.parametrize("text", [
        "12a", "1.5", " 1", "", "+1", True, None, 1.0,
        "123\n",
        "\u0661\u0662\u0663",
        "\uff11\uff12",
    ])
    def test_parse_invalid(self, text):
        """Test malformed integers are rejected."""
        with pytest.raises(DecodeError):
            parse_int(text)

    def test_parse_out_of_range(self):
        """Test range is checked per kind."""
        with pytest.raises(DecodeError):
            parse_int("9223372036854775808")
        with pytest.raises(DecodeError):
            parse_int("-1", signed=False)
        with pytest.raises(DecodeError):
            parse_int("18446744073709551616", signed=False)


class TestTimestamps:
    """Tests for RFC 3339 timestamps."""

    def test_format_milliseconds(self):
        """Test millisecond precision and the Z suffix."""
        value = datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-01-15T10:30:00.500Z"

    def test_format_naive_is_utc(self):
        """Test naive datetimes are treated as UTC."""
        assert format_timestamp(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00.000Z"

    def test_format_offset_converted(self):
        """Test aware datetimes are shifted to UTC."""
        value = datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(value) == "2024-01-15T10:30:00.000Z"

    def test_format_microseconds(self):
        """Test sub-millisecond precision is kept."""
        value = datetime(2024, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-01-15T10:30:00.123456Z"

    def test_format_early_year_padded(self):
        """Test years below 1000 keep four digits."""
        assert format_timestamp(datetime(5, 3, 1)) == "0005-03-01T00:00:00.000Z"

    def test_format_overflow(self):
        """Test a value that cannot be shifted into UTC is an EncodeError."""
        value = datetime(1, 1, 1, 0, 30, tzinfo=timezone(timedelta(hours=1)))
        with pytest.raises(EncodeError):
            format_timestamp(value)

    def test_format_rejects_string(self):
        """Test non-datetime input is an EncodeError."""
        with pytest.raises(EncodeError):
            format_timestamp("2024-01-15T10:30:00Z")

    def test_parse_utc(self):
        """Test parsing a Z timestamp."""
        parsed = parse_timestamp("2024-01-15T10:30:00.500Z")
        assert parsed == datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=timezone.utc)
        assert parsed.tzinfo == timezone.utc

    def test_parse_offset(self):
        """Test offsets are normalized to UTC."""
        parsed = parse_timestamp("2024-01-15T12:30:00+02:00")
        assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert parsed.hour == 10

    def test_parse_without_fraction(self):
        """Test fractional seconds are optional."""
        assert parse_timestamp("2024-01-15T10:30:00Z").microsecond == 0

    def test_parse_nanoseconds_truncated(self):
        """Test digits past microseconds are dropped."""
        assert parse_timestamp("2024-01-15T10:30:00.123456789Z").microsecond == 123456

    @pytest.mark.parametrize("text", [
        "2024-01-15 10:30:00Z",
        "2024-01-15T10:30:00",
        "2024-13-01T00:00:00Z",
        "2024-01-15T10:30:00+24:00",
        "2024-01-15T10:30:00Z\n",
        "\uff12\uff10\uff12\uff14-01-15T10:30:00Z",
        "2024-01-15T10:30:00.\u0665Z",
        "yesterday",
        "",
    ])
    def test_parse_invalid(self, text):
        """Test malformed timestamps are rejected."""
        with pytest.raises(DecodeError):
            parse_timestamp(text)

    def test_parse_rejects_number(self):
        """Test epoch numbers are not timestamps."""
        with pytest.raises(DecodeError):
            parse_timestamp(1705314600)

    def test_round_trip(self):
        """Test parse(format(t)) == t at millisecond and microsecond precision."""
        for value in (
            datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=timezone.utc),
            datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
        ):
            assert parse_timestamp(format_timestamp(value)) == value


class TestCoercionError:
    """Tests for error rendering."""

    def test_str_without_path(self):
        """Test the message shows reason and value."""
        assert str(DecodeError("bad", "x")) == "bad (got 'x')"

    def test_str_with_path(self):
        """Test the message leads with the field path."""
        error = DecodeError("bad", "x", "rows[2].createTime")
        assert str(error) == "rows[2].createTime: bad (got 'x')"

    def test_hierarchy(self):
        """Test both directions share the CoercionError base."""
        assert issubclass(DecodeError, CoercionError)
        assert issubclass(EncodeError, CoercionError)
