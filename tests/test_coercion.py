"""Tests for the field coercion layer.

This module tests:
- Field and Schema descriptors
- SchemaRegistry definition, lookup and validation
- to_native / to_wire traversal (nesting, lists, maps, error paths)
- Query parameter preparation

Run with: pytest tests/test_coercion.py -v
"""

import copy
from datetime import datetime, timezone

import pytest

from codec.errors import DecodeError, EncodeError
from coercion import (
    Field,
    FieldKind,
    Schema,
    SchemaRegistry,
    byte,
    coerce_params,
    duration,
    field_mask,
    int64,
    json_value,
    message,
    timestamp,
    to_native,
    to_wire,
    uint64,
)

UTC = timezone.utc


@pytest.fixture
def registry():
    """A small registry covering every field kind."""
    registry = SchemaRegistry("widgets", "v1")
    registry.define("Row", {
        "createTime": timestamp(),
        "blob": byte(),
        "count": int64(),
    })
    registry.define("Table", {
        "rows": message("Row", repeated=True),
        "byName": message("Row", map=True),
        "ids": uint64(repeated=True),
        "sizes": int64(map=True),
        "extra": json_value(),
        "mask": field_mask(),
        "ttl": duration(),
        "parent": message("Table"),
    })
    registry.define("ListParams", {"minCount": int64(), "readMask": field_mask()})
    return registry


class TestFieldDescriptors:
    """Tests for Field and the helper constructors."""

    def test_helpers_set_kind(self):
        """Test each helper produces its kind."""
        assert byte().kind is FieldKind.BYTES
        assert int64().kind is FieldKind.INT64
        assert uint64(repeated=True).repeated is True
        assert timestamp(map=True).map is True
        assert message("Row").ref == "Row"

    def test_repeated_and_map_conflict(self):
        """Test a field cannot be both repeated and a map."""
        with pytest.raises(ValueError):
            Field(FieldKind.BYTES, repeated=True, map=True)

    def test_message_requires_ref(self):
        """Test MESSAGE fields need a ref and only they may have one."""
        with pytest.raises(ValueError):
            Field(FieldKind.MESSAGE)
        with pytest.raises(ValueError):
            Field(FieldKind.INT64, ref="Row")

    def test_unbound_schema_cannot_resolve(self):
        """Test nested lookup needs a registry."""
        schema = Schema("Loose", {"child": message("Row")})
        with pytest.raises(KeyError):
            to_native(schema, {"child": {}})


class TestSchemaRegistry:
    """Tests for SchemaRegistry."""

    def test_define_and_get(self, registry):
        """Test defined schemas are bound to their registry."""
        row = registry.get("Row")
        assert row.name == "Row"
        assert row.registry is registry
        assert "Row" in registry
        assert len(registry) == 3

    def test_define_without_fields(self):
        """Test a schema may declare nothing."""
        registry = SchemaRegistry("widgets")
        assert registry.define("Empty").fields == {}

    def test_duplicate_rejected(self, registry):
        """Test a name can only be defined once."""
        with pytest.raises(ValueError):
            registry.define("Row")

    def test_unknown_schema_names_api(self, registry):
        """Test lookup failures mention the API."""
        with pytest.raises(KeyError, match="widgets"):
            registry.get("Missing")

    def test_names_sorted(self, registry):
        """Test names() lists schemas alphabetically."""
        assert registry.names() == ["ListParams", "Row", "Table"]

    def test_validate_passes(self, registry):
        """Test a closed registry validates."""
        registry.validate()

    def test_validate_reports_dangling_refs(self):
        """Test every unresolved reference is reported."""
        registry = SchemaRegistry("widgets")
        registry.define("A", {"b": message("B"), "c": message("C", repeated=True)})
        with pytest.raises(ValueError, match="A.b -> B"):
            registry.validate()


class TestToNative:
    """Tests for wire -> native conversion."""

    def test_scalar_kinds(self, registry):
        """Test bytes, int64 and timestamps are converted."""
        row = to_native(registry.get("Row"), {
            "createTime": "2024-01-15T10:30:00.500Z",
            "blob": "//79",
            "count": "9223372036854775807",
        })
        assert row == {
            "createTime": datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=UTC),
            "blob": b"\xff\xfe\xfd",
            "count": 9223372036854775807,
        }

    def test_unknown_fields_preserved(self, registry):
        """Test undeclared fields pass through untouched."""
        row = to_native(registry.get("Row"), {"name": "rows/1", "values": {"Status": "Done"}})
        assert row == {"name": "rows/1", "values": {"Status": "Done"}}

    def test_absent_fields_stay_absent(self, registry):
        """Test declared fields are not invented."""
        assert "createTime" not in to_native(registry.get("Row"), {"name": "rows/1"})

    def test_null_passes_through(self, registry):
        """Test JSON null is kept as None."""
        assert to_native(registry.get("Row"), {"blob": None}) == {"blob": None}

    def test_nested_repeated_and_map(self, registry):
        """Test conversion follows messages, lists and maps."""
        table = to_native(registry.get("Table"), {
            "rows": [{"count": "1"}, {"count": "2"}],
            "byName": {"a": {"blob": "YQ=="}},
            "ids": ["18446744073709551615"],
            "sizes": {"small": "10", "large": "-20"},
            "parent": {"rows": [{"createTime": "2024-01-15T10:30:00Z"}]},
        })
        assert [row["count"] for row in table["rows"]] == [1, 2]
        assert table["byName"]["a"]["blob"] == b"a"
        assert table["ids"] == [18446744073709551615]
        assert table["sizes"] == {"small": 10, "large": -20}
        assert table["parent"]["rows"][0]["createTime"] == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_passthrough_kinds(self, registry):
        """Test duration, field mask and JSON values are not touched."""
        extra = {"anything": [1, "two", None]}
        table = to_native(registry.get("Table"), {"extra": extra, "mask": "a,b.c", "ttl": "3.5s"})
        assert table["extra"] is extra
        assert table["mask"] == "a,b.c"
        assert table["ttl"] == "3.5s"

    def test_input_not_mutated(self, registry):
        """Test the wire record is left as it was."""
        wire = {"rows": [{"blob": "YQ=="}], "byName": {"x": {"count": "5"}}}
        before = copy.deepcopy(wire)
        to_native(registry.get("Table"), wire)
        assert wire == before

    def test_list_root(self, registry):
        """Test a list of records converts element-wise."""
        rows = to_native(registry.get("Row"), [{"count": "1"}, {"count": "2"}])
        assert rows == [{"count": 1}, {"count": 2}]


class TestErrorPaths:
    """Tests for the field path carried by failures."""

    def test_repeated_message_path(self, registry):
        """Test the index and field name of a bad nested value."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Table"), {
                "rows": [
                    {"createTime": "2024-01-15T10:30:00Z"},
                    {"createTime": "not a time"},
                ],
            })
        assert exc_info.value.path == "rows[1].createTime"
        assert exc_info.value.value == "not a time"
        assert "rows[1].createTime" in str(exc_info.value)

    def test_map_path(self, registry):
        """Test map keys appear in the path."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Table"), {"byName": {"b": {"blob": "abc"}}})
        assert exc_info.value.path == "byName.b.blob"

    def test_repeated_scalar_path(self, registry):
        """Test list indices of scalar elements appear in the path."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Table"), {"ids": ["1", "2", "-3"]})
        assert exc_info.value.path == "ids[2]"

    def test_list_root_path(self, registry):
        """Test root list indices lead the path."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Row"), [{"count": "1"}, {"count": "x"}])
        assert exc_info.value.path == "[1].count"

    def test_expected_array(self, registry):
        """Test a repeated field holding an object is rejected."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Table"), {"rows": {"count": "1"}})
        assert exc_info.value.path == "rows"

    def test_expected_object(self, registry):
        """Test a message element that is not an object is rejected."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Table"), {"rows": ["oops"]})
        assert exc_info.value.path == "rows[0]"

    @pytest.mark.parametrize("field, value", [
        ("count", "42\n"),
        ("createTime", "2024-01-15T10:30:00Z\n"),
        ("blob", "YWJj\n"),
    ])
    def test_trailing_newline_rejected(self, registry, field, value):
        """Test wire strings with trailing whitespace are malformed."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Row"), {field: value})
        assert exc_info.value.path == field

    def test_root_must_be_object(self, registry):
        """Test a non-object root is rejected with the schema name."""
        with pytest.raises(DecodeError) as exc_info:
            to_native(registry.get("Row"), "oops")
        assert exc_info.value.path == "Row"


class TestToWire:
    """Tests for native -> wire conversion."""

    def test_scalar_kinds(self, registry):
        """Test native values become their wire strings."""
        wire = to_wire(registry.get("Row"), {
            "createTime": datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=UTC),
            "blob": b"\xff\xfe\xfd",
            "count": -5,
        })
        assert wire == {"createTime": "2024-01-15T10:30:00.500Z", "blob": "//79", "count": "-5"}

    def test_encode_error_path(self, registry):
        """Test unencodable values report their path."""
        with pytest.raises(EncodeError) as exc_info:
            to_wire(registry.get("Table"), {"rows": [{"blob": "already text"}]})
        assert exc_info.value.path == "rows[0].blob"

    def test_uint64_negative(self, registry):
        """Test negative values in uint64 fields are rejected."""
        with pytest.raises(EncodeError):
            to_wire(registry.get("Table"), {"ids": [-1]})

    def test_round_trip(self, registry):
        """Test canonical wire data survives wire -> native -> wire."""
        wire = {
            "rows": [{"createTime": "2024-01-15T10:30:00.500Z", "blob": "YWI=", "count": "7"}],
            "byName": {"k": {"count": "-9223372036854775808"}},
            "ids": ["0", "18446744073709551615"],
            "mask": "rows",
            "name": "tables/1",
        }
        schema = registry.get("Table")
        assert to_wire(schema, to_native(schema, wire)) == wire


class TestCoerceParams:
    """Tests for query parameter preparation."""

    def test_drops_none_and_renders_bools(self):
        """Test None entries vanish and bools become lowercase strings."""
        params = coerce_params(None, {"pageSize": 10, "pageToken": None, "preview": True, "force": False})
        assert params == {"pageSize": 10, "preview": "true", "force": "false"}

    def test_declared_kinds_converted(self, registry):
        """Test declared parameters are converted to wire form."""
        params = coerce_params(registry.get("ListParams"), {"minCount": 5, "readMask": "name,id"})
        assert params == {"minCount": "5", "readMask": "name,id"}

    def test_invalid_declared_param(self, registry):
        """Test bad parameter values raise EncodeError."""
        with pytest.raises(EncodeError):
            coerce_params(registry.get("ListParams"), {"minCount": "five"})
