"""Tests for building schema registries from Discovery documents.

Run with: pytest tests/test_discovery.py -v
"""

from datetime import datetime, timezone

import pytest

from coercion import FieldKind, registry_from_discovery, to_native

DISCOVERY_DOC = {
    "kind": "discovery#restDescription",
    "name": "widgets",
    "version": "v1",
    "schemas": {
        "Widget": {
            "id": "Widget",
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "count": {"type": "integer", "format": "int32"},
                "id": {"type": "string", "format": "int64"},
                "payload": {"type": "string", "format": "byte"},
                "createTime": {"type": "string", "format": "google-datetime"},
                "ttl": {"type": "string", "format": "google-duration"},
                "parts": {"type": "array", "items": {"$ref": "Part"}},
                "counters": {
                    "type": "object",
                    "additionalProperties": {"type": "string", "format": "uint64"},
                },
                "metadata": {"type": "object", "additionalProperties": {"type": "any"}},
                "spec": {
                    "type": "object",
                    "properties": {
                        "updateTime": {"type": "string", "format": "google-datetime"},
                        "label": {"type": "string"},
                    },
                },
                "style": {"type": "object", "properties": {"color": {"type": "string"}}},
            },
        },
        "Part": {
            "id": "Part",
            "type": "object",
            "properties": {"size": {"type": "string", "format": "int64"}},
        },
        "Empty": {"id": "Empty", "type": "object", "properties": {}},
    },
}


class TestRegistryFromDiscovery:
    """Tests for registry_from_discovery."""

    @pytest.fixture
    def registry(self):
        return registry_from_discovery(DISCOVERY_DOC)

    def test_api_identity(self, registry):
        """Test name and version come from the document."""
        assert registry.api == "widgets"
        assert registry.version == "v1"

    def test_coercible_fields_only(self, registry):
        """Test plain properties are left out of the schema."""
        fields = registry.get("Widget").fields
        assert set(fields) == {
            "id", "payload", "createTime", "ttl", "parts", "counters", "metadata", "spec",
        }

    def test_format_mapping(self, registry):
        """Test formats map onto field kinds."""
        fields = registry.get("Widget").fields
        assert fields["id"].kind is FieldKind.INT64
        assert fields["payload"].kind is FieldKind.BYTES
        assert fields["createTime"].kind is FieldKind.TIMESTAMP
        assert fields["ttl"].kind is FieldKind.DURATION

    def test_containers(self, registry):
        """Test arrays, maps and refs become repeated, map and message fields."""
        fields = registry.get("Widget").fields
        assert fields["parts"].kind is FieldKind.MESSAGE
        assert fields["parts"].ref == "Part"
        assert fields["parts"].repeated
        assert fields["counters"].kind is FieldKind.UINT64
        assert fields["counters"].map
        assert fields["metadata"].kind is FieldKind.JSON
        assert fields["metadata"].map

    def test_inline_objects(self, registry):
        """Test inline objects with coercible fields get their own schema."""
        assert registry.get("Widget").fields["spec"].ref == "Widget.spec"
        assert "updateTime" in registry.get("Widget.spec").fields
        assert "Widget.style" not in registry

    def test_empty_schema_registered(self, registry):
        """Test schemas without coercible fields still exist."""
        assert registry.get("Empty").fields == {}

    def test_drives_conversion(self, registry):
        """Test the generated registry converts records."""
        widget = to_native(registry.get("Widget"), {
            "id": "42",
            "parts": [{"size": "7"}],
            "spec": {"updateTime": "2024-01-15T10:30:00Z", "label": "x"},
            "counters": {"hits": "3"},
        })
        assert widget["id"] == 42
        assert widget["parts"] == [{"size": 7}]
        assert widget["spec"]["updateTime"] == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert widget["counters"] == {"hits": 3}

    def test_dangling_ref(self):
        """Test an undefined $ref fails validation."""
        doc = {
            "name": "broken",
            "version": "v1",
            "schemas": {"A": {"type": "object", "properties": {"b": {"$ref": "B"}}}},
        }
        with pytest.raises(ValueError, match="A.b -> B"):
            registry_from_discovery(doc)
