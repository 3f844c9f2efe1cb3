"""Table-driven conversion of API records between wire and native form.

Example:
    >>> from coercion import SchemaRegistry, message, timestamp, to_native
    >>> registry = SchemaRegistry("area120tables", "v1alpha1")
    >>> row = registry.define("Row", {"createTime": timestamp()})
    >>> to_native(row, {"name": "tables/t/rows/r", "createTime": "2024-01-15T10:30:00.500Z"})
    {'name': 'tables/t/rows/r', 'createTime': datetime.datetime(2024, 1, 15, 10, 30, 0, 500000, tzinfo=datetime.timezone.utc)}
"""

from coercion.discovery import registry_from_discovery
from coercion.registry import SchemaRegistry
from coercion.schema import (
    Field,
    FieldKind,
    JsonValue,
    Schema,
    byte,
    duration,
    field_mask,
    int64,
    json_value,
    message,
    timestamp,
    uint64,
)
from coercion.walker import coerce_params, to_native, to_wire

__all__ = [
    "Field",
    "FieldKind",
    "JsonValue",
    "Schema",
    "SchemaRegistry",
    "byte",
    "duration",
    "field_mask",
    "int64",
    "json_value",
    "message",
    "timestamp",
    "uint64",
    "to_wire",
    "to_native",
    "coerce_params",
    "registry_from_discovery",
]
