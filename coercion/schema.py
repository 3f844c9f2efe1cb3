"""Field descriptors and schemas driving the wire/native traversal.

A schema lists only the fields whose wire form differs from their native
form (or that nest another schema). Every other field of a record passes
through untouched, so a schema never needs to be exhaustive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

if TYPE_CHECKING:
    from coercion.registry import SchemaRegistry

# Opaque JSON payloads (Struct-like maps, Operation.response, ...)
JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


class FieldKind(str, Enum):
    """How a field is represented on the wire."""

    PLAIN = "plain"
    BYTES = "bytes"
    INT64 = "int64"
    UINT64 = "uint64"
    TIMESTAMP = "timestamp"
    DURATION = "duration"
    FIELD_MASK = "field_mask"
    JSON = "json"
    MESSAGE = "message"


@dataclass(frozen=True)
class Field:
    """Coercion descriptor for one field of a schema.

    Attributes:
        kind: Wire kind of the field (or of each element/value).
        repeated: The field is a JSON array of `kind`.
        map: The field is a JSON object whose values are `kind`.
        ref: Schema name for MESSAGE fields.
    """

    kind: FieldKind
    repeated: bool = False
    map: bool = False
    ref: Optional[str] = None

    def __post_init__(self) -> None:
        if self.repeated and self.map:
            raise ValueError("a field cannot be both repeated and a map")
        if (self.kind is FieldKind.MESSAGE) != (self.ref is not None):
            raise ValueError("ref is required for MESSAGE fields and only for them")


@dataclass(frozen=True)
class Schema:
    """A named record shape bound to the registry that defines it."""

    name: str
    fields: Mapping[str, Field]
    registry: Optional[SchemaRegistry] = field(default=None, repr=False, compare=False)

    def resolve(self, ref: str) -> Schema:
        """Look up a nested schema by name in the owning registry."""
        if self.registry is None:
            raise KeyError(f"Schema {self.name} is not bound to a registry; cannot resolve {ref}")
        return self.registry.get(ref)


def byte(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.BYTES, repeated=repeated, map=map)


def int64(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.INT64, repeated=repeated, map=map)


def uint64(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.UINT64, repeated=repeated, map=map)


def timestamp(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.TIMESTAMP, repeated=repeated, map=map)


def duration(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.DURATION, repeated=repeated, map=map)


def field_mask() -> Field:
    return Field(FieldKind.FIELD_MASK)


def json_value(*, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.JSON, repeated=repeated, map=map)


def message(ref: str, *, repeated: bool = False, map: bool = False) -> Field:
    return Field(FieldKind.MESSAGE, repeated=repeated, map=map, ref=ref)
