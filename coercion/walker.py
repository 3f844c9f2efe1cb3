"""Generic wire/native traversal over schema-described records.

One traversal replaces the per-type serialize/deserialize pairs a code
generator would emit: the schema says which fields need converting and
everything else is copied through unchanged.
"""

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Mapping, Optional, Union

from codec import b64
from codec.errors import CoercionError, DecodeError, EncodeError
from codec.integers import format_int, parse_int
from codec.timestamps import format_timestamp, parse_timestamp
from coercion.schema import Field, FieldKind, Schema

Record = dict[str, Any]


@dataclass(frozen=True)
class _Direction:
    error: type[CoercionError]
    converters: Mapping[FieldKind, Callable[[Any], Any]]


TO_WIRE = _Direction(
    error=EncodeError,
    converters={
        FieldKind.BYTES: b64.encode,
        FieldKind.INT64: format_int,
        FieldKind.UINT64: partial(format_int, signed=False),
        FieldKind.TIMESTAMP: format_timestamp,
    },
)

TO_NATIVE = _Direction(
    error=DecodeError,
    converters={
        FieldKind.BYTES: b64.decode,
        FieldKind.INT64: parse_int,
        FieldKind.UINT64: partial(parse_int, signed=False),
        FieldKind.TIMESTAMP: parse_timestamp,
    },
)


def to_wire(schema: Schema, value: Union[Record, list[Record]]) -> Union[Record, list[Record]]:
    """Convert a native record (or list of records) to its wire form.

    Raises:
        EncodeError: If a declared field holds a value with no wire form.
    """
    return _coerce_root(schema, value, TO_WIRE)


def to_native(schema: Schema, value: Union[Record, list[Record]]) -> Union[Record, list[Record]]:
    """Convert a wire record (or list of records) to native values.

    Raises:
        DecodeError: If a declared field holds malformed wire data.
    """
    return _coerce_root(schema, value, TO_NATIVE)


def coerce_params(schema: Optional[Schema], params: Mapping[str, Any]) -> dict[str, Any]:
    """Prepare query-string options for a request URL.

    None entries are dropped, declared fields are converted to wire form and
    booleans are rendered the way the APIs expect ('true'/'false').
    """
    present = {key: value for key, value in params.items() if value is not None}
    if schema is not None:
        present = to_wire(schema, present)
    return {key: _query_value(value) for key, value in present.items()}


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_query_value(item) for item in value]
    return value


def _coerce_root(schema: Schema, value: Any, direction: _Direction) -> Any:
    if isinstance(value, list):
        return [
            _coerce_record(schema, item, direction, f"[{index}]")
            for index, item in enumerate(value)
        ]
    return _coerce_record(schema, value, direction, "")


def _coerce_record(schema: Schema, record: Any, direction: _Direction, path: str) -> Record:
    if not isinstance(record, Mapping):
        raise direction.error(f"expected {schema.name} object", record, path or schema.name)

    result = dict(record)
    for name, field in schema.fields.items():
        if name not in record:
            continue
        result[name] = _coerce_field(schema, field, record[name], direction, _join(path, name))
    return result


def _coerce_field(schema: Schema, field: Field, value: Any, direction: _Direction, path: str) -> Any:
    if value is None:
        return None
    if field.repeated:
        if not isinstance(value, (list, tuple)):
            raise direction.error("expected array", value, path)
        return [
            _coerce_single(schema, field, item, direction, f"{path}[{index}]")
            for index, item in enumerate(value)
        ]
    if field.map:
        if not isinstance(value, Mapping):
            raise direction.error("expected object", value, path)
        return {
            key: _coerce_single(schema, field, item, direction, f"{path}.{key}")
            for key, item in value.items()
        }
    return _coerce_single(schema, field, value, direction, path)


def _coerce_single(schema: Schema, field: Field, value: Any, direction: _Direction, path: str) -> Any:
    if value is None:
        return None
    if field.kind is FieldKind.MESSAGE:
        return _coerce_record(schema.resolve(field.ref), value, direction, path)

    converter = direction.converters.get(field.kind)
    if converter is None:
        # PLAIN, DURATION, FIELD_MASK and JSON are carried as-is
        return value
    try:
        return converter(value)
    except CoercionError as ex:
        ex.path = path
        raise


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name
