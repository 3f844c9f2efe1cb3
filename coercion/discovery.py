"""Build a SchemaRegistry from a Google API Discovery document.

Only properties whose wire form differs from their native form are kept;
see https://developers.google.com/discovery/v1/type-format for the
type/format table this follows.
"""

import logging
from typing import Any, Mapping, Optional

from coercion.registry import SchemaRegistry
from coercion.schema import Field, FieldKind

logger = logging.getLogger(__name__)

FORMAT_KINDS = {
    "byte": FieldKind.BYTES,
    "int64": FieldKind.INT64,
    "uint64": FieldKind.UINT64,
    "google-datetime": FieldKind.TIMESTAMP,
    "google-duration": FieldKind.DURATION,
    "google-fieldmask": FieldKind.FIELD_MASK,
}


def registry_from_discovery(doc: Mapping[str, Any]) -> SchemaRegistry:
    """Create a registry from a parsed Discovery document.

    Inline object properties that carry coercible fields are registered as
    their own schemas named '<Parent>.<property>'.

    Args:
        doc: The Discovery REST description (already parsed from JSON).

    Returns:
        A validated SchemaRegistry.

    Raises:
        ValueError: If the document references an undefined schema.
    """
    registry = SchemaRegistry(doc.get("name", "unknown"), doc.get("version", ""))
    pending: dict[str, dict[str, Field]] = {}

    for name, schema_doc in doc.get("schemas", {}).items():
        _collect(name, schema_doc, pending)

    for name, fields in pending.items():
        registry.define(name, fields)

    registry.validate()
    logger.info(f"Loaded {len(registry)} schemas from discovery document {registry.api} {registry.version}")
    return registry


def _collect(name: str, schema_doc: Mapping[str, Any], pending: dict[str, dict[str, Field]]) -> None:
    fields: dict[str, Field] = {}
    for prop_name, prop in schema_doc.get("properties", {}).items():
        field = _field_for(f"{name}.{prop_name}", prop, pending)
        if field is not None:
            fields[prop_name] = field
    pending[name] = fields


def _field_for(
    qualified: str,
    prop: Mapping[str, Any],
    pending: dict[str, dict[str, Field]],
    repeated: bool = False,
    is_map: bool = False,
) -> Optional[Field]:
    if "$ref" in prop:
        return Field(FieldKind.MESSAGE, repeated=repeated, map=is_map, ref=prop["$ref"])

    prop_type = prop.get("type")
    nested = repeated or is_map

    if prop_type == "array":
        if nested:
            logger.debug(f"Nested container at {qualified} left uncoerced")
            return None
        return _field_for(qualified, prop.get("items", {}), pending, repeated=True)

    if prop_type == "object":
        if "additionalProperties" in prop:
            if nested:
                logger.debug(f"Nested container at {qualified} left uncoerced")
                return None
            return _field_for(qualified, prop["additionalProperties"], pending, is_map=True)
        if "properties" in prop:
            _collect(qualified, prop, pending)
            if not pending[qualified]:
                del pending[qualified]
                return None
            return Field(FieldKind.MESSAGE, repeated=repeated, map=is_map, ref=qualified)
        return Field(FieldKind.JSON, repeated=repeated, map=is_map)

    if prop_type == "any":
        return Field(FieldKind.JSON, repeated=repeated, map=is_map)

    if prop_type == "string":
        kind = FORMAT_KINDS.get(prop.get("format", ""))
        if kind is not None:
            if kind is FieldKind.FIELD_MASK and nested:
                return None
            return Field(kind, repeated=repeated, map=is_map)
    return None
