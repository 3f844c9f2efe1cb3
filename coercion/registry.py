"""Per-API catalog of schemas."""

import logging
from typing import Iterator, Mapping, Optional

from coercion.schema import Field, FieldKind, Schema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Immutable-after-load catalog of the schemas of one API.

    Schemas reference each other by name, so definition order does not
    matter and recursive shapes are allowed. Reads are safe from any
    number of threads once the defining module has been imported.

    Example:
        >>> registry = SchemaRegistry("area120tables", "v1alpha1")
        >>> registry.define("Row", {"createTime": timestamp()})
        >>> registry.define("ListRowsResponse", {"rows": message("Row", repeated=True)})
    """

    def __init__(self, api: str, version: str = "") -> None:
        self.api = api
        self.version = version
        self._schemas: dict[str, Schema] = {}

    def define(self, name: str, fields: Optional[Mapping[str, Field]] = None) -> Schema:
        """Register a schema.

        Args:
            name: Schema name as it appears in the API (e.g. 'Deployment').
            fields: Wire field name to Field descriptor.

        Returns:
            The bound Schema.

        Raises:
            ValueError: If a schema with this name is already defined.
        """
        if name in self._schemas:
            raise ValueError(f"Schema {name} already defined for {self.api}")
        schema = Schema(name=name, fields=dict(fields or {}), registry=self)
        self._schemas[name] = schema
        return schema

    def get(self, name: str) -> Schema:
        try:
            return self._schemas[name]
        except KeyError:
            raise KeyError(f"Unknown schema {name!r} for API {self.api}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

    def names(self) -> list[str]:
        return sorted(self._schemas)

    def validate(self) -> None:
        """Check that every MESSAGE reference resolves.

        Raises:
            ValueError: Listing every dangling reference.
        """
        missing = [
            f"{schema.name}.{field_name} -> {field.ref}"
            for schema in self
            for field_name, field in schema.fields.items()
            if field.kind is FieldKind.MESSAGE and field.ref not in self._schemas
        ]
        if missing:
            raise ValueError(f"Unresolved schema references in {self.api}: {', '.join(missing)}")
        logger.debug(f"Registry {self.api} {self.version}: {len(self)} schemas validated")
