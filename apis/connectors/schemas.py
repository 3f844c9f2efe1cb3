"""Schemas and record shapes for the Connectors API (v2).

Entity fields and action parameters are free-form JSON whose shape
depends on the connected system; they are carried through untouched.

API Reference:
    https://cloud.google.com/integration-connectors/docs/reference/rest
"""

from typing import Any, TypedDict

from coercion import JsonValue, SchemaRegistry, json_value, message

SCHEMAS = SchemaRegistry("connectors", "v2")

SCHEMAS.define("Entity", {"fields": json_value(map=True)})
SCHEMAS.define("ListEntitiesResponse", {"entities": message("Entity", repeated=True)})
SCHEMAS.define("UpdateEntitiesWithConditionsResponse", {"response": json_value(map=True)})
SCHEMAS.define("ExecuteActionRequest", {"parameters": json_value(map=True)})
SCHEMAS.define("ExecuteActionResponse", {"results": json_value(repeated=True)})
SCHEMAS.define("ExecuteSqlQueryRequest")
SCHEMAS.define("ExecuteSqlQueryResponse", {"results": json_value(repeated=True)})
SCHEMAS.define("ListActionsResponse")
SCHEMAS.define("ListEntityTypesResponse")


class Entity(TypedDict, total=False):
    """A row/record of an entity type in the connected system.

    Attributes:
        name: Resource name, output only.
        fields: Field name to value, as the backend reports it.
    """

    name: str
    fields: dict[str, JsonValue]


class ExecuteActionResponse(TypedDict, total=False):
    results: list[dict[str, Any]]


class ExecuteSqlQueryResponse(TypedDict, total=False):
    results: list[dict[str, Any]]
