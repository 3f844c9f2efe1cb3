"""Schemas and record shapes for the Area120 Tables API (v1alpha1).

API Reference:
    https://developers.google.com/workspace/tables/reference/rest
"""

from datetime import datetime
from typing import Any, Literal, TypedDict

from coercion import SchemaRegistry, field_mask, message, timestamp

RowView = Literal["VIEW_UNSPECIFIED", "COLUMN_ID_VIEW"]

SCHEMAS = SchemaRegistry("area120tables", "v1alpha1")

SCHEMAS.define("Row", {
    "createTime": timestamp(),
    "updateTime": timestamp(),
})
SCHEMAS.define("Table", {
    "createTime": timestamp(),
    "updateTime": timestamp(),
})
SCHEMAS.define("Workspace", {
    "createTime": timestamp(),
    "updateTime": timestamp(),
    "tables": message("Table", repeated=True),
})
SCHEMAS.define("CreateRowRequest", {"row": message("Row")})
SCHEMAS.define("UpdateRowRequest", {
    "row": message("Row"),
    "updateMask": field_mask(),
})
SCHEMAS.define("BatchCreateRowsRequest", {"requests": message("CreateRowRequest", repeated=True)})
SCHEMAS.define("BatchCreateRowsResponse", {"rows": message("Row", repeated=True)})
SCHEMAS.define("BatchUpdateRowsRequest", {"requests": message("UpdateRowRequest", repeated=True)})
SCHEMAS.define("BatchUpdateRowsResponse", {"rows": message("Row", repeated=True)})
SCHEMAS.define("BatchDeleteRowsRequest")
SCHEMAS.define("ListRowsResponse", {"rows": message("Row", repeated=True)})
SCHEMAS.define("ListTablesResponse", {"tables": message("Table", repeated=True)})
SCHEMAS.define("ListWorkspacesResponse", {"workspaces": message("Workspace", repeated=True)})
SCHEMAS.define("RowsPatchParams", {"updateMask": field_mask()})


class LabeledItem(TypedDict, total=False):
    id: str
    name: str


class ColumnDescription(TypedDict, total=False):
    """A column of a table.

    Attributes:
        dataType: Column type, e.g. 'text', 'number', 'date', 'relationship'.
        id: Internal id of the column.
        name: Column display name.
        labels: Allowed values for drop-down and tags columns.
        multipleValuesDisallowed: Whether the column holds a single value.
        readonly: Whether the column is read-only.
    """

    dataType: str
    dateDetails: dict[str, bool]
    id: str
    labels: list[LabeledItem]
    lookupDetails: dict[str, str]
    multipleValuesDisallowed: bool
    name: str
    readonly: bool
    relationshipDetails: dict[str, str]


class Row(TypedDict, total=False):
    """A row of a table, with native timestamps.

    Attributes:
        name: Resource name ('tables/{table}/rows/{row}').
        values: Column name (or id, for COLUMN_ID_VIEW) to cell value.
        createTime: Creation time.
        updateTime: Last update time.
    """

    name: str
    values: dict[str, Any]
    createTime: datetime
    updateTime: datetime


class Table(TypedDict, total=False):
    name: str
    displayName: str
    columns: list[ColumnDescription]
    savedViews: list[dict[str, str]]
    timeZone: str
    createTime: datetime
    updateTime: datetime


class Workspace(TypedDict, total=False):
    name: str
    displayName: str
    tables: list[Table]
    createTime: datetime
    updateTime: datetime


class ListRowsResponse(TypedDict, total=False):
    rows: list[Row]
    nextPageToken: str
