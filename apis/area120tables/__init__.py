"""Area120 Tables API client."""

from apis.area120tables.client import Area120TablesClient
from apis.area120tables.schemas import SCHEMAS, ColumnDescription, Row, RowView, Table, Workspace

__all__ = [
    "Area120TablesClient",
    "SCHEMAS",
    "ColumnDescription",
    "Row",
    "RowView",
    "Table",
    "Workspace",
]
