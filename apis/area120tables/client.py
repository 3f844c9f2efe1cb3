"""Client for the Area120 Tables API.

This module provides the Area120TablesClient class for reading and
editing tables, rows and workspaces.
"""

import logging
from typing import AsyncIterator, Optional

from googleapiclient.errors import HttpError

from apis.area120tables.schemas import SCHEMAS, ListRowsResponse, Row, RowView, Table, Workspace
from apis.base import BaseGoogleApiClient

logger = logging.getLogger(__name__)

TABLES_SCOPE = "https://www.googleapis.com/auth/tables"


class Area120TablesClient(BaseGoogleApiClient):
    """Client for the Area120 Tables API.

    Example:
        >>> client = Area120TablesClient(credentials_path="/path/to/credentials.json")
        >>> async for row in client.iter_rows("tables/abc"):
        ...     print(row["name"], row["updateTime"])

    API Reference:
        https://developers.google.com/workspace/tables/reference/rest
    """

    API_NAME = "area120tables"
    API_VERSION = "v1alpha1"
    DEFAULT_BASE_URL = "https://area120tables.googleapis.com/"
    SCOPES = [TABLES_SCOPE]
    SCHEMAS = SCHEMAS

    async def get_table(self, name: str) -> Table:
        """Get a table by resource name ('tables/{table}')."""
        return await self._request("GET", f"v1alpha1/{self._path(name)}", response_schema="Table")

    async def list_tables(
        self,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> dict:
        """List one page of tables the caller can access."""
        return await self._request(
            "GET",
            "v1alpha1/tables",
            params={"pageSize": page_size, "pageToken": page_token, "orderBy": order_by},
            response_schema="ListTablesResponse",
        )

    async def iter_tables(self, order_by: Optional[str] = None) -> AsyncIterator[Table]:
        """Iterate over every table, following pagination."""
        async for table in self._paginate(
            "v1alpha1/tables",
            "tables",
            params={"orderBy": order_by},
            response_schema="ListTablesResponse",
        ):
            yield table

    async def get_row(self, name: str, view: Optional[RowView] = None) -> Optional[Row]:
        """Get a row by resource name.

        Args:
            name: 'tables/{table}/rows/{row}'.
            view: Column key format of the returned values.

        Returns:
            The row, or None if it does not exist.

        Raises:
            HttpError: If the API request fails (except 404).
        """
        try:
            return await self._request(
                "GET",
                f"v1alpha1/{self._path(name)}",
                params={"view": view},
                response_schema="Row",
            )
        except HttpError as ex:
            if ex.resp.status == 404:
                logger.debug(f"Row {name} not found")
                return None
            raise

    async def list_rows(
        self,
        parent: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
        view: Optional[RowView] = None,
    ) -> ListRowsResponse:
        """List one page of rows of a table.

        Args:
            parent: Table resource name ('tables/{table}').
            page_size: Maximum rows to return (server caps at 1000).
            page_token: Token from a previous call's nextPageToken.
            filter_query: Row filter, e.g. 'values."Status" = "Done"'.
            order_by: Sort order, e.g. 'values."Due date" desc'.
            view: Column key format of the returned values.
        """
        return await self._request(
            "GET",
            f"v1alpha1/{self._path(parent)}/rows",
            params={
                "pageSize": page_size,
                "pageToken": page_token,
                "filter": filter_query,
                "orderBy": order_by,
                "view": view,
            },
            response_schema="ListRowsResponse",
        )

    async def iter_rows(
        self,
        parent: str,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
        view: Optional[RowView] = None,
    ) -> AsyncIterator[Row]:
        """Iterate over every row of a table, following pagination."""
        async for row in self._paginate(
            f"v1alpha1/{self._path(parent)}/rows",
            "rows",
            params={"filter": filter_query, "orderBy": order_by, "view": view},
            response_schema="ListRowsResponse",
        ):
            yield row

    async def list_all_rows(self, parent: str, **kwargs) -> list[Row]:
        """Fetch all rows of a table as a list."""
        rows: list[Row] = []
        async for row in self.iter_rows(parent, **kwargs):
            rows.append(row)
        logger.info(f"Fetched {len(rows)} rows from {parent}")
        return rows

    async def create_row(self, parent: str, row: Row, view: Optional[RowView] = None) -> Row:
        """Create a row in a table."""
        return await self._request(
            "POST",
            f"v1alpha1/{self._path(parent)}/rows",
            params={"view": view},
            body=row,
            request_schema="Row",
            response_schema="Row",
        )

    async def update_row(
        self,
        name: str,
        row: Row,
        update_mask: Optional[str] = None,
        view: Optional[RowView] = None,
    ) -> Row:
        """Patch a row; update_mask limits which columns are written."""
        return await self._request(
            "PATCH",
            f"v1alpha1/{self._path(name)}",
            params={"updateMask": update_mask, "view": view},
            params_schema="RowsPatchParams",
            body=row,
            request_schema="Row",
            response_schema="Row",
        )

    async def delete_row(self, name: str) -> dict:
        return await self._request("DELETE", f"v1alpha1/{self._path(name)}")

    async def batch_create_rows(self, parent: str, requests: list[dict]) -> list[Row]:
        """Create several rows in one call.

        Args:
            parent: Table resource name.
            requests: CreateRowRequest records ({'row': Row, 'view': ...}).

        Returns:
            The created rows.
        """
        response = await self._request(
            "POST",
            f"v1alpha1/{self._path(parent)}/rows:batchCreate",
            body={"requests": requests},
            request_schema="BatchCreateRowsRequest",
            response_schema="BatchCreateRowsResponse",
        )
        return response.get("rows", [])

    async def batch_update_rows(self, parent: str, requests: list[dict]) -> list[Row]:
        """Update several rows in one call (UpdateRowRequest records)."""
        response = await self._request(
            "POST",
            f"v1alpha1/{self._path(parent)}/rows:batchUpdate",
            body={"requests": requests},
            request_schema="BatchUpdateRowsRequest",
            response_schema="BatchUpdateRowsResponse",
        )
        return response.get("rows", [])

    async def batch_delete_rows(self, parent: str, names: list[str]) -> dict:
        """Delete several rows of one table by resource name."""
        return await self._request(
            "POST",
            f"v1alpha1/{self._path(parent)}/rows:batchDelete",
            body={"names": names},
            request_schema="BatchDeleteRowsRequest",
        )

    async def get_workspace(self, name: str) -> Workspace:
        return await self._request(
            "GET", f"v1alpha1/{self._path(name)}", response_schema="Workspace"
        )

    async def list_workspaces(
        self,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            "v1alpha1/workspaces",
            params={"pageSize": page_size, "pageToken": page_token},
            response_schema="ListWorkspacesResponse",
        )
