"""Client for the Connectors API (entities, actions and SQL queries)."""

import logging
from typing import AsyncIterator, Optional

from apis.base import BaseGoogleApiClient
from apis.connectors.schemas import SCHEMAS, Entity, ExecuteActionResponse, ExecuteSqlQueryResponse
from coercion import JsonValue

logger = logging.getLogger(__name__)


class ConnectorsClient(BaseGoogleApiClient):
    """Client for the data plane of an Integration Connectors connection.

    Resource names follow
    'projects/{p}/locations/{l}/connections/{c}/entityTypes/{t}/entities/{e}'.

    Example:
        >>> client = ConnectorsClient(credentials_path="/path/to/credentials.json")
        >>> entity = await client.create_entity(entity_type, {"fields": {"Name": "Acme"}})
    """

    API_NAME = "connectors"
    API_VERSION = "v2"
    DEFAULT_BASE_URL = "https://connectors.googleapis.com/"
    SCHEMAS = SCHEMAS

    async def execute_action(
        self,
        name: str,
        parameters: Optional[dict[str, JsonValue]] = None,
    ) -> ExecuteActionResponse:
        """Run an action ('.../connections/{c}/actions/{a}') with parameters."""
        return await self._request(
            "POST",
            f"v2/{self._path(name)}:execute",
            body={"parameters": parameters or {}},
            request_schema="ExecuteActionRequest",
            response_schema="ExecuteActionResponse",
        )

    async def list_actions(
        self,
        parent: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"v2/{self._path(parent)}/actions",
            params={"pageSize": page_size, "pageToken": page_token},
            response_schema="ListActionsResponse",
        )

    async def list_entity_types(
        self,
        parent: str,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"v2/{self._path(parent)}/entityTypes",
            params={"pageSize": page_size, "pageToken": page_token},
            response_schema="ListEntityTypesResponse",
        )

    async def get_entity(self, name: str) -> Entity:
        return await self._request("GET", f"v2/{self._path(name)}", response_schema="Entity")

    async def list_entities(
        self,
        parent: str,
        conditions: Optional[str] = None,
        sort_by: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        """List one page of entities of an entity type."""
        return await self._request(
            "GET",
            f"v2/{self._path(parent)}/entities",
            params={
                "conditions": conditions,
                "sortBy": sort_by,
                "pageSize": page_size,
                "pageToken": page_token,
            },
            response_schema="ListEntitiesResponse",
        )

    async def iter_entities(
        self,
        parent: str,
        conditions: Optional[str] = None,
        sort_by: Optional[str] = None,
    ) -> AsyncIterator[Entity]:
        """Iterate over the entities of an entity type.

        Args:
            parent: Entity type resource name.
            conditions: SQL-like WHERE clause, e.g. "Status = 'Open'".
            sort_by: Field to sort by.
        """
        async for entity in self._paginate(
            f"v2/{self._path(parent)}/entities",
            "entities",
            params={"conditions": conditions, "sortBy": sort_by},
            response_schema="ListEntitiesResponse",
        ):
            yield entity

    async def create_entity(self, parent: str, entity: Entity) -> Entity:
        return await self._request(
            "POST",
            f"v2/{self._path(parent)}/entities",
            body=entity,
            request_schema="Entity",
            response_schema="Entity",
        )

    async def update_entity(self, name: str, entity: Entity) -> Entity:
        return await self._request(
            "PATCH",
            f"v2/{self._path(name)}",
            body=entity,
            request_schema="Entity",
            response_schema="Entity",
        )

    async def delete_entity(self, name: str) -> dict:
        return await self._request("DELETE", f"v2/{self._path(name)}")

    async def delete_entities_with_conditions(self, entity_type: str, conditions: str) -> dict:
        """Delete every entity of a type matching conditions."""
        logger.info(f"Deleting entities of {entity_type} where {conditions}")
        return await self._request(
            "POST",
            f"v2/{self._path(entity_type)}/entities:deleteEntitiesWithConditions",
            params={"conditions": conditions},
        )

    async def update_entities_with_conditions(
        self,
        entity_type: str,
        entity: Entity,
        conditions: str,
    ) -> dict:
        """Apply the fields of entity to every entity matching conditions."""
        return await self._request(
            "POST",
            f"v2/{self._path(entity_type)}/entities:updateEntitiesWithConditions",
            params={"conditions": conditions},
            body=entity,
            request_schema="Entity",
            response_schema="UpdateEntitiesWithConditionsResponse",
        )

    async def execute_sql_query(self, connection: str, query: str) -> ExecuteSqlQueryResponse:
        """Run a native SQL query against the connection's backend."""
        return await self._request(
            "POST",
            f"v2/{self._path(connection)}:executeSqlQuery",
            body={"query": {"query": query}},
            request_schema="ExecuteSqlQueryRequest",
            response_schema="ExecuteSqlQueryResponse",
        )
