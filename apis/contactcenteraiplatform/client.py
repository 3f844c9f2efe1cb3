"""Client for the Contact Center AI Platform API."""

import logging
from typing import AsyncIterator, Optional

from apis.base import BaseGoogleApiClient
from apis.contactcenteraiplatform.schemas import SCHEMAS, ContactCenter, Operation

logger = logging.getLogger(__name__)


class ContactCenterAIPlatformClient(BaseGoogleApiClient):
    """Client for managing CCAI Platform contact centers.

    Example:
        >>> client = ContactCenterAIPlatformClient(credentials_path="/path/to/credentials.json")
        >>> op = await client.create_contact_center(
        ...     "projects/p/locations/us-central1",
        ...     "support",
        ...     {"displayName": "Support", "customerDomainPrefix": "acme-support"},
        ... )
    """

    API_NAME = "contactcenteraiplatform"
    API_VERSION = "v1alpha1"
    DEFAULT_BASE_URL = "https://contactcenteraiplatform.googleapis.com/"
    SCHEMAS = SCHEMAS

    async def create_contact_center(
        self,
        parent: str,
        contact_center_id: str,
        contact_center: ContactCenter,
        request_id: Optional[str] = None,
    ) -> Operation:
        """Start creating a contact center; returns the long-running operation."""
        operation = await self._request(
            "POST",
            f"v1alpha1/{self._path(parent)}/contactCenters",
            params={"contactCenterId": contact_center_id, "requestId": request_id},
            body=contact_center,
            request_schema="ContactCenter",
            response_schema="Operation",
        )
        logger.info(f"Contact center creation started: {operation.get('name')}")
        return operation

    async def get_contact_center(self, name: str) -> ContactCenter:
        return await self._request(
            "GET", f"v1alpha1/{self._path(name)}", response_schema="ContactCenter"
        )

    async def list_contact_centers(
        self,
        parent: str,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        """List one page of contact centers of a location."""
        return await self._request(
            "GET",
            f"v1alpha1/{self._path(parent)}/contactCenters",
            params={
                "filter": filter_query,
                "orderBy": order_by,
                "pageSize": page_size,
                "pageToken": page_token,
            },
            response_schema="ListContactCentersResponse",
        )

    async def iter_contact_centers(
        self,
        parent: str,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> AsyncIterator[ContactCenter]:
        """Iterate over the contact centers of a location."""
        async for contact_center in self._paginate(
            f"v1alpha1/{self._path(parent)}/contactCenters",
            "contactCenters",
            params={"filter": filter_query, "orderBy": order_by},
            response_schema="ListContactCentersResponse",
        ):
            yield contact_center

    async def update_contact_center(
        self,
        name: str,
        contact_center: ContactCenter,
        update_mask: Optional[str] = None,
        request_id: Optional[str] = None,
    ) -> Operation:
        return await self._request(
            "PATCH",
            f"v1alpha1/{self._path(name)}",
            params={"updateMask": update_mask, "requestId": request_id},
            params_schema="ContactCentersPatchParams",
            body=contact_center,
            request_schema="ContactCenter",
            response_schema="Operation",
        )

    async def delete_contact_center(self, name: str, request_id: Optional[str] = None) -> Operation:
        return await self._request(
            "DELETE",
            f"v1alpha1/{self._path(name)}",
            params={"requestId": request_id},
            response_schema="Operation",
        )

    async def query_quota(self, parent: str) -> dict:
        """Get contact center quota usage for a project location."""
        return await self._request(
            "GET",
            f"v1alpha1/{self._path(parent)}:queryContactCenterQuota",
            response_schema="ContactCenterQuota",
        )

    async def get_location(self, name: str) -> dict:
        return await self._request("GET", f"v1alpha1/{self._path(name)}", response_schema="Location")

    async def list_locations(
        self,
        name: str,
        filter_query: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"v1alpha1/{self._path(name)}/locations",
            params={"filter": filter_query, "pageSize": page_size, "pageToken": page_token},
            response_schema="ListLocationsResponse",
        )

    async def get_operation(self, name: str) -> Operation:
        return await self._request("GET", f"v1alpha1/{self._path(name)}", response_schema="Operation")

    async def list_operations(
        self,
        name: str,
        filter_query: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"v1alpha1/{self._path(name)}/operations",
            params={"filter": filter_query, "pageSize": page_size, "pageToken": page_token},
            response_schema="ListOperationsResponse",
        )

    async def cancel_operation(self, name: str) -> dict:
        return await self._request(
            "POST",
            f"v1alpha1/{self._path(name)}:cancel",
            body={},
            request_schema="CancelOperationRequest",
        )

    async def delete_operation(self, name: str) -> dict:
        return await self._request("DELETE", f"v1alpha1/{self._path(name)}")
