"""Client for the Retail API (catalog products and user events)."""

import logging
from typing import AsyncIterator, Optional

from googleapiclient.errors import HttpError

from apis.base import BaseGoogleApiClient
from apis.retail.schemas import SCHEMAS, Product, UserEvent

logger = logging.getLogger(__name__)


class RetailClient(BaseGoogleApiClient):
    """Client for Retail catalog products and user events.

    Example:
        >>> client = RetailClient(credentials_path="/path/to/credentials.json")
        >>> branch = "projects/p/locations/global/catalogs/default_catalog/branches/default_branch"
        >>> async for product in client.iter_products(branch):
        ...     print(product["id"], product.get("publishTime"))
    """

    API_NAME = "retail"
    API_VERSION = "v2"
    DEFAULT_BASE_URL = "https://retail.googleapis.com/"
    SCHEMAS = SCHEMAS

    async def get_product(self, name: str) -> Optional[Product]:
        """Get a product by full resource name.

        Returns:
            The product, or None if it does not exist.

        Raises:
            HttpError: If the API request fails (except 404).
        """
        try:
            return await self._request("GET", f"v2/{self._path(name)}", response_schema="Product")
        except HttpError as ex:
            if ex.resp.status == 404:
                logger.debug(f"Product {name} not found")
                return None
            raise

    async def list_products(
        self,
        parent: str,
        filter_query: Optional[str] = None,
        read_mask: Optional[str] = None,
        page_size: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        """List one page of products of a branch."""
        return await self._request(
            "GET",
            f"v2/{self._path(parent)}/products",
            params={
                "filter": filter_query,
                "readMask": read_mask,
                "pageSize": page_size,
                "pageToken": page_token,
            },
            params_schema="ProductsListParams",
            response_schema="ListProductsResponse",
        )

    async def iter_products(
        self,
        parent: str,
        filter_query: Optional[str] = None,
        read_mask: Optional[str] = None,
    ) -> AsyncIterator[Product]:
        """Iterate over the products of a branch."""
        async for product in self._paginate(
            f"v2/{self._path(parent)}/products",
            "products",
            params={"filter": filter_query, "readMask": read_mask},
            params_schema="ProductsListParams",
            response_schema="ListProductsResponse",
        ):
            yield product

    async def create_product(self, parent: str, product_id: str, product: Product) -> Product:
        return await self._request(
            "POST",
            f"v2/{self._path(parent)}/products",
            params={"productId": product_id},
            body=product,
            request_schema="Product",
            response_schema="Product",
        )

    async def update_product(
        self,
        name: str,
        product: Product,
        update_mask: Optional[str] = None,
        allow_missing: Optional[bool] = None,
    ) -> Product:
        """Patch a product; with allow_missing a missing product is created."""
        return await self._request(
            "PATCH",
            f"v2/{self._path(name)}",
            params={"updateMask": update_mask, "allowMissing": allow_missing},
            params_schema="ProductsPatchParams",
            body=product,
            request_schema="Product",
            response_schema="Product",
        )

    async def delete_product(self, name: str) -> dict:
        return await self._request("DELETE", f"v2/{self._path(name)}")

    async def write_user_event(self, parent: str, event: UserEvent) -> UserEvent:
        """Record a user event against a catalog ('.../catalogs/{c}')."""
        return await self._request(
            "POST",
            f"v2/{self._path(parent)}/userEvents:write",
            body=event,
            request_schema="UserEvent",
            response_schema="UserEvent",
        )
