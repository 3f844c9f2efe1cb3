"""Typed async clients for Google REST APIs.

Each API lives in its own subpackage with a client and the schema
registry that drives wire/native conversion of its records.

Example:
    >>> from apis import get_registry
    >>> from coercion import to_native
    >>> row = to_native(get_registry("area120tables").get("Row"), wire_row)
"""

from apis.area120tables import Area120TablesClient
from apis.area120tables.schemas import SCHEMAS as AREA120TABLES_SCHEMAS
from apis.base import BaseGoogleApiClient
from apis.cloudprofiler import CloudProfilerClient
from apis.cloudprofiler.schemas import SCHEMAS as CLOUDPROFILER_SCHEMAS
from apis.connectors import ConnectorsClient
from apis.connectors.schemas import SCHEMAS as CONNECTORS_SCHEMAS
from apis.contactcenteraiplatform import ContactCenterAIPlatformClient
from apis.contactcenteraiplatform.schemas import SCHEMAS as CONTACTCENTERAIPLATFORM_SCHEMAS
from apis.deploymentmanager import DeploymentManagerClient
from apis.deploymentmanager.schemas import SCHEMAS as DEPLOYMENTMANAGER_SCHEMAS
from apis.oauth2 import OAuth2Client
from apis.oauth2.schemas import SCHEMAS as OAUTH2_SCHEMAS
from apis.retail import RetailClient
from apis.retail.schemas import SCHEMAS as RETAIL_SCHEMAS
from coercion.registry import SchemaRegistry

REGISTRIES: dict[str, SchemaRegistry] = {
    registry.api: registry
    for registry in (
        AREA120TABLES_SCHEMAS,
        CLOUDPROFILER_SCHEMAS,
        CONNECTORS_SCHEMAS,
        CONTACTCENTERAIPLATFORM_SCHEMAS,
        DEPLOYMENTMANAGER_SCHEMAS,
        OAUTH2_SCHEMAS,
        RETAIL_SCHEMAS,
    )
}

CLIENTS: dict[str, type[BaseGoogleApiClient]] = {
    client.API_NAME: client
    for client in (
        Area120TablesClient,
        CloudProfilerClient,
        ConnectorsClient,
        ContactCenterAIPlatformClient,
        DeploymentManagerClient,
        OAuth2Client,
        RetailClient,
    )
}


def get_registry(api: str) -> SchemaRegistry:
    """Return the schema registry of an API by name (e.g. 'retail').

    Raises:
        KeyError: If the API is unknown.
    """
    try:
        return REGISTRIES[api]
    except KeyError:
        known = ", ".join(sorted(REGISTRIES))
        raise KeyError(f"Unknown API {api!r}; known APIs: {known}") from None


__all__ = [
    "BaseGoogleApiClient",
    "Area120TablesClient",
    "CloudProfilerClient",
    "ConnectorsClient",
    "ContactCenterAIPlatformClient",
    "DeploymentManagerClient",
    "OAuth2Client",
    "RetailClient",
    "REGISTRIES",
    "CLIENTS",
    "get_registry",
]
