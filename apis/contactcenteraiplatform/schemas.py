"""Schemas and record shapes for the Contact Center AI Platform API (v1alpha1).

API Reference:
    https://cloud.google.com/contact-center/ccai-platform/docs/reference/rest
"""

from datetime import datetime
from typing import Literal, TypedDict

from coercion import JsonValue, SchemaRegistry, field_mask, json_value, message, timestamp

ContactCenterState = Literal[
    "STATE_UNSPECIFIED",
    "STATE_DEPLOYING",
    "STATE_DEPLOYED",
    "STATE_TERMINATING",
    "STATE_FAILED",
    "STATE_TERMINATING_FAILED",
    "STATE_TERMINATED",
]

InstanceSize = Literal[
    "INSTANCE_SIZE_UNSPECIFIED",
    "STANDARD_SMALL",
    "STANDARD_MEDIUM",
    "STANDARD_LARGE",
    "STANDARD_XLARGE",
    "STANDARD_2XLARGE",
    "STANDARD_3XLARGE",
]

SCHEMAS = SchemaRegistry("contactcenteraiplatform", "v1alpha1")

SCHEMAS.define("ContactCenter", {
    "createTime": timestamp(),
    "updateTime": timestamp(),
})
SCHEMAS.define("ListContactCentersResponse", {
    "contactCenters": message("ContactCenter", repeated=True),
})
SCHEMAS.define("ContactCenterQuota")
SCHEMAS.define("Status", {"details": json_value(repeated=True)})
SCHEMAS.define("Operation", {
    "error": message("Status"),
    "metadata": json_value(map=True),
    "response": json_value(map=True),
})
SCHEMAS.define("ListOperationsResponse", {"operations": message("Operation", repeated=True)})
SCHEMAS.define("Location", {"metadata": json_value(map=True)})
SCHEMAS.define("ListLocationsResponse", {"locations": message("Location", repeated=True)})
SCHEMAS.define("CancelOperationRequest")
SCHEMAS.define("ContactCentersPatchParams", {"updateMask": field_mask()})


class ContactCenter(TypedDict, total=False):
    """A CCAI Platform contact center instance.

    Attributes:
        name: 'projects/{p}/locations/{l}/contactCenters/{c}'.
        displayName: Human readable name.
        customerDomainPrefix: Subdomain of the instance URL.
        state: Deployment state, output only.
        createTime: Creation time, output only.
        updateTime: Last update time, output only.
        uris: Instance URLs, output only.
    """

    name: str
    displayName: str
    customerDomainPrefix: str
    userEmail: str
    adminUser: dict[str, str]
    ccaipManagedUsers: bool
    instanceConfig: dict[str, InstanceSize]
    samlParams: dict[str, str]
    labels: dict[str, str]
    state: ContactCenterState
    createTime: datetime
    updateTime: datetime
    uris: dict[str, str]


class Status(TypedDict, total=False):
    code: int
    message: str
    details: list[dict[str, JsonValue]]


class Operation(TypedDict, total=False):
    """Long-running operation; metadata and response are opaque JSON."""

    name: str
    done: bool
    error: Status
    metadata: dict[str, JsonValue]
    response: dict[str, JsonValue]
