"""Schemas and record shapes for the Deployment Manager API (v2).

Deployment Manager reports insertTime/updateTime as plain RFC 3339 text
(no google-datetime format), so those stay strings. Resource ids are
uint64 and fingerprints/etags are bytes.

API Reference:
    https://cloud.google.com/deployment-manager/docs/reference/latest
"""

from typing import Literal, TypedDict

from coercion import SchemaRegistry, byte, field_mask, int64, message, uint64

OperationStatus = Literal["PENDING", "RUNNING", "DONE"]
CreatePolicy = Literal["CREATE_OR_ACQUIRE", "ACQUIRE", "CREATE"]
DeletePolicy = Literal["DELETE", "ABANDON"]

SCHEMAS = SchemaRegistry("deploymentmanager", "v2")

SCHEMAS.define("Operation", {
    "id": uint64(),
    "targetId": uint64(),
})
SCHEMAS.define("Deployment", {
    "fingerprint": byte(),
    "id": uint64(),
    "operation": message("Operation"),
})
SCHEMAS.define("DeploymentsListResponse", {"deployments": message("Deployment", repeated=True)})
SCHEMAS.define("DeploymentsCancelPreviewRequest", {"fingerprint": byte()})
SCHEMAS.define("DeploymentsStopRequest", {"fingerprint": byte()})
SCHEMAS.define("Policy", {"etag": byte()})
SCHEMAS.define("GlobalSetPolicyRequest", {
    "etag": byte(),
    "policy": message("Policy"),
    "updateMask": field_mask(),
})
SCHEMAS.define("Manifest", {
    "id": uint64(),
    "manifestSizeBytes": int64(),
    "manifestSizeLimitBytes": int64(),
})
SCHEMAS.define("ManifestsListResponse", {"manifests": message("Manifest", repeated=True)})
SCHEMAS.define("OperationsListResponse", {"operations": message("Operation", repeated=True)})
SCHEMAS.define("Resource", {"id": uint64()})
SCHEMAS.define("ResourcesListResponse", {"resources": message("Resource", repeated=True)})
SCHEMAS.define("Type", {
    "id": uint64(),
    "operation": message("Operation"),
})
SCHEMAS.define("TypesListResponse", {"types": message("Type", repeated=True)})


class TargetConfiguration(TypedDict, total=False):
    """Deployment config: a YAML config file plus imported templates."""

    config: dict[str, str]
    imports: list[dict[str, str]]


class Operation(TypedDict, total=False):
    name: str
    id: int
    targetId: int
    targetLink: str
    operationType: str
    status: OperationStatus
    progress: int
    insertTime: str
    startTime: str
    endTime: str
    error: dict
    warnings: list[dict]
    selfLink: str


class Deployment(TypedDict, total=False):
    """A deployment, with native id and fingerprint.

    Attributes:
        name: Deployment name, unique within the project.
        id: Server-assigned numeric id.
        fingerprint: Optimistic-locking token; send the latest value back
            on update, stop and cancelPreview.
        target: Configuration to deploy.
        manifest: URL of the active manifest.
        operation: The last operation run on this deployment.
        labels: List of {'key': ..., 'value': ...} entries.
    """

    name: str
    description: str
    id: int
    fingerprint: bytes
    target: TargetConfiguration
    manifest: str
    operation: Operation
    labels: list[dict[str, str]]
    insertTime: str
    updateTime: str
    selfLink: str


class Manifest(TypedDict, total=False):
    name: str
    id: int
    config: dict[str, str]
    expandedConfig: str
    layout: str
    manifestSizeBytes: int
    manifestSizeLimitBytes: int
    insertTime: str
    selfLink: str


class Resource(TypedDict, total=False):
    name: str
    id: int
    type: str
    manifest: str
    properties: str
    finalProperties: str
    url: str
    insertTime: str
    updateTime: str


class Policy(TypedDict, total=False):
    bindings: list[dict]
    auditConfigs: list[dict]
    etag: bytes
    version: int
