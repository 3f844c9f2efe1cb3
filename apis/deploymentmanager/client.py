"""Client for the Deployment Manager API.

Deployment Manager is a compute-style API: collections live under
projects/{project}/global/ and list calls page with maxResults.
"""

import logging
from typing import AsyncIterator, Optional

from googleapiclient.errors import HttpError

from apis.base import BaseGoogleApiClient
from apis.deploymentmanager.schemas import (
    SCHEMAS,
    CreatePolicy,
    DeletePolicy,
    Deployment,
    Manifest,
    Operation,
    Policy,
    Resource,
)

logger = logging.getLogger(__name__)


class DeploymentManagerClient(BaseGoogleApiClient):
    """Client for Deployment Manager deployments, manifests and operations.

    Example:
        >>> client = DeploymentManagerClient(credentials_path="/path/to/credentials.json")
        >>> deployment = await client.get_deployment("my-project", "web-stack")
        >>> op = await client.stop_deployment("my-project", "web-stack", deployment["fingerprint"])
    """

    API_NAME = "deploymentmanager"
    API_VERSION = "v2"
    DEFAULT_BASE_URL = "https://deploymentmanager.googleapis.com/"
    SCHEMAS = SCHEMAS
    DEFAULT_PAGE_SIZE = 500

    def _global(self, project: str) -> str:
        return f"deploymentmanager/v2/projects/{self._path(project)}/global"

    def _deployment(self, project: str, deployment: str) -> str:
        return f"{self._global(project)}/deployments/{self._path(deployment)}"

    async def get_deployment(self, project: str, deployment: str) -> Optional[Deployment]:
        """Get a deployment.

        Returns:
            The deployment, or None if it does not exist.

        Raises:
            HttpError: If the API request fails (except 404).
        """
        try:
            return await self._request(
                "GET", self._deployment(project, deployment), response_schema="Deployment"
            )
        except HttpError as ex:
            if ex.resp.status == 404:
                logger.debug(f"Deployment {project}/{deployment} not found")
                return None
            raise

    async def list_deployments(
        self,
        project: str,
        filter_query: Optional[str] = None,
        max_results: Optional[int] = None,
        order_by: Optional[str] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        """List one page of deployments of a project."""
        return await self._request(
            "GET",
            f"{self._global(project)}/deployments",
            params={
                "filter": filter_query,
                "maxResults": max_results,
                "orderBy": order_by,
                "pageToken": page_token,
            },
            response_schema="DeploymentsListResponse",
        )

    async def iter_deployments(
        self,
        project: str,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> AsyncIterator[Deployment]:
        """Iterate over every deployment of a project."""
        async for deployment in self._paginate(
            f"{self._global(project)}/deployments",
            "deployments",
            params={"filter": filter_query, "orderBy": order_by},
            response_schema="DeploymentsListResponse",
            page_size_param="maxResults",
        ):
            yield deployment

    async def insert_deployment(
        self,
        project: str,
        deployment: Deployment,
        preview: Optional[bool] = None,
        create_policy: Optional[CreatePolicy] = None,
    ) -> Operation:
        """Create a deployment (or a preview of it) and return the operation."""
        return await self._request(
            "POST",
            f"{self._global(project)}/deployments",
            params={"preview": preview, "createPolicy": create_policy},
            body=deployment,
            request_schema="Deployment",
            response_schema="Operation",
        )

    async def patch_deployment(
        self,
        project: str,
        deployment: str,
        changes: Deployment,
        preview: Optional[bool] = None,
        create_policy: Optional[CreatePolicy] = None,
        delete_policy: Optional[DeletePolicy] = None,
    ) -> Operation:
        """Patch a deployment; changes must carry the current fingerprint."""
        return await self._request(
            "PATCH",
            self._deployment(project, deployment),
            params={
                "preview": preview,
                "createPolicy": create_policy,
                "deletePolicy": delete_policy,
            },
            body=changes,
            request_schema="Deployment",
            response_schema="Operation",
        )

    async def update_deployment(
        self,
        project: str,
        deployment: str,
        body: Deployment,
        preview: Optional[bool] = None,
        create_policy: Optional[CreatePolicy] = None,
        delete_policy: Optional[DeletePolicy] = None,
    ) -> Operation:
        """Replace a deployment's configuration."""
        return await self._request(
            "PUT",
            self._deployment(project, deployment),
            params={
                "preview": preview,
                "createPolicy": create_policy,
                "deletePolicy": delete_policy,
            },
            body=body,
            request_schema="Deployment",
            response_schema="Operation",
        )

    async def delete_deployment(
        self,
        project: str,
        deployment: str,
        delete_policy: Optional[DeletePolicy] = None,
    ) -> Operation:
        return await self._request(
            "DELETE",
            self._deployment(project, deployment),
            params={"deletePolicy": delete_policy},
            response_schema="Operation",
        )

    async def stop_deployment(self, project: str, deployment: str, fingerprint: bytes) -> Operation:
        """Stop an ongoing update or preview operation."""
        return await self._request(
            "POST",
            f"{self._deployment(project, deployment)}/stop",
            body={"fingerprint": fingerprint},
            request_schema="DeploymentsStopRequest",
            response_schema="Operation",
        )

    async def cancel_preview(self, project: str, deployment: str, fingerprint: bytes) -> Operation:
        """Cancel and remove the preview currently attached to a deployment."""
        return await self._request(
            "POST",
            f"{self._deployment(project, deployment)}/cancelPreview",
            body={"fingerprint": fingerprint},
            request_schema="DeploymentsCancelPreviewRequest",
            response_schema="Operation",
        )

    async def get_iam_policy(
        self,
        project: str,
        resource: str,
        requested_policy_version: Optional[int] = None,
    ) -> Policy:
        return await self._request(
            "GET",
            f"{self._deployment(project, resource)}/getIamPolicy",
            params={"optionsRequestedPolicyVersion": requested_policy_version},
            response_schema="Policy",
        )

    async def set_iam_policy(
        self,
        project: str,
        resource: str,
        policy: Policy,
        update_mask: Optional[str] = None,
    ) -> Policy:
        """Replace the IAM policy of a deployment.

        The policy's etag (bytes) from get_iam_policy() guards against
        concurrent modification.
        """
        body = {"policy": policy}
        if update_mask is not None:
            body["updateMask"] = update_mask
        return await self._request(
            "POST",
            f"{self._deployment(project, resource)}/setIamPolicy",
            body=body,
            request_schema="GlobalSetPolicyRequest",
            response_schema="Policy",
        )

    async def get_manifest(self, project: str, deployment: str, manifest: str) -> Manifest:
        return await self._request(
            "GET",
            f"{self._deployment(project, deployment)}/manifests/{self._path(manifest)}",
            response_schema="Manifest",
        )

    async def list_manifests(
        self,
        project: str,
        deployment: str,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"{self._deployment(project, deployment)}/manifests",
            params={"maxResults": max_results, "pageToken": page_token},
            response_schema="ManifestsListResponse",
        )

    async def get_operation(self, project: str, operation: str) -> Operation:
        return await self._request(
            "GET",
            f"{self._global(project)}/operations/{self._path(operation)}",
            response_schema="Operation",
        )

    async def list_operations(
        self,
        project: str,
        filter_query: Optional[str] = None,
        max_results: Optional[int] = None,
        order_by: Optional[str] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        """List one page of operations of a project."""
        return await self._request(
            "GET",
            f"{self._global(project)}/operations",
            params={
                "filter": filter_query,
                "maxResults": max_results,
                "orderBy": order_by,
                "pageToken": page_token,
            },
            response_schema="OperationsListResponse",
        )

    async def iter_operations(
        self,
        project: str,
        filter_query: Optional[str] = None,
        order_by: Optional[str] = None,
    ) -> AsyncIterator[Operation]:
        """Iterate over every operation of a project."""
        async for operation in self._paginate(
            f"{self._global(project)}/operations",
            "operations",
            params={"filter": filter_query, "orderBy": order_by},
            response_schema="OperationsListResponse",
            page_size_param="maxResults",
        ):
            yield operation

    async def get_resource(self, project: str, deployment: str, resource: str) -> Resource:
        return await self._request(
            "GET",
            f"{self._deployment(project, deployment)}/resources/{self._path(resource)}",
            response_schema="Resource",
        )

    async def list_resources(
        self,
        project: str,
        deployment: str,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"{self._deployment(project, deployment)}/resources",
            params={"maxResults": max_results, "pageToken": page_token},
            response_schema="ResourcesListResponse",
        )

    async def list_types(
        self,
        project: str,
        filter_query: Optional[str] = None,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
    ) -> dict:
        return await self._request(
            "GET",
            f"{self._global(project)}/types",
            params={"filter": filter_query, "maxResults": max_results, "pageToken": page_token},
            response_schema="TypesListResponse",
        )
