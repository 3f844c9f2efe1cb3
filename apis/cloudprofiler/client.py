"""Client for the Cloud Profiler API.

Profiles carry their pprof payload in the bytes-typed profileBytes field,
which travels as base64 on the wire and as raw bytes in this client.
"""

import logging
from typing import Optional

from apis.base import BaseGoogleApiClient
from apis.cloudprofiler.schemas import SCHEMAS, Deployment, Profile, ProfileType

logger = logging.getLogger(__name__)

MONITORING_WRITE_SCOPE = "https://www.googleapis.com/auth/monitoring.write"


class CloudProfilerClient(BaseGoogleApiClient):
    """Client for uploading profiles to Cloud Profiler.

    Example:
        >>> client = CloudProfilerClient(credentials_path="/path/to/credentials.json")
        >>> profile = await client.create_offline_profile(
        ...     "projects/my-project",
        ...     {"profileType": "CPU", "deployment": {"projectId": "my-project", "target": "api"},
        ...      "duration": "10s", "profileBytes": gzipped_pprof},
        ... )
    """

    API_NAME = "cloudprofiler"
    API_VERSION = "v2"
    DEFAULT_BASE_URL = "https://cloudprofiler.googleapis.com/"
    SCOPES = [MONITORING_WRITE_SCOPE]
    SCHEMAS = SCHEMAS

    async def create_profile(
        self,
        parent: str,
        deployment: Deployment,
        profile_types: list[ProfileType],
    ) -> Profile:
        """Create a profile in online mode.

        The call may block until the server decides a profile of one of
        the requested types should be collected.

        Args:
            parent: 'projects/{project}'.
            deployment: Deployment details; required.
            profile_types: Profile types the agent can collect.
        """
        return await self._request(
            "POST",
            f"v2/{self._path(parent)}/profiles",
            body={"deployment": deployment, "profileType": list(profile_types)},
            request_schema="CreateProfileRequest",
            response_schema="Profile",
        )

    async def create_offline_profile(self, parent: str, profile: Profile) -> Profile:
        """Upload an already collected profile (offline mode)."""
        created = await self._request(
            "POST",
            f"v2/{self._path(parent)}/profiles:createOffline",
            body=profile,
            request_schema="Profile",
            response_schema="Profile",
        )
        logger.info(f"Uploaded offline profile {created.get('name')}")
        return created

    async def update_profile(
        self,
        name: str,
        profile: Profile,
        update_mask: Optional[str] = None,
    ) -> Profile:
        """Update profile bytes and labels of an online-mode profile.

        Args:
            name: Profile resource name returned by create_profile().
            profile: Fields to write.
            update_mask: Comma separated fields, e.g. 'profileBytes,labels'.
        """
        return await self._request(
            "PATCH",
            f"v2/{self._path(name)}",
            params={"updateMask": update_mask},
            params_schema="ProfilesPatchParams",
            body=profile,
            request_schema="Profile",
            response_schema="Profile",
        )
