"""Client for the Google OAuth2 userinfo and tokeninfo endpoints."""

import logging
from typing import Optional

from apis.base import BaseGoogleApiClient
from apis.oauth2.schemas import SCHEMAS, Tokeninfo, Userinfo

logger = logging.getLogger(__name__)

USERINFO_SCOPES = [
    "openid",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
]


class OAuth2Client(BaseGoogleApiClient):
    """Client for the OAuth2 v2 API.

    Example:
        >>> client = OAuth2Client(credentials=user_credentials)
        >>> me = await client.get_userinfo()
        >>> print(me["email"])
    """

    API_NAME = "oauth2"
    API_VERSION = "v2"
    DEFAULT_BASE_URL = "https://www.googleapis.com/"
    SCOPES = USERINFO_SCOPES
    SCHEMAS = SCHEMAS

    async def get_userinfo(self) -> Userinfo:
        """Get the profile of the authenticated user."""
        return await self._request("GET", "oauth2/v2/userinfo", response_schema="Userinfo")

    async def get_userinfo_me(self) -> Userinfo:
        """Same as get_userinfo(), through the userinfo/v2/me alias."""
        return await self._request("GET", "userinfo/v2/me", response_schema="Userinfo")

    async def get_tokeninfo(
        self,
        access_token: Optional[str] = None,
        id_token: Optional[str] = None,
    ) -> Tokeninfo:
        """Introspect an access token or ID token.

        Raises:
            ValueError: If neither token is given.
        """
        if not access_token and not id_token:
            raise ValueError("access_token or id_token is required")
        return await self._request(
            "POST",
            "oauth2/v2/tokeninfo",
            params={"access_token": access_token, "id_token": id_token},
            response_schema="Tokeninfo",
        )
