"""OAuth2 API client."""

from apis.oauth2.client import OAuth2Client
from apis.oauth2.schemas import SCHEMAS, Tokeninfo, Userinfo

__all__ = ["OAuth2Client", "SCHEMAS", "Tokeninfo", "Userinfo"]
