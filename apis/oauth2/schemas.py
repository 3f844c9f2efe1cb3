"""Schemas and record shapes for the OAuth2 API (v2).

Neither record needs coercion: expires_in is an int32 and ids are
already strings. The schemas exist so responses go through the same
path as every other API.
"""

from typing import TypedDict

from coercion import SchemaRegistry

SCHEMAS = SchemaRegistry("oauth2", "v2")

SCHEMAS.define("Tokeninfo")
SCHEMAS.define("Userinfo")


class Tokeninfo(TypedDict, total=False):
    """Information about an access or ID token.

    Attributes:
        audience: Client the token was issued for.
        expires_in: Seconds until the token expires.
        scope: Space separated scopes granted.
        user_id: Obfuscated user id.
    """

    audience: str
    email: str
    expires_in: int
    issued_to: str
    scope: str
    user_id: str
    verified_email: bool


class Userinfo(TypedDict, total=False):
    id: str
    email: str
    verified_email: bool
    name: str
    given_name: str
    family_name: str
    picture: str
    locale: str
    hd: str
    link: str
    gender: str
