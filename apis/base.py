"""Base client for Google REST APIs.

This module provides the base class with authentication, transport setup,
request dispatch and pagination that is shared across all API clients.
Request and response bodies are converted between native Python values
and their JSON wire form by the coercion layer.
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional
from urllib.parse import quote, urlencode

import google.auth
import google_auth_httplib2
import httplib2
from google.oauth2 import service_account
from googleapiclient.errors import HttpError
from googleapiclient.http import HttpRequest, build_http

from coercion.registry import SchemaRegistry
from coercion.walker import coerce_params, to_native, to_wire

logger = logging.getLogger(__name__)

CLOUD_PLATFORM_SCOPE = "https://www.googleapis.com/auth/cloud-platform"


class BaseGoogleApiClient:
    """Base async client for a Google REST API.

    Subclasses set API_NAME, API_VERSION, DEFAULT_BASE_URL and SCHEMAS and
    add one coroutine per RPC built on _request() and _paginate().

    Attributes:
        base_url: Root URL requests are sent to (ends with '/').
        page_size: Default number of results per page for list calls.

    Example:
        >>> class MyClient(BaseGoogleApiClient):
        ...     async def get_thing(self, name: str) -> dict:
        ...         return await self._request("GET", f"v1/{self._path(name)}",
        ...                                    response_schema="Thing")
    """

    API_NAME = ""
    API_VERSION = ""
    DEFAULT_BASE_URL = ""
    SCOPES = [CLOUD_PLATFORM_SCOPE]
    SCHEMAS: Optional[SchemaRegistry] = None
    DEFAULT_PAGE_SIZE = 100

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        credentials: Any = None,
        http: Any = None,
        base_url: Optional[str] = None,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
        scopes: Optional[list[str]] = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials_path: Path to a service account JSON key file.
            credentials: Ready google.auth credentials (takes precedence
                over credentials_path).
            http: Pre-built httplib2-compatible transport; when given no
                credentials are loaded (used by tests).
            base_url: Override for the API root URL.
            page_size: Default page size for list calls (DEFAULT_PAGE_SIZE
                when unset).
            timeout: Socket timeout in seconds for the default transport.
            scopes: OAuth scopes requested for loaded credentials.

        Raises:
            ValueError: If page_size is not positive.
        """
        if page_size is None:
            page_size = self.DEFAULT_PAGE_SIZE
        if page_size < 1:
            raise ValueError("page_size must be positive")

        base_url = base_url or self.DEFAULT_BASE_URL
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.page_size = page_size
        self._credentials_path = credentials_path
        self._credentials = credentials
        self._timeout = timeout
        self._http = http
        self.scopes = list(scopes or self.SCOPES)

    @classmethod
    def from_config(cls, config: Any, **kwargs: Any) -> "BaseGoogleApiClient":
        """Build a client from a ClientConfig.

        Args:
            config: config.ClientConfig instance.
            **kwargs: Extra constructor arguments (e.g. http).
        """
        kwargs.setdefault("credentials_path", config.credentials_path)
        kwargs.setdefault("base_url", config.base_urls.get(cls.API_NAME))
        kwargs.setdefault("timeout", config.timeout)
        kwargs.setdefault("scopes", config.scopes or None)
        return cls(**kwargs)

    def _get_credentials(self):
        """Resolve credentials: explicit object, key file, then ADC.

        Raises:
            google.auth.exceptions.DefaultCredentialsError: If no
                credentials can be found.
        """
        if self._credentials is None:
            if self._credentials_path:
                self._credentials = service_account.Credentials.from_service_account_file(
                    self._credentials_path,
                    scopes=self.scopes,
                )
            else:
                self._credentials, _ = google.auth.default(scopes=self.scopes)
        return self._credentials

    def _get_http(self):
        """Lazy initialization of the authorized HTTP transport."""
        if self._http is None:
            self._http = google_auth_httplib2.AuthorizedHttp(
                self._get_credentials(),
                http=build_http() if self._timeout is None else httplib2.Http(timeout=self._timeout),
            )
        return self._http

    @staticmethod
    def _path(value: str) -> str:
        """Percent-quote a path parameter, keeping resource-name slashes."""
        return quote(str(value), safe="/")

    def _url(self, path: str, params: Optional[dict] = None) -> str:
        url = f"{self.base_url}{path}"
        if params:
            url = f"{url}?{urlencode(params, doseq=True)}"
        return url

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[dict] = None,
        body: Any = None,
        request_schema: Optional[str] = None,
        response_schema: Optional[str] = None,
        params_schema: Optional[str] = None,
    ) -> Any:
        """Send one API call and return the decoded response.

        Args:
            method: HTTP verb.
            path: Path relative to base_url, path parameters already quoted.
            params: Query parameters; None values are dropped.
            body: Native request body (dict), converted with request_schema.
            request_schema: Schema name for the request body.
            response_schema: Schema name for the response body.
            params_schema: Schema name describing the query parameters.

        Returns:
            The response body with native values ({} for empty bodies).

        Raises:
            HttpError: If the API returns a non-2xx status.
            EncodeError: If the request body cannot be serialized.
            DecodeError: If the response body holds malformed wire data.
        """
        query = coerce_params(self._schema(params_schema), params or {})
        uri = self._url(path, query)

        payload = None
        headers = {"accept": "application/json"}
        if body is not None:
            wire_body = to_wire(self._schema(request_schema), body) if request_schema else body
            payload = json.dumps(wire_body)
            headers["content-type"] = "application/json"

        request = HttpRequest(
            self._get_http(),
            _parse_json,
            uri,
            method=method,
            body=payload,
            headers=headers,
        )

        loop = asyncio.get_event_loop()
        try:
            data = await loop.run_in_executor(None, request.execute)
        except HttpError as ex:
            logger.error(
                f"{self.API_NAME} API error: {method} {path} -> {ex.resp.status} - {ex.reason}"
            )
            raise

        if response_schema:
            return to_native(self._schema(response_schema), data)
        return data

    async def _paginate(
        self,
        path: str,
        items_key: str,
        *,
        params: Optional[dict] = None,
        response_schema: Optional[str] = None,
        params_schema: Optional[str] = None,
        page_size_param: str = "pageSize",
    ) -> AsyncIterator[dict]:
        """Yield every item of a paginated list call.

        Follows nextPageToken until the server stops returning one.

        Args:
            path: List endpoint path.
            items_key: Response field holding the page's items.
            params: Extra query parameters.
            response_schema: Schema name of the list response.
            params_schema: Schema name describing the query parameters.
            page_size_param: Name of the page size query parameter
                ('pageSize' or 'maxResults').
        """
        page_token: Optional[str] = None
        pages = 0

        while True:
            request_params = dict(params or {})
            request_params.setdefault(page_size_param, self.page_size)
            if page_token:
                request_params["pageToken"] = page_token

            response = await self._request(
                "GET",
                path,
                params=request_params,
                params_schema=params_schema,
                response_schema=response_schema,
            )
            pages += 1

            for item in response.get(items_key, []):
                yield item

            page_token = response.get("nextPageToken")
            logger.debug(f"Fetched page {pages} of {path}")
            if not page_token:
                break

    def _schema(self, name: Optional[str]):
        if name is None:
            return None
        if self.SCHEMAS is None:
            raise RuntimeError(f"{type(self).__name__} has no schema registry")
        return self.SCHEMAS.get(name)


def _parse_json(resp, content) -> Any:
    """Postprocessor for HttpRequest: decode a JSON response body."""
    if not content:
        return {}
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    return json.loads(content)
