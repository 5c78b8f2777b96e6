"""HTTP transport for posting GraphQL request bodies.

Returns the raw response text; interpreting it (including GraphQL-level
``errors``) is left to the caller.
"""

from typing import Any

import httpx

from .auth import Auth, NoAuth
from .errors import TransportError


class HttpTransport:
    """Posts JSON bodies to a single GraphQL endpoint.

    Examples:
        with HttpTransport(url, auth=BearerAuth(token)) as transport:
            body = transport.post({"query": "{ ping }"})

        # Tests inject an httpx transport
        HttpTransport(url, transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the transport.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used by tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth if auth is not None else NoAuth()
        self._transport = transport
        self._client: httpx.Client | None = None
        self.last_status: int | None = None

    @property
    def auth(self) -> Auth:
        return self._auth

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.Client(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    def close(self):
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def post(self, body: dict[str, Any]) -> str:
        """Send a POST request and return the response body unmodified.

        Non-2xx responses are returned as well; only network-level failures
        raise.

        Raises:
            TransportError: If the request could not be completed
        """
        client = self._get_client()
        try:
            response = client.post(self.url, json=body)
        except httpx.HTTPError as e:
            raise TransportError(self.url, str(e) or type(e).__name__) from e

        self.last_status = response.status_code
        return response.text
