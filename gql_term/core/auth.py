"""Authentication handlers for the HTTP transport.

Only bearer tokens are supported by the endpoint configuration; NoAuth is
used when no token is configured.
"""

from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers."""

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...

    def describe(self) -> str:
        """Return a short, masked description for request previews."""
        ...


class BearerAuth:
    """Bearer token authentication.

    Args:
        token: The bearer token

    Example:
        auth = BearerAuth("eyJhbGciOiJIUzI1NiIs...")
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def describe(self) -> str:
        # Only reveal a suffix when the token is long enough to stay secret.
        if len(self.token) > 8:
            return f"Bearer ****{self.token[-4:]}"
        return "Bearer ****"


class NoAuth:
    """No authentication (for public APIs or testing)."""

    def get_headers(self) -> Dict[str, str]:
        return {}

    def describe(self) -> str:
        return "none"


def auth_for_token(token: Optional[str]) -> Auth:
    """Pick the auth handler for an optional bearer token."""
    if token:
        return BearerAuth(token)
    return NoAuth()
