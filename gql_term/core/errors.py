"""Exceptions raised by the core modules.

The CLI turns any GqlError into a single-line diagnostic and exit status 1.
"""


class GqlError(Exception):
    """Base class for all gql-term errors."""


class TransportError(GqlError):
    """Raised when the HTTP request to the endpoint fails."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"request to {url} failed: {reason}")


class SchemaCacheError(GqlError):
    """Raised when the cached schema file cannot be read."""


class MalformedSchemaError(GqlError):
    """Raised when an introspection result does not have the expected shape."""


class QueryFileNotFoundError(GqlError):
    """Raised when a saved query file does not exist."""

    def __init__(self, name: str, path):
        self.name = name
        self.path = path
        super().__init__(f"query file not found: {path}")


class QueryFileReadError(GqlError):
    """Raised when a saved query file exists but cannot be read as text."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read query file {path}: {reason}")
