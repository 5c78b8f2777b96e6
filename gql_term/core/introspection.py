"""Fetches the schema by introspection and keeps it in the local cache."""

import json
from typing import Any, Optional

from .auth import NoAuth
from .cache import SchemaCache
from .errors import MalformedSchemaError
from .presenter import Presenter
from .schema import Schema
from .transport import HttpTransport

# Root operation types carry their fields so queries and mutations can be
# listed without a second lookup. Type references go two ofType levels deep.
INTROSPECTION_QUERY = """\
query IntrospectionQuery {
  __schema {
    queryType {
      name
      fields {
        ...FieldInfo
      }
    }
    mutationType {
      name
      fields {
        ...FieldInfo
      }
    }
    types {
      kind
      name
      description
      fields(includeDeprecated: true) {
        ...FieldInfo
      }
      inputFields {
        ...InputValueInfo
      }
      interfaces {
        ...TypeRefInfo
      }
      enumValues(includeDeprecated: true) {
        name
        description
      }
      possibleTypes {
        ...TypeRefInfo
      }
    }
  }
}

fragment FieldInfo on __Field {
  name
  description
  args {
    ...InputValueInfo
  }
  type {
    ...TypeRefInfo
  }
}

fragment InputValueInfo on __InputValue {
  name
  description
  type {
    ...TypeRefInfo
  }
  defaultValue
}

fragment TypeRefInfo on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
    }
  }
}
"""


class IntrospectionClient:
    """Returns the schema document, from the cache or from the endpoint.

    Example:
        client = IntrospectionClient(transport, SchemaCache(path), presenter)
        document = client.get_schema(force_refresh=False)
        schema = client.load_schema()
    """

    def __init__(self, transport: HttpTransport, cache: SchemaCache, presenter: Presenter):
        self.transport = transport
        self.cache = cache
        self.presenter = presenter

    def get_schema(self, force_refresh: bool = False) -> dict[str, Any]:
        """Return the raw introspection document.

        Args:
            force_refresh: Always fetch from the endpoint, ignoring the cache

        Raises:
            TransportError: If the endpoint cannot be reached
            MalformedSchemaError: If the response is not an introspection result
            SchemaCacheError: If the cache file is unreadable
        """
        if not force_refresh:
            cached = self.cache.load()
            if cached is not None:
                self.presenter.info(f"Using cached schema {self.cache.path}")
                return cached

        return self._fetch()

    def load_schema(self, force_refresh: bool = False) -> Schema:
        """Return the parsed schema."""
        return Schema.from_document(self.get_schema(force_refresh))

    def _fetch(self) -> dict[str, Any]:
        if isinstance(self.transport.auth, NoAuth):
            self.presenter.warn(
                "no bearer token configured; the endpoint may reject introspection"
            )

        self.presenter.info(f"Fetching schema from {self.transport.url}...")
        body = self.transport.post({"query": INTROSPECTION_QUERY, "variables": {}})
        self.presenter.info(f"  HTTP status: {self.transport.last_status}")

        document = self._decode(body)
        # Validate before caching so a failed fetch never replaces a good cache
        Schema.from_document(document)
        self.cache.save(document)
        self.presenter.info(f"Saved schema to {self.cache.path}")
        return document

    @staticmethod
    def _decode(body: str) -> dict[str, Any]:
        try:
            document: Optional[Any] = json.loads(body)
        except json.JSONDecodeError as e:
            snippet = body.strip().splitlines()[0][:80] if body.strip() else "<empty>"
            raise MalformedSchemaError(
                f"introspection response is not JSON: {snippet}"
            ) from e
        if not isinstance(document, dict):
            raise MalformedSchemaError("introspection result is not a JSON object")
        return document
