"""Terminal client for GraphQL APIs: schema, docs and saved queries."""

__version__ = "0.1.0"
