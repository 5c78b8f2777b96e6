"""Core modules: transport, schema cache, introspection, docs and requests."""

from .actions import Action, ActionKind, Session
from .auth import Auth, BearerAuth, NoAuth, auth_for_token
from .cache import SchemaCache
from .config import Config, default_home, normalize_host
from .docs import DocRenderer, DocResult
from .errors import (
    GqlError,
    MalformedSchemaError,
    QueryFileNotFoundError,
    QueryFileReadError,
    SchemaCacheError,
    TransportError,
)
from .executor import QueryRequest, RequestExecutor, SendResult
from .introspection import INTROSPECTION_QUERY, IntrospectionClient
from .presenter import PlainPresenter, Presenter, TerminalPresenter, select_presenter
from .queries import (
    list_mutations,
    list_queries,
    list_types,
    resolve_type_string,
)
from .schema import (
    EnumValue,
    FieldDef,
    FullType,
    InputValue,
    RootType,
    Schema,
    TypeKind,
    TypeRef,
)
from .transport import HttpTransport

__all__ = [
    # Auth
    "Auth",
    "BearerAuth",
    "NoAuth",
    "auth_for_token",
    # Config
    "Config",
    "default_home",
    "normalize_host",
    # Errors
    "GqlError",
    "MalformedSchemaError",
    "QueryFileNotFoundError",
    "QueryFileReadError",
    "SchemaCacheError",
    "TransportError",
    # Schema model
    "EnumValue",
    "FieldDef",
    "FullType",
    "InputValue",
    "RootType",
    "Schema",
    "TypeKind",
    "TypeRef",
    # Query helpers
    "list_mutations",
    "list_queries",
    "list_types",
    "resolve_type_string",
    # Transport, cache and introspection
    "HttpTransport",
    "SchemaCache",
    "INTROSPECTION_QUERY",
    "IntrospectionClient",
    # Docs
    "DocRenderer",
    "DocResult",
    # Requests
    "QueryRequest",
    "RequestExecutor",
    "SendResult",
    # Presentation and dispatch
    "Presenter",
    "PlainPresenter",
    "TerminalPresenter",
    "select_presenter",
    "Action",
    "ActionKind",
    "Session",
]
