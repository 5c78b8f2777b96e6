"""Ordered command-line actions and the loop that runs them."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .auth import auth_for_token
from .cache import SchemaCache
from .config import Config
from .docs import DocRenderer, DocResult
from .executor import RequestExecutor
from .introspection import IntrospectionClient
from .presenter import Presenter
from .queries import list_mutations, list_queries, list_types
from .schema import Schema
from .transport import HttpTransport


class ActionKind(Enum):
    SCHEMA = "schema"
    REFRESH_SCHEMA = "refresh-schema"
    TYPES = "types"
    QUERIES = "queries"
    MUTATIONS = "mutations"
    DOCS = "docs"
    TYPE_DOCS = "type-docs"
    QUERY_DOCS = "query-docs"
    MUTATION_DOCS = "mutation-docs"
    SEND = "query"

    @property
    def is_docs(self) -> bool:
        return self in DOC_KINDS


DOC_KINDS = frozenset({
    ActionKind.DOCS,
    ActionKind.TYPE_DOCS,
    ActionKind.QUERY_DOCS,
    ActionKind.MUTATION_DOCS,
})


@dataclass(frozen=True)
class Action:
    """One requested action; doc lookups carry their term, SEND its file name."""
    kind: ActionKind
    argument: Optional[str] = None
    variables: Optional[dict[str, Any]] = None


class Session:
    """Runs actions against one endpoint, fetching the schema at most once.

    Example:
        with Session(config, presenter) as session:
            status = session.run([Action(ActionKind.TYPES)])
    """

    def __init__(
        self,
        config: Config,
        presenter: Presenter,
        *,
        transport: Optional[HttpTransport] = None,
        assume_yes: bool = False,
    ):
        self.config = config
        self.presenter = presenter
        self.transport = transport or HttpTransport(
            config.endpoint, auth=auth_for_token(config.bearer)
        )
        self.introspection = IntrospectionClient(
            self.transport, SchemaCache(config.schema_path), presenter
        )
        self.executor = RequestExecutor(
            config, self.transport, presenter, assume_yes=assume_yes
        )
        self.renderer = DocRenderer(template_dir=config.templates_dir)
        self._document: Optional[dict[str, Any]] = None
        self._schema: Optional[Schema] = None

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc_info):
        self.transport.close()

    def document(self, force_refresh: bool = False) -> dict[str, Any]:
        if force_refresh or self._document is None:
            self._document = self.introspection.get_schema(force_refresh)
            self._schema = None
        return self._document

    def schema(self) -> Schema:
        if self._schema is None:
            self._schema = Schema.from_document(self.document())
        return self._schema

    def run(self, actions: list[Action]) -> int:
        """Run actions in order and return the exit status.

        Returns 1 if any documentation lookup found nothing, else 0.
        """
        status = 0
        for action in actions:
            if not self.run_action(action):
                status = 1
        return status

    def run_action(self, action: Action) -> bool:
        """Run one action; return False for a failed documentation lookup."""
        kind = action.kind
        if kind is ActionKind.SCHEMA:
            self.presenter.show_json(self.document())
        elif kind is ActionKind.REFRESH_SCHEMA:
            self.presenter.show_json(self.document(force_refresh=True))
        elif kind is ActionKind.TYPES:
            self.presenter.show_lines(list_types(self.schema()))
        elif kind is ActionKind.QUERIES:
            self.presenter.show_lines(list_queries(self.schema()))
        elif kind is ActionKind.MUTATIONS:
            self.presenter.show_lines(list_mutations(self.schema()))
        elif kind.is_docs:
            result = self._docs(kind, action.argument)
            self.presenter.show_markdown(result.markdown)
            return result.found
        elif kind is ActionKind.SEND:
            self._send(action)
        else:
            raise ValueError(f"Unknown action: {kind}")
        return True

    def _docs(self, kind: ActionKind, term: str) -> DocResult:
        schema = self.schema()
        if kind is ActionKind.TYPE_DOCS:
            return self.renderer.render_type(term, schema)
        if kind is ActionKind.QUERY_DOCS:
            return self.renderer.render_query(term, schema)
        if kind is ActionKind.MUTATION_DOCS:
            return self.renderer.render_mutation(term, schema)
        return self.renderer.get_docs(term, schema)

    def _send(self, action: Action):
        result = self.executor.send_request(action.argument, action.variables)
        if result.cancelled:
            return
        try:
            self.presenter.show_json(json.loads(result.body))
        except json.JSONDecodeError:
            # Not JSON (e.g. an HTML error page): pass it through untouched
            self.presenter.show_text(result.body)
