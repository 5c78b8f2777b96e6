"""Sends saved query files to the endpoint after an explicit confirmation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from graphql import GraphQLSyntaxError, OperationDefinitionNode, parse

from .config import Config
from .errors import QueryFileNotFoundError, QueryFileReadError
from .presenter import Presenter
from .transport import HttpTransport


@dataclass(frozen=True)
class QueryRequest:
    """A literal query or mutation plus its variables."""
    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_body(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


@dataclass(frozen=True)
class SendResult:
    """Outcome of send_request: the raw response body, or a cancellation."""
    body: Optional[str] = None
    cancelled: bool = False


def describe_operation(query: str) -> Optional[str]:
    """Return e.g. "mutation Login" for the first operation in the text.

    Raises:
        GraphQLSyntaxError: If the text is not valid GraphQL
    """
    document = parse(query)
    for definition in document.definitions:
        if isinstance(definition, OperationDefinitionNode):
            operation = definition.operation.value
            if definition.name:
                return f"{operation} {definition.name.value}"
            return operation
    return None


class RequestExecutor:
    """Loads a query file, previews the request and sends it.

    Example:
        executor = RequestExecutor(config, transport, presenter)
        result = executor.send_request("login.gql", {"input": {...}})
        if not result.cancelled:
            print(result.body)
    """

    def __init__(
        self,
        config: Config,
        transport: HttpTransport,
        presenter: Presenter,
        *,
        assume_yes: bool = False,
    ):
        self.config = config
        self.transport = transport
        self.presenter = presenter
        self.assume_yes = assume_yes

    def query_path(self, name: str) -> Path:
        """Resolve a query file name inside the queries directory.

        Raises:
            QueryFileNotFoundError: If the file is missing or outside the directory
        """
        queries_dir = self.config.queries_dir.resolve()
        path = (queries_dir / name).resolve()
        if queries_dir not in path.parents or not path.is_file():
            raise QueryFileNotFoundError(name, queries_dir / name)
        return path

    def load_request(self, name: str, variables: Optional[dict[str, Any]] = None) -> QueryRequest:
        """Read the query text and combine it with the variables.

        Raises:
            QueryFileNotFoundError: If the file is missing
            QueryFileReadError: If the file cannot be read as UTF-8 text
        """
        path = self.query_path(name)
        try:
            query = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise QueryFileReadError(path, str(e)) from e
        return QueryRequest(query=query, variables=dict(variables or {}))

    def send_request(self, name: str, variables: Optional[dict[str, Any]] = None) -> SendResult:
        """Preview, confirm, then POST the request.

        Returns:
            SendResult with the raw response body, or cancelled=True if the
            user declined (no request is sent in that case)
        """
        request = self.load_request(name, variables)

        try:
            operation = describe_operation(request.query)
        except GraphQLSyntaxError as e:
            operation = None
            self.presenter.warn(f"{name} does not parse as GraphQL: {e.message}")

        self.presenter.preview(
            endpoint=self.transport.url,
            auth=self.transport.auth.describe(),
            operation=operation,
            query=request.query,
            variables=request.variables,
        )

        if not self.assume_yes and not self.presenter.confirm("Send this request?"):
            self.presenter.info("Cancelled; nothing was sent.")
            return SendResult(cancelled=True)

        body = self.transport.post(request.to_body())
        self.presenter.info(f"HTTP status: {self.transport.last_status}")
        return SendResult(body=body)
