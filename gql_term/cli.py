"""Command-line interface for gql-term."""

import dataclasses
import json
from pathlib import Path

import click

from . import __version__
from .core.actions import Action, ActionKind, Session
from .core.config import Config
from .core.errors import GqlError
from .core.presenter import TOOL_NAME, select_presenter

ACTIONS_KEY = "gql_term.actions"


class ToolError(click.ClickException):
    """A fatal error, shown as a single "gql: ..." line with exit status 1."""

    exit_code = 1

    def show(self, file=None):
        click.echo(f"{TOOL_NAME}: {self.format_message()}", file=file, err=True)


class ToolUsageError(click.UsageError):
    """A command-line mistake: the usage line, then "gql: ...", exit status 1."""

    exit_code = 1

    def show(self, file=None):
        if self.ctx is not None:
            click.echo(self.ctx.get_usage(), file=file, err=True)
        click.echo(f"{TOOL_NAME}: {self.format_message()}", file=file, err=True)


class GqlCommand(click.Command):
    """Reports click's own parsing errors the way ToolUsageError does."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except ToolUsageError:
            raise
        except click.UsageError as e:
            raise ToolUsageError(e.format_message(), ctx=e.ctx) from e


def _actions(ctx: click.Context) -> list[Action]:
    return ctx.meta.setdefault(ACTIONS_KEY, [])


def _flag_action(kind: ActionKind):
    """Callback recording a flag action at its command-line position."""

    def callback(ctx: click.Context, param: click.Parameter, value: bool):
        if value:
            _actions(ctx).append(Action(kind))
        return value

    return callback


def _docs_action(kind: ActionKind):
    """Callback recording a doc lookup; only one lookup per invocation."""

    def callback(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]):
        if not value:
            return value
        actions = _actions(ctx)
        if len(value) > 1 or any(a.kind.is_docs for a in actions):
            raise ToolUsageError(
                "only one of --docs, --type-docs, --query-docs or --mutation-docs "
                "may be given",
                ctx=ctx,
            )
        actions.append(Action(kind, argument=value[0]))
        return value

    return callback


def _query_action(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]):
    if not value:
        return value
    if len(value) > 1:
        raise ToolUsageError("--query may only be given once", ctx=ctx)
    _actions(ctx).append(Action(ActionKind.SEND, argument=value[0]))
    return value


def _parse_input(ctx: click.Context, param: click.Parameter, value: str | None):
    """Validate --input as a JSON object before anything is sent."""
    if value is None:
        return None
    try:
        variables = json.loads(value)
    except json.JSONDecodeError as e:
        raise ToolError(f"--input is not valid JSON: {e}") from e
    if not isinstance(variables, dict):
        raise ToolError("--input must be a JSON object")
    return variables


@click.command(cls=GqlCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--schema", is_flag=True, expose_value=False,
              callback=_flag_action(ActionKind.SCHEMA),
              help="Print the schema (cached if available) as JSON.")
@click.option("--refresh-schema", is_flag=True, expose_value=False,
              callback=_flag_action(ActionKind.REFRESH_SCHEMA),
              help="Fetch the schema again, update the cache and print it.")
@click.option("--types", is_flag=True, expose_value=False,
              callback=_flag_action(ActionKind.TYPES),
              help="List type names.")
@click.option("--mutations", is_flag=True, expose_value=False,
              callback=_flag_action(ActionKind.MUTATIONS),
              help="List mutation names.")
@click.option("--queries", is_flag=True, expose_value=False,
              callback=_flag_action(ActionKind.QUERIES),
              help="List query names.")
@click.option("--docs", metavar="NAME", multiple=True, expose_value=False,
              callback=_docs_action(ActionKind.DOCS),
              help="Show docs for a type, query or mutation (tried in that order).")
@click.option("--type-docs", metavar="NAME", multiple=True, expose_value=False,
              callback=_docs_action(ActionKind.TYPE_DOCS),
              help="Show docs for a type.")
@click.option("--query-docs", metavar="NAME", multiple=True, expose_value=False,
              callback=_docs_action(ActionKind.QUERY_DOCS),
              help="Show docs for a query.")
@click.option("--mutation-docs", metavar="NAME", multiple=True, expose_value=False,
              callback=_docs_action(ActionKind.MUTATION_DOCS),
              help="Show docs for a mutation.")
@click.option("--query", "query_file", metavar="FILE", multiple=True, expose_value=False,
              callback=_query_action,
              help="Send the query or mutation saved as FILE in <home>/queries.")
@click.option("--input", "input_json", metavar="JSON", callback=_parse_input,
              help="Variables for --query, as a JSON object.")
@click.option("--host", envvar="GQL_HOST", metavar="HOST",
              help="GraphQL endpoint; https:// is assumed without a scheme. [env: GQL_HOST]")
@click.option("--bearer", envvar="GQL_BEARER", metavar="TOKEN",
              help="Bearer token for the Authorization header. [env: GQL_BEARER]")
@click.option("--home", envvar="GQL_HOME", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding schema.json and queries/. [env: GQL_HOME]")
@click.option("--yes", "-y", is_flag=True,
              help="Send --query without asking for confirmation.")
@click.option("--verbose", "-v", is_flag=True,
              help="Enable verbose output.")
@click.version_option(__version__, prog_name=TOOL_NAME)
@click.pass_context
def main(ctx: click.Context, input_json: dict | None, host: str | None,
         bearer: str | None, home: Path | None, yes: bool, verbose: bool):
    """Terminal client for a GraphQL API.

    Actions run in the order they are given.

    Examples:

        gql --host api.example.com/graphql --refresh-schema

        gql --types --docs User

        gql --query login.gql --input '{"input": {"user": "a"}}'
    """
    actions = list(_actions(ctx))
    if not actions:
        raise ToolUsageError("no action given", ctx=ctx)
    if not host or not host.strip():
        raise ToolUsageError("--host (or GQL_HOST) is required", ctx=ctx)

    if input_json is not None:
        if not any(a.kind is ActionKind.SEND for a in actions):
            raise ToolUsageError("--input requires --query", ctx=ctx)
        actions = [
            dataclasses.replace(a, variables=input_json) if a.kind is ActionKind.SEND else a
            for a in actions
        ]

    config = Config(host=host, bearer=bearer, home=home)
    presenter = select_presenter(verbose=verbose)

    try:
        with Session(config, presenter, assume_yes=yes) as session:
            status = session.run(actions)
    except GqlError as e:
        raise ToolError(str(e)) from e

    ctx.exit(status)


if __name__ == "__main__":
    main()
