"""Output and confirmation surface.

Results (JSON, name lists, Markdown) go to stdout. Request previews,
warnings, progress and prompts go to stderr so piped output stays clean.

Two implementations share the Presenter protocol:
    TerminalPresenter - ANSI styled Markdown and previews, for a TTY
    PlainPresenter    - unstyled text, for pipes and files

Use select_presenter() once at startup to pick one.
"""

import json
import os
import re
import sys
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

import click

TOOL_NAME = "gql"

_SEPARATOR_ROW = re.compile(r"^\|(\s*:?-+:?\s*\|)+$")
_ITALIC_LINE = re.compile(r"^_(.+)_$")


@runtime_checkable
class Presenter(Protocol):
    """Protocol for everything the tool shows to, or asks of, the user."""

    def show_json(self, data: Any) -> None:
        ...

    def show_text(self, text: str) -> None:
        ...

    def show_lines(self, lines: Iterable[str]) -> None:
        ...

    def show_markdown(self, markdown: str) -> None:
        ...

    def preview(
        self,
        *,
        endpoint: str,
        auth: str,
        operation: Optional[str],
        query: str,
        variables: dict[str, Any],
    ) -> None:
        ...

    def confirm(self, prompt: str) -> bool:
        ...

    def warn(self, message: str) -> None:
        ...

    def info(self, message: str) -> None:
        ...


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


class PlainPresenter:
    """Unstyled output.

    Args:
        verbose: Show informational messages on stderr
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def show_json(self, data: Any) -> None:
        click.echo(format_json(data))

    def show_text(self, text: str) -> None:
        click.echo(text.rstrip("\n"))

    def show_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            click.echo(line)

    def show_markdown(self, markdown: str) -> None:
        click.echo(markdown.rstrip("\n"))

    def _label(self, text: str) -> str:
        return text

    def preview(
        self,
        *,
        endpoint: str,
        auth: str,
        operation: Optional[str],
        query: str,
        variables: dict[str, Any],
    ) -> None:
        lines = [
            f"{self._label('Endpoint:')} {endpoint}",
            f"{self._label('Auth:')} {auth}",
        ]
        if operation:
            lines.append(f"{self._label('Operation:')} {operation}")
        lines.append(self._label("Query:"))
        lines.append(query.rstrip("\n"))
        lines.append(self._label("Variables:"))
        lines.append(format_json(variables))
        for line in lines:
            click.echo(line, err=True)

    def confirm(self, prompt: str) -> bool:
        try:
            return click.confirm(prompt, default=False, err=True)
        except click.Abort:
            # EOF or Ctrl-C at the prompt counts as "no"
            click.echo(err=True)
            return False

    def warn(self, message: str) -> None:
        click.echo(f"{TOOL_NAME}: warning: {message}", err=True)

    def info(self, message: str) -> None:
        if self.verbose:
            click.echo(message, err=True)


def style_markdown(markdown: str) -> str:
    """Apply ANSI styles to the Markdown produced by the doc renderer."""
    lines = markdown.splitlines()
    styled = []
    for i, line in enumerate(lines):
        next_line = lines[i + 1] if i + 1 < len(lines) else ""
        if line.startswith("# "):
            styled.append(click.style(line[2:], fg="cyan", bold=True, underline=True))
        elif line.startswith("## "):
            styled.append(click.style(line[3:], fg="cyan", bold=True))
        elif _SEPARATOR_ROW.match(line):
            styled.append(click.style(line, dim=True))
        elif line.startswith("|") and _SEPARATOR_ROW.match(next_line):
            styled.append(click.style(line, bold=True))
        elif _ITALIC_LINE.match(line):
            styled.append(click.style(line, italic=True))
        else:
            styled.append(line)
    return "\n".join(styled)


class TerminalPresenter(PlainPresenter):
    """ANSI styled output for interactive terminals."""

    def show_markdown(self, markdown: str) -> None:
        click.echo(style_markdown(markdown.rstrip("\n")))

    def _label(self, text: str) -> str:
        return click.style(text, fg="yellow", bold=True)

    def warn(self, message: str) -> None:
        click.echo(click.style(f"{TOOL_NAME}: warning: {message}", fg="yellow"), err=True)


def select_presenter(verbose: bool = False) -> Presenter:
    """Pick the terminal presenter for a TTY without NO_COLOR, else plain."""
    if sys.stdout.isatty() and not os.environ.get("NO_COLOR"):
        return TerminalPresenter(verbose=verbose)
    return PlainPresenter(verbose=verbose)
