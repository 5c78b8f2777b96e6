"""Markdown documentation for types, queries and mutations.

Renders Jinja2 templates from the package's ``templates`` directory.

Custom templates can be supplied via the template_dir parameter:
    renderer = DocRenderer(template_dir="~/.config/graphql/templates")

Template lookup order:
1. User's template directory (if provided)
2. Package default templates

Available templates to override:
    - type.md.j2 — object, input, enum, interface and union types
    - operation.md.j2 — queries and mutations
    - not_found.md.j2 — lookups with no match
    - _table.md.j2 — the field table macros
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .queries import find_mutation, find_query, find_type, resolve_type_string
from .schema import FieldDef, InputValue, Schema


@dataclass(frozen=True)
class DocResult:
    """Rendered Markdown and whether the lookup succeeded."""
    markdown: str
    found: bool


@dataclass(frozen=True)
class FieldRow:
    name: str
    type: str
    description: str


def md_cell(text: Optional[str], placeholder: str = "-") -> str:
    """Make text safe for a single Markdown table cell."""
    if not text:
        return placeholder
    text = text.strip().replace("\r\n", "\n").replace("|", "\\|")
    return text.replace("\n", "<br>")


def field_rows(fields: list[Union[FieldDef, InputValue]]) -> list[FieldRow]:
    """Build table rows in schema order."""
    return [
        FieldRow(
            name=f.name,
            type=resolve_type_string(f),
            description=md_cell(f.description),
        )
        for f in fields
    ]


class DocRenderer:
    """Renders documentation units from a parsed Schema."""

    def __init__(self, template_dir: Optional[Union[str, Path]] = None):
        """Initialize the renderer.

        Args:
            template_dir: Optional directory with custom Jinja2 templates.
                          Templates here override the built-in templates.
        """
        loaders = []
        if template_dir:
            template_path = Path(template_dir).expanduser()
            if template_path.is_dir():
                loaders.append(FileSystemLoader(str(template_path)))
        loaders.append(PackageLoader("gql_term", "templates"))

        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _render(self, template: str, **context) -> str:
        markdown = self.env.get_template(template).render(**context)
        return markdown.rstrip() + "\n"

    def _not_found(self, name: str, label: str) -> DocResult:
        return DocResult(self._render("not_found.md.j2", name=name, label=label), found=False)

    def render_type(self, name: str, schema: Schema) -> DocResult:
        """Render a type with its input fields and output fields."""
        gql_type = find_type(schema, name)
        if gql_type is None:
            return self._not_found(name, "type")

        markdown = self._render(
            "type.md.j2",
            name=gql_type.name,
            kind=gql_type.kind.value,
            description=md_cell(gql_type.description, placeholder=""),
            interfaces=[ref.named_type for ref in gql_type.interfaces if ref.named_type],
            inputs=field_rows(gql_type.input_fields),
            outputs=field_rows(gql_type.fields),
            enum_values=[
                FieldRow(name=v.name, type="", description=md_cell(v.description))
                for v in gql_type.enum_values
            ],
            possible_types=[ref.named_type for ref in gql_type.possible_types if ref.named_type],
        )
        return DocResult(markdown, found=True)

    def _render_operation(self, field: FieldDef, operation: str, schema: Schema) -> DocResult:
        return_name = field.type.named_type
        return_type = find_type(schema, return_name) if return_name else None
        markdown = self._render(
            "operation.md.j2",
            name=field.name,
            operation=operation,
            description=md_cell(field.description, placeholder=""),
            arguments=field_rows(field.args),
            returns=resolve_type_string(field),
            return_fields=field_rows(return_type.fields) if return_type else [],
        )
        return DocResult(markdown, found=True)

    def render_query(self, name: str, schema: Schema) -> DocResult:
        """Render a query with its arguments and the fields it returns."""
        field = find_query(schema, name)
        if field is None:
            return self._not_found(name, "query")
        return self._render_operation(field, "query", schema)

    def render_mutation(self, name: str, schema: Schema) -> DocResult:
        """Render a mutation with its arguments and the fields it returns."""
        field = find_mutation(schema, name)
        if field is None:
            return self._not_found(name, "mutation")
        return self._render_operation(field, "mutation", schema)

    def get_docs(self, term: str, schema: Schema) -> DocResult:
        """Try a type, then a query, then a mutation named ``term``.

        If nothing matches, the type's not-found document is returned.
        """
        first = self.render_type(term, schema)
        if first.found:
            return first
        for render in (self.render_query, self.render_mutation):
            result = render(term, schema)
            if result.found:
                return result
        return first
