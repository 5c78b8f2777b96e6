"""Tests for the Markdown documentation renderer."""

import pytest

from gql_term.core.docs import DocRenderer, md_cell


@pytest.fixture
def renderer():
    return DocRenderer()


class TestMdCell:
    """Tests for md_cell."""

    def test_placeholder(self):
        assert md_cell(None) == "-"
        assert md_cell("") == "-"

    def test_newlines_become_line_breaks(self):
        assert md_cell("first\nsecond") == "first<br>second"

    def test_pipes_escaped(self):
        assert md_cell("a | b") == "a \\| b"


class TestRenderType:
    """Tests for DocRenderer.render_type."""

    def test_exact_layout(self, renderer, schema):
        result = renderer.render_type("Session", schema)
        assert result.found
        assert result.markdown == (
            "# Session (OBJECT)\n"
            "\n"
            "## Input\n"
            "\n"
            "_None_\n"
            "\n"
            "## Output\n"
            "\n"
            "| Name | Type | Description |\n"
            "| --- | --- | --- |\n"
            "| token | String | Session token. |\n"
        )

    def test_object_type(self, renderer, schema):
        markdown = renderer.render_type("Widget", schema).markdown
        assert markdown.startswith("# Widget (OBJECT)\n\n_A widget._\n")
        assert "Implements: Node" in markdown
        assert "## Input\n\n_None_\n" in markdown
        assert "| id | ID (required) | - |" in markdown
        assert "| name | String | Display name \\| short |" in markdown
        assert "| tags | List of String | - |" in markdown

    def test_field_order_follows_schema(self, renderer, schema):
        markdown = renderer.render_type("Widget", schema).markdown
        assert markdown.index("| id |") < markdown.index("| name |") < markdown.index("| tags |")

    def test_input_type(self, renderer, schema):
        markdown = renderer.render_type("LoginInput", schema).markdown
        assert "# LoginInput (INPUT_OBJECT)" in markdown
        assert "| user | String (required) | - |" in markdown
        assert "| password | String (required) | Plain text. |" in markdown
        assert markdown.endswith("## Output\n\n_None_\n")

    def test_enum_values(self, renderer, schema):
        markdown = renderer.render_type("Color", schema).markdown
        assert "## Values" in markdown
        assert "| RED | - |" in markdown
        assert "| BLUE | Blue. |" in markdown

    def test_possible_types(self, renderer, schema):
        markdown = renderer.render_type("Node", schema).markdown
        assert "## Possible types\n\n- Widget\n" in markdown

    def test_not_found(self, renderer, schema):
        result = renderer.render_type("Gadget", schema)
        assert not result.found
        assert result.markdown == "# Gadget (type)\n\n_Not found_\n"

    def test_lookup_is_exact(self, renderer, schema):
        assert not renderer.render_type("widget", schema).found


class TestRenderOperations:
    """Tests for render_query and render_mutation."""

    def test_query(self, renderer, schema):
        result = renderer.render_query("widget", schema)
        assert result.found
        markdown = result.markdown
        assert markdown.startswith("# widget (query)\n\n_Fetch one widget._\n")
        assert "## Arguments\n\n| Name | Type | Description |" in markdown
        assert "| id | ID (required) | - |" in markdown
        assert "## Returns `Widget`" in markdown
        assert "| tags | List of String | - |" in markdown

    def test_query_without_arguments(self, renderer, schema):
        markdown = renderer.render_query("ping", schema).markdown
        assert "## Arguments\n\n_None_\n" in markdown
        assert markdown.endswith("## Returns `String`\n\n_None_\n")

    def test_list_return_type(self, renderer, schema):
        markdown = renderer.render_query("widgets", schema).markdown
        assert "## Returns `List of Widget`" in markdown
        assert "| name | String | Display name \\| short |" in markdown

    def test_mutation(self, renderer, schema):
        markdown = renderer.render_mutation("login", schema).markdown
        assert markdown.startswith("# login (mutation)\n\n_Log in.<br>Returns a session._\n")
        assert "| input | LoginInput (required) | - |" in markdown
        assert "## Returns `Session`" in markdown
        assert "| token | String | Session token. |" in markdown

    def test_query_not_found(self, renderer, schema):
        result = renderer.render_query("login", schema)
        assert not result.found
        assert "_Not found_" in result.markdown

    def test_mutation_not_found(self, renderer, schema):
        assert not renderer.render_mutation("ping", schema).found


class TestGetDocs:
    """Tests for the type, query, mutation fallthrough."""

    def test_type_first(self, renderer, schema):
        result = renderer.get_docs("Widget", schema)
        assert result.markdown.startswith("# Widget (OBJECT)")

    def test_falls_through_to_query(self, renderer, schema):
        result = renderer.get_docs("ping", schema)
        assert result.found
        assert result.markdown.startswith("# ping (query)")
        assert "_Not found_" not in result.markdown

    def test_falls_through_to_mutation(self, renderer, schema):
        result = renderer.get_docs("login", schema)
        assert result.found
        assert result.markdown.startswith("# login (mutation)")

    def test_nothing_found_reports_type(self, renderer, schema):
        result = renderer.get_docs("Nope", schema)
        assert not result.found
        assert result.markdown == "# Nope (type)\n\n_Not found_\n"


class TestCustomTemplates:
    """Tests for user template overrides."""

    def test_user_template_wins(self, tmp_path, schema):
        (tmp_path / "type.md.j2").write_text("custom {{ name }} {{ kind }}\n")
        renderer = DocRenderer(template_dir=tmp_path)

        assert renderer.render_type("Widget", schema).markdown == "custom Widget OBJECT\n"
        # Templates that are not overridden still come from the package
        assert renderer.render_query("ping", schema).markdown.startswith("# ping (query)")

    def test_missing_template_dir_ignored(self, tmp_path, schema):
        renderer = DocRenderer(template_dir=tmp_path / "missing")
        assert renderer.render_type("Widget", schema).found
