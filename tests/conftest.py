"""Shared fixtures: a small introspection result and a recording presenter."""

import copy

import pytest

from gql_term.core.schema import Schema


def named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(ref):
    return {"kind": "NON_NULL", "name": None, "ofType": ref}


def list_of(ref):
    return {"kind": "LIST", "name": None, "ofType": ref}


def field(name, type_ref, description=None, args=None):
    return {
        "name": name,
        "description": description,
        "args": args or [],
        "type": type_ref,
    }


def input_value(name, type_ref, description=None, default=None):
    return {
        "name": name,
        "description": description,
        "type": type_ref,
        "defaultValue": default,
    }


def full_type(kind, name, description=None, fields=None, input_fields=None,
              interfaces=None, enum_values=None, possible_types=None):
    return {
        "kind": kind,
        "name": name,
        "description": description,
        "fields": fields,
        "inputFields": input_fields,
        "interfaces": interfaces,
        "enumValues": enum_values,
        "possibleTypes": possible_types,
    }


STRING = named("SCALAR", "String")
ID = named("SCALAR", "ID")

QUERY_FIELDS = [
    field("widget", named("OBJECT", "Widget"), "Fetch one widget.",
          args=[input_value("id", non_null(ID))]),
    field("ping", STRING),
    field("widgets", list_of(named("OBJECT", "Widget"))),
]

MUTATION_FIELDS = [
    field("login", named("OBJECT", "Session"), "Log in.\nReturns a session.",
          args=[input_value("input", non_null(named("INPUT_OBJECT", "LoginInput")))]),
]

SCHEMA_DOCUMENT = {
    "data": {
        "__schema": {
            "queryType": {"name": "Query", "fields": QUERY_FIELDS},
            "mutationType": {"name": "Mutation", "fields": MUTATION_FIELDS},
            "types": [
                full_type("OBJECT", "Query", fields=QUERY_FIELDS, interfaces=[]),
                full_type("OBJECT", "Mutation", fields=MUTATION_FIELDS, interfaces=[]),
                full_type(
                    "OBJECT", "Widget", "A widget.",
                    fields=[
                        field("id", non_null(ID)),
                        field("name", STRING, "Display name | short"),
                        field("tags", list_of(STRING)),
                    ],
                    interfaces=[named("INTERFACE", "Node")],
                ),
                full_type(
                    "INPUT_OBJECT", "LoginInput",
                    input_fields=[
                        input_value("user", non_null(STRING)),
                        input_value("password", non_null(STRING), "Plain text."),
                    ],
                ),
                full_type(
                    "OBJECT", "Session",
                    fields=[field("token", STRING, "Session token.")],
                    interfaces=[],
                ),
                full_type(
                    "ENUM", "Color",
                    enum_values=[
                        {"name": "RED", "description": None},
                        {"name": "BLUE", "description": "Blue."},
                    ],
                ),
                full_type(
                    "INTERFACE", "Node",
                    fields=[field("id", non_null(ID))],
                    possible_types=[named("OBJECT", "Widget")],
                ),
                full_type("SCALAR", "String"),
                full_type("SCALAR", "ID"),
                full_type("OBJECT", "__Schema", fields=[]),
                full_type("OBJECT", "__Type", fields=[]),
            ],
        }
    }
}


@pytest.fixture
def schema_document():
    """A full introspection response, safe to mutate."""
    return copy.deepcopy(SCHEMA_DOCUMENT)


@pytest.fixture
def schema(schema_document):
    return Schema.from_document(schema_document)


class RecordingPresenter:
    """Presenter that records output instead of printing it."""

    def __init__(self, answer: bool = False):
        self.answer = answer
        self.json = []
        self.texts = []
        self.lines = []
        self.markdown = []
        self.previews = []
        self.prompts = []
        self.warnings = []
        self.infos = []

    def show_json(self, data):
        self.json.append(data)

    def show_text(self, text):
        self.texts.append(text)

    def show_lines(self, lines):
        self.lines.append(list(lines))

    def show_markdown(self, markdown):
        self.markdown.append(markdown)

    def preview(self, *, endpoint, auth, operation, query, variables):
        self.previews.append({
            "endpoint": endpoint,
            "auth": auth,
            "operation": operation,
            "query": query,
            "variables": variables,
        })

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.answer

    def warn(self, message):
        self.warnings.append(message)

    def info(self, message):
        self.infos.append(message)


@pytest.fixture
def presenter():
    return RecordingPresenter()
