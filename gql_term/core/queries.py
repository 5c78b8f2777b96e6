"""Pure lookups over a parsed Schema."""

from typing import Iterable, Optional, Union

from .schema import FieldDef, FullType, InputValue, Schema, TypeKind, TypeRef

META_PREFIX = "__"


def _sorted_unique(names: Iterable[str]) -> list[str]:
    return sorted(set(names))


def list_types(schema: Schema) -> list[str]:
    """Return type names, sorted and unique, without the __ meta types."""
    return _sorted_unique(
        t.name for t in schema.types if not t.name.startswith(META_PREFIX)
    )


def list_queries(schema: Schema) -> list[str]:
    """Return the names of the query root fields, sorted and unique."""
    if schema.query_type is None:
        return []
    return _sorted_unique(f.name for f in schema.query_type.fields)


def list_mutations(schema: Schema) -> list[str]:
    """Return the names of the mutation root fields, sorted and unique."""
    if schema.mutation_type is None:
        return []
    return _sorted_unique(f.name for f in schema.mutation_type.fields)


def resolve_type_string(target: Union[TypeRef, FieldDef, InputValue]) -> str:
    """Return a readable type string for a field, argument or type reference.

    Named types are returned as is. LIST becomes "List of X" and NON_NULL
    becomes "X (required)", where X is the name one level down. Only one
    level is unwrapped: for ``[Foo!]!`` the inner reference is itself a
    wrapper, so its kind is shown ("LIST (required)").
    """
    ref = target.type if isinstance(target, (FieldDef, InputValue)) else target

    if ref.name is not None:
        return ref.name

    inner = ref.of_type
    if inner is None:
        inner_name = "?"
    elif inner.name is not None:
        inner_name = inner.name
    else:
        inner_name = inner.kind.value if inner.kind else "?"

    if ref.kind == TypeKind.LIST:
        return f"List of {inner_name}"
    if ref.kind == TypeKind.NON_NULL:
        return f"{inner_name} (required)"
    return inner_name


def find_type(schema: Schema, name: str) -> Optional[FullType]:
    for t in schema.types:
        if t.name == name:
            return t
    return None


def _find_field(fields: list[FieldDef], name: str) -> Optional[FieldDef]:
    for f in fields:
        if f.name == name:
            return f
    return None


def find_query(schema: Schema, name: str) -> Optional[FieldDef]:
    if schema.query_type is None:
        return None
    return _find_field(schema.query_type.fields, name)


def find_mutation(schema: Schema, name: str) -> Optional[FieldDef]:
    if schema.mutation_type is None:
        return None
    return _find_field(schema.mutation_type.fields, name)
