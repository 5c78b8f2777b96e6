"""Models of a GraphQL introspection result.

These pydantic models mirror the shape returned by the introspection query
in ``introspection.py``. Parsing validates that shape; any mismatch raises
MalformedSchemaError instead of failing later during a lookup.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import MalformedSchemaError


class TypeKind(str, Enum):
    """The __TypeKind enum of the introspection system."""
    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapper(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


class _IntrospectionModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TypeRef(_IntrospectionModel):
    """A possibly wrapped reference to a named type.

    Wrappers (LIST, NON_NULL) have no name and point at ``of_type``. The
    introspection query only goes two levels deep, so the innermost
    wrapper may have no ``of_type``.
    """
    kind: Optional[TypeKind] = None
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = Field(default=None, alias="ofType")

    @model_validator(mode="after")
    def _check_wrapping(self) -> "TypeRef":
        if self.kind is not None and self.kind.is_wrapper:
            if self.name is not None:
                raise ValueError(f"{self.kind.value} type reference must not have a name")
        elif self.name is None:
            raise ValueError("named type reference is missing its name")
        return self

    @property
    def named_type(self) -> Optional[str]:
        """Innermost type name reachable within the fetched depth."""
        ref: Optional[TypeRef] = self
        while ref is not None:
            if ref.name is not None:
                return ref.name
            ref = ref.of_type
        return None


class InputValue(_IntrospectionModel):
    """An argument or input object field."""
    name: str
    description: Optional[str] = None
    type: TypeRef
    default_value: Optional[str] = Field(default=None, alias="defaultValue")


class FieldDef(_IntrospectionModel):
    """A field of an object type, interface or root operation type."""
    name: str
    description: Optional[str] = None
    args: list[InputValue] = Field(default_factory=list)
    type: TypeRef

    @field_validator("args", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class EnumValue(_IntrospectionModel):
    name: str
    description: Optional[str] = None


class FullType(_IntrospectionModel):
    """One entry of ``__schema.types``."""
    kind: TypeKind
    name: str
    description: Optional[str] = None
    fields: list[FieldDef] = Field(default_factory=list)
    input_fields: list[InputValue] = Field(default_factory=list, alias="inputFields")
    interfaces: list[TypeRef] = Field(default_factory=list)
    enum_values: list[EnumValue] = Field(default_factory=list, alias="enumValues")
    possible_types: list[TypeRef] = Field(default_factory=list, alias="possibleTypes")

    @field_validator(
        "fields", "input_fields", "interfaces", "enum_values", "possible_types",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value):
        # The server sends null for lists that do not apply to the kind
        return [] if value is None else value


class RootType(_IntrospectionModel):
    """``queryType`` / ``mutationType`` with their operation fields."""
    name: Optional[str] = None
    fields: list[FieldDef] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value


class Schema(_IntrospectionModel):
    """The ``__schema`` object of an introspection result."""
    query_type: Optional[RootType] = Field(default=None, alias="queryType")
    mutation_type: Optional[RootType] = Field(default=None, alias="mutationType")
    types: list[FullType] = Field(default_factory=list)

    @field_validator("types", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    @classmethod
    def from_document(cls, document: Any) -> "Schema":
        """Validate a full introspection response (``{"data": {"__schema": ...}}``).

        A bare ``__schema`` object is accepted too.

        Raises:
            MalformedSchemaError: If the document is not an introspection result
        """
        if not isinstance(document, dict):
            raise MalformedSchemaError("introspection result is not a JSON object")

        if "__schema" in document:
            raw = document["__schema"]
        else:
            data = document.get("data")
            if not isinstance(data, dict) or not isinstance(data.get("__schema"), dict):
                errors = document.get("errors")
                if errors:
                    messages = "; ".join(
                        e.get("message", str(e)) if isinstance(e, dict) else str(e)
                        for e in errors
                    )
                    raise MalformedSchemaError(f"introspection failed: {messages}")
                raise MalformedSchemaError("introspection result has no data.__schema")
            raw = data["__schema"]

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(p) for p in first["loc"])
            raise MalformedSchemaError(
                f"malformed schema at {location or '__schema'}: {first['msg']}"
            ) from e
