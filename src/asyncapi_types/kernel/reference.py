"""ReferenceOr[T]: an inline value or a `$ref` pointer.

Which form a document object takes is decided by its shape, in a fixed
order:

1. an object with exactly one key, `$ref`, holding a string -> reference
2. anything that validates as `T` -> inline item

If neither matches, validation fails at the offending field. Resolution
(turning the pointer into a value) is deliberately not done here; see
`asyncapi_types.kernel.resolver`.
"""

from typing import Any, Generic, Optional, TypeVar, get_args

from pydantic import BaseModel, ConfigDict, Field, GetCoreSchemaHandler
from pydantic_core import PydanticSerializationUnexpectedValue, core_schema

from asyncapi_types.kernel.base import pass_through_instances, shape_label

T = TypeVar("T")


class Reference(BaseModel):
    """A Reference Object: `{"$ref": "#/components/messages/userSignedUp"}`."""

    ref: str = Field(alias="$ref")

    # Only the literal `$ref` key counts; any sibling key means "not a reference"
    model_config = ConfigDict(extra="forbid")


class ReferenceOr(Generic[T]):
    """Exactly one of a pointer string or an inline `T`."""

    __slots__ = ("_reference", "_item")

    def __init__(self, *, reference: Optional[str] = None, item: Optional[T] = None):
        if (reference is None) == (item is None):
            raise ValueError("ReferenceOr holds exactly one of 'reference' or 'item'")
        self._reference = reference
        self._item = item

    @classmethod
    def from_reference(cls, pointer: str) -> "ReferenceOr[T]":
        return cls(reference=pointer)

    @classmethod
    def from_item(cls, value: T) -> "ReferenceOr[T]":
        return cls(item=value)

    @property
    def is_reference(self) -> bool:
        return self._reference is not None

    @property
    def is_item(self) -> bool:
        return self._item is not None

    def as_item(self) -> Optional[T]:
        """The inline value, or None when this is a reference."""
        return self._item

    def as_reference(self) -> Optional[str]:
        """The pointer string, or None when this is an inline value."""
        return self._reference

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReferenceOr):
            return NotImplemented
        return self._reference == other._reference and self._item == other._item

    def __hash__(self) -> int:
        if self._reference is not None:
            return hash(("$ref", self._reference))
        return hash(("item", repr(self._item)))

    def __repr__(self) -> str:
        if self._reference is not None:
            return f"ReferenceOr(reference={self._reference!r})"
        return f"ReferenceOr(item={self._item!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_type = args[0] if args else Any
        item_schema = handler.generate_schema(item_type)

        reference_schema = core_schema.no_info_after_validator_function(
            lambda ref: cls(reference=ref.ref),
            handler.generate_schema(Reference),
        )
        inline_schema = core_schema.no_info_after_validator_function(
            lambda value: cls(item=value),
            item_schema,
        )
        document_schema = core_schema.union_schema(
            [(reference_schema, shape_label("reference")), (inline_schema, shape_label("item"))],
            mode="left_to_right",
        )

        def serialize(value: Any, nxt: core_schema.SerializerFunctionWrapHandler) -> Any:
            if not isinstance(value, ReferenceOr):
                raise PydanticSerializationUnexpectedValue(f"Expected ReferenceOr, got {type(value).__name__}")
            if value.is_reference:
                return {"$ref": value.as_reference()}
            return nxt(value.as_item())

        return core_schema.json_or_python_schema(
            json_schema=document_schema,
            python_schema=core_schema.no_info_wrap_validator_function(pass_through_instances(cls), document_schema),
            serialization=core_schema.wrap_serializer_function_ser_schema(serialize, schema=item_schema),
        )
