"""VecOrSingle[T]: a document value that is either one `T` or a list of `T`."""

from typing import Any, Generic, List, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticSerializationUnexpectedValue, core_schema

from asyncapi_types.kernel.base import pass_through_instances, shape_label

T = TypeVar("T")


class VecOrSingle(Generic[T]):
    """Keeps track of which shape the document used so it encodes back the same.

    Trial order: a list of `T` first, then a single `T`.
    """

    __slots__ = ("_values", "_is_list")

    def __init__(self, values: List[T], is_list: bool):
        if not is_list and len(values) != 1:
            raise ValueError("A single-valued VecOrSingle holds exactly one value")
        self._values = list(values)
        self._is_list = is_list

    @classmethod
    def from_list(cls, values: List[T]) -> "VecOrSingle[T]":
        return cls(values, is_list=True)

    @classmethod
    def from_single(cls, value: T) -> "VecOrSingle[T]":
        return cls([value], is_list=False)

    @property
    def is_list(self) -> bool:
        return self._is_list

    def as_list(self) -> List[T]:
        return list(self._values)

    def as_single(self) -> Optional[T]:
        return None if self._is_list else self._values[0]

    def __iter__(self):
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecOrSingle):
            return NotImplemented
        return self._is_list == other._is_list and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._is_list, repr(self._values)))

    def __repr__(self) -> str:
        if self._is_list:
            return f"VecOrSingle.from_list({self._values!r})"
        return f"VecOrSingle.from_single({self._values[0]!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_schema = handler.generate_schema(args[0] if args else Any)
        list_schema = core_schema.list_schema(item_schema)

        document_schema = core_schema.union_schema(
            [
                (core_schema.no_info_after_validator_function(cls.from_list, list_schema), shape_label("list")),
                (core_schema.no_info_after_validator_function(cls.from_single, item_schema), shape_label("single")),
            ],
            mode="left_to_right",
        )

        def serialize(value: Any, nxt: core_schema.SerializerFunctionWrapHandler) -> Any:
            if not isinstance(value, VecOrSingle):
                raise PydanticSerializationUnexpectedValue(f"Expected VecOrSingle, got {type(value).__name__}")
            encoded = nxt(value.as_list())
            return encoded if value.is_list else encoded[0]

        return core_schema.json_or_python_schema(
            json_schema=document_schema,
            python_schema=core_schema.no_info_wrap_validator_function(pass_through_instances(cls), document_schema),
            serialization=core_schema.wrap_serializer_function_ser_schema(serialize, schema=list_schema),
        )
