"""Fallback-capture wrappers for fields whose shape varies across versions.

Both types first try to validate the value as `T`; when that fails they
keep the raw decoded value verbatim instead of failing the document, and
encode it back unchanged. They never raise on decode.

The `T` trial is strict: `"2"` is not an int and `"true"` is not a bool,
so a value only becomes an item when it encodes back to exactly what was
decoded. Anything pydantic would merely coerce is kept raw.
"""

import json
from typing import Any, Generic, Optional, TypeVar, get_args

from pydantic import GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError, PydanticSerializationUnexpectedValue, core_schema

from asyncapi_types.kernel.base import pass_through_instances, shape_label

T = TypeVar("T")

_ITEM = "item"
_UNKNOWN = "unknown"
_EMPTY = "empty"


def _strict_item(item_type: Any):
    """Wrap validator that accepts a document value only if it is exactly a `T`.

    Document trees are JSON-shaped, so they are checked with pydantic's
    strict JSON rules (enum members by value, no str/number/bool coercion).
    Python objects that have no JSON form (models built in code) go
    through the normal validator.
    """
    adapter: Optional[TypeAdapter] = None

    def validate(value: Any, handler: core_schema.ValidatorFunctionWrapHandler) -> Any:
        nonlocal adapter
        try:
            text = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError):
            return handler(value)
        if adapter is None:
            adapter = TypeAdapter(item_type)
        try:
            return adapter.validate_json(text, strict=True)
        except ValidationError as e:
            raise PydanticCustomError(
                "inexact_item",
                "Value is not an exact {type} ({count} error(s))",
                {"type": getattr(item_type, "__name__", str(item_type)), "count": e.error_count()},
            ) from e

    return validate


class _VariantBase(Generic[T]):
    __slots__ = ("_state", "_value")

    _states: tuple = (_ITEM, _UNKNOWN)

    def __init__(self, state: str, value: Any = None):
        if state not in self._states:
            raise ValueError(f"{type(self).__name__} has no '{state}' state")
        self._state = state
        self._value = value

    @classmethod
    def from_item(cls, value: T):
        return cls(_ITEM, value)

    @classmethod
    def from_unknown(cls, raw: Any):
        return cls(_UNKNOWN, raw)

    @property
    def is_item(self) -> bool:
        return self._state == _ITEM

    @property
    def is_unknown(self) -> bool:
        return self._state == _UNKNOWN

    def as_item(self) -> Optional[T]:
        return self._value if self._state == _ITEM else None

    def as_unknown(self) -> Any:
        """The raw captured value (None unless in the unknown state)."""
        return self._value if self._state == _UNKNOWN else None

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state == other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._state, repr(self._value)))

    def __repr__(self) -> str:
        if self._state == _EMPTY:
            return f"{type(self).__name__}.empty()"
        return f"{type(self).__name__}({self._state}={self._value!r})"

    @classmethod
    def _choices(cls, item_type: Any, item_schema: core_schema.CoreSchema) -> list:
        strict_item = core_schema.no_info_wrap_validator_function(_strict_item(item_type), item_schema)
        return [
            (core_schema.no_info_after_validator_function(cls.from_item, strict_item), shape_label(_ITEM)),
            (
                core_schema.no_info_after_validator_function(cls.from_unknown, core_schema.any_schema()),
                shape_label(_UNKNOWN),
            ),
        ]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_type = args[0] if args else Any
        item_schema = handler.generate_schema(item_type)
        document_schema = core_schema.union_schema(cls._choices(item_type, item_schema), mode="left_to_right")

        def serialize(value: Any, nxt: core_schema.SerializerFunctionWrapHandler) -> Any:
            if value is None:
                # Field default on an unset field
                return None
            if not isinstance(value, cls):
                raise PydanticSerializationUnexpectedValue(f"Expected {cls.__name__}, got {type(value).__name__}")
            if value.is_item:
                return nxt(value.as_item())
            # Unknown values are emitted verbatim; empty is null
            return value._value

        return core_schema.json_or_python_schema(
            json_schema=document_schema,
            python_schema=core_schema.no_info_wrap_validator_function(pass_through_instances(cls), document_schema),
            serialization=core_schema.wrap_serializer_function_ser_schema(serialize, schema=item_schema),
        )


class VariantOrUnknown(_VariantBase[T]):
    """Either a valid `T` or whatever raw value the document held instead."""

    __slots__ = ()


class VariantOrUnknownOrEmpty(_VariantBase[T]):
    """Like VariantOrUnknown, plus an explicit `null` as a third state.

    An absent field is modelled by the containing field being unset, so
    absent, `null` and unknown stay distinguishable.
    """

    __slots__ = ()

    _states = (_ITEM, _UNKNOWN, _EMPTY)

    @classmethod
    def empty(cls) -> "VariantOrUnknownOrEmpty[T]":
        return cls(_EMPTY)

    @property
    def is_empty(self) -> bool:
        return self._state == _EMPTY

    @classmethod
    def _choices(cls, item_type: Any, item_schema: core_schema.CoreSchema) -> list:
        item, unknown = super()._choices(item_type, item_schema)
        empty = (
            core_schema.no_info_after_validator_function(lambda _: cls.empty(), core_schema.none_schema()),
            shape_label(_EMPTY),
        )
        return [item, empty, unknown]
