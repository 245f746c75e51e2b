"""Shared base model: camelCase aliases and the extension bag."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import core_schema


def shape_label(name: str) -> str:
    """Label for one trial of a shape-discriminated union, as it appears in error locations."""
    return f"<{name}>"


def is_shape_label(segment: Any) -> bool:
    return isinstance(segment, str) and segment.startswith("<") and segment.endswith(">")


def pass_through_instances(cls: type):
    """Wrap validator for a wrapper's python input: existing `cls` instances are kept as they are."""

    def validate(value: Any, handler: core_schema.ValidatorFunctionWrapHandler) -> Any:
        if isinstance(value, cls):
            return value
        return handler(value)

    return validate


class AsyncAPIModel(BaseModel):
    """Base class of every AsyncAPI object.

    Unknown document keys (`x-...` specification extensions, and anything
    newer than this model) are kept in `model_extra`, in insertion order,
    and re-emitted flattened into the same object on encode.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        extra="allow",  # Extension bag
    )

    @property
    def extensions(self) -> Dict[str, Any]:
        """Fields not declared on this model, in document order."""
        return self.model_extra if self.model_extra is not None else {}

    @classmethod
    def from_document(cls, data: Any):
        """Decode a structured-value tree (already parsed JSON or YAML)."""
        return cls.model_validate(data)

    def to_document(self) -> Dict[str, Any]:
        """Encode to a JSON-compatible structured-value tree.

        Only fields that were present on input (or explicitly set) are
        emitted, so an absent field stays absent and an explicit null
        stays null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
