"""Depth-first traversal of a decoded model tree."""

from typing import Any, Iterator, Tuple

from pydantic import BaseModel

from asyncapi_types.kernel.pointer import child_pointer
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknown, VariantOrUnknownOrEmpty
from asyncapi_types.kernel.vec_or_single import VecOrSingle
from asyncapi_types.model.channel import ChannelMessages


def field_aliases(model: BaseModel) -> dict:
    """Document key -> attribute name for a model's declared fields."""
    return {(field.alias or name): name for name, field in type(model).model_fields.items()}


def iter_nodes(node: Any, location: str = "#") -> Iterator[Tuple[str, Any]]:
    """Yield (location, node) for every node reachable through declared fields.

    Wrappers are yielded at the same location as the value they wrap.
    References are never followed and extension values are yielded but
    not descended into, so the walk terminates on any document.
    """
    yield location, node

    if isinstance(node, ReferenceOr):
        if node.is_item:
            yield from iter_nodes(node.as_item(), location)
    elif isinstance(node, (VariantOrUnknown, VariantOrUnknownOrEmpty)):
        if node.is_item:
            yield from iter_nodes(node.as_item(), location)
    elif isinstance(node, VecOrSingle):
        if node.is_list:
            for index, value in enumerate(node.as_list()):
                yield from iter_nodes(value, child_pointer(location, index))
        else:
            yield from iter_nodes(node.as_single(), location)
    elif isinstance(node, ChannelMessages):
        if node.is_mapping:
            for name, value in node.as_mapping().items():
                yield from iter_nodes(value, child_pointer(location, name))
        else:
            yield from iter_nodes(node.as_single(), location)
    elif isinstance(node, BaseModel):
        for key, name in field_aliases(node).items():
            value = getattr(node, name)
            if value is None:
                continue
            yield from iter_nodes(value, child_pointer(location, key))
        for key, value in (node.model_extra or {}).items():
            yield child_pointer(location, key), value
    elif isinstance(node, dict):
        for key, value in node.items():
            yield from iter_nodes(value, child_pointer(location, key))
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield from iter_nodes(value, child_pointer(location, index))
