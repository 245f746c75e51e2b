"""Reference resolution over a fully decoded document.

The model types never resolve anything themselves; this collaborator
takes a decoded root (normally an `AsyncAPI`) and turns `$ref` pointers
into the objects they name. Every chain of references is tracked, so
cyclic documents are reported instead of looping.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from asyncapi_types.codes import ValidationCode
from asyncapi_types.errors import (
    CircularReferenceError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)
from asyncapi_types.kernel.pointer import format_pointer, parse_pointer
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknown, VariantOrUnknownOrEmpty
from asyncapi_types.kernel.vec_or_single import VecOrSingle
from asyncapi_types.kernel.walk import field_aliases, iter_nodes
from asyncapi_types.model.channel import ChannelMessages

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_MISSING = object()

# RFC 6901 array index: ASCII digits, no leading zero
_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")


@dataclass(frozen=True)
class ReferenceIssue:
    """A reference that could not be resolved."""
    location: str  # Where the $ref appears
    pointer: str  # What it points to
    code: ValidationCode
    message: str


def _raw_reference(node: Any) -> Optional[str]:
    """The pointer of a raw `{"$ref": "..."}` mapping, else None."""
    if isinstance(node, dict) and len(node) == 1 and isinstance(node.get("$ref"), str):
        return node["$ref"]
    return None


class ReferenceResolver:
    """Resolves document-local pointers against one decoded root."""

    def __init__(self, root: BaseModel):
        self.root = root

    def lookup(self, pointer: str) -> Any:
        """Return the object stored at `pointer`.

        References met on the way are followed, so
        `#/channels/userSignup/messages/userSignedUp` works when
        `userSignup` is itself a `$ref` to a component channel.

        Raises:
            UnresolvedReferenceError: If any segment does not exist
            CircularReferenceError: If following intermediate references loops
            ExternalReferenceError: If the pointer is not document-local
        """
        return self._lookup(pointer, [pointer])

    def resolve(self, value: Any, expected: Optional[Type[M]] = None) -> Any:
        """Follow a ReferenceOr (or pointer string) to its concrete value.

        Args:
            value: A ReferenceOr, or a bare pointer string
            expected: Model type the target must be. Raw mappings found at
                the target (extension data, examples) are decoded into it.

        Returns:
            The inline item, or the object the reference chain ends at.
        """
        if isinstance(value, str):
            value = ReferenceOr.from_reference(value)

        chain: List[str] = []
        current = value
        while True:
            if isinstance(current, ReferenceOr):
                if current.is_item:
                    current = current.as_item()
                    continue
                pointer = current.as_reference()
            elif isinstance(current, (VariantOrUnknown, VariantOrUnknownOrEmpty)) and current.is_item:
                current = current.as_item()
                continue
            else:
                pointer = _raw_reference(current)
                if pointer is None:
                    break
            if pointer in chain:
                raise CircularReferenceError(pointer, chain)
            chain.append(pointer)
            logger.debug("Following $ref %s", pointer)
            current = self._lookup(pointer, list(chain))

        return self._coerce(current, expected, chain[-1] if chain else "#")

    def collect_references(self) -> List[Tuple[str, str]]:
        """Every (location, pointer) pair in the document, in document order."""
        return [
            (location, node.as_reference())
            for location, node in iter_nodes(self.root)
            if isinstance(node, ReferenceOr) and node.is_reference
        ]

    def check(self) -> List[ReferenceIssue]:
        """One issue per reference that does not resolve."""
        issues: List[ReferenceIssue] = []
        for location, pointer in self.collect_references():
            try:
                self.resolve(pointer)
            except ReferenceResolutionError as e:
                if e.code == ValidationCode.EXTERNAL_REFERENCE:
                    logger.debug("Skipping external $ref %s at %s", pointer, location)
                else:
                    logger.warning("Unresolvable $ref %s at %s: %s", pointer, location, e.message)
                issues.append(ReferenceIssue(
                    location=location,
                    pointer=pointer,
                    code=e.code,
                    message=e.message,
                ))
        return issues

    def _lookup(self, pointer: str, chain: List[str]) -> Any:
        tokens = parse_pointer(pointer)
        node: Any = self.root
        for index, token in enumerate(tokens):
            node = self._unwrap(node, chain)
            node = self._step(node, token)
            if node is _MISSING:
                where = format_pointer(tokens[:index])
                raise UnresolvedReferenceError(pointer, f"Unresolvable $ref {pointer}: no '{token}' under {where}")
        return node

    def _unwrap(self, node: Any, chain: List[str]) -> Any:
        """Strip wrappers until a container (model, mapping, list) is reached."""
        while True:
            if isinstance(node, ReferenceOr):
                if node.is_item:
                    node = node.as_item()
                    continue
                pointer = node.as_reference()
            elif isinstance(node, (VariantOrUnknown, VariantOrUnknownOrEmpty)):
                node = node.as_item() if node.is_item else node.as_unknown()
                continue
            elif isinstance(node, VecOrSingle):
                node = node.as_list() if node.is_list else node.as_single()
                continue
            elif isinstance(node, ChannelMessages):
                node = node.as_mapping() if node.is_mapping else node.as_single()
                continue
            else:
                pointer = _raw_reference(node)
                if pointer is None:
                    return node
            if pointer in chain:
                raise CircularReferenceError(pointer, chain)
            chain.append(pointer)
            logger.debug("Following intermediate $ref %s", pointer)
            node = self._lookup(pointer, chain)

    @staticmethod
    def _step(node: Any, token: str) -> Any:
        if isinstance(node, BaseModel):
            name = field_aliases(node).get(token)
            if name is not None:
                value = getattr(node, name)
                return _MISSING if value is None else value
            return (node.model_extra or {}).get(token, _MISSING)
        if isinstance(node, dict):
            return node.get(token, _MISSING)
        if isinstance(node, list):
            if _ARRAY_INDEX.fullmatch(token) and int(token) < len(node):
                return node[int(token)]
        return _MISSING

    @staticmethod
    def _coerce(target: Any, expected: Optional[Type[M]], pointer: str) -> Any:
        if expected is None or isinstance(target, expected):
            return target
        if isinstance(target, dict):
            try:
                return expected.model_validate(target)
            except ValidationError as e:
                raise UnresolvedReferenceError(
                    pointer, f"$ref {pointer} does not hold a valid {expected.__name__}: {e.error_count()} error(s)"
                ) from e
        raise UnresolvedReferenceError(
            pointer, f"$ref {pointer} points at {type(target).__name__}, expected {expected.__name__}"
        )
