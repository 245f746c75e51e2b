"""Exception types raised by asyncapi_types."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from asyncapi_types.codes import ValidationCode
from asyncapi_types.kernel.base import is_shape_label


def _surviving_branches(errors: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep only the errors of the trial that got furthest at each shape-discriminated union.

    A union that fails reports every trial, e.g. both "not a `$ref`" and
    "missing `name`". The trial whose errors reach deepest into the
    document is the one the author meant; ties go to the later trial.
    """
    reach: Dict[Tuple, Dict[str, Tuple[int, int]]] = {}
    for index, err in enumerate(errors):
        loc = tuple(err["loc"])
        for position, segment in enumerate(loc):
            if is_shape_label(segment):
                labels = reach.setdefault(loc[:position], {})
                depth, _ = labels.get(segment, (0, -1))
                labels[segment] = (max(depth, len(loc)), index)

    def survives(loc: Tuple) -> bool:
        for position, segment in enumerate(loc):
            if is_shape_label(segment):
                labels = reach[loc[:position]]
                if segment != max(labels, key=labels.get):
                    return False
        return True

    return [err for err in errors if survives(tuple(err["loc"]))]


def document_location(loc: Sequence[Any]) -> Tuple:
    """A pydantic error location with the union trial labels removed."""
    return tuple(segment for segment in loc if not is_shape_label(segment))


class AsyncAPIError(Exception):
    """Base class for all asyncapi_types errors."""

    def __init__(self, code: ValidationCode, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code.value}] {message}")


class DocumentParseError(AsyncAPIError, ValueError):
    """A document could not be decoded.

    There is no partial-success mode: one terminal error per document,
    carrying every located failure pydantic reported.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[Dict[str, Any]]] = None,
        code: ValidationCode = ValidationCode.INVALID_STRUCTURE,
    ):
        self.errors = errors or []
        super().__init__(code, message)

    @classmethod
    def from_validation_error(cls, exc: ValidationError, what: str = "document") -> "DocumentParseError":
        from asyncapi_types.kernel.pointer import format_pointer

        located: List[Dict[str, Any]] = []
        depths: List[int] = []
        for err in _surviving_branches(exc.errors()):
            loc = document_location(err["loc"])
            entry = {"loc": format_pointer(loc), "msg": err["msg"], "type": err["type"]}
            if entry in located:
                continue
            located.append(entry)
            depths.append(len(loc))

        if not located:
            return cls(f"Invalid {what} structure", errors=located)
        # Deepest location names the field that actually failed
        primary = located[depths.index(max(depths))]
        message = f"Invalid {what} structure at {primary['loc']}: {primary['msg']}"
        if len(located) > 1:
            message += f" (and {len(located) - 1} more)"
        return cls(message, errors=located)


class ReferenceResolutionError(AsyncAPIError, LookupError):
    """A `$ref` pointer could not be turned into a value."""

    code_for_kind = ValidationCode.UNRESOLVED_REFERENCE

    def __init__(self, pointer: str, message: str):
        self.pointer = pointer
        super().__init__(self.code_for_kind, message)


class UnresolvedReferenceError(ReferenceResolutionError):
    """The pointer names a location that does not exist or has the wrong type."""


class CircularReferenceError(ReferenceResolutionError):
    """Following the pointer leads back to a pointer already visited."""

    code_for_kind = ValidationCode.CIRCULAR_REFERENCE

    def __init__(self, pointer: str, chain: List[str]):
        self.chain = chain
        super().__init__(pointer, f"Circular $ref: {' -> '.join(chain + [pointer])}")


class ExternalReferenceError(ReferenceResolutionError):
    """The pointer targets another document; only local fragments are supported."""

    code_for_kind = ValidationCode.EXTERNAL_REFERENCE
