"""asyncapi_types: typed AsyncAPI documents that round-trip losslessly."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("asyncapi-types")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
# Note: validate is exported from asyncapi_types.api, not redefined here
from asyncapi_types.api import (
    RoundTripResult,
    ValidationIssue,
    ValidationResult,
    check_round_trip,
    dump_document,
    load_document,
    parse_document,
    validate,
    write_document,
)
from asyncapi_types.codes import ValidationCode
from asyncapi_types.errors import (
    AsyncAPIError,
    CircularReferenceError,
    DocumentParseError,
    ExternalReferenceError,
    ReferenceResolutionError,
    UnresolvedReferenceError,
)
from asyncapi_types.kernel import (
    AsyncAPIModel,
    Reference,
    ReferenceOr,
    VariantOrUnknown,
    VariantOrUnknownOrEmpty,
    VecOrSingle,
)
from asyncapi_types.kernel.resolver import ReferenceResolver
from asyncapi_types.model import AsyncAPI, Channel, ChannelMessages, Message, Operation, Schema

__all__ = [
    "__version__",
    "load_document",
    "parse_document",
    "dump_document",
    "write_document",
    "check_round_trip",
    "validate",
    "RoundTripResult",
    "ValidationIssue",
    "ValidationResult",
    "ValidationCode",
    "AsyncAPIError",
    "DocumentParseError",
    "ReferenceResolutionError",
    "UnresolvedReferenceError",
    "CircularReferenceError",
    "ExternalReferenceError",
    "AsyncAPIModel",
    "Reference",
    "ReferenceOr",
    "VariantOrUnknown",
    "VariantOrUnknownOrEmpty",
    "VecOrSingle",
    "ReferenceResolver",
    "AsyncAPI",
    "Channel",
    "ChannelMessages",
    "Message",
    "Operation",
    "Schema",
]
