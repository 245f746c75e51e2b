"""Kernel: extension bag, polymorphic wrappers, pointers and resolution."""

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import Reference, ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknown, VariantOrUnknownOrEmpty
from asyncapi_types.kernel.vec_or_single import VecOrSingle

__all__ = [
    "AsyncAPIModel",
    "Reference",
    "ReferenceOr",
    "VariantOrUnknown",
    "VariantOrUnknownOrEmpty",
    "VecOrSingle",
]
