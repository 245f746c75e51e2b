"""HTTP bindings."""

from enum import Enum
from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknown
from asyncapi_types.model.schema import Schema


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"


class HttpOperationBinding(AsyncAPIModel):
    """HTTP request details for an operation."""
    method: Optional[VariantOrUnknown[HttpMethod]] = None
    query: Optional[ReferenceOr[Schema]] = None  # Must be an object schema with a properties key
    binding_version: Optional[str] = None


class HttpMessageBinding(AsyncAPIModel):
    """HTTP headers and status code of a message."""
    headers: Optional[ReferenceOr[Schema]] = None
    status_code: Optional[int] = None
    binding_version: Optional[str] = None
