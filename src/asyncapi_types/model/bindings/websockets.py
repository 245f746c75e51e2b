"""WebSockets bindings."""

from enum import Enum
from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknownOrEmpty
from asyncapi_types.model.schema import Schema


class WebSocketsMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class WebSocketsChannelBinding(AsyncAPIModel):
    """How the WebSocket connection is established.

    `method` may be explicitly null in some documents to mean "not
    restricted"; that is kept apart from an absent method.
    """
    # Not Optional[...]: null must reach the wrapper as its empty state
    method: VariantOrUnknownOrEmpty[WebSocketsMethod] = None
    query: Optional[ReferenceOr[Schema]] = None
    headers: Optional[ReferenceOr[Schema]] = None
    binding_version: Optional[str] = None
