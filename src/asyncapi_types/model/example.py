"""Message Example Object."""

from typing import Any, Dict, Optional

from asyncapi_types.kernel.base import AsyncAPIModel


class MessageExample(AsyncAPIModel):
    """An example of a message: headers and/or payload, both free-form."""
    headers: Optional[Dict[str, Any]] = None
    payload: Any = None
    name: Optional[str] = None
    summary: Optional[str] = None
