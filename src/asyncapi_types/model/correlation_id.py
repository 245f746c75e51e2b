"""Correlation ID Object."""

from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel


class CorrelationId(AsyncAPIModel):
    """Identifier used for message tracing and correlation.

    `location` is a runtime expression such as
    `$message.header#/correlationId`.
    """
    location: str
    description: Optional[str] = None
