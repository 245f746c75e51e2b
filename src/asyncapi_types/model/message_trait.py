"""Message Trait Object."""

from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.bindings import MessageBinding
from asyncapi_types.model.correlation_id import CorrelationId
from asyncapi_types.model.example import MessageExample
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.schema import Schema
from asyncapi_types.model.tag import Tag


class MessageTrait(AsyncAPIModel):
    """A reusable subset of a Message Object (no payload, no traits).

    Traits are applied to a message with JSON Merge Patch; merging is left
    to the consumer.
    """
    headers: Optional[ReferenceOr[Schema]] = None
    correlation_id: Optional[ReferenceOr[CorrelationId]] = None
    content_type: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
    bindings: Optional[ReferenceOr[MessageBinding]] = None
    examples: List[MessageExample] = Field(default_factory=list)
    message_id: Optional[str] = None  # 2.x
    schema_format: Optional[str] = None  # 2.x
