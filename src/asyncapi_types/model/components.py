"""Components Object."""

from typing import Dict

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.bindings import (
    ChannelBinding,
    MessageBinding,
    OperationBinding,
    ServerBinding,
)
from asyncapi_types.model.channel import Channel
from asyncapi_types.model.correlation_id import CorrelationId
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.message import Message
from asyncapi_types.model.message_trait import MessageTrait
from asyncapi_types.model.operation import Operation, OperationReply, OperationReplyAddress
from asyncapi_types.model.operation_trait import OperationTrait
from asyncapi_types.model.parameter import Parameter
from asyncapi_types.model.schema import Schema
from asyncapi_types.model.security_scheme import SecurityScheme
from asyncapi_types.model.server import Server, ServerVariable
from asyncapi_types.model.tag import Tag


class Components(AsyncAPIModel):
    """Reusable objects for the document.

    Nothing defined here affects the API unless referenced from outside
    the components. Keys must match `^[a-zA-Z0-9\\.\\-_]+$`; that is not
    checked here.
    """
    schemas: Dict[str, ReferenceOr[Schema]] = Field(default_factory=dict)
    servers: Dict[str, ReferenceOr[Server]] = Field(default_factory=dict)
    channels: Dict[str, ReferenceOr[Channel]] = Field(default_factory=dict)
    operations: Dict[str, ReferenceOr[Operation]] = Field(default_factory=dict)
    messages: Dict[str, ReferenceOr[Message]] = Field(default_factory=dict)
    security_schemes: Dict[str, ReferenceOr[SecurityScheme]] = Field(default_factory=dict)
    server_variables: Dict[str, ReferenceOr[ServerVariable]] = Field(default_factory=dict)
    parameters: Dict[str, ReferenceOr[Parameter]] = Field(default_factory=dict)
    correlation_ids: Dict[str, ReferenceOr[CorrelationId]] = Field(default_factory=dict)
    replies: Dict[str, ReferenceOr[OperationReply]] = Field(default_factory=dict)
    reply_addresses: Dict[str, ReferenceOr[OperationReplyAddress]] = Field(default_factory=dict)
    external_docs: Dict[str, ReferenceOr[ExternalDocumentation]] = Field(default_factory=dict)
    tags: Dict[str, ReferenceOr[Tag]] = Field(default_factory=dict)
    operation_traits: Dict[str, ReferenceOr[OperationTrait]] = Field(default_factory=dict)
    message_traits: Dict[str, ReferenceOr[MessageTrait]] = Field(default_factory=dict)
    server_bindings: Dict[str, ReferenceOr[ServerBinding]] = Field(default_factory=dict)
    channel_bindings: Dict[str, ReferenceOr[ChannelBinding]] = Field(default_factory=dict)
    operation_bindings: Dict[str, ReferenceOr[OperationBinding]] = Field(default_factory=dict)
    message_bindings: Dict[str, ReferenceOr[MessageBinding]] = Field(default_factory=dict)
