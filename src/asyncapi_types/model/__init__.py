"""AsyncAPI object model."""

from asyncapi_types.model.bindings import (
    ChannelBinding,
    MessageBinding,
    OperationBinding,
    ServerBinding,
)
from asyncapi_types.model.channel import Channel, ChannelMessages
from asyncapi_types.model.components import Components
from asyncapi_types.model.correlation_id import CorrelationId
from asyncapi_types.model.discriminator import Discriminator
from asyncapi_types.model.document import AsyncAPI
from asyncapi_types.model.example import MessageExample
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.info import Contact, Info, License
from asyncapi_types.model.message import Message
from asyncapi_types.model.message_trait import MessageTrait
from asyncapi_types.model.operation import ActionType, Operation, OperationReply, OperationReplyAddress
from asyncapi_types.model.operation_trait import OperationTrait
from asyncapi_types.model.parameter import Parameter
from asyncapi_types.model.schema import Schema
from asyncapi_types.model.security_scheme import OAuthFlow, OAuthFlows, SecurityScheme, SecuritySchemeType
from asyncapi_types.model.server import Server, ServerVariable
from asyncapi_types.model.tag import Tag

__all__ = [
    "ActionType",
    "AsyncAPI",
    "Channel",
    "ChannelBinding",
    "ChannelMessages",
    "Components",
    "Contact",
    "CorrelationId",
    "Discriminator",
    "ExternalDocumentation",
    "Info",
    "License",
    "Message",
    "MessageBinding",
    "MessageExample",
    "MessageTrait",
    "OAuthFlow",
    "OAuthFlows",
    "Operation",
    "OperationBinding",
    "OperationReply",
    "OperationReplyAddress",
    "OperationTrait",
    "Parameter",
    "Schema",
    "SecurityScheme",
    "SecuritySchemeType",
    "Server",
    "ServerBinding",
    "ServerVariable",
    "Tag",
]
