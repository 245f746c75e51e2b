"""Operation, Operation Reply and Operation Reply Address Objects."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.bindings import OperationBinding
from asyncapi_types.model.channel import Channel
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.message import Message
from asyncapi_types.model.operation_trait import OperationTrait
from asyncapi_types.model.security_scheme import SecurityScheme
from asyncapi_types.model.tag import Tag


class ActionType(str, Enum):
    """What the application does on the operation's channel."""
    SEND = "send"
    RECEIVE = "receive"


class OperationReplyAddress(AsyncAPIModel):
    """Where a reply should be sent, as a runtime expression."""
    location: str
    description: Optional[str] = None


class OperationReply(AsyncAPIModel):
    """Request/reply: the reply to an operation."""
    address: Optional[ReferenceOr[OperationReplyAddress]] = None
    channel: Optional[ReferenceOr[Channel]] = None
    messages: List[ReferenceOr[Message]] = Field(default_factory=list)


class Operation(AsyncAPIModel):
    """A specific operation the application performs on a channel.

    ```yaml
    title: User sign up
    summary: Action to sign a user up.
    action: send
    channel:
      $ref: '#/channels/userSignup'
    tags:
      - name: user
      - name: signup
    bindings:
      amqp:
        ack: false
    traits:
      - $ref: '#/components/operationTraits/kafka'
    messages:
      - $ref: '#/channels/userSignup/messages/userSignedUp'
    reply:
      address:
        location: '$message.header#/replyTo'
      channel:
        $ref: '#/channels/userSignupReply'
    ```

    `action` defaults to `receive` when the document leaves it out; an
    absent action is not written back on encode.
    """
    action: ActionType = ActionType.RECEIVE
    channel: Optional[ReferenceOr[Channel]] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    security: List[ReferenceOr[SecurityScheme]] = Field(default_factory=list)
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
    bindings: Optional[ReferenceOr[OperationBinding]] = None
    traits: List[ReferenceOr[OperationTrait]] = Field(default_factory=list)
    messages: List[ReferenceOr[Message]] = Field(default_factory=list)
    reply: Optional[ReferenceOr[OperationReply]] = None
    operation_id: Optional[str] = None  # 2.x

    @property
    def is_send(self) -> bool:
        return self.action == ActionType.SEND
