"""AMQP 0-9-1 bindings."""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.variant_or import VariantOrUnknown, VariantOrUnknownOrEmpty


class AmqpChannelType(str, Enum):
    ROUTING_KEY = "routingKey"
    QUEUE = "queue"


class AmqpExchangeType(str, Enum):
    TOPIC = "topic"
    DIRECT = "direct"
    FANOUT = "fanout"
    DEFAULT = "default"
    HEADERS = "headers"


class AmqpDeliveryMode(int, Enum):
    TRANSIENT = 1
    PERSISTENT = 2


class AmqpExchange(AsyncAPIModel):
    name: Optional[str] = None
    type: Optional[VariantOrUnknown[AmqpExchangeType]] = None
    durable: Optional[bool] = None
    auto_delete: Optional[bool] = None
    vhost: Optional[str] = None


class AmqpQueue(AsyncAPIModel):
    name: Optional[str] = None
    durable: Optional[bool] = None
    exclusive: Optional[bool] = None
    auto_delete: Optional[bool] = None
    vhost: Optional[str] = None


class AmqpChannelBinding(AsyncAPIModel):
    """What kind of AMQP destination a channel is.

    ```yaml
    is: routingKey
    exchange:
      name: myExchange
      type: topic
      durable: true
      autoDelete: false
      vhost: /
    ```
    """
    # Unset when absent; an explicit null is the empty state
    is_: VariantOrUnknownOrEmpty[AmqpChannelType] = Field(default=None, alias="is")
    exchange: Optional[AmqpExchange] = None
    queue: Optional[AmqpQueue] = None
    binding_version: Optional[str] = None


class AmqpOperationBinding(AsyncAPIModel):
    expiration: Optional[int] = None  # TTL in milliseconds
    user_id: Optional[str] = None
    cc: Optional[List[str]] = None
    priority: Optional[int] = None
    delivery_mode: Optional[VariantOrUnknown[AmqpDeliveryMode]] = None
    mandatory: Optional[bool] = None
    bcc: Optional[List[str]] = None
    timestamp: Optional[bool] = None
    ack: Optional[bool] = None
    binding_version: Optional[str] = None


class AmqpMessageBinding(AsyncAPIModel):
    content_encoding: Optional[str] = None
    message_type: Optional[str] = None
    binding_version: Optional[str] = None
