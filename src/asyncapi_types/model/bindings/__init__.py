"""Protocol-specific binding containers.

Each container maps a protocol name to that protocol's binding object.
Protocols without a model here (nats, sns, pulsar, ...) are kept as-is in
the container's extension bag.
"""

from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.model.bindings.amqp import (
    AmqpChannelBinding,
    AmqpMessageBinding,
    AmqpOperationBinding,
)
from asyncapi_types.model.bindings.http import HttpMessageBinding, HttpOperationBinding
from asyncapi_types.model.bindings.kafka import (
    KafkaChannelBinding,
    KafkaMessageBinding,
    KafkaOperationBinding,
    KafkaServerBinding,
)
from asyncapi_types.model.bindings.mqtt import (
    MqttMessageBinding,
    MqttOperationBinding,
    MqttServerBinding,
)
from asyncapi_types.model.bindings.websockets import WebSocketsChannelBinding


class ServerBinding(AsyncAPIModel):
    """Map of protocol name to server binding."""
    kafka: Optional[KafkaServerBinding] = None
    mqtt: Optional[MqttServerBinding] = None


class ChannelBinding(AsyncAPIModel):
    """Map of protocol name to channel binding."""
    ws: Optional[WebSocketsChannelBinding] = None
    kafka: Optional[KafkaChannelBinding] = None
    amqp: Optional[AmqpChannelBinding] = None


class OperationBinding(AsyncAPIModel):
    """Map of protocol name to operation binding."""
    http: Optional[HttpOperationBinding] = None
    kafka: Optional[KafkaOperationBinding] = None
    amqp: Optional[AmqpOperationBinding] = None
    mqtt: Optional[MqttOperationBinding] = None


class MessageBinding(AsyncAPIModel):
    """Map of protocol name to message binding."""
    http: Optional[HttpMessageBinding] = None
    kafka: Optional[KafkaMessageBinding] = None
    amqp: Optional[AmqpMessageBinding] = None
    mqtt: Optional[MqttMessageBinding] = None


__all__ = [
    "ServerBinding",
    "ChannelBinding",
    "OperationBinding",
    "MessageBinding",
]
