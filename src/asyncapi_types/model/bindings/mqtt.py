"""MQTT bindings."""

from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.schema import Schema


class MqttLastWill(AsyncAPIModel):
    topic: Optional[str] = None
    qos: Optional[int] = None
    message: Optional[str] = None
    retain: Optional[bool] = None


class MqttServerBinding(AsyncAPIModel):
    client_id: Optional[str] = None
    clean_session: Optional[bool] = None
    last_will: Optional[MqttLastWill] = None
    keep_alive: Optional[int] = None
    session_expiry_interval: Optional[int] = None
    maximum_packet_size: Optional[int] = None
    binding_version: Optional[str] = None


class MqttOperationBinding(AsyncAPIModel):
    qos: Optional[int] = None  # 0, 1 or 2
    retain: Optional[bool] = None
    message_expiry_interval: Optional[int] = None
    binding_version: Optional[str] = None


class MqttMessageBinding(AsyncAPIModel):
    payload_format_indicator: Optional[int] = None
    correlation_data: Optional[ReferenceOr[Schema]] = None
    content_type: Optional[str] = None
    response_topic: Optional[str] = None
    binding_version: Optional[str] = None
