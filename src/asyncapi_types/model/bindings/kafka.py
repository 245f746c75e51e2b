"""Kafka bindings."""

from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.schema import Schema


class KafkaServerBinding(AsyncAPIModel):
    schema_registry_url: Optional[str] = None
    schema_registry_vendor: Optional[str] = None
    binding_version: Optional[str] = None


class KafkaTopicConfiguration(AsyncAPIModel):
    """Topic configuration properties; keys are Kafka's dotted names."""
    cleanup_policy: Optional[List[str]] = Field(default=None, alias="cleanup.policy")
    retention_ms: Optional[int] = Field(default=None, alias="retention.ms")
    retention_bytes: Optional[int] = Field(default=None, alias="retention.bytes")
    delete_retention_ms: Optional[int] = Field(default=None, alias="delete.retention.ms")
    max_message_bytes: Optional[int] = Field(default=None, alias="max.message.bytes")
    confluent_key_schema_validation: Optional[bool] = Field(default=None, alias="confluent.key.schema.validation")
    confluent_key_subject_name_strategy: Optional[str] = Field(default=None, alias="confluent.key.subject.name.strategy")
    confluent_value_schema_validation: Optional[bool] = Field(default=None, alias="confluent.value.schema.validation")
    confluent_value_subject_name_strategy: Optional[str] = Field(default=None, alias="confluent.value.subject.name.strategy")


class KafkaChannelBinding(AsyncAPIModel):
    topic: Optional[str] = None
    partitions: Optional[int] = None
    replicas: Optional[int] = None
    topic_configuration: Optional[KafkaTopicConfiguration] = None
    binding_version: Optional[str] = None


class KafkaOperationBinding(AsyncAPIModel):
    group_id: Optional[ReferenceOr[Schema]] = None
    client_id: Optional[ReferenceOr[Schema]] = None
    binding_version: Optional[str] = None


class KafkaMessageBinding(AsyncAPIModel):
    key: Optional[ReferenceOr[Schema]] = None
    schema_id_location: Optional[str] = None  # "header" or "payload"
    schema_id_payload_encoding: Optional[str] = None
    schema_lookup_strategy: Optional[str] = None
    binding_version: Optional[str] = None
