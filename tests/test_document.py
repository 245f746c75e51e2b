"""Whole-document tests: root, components, servers and bindings."""

import json

import pytest
import yaml
from pydantic import ValidationError

from asyncapi_types.model import AsyncAPI, Components, Server, SecuritySchemeType
from asyncapi_types.model.bindings.kafka import KafkaChannelBinding


def test_account_service_round_trip(account_service_data):
    document = AsyncAPI.model_validate(account_service_data)

    assert document.to_document() == account_service_data


def test_streetlights_yaml_round_trip(fixtures_dir):
    data = yaml.safe_load((fixtures_dir / "streetlights" / "asyncapi.yaml").read_text(encoding="utf-8"))
    document = AsyncAPI.model_validate(data)

    assert document.to_document() == data


def test_document_root_fields(account_service_data):
    document = AsyncAPI.model_validate(account_service_data)

    assert document.asyncapi == "3.0.0"
    assert document.major_version == "3"
    assert document.is_supported_version()
    assert document.id == "urn:example:account-service"
    assert document.info.title == "Account Service"
    assert document.info.contact.extensions == {"x-slack": "#payments-platform"}
    assert document.extensions == {"x-generated-by": "hand"}
    assert set(document.channels) == {"userSignedup", "userDeleted", "userSignedupReply"}


def test_components_members(account_service_data):
    components = AsyncAPI.model_validate(account_service_data).components

    assert isinstance(components, Components)
    assert set(components.messages) == {"UserSignedUp", "UserDeleted", "Ack"}
    assert components.schemas["UserSignedUpPayload"].as_item().extensions == {"x-owner": "identity"}


def test_component_entry_may_be_a_reference():
    components = Components.model_validate({
        "schemas": {"Alias": {"$ref": "#/components/schemas/Real"}, "Real": {"type": "string"}},
        "replyAddresses": {"replyTo": {"location": "$message.header#/replyTo"}},
    })

    assert components.schemas["Alias"].is_reference
    assert components.schemas["Real"].is_item
    assert components.reply_addresses["replyTo"].as_item().location == "$message.header#/replyTo"


def test_root_requires_info():
    with pytest.raises(ValidationError) as exc_info:
        AsyncAPI.model_validate({"asyncapi": "3.0.0"})

    assert exc_info.value.errors()[0]["loc"] == ("info",)


def test_server_requires_protocol():
    with pytest.raises(ValidationError):
        Server.model_validate({"host": "localhost"})


def test_server_legacy_url_without_host():
    server = Server.model_validate({"url": "mqtt://test.mosquitto.org", "protocol": "mqtt"})

    assert server.host is None
    assert server.url == "mqtt://test.mosquitto.org"
    assert server.to_document() == {"url": "mqtt://test.mosquitto.org", "protocol": "mqtt"}


def test_server_security_and_variables(fixtures_dir):
    data = yaml.safe_load((fixtures_dir / "streetlights" / "asyncapi.yaml").read_text(encoding="utf-8"))
    document = AsyncAPI.model_validate(data)

    server = document.servers["mtls-connections"].as_item()
    assert server.security[0].as_reference() == "#/components/securitySchemes/certs"
    assert server.bindings.as_item().kafka.schema_registry_url == "https://my-schema-registry.com"

    scheme = document.components.security_schemes["certs"].as_item()
    assert scheme.known_type() == SecuritySchemeType.X509


def test_kafka_dotted_topic_configuration():
    doc = {"topic": "t", "topicConfiguration": {"cleanup.policy": ["delete", "compact"], "retention.ms": 604800000}}
    binding = KafkaChannelBinding.model_validate(doc)

    assert binding.topic_configuration.cleanup_policy == ["delete", "compact"]
    assert binding.topic_configuration.retention_ms == 604800000
    assert binding.to_document() == doc


def test_unmodelled_protocol_binding_lands_in_extensions():
    doc = {"asyncapi": "3.0.0", "info": {"title": "t", "version": "1"}, "channels": {
        "c": {"bindings": {"nats": {"queue": "workers"}}},
    }}
    document = AsyncAPI.model_validate(doc)

    bindings = document.channels["c"].as_item().bindings.as_item()
    assert bindings.extensions == {"nats": {"queue": "workers"}}
    assert document.to_document() == doc


def test_decode_of_encode_is_identity(account_service_data):
    document = AsyncAPI.model_validate(account_service_data)

    assert AsyncAPI.model_validate(document.to_document()) == document


def test_encoding_is_json_compatible(account_service_data):
    encoded = AsyncAPI.model_validate(account_service_data).to_document()

    assert json.loads(json.dumps(encoded)) == encoded
