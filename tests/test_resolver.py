"""Tests for ReferenceResolver: lookup, chained resolution and cycle detection."""

import pytest
import yaml

from asyncapi_types.codes import ValidationCode
from asyncapi_types.errors import (
    CircularReferenceError,
    ExternalReferenceError,
    UnresolvedReferenceError,
)
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.resolver import ReferenceResolver
from asyncapi_types.model import AsyncAPI, Channel, Message, Schema


@pytest.fixture
def account_service(account_service_data):
    return AsyncAPI.model_validate(account_service_data)


@pytest.fixture
def resolver(account_service):
    return ReferenceResolver(account_service)


def test_resolve_operation_channel(account_service, resolver):
    operation = account_service.operations["sendUserSignedup"].as_item()

    channel = resolver.resolve(operation.channel, expected=Channel)

    assert isinstance(channel, Channel)
    assert channel.address == "user/signedup"


def test_resolve_through_two_hops(account_service, resolver):
    """Operation message -> channel message -> component message."""
    operation = account_service.operations["sendUserSignedup"].as_item()

    message = resolver.resolve(operation.messages[0], expected=Message)

    assert message.name == "UserSignedUp"


def test_resolve_payload_variant(resolver):
    message = resolver.resolve("#/components/messages/UserSignedUp", expected=Message)

    payload = resolver.resolve(message.payload, expected=Schema)

    assert payload.required == ["email"]


def test_resolve_inline_item_is_identity(resolver):
    channel = Channel(address="inline")

    assert resolver.resolve(ReferenceOr.from_item(channel)) is channel


def test_resolve_pointer_into_schema(resolver):
    email = resolver.resolve("#/components/schemas/UserSignedUpPayload/properties/email", expected=Schema)

    assert email.format == "email"


def test_lookup_declared_field_and_extension(resolver):
    assert resolver.lookup("#/info/title") == "Account Service"
    assert resolver.lookup("#/x-generated-by") == "hand"
    assert resolver.lookup("#/info/contact/x-slack") == "#payments-platform"


def test_lookup_list_index(resolver):
    example = resolver.lookup("#/components/messages/UserSignedUp/examples/0")

    assert example.name == "jane"


def test_lookup_root(account_service, resolver):
    assert resolver.lookup("#") is account_service


def test_lookup_follows_references_mid_path():
    document = AsyncAPI.model_validate({
        "asyncapi": "3.0.0",
        "info": {"title": "t", "version": "1"},
        "channels": {"users": {"$ref": "#/components/channels/users"}},
        "components": {"channels": {"users": {"address": "users.{id}"}}},
    })

    assert ReferenceResolver(document).lookup("#/channels/users/address") == "users.{id}"


def test_missing_target(resolver):
    with pytest.raises(UnresolvedReferenceError) as exc_info:
        resolver.resolve("#/components/messages/Nope")

    assert exc_info.value.code == ValidationCode.UNRESOLVED_REFERENCE
    assert exc_info.value.pointer == "#/components/messages/Nope"
    assert "#/components/messages" in exc_info.value.message


def test_list_index_out_of_range(resolver):
    with pytest.raises(UnresolvedReferenceError):
        resolver.lookup("#/components/messages/UserSignedUp/examples/5")


@pytest.mark.parametrize("token", ["²", "01", "-1", "+0"])
def test_list_index_must_be_ascii_digits(resolver, token):
    with pytest.raises(UnresolvedReferenceError):
        resolver.lookup(f"#/components/messages/UserSignedUp/examples/{token}")


def test_wrong_target_type(resolver):
    with pytest.raises(UnresolvedReferenceError):
        resolver.resolve("#/channels/userSignedup", expected=Message)


def test_external_reference(resolver):
    with pytest.raises(ExternalReferenceError):
        resolver.resolve("common.yaml#/components/messages/Ack")


def test_raw_extension_value_decoded_as_expected_type():
    document = AsyncAPI.model_validate({
        "asyncapi": "3.0.0",
        "info": {"title": "t", "version": "1"},
        "x-shared": {"ack": {"name": "Ack", "payload": {"type": "boolean"}}},
    })

    message = ReferenceResolver(document).resolve("#/x-shared/ack", expected=Message)

    assert isinstance(message, Message)
    assert message.name == "Ack"


def test_raw_extension_value_of_wrong_shape():
    document = AsyncAPI.model_validate({
        "asyncapi": "3.0.0",
        "info": {"title": "t", "version": "1"},
        "x-shared": {"channel": {"address": 5}},
    })

    with pytest.raises(UnresolvedReferenceError):
        ReferenceResolver(document).resolve("#/x-shared/channel", expected=Channel)


class TestCycles:
    def test_two_node_cycle(self, broken_refs_data):
        resolver = ReferenceResolver(AsyncAPI.model_validate(broken_refs_data))

        with pytest.raises(CircularReferenceError) as exc_info:
            resolver.resolve("#/components/schemas/Order")

        assert exc_info.value.code == ValidationCode.CIRCULAR_REFERENCE
        assert exc_info.value.chain == ["#/components/schemas/Order", "#/components/schemas/PlacedOrder"]
        assert "Order -> #/components/schemas/PlacedOrder -> #/components/schemas/Order" in exc_info.value.message

    def test_self_reference(self):
        document = AsyncAPI.model_validate({
            "asyncapi": "3.0.0",
            "info": {"title": "t", "version": "1"},
            "components": {"schemas": {"Loop": {"$ref": "#/components/schemas/Loop"}}},
        })

        with pytest.raises(CircularReferenceError):
            ReferenceResolver(document).resolve("#/components/schemas/Loop")

    def test_cycle_met_mid_path(self):
        document = AsyncAPI.model_validate({
            "asyncapi": "3.0.0",
            "info": {"title": "t", "version": "1"},
            "channels": {"a": {"$ref": "#/channels/b"}, "b": {"$ref": "#/channels/a"}},
        })

        with pytest.raises(CircularReferenceError):
            ReferenceResolver(document).lookup("#/channels/a/address")

    def test_recursive_schema_by_reference_is_not_a_cycle(self):
        """A tree schema referring to itself through a property resolves fine."""
        document = AsyncAPI.model_validate({
            "asyncapi": "3.0.0",
            "info": {"title": "t", "version": "1"},
            "components": {"schemas": {"Node": {
                "type": "object",
                "properties": {"children": {"type": "array", "items": {"$ref": "#/components/schemas/Node"}}},
            }}},
        })
        resolver = ReferenceResolver(document)

        node = resolver.resolve("#/components/schemas/Node", expected=Schema)
        child = resolver.resolve(node.properties["children"].as_item().items.as_single(), expected=Schema)

        assert child is node
        assert resolver.check() == []


def test_collect_references_in_document_order(broken_refs_data):
    resolver = ReferenceResolver(AsyncAPI.model_validate(broken_refs_data))

    assert resolver.collect_references() == [
        ("#/channels/orders/messages/orderPlaced", "#/components/messages/orderPlaced"),
        ("#/channels/orders/messages/orderCancelled", "#/components/messages/doesNotExist"),
        ("#/channels/orders/messages/orderShipped", "shipping.yaml#/components/messages/orderShipped"),
        # Components declares schemas before messages
        ("#/components/schemas/Order", "#/components/schemas/PlacedOrder"),
        ("#/components/schemas/PlacedOrder", "#/components/schemas/Order"),
        ("#/components/messages/orderPlaced/payload", "#/components/schemas/Order"),
    ]


def test_check_reports_each_broken_reference(broken_refs_data):
    issues = ReferenceResolver(AsyncAPI.model_validate(broken_refs_data)).check()

    by_location = {issue.location: issue.code for issue in issues}
    assert by_location == {
        "#/channels/orders/messages/orderCancelled": ValidationCode.UNRESOLVED_REFERENCE,
        "#/channels/orders/messages/orderShipped": ValidationCode.EXTERNAL_REFERENCE,
        "#/components/messages/orderPlaced/payload": ValidationCode.CIRCULAR_REFERENCE,
        "#/components/schemas/Order": ValidationCode.CIRCULAR_REFERENCE,
        "#/components/schemas/PlacedOrder": ValidationCode.CIRCULAR_REFERENCE,
    }


def test_check_clean_documents(account_service, fixtures_dir):
    streetlights = AsyncAPI.model_validate(
        yaml.safe_load((fixtures_dir / "streetlights" / "asyncapi.yaml").read_text(encoding="utf-8"))
    )

    assert ReferenceResolver(account_service).check() == []
    assert ReferenceResolver(streetlights).check() == []


def test_resolution_does_not_mutate_document(account_service_data):
    document = AsyncAPI.model_validate(account_service_data)
    resolver = ReferenceResolver(document)
    for _, pointer in resolver.collect_references():
        resolver.resolve(pointer)

    assert document.to_document() == account_service_data
