"""Channel Object and its two-shaped `messages` field."""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import Field, GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, PydanticSerializationUnexpectedValue, core_schema

from asyncapi_types.kernel.base import AsyncAPIModel, pass_through_instances, shape_label
from asyncapi_types.kernel.reference import Reference, ReferenceOr
from asyncapi_types.model.bindings import ChannelBinding
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.message import Message
from asyncapi_types.model.parameter import Parameter
from asyncapi_types.model.server import Server
from asyncapi_types.model.tag import Tag


def _message_field_names() -> set:
    return {field.alias or name for name, field in Message.model_fields.items()}


def _check_message_mapping(value: Dict[str, ReferenceOr[Message]]) -> Dict[str, ReferenceOr[Message]]:
    """Reject objects that read as one inline message rather than a name -> message map.

    A key that is also a Message field and holds an inline value (not a
    `$ref`) means the object is a message whose fields all happened to be
    objects, e.g. `{"payload": {...}, "headers": {...}}`.
    """
    looks_inline = [
        key for key, entry in value.items()
        if key in _message_field_names() and not entry.is_reference
    ]
    if looks_inline:
        raise PydanticCustomError(
            "message_mapping",
            "Keys {keys} are Message fields; reading this object as a single inline message",
            {"keys": sorted(looks_inline)},
        )
    return value


class ChannelMessages:
    """A channel's `messages`: one message (or reference), or a name -> message map.

    Trial order:

    1. an object that is exactly `{"$ref": ...}` -> single reference
    2. an object whose every value is a message or reference, and none of
       whose keys is a Message field carrying an inline value -> mapping
    3. anything valid as an inline Message -> single message
    """

    __slots__ = ("_single", "_mapping")

    def __init__(
        self,
        single: Optional[ReferenceOr[Message]] = None,
        mapping: Optional[Dict[str, ReferenceOr[Message]]] = None,
    ):
        if (single is None) == (mapping is None):
            raise ValueError("ChannelMessages holds exactly one of 'single' or 'mapping'")
        self._single = single
        self._mapping = mapping

    @classmethod
    def from_single(cls, message: ReferenceOr[Message]) -> "ChannelMessages":
        return cls(single=message)

    @classmethod
    def from_mapping(cls, messages: Dict[str, ReferenceOr[Message]]) -> "ChannelMessages":
        return cls(mapping=dict(messages))

    @property
    def is_mapping(self) -> bool:
        return self._mapping is not None

    def as_single(self) -> Optional[ReferenceOr[Message]]:
        return self._single

    def as_mapping(self) -> Optional[Dict[str, ReferenceOr[Message]]]:
        return self._mapping

    def iter_messages(self) -> Iterator[Tuple[Optional[str], ReferenceOr[Message]]]:
        """(name, message) pairs; the name is None for the single shape."""
        if self._mapping is not None:
            yield from self._mapping.items()
        else:
            yield None, self._single

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelMessages):
            return NotImplemented
        return self._single == other._single and self._mapping == other._mapping

    def __hash__(self) -> int:
        if self._mapping is not None:
            return hash(("mapping", frozenset(self._mapping)))
        return hash(("single", self._single))

    def __repr__(self) -> str:
        if self._mapping is not None:
            return f"ChannelMessages(mapping={self._mapping!r})"
        return f"ChannelMessages(single={self._single!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        message_schema = handler.generate_schema(ReferenceOr[Message])
        mapping_schema = core_schema.dict_schema(core_schema.str_schema(), message_schema)

        document_schema = core_schema.union_schema(
            [
                (
                    core_schema.no_info_after_validator_function(
                        lambda ref: cls.from_single(ReferenceOr.from_reference(ref.ref)),
                        handler.generate_schema(Reference),
                    ),
                    shape_label("reference"),
                ),
                (
                    core_schema.no_info_after_validator_function(
                        cls.from_mapping,
                        core_schema.no_info_after_validator_function(_check_message_mapping, mapping_schema),
                    ),
                    shape_label("mapping"),
                ),
                (core_schema.no_info_after_validator_function(cls.from_single, message_schema), shape_label("single")),
            ],
            mode="left_to_right",
        )

        def serialize(value: Any, nxt: core_schema.SerializerFunctionWrapHandler) -> Any:
            if not isinstance(value, ChannelMessages):
                raise PydanticSerializationUnexpectedValue(f"Expected ChannelMessages, got {type(value).__name__}")
            if value.is_mapping:
                return nxt(value.as_mapping())
            # One-entry mapping so the single message goes through the same serializer
            return nxt({"": value.as_single()})[""]

        return core_schema.json_or_python_schema(
            json_schema=document_schema,
            python_schema=core_schema.no_info_wrap_validator_function(pass_through_instances(cls), document_schema),
            serialization=core_schema.wrap_serializer_function_ser_schema(serialize, schema=mapping_schema),
        )


class Channel(AsyncAPIModel):
    """A shared communication channel.

    ```yaml
    address: 'users.{userId}'
    title: Users channel
    description: This channel is used to exchange messages about user events.
    messages:
      userSignedUp:
        $ref: '#/components/messages/userSignedUp'
      userCompletedOrder:
        $ref: '#/components/messages/userCompletedOrder'
    parameters:
      userId:
        $ref: '#/components/parameters/userId'
    servers:
      - $ref: '#/servers/rabbitmqInProd'
    bindings:
      amqp:
        is: queue
        queue:
          exclusive: true
    ```

    `address` may be explicitly null (unknown or dynamic address); that is
    kept apart from an absent address.
    """
    address: Optional[str] = None
    messages: Optional[ChannelMessages] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    servers: List[ReferenceOr[Server]] = Field(default_factory=list)
    parameters: Dict[str, ReferenceOr[Parameter]] = Field(default_factory=dict)
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
    bindings: Optional[ReferenceOr[ChannelBinding]] = None

    def iter_messages(self) -> Iterator[Tuple[Optional[str], ReferenceOr[Message]]]:
        if self.messages is None:
            return iter(())
        return self.messages.iter_messages()
