"""Message Object."""

from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.variant_or import VariantOrUnknown
from asyncapi_types.model.message_trait import MessageTrait
from asyncapi_types.model.schema import Schema


class Message(MessageTrait):
    """Describes a message received on a given channel and operation.

    A payload that is not a Schema Object (an Avro schema written as a
    string or as a union list) is captured raw rather than rejected:

    ```yaml
    name: UserSignup
    title: User signup
    contentType: application/json
    payload:
      $ref: '#/components/schemas/userSignup'
    traits:
      - $ref: '#/components/messageTraits/commonHeaders'
    ```
    """
    payload: Optional[VariantOrUnknown[ReferenceOr[Schema]]] = None
    traits: List[ReferenceOr[MessageTrait]] = Field(default_factory=list)

    def payload_schema(self) -> Optional[ReferenceOr[Schema]]:
        """The payload as a schema (or schema reference), if it is one."""
        if self.payload is None:
            return None
        return self.payload.as_item()
