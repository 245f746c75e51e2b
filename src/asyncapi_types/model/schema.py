"""Schema Object: JSON Schema draft 7 plus the AsyncAPI additions."""

from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.kernel.vec_or_single import VecOrSingle
from asyncapi_types.model.discriminator import Discriminator
from asyncapi_types.model.external_documentation import ExternalDocumentation

Number = Union[int, float]


class Schema(AsyncAPIModel):
    """Definition of an input or output data type.

    Every child schema may be a `$ref`. Keywords not declared here
    (`$schema`, `$id`, `definitions`, vendor extensions) stay in the
    extension bag, so any JSON Schema document round-trips.

    ```yaml
    type: object
    required:
      - name
    properties:
      name:
        type: string
      address:
        $ref: '#/components/schemas/Address'
      age:
        type: integer
        format: int32
        minimum: 0
    ```
    """
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[VecOrSingle[str]] = None
    format: Optional[str] = None
    default: Any = None
    enum: Optional[List[Any]] = None
    const: Any = None
    examples: Optional[List[Any]] = None
    deprecated: Optional[bool] = None
    read_only: Optional[bool] = None
    write_only: Optional[bool] = None

    # Numbers
    multiple_of: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_maximum: Optional[Union[bool, Number]] = None  # bool in draft 4 documents
    minimum: Optional[Number] = None
    exclusive_minimum: Optional[Union[bool, Number]] = None

    # Strings
    max_length: Optional[int] = None
    min_length: Optional[int] = None
    pattern: Optional[str] = None

    # Arrays
    items: Optional[VecOrSingle[ReferenceOr["Schema"]]] = None
    additional_items: Optional[Union[bool, ReferenceOr["Schema"]]] = None
    max_items: Optional[int] = None
    min_items: Optional[int] = None
    unique_items: Optional[bool] = None
    contains: Optional[ReferenceOr["Schema"]] = None

    # Objects
    properties: Dict[str, ReferenceOr["Schema"]] = Field(default_factory=dict)
    pattern_properties: Dict[str, ReferenceOr["Schema"]] = Field(default_factory=dict)
    additional_properties: Optional[Union[bool, ReferenceOr["Schema"]]] = None
    property_names: Optional[ReferenceOr["Schema"]] = None
    required: List[str] = Field(default_factory=list)
    max_properties: Optional[int] = None
    min_properties: Optional[int] = None

    # Composition
    all_of: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    one_of: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    any_of: List[ReferenceOr["Schema"]] = Field(default_factory=list)
    not_: Optional[ReferenceOr["Schema"]] = Field(default=None, alias="not")
    if_: Optional[ReferenceOr["Schema"]] = Field(default=None, alias="if")
    then: Optional[ReferenceOr["Schema"]] = None
    else_: Optional[ReferenceOr["Schema"]] = Field(default=None, alias="else")

    # AsyncAPI additions
    discriminator: Optional[Union[str, Discriminator]] = None
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None

    def is_object(self) -> bool:
        return self.type is not None and "object" in self.type.as_list()

    def get_property(self, name: str) -> Optional[ReferenceOr["Schema"]]:
        return self.properties.get(name)


Schema.model_rebuild()
