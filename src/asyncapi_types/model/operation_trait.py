"""Operation Trait Object."""

from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.bindings import OperationBinding
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.security_scheme import SecurityScheme
from asyncapi_types.model.tag import Tag


class OperationTrait(AsyncAPIModel):
    """A reusable subset of an Operation Object."""
    title: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    security: List[ReferenceOr[SecurityScheme]] = Field(default_factory=list)
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
    bindings: Optional[ReferenceOr[OperationBinding]] = None
    operation_id: Optional[str] = None  # 2.x; case-sensitive, unique across the API
