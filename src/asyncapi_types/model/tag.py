"""Tag Object."""

from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.external_documentation import ExternalDocumentation


class Tag(AsyncAPIModel):
    """Adds metadata to a single tag used by other objects."""
    name: str
    description: Optional[str] = None
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
