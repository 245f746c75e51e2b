"""Info, Contact and License Objects."""

from typing import List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.tag import Tag


class Contact(AsyncAPIModel):
    """Contact information for the exposed API."""
    name: Optional[str] = None
    url: Optional[str] = None
    email: Optional[str] = None


class License(AsyncAPIModel):
    """License information for the exposed API."""
    name: str
    url: Optional[str] = None


class Info(AsyncAPIModel):
    """Metadata about the API.

    ```yaml
    title: AsyncAPI Sample App
    version: 1.0.1
    description: This is a sample app.
    termsOfService: https://asyncapi.org/terms/
    contact:
      name: API Support
      email: support@asyncapi.org
    license:
      name: Apache 2.0
      url: https://www.apache.org/licenses/LICENSE-2.0.html
    ```
    """
    title: str
    version: str  # Version of the application API, not of the AsyncAPI format
    description: Optional[str] = None
    terms_of_service: Optional[str] = None
    contact: Optional[Contact] = None
    license: Optional[License] = None
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
