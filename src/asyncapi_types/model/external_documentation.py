"""External Documentation Object."""

from typing import Optional

from asyncapi_types.kernel.base import AsyncAPIModel


class ExternalDocumentation(AsyncAPIModel):
    """Allows referencing an external resource for extended documentation.

    ```yaml
    description: Find more info here
    url: https://example.com
    ```
    """
    url: str  # Required; kept as the document's string, not normalized
    description: Optional[str] = None  # CommonMark allowed
