"""Parameter Object."""

from typing import List, Optional

from asyncapi_types.kernel.base import AsyncAPIModel


class Parameter(AsyncAPIModel):
    """Describes one parameter of a channel address expression.

    ```yaml
    userId:
      description: Id of the user.
      location: $message.payload#/user/id
    ```
    """
    enum: Optional[List[str]] = None
    default: Optional[str] = None
    description: Optional[str] = None
    examples: Optional[List[str]] = None
    location: Optional[str] = None
