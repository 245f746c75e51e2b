"""AsyncAPI Object: the document root."""

from typing import Dict, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.channel import Channel
from asyncapi_types.model.components import Components
from asyncapi_types.model.info import Info
from asyncapi_types.model.operation import Operation
from asyncapi_types.model.server import Server

SUPPORTED_MAJOR_VERSIONS = ("2", "3")


class AsyncAPI(AsyncAPIModel):
    """Root of an AsyncAPI document.

    ```yaml
    asyncapi: 3.0.0
    info:
      title: Account Service
      version: 1.0.0
    channels:
      userSignedup:
        address: user/signedup
        messages:
          UserSignedUp:
            $ref: '#/components/messages/UserSignedUp'
    operations:
      sendUserSignedup:
        action: send
        channel:
          $ref: '#/channels/userSignedup'
    ```
    """
    asyncapi: str  # Version of the AsyncAPI format, e.g. "3.0.0"
    id: Optional[str] = None
    info: Info
    servers: Dict[str, ReferenceOr[Server]] = Field(default_factory=dict)
    default_content_type: Optional[str] = None
    channels: Dict[str, ReferenceOr[Channel]] = Field(default_factory=dict)
    operations: Dict[str, ReferenceOr[Operation]] = Field(default_factory=dict)
    components: Optional[Components] = None

    @property
    def major_version(self) -> str:
        return self.asyncapi.split(".", 1)[0]

    def is_supported_version(self) -> bool:
        return self.major_version in SUPPORTED_MAJOR_VERSIONS
