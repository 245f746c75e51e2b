"""Server and Server Variable Objects."""

from typing import Dict, List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.reference import ReferenceOr
from asyncapi_types.model.bindings import ServerBinding
from asyncapi_types.model.external_documentation import ExternalDocumentation
from asyncapi_types.model.security_scheme import SecurityScheme
from asyncapi_types.model.tag import Tag


class ServerVariable(AsyncAPIModel):
    """A variable for substitution in a server's host or pathname template."""
    enum: Optional[List[str]] = None
    default: Optional[str] = None
    description: Optional[str] = None
    examples: Optional[List[str]] = None


class Server(AsyncAPIModel):
    """A message broker, server or other program capable of sending and/or
    receiving data.

    ```yaml
    host: 'rabbitmq.in.mycompany.com:5672'
    pathname: '/{env}'
    protocol: amqp
    description: RabbitMQ broker. Use the `env` variable to point to either `production` or `staging`.
    variables:
      env:
        description: Environment to connect to.
        enum:
          - production
          - staging
    ```

    Version 2.x documents name the server with `url` instead of `host`,
    so neither is required.
    """
    host: Optional[str] = None
    url: Optional[str] = None  # 2.x
    protocol: str
    protocol_version: Optional[str] = None
    pathname: Optional[str] = None
    description: Optional[str] = None
    title: Optional[str] = None
    summary: Optional[str] = None
    variables: Dict[str, ReferenceOr[ServerVariable]] = Field(default_factory=dict)
    security: List[ReferenceOr[SecurityScheme]] = Field(default_factory=list)
    tags: List[ReferenceOr[Tag]] = Field(default_factory=list)
    external_docs: Optional[ReferenceOr[ExternalDocumentation]] = None
    bindings: Optional[ReferenceOr[ServerBinding]] = None
