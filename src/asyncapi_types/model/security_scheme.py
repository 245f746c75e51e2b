"""Security Scheme, OAuth Flows and OAuth Flow Objects."""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from asyncapi_types.kernel.base import AsyncAPIModel
from asyncapi_types.kernel.variant_or import VariantOrUnknown


class SecuritySchemeType(str, Enum):
    """Closed set of scheme types known to AsyncAPI 3.0."""
    USER_PASSWORD = "userPassword"
    API_KEY = "apiKey"
    X509 = "X509"
    SYMMETRIC_ENCRYPTION = "symmetricEncryption"
    ASYMMETRIC_ENCRYPTION = "asymmetricEncryption"
    HTTP_API_KEY = "httpApiKey"
    HTTP = "http"
    OAUTH2 = "oauth2"
    OPEN_ID_CONNECT = "openIdConnect"
    PLAIN = "plain"
    SCRAM_SHA256 = "scramSha256"
    SCRAM_SHA512 = "scramSha512"
    GSSAPI = "gssapi"


class OAuthFlow(AsyncAPIModel):
    """Configuration details for one supported OAuth flow."""
    authorization_url: Optional[str] = None
    token_url: Optional[str] = None
    refresh_url: Optional[str] = None
    available_scopes: Dict[str, str] = Field(default_factory=dict)


class OAuthFlows(AsyncAPIModel):
    implicit: Optional[OAuthFlow] = None
    password: Optional[OAuthFlow] = None
    client_credentials: Optional[OAuthFlow] = None
    authorization_code: Optional[OAuthFlow] = None


class SecurityScheme(AsyncAPIModel):
    """Defines a security scheme usable by servers and operations.

    `type` is captured raw when it is not one of the known scheme types,
    so documents written for newer revisions still load.
    """
    type: VariantOrUnknown[SecuritySchemeType]
    description: Optional[str] = None
    name: Optional[str] = None  # httpApiKey: header, query or cookie parameter name
    in_: Optional[str] = Field(default=None, alias="in")
    scheme: Optional[str] = None
    bearer_format: Optional[str] = None
    flows: Optional[OAuthFlows] = None
    open_id_connect_url: Optional[str] = None
    scopes: Optional[List[str]] = None

    def known_type(self) -> Optional[SecuritySchemeType]:
        return self.type.as_item()
