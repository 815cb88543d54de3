"""
Inbound directive envelopes.

Both revisions are parsed into one `Directive`; the accessors below hide the
field-name differences (v3 keeps the endpoint and token beside the payload,
v2 keeps them inside it).
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from smarthome_bridge.models.events import ProtocolVersion


class _Wire(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class DirectiveHeader(_Wire):
    namespace: str = Field(min_length=1)
    name: str = Field(min_length=1)
    payload_version: Optional[str] = None
    message_id: Optional[str] = None
    correlation_token: Optional[str] = None


class Scope(_Wire):
    type: Optional[str] = None
    token: Optional[str] = None


class DirectiveEndpoint(_Wire):
    endpoint_id: Optional[str] = None
    scope: Optional[Scope] = None
    cookie: Optional[dict[str, Any]] = None


class Directive(_Wire):
    header: DirectiveHeader
    endpoint: Optional[DirectiveEndpoint] = None
    payload: dict[str, Any] = {}
    protocol: ProtocolVersion = ProtocolVersion.V3

    @property
    def namespace(self) -> str:
        return self.header.namespace

    @property
    def name(self) -> str:
        return self.header.name

    @property
    def endpoint_id(self) -> Optional[str]:
        if self.protocol is ProtocolVersion.LEGACY:
            appliance = self.payload.get("appliance")
            return appliance.get("applianceId") if isinstance(appliance, dict) else None
        return self.endpoint.endpoint_id if self.endpoint else None

    @property
    def access_token(self) -> Optional[str]:
        """Bearer token for the backend, stripped. Discovery carries it in the payload."""
        if self.protocol is ProtocolVersion.LEGACY:
            token = self.payload.get("accessToken")
        elif self.endpoint and self.endpoint.scope and self.endpoint.scope.token:
            token = self.endpoint.scope.token
        else:
            scope = self.payload.get("scope")
            token = scope.get("token") if isinstance(scope, dict) else None
        if not isinstance(token, str):
            return None
        return token.strip() or None

    def endpoint_echo(self) -> Optional[dict[str, Any]]:
        """The endpoint object as sent, for echoing on v3 responses."""
        if self.endpoint is None:
            return None
        return self.endpoint.model_dump(by_alias=True, exclude_none=True)
