"""
Outbound envelope construction for both protocol revisions.

Every envelope gets a fresh uuid4 messageId and the fixed payloadVersion of
its revision.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from smarthome_bridge.models.envelope import (
    Event,
    EventContext,
    EventEnvelope,
    EventHeader,
    LegacyEnvelope,
    ReportedProperty,
)
from smarthome_bridge.models.events import (
    LEGACY_ERROR_NAMES,
    ErrorType,
    EventName,
    LegacyNamespace,
    Namespace,
    ProtocolVersion,
)

logger = logging.getLogger("smarthome_bridge.transport.envelope")


def new_message_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def _header(namespace: str, name: str, protocol: ProtocolVersion, correlation_token: Optional[str]) -> EventHeader:
    return EventHeader(
        namespace=namespace,
        name=name,
        payload_version=protocol.value,
        message_id=new_message_id(),
        correlation_token=correlation_token if protocol is ProtocolVersion.V3 else None,
    )


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)


def build_event(
    namespace: str,
    name: str,
    payload: Optional[dict[str, Any]] = None,
    protocol: ProtocolVersion = ProtocolVersion.V3,
    *,
    correlation_token: Optional[str] = None,
    endpoint: Optional[dict[str, Any]] = None,
    properties: Optional[list[ReportedProperty]] = None,
) -> dict[str, Any]:
    """Build an outbound event as a dict ready to return to the platform."""
    header = _header(namespace, name, protocol, correlation_token)
    if protocol is ProtocolVersion.LEGACY:
        return _dump(LegacyEnvelope(header=header, payload=payload or {}))
    envelope = EventEnvelope(
        event=Event(header=header, endpoint=endpoint, payload=payload or {}),
        context=EventContext(properties=properties) if properties is not None else None,
    )
    return _dump(envelope)


def build_error(
    error_type: ErrorType,
    message: str,
    protocol: ProtocolVersion = ProtocolVersion.V3,
    *,
    correlation_token: Optional[str] = None,
    endpoint: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """Alexa/ErrorResponse with {type, message}; v2 has a named error event instead."""
    logger.error(f"ErrorResponse: type={error_type.value} message={message}")
    if protocol is ProtocolVersion.LEGACY:
        return build_event(LegacyNamespace.CONTROL, LEGACY_ERROR_NAMES[error_type], protocol=protocol)
    return build_event(
        Namespace.ALEXA,
        EventName.ERROR_RESPONSE,
        {"type": error_type.value, "message": message},
        correlation_token=correlation_token,
        endpoint=endpoint,
    )


def build_property(
    namespace: str,
    name: str,
    value: Any,
    time_of_sample: Optional[str] = None,
    uncertainty_ms: int = 0,
) -> ReportedProperty:
    return ReportedProperty(
        namespace=namespace,
        name=name,
        value=value,
        time_of_sample=time_of_sample or utc_timestamp(),
        uncertainty_in_milliseconds=uncertainty_ms,
    )


def build_response(
    properties: Optional[list[ReportedProperty]] = None,
    *,
    correlation_token: Optional[str] = None,
    endpoint: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """v3 Alexa/Response; context is only attached when there is state to report."""
    return build_event(
        Namespace.ALEXA,
        EventName.RESPONSE,
        correlation_token=correlation_token,
        endpoint=endpoint,
        properties=properties or None,
    )
