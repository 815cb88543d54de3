"""
Directive dispatcher — parse, route, handle, shape errors.

Routing is a table: (protocol, namespace) -> (request kind, accepted names),
then request kind -> handler. Unknown namespaces and malformed envelopes are
INTERNAL_ERROR; an unknown name in a known namespace is INVALID_DIRECTIVE.
Neither reaches the transport.
"""

import json
import logging
from enum import Enum
from typing import Any, Callable, Coroutine, Optional

from pydantic import ValidationError

from smarthome_bridge.errors import DirectiveError
from smarthome_bridge.handlers import channel, discovery, inputs, playback, power, speaker
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.events import ErrorType, LegacyNamespace, Namespace, ProtocolVersion
from smarthome_bridge.transport.envelope import build_error
from smarthome_bridge.transport.http import HttpClient

logger = logging.getLogger("smarthome_bridge.dispatcher")

Handler = Callable[[Directive, HttpClient], Coroutine[Any, Any, dict[str, Any]]]


class RequestKind(str, Enum):
    DISCOVERY = "discovery"
    POWER = "power"
    CHANNEL = "channel"
    INPUT = "input"
    STEP_SPEAKER = "step_speaker"
    PLAYBACK = "playback"


ROUTES: dict[ProtocolVersion, dict[str, tuple[RequestKind, frozenset[str]]]] = {
    ProtocolVersion.V3: {
        Namespace.DISCOVERY: (RequestKind.DISCOVERY, discovery.SUPPORTED_NAMES),
        Namespace.POWER_CONTROLLER: (RequestKind.POWER, power.SUPPORTED_NAMES),
        Namespace.CHANNEL_CONTROLLER: (RequestKind.CHANNEL, channel.SUPPORTED_NAMES),
        Namespace.INPUT_CONTROLLER: (RequestKind.INPUT, inputs.SUPPORTED_NAMES),
        Namespace.STEP_SPEAKER: (RequestKind.STEP_SPEAKER, speaker.SUPPORTED_NAMES),
        Namespace.PLAYBACK_CONTROLLER: (RequestKind.PLAYBACK, playback.SUPPORTED_NAMES),
    },
    ProtocolVersion.LEGACY: {
        LegacyNamespace.DISCOVERY: (RequestKind.DISCOVERY, discovery.LEGACY_SUPPORTED_NAMES),
        LegacyNamespace.CONTROL: (RequestKind.POWER, power.LEGACY_SUPPORTED_NAMES),
    },
}

HANDLERS: dict[RequestKind, Handler] = {
    RequestKind.DISCOVERY: discovery.handle_discovery,
    RequestKind.POWER: power.handle_power,
    RequestKind.CHANNEL: channel.handle_channel,
    RequestKind.INPUT: inputs.handle_input,
    RequestKind.STEP_SPEAKER: speaker.handle_step_speaker,
    RequestKind.PLAYBACK: playback.handle_playback,
}


def detect_protocol(raw: Any) -> ProtocolVersion:
    """v3 wraps everything in `directive`; v2 has a top-level header."""
    if isinstance(raw, dict) and "directive" not in raw and "header" in raw:
        return ProtocolVersion.LEGACY
    return ProtocolVersion.V3


def parse_directive(raw: Any) -> Directive:
    protocol = detect_protocol(raw)
    body = raw.get("directive") if protocol is ProtocolVersion.V3 and isinstance(raw, dict) else raw
    if not isinstance(body, dict):
        raise DirectiveError(ErrorType.INTERNAL_ERROR, f"Invalid event: {_preview(raw)}")
    try:
        return Directive.model_validate({**body, "protocol": protocol})
    except ValidationError:
        raise DirectiveError(ErrorType.INTERNAL_ERROR, f"Invalid event: {_preview(raw)}")


def resolve(directive: Directive) -> RequestKind:
    route = ROUTES[directive.protocol].get(directive.namespace)
    if route is None:
        raise DirectiveError(ErrorType.INTERNAL_ERROR, f"Unsupported namespace: {directive.namespace}")
    kind, names = route
    if directive.name not in names:
        raise DirectiveError(ErrorType.INVALID_DIRECTIVE, f"Unsupported directive name: {directive.name}")
    return kind


def _preview(raw: Any) -> str:
    return json.dumps(raw, default=str)[:300]


class Dispatcher:
    def __init__(self, http: HttpClient, handlers: Optional[dict[RequestKind, Handler]] = None):
        self._http = http
        self._handlers = handlers if handlers is not None else HANDLERS

    async def dispatch(self, raw: Any) -> dict[str, Any]:
        """Turn one inbound envelope into one outbound envelope. Never raises DirectiveError."""
        protocol = detect_protocol(raw)
        directive: Optional[Directive] = None
        try:
            directive = parse_directive(raw)
            kind = resolve(directive)
            logger.debug(f"Dispatching {directive.namespace}.{directive.name} -> {kind.value}")
            return await self._handlers[kind](directive, self._http)
        except DirectiveError as e:
            return build_error(
                e.error_type,
                e.message,
                protocol,
                correlation_token=directive.header.correlation_token if directive else None,
                endpoint=directive.endpoint_echo() if directive else None,
            )
