"""
ChannelController — ChangeChannel / SkipChannels.
"""

from typing import Any

from smarthome_bridge.errors import DirectiveError
from smarthome_bridge.handlers.common import control_call, reported, require_name, respond
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.events import ErrorType, Namespace
from smarthome_bridge.transport.http import HttpClient

SUPPORTED_NAMES = frozenset({"ChangeChannel", "SkipChannels"})


def change_channel_body(payload: dict[str, Any]) -> dict[str, Any]:
    """Channel fields (number, callSign, uri, ...) merged with the spoken metadata."""
    channel = payload.get("channel")
    metadata = payload.get("channelMetadata")
    if not isinstance(channel, dict) and not isinstance(metadata, dict):
        raise DirectiveError(ErrorType.INVALID_VALUE, "ChangeChannel requires channel or channelMetadata.")
    body: dict[str, Any] = dict(channel) if isinstance(channel, dict) else {}
    if isinstance(metadata, dict):
        body["metadata"] = metadata
    return body


def skip_channels_body(payload: dict[str, Any]) -> dict[str, Any]:
    count = payload.get("channelCount")
    if not isinstance(count, int) or isinstance(count, bool):
        raise DirectiveError(ErrorType.INVALID_VALUE, f"Invalid channelCount: {count!r}")
    return {"channelCount": count}


async def handle_channel(directive: Directive, http: HttpClient) -> dict[str, Any]:
    name = require_name(directive, SUPPORTED_NAMES)
    if name == "ChangeChannel":
        body = change_channel_body(directive.payload)
    else:
        body = skip_channels_body(directive.payload)

    _, state = await control_call(http, directive, "channel", body)

    channel = state.get("channel")
    if not isinstance(channel, dict) and name == "ChangeChannel" and isinstance(directive.payload.get("channel"), dict):
        channel = directive.payload["channel"]
    if not isinstance(channel, dict):
        # skipped without the backend telling us where we landed
        return respond(directive)
    return respond(directive, [reported(Namespace.CHANNEL_CONTROLLER, "channel", channel, state)])
