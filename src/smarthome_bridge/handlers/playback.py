"""
PlaybackController — transport controls, forwarded as an operation name.
"""

from typing import Any

from smarthome_bridge.handlers.common import control_call, require_name, respond
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.transport.http import HttpClient

SUPPORTED_NAMES = frozenset({
    "FastForward", "Next", "Pause", "Play", "Previous", "Rewind", "StartOver", "Stop",
})


async def handle_playback(directive: Directive, http: HttpClient) -> dict[str, Any]:
    name = require_name(directive, SUPPORTED_NAMES)
    await control_call(http, directive, "playback", {"operation": name})
    return respond(directive)
