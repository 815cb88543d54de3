"""
StepSpeaker — SetMute / AdjustVolume.

StepSpeaker has no reportable properties, so success is a bare Response.
"""

from typing import Any

from smarthome_bridge.errors import DirectiveError
from smarthome_bridge.handlers.common import control_call, require_name, respond
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.events import ErrorType
from smarthome_bridge.transport.http import HttpClient

SUPPORTED_NAMES = frozenset({"SetMute", "AdjustVolume"})


def volume_body(name: str, payload: dict[str, Any]) -> dict[str, Any]:
    if name == "SetMute":
        mute = payload.get("mute")
        if not isinstance(mute, bool):
            raise DirectiveError(ErrorType.INVALID_VALUE, f"Invalid mute: {mute!r}")
        return {"mute": mute}

    steps = payload.get("volumeSteps")
    if not isinstance(steps, int) or isinstance(steps, bool):
        raise DirectiveError(ErrorType.INVALID_VALUE, f"Invalid volumeSteps: {steps!r}")
    body: dict[str, Any] = {"volumeSteps": steps}
    if isinstance(payload.get("volumeStepsDefault"), bool):
        body["volumeStepsDefault"] = payload["volumeStepsDefault"]
    return body


async def handle_step_speaker(directive: Directive, http: HttpClient) -> dict[str, Any]:
    name = require_name(directive, SUPPORTED_NAMES)
    await control_call(http, directive, "volume", volume_body(name, directive.payload))
    return respond(directive)
