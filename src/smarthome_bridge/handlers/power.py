"""
PowerController — TurnOn / TurnOff (legacy: TurnOnRequest / TurnOffRequest).
"""

from typing import Any
from urllib.parse import quote

from smarthome_bridge.handlers.common import control_call, reported, require_name, require_target, respond, send
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.events import EventName, LegacyNamespace, Namespace, ProtocolVersion
from smarthome_bridge.transport.envelope import build_event
from smarthome_bridge.transport.http import HttpClient

SUPPORTED_NAMES = frozenset({"TurnOn", "TurnOff"})
LEGACY_SUPPORTED_NAMES = frozenset({"TurnOnRequest", "TurnOffRequest"})


async def handle_power(directive: Directive, http: HttpClient) -> dict[str, Any]:
    if directive.protocol is ProtocolVersion.LEGACY:
        return await _handle_legacy(directive, http)

    name = require_name(directive, SUPPORTED_NAMES)
    requested = "on" if name == "TurnOn" else "off"
    _, state = await control_call(http, directive, "power", {"state": requested})
    value = state.get("state") if isinstance(state.get("state"), str) else requested
    return respond(directive, [reported(Namespace.POWER_CONTROLLER, "powerState", value.upper(), state)])


async def _handle_legacy(directive: Directive, http: HttpClient) -> dict[str, Any]:
    name = require_name(directive, LEGACY_SUPPORTED_NAMES)
    turn_on = name == "TurnOnRequest"
    appliance_id, token = require_target(directive)
    # v2 backends take the level on the device resource itself
    await send(http, "PUT", f"/devices/{quote(appliance_id, safe='')}", {"level": "on" if turn_on else "off"}, token)
    return build_event(
        LegacyNamespace.CONTROL,
        EventName.TURN_ON_CONFIRMATION if turn_on else EventName.TURN_OFF_CONFIRMATION,
        protocol=ProtocolVersion.LEGACY,
    )
