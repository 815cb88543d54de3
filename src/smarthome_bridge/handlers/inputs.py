"""
InputController — SelectInput.
"""

from typing import Any

from smarthome_bridge.errors import DirectiveError
from smarthome_bridge.handlers.common import control_call, reported, require_name, respond
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.events import ErrorType, Namespace
from smarthome_bridge.transport.http import HttpClient

SUPPORTED_NAMES = frozenset({"SelectInput"})


async def handle_input(directive: Directive, http: HttpClient) -> dict[str, Any]:
    require_name(directive, SUPPORTED_NAMES)
    requested = directive.payload.get("input")
    if not isinstance(requested, str) or not requested.strip():
        raise DirectiveError(ErrorType.INVALID_VALUE, f"Invalid input: {requested!r}")

    _, state = await control_call(http, directive, "input", {"input": requested})
    value = state.get("input") if isinstance(state.get("input"), str) else requested
    return respond(directive, [reported(Namespace.INPUT_CONTROLLER, "input", value, state)])
