"""
Shared plumbing for the control handlers: target extraction, the single
backend call, and reported-state responses.
"""

import math
from typing import Any, Optional
from urllib.parse import quote

from smarthome_bridge.errors import DirectiveError, TransportError
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.envelope import ReportedProperty
from smarthome_bridge.models.events import ErrorType
from smarthome_bridge.transport.envelope import build_property, build_response
from smarthome_bridge.transport.http import HttpClient, HttpResponse


def require_name(directive: Directive, supported: frozenset[str]) -> str:
    if directive.name not in supported:
        raise DirectiveError(ErrorType.INVALID_DIRECTIVE, f"Unsupported directive name: {directive.name}")
    return directive.name


def require_target(directive: Directive) -> tuple[str, str]:
    """(endpoint id, access token) for a control directive."""
    endpoint_id = directive.endpoint_id
    if not endpoint_id:
        raise DirectiveError(ErrorType.INVALID_VALUE, "Missing endpointId.")
    token = directive.access_token
    if not token:
        raise DirectiveError(ErrorType.INVALID_AUTHORIZATION_CREDENTIAL, "Missing access token.")
    return endpoint_id, token


async def send(http: HttpClient, method: str, path: str, body: dict[str, Any], token: str) -> HttpResponse:
    """Issue the one backend call; anything but a 200 fails the directive."""
    try:
        resp = await http.request(method, path, body, params={"access_token": token})
    except TransportError as e:
        raise DirectiveError(ErrorType.ENDPOINT_UNREACHABLE, f"Failed {method} request: {e}")
    if not resp.ok:
        raise DirectiveError(ErrorType.INTERNAL_ERROR, f"Unexpected HTTP statusCode: {resp.status}")
    return resp


async def control_call(
    http: HttpClient, directive: Directive, resource: str, body: dict[str, Any],
) -> tuple[HttpResponse, dict[str, Any]]:
    """Send a control body to /endpoints/{id}/{resource}; returns the response and its parsed state."""
    endpoint_id, token = require_target(directive)
    resp = await send(http, http.control_method, f"/endpoints/{quote(endpoint_id, safe='')}/{resource}", body, token)
    return resp, parse_state(resp)


def parse_state(resp: HttpResponse) -> dict[str, Any]:
    """Device state from a 200 body. Empty or non-object bodies give {}."""
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def reported(namespace: str, name: str, value: Any, state: dict[str, Any]) -> ReportedProperty:
    """Reported property stamped from the backend's isoTimestamp / uncertaintyMs."""
    uncertainty = state.get("uncertaintyMs")
    if not isinstance(uncertainty, (int, float)) or not math.isfinite(uncertainty):
        uncertainty = 0
    return build_property(
        namespace,
        name,
        value,
        time_of_sample=state.get("isoTimestamp") if isinstance(state.get("isoTimestamp"), str) else None,
        uncertainty_ms=int(uncertainty),
    )


def respond(directive: Directive, properties: Optional[list[ReportedProperty]] = None) -> dict[str, Any]:
    return build_response(
        properties,
        correlation_token=directive.header.correlation_token,
        endpoint=directive.endpoint_echo(),
    )
