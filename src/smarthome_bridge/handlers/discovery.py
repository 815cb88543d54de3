"""
Discovery — list the customer's devices from the backend.

Discovery never fails towards the platform: any transport, status or parse
problem is logged and answered with an empty device list.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from smarthome_bridge.capabilities import CAPABILITY_TABLE, capability_entries, legacy_actions
from smarthome_bridge.errors import BridgeError, DirectiveError, TransportError
from smarthome_bridge.models.directive import Directive
from smarthome_bridge.models.endpoint import Device, LegacyDevice
from smarthome_bridge.models.events import ErrorType, EventName, LegacyNamespace, Namespace, ProtocolVersion
from smarthome_bridge.transport.envelope import build_event
from smarthome_bridge.transport.http import HttpClient

logger = logging.getLogger("smarthome_bridge.handlers.discovery")

SUPPORTED_NAMES = frozenset({"Discover"})
LEGACY_SUPPORTED_NAMES = frozenset({"DiscoverAppliancesRequest"})


def parse_device(raw: Any, protocol: ProtocolVersion) -> Optional[Device]:
    try:
        if protocol is ProtocolVersion.LEGACY:
            return LegacyDevice.model_validate(raw).to_device()
        return Device.model_validate(raw)
    except ValidationError:
        return None


def is_supported(device: Device) -> bool:
    return bool(
        device.id
        and device.name
        and device.description
        and device.manufacturer
        and device.type in CAPABILITY_TABLE
    )


def to_endpoint(device: Device) -> dict[str, Any]:
    return {
        "endpointId": device.id,
        "manufacturerName": device.manufacturer,
        "friendlyName": device.name,
        "description": device.description,
        "displayCategories": [],
        "capabilities": capability_entries(device.type),
    }


def to_appliance(device: Device) -> dict[str, Any]:
    return {
        "applianceId": device.id,
        "manufacturerName": device.manufacturer,
        "modelName": "Unknown",
        "version": "Unknown",
        "friendlyName": device.name,
        "friendlyDescription": device.description,
        "isReachable": True,
        "actions": legacy_actions(device.type),
    }


async def fetch_devices(directive: Directive, http: HttpClient) -> list[Device]:
    token = directive.access_token
    if not token:
        raise DirectiveError(ErrorType.INVALID_AUTHORIZATION_CREDENTIAL, "Missing access token.")
    path = "/devices" if directive.protocol is ProtocolVersion.LEGACY else "/endpoints"
    resp = await http.get(path, params={"access_token": token})
    if not resp.ok:
        raise TransportError(f"Unexpected HTTP statusCode: {resp.status}")
    raw = resp.json()
    if not isinstance(raw, list):
        raise ValueError(f"expected a list of devices, got {type(raw).__name__}")
    devices = []
    for item in raw:
        device = parse_device(item, directive.protocol)
        if device is not None and is_supported(device):
            devices.append(device)
    return devices


def discovery_response(devices: list[Device], protocol: ProtocolVersion) -> dict[str, Any]:
    if protocol is ProtocolVersion.LEGACY:
        return build_event(
            LegacyNamespace.DISCOVERY,
            EventName.DISCOVER_APPLIANCES_RESPONSE,
            {"discoveredAppliances": [to_appliance(d) for d in devices]},
            protocol=protocol,
        )
    return build_event(
        Namespace.DISCOVERY,
        EventName.DISCOVER_RESPONSE,
        {"endpoints": [to_endpoint(d) for d in devices]},
    )


async def handle_discovery(directive: Directive, http: HttpClient) -> dict[str, Any]:
    try:
        devices = await fetch_devices(directive, http)
    except (BridgeError, ValueError) as e:
        logger.error(f"Discovery error: {e}")
        devices = []
    logger.info(f"Discovery found {len(devices)} devices.")
    return discovery_response(devices, directive.protocol)
