"""
Device type -> supported control interfaces. Static table, no configuration.
"""

from enum import Enum
from typing import Any

from smarthome_bridge.models.endpoint import DeviceType
from smarthome_bridge.models.events import Namespace

CAPABILITY_VERSION = "1.0"


class Capability(str, Enum):
    POWER_CONTROLLER = Namespace.POWER_CONTROLLER
    CHANNEL_CONTROLLER = Namespace.CHANNEL_CONTROLLER
    PLAYBACK_CONTROLLER = Namespace.PLAYBACK_CONTROLLER
    STEP_SPEAKER = Namespace.STEP_SPEAKER
    INPUT_CONTROLLER = Namespace.INPUT_CONTROLLER


# Tuples keep the order interfaces are announced in during discovery.
CAPABILITY_TABLE: dict[str, tuple[Capability, ...]] = {
    DeviceType.SWITCH_BINARY.value: (Capability.POWER_CONTROLLER,),
    DeviceType.TELEVISION.value: (
        Capability.POWER_CONTROLLER,
        Capability.CHANNEL_CONTROLLER,
        Capability.PLAYBACK_CONTROLLER,
        Capability.STEP_SPEAKER,
        Capability.INPUT_CONTROLLER,
    ),
    DeviceType.ROKU.value: (Capability.CHANNEL_CONTROLLER, Capability.PLAYBACK_CONTROLLER),
}

# legacy discovery advertises actions instead of interfaces
LEGACY_ACTIONS: dict[Capability, tuple[str, ...]] = {
    Capability.POWER_CONTROLLER: ("turnOn", "turnOff"),
}


def capabilities_for(device_type: str) -> frozenset[Capability]:
    """Supported interfaces for a device type tag; empty for unknown tags."""
    return frozenset(CAPABILITY_TABLE.get(device_type, ()))


def capability_entries(device_type: str) -> list[dict[str, Any]]:
    return [
        {"interface": cap.value, "type": "AlexaInterface", "version": CAPABILITY_VERSION}
        for cap in CAPABILITY_TABLE.get(device_type, ())
    ]


def legacy_actions(device_type: str) -> list[str]:
    actions: list[str] = []
    for cap in CAPABILITY_TABLE.get(device_type, ()):
        actions.extend(LEGACY_ACTIONS.get(cap, ()))
    return actions
