"""
smarthome-bridge — smart home directive adapter for Python.

Translates voice-assistant Discovery and Control directives into calls
against an HTTP device backend, and the backend's replies into events.
"""

from smarthome_bridge.client import AsyncBridge, Bridge
from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.capabilities import Capability, capabilities_for
from smarthome_bridge.errors import BridgeError, ConfigError, DirectiveError, TransportError
from smarthome_bridge.models.events import ErrorType, Namespace, ProtocolVersion

__version__ = "0.1.0"
__all__ = [
    "AsyncBridge",
    "Bridge",
    "BridgeConfig",
    "Capability",
    "capabilities_for",
    "BridgeError",
    "ConfigError",
    "DirectiveError",
    "TransportError",
    "ErrorType",
    "Namespace",
    "ProtocolVersion",
]
