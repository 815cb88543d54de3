"""
Bridge error types — the error kinds map onto the ErrorResponse payload types.
"""

from typing import Any, Optional

from smarthome_bridge.models.events import ErrorType


class BridgeError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ConfigError(BridgeError):
    def __init__(self, message: str):
        super().__init__("config_error", message)


class TransportError(BridgeError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("transport_error", message, details)


class DirectiveError(BridgeError):
    """Raised while parsing or handling a directive; becomes an ErrorResponse."""

    def __init__(self, error_type: ErrorType, message: str):
        super().__init__(error_type.value, message)
        self.error_type = error_type
