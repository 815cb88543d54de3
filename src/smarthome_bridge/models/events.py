"""
Protocol constants — namespaces, directive names, error kinds.
"""

from enum import Enum


class ProtocolVersion(str, Enum):
    """Envelope revision. The value is the fixed payloadVersion."""
    LEGACY = "2"
    V3 = "3"


class Namespace:
    """v3 interface namespaces."""
    ALEXA = "Alexa"
    DISCOVERY = "Alexa.Discovery"
    POWER_CONTROLLER = "Alexa.PowerController"
    CHANNEL_CONTROLLER = "Alexa.ChannelController"
    INPUT_CONTROLLER = "Alexa.InputController"
    STEP_SPEAKER = "Alexa.StepSpeaker"
    PLAYBACK_CONTROLLER = "Alexa.PlaybackController"


class LegacyNamespace:
    DISCOVERY = "Alexa.ConnectedHome.Discovery"
    CONTROL = "Alexa.ConnectedHome.Control"


class EventName:
    RESPONSE = "Response"
    ERROR_RESPONSE = "ErrorResponse"
    DISCOVER_RESPONSE = "Discover.Response"
    # legacy
    DISCOVER_APPLIANCES_RESPONSE = "DiscoverAppliancesResponse"
    TURN_ON_CONFIRMATION = "TurnOnConfirmation"
    TURN_OFF_CONFIRMATION = "TurnOffConfirmation"


class ErrorType(str, Enum):
    ENDPOINT_UNREACHABLE = "ENDPOINT_UNREACHABLE"
    NO_SUCH_ENDPOINT = "NO_SUCH_ENDPOINT"
    INVALID_VALUE = "INVALID_VALUE"
    VALUE_OUT_OF_RANGE = "VALUE_OUT_OF_RANGE"
    TEMPERATURE_VALUE_OUT_OF_RANGE = "TEMPERATURE_VALUE_OUT_OF_RANGE"
    INVALID_DIRECTIVE = "INVALID_DIRECTIVE"
    FIRMWARE_OUT_OF_RANGE = "FIRMWARE_OUT_OF_RANGE"
    HARDWARE_MALFUNCTION = "HARDWARE_MALFUNCTION"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    INVALID_AUTHORIZATION_CREDENTIAL = "INVALID_AUTHORIZATION_CREDENTIAL"
    EXPIRED_AUTHORIZATION_CREDENTIAL = "EXPIRED_AUTHORIZATION_CREDENTIAL"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# v2 had one error event name per kind and no {type, message} payload.
LEGACY_ERROR_NAMES: dict[ErrorType, str] = {
    ErrorType.ENDPOINT_UNREACHABLE: "DependentServiceUnavailableError",
    ErrorType.NO_SUCH_ENDPOINT: "NoSuchTargetError",
    ErrorType.INVALID_VALUE: "UnexpectedInformationReceivedError",
    ErrorType.VALUE_OUT_OF_RANGE: "ValueOutOfRangeError",
    ErrorType.TEMPERATURE_VALUE_OUT_OF_RANGE: "ValueOutOfRangeError",
    ErrorType.INVALID_DIRECTIVE: "UnsupportedOperationError",
    ErrorType.FIRMWARE_OUT_OF_RANGE: "UnsupportedTargetSettingError",
    ErrorType.HARDWARE_MALFUNCTION: "TargetHardwareMalfunctionError",
    ErrorType.RATE_LIMIT_EXCEEDED: "RateLimitExceededError",
    ErrorType.INVALID_AUTHORIZATION_CREDENTIAL: "InvalidAccessTokenError",
    ErrorType.EXPIRED_AUTHORIZATION_CREDENTIAL: "ExpiredAccessTokenError",
    ErrorType.INTERNAL_ERROR: "DriverInternalError",
}
