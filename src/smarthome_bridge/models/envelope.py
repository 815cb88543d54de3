"""
Outbound event envelopes — legacy (v2) and v3 shapes.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Wire(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EventHeader(_Wire):
    namespace: str
    name: str
    payload_version: str
    message_id: str
    correlation_token: Optional[str] = None  # v3 only, echoed from the directive


class ReportedProperty(_Wire):
    namespace: str
    name: str
    value: Any
    time_of_sample: str
    uncertainty_in_milliseconds: int = 0
    instance: Optional[str] = None


class EventContext(_Wire):
    properties: list[ReportedProperty] = []


class Event(_Wire):
    header: EventHeader
    endpoint: Optional[dict[str, Any]] = None
    payload: dict[str, Any] = {}


class EventEnvelope(_Wire):
    """v3: { event: {header, endpoint?, payload}, context? }"""
    event: Event
    context: Optional[EventContext] = None


class LegacyEnvelope(_Wire):
    """v2: { header, payload }"""
    header: EventHeader
    payload: dict[str, Any] = {}
