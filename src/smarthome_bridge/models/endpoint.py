"""
Backend device descriptors — GET /endpoints (v3) and GET /devices (legacy).
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class DeviceType(str, Enum):
    SWITCH_BINARY = "switchBinary"
    ROKU = "roku"
    TELEVISION = "television"


class Device(BaseModel):
    """Normalised device. `type` stays a plain string so unknown tags survive parsing."""
    id: str = ""
    name: str = ""
    description: str = ""
    manufacturer: str = ""
    type: str = ""


class LegacyMetrics(BaseModel):
    title: Optional[str] = None
    level: Optional[str] = None


class LegacyDevice(BaseModel):
    id: Optional[str] = None
    metrics: Optional[LegacyMetrics] = None

    def to_device(self) -> Optional[Device]:
        """Legacy devices are binary switches; anything without an on/off level is skipped."""
        if not self.id or not self.metrics or not self.metrics.title:
            return None
        if self.metrics.level not in ("on", "off"):
            return None
        return Device(
            id=self.id,
            name=self.metrics.title,
            description=self.metrics.title,
            manufacturer="Unknown",
            type=DeviceType.SWITCH_BINARY.value,
        )
