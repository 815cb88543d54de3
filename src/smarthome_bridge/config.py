"""
Bridge configuration — remote backend location and verbosity.

Passed explicitly to the transport; nothing here is read at import time.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

from smarthome_bridge.errors import ConfigError

ENV_HOST = "REMOTE_HOST"
ENV_PORT = "REMOTE_PORT"
ENV_VERBOSE = "IS_VERBOSE"

_FALSY = {"", "0", "false", "no", "off"}


class BridgeConfig(BaseModel):
    host: str = Field(min_length=1)
    port: int
    verbose: bool = False
    scheme: Literal["http", "https"] = "http"
    control_method: Literal["PUT", "POST"] = "PUT"
    timeout: Optional[float] = None  # None: wait for the backend indefinitely

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeConfig":
        env = os.environ if environ is None else environ
        host = env.get(ENV_HOST)
        port = env.get(ENV_PORT)
        if not host or not port:
            raise ConfigError(f"{ENV_HOST} and {ENV_PORT} must be set")
        try:
            port_number = int(port)
        except ValueError:
            raise ConfigError(f"{ENV_PORT} is not a port number: {port!r}")
        return cls(
            host=host,
            port=port_number,
            verbose=env.get(ENV_VERBOSE, "").strip().lower() not in _FALSY,
        )
