"""
Serverless entry point: `smarthome_bridge.handler.lambda_handler`.

Configuration comes from REMOTE_HOST / REMOTE_PORT / IS_VERBOSE on every
invocation and is handed to the bridge explicitly.
"""

import logging
from typing import Any

from smarthome_bridge.client import Bridge
from smarthome_bridge.config import BridgeConfig

PACKAGE_LOGGER = "smarthome_bridge"


def configure_logging(verbose: bool) -> None:
    """DEBUG for the package when verbose, INFO otherwise. Handlers are left to the host."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    config = BridgeConfig.from_env()
    configure_logging(config.verbose)
    with Bridge(config) as bridge:
        return bridge.handle(event)
