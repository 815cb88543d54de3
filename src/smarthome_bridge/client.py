"""
AsyncBridge / Bridge — main entry points around the dispatcher.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx

from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.dispatcher import Dispatcher
from smarthome_bridge.transport.http import HttpClient

logger = logging.getLogger("smarthome_bridge.client")


class AsyncBridge:
    """Async bridge (primary). One instance may serve several invocations."""

    def __init__(
        self,
        config: BridgeConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.http = HttpClient(config, transport=transport)
        self._dispatcher = Dispatcher(self.http)

    async def handle(self, event: Any) -> dict[str, Any]:
        """Answer one inbound directive envelope with one outbound event envelope."""
        logger.debug(f"event({event!r})")
        response = await self._dispatcher.dispatch(event)
        logger.debug(f"response({response!r})")
        return response

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncBridge":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class Bridge:
    """Sync wrapper around AsyncBridge. Runs the event loop internally."""

    def __init__(self, config: BridgeConfig, **kwargs: Any):
        self._async = AsyncBridge(config, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def config(self) -> BridgeConfig:
        return self._async.config

    def handle(self, event: Any) -> dict[str, Any]:
        return self._run(self._async.handle(event))

    def close(self) -> None:
        try:
            self._run(self._async.close())
        finally:
            self._loop.close()

    def __enter__(self) -> "Bridge":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
