"""
HTTP client for the device backend.

One request per call. Any status code is returned to the caller; only
socket/protocol failures raise.
"""

import json
import logging
from typing import Any, Optional

import httpx

from smarthome_bridge.config import BridgeConfig
from smarthome_bridge.errors import TransportError

logger = logging.getLogger("smarthome_bridge.transport.http")


class HttpResponse:
    __slots__ = ("status", "headers", "text")

    def __init__(self, status: int, headers: dict[str, str], text: str):
        self.status = status
        self.headers = headers
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status == 200

    def json(self) -> Any:
        return json.loads(self.text)

    def __repr__(self) -> str:
        return f"HttpResponse(status={self.status!r}, length={len(self.text)})"


class HttpClient:
    def __init__(self, config: BridgeConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={"User-Agent": "smarthome-bridge/0.1.0", "Accept": "*/*"},
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def control_method(self) -> str:
        return self._config.control_method

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        content = json.dumps(body) if body is not None else None
        if content is None:
            logger.debug(f"{method} {path}")
        else:
            logger.debug(f"{method} {path} {content}")
        try:
            resp = await self._client.request(
                method,
                path,
                params=params,
                content=content,
                headers={"Content-Type": "application/json"},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {path} failed: {e}", details={"method": method, "path": path}) from e
        return HttpResponse(resp.status_code, dict(resp.headers), resp.text)

    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> HttpResponse:
        return await self.request("GET", path, params=params)

    async def put(self, path: str, body: dict[str, Any], params: Optional[dict[str, str]] = None) -> HttpResponse:
        return await self.request("PUT", path, body, params)

    async def post(self, path: str, body: dict[str, Any], params: Optional[dict[str, str]] = None) -> HttpResponse:
        return await self.request("POST", path, body, params)

    async def close(self) -> None:
        await self._client.aclose()
