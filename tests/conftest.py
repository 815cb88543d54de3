"""Shared fixtures: a recording fake backend and directive builders."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from smarthome_bridge import AsyncBridge, BridgeConfig


class FakeBackend:
    """httpx MockTransport that records every request and answers with a canned reply."""

    def __init__(self, status: int = 200, body: Any = None, error: Optional[str] = None):
        self.status = status
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def reply(self, status: int = 200, body: Any = None) -> None:
        self.status = status
        self.body = body
        self.error = None

    def fail(self, message: str = "connection refused") -> None:
        self.error = message

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise httpx.ConnectError(self.error, request=request)
        if self.body is None:
            text = ""
        elif isinstance(self.body, str):
            text = self.body
        else:
            text = json.dumps(self.body)
        return httpx.Response(self.status, text=text)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def config() -> BridgeConfig:
    return BridgeConfig(host="backend.local", port=8080)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def make_bridge(config: BridgeConfig, backend: FakeBackend) -> Callable[..., AsyncBridge]:
    def _make(**overrides: Any) -> AsyncBridge:
        cfg = config.model_copy(update=overrides) if overrides else config
        return AsyncBridge(cfg, transport=backend.transport)
    return _make


def v3_directive(
    namespace: str,
    name: str,
    payload: Optional[dict[str, Any]] = None,
    endpoint_id: Optional[str] = "e1",
    token: str = "tok",
    correlation_token: Optional[str] = "corr-1",
) -> dict[str, Any]:
    header: dict[str, Any] = {
        "namespace": namespace,
        "name": name,
        "payloadVersion": "3",
        "messageId": "msg-1",
    }
    if correlation_token:
        header["correlationToken"] = correlation_token
    directive: dict[str, Any] = {"header": header, "payload": payload or {}}
    if endpoint_id is not None:
        directive["endpoint"] = {
            "scope": {"type": "BearerToken", "token": token},
            "endpointId": endpoint_id,
            "cookie": {},
        }
    return {"directive": directive}


def v3_discover(token: str = "tok") -> dict[str, Any]:
    return v3_directive(
        "Alexa.Discovery", "Discover",
        payload={"scope": {"type": "BearerToken", "token": token}},
        endpoint_id=None, correlation_token=None,
    )


def legacy_directive(namespace: str, name: str, payload: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    return {
        "header": {"namespace": namespace, "name": name, "payloadVersion": "2", "messageId": "m-2"},
        "payload": payload or {},
    }


@pytest.fixture
def directive() -> Callable[..., dict[str, Any]]:
    return v3_directive


@pytest.fixture
def discover() -> Callable[..., dict[str, Any]]:
    return v3_discover


@pytest.fixture
def legacy() -> Callable[..., dict[str, Any]]:
    return legacy_directive
