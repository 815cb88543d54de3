import pytest

from smarthome_bridge import TransportError
from smarthome_bridge.transport.http import HttpClient


@pytest.mark.asyncio
async def test_put_sends_json_with_length(config, backend):
    backend.reply(200, {"state": "on"})
    http = HttpClient(config, transport=backend.transport)
    try:
        resp = await http.put("/endpoints/e1/power", {"state": "on"}, params={"access_token": "tok"})
    finally:
        await http.close()

    req = backend.last
    assert str(req.url) == "http://backend.local:8080/endpoints/e1/power?access_token=tok"
    assert req.headers["Content-Type"] == "application/json"
    assert req.headers["Accept"] == "*/*"
    assert req.headers["Content-Length"] == str(len(b'{"state": "on"}'))
    assert resp.status == 200
    assert resp.ok
    assert resp.json() == {"state": "on"}


@pytest.mark.asyncio
async def test_non_200_is_returned_not_raised(config, backend):
    backend.reply(404, "no such device")
    http = HttpClient(config, transport=backend.transport)
    try:
        resp = await http.get("/endpoints", params={"access_token": "tok"})
    finally:
        await http.close()
    assert resp.status == 404
    assert not resp.ok
    assert resp.text == "no such device"


@pytest.mark.asyncio
async def test_socket_error_raises_transport_error(config, backend):
    backend.fail("connection reset")
    http = HttpClient(config, transport=backend.transport)
    try:
        with pytest.raises(TransportError) as exc:
            await http.post("/endpoints/e1/playback", {"operation": "Play"})
    finally:
        await http.close()
    assert "connection reset" in str(exc.value)
    assert exc.value.details == {"method": "POST", "path": "/endpoints/e1/playback"}


@pytest.mark.asyncio
async def test_get_has_no_body(config, backend):
    http = HttpClient(config, transport=backend.transport)
    try:
        await http.get("/endpoints")
    finally:
        await http.close()
    assert backend.last.content == b""


@pytest.mark.asyncio
async def test_invalid_url_raises_transport_error(config, backend):
    http = HttpClient(config, transport=backend.transport)
    try:
        with pytest.raises(TransportError) as exc:
            await http.get("/endpoints/e\x001/power")
    finally:
        await http.close()
    assert exc.value.details["method"] == "GET"
    assert backend.requests == []
