from __future__ import annotations

import contextlib
from collections.abc import AsyncIterator
from typing import Any

import aiohttp
import pytest

from pybluelink._transport import AiohttpTransport, ResponseEnvelope
from pybluelink.exceptions import BluelinkMalformedResponseError, BluelinkTimeoutError, BluelinkTransportError


class _FakeResponse:
    def __init__(self, status: int, raw: bytes) -> None:
        self.status = status
        self._raw = raw
        self.headers = {"Content-Type": "application/json; charset=utf-8"}

    async def text(self) -> str:
        return self._raw.decode("utf-8")


class _FakeHttpSession:
    def __init__(
        self,
        *,
        status: int = 200,
        text: str = "{}",
        raw: bytes | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.closed = False
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self._status = status
        self._raw = raw if raw is not None else text.encode("utf-8")
        self._error = error

    @contextlib.asynccontextmanager
    async def request(self, method: str, url: str, **kwargs: Any) -> AsyncIterator[_FakeResponse]:
        self.calls.append((method, url, kwargs))
        if self._error is not None:
            raise self._error
        yield _FakeResponse(self._status, self._raw)


@pytest.mark.asyncio
async def test_non_2xx_is_returned_as_envelope() -> None:
    http = _FakeHttpSession(status=500, text='{"errorMessage": "boom"}')
    transport = AiohttpTransport(http)  # type: ignore[arg-type]

    response = await transport.request("GET", "https://host/x", headers={"a": "b"}, timeout=5.0)

    assert response.status_code == 500
    assert not response.ok
    assert response.decode_json() == {"errorMessage": "boom"}
    method, url, kwargs = http.calls[0]
    assert (method, url) == ("GET", "https://host/x")
    assert kwargs["headers"] == {"a": "b"}
    assert kwargs["timeout"].total == 5.0
    assert "json" not in kwargs
    assert "data" not in kwargs


@pytest.mark.asyncio
async def test_bodies_are_forwarded() -> None:
    http = _FakeHttpSession()
    transport = AiohttpTransport(http)  # type: ignore[arg-type]

    await transport.request("POST", "https://host/form", headers={}, data="a=1")
    await transport.request("POST", "https://host/json", headers={}, json_body={"a": 1})

    assert http.calls[0][2]["data"] == "a=1"
    assert http.calls[1][2]["json"] == {"a": 1}
    assert http.calls[1][2]["timeout"].total is None


@pytest.mark.asyncio
async def test_client_error_maps_to_transport_error() -> None:
    transport = AiohttpTransport(_FakeHttpSession(error=aiohttp.ClientConnectionError("reset")))  # type: ignore[arg-type]

    with pytest.raises(BluelinkTransportError) as exc_info:
        await transport.request("GET", "https://host/x", headers={})

    assert not isinstance(exc_info.value, BluelinkTimeoutError)
    assert exc_info.value.endpoint == "https://host/x"


@pytest.mark.asyncio
async def test_timeout_maps_to_timeout_error() -> None:
    transport = AiohttpTransport(_FakeHttpSession(error=TimeoutError()))  # type: ignore[arg-type]

    with pytest.raises(BluelinkTimeoutError):
        await transport.request("GET", "https://host/x", headers={}, timeout=0.1)


def test_decode_json_rejects_empty_and_invalid_bodies() -> None:
    with pytest.raises(BluelinkMalformedResponseError):
        ResponseEnvelope(status_code=200, body="").decode_json()

    with pytest.raises(BluelinkMalformedResponseError):
        ResponseEnvelope(status_code=200, body="<html>").decode_json()


@pytest.mark.asyncio
async def test_undecodable_body_is_malformed() -> None:
    http = _FakeHttpSession(raw=b'{"vehicleStatus": "\xff\xfe"}')
    transport = AiohttpTransport(http)  # type: ignore[arg-type]

    with pytest.raises(BluelinkMalformedResponseError) as exc_info:
        await transport.request("GET", "https://host/status", headers={})

    assert exc_info.value.endpoint == "https://host/status"


@pytest.mark.asyncio
async def test_closed_session_raises_transport_error() -> None:
    http = _FakeHttpSession()
    http.closed = True
    transport = AiohttpTransport(http)  # type: ignore[arg-type]

    with pytest.raises(BluelinkTransportError, match="closed"):
        await transport.request("GET", "https://host/x", headers={})

    assert http.calls == []
