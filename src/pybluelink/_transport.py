"""HTTP transport returning uniform response envelopes."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp
from pydantic import BaseModel, ConfigDict, Field

from pybluelink.exceptions import (
    BluelinkMalformedResponseError,
    BluelinkTimeoutError,
    BluelinkTransportError,
)

_logger = logging.getLogger(__name__)


class ResponseEnvelope(BaseModel):
    """Status code, body text, and headers of one HTTP exchange."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_code: int
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def decode_json(self) -> Any:
        """Decode the body as JSON.

        Raises :class:`BluelinkMalformedResponseError` when the body is
        empty or not valid JSON.
        """
        if not self.body.strip():
            raise BluelinkMalformedResponseError(f"Empty response body from {self.url}", endpoint=self.url)
        try:
            return json.loads(self.body)
        except json.JSONDecodeError as exc:
            raise BluelinkMalformedResponseError(
                f"Invalid JSON from {self.url}: {self.body[:200]}",
                endpoint=self.url,
            ) from exc


class Transport(Protocol):
    """Structural transport interface used by the dispatcher.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`AiohttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: str | None = None,
        json_body: Any = None,
        timeout: float | None = None,
    ) -> ResponseEnvelope:
        ...


class AiohttpTransport:
    """Transport over a shared :class:`aiohttp.ClientSession`.

    Non-2xx responses are returned as envelopes. Network-level failures
    raise :class:`BluelinkTransportError`; a body that cannot be decoded
    raises :class:`BluelinkMalformedResponseError`.
    """

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        data: str | None = None,
        json_body: Any = None,
        timeout: float | None = None,
    ) -> ResponseEnvelope:
        kwargs: dict[str, Any] = {"headers": dict(headers)}
        if data is not None:
            kwargs["data"] = data
        if json_body is not None:
            kwargs["json"] = json_body
        kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        if self._http.closed:
            raise BluelinkTransportError(f"Request to {url} failed: HTTP session is closed", endpoint=url)

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, **kwargs) as resp:
                try:
                    text = await resp.text()
                except UnicodeDecodeError as exc:
                    raise BluelinkMalformedResponseError(
                        f"Undecodable response body from {url}: {exc}",
                        endpoint=url,
                    ) from exc
                return ResponseEnvelope(
                    status_code=resp.status,
                    body=text,
                    headers={k: v for k, v in resp.headers.items()},
                    url=url,
                )
        except TimeoutError as exc:
            raise BluelinkTimeoutError(
                f"Request to {url} timed out after {timeout}s",
                endpoint=url,
            ) from exc
        except aiohttp.ClientError as exc:
            raise BluelinkTransportError(
                f"Request to {url} failed: {exc}",
                endpoint=url,
            ) from exc
