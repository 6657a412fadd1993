from __future__ import annotations

import asyncio
import time

import pytest

from pybluelink.exceptions import BluelinkAuthenticationError
from pybluelink.session import Session, TokenSessionProvider


class _CountingRefresher:
    def __init__(self, *, delay: float = 0.0, ttl: float = 600.0) -> None:
        self.calls: list[Session | None] = []
        self._delay = delay
        self._ttl = ttl

    async def __call__(self, previous: Session | None) -> Session:
        self.calls.append(previous)
        if self._delay:
            await asyncio.sleep(self._delay)
        return Session(access_token=f"token-{len(self.calls)}", ttl=self._ttl)


def test_session_expiry() -> None:
    fresh = Session(access_token="a")
    stale = Session(access_token="b", created_at=time.monotonic() - 10, ttl=5)

    assert not fresh.is_expired
    assert stale.is_expired
    assert stale.age >= 10


def test_access_token_before_first_refresh() -> None:
    provider = TokenSessionProvider(_CountingRefresher())

    with pytest.raises(BluelinkAuthenticationError):
        _ = provider.access_token


@pytest.mark.asyncio
async def test_refresh_short_circuits_while_fresh() -> None:
    refresher = _CountingRefresher()
    provider = TokenSessionProvider(refresher)

    await provider.refresh_access_token()
    await provider.refresh_access_token()

    assert provider.access_token == "token-1"
    assert refresher.calls == [None]


@pytest.mark.asyncio
async def test_expired_session_is_passed_to_refresher() -> None:
    refresher = _CountingRefresher()
    expired = Session(access_token="old", refresh_token="r", created_at=time.monotonic() - 100, ttl=1)
    provider = TokenSessionProvider(refresher, session=expired)

    await provider.refresh_access_token()

    assert refresher.calls == [expired]
    assert provider.access_token == "token-1"


@pytest.mark.asyncio
async def test_concurrent_refreshes_run_once() -> None:
    refresher = _CountingRefresher(delay=0.01)
    provider = TokenSessionProvider(refresher)

    await asyncio.gather(*(provider.refresh_access_token() for _ in range(5)))

    assert len(refresher.calls) == 1
    assert provider.access_token == "token-1"


@pytest.mark.asyncio
async def test_invalidate_forces_refresh_without_dropping_the_session() -> None:
    refresher = _CountingRefresher()
    provider = TokenSessionProvider(refresher)

    await provider.refresh_access_token()
    first = provider.session
    provider.invalidate()

    assert provider.session is first
    assert provider.access_token == "token-1"

    await provider.refresh_access_token()
    await provider.refresh_access_token()

    assert provider.access_token == "token-2"
    assert refresher.calls == [None, first]


@pytest.mark.asyncio
async def test_empty_token_from_refresher_is_rejected() -> None:
    async def refresher(_previous: Session | None) -> Session:
        return Session(access_token="  ")

    provider = TokenSessionProvider(refresher)

    with pytest.raises(BluelinkAuthenticationError):
        await provider.refresh_access_token()
    assert provider.session is None
