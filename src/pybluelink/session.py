"""Session state and the provider vehicles read access tokens through."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from pybluelink.exceptions import BluelinkAuthenticationError

_logger = logging.getLogger(__name__)

#: Default access token time-to-live in seconds. The vendor issues
#: 30 minute tokens; one minute is kept as safety margin.
DEFAULT_SESSION_TTL: float = 29 * 60


class Session(BaseModel):
    """Token state produced by the login handshake.

    Parameters
    ----------
    access_token : str
        Token attached to every request as the ``access_token`` header.
    refresh_token : str
        Token the refresher may exchange for a new access token.
    created_at : float
        Monotonic timestamp (``time.monotonic()``) when the token was
        issued. Defaults to *now*.
    ttl : float
        Time-to-live in seconds.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    access_token: str
    refresh_token: str = ""
    created_at: float = Field(default_factory=time.monotonic)
    ttl: float = DEFAULT_SESSION_TTL

    @property
    def is_expired(self) -> bool:
        """Whether the token has exceeded its TTL."""
        return (time.monotonic() - self.created_at) >= self.ttl

    @property
    def age(self) -> float:
        """Seconds since the token was issued."""
        return time.monotonic() - self.created_at


class SessionProvider(Protocol):
    """Owner of the current access token.

    Vehicles never mutate session state; they read :attr:`access_token`
    after awaiting :meth:`refresh_access_token`.
    """

    @property
    def access_token(self) -> str:
        ...

    async def refresh_access_token(self) -> None:
        ...


Refresher = Callable[[Session | None], Awaitable[Session]]
"""Async callable that performs the vendor token exchange."""


class TokenSessionProvider:
    """Session provider backed by a caller-supplied refresher.

    The refresher receives the current session (``None`` before the first
    login) and returns a new one. :meth:`refresh_access_token` is the only
    writer of the held session; it returns early while the session is
    still fresh and lets a single refresh run at a time.
    """

    def __init__(self, refresher: Refresher, session: Session | None = None) -> None:
        self._refresher = refresher
        self._session = session
        self._lock = asyncio.Lock()
        self._force_refresh = False

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def access_token(self) -> str:
        if self._session is None:
            raise BluelinkAuthenticationError("No session available; refresh_access_token() was never awaited")
        return self._session.access_token

    def _is_fresh(self) -> bool:
        return self._session is not None and not self._session.is_expired and not self._force_refresh

    async def refresh_access_token(self) -> None:
        """Replace the session when it is missing or expired, or after :meth:`invalidate`."""
        if self._is_fresh():
            return
        async with self._lock:
            # another caller may have refreshed while we waited
            if self._is_fresh():
                return
            _logger.debug("Refreshing access token")
            session = await self._refresher(self._session)
            if not session.access_token:
                raise BluelinkAuthenticationError("Refresher returned an empty access token")
            self._session = session
            self._force_refresh = False

    def invalidate(self) -> None:
        """Make the next :meth:`refresh_access_token` call run the refresher.

        The held session stays in place until that refresh replaces it.
        """
        self._force_refresh = True
