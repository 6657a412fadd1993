"""Session-guarded request dispatcher.

Every outbound call goes through :meth:`RequestDispatcher.dispatch`, which
refreshes the session first and attaches the token read afterwards.
"""

from __future__ import annotations

import logging

from pybluelink._redact import redact_body_for_log
from pybluelink._transport import ResponseEnvelope, Transport
from pybluelink.config import Environment
from pybluelink.models.requests import CallOptions
from pybluelink.session import SessionProvider

_logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "access_token"


class RequestDispatcher:
    """Perform one authenticated HTTP exchange against a regional API.

    The dispatcher holds no per-request state and may be shared by any
    number of vehicles and concurrent callers.
    """

    def __init__(
        self,
        environment: Environment,
        session_provider: SessionProvider,
        transport: Transport,
        *,
        default_timeout: float | None = None,
    ) -> None:
        self._environment = environment
        self._session_provider = session_provider
        self._transport = transport
        self._default_timeout = default_timeout

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def session_provider(self) -> SessionProvider:
        return self._session_provider

    async def dispatch(self, path: str, options: CallOptions | None = None) -> ResponseEnvelope:
        """Send *options* to ``base_url + path`` with a freshly validated token.

        Non-2xx responses are returned, not raised. Transport failures
        propagate as :class:`~pybluelink.exceptions.BluelinkTransportError`.
        Cancelling the calling task aborts the exchange.
        """
        opts = options or CallOptions()

        # unconditional; the provider decides whether a refresh is needed
        await self._session_provider.refresh_access_token()

        headers = dict(opts.headers)
        headers[ACCESS_TOKEN_HEADER] = self._session_provider.access_token

        url = f"{self._environment.base_url}{path}"
        timeout = opts.timeout if opts.timeout is not None else self._default_timeout

        response = await self._transport.request(
            opts.method,
            url,
            headers=headers,
            data=opts.data,
            json_body=opts.json_body,
            timeout=timeout,
        )

        if response.body:
            _logger.debug(
                "%s %s -> %d %s",
                opts.method,
                path,
                response.status_code,
                redact_body_for_log(response.body),
            )
        return response
