"""High-level async client for the regional vehicle APIs."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pybluelink._transport import AiohttpTransport, Transport
from pybluelink.config import ClientConfig, Environment, UserConfig, VehicleConfig
from pybluelink.dispatch import RequestDispatcher
from pybluelink.exceptions import BluelinkConfigError, BluelinkError
from pybluelink.session import SessionProvider
from pybluelink.vehicles import adapter_for
from pybluelink.vehicles.base import Vehicle

_logger = logging.getLogger(__name__)


class BluelinkClient:
    """Async client holding the HTTP session and registered vehicles.

    Usage::

        async with BluelinkClient(config, provider) as client:
            vehicle = client.register_vehicle(vehicle_config, user_config)
            status = await vehicle.status({"parsed": True})

    The login handshake is out of scope: *session_provider* supplies and
    refreshes the access token. Leaving the context forgets every registered
    vehicle; register them again after re-entering.
    """

    def __init__(
        self,
        config: ClientConfig,
        session_provider: SessionProvider,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._session_provider = session_provider
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport
        self._external_transport = transport is not None
        self._dispatchers: dict[Environment, RequestDispatcher] = {}
        self._vehicles: dict[str, Vehicle] = {}

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BluelinkClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = AiohttpTransport(self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None
        self._dispatchers.clear()
        # vehicles hold dispatchers bound to the transport released above
        self._vehicles.clear()

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def vehicles(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise BluelinkError("Client not initialized. Use 'async with BluelinkClient(...) as client:'")
        return self._transport

    def _dispatcher_for(self, environment: Environment) -> RequestDispatcher:
        dispatcher = self._dispatchers.get(environment)
        if dispatcher is None:
            dispatcher = RequestDispatcher(
                environment,
                self._session_provider,
                self._require_transport(),
                default_timeout=self._config.request_timeout,
            )
            self._dispatchers[environment] = dispatcher
        return dispatcher

    def register_vehicle(self, vehicle_config: VehicleConfig, user_config: UserConfig) -> Vehicle:
        """Create the region adapter for a vehicle.

        The adapter class is chosen here, once, from ``vehicle_config.region``.
        Registering the same VIN twice is rejected.
        """
        if vehicle_config.vin in self._vehicles:
            raise BluelinkConfigError(f"vehicle {vehicle_config.vin} is already registered")

        adapter_cls = adapter_for(vehicle_config.region)
        environment = Environment.for_region(vehicle_config.region)
        vehicle = adapter_cls(
            vehicle_config,
            user_config,
            self._dispatcher_for(environment),
            user_agent=self._config.user_agent,
        )
        self._vehicles[vehicle_config.vin] = vehicle
        _logger.debug("Registered %r", vehicle)
        return vehicle

    def get_vehicle(self, vin: str) -> Vehicle:
        try:
            return self._vehicles[vin]
        except KeyError:
            raise BluelinkConfigError(f"vehicle {vin} is not registered") from None
