"""Vehicle capability contract shared by every region adapter."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, ClassVar

from pybluelink._constants import USER_AGENT, Region
from pybluelink.config import UserConfig, VehicleConfig
from pybluelink.dispatch import RequestDispatcher
from pybluelink.exceptions import BluelinkNotImplementedError
from pybluelink.models.control import VehicleStartOptions
from pybluelink.models.location import VehicleLocation, VehicleOdometer
from pybluelink.models.requests import VehicleStatusOptions
from pybluelink.models.status import FullVehicleStatus, RawVehicleStatus, VehicleStatus


class Vehicle(abc.ABC):
    """A registered vehicle reachable through one region's API.

    Subclasses implement every operation or reject it with
    :meth:`_not_supported`, which raises before any request is made.

    ``last_status`` and ``last_odometer`` hold the result of the most
    recent successful call. They are overwritten wholesale, never
    invalidated, and not guarded against concurrent writers.
    """

    region: ClassVar[Region]

    def __init__(
        self,
        vehicle_config: VehicleConfig,
        user_config: UserConfig,
        dispatcher: RequestDispatcher,
        *,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.vehicle_config = vehicle_config
        self.user_config = user_config
        self._dispatcher = dispatcher
        self._user_agent = user_agent
        self.last_status: VehicleStatus | RawVehicleStatus | None = None
        self.last_odometer: VehicleOdometer | None = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} vin={self.vin!r} region={self.region}>"

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def vin(self) -> str:
        return self.vehicle_config.vin

    @property
    def name(self) -> str:
        return self.vehicle_config.name

    @property
    def nickname(self) -> str:
        return self.vehicle_config.nickname

    @property
    def id(self) -> str:
        return self.vehicle_config.id

    @property
    def brand_indicator(self) -> str:
        return self.vehicle_config.brand_indicator

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @abc.abstractmethod
    async def status(
        self,
        options: VehicleStatusOptions | Mapping[str, Any] | None = None,
    ) -> VehicleStatus | RawVehicleStatus | None:
        """Current status, canonical or raw depending on ``options.parsed``."""

    @abc.abstractmethod
    async def full_status(self) -> FullVehicleStatus | None:
        ...

    @abc.abstractmethod
    async def location(self) -> VehicleLocation:
        ...

    @abc.abstractmethod
    async def odometer(self) -> VehicleOdometer | None:
        ...

    @abc.abstractmethod
    async def start(self, options: VehicleStartOptions | Mapping[str, Any] | None = None) -> str:
        ...

    @abc.abstractmethod
    async def stop(self) -> str:
        ...

    @abc.abstractmethod
    async def lock(self) -> str:
        ...

    @abc.abstractmethod
    async def unlock(self) -> str:
        ...

    @abc.abstractmethod
    async def start_charge(self) -> str:
        ...

    @abc.abstractmethod
    async def stop_charge(self) -> str:
        ...

    def _not_supported(self, operation: str) -> BluelinkNotImplementedError:
        return BluelinkNotImplementedError(operation, region=str(self.region))
