from __future__ import annotations

import pytest

from _fakes import FAKE_ENVIRONMENT, VIN, FakeTransport, RotatingSessionProvider
from pybluelink.config import UserConfig, VehicleConfig
from pybluelink.dispatch import RequestDispatcher
from pybluelink.vehicles.american import AmericanVehicle


@pytest.fixture
def provider() -> RotatingSessionProvider:
    return RotatingSessionProvider()


@pytest.fixture
def transport(provider: RotatingSessionProvider) -> FakeTransport:
    return FakeTransport(events=provider.events)


@pytest.fixture
def dispatcher(provider: RotatingSessionProvider, transport: FakeTransport) -> RequestDispatcher:
    return RequestDispatcher(FAKE_ENVIRONMENT, provider, transport, default_timeout=12.5)


@pytest.fixture
def user_config() -> UserConfig:
    return UserConfig(username="driver@example.com", pin="1234")


@pytest.fixture
def vehicle_config() -> VehicleConfig:
    return VehicleConfig(
        reg_id="REG-1",
        vin=VIN,
        generation="2",
        brand_indicator="H",
        id="veh-42",
        name="Ioniq",
    )


@pytest.fixture
def vehicle(
    vehicle_config: VehicleConfig,
    user_config: UserConfig,
    dispatcher: RequestDispatcher,
) -> AmericanVehicle:
    return AmericanVehicle(vehicle_config, user_config, dispatcher)
