from __future__ import annotations

import dataclasses

import pytest

from pybluelink._constants import DEFAULT_REQUEST_TIMEOUT, US_BASE_URL, USER_AGENT, Region
from pybluelink.config import ClientConfig, Environment, UserConfig, VehicleConfig
from pybluelink.exceptions import BluelinkConfigError


def test_client_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLUELINK_REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("BLUELINK_USER_AGENT", raising=False)

    config = ClientConfig.from_env()

    assert config.request_timeout == DEFAULT_REQUEST_TIMEOUT
    assert config.user_agent == USER_AGENT


def test_client_config_env_and_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("BLUELINK_USER_AGENT", "agent/1.0")

    assert ClientConfig.from_env().request_timeout == 12.5
    assert ClientConfig.from_env(request_timeout=4).request_timeout == 4
    assert ClientConfig.from_env(user_agent="other").user_agent == "other"


def test_zero_timeout_disables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "0")

    assert ClientConfig.from_env().request_timeout is None
    assert ClientConfig(request_timeout=None).request_timeout is None


def test_bad_timeout_is_a_config_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_REQUEST_TIMEOUT", "soon")

    with pytest.raises(BluelinkConfigError):
        ClientConfig.from_env()


def test_user_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLUELINK_USERNAME", "driver@example.com")
    monkeypatch.setenv("BLUELINK_PIN", "4321")

    user = UserConfig.from_env()
    assert (user.username, user.pin) == ("driver@example.com", "4321")
    assert UserConfig.from_env(pin="0000").pin == "0000"


def test_user_config_requires_username(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLUELINK_USERNAME", raising=False)

    with pytest.raises(BluelinkConfigError):
        UserConfig.from_env()


def test_vehicle_config_is_immutable_and_parses_region() -> None:
    config = VehicleConfig(reg_id="REG-1", vin="VIN-1", region="us")

    assert config.region is Region.US
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.vin = "other"  # type: ignore[misc]


def test_vehicle_config_rejects_unknown_region_and_empty_vin() -> None:
    with pytest.raises(BluelinkConfigError):
        VehicleConfig(reg_id="REG-1", vin="VIN-1", region="mars")

    with pytest.raises(BluelinkConfigError):
        VehicleConfig(reg_id="REG-1", vin="")


def test_environment_for_region() -> None:
    assert Environment.for_region("US").base_url == US_BASE_URL

    with pytest.raises(BluelinkConfigError):
        Environment.for_region(Region.EU)
