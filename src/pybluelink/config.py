"""Client, user, vehicle, and regional endpoint configuration."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybluelink._constants import (
    DEFAULT_REQUEST_TIMEOUT,
    US_BASE_URL,
    US_CLIENT_ID,
    US_HOST,
    USER_AGENT,
    Region,
)
from pybluelink.exceptions import BluelinkConfigError


def _env_float(value: str | None, default: float | None) -> float | None:
    if value is None:
        return default
    stripped = value.strip()
    if not stripped:
        return default
    try:
        return float(stripped)
    except ValueError as exc:
        raise BluelinkConfigError(f"expected a number, got {value!r}") from exc


def _parse_region(value: Region | str) -> Region:
    try:
        return Region(str(value).strip().upper())
    except ValueError as exc:
        raise BluelinkConfigError(f"unknown region {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class Environment:
    """Static endpoint configuration of one vendor region.

    Parameters
    ----------
    base_url : str
        Scheme and host every request path is appended to.
    client_id : str
        Vendor-issued client id sent as the ``client_id`` header.
    host : str
        Value of the ``Host`` header.
    """

    base_url: str
    client_id: str
    host: str

    @classmethod
    def for_region(cls, region: Region | str) -> Environment:
        """Return the built-in environment for *region*."""
        resolved = _parse_region(region)
        env = _ENVIRONMENTS.get(resolved)
        if env is None:
            raise BluelinkConfigError(f"no environment known for region {resolved}")
        return env


_ENVIRONMENTS: dict[Region, Environment] = {
    Region.US: Environment(base_url=US_BASE_URL, client_id=US_CLIENT_ID, host=US_HOST),
}


@dataclasses.dataclass(frozen=True)
class UserConfig:
    """Account identity sent along with vehicle commands.

    Parameters
    ----------
    username : str
        Account e-mail.
    pin : str
        Service PIN required for remote commands.
    """

    username: str
    pin: str = ""

    @classmethod
    def from_env(cls, **overrides: Any) -> UserConfig:
        """Create the user identity from ``BLUELINK_USERNAME`` / ``BLUELINK_PIN``.

        Explicit keyword arguments take precedence over the environment.
        """
        env = os.environ
        kwargs: dict[str, Any] = {}
        username = env.get("BLUELINK_USERNAME")
        if username is not None:
            kwargs["username"] = username
        pin = env.get("BLUELINK_PIN")
        if pin is not None:
            kwargs["pin"] = pin
        kwargs.update(overrides)
        if not kwargs.get("username"):
            raise BluelinkConfigError("username is required (set BLUELINK_USERNAME)")
        return cls(**kwargs)


@dataclasses.dataclass(frozen=True)
class VehicleConfig:
    """Per-vehicle identity, fixed once the vehicle is registered.

    Parameters
    ----------
    reg_id : str
        Vendor registration id (``registrationId`` header).
    vin : str
        Vehicle Identification Number.
    generation : str
        Telematics unit generation (``gen`` header).
    brand_indicator : str
        Brand marker (``brandIndicator`` header).
    id : str
        Vendor-side vehicle id used by the charge control paths.
    name : str
        Display name.
    nickname : str
        User-defined alias.
    region : Region
        Vendor region whose adapter serves this vehicle.
    """

    reg_id: str
    vin: str
    generation: str = "2"
    brand_indicator: str = "H"
    id: str = ""
    name: str = ""
    nickname: str = ""
    region: Region = Region.US

    def __post_init__(self) -> None:
        if not self.vin:
            raise BluelinkConfigError("vin is required")
        object.__setattr__(self, "region", _parse_region(self.region))


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """Client configuration.

    Parameters
    ----------
    request_timeout : float or None
        Per-call timeout in seconds for a single HTTP exchange.
        ``None`` (or ``0`` from the environment) disables the timeout.
    user_agent : str
        ``User-Agent`` header sent with every request.
    """

    request_timeout: float | None = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if self.request_timeout is not None and self.request_timeout <= 0:
            object.__setattr__(self, "request_timeout", None)

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Create configuration from ``BLUELINK_*`` environment variables.

        Reads ``BLUELINK_REQUEST_TIMEOUT`` and ``BLUELINK_USER_AGENT``.
        Explicit keyword arguments override environment values.
        """
        env = os.environ
        kwargs: dict[str, Any] = {}

        if "request_timeout" not in overrides:
            kwargs["request_timeout"] = _env_float(
                env.get("BLUELINK_REQUEST_TIMEOUT"),
                DEFAULT_REQUEST_TIMEOUT,
            )

        user_agent = env.get("BLUELINK_USER_AGENT")
        if user_agent is not None:
            kwargs["user_agent"] = user_agent

        kwargs.update(overrides)
        return cls(**kwargs)
