"""Region adapters implementing the vehicle capability contract."""

from __future__ import annotations

from pybluelink._constants import Region
from pybluelink.exceptions import BluelinkConfigError
from pybluelink.vehicles.american import AmericanVehicle
from pybluelink.vehicles.base import Vehicle

ADAPTERS: dict[Region, type[Vehicle]] = {
    Region.US: AmericanVehicle,
}


def adapter_for(region: Region | str) -> type[Vehicle]:
    """Return the adapter class serving *region*."""
    try:
        return ADAPTERS[Region(region)]
    except (KeyError, ValueError) as exc:
        raise BluelinkConfigError(f"no vehicle adapter for region {region!r}") from exc


__all__ = ["ADAPTERS", "AmericanVehicle", "Vehicle", "adapter_for"]
