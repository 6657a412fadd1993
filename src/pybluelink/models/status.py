"""Canonical vehicle status model.

Produced by :func:`pybluelink.ingestion.status.normalize_vehicle_status`.
Flags default to ``False`` and measurements to ``None`` so a payload
missing any subtree still yields a complete object.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from pybluelink.models._base import BluelinkBaseModel, Distance, Temperature
from pybluelink.models.location import VehicleLocation, VehicleOdometer

#: Vendor status tree returned verbatim when normalization is skipped.
RawVehicleStatus = dict[str, Any]


class UnparsedTimestamp(BluelinkBaseModel):
    """A vendor timestamp that could not be parsed.

    Kept distinct from ``None`` (no timestamp sent) so callers never
    mistake a garbled value for a real instant.
    """

    raw: str


class OpenDoors(BluelinkBaseModel):
    front_right: bool = False
    front_left: bool = False
    back_left: bool = False
    back_right: bool = False


class TirePressureWarningLamp(BluelinkBaseModel):
    rear_left: bool = False
    front_left: bool = False
    front_right: bool = False
    rear_right: bool = False
    all: bool = False


class ChassisStatus(BluelinkBaseModel):
    hood_open: bool = False
    trunk_open: bool = False
    locked: bool = False
    open_doors: OpenDoors = Field(default_factory=OpenDoors)
    tire_pressure_warning_lamp: TirePressureWarningLamp = Field(default_factory=TirePressureWarningLamp)


class ClimateStatus(BluelinkBaseModel):
    active: bool = False
    steering_wheel_heat: bool = False
    side_mirror_heat: bool = False
    rear_window_heat: bool = False
    defrost: bool = False
    temperature_setpoint: Temperature | None = None


class EngineStatus(BluelinkBaseModel):
    ignition: bool = False
    accessory: bool = False
    range: Distance | None = None
    """Remaining range: EV range when reported, else distance to empty."""
    charging: bool = False
    battery_charge_12v: float | None = None
    """12 V battery state of charge (%)."""
    battery_charge_hv: float | None = None
    """High voltage battery state of charge (%)."""


class VehicleStatus(BluelinkBaseModel):
    """Vendor-independent vehicle status."""

    chassis: ChassisStatus = Field(default_factory=ChassisStatus)
    climate: ClimateStatus = Field(default_factory=ClimateStatus)
    engine: EngineStatus = Field(default_factory=EngineStatus)
    lastupdate: datetime | UnparsedTimestamp | None = None

    @property
    def lastupdate_parsed(self) -> bool:
        return isinstance(self.lastupdate, datetime)


class FullVehicleStatus(BluelinkBaseModel):
    """Status, location and odometer fetched together.

    Only regions whose API exposes a combined endpoint return this.
    """

    status: VehicleStatus
    location: VehicleLocation | None = None
    odometer: VehicleOdometer | None = None
