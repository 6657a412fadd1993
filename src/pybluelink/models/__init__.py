"""Canonical data models."""

from pybluelink._constants import DistanceUnit, SpeedUnit, TemperatureUnit
from pybluelink.models._base import BluelinkBaseModel, Distance, Speed, Temperature
from pybluelink.models.control import CommandResult, VehicleStartOptions
from pybluelink.models.location import VehicleLocation, VehicleOdometer
from pybluelink.models.requests import CallOptions, VehicleStatusOptions
from pybluelink.models.status import (
    ChassisStatus,
    ClimateStatus,
    EngineStatus,
    FullVehicleStatus,
    OpenDoors,
    RawVehicleStatus,
    TirePressureWarningLamp,
    UnparsedTimestamp,
    VehicleStatus,
)

__all__ = [
    "BluelinkBaseModel",
    "CallOptions",
    "ChassisStatus",
    "ClimateStatus",
    "CommandResult",
    "Distance",
    "DistanceUnit",
    "EngineStatus",
    "FullVehicleStatus",
    "OpenDoors",
    "RawVehicleStatus",
    "Speed",
    "SpeedUnit",
    "Temperature",
    "TemperatureUnit",
    "TirePressureWarningLamp",
    "UnparsedTimestamp",
    "VehicleLocation",
    "VehicleOdometer",
    "VehicleStartOptions",
    "VehicleStatus",
    "VehicleStatusOptions",
]
