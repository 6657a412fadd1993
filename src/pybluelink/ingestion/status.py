"""Map a vendor status tree onto :class:`VehicleStatus`.

Payload shape varies by vehicle generation and powertrain: combustion cars
carry ``dte``, EVs carry ``evStatus``, older units omit tire pressure data
entirely. Every lookup here is optional-safe.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pybluelink.ingestion.normalize import (
    coerce_bool,
    get_path,
    parse_vendor_datetime,
    safe_float,
)
from pybluelink.models._base import Distance, Temperature
from pybluelink.models.status import (
    ChassisStatus,
    ClimateStatus,
    EngineStatus,
    OpenDoors,
    TirePressureWarningLamp,
    UnparsedTimestamp,
    VehicleStatus,
)

_logger = logging.getLogger(__name__)

# EV range first, then combustion distance to empty.
_RANGE_PATHS: tuple[str, ...] = (
    "evStatus.drvDistance.0.rangeByFuel.totalAvailableRange",
    "evStatus.drvDistance.0.totalAvailableRange",
    "dte",
)


def _range(raw: Mapping[str, Any]) -> Distance | None:
    for path in _RANGE_PATHS:
        node = get_path(raw, path)
        if not isinstance(node, Mapping):
            continue
        value = safe_float(node.get("value"))
        if value is not None:
            return Distance(value=value, unit=node.get("unit"))
    return None


def _setpoint(raw: Mapping[str, Any]) -> Temperature | None:
    node = get_path(raw, "airTemp")
    if not isinstance(node, Mapping) or node.get("value") is None:
        return None
    value = node["value"]
    numeric = safe_float(value)
    return Temperature(value=numeric if numeric is not None else str(value), unit=node.get("unit"))


def _lastupdate(raw: Mapping[str, Any]) -> Any:
    value = get_path(raw, "dateTime")
    if value is None:
        return None
    parsed = parse_vendor_datetime(value)
    if parsed is None:
        _logger.debug("Unparsable vehicle status timestamp %r", value)
        return UnparsedTimestamp(raw=str(value))
    return parsed


def normalize_vehicle_status(raw: Mapping[str, Any] | None) -> VehicleStatus:
    """Build the canonical status from the vendor's ``vehicleStatus`` subtree.

    Never raises on missing data; absent flags become ``False`` and absent
    measurements ``None``.
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    chassis = ChassisStatus(
        hood_open=coerce_bool(get_path(data, "hoodOpen")),
        trunk_open=coerce_bool(get_path(data, "trunkOpen")),
        locked=coerce_bool(get_path(data, "doorLock")),
        open_doors=OpenDoors(
            front_right=coerce_bool(get_path(data, "doorOpen.frontRight")),
            front_left=coerce_bool(get_path(data, "doorOpen.frontLeft")),
            back_left=coerce_bool(get_path(data, "doorOpen.backLeft")),
            back_right=coerce_bool(get_path(data, "doorOpen.backRight")),
        ),
        tire_pressure_warning_lamp=TirePressureWarningLamp(
            rear_left=coerce_bool(get_path(data, "tirePressureLamp.tirePressureWarningLampRearLeft")),
            front_left=coerce_bool(get_path(data, "tirePressureLamp.tirePressureWarningLampFrontLeft")),
            front_right=coerce_bool(get_path(data, "tirePressureLamp.tirePressureWarningLampFrontRight")),
            rear_right=coerce_bool(get_path(data, "tirePressureLamp.tirePressureWarningLampRearRight")),
            all=coerce_bool(get_path(data, "tirePressureLamp.tirePressureWarningLampAll")),
        ),
    )

    climate = ClimateStatus(
        active=coerce_bool(get_path(data, "airCtrlOn")),
        steering_wheel_heat=coerce_bool(get_path(data, "steerWheelHeat")),
        # not reported by this API
        side_mirror_heat=False,
        rear_window_heat=coerce_bool(get_path(data, "sideBackWindowHeat")),
        defrost=coerce_bool(get_path(data, "defrost")),
        temperature_setpoint=_setpoint(data),
    )

    engine = EngineStatus(
        ignition=coerce_bool(get_path(data, "engine")),
        accessory=coerce_bool(get_path(data, "acc")),
        range=_range(data),
        charging=coerce_bool(get_path(data, "evStatus.batteryCharge")),
        battery_charge_12v=safe_float(get_path(data, "battery.batSoc")),
        battery_charge_hv=safe_float(get_path(data, "evStatus.batteryStatus")),
    )

    return VehicleStatus(
        chassis=chassis,
        climate=climate,
        engine=engine,
        lastupdate=_lastupdate(data),
    )
