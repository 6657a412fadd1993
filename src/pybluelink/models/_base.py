"""Base model and unit-carrying value types.

Every canonical model inherits from :class:`BluelinkBaseModel`, which is
frozen and ignores unknown keys. Physical quantities are never bare
numbers: temperature, distance and speed travel as ``(value, unit)``
pairs so consumers can tell an unresolved unit apart from a known one.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from pybluelink._constants import DistanceUnit, SpeedUnit, TemperatureUnit


class BluelinkBaseModel(BaseModel):
    """Base for canonical (vendor independent) models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


def _unit_or_unknown(enum_cls: type[Any], value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        return enum_cls.UNKNOWN


class Temperature(BluelinkBaseModel):
    """Temperature value with the vendor's unit.

    The vendor sends set points as strings (``"70"``) or hex level codes;
    ``value`` keeps what was sent.
    """

    value: float | str | None = None
    unit: TemperatureUnit = TemperatureUnit.UNKNOWN

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value: Any) -> TemperatureUnit:
        return _unit_or_unknown(TemperatureUnit, value)


class Distance(BluelinkBaseModel):
    """Distance value (range, odometer) with the vendor's unit."""

    value: float
    unit: DistanceUnit = DistanceUnit.UNKNOWN

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value: Any) -> DistanceUnit:
        return _unit_or_unknown(DistanceUnit, value)


class Speed(BluelinkBaseModel):
    """Speed value with the vendor's unit."""

    value: float | None = None
    unit: SpeedUnit = SpeedUnit.UNKNOWN

    @field_validator("unit", mode="before")
    @classmethod
    def _coerce_unit(cls, value: Any) -> SpeedUnit:
        return _unit_or_unknown(SpeedUnit, value)
