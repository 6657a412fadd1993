"""Location and odometer models."""

from __future__ import annotations

from pybluelink.models._base import BluelinkBaseModel, Distance, Speed


class VehicleLocation(BluelinkBaseModel):
    """Last reported GPS fix.

    Parameters
    ----------
    latitude, longitude : float
        Position in degrees.
    altitude : float or None
        Altitude as reported by the vendor.
    speed : Speed
        Ground speed with its unit.
    heading : float or None
        Heading in degrees.
    """

    latitude: float
    longitude: float
    altitude: float | None = None
    speed: Speed = Speed()
    heading: float | None = None


class VehicleOdometer(Distance):
    """Odometer reading.

    ``unit`` is :attr:`DistanceUnit.UNKNOWN` when the vendor payload does
    not state one.
    """
