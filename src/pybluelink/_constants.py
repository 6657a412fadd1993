"""Internal constants shared across the library."""

from __future__ import annotations

import enum

USER_AGENT = "okhttp/3.12.0"

#: Default per-call timeout in seconds for a single HTTP exchange.
DEFAULT_REQUEST_TIMEOUT: float = 30.0


class Region(enum.StrEnum):
    """Vendor cloud regions."""

    US = "US"
    CA = "CA"
    EU = "EU"


# ------------------------------------------------------------------
# US dialect
# ------------------------------------------------------------------

US_BASE_URL = "https://api.telematics.hyundaiusa.com"
US_HOST = "api.telematics.hyundaiusa.com"
US_CLIENT_ID = "m66129Bb-em93-SPAHYN-bZ91-am4540zp19920"

#: UTC offset header sent on read paths.
US_DEFAULT_OFFSET = "-5"
#: UTC offset header the vendor expects on remote start/stop.
US_START_OFFSET = "-4"


class UsPaths:
    """Fixed request paths of the US API."""

    STATUS = "/ac/v2/rcs/rvs/vehicleStatus"
    LOCATION = "/ac/v2/rcs/rfc/findMyCar"
    LOCK = "/ac/v2/rcs/rdo/off"
    UNLOCK = "/ac/v2/rcs/rdo/on"
    START = "/ac/v2/rcs/rsc/start"
    STOP = "/ac/v2/rcs/rsc/stop"
    CHARGE = "/api/v2/spa/vehicles/{vehicle_id}/control/charge"
    ENROLLMENT = "/ac/v2/enrollment/details/{username}"


# ------------------------------------------------------------------
# Unit codes used by the vendor
# ------------------------------------------------------------------


class TemperatureUnit(enum.IntEnum):
    """Vendor temperature unit code."""

    UNKNOWN = -1
    CELSIUS = 0
    FAHRENHEIT = 1

    @classmethod
    def _missing_(cls, value: object) -> TemperatureUnit:
        return cls.UNKNOWN


class DistanceUnit(enum.IntEnum):
    """Vendor distance unit code.

    ``UNKNOWN`` marks a value whose unit the vendor did not disclose.
    """

    UNKNOWN = -1
    KILOMETERS = 1
    MILES = 3

    @classmethod
    def _missing_(cls, value: object) -> DistanceUnit:
        # older generations report miles as 2
        if value == 2:
            return cls.MILES
        return cls.UNKNOWN


class SpeedUnit(enum.IntEnum):
    """Vendor speed unit code."""

    UNKNOWN = -1
    KMH = 1
    MPH = 2

    @classmethod
    def _missing_(cls, value: object) -> SpeedUnit:
        return cls.UNKNOWN
