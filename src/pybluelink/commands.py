"""Wire builders for remote commands.

Translate typed options into the bodies the US API expects and turn the
HTTP status of a command response into a :class:`CommandResult`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pybluelink._transport import ResponseEnvelope
from pybluelink.config import UserConfig, VehicleConfig
from pybluelink.models.control import CommandResult, VehicleStartOptions

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

#: Vendor code for the unit of ``airTemp`` in start bodies (Fahrenheit).
START_TEMPERATURE_UNIT = 1


def _flag(value: bool) -> int:
    return 1 if value else 0


def build_start_body(
    user: UserConfig,
    vehicle: VehicleConfig,
    options: VehicleStartOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Body of a remote start.

    *options* is shallow-merged over the documented defaults.
    """
    merged = VehicleStartOptions().merged(options)
    return {
        "Ims": 0,
        "airCtrl": _flag(merged.air_ctrl),
        "airTemp": {
            "unit": START_TEMPERATURE_UNIT,
            "value": str(merged.air_temp_value),
        },
        # the vendor takes this one as a JSON boolean
        "defrost": merged.defrost,
        "heating1": _flag(merged.heating1),
        "igniOnDuration": merged.igni_on_duration,
        "seatHeaterVentInfo": None,
        "username": user.username,
        "vin": vehicle.vin,
    }


def build_door_form(user: UserConfig, vehicle: VehicleConfig) -> str:
    """Form-encoded body shared by lock and unlock."""
    return urlencode({"userName": user.username or "", "vin": vehicle.vin})


def build_charge_body(*, start: bool) -> dict[str, str]:
    """Body of a charge start/stop request."""
    return {"action": "start" if start else "stop"}


def interpret_command(
    operation: str,
    response: ResponseEnvelope,
    *,
    success: str,
    failure: str,
) -> CommandResult:
    """Map a command response to its result; only status 200 counts as success."""
    return CommandResult(
        operation=operation,
        status_code=response.status_code,
        message=success if response.status_code == 200 else failure,
    )
