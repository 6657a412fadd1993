"""US region adapter.

Endpoints:
  - /ac/v2/rcs/rvs/vehicleStatus (status)
  - /ac/v2/rcs/rfc/findMyCar (location, always polls the modem)
  - /ac/v2/enrollment/details/{username} (enrollment, odometer)
  - /ac/v2/rcs/rdo/off, /ac/v2/rcs/rdo/on (lock, unlock)
  - /ac/v2/rcs/rsc/start, /ac/v2/rcs/rsc/stop (remote start)
  - /api/v2/spa/vehicles/{id}/control/charge (charge control)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pybluelink._constants import US_DEFAULT_OFFSET, US_START_OFFSET, USER_AGENT, DistanceUnit, Region, UsPaths
from pybluelink._transport import ResponseEnvelope
from pybluelink.commands import (
    FORM_CONTENT_TYPE,
    build_charge_body,
    build_door_form,
    build_start_body,
    interpret_command,
)
from pybluelink.config import UserConfig, VehicleConfig
from pybluelink.dispatch import RequestDispatcher
from pybluelink.exceptions import BluelinkMalformedResponseError, BluelinkVendorRejectionError
from pybluelink.ingestion.normalize import get_path, safe_float
from pybluelink.ingestion.status import normalize_vehicle_status
from pybluelink.models._base import Speed
from pybluelink.models.control import CommandResult, VehicleStartOptions
from pybluelink.models.location import VehicleLocation, VehicleOdometer
from pybluelink.models.requests import CallOptions, VehicleStatusOptions
from pybluelink.models.status import FullVehicleStatus, RawVehicleStatus, VehicleStatus
from pybluelink.vehicles.base import Vehicle

_logger = logging.getLogger(__name__)


class AmericanVehicle(Vehicle):
    """Vehicle served by the US telematics API."""

    region: ClassVar[Region] = Region.US

    def __init__(
        self,
        vehicle_config: VehicleConfig,
        user_config: UserConfig,
        dispatcher: RequestDispatcher,
        *,
        user_agent: str = USER_AGENT,
    ) -> None:
        super().__init__(vehicle_config, user_config, dispatcher, user_agent=user_agent)
        _logger.debug("US vehicle %s created", vehicle_config.reg_id)

    def _default_headers(self) -> dict[str, str]:
        """Headers every US request carries.

        ``access_token`` is a placeholder here; the dispatcher overwrites
        it with the token read after its refresh.
        """
        env = self._dispatcher.environment
        return {
            "access_token": "",
            "client_id": env.client_id,
            "Host": env.host,
            "User-Agent": self._user_agent,
            "registrationId": self.vehicle_config.reg_id,
            "gen": self.vehicle_config.generation,
            "username": self.user_config.username,
            "vin": self.vin,
            "APPCLOUD-VIN": self.vin,
            "Language": "0",
            "to": "ISS",
            "encryptFlag": "false",
            "from": "SPA",
            "brandIndicator": self.vehicle_config.brand_indicator,
            "bluelinkservicepin": self.user_config.pin,
            "offset": US_DEFAULT_OFFSET,
        }

    def _start_headers(self) -> dict[str, str]:
        # the vendor expects a different offset on remote start/stop
        return {**self._default_headers(), "offset": US_START_OFFSET}

    def _require_ok(self, operation: str, response: ResponseEnvelope) -> None:
        if response.status_code != 200:
            raise BluelinkVendorRejectionError(
                f"{operation} request failed (HTTP {response.status_code})",
                operation=operation,
                status_code=response.status_code,
            )

    def _decode_object(self, path: str, response: ResponseEnvelope) -> Mapping[str, Any]:
        data = response.decode_json()
        if not isinstance(data, Mapping):
            raise BluelinkMalformedResponseError(
                f"{path} returned {type(data).__name__}, expected an object",
                endpoint=path,
            )
        return data

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def status(
        self,
        options: VehicleStatusOptions | Mapping[str, Any] | None = None,
    ) -> VehicleStatus | RawVehicleStatus | None:
        """Fetch the vehicle status.

        ``refresh=True`` makes the vendor poll the car instead of serving
        cached telemetry. ``parsed=True`` returns the canonical model,
        otherwise the vendor's ``vehicleStatus`` tree is returned verbatim.
        """
        if isinstance(options, VehicleStatusOptions):
            opts = options
        else:
            opts = VehicleStatusOptions.model_validate(options or {})

        response = await self._dispatcher.dispatch(
            UsPaths.STATUS,
            CallOptions(
                method="GET",
                headers={"REFRESH": "true" if opts.refresh else "false", **self._default_headers()},
            ),
        )
        self._require_ok("status", response)

        data = self._decode_object(UsPaths.STATUS, response)
        raw = data.get("vehicleStatus")
        if not isinstance(raw, Mapping):
            raise BluelinkMalformedResponseError("Status response has no vehicleStatus", endpoint=UsPaths.STATUS)

        result: VehicleStatus | RawVehicleStatus = normalize_vehicle_status(raw) if opts.parsed else dict(raw)
        self.last_status = result
        return result

    async def full_status(self) -> FullVehicleStatus | None:
        raise self._not_supported("full_status")

    async def location(self) -> VehicleLocation:
        """Locate the vehicle. This always polls the modem directly."""
        response = await self._dispatcher.dispatch(
            UsPaths.LOCATION,
            CallOptions(method="GET", headers=self._default_headers()),
        )
        self._require_ok("location", response)

        data = self._decode_object(UsPaths.LOCATION, response)
        latitude = safe_float(get_path(data, "coord.lat"))
        longitude = safe_float(get_path(data, "coord.lon"))
        if latitude is None or longitude is None:
            raise BluelinkMalformedResponseError("Location response has no coordinates", endpoint=UsPaths.LOCATION)

        return VehicleLocation(
            latitude=latitude,
            longitude=longitude,
            altitude=safe_float(get_path(data, "coord.alt")),
            speed=Speed(
                value=safe_float(get_path(data, "speed.value")),
                unit=get_path(data, "speed.unit"),
            ),
            heading=safe_float(get_path(data, "head")),
        )

    def _enrollment_path(self) -> str:
        return UsPaths.ENROLLMENT.format(username=self.user_config.username)

    async def enrollment(self) -> Mapping[str, Any]:
        """Return the enrollment record whose VIN matches this vehicle exactly."""
        path = self._enrollment_path()
        response = await self._dispatcher.dispatch(
            path,
            CallOptions(method="GET", headers=self._default_headers()),
        )
        self._require_ok("enrollment", response)

        data = self._decode_object(path, response)
        enrolled = data.get("enrolledVehicleDetails")
        if not isinstance(enrolled, list):
            raise BluelinkMalformedResponseError("Enrollment response has no enrolledVehicleDetails", endpoint=path)

        for item in enrolled:
            details = get_path(item, "vehicleDetails")
            if isinstance(details, Mapping) and details.get("vin") == self.vin:
                return details
        raise BluelinkMalformedResponseError(f"VIN {self.vin} not found among enrolled vehicles", endpoint=path)

    async def odometer(self) -> VehicleOdometer | None:
        """Odometer from the enrollment record.

        The vendor does not state a unit for this value.
        """
        details = await self.enrollment()
        value = safe_float(details.get("odometer"))
        if value is None:
            raise BluelinkMalformedResponseError(
                f"Enrollment record for VIN {self.vin} has no odometer",
                endpoint=self._enrollment_path(),
            )
        self.last_odometer = VehicleOdometer(value=value, unit=DistanceUnit.UNKNOWN)
        return self.last_odometer

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def _door_command(self, operation: str, path: str, success: str) -> CommandResult:
        response = await self._dispatcher.dispatch(
            path,
            CallOptions(
                method="POST",
                headers={**self._default_headers(), "Content-Type": FORM_CONTENT_TYPE},
                data=build_door_form(self.user_config, self.vehicle_config),
            ),
        )
        return interpret_command(operation, response, success=success, failure="Something went wrong!")

    async def lock(self) -> str:
        """Lock the doors. Returns a failure message instead of raising."""
        result = await self._door_command("lock", UsPaths.LOCK, "Lock successful")
        return result.message

    async def unlock(self) -> str:
        """Unlock the doors. Returns a failure message instead of raising."""
        result = await self._door_command("unlock", UsPaths.UNLOCK, "Unlock successful")
        return result.message

    async def start(self, options: VehicleStartOptions | Mapping[str, Any] | None = None) -> str:
        """Remote start. Returns a failure message instead of raising."""
        response = await self._dispatcher.dispatch(
            UsPaths.START,
            CallOptions(
                method="POST",
                headers=self._start_headers(),
                json_body=build_start_body(self.user_config, self.vehicle_config, options),
            ),
        )
        result = interpret_command("start", response, success="Vehicle started!", failure="Failed to start vehicle")
        return result.message

    async def stop(self) -> str:
        """Remote stop. Raises :class:`BluelinkVendorRejectionError` on failure."""
        response = await self._dispatcher.dispatch(
            UsPaths.STOP,
            CallOptions(method="POST", headers=self._start_headers()),
        )
        result = interpret_command("stop", response, success="Vehicle stopped", failure="Failed to stop vehicle!")
        return result.raise_for_failure().message

    async def _charge_command(self, *, start: bool) -> CommandResult:
        operation = "start_charge" if start else "stop_charge"
        response = await self._dispatcher.dispatch(
            UsPaths.CHARGE.format(vehicle_id=self.id),
            CallOptions(
                method="POST",
                headers=self._default_headers(),
                json_body=build_charge_body(start=start),
            ),
        )
        success = "Start charge successful" if start else "Stop charge successful"
        result = interpret_command(operation, response, success=success, failure="Something went wrong!")
        if result.success:
            _logger.debug("Sent %s command to vehicle %s", operation, self.id)
        return result

    async def start_charge(self) -> str:
        """Start charging. Raises :class:`BluelinkVendorRejectionError` on failure."""
        result = await self._charge_command(start=True)
        return result.raise_for_failure().message

    async def stop_charge(self) -> str:
        """Stop charging. Raises :class:`BluelinkVendorRejectionError` on failure."""
        result = await self._charge_command(start=False)
        return result.raise_for_failure().message
