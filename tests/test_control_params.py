from __future__ import annotations

import json
from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from _fakes import VIN
from pybluelink._transport import ResponseEnvelope
from pybluelink.commands import build_charge_body, build_door_form, build_start_body, interpret_command
from pybluelink.config import UserConfig, VehicleConfig
from pybluelink.exceptions import BluelinkVendorRejectionError
from pybluelink.models.control import CommandResult, VehicleStartOptions

USER = UserConfig(username="driver@example.com", pin="1234")
VEHICLE = VehicleConfig(reg_id="REG-1", vin=VIN)


def test_start_options_defaults() -> None:
    options = VehicleStartOptions()
    assert options.air_ctrl is False
    assert options.igni_on_duration == 10
    assert options.air_temp_value == 70
    assert options.defrost is False
    assert options.heating1 is False


def test_start_options_accept_vendor_names() -> None:
    options = VehicleStartOptions.model_validate({"airCtrl": True, "igniOnDuration": 5, "airTempvalue": 68})
    assert options.air_ctrl is True
    assert options.igni_on_duration == 5
    assert options.air_temp_value == 68


def test_start_options_reject_out_of_range_duration() -> None:
    with pytest.raises(ValidationError):
        VehicleStartOptions(igni_on_duration=0)

    with pytest.raises(ValidationError):
        VehicleStartOptions(igni_on_duration=31)


def test_merged_replaces_only_supplied_keys() -> None:
    merged = VehicleStartOptions().merged({"defrost": True})
    assert merged == VehicleStartOptions(defrost=True)

    merged = VehicleStartOptions(heating1=True).merged(VehicleStartOptions(igni_on_duration=15))
    assert merged.heating1 is True
    assert merged.igni_on_duration == 15


def test_merged_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        VehicleStartOptions().merged({"seatHeat": 3})


def test_start_body_encodes_flags_and_temperature() -> None:
    body = build_start_body(USER, VEHICLE, {"defrost": True, "heating1": True, "air_temp_value": 72})
    assert body["heating1"] == 1
    assert body["airCtrl"] == 0
    assert body["defrost"] is True
    assert body["airTemp"] == {"unit": 1, "value": "72"}
    assert body["Ims"] == 0
    assert body["seatHeaterVentInfo"] is None
    assert json.loads(json.dumps(body))["seatHeaterVentInfo"] is None


def test_door_form_carries_user_and_vin() -> None:
    assert parse_qs(build_door_form(USER, VEHICLE)) == {"userName": ["driver@example.com"], "vin": [VIN]}


def test_charge_body() -> None:
    assert build_charge_body(start=True) == {"action": "start"}
    assert build_charge_body(start=False) == {"action": "stop"}


@pytest.mark.parametrize(("status", "success"), [(200, True), (201, False), (204, False), (500, False)])
def test_only_status_200_is_success(status: int, success: bool) -> None:
    result = interpret_command("lock", ResponseEnvelope(status_code=status), success="ok", failure="nope")
    assert result.success is success
    assert result.message == ("ok" if success else "nope")


def test_raise_for_failure() -> None:
    ok = CommandResult(operation="stop", status_code=200, message="Vehicle stopped")
    assert ok.raise_for_failure() is ok

    failed = CommandResult(operation="stop", status_code=400, message="Failed to stop vehicle!")
    with pytest.raises(BluelinkVendorRejectionError, match="Failed to stop vehicle!") as exc_info:
        failed.raise_for_failure()
    assert exc_info.value.status_code == 400
