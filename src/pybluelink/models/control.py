"""Remote command options and results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pybluelink.exceptions import BluelinkVendorRejectionError


class VehicleStartOptions(BaseModel):
    """Parameters of a remote start.

    Accepts both the Python names and the vendor names (``airCtrl``,
    ``igniOnDuration``, ``airTempvalue``), so dicts written against the
    vendor vocabulary keep working.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        populate_by_name=True,
    )

    air_ctrl: bool = Field(default=False, alias="airCtrl")
    igni_on_duration: int = Field(default=10, ge=1, le=30, alias="igniOnDuration")
    """Engine run time in minutes."""
    air_temp_value: int = Field(default=70, alias="airTempvalue")
    """Cabin set point, sent as a string in the vendor's default unit."""
    defrost: bool = False
    heating1: bool = False

    def merged(self, overrides: Mapping[str, Any] | VehicleStartOptions | None = None) -> VehicleStartOptions:
        """Return a copy with *overrides* applied.

        Each supplied key replaces the current value wholesale; nothing is
        merged recursively.
        """
        if overrides is None:
            return self
        if isinstance(overrides, VehicleStartOptions):
            incoming = overrides.model_dump(exclude_unset=True)
        else:
            incoming = dict(overrides)
        current = self.model_dump()
        for key, value in incoming.items():
            field_name = _START_ALIASES.get(key, key)
            current[field_name] = value
        return VehicleStartOptions.model_validate(current)


_START_ALIASES: dict[str, str] = {
    info.alias: name for name, info in VehicleStartOptions.model_fields.items() if info.alias
}


class CommandResult(BaseModel):
    """Outcome of one remote command, decided by the HTTP status alone.

    Adapters expose it either as a returned message or, for operations
    that raise on failure, through :meth:`raise_for_failure`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: str
    status_code: int
    message: str

    @property
    def success(self) -> bool:
        return self.status_code == 200

    def raise_for_failure(self) -> CommandResult:
        if not self.success:
            raise BluelinkVendorRejectionError(
                self.message,
                operation=self.operation,
                status_code=self.status_code,
            )
        return self
