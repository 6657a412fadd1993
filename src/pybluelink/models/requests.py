"""Pydantic request models for outbound calls and status reads."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class CallOptions(BaseModel):
    """Method, headers, and body of one dispatched request.

    ``data`` carries a pre-encoded (form) body, ``json_body`` a structure
    to be JSON-encoded; at most one of them is set.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    method: Literal["GET", "POST", "PUT", "DELETE"] = "GET"
    headers: dict[str, str] = Field(default_factory=dict)
    data: str | None = None
    json_body: Any = None
    timeout: float | None = Field(default=None, gt=0)
    """Per-call timeout override in seconds."""

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("json_body")
    @classmethod
    def _single_body(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None and info.data.get("data") is not None:
            raise ValueError("data and json_body are mutually exclusive")
        return value


class VehicleStatusOptions(BaseModel):
    """Per-call switches of a status read.

    Parameters
    ----------
    refresh : bool
        Ask the vendor to poll the vehicle live instead of returning
        its cached telemetry.
    parsed : bool
        Return the canonical :class:`~pybluelink.models.status.VehicleStatus`
        instead of the vendor's raw status tree.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    refresh: bool = False
    parsed: bool = False
