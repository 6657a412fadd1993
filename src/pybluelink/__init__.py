"""pybluelink - Async Python client for regional connected-vehicle APIs."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybluelink")
except PackageNotFoundError:
    __version__ = "0+local"
from pybluelink._constants import Region
from pybluelink._transport import AiohttpTransport, ResponseEnvelope, Transport
from pybluelink.client import BluelinkClient
from pybluelink.config import ClientConfig, Environment, UserConfig, VehicleConfig
from pybluelink.dispatch import RequestDispatcher
from pybluelink.exceptions import (
    BluelinkAuthenticationError,
    BluelinkConfigError,
    BluelinkError,
    BluelinkMalformedResponseError,
    BluelinkNotImplementedError,
    BluelinkTimeoutError,
    BluelinkTransportError,
    BluelinkVendorRejectionError,
)
from pybluelink.ingestion import normalize_vehicle_status
from pybluelink.models import (
    CallOptions,
    CommandResult,
    Distance,
    DistanceUnit,
    FullVehicleStatus,
    RawVehicleStatus,
    Speed,
    SpeedUnit,
    Temperature,
    TemperatureUnit,
    UnparsedTimestamp,
    VehicleLocation,
    VehicleOdometer,
    VehicleStartOptions,
    VehicleStatus,
    VehicleStatusOptions,
)
from pybluelink.session import Session, SessionProvider, TokenSessionProvider
from pybluelink.vehicles import AmericanVehicle, Vehicle

__all__ = [
    "__version__",
    "AiohttpTransport",
    "AmericanVehicle",
    "BluelinkAuthenticationError",
    "BluelinkClient",
    "BluelinkConfigError",
    "BluelinkError",
    "BluelinkMalformedResponseError",
    "BluelinkNotImplementedError",
    "BluelinkTimeoutError",
    "BluelinkTransportError",
    "BluelinkVendorRejectionError",
    "CallOptions",
    "ClientConfig",
    "CommandResult",
    "Distance",
    "DistanceUnit",
    "Environment",
    "FullVehicleStatus",
    "RawVehicleStatus",
    "Region",
    "RequestDispatcher",
    "ResponseEnvelope",
    "Session",
    "SessionProvider",
    "Speed",
    "SpeedUnit",
    "Temperature",
    "TemperatureUnit",
    "TokenSessionProvider",
    "Transport",
    "UnparsedTimestamp",
    "UserConfig",
    "Vehicle",
    "VehicleConfig",
    "VehicleLocation",
    "VehicleOdometer",
    "VehicleStartOptions",
    "VehicleStatus",
    "VehicleStatusOptions",
    "normalize_vehicle_status",
]
