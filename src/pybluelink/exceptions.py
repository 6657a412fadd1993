"""Custom exception hierarchy for pybluelink."""

from __future__ import annotations


class BluelinkError(Exception):
    """Base exception for all pybluelink errors."""


class BluelinkConfigError(BluelinkError):
    """Invalid or missing configuration."""


class BluelinkAuthenticationError(BluelinkError):
    """No usable access token could be obtained from the session provider."""


class BluelinkTransportError(BluelinkError):
    """Network-level failure (DNS, connection reset, TLS, ...).

    Never raised for an HTTP status code: non-2xx responses are data.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class BluelinkTimeoutError(BluelinkTransportError):
    """The HTTP exchange did not complete within the per-call timeout."""


class BluelinkVendorRejectionError(BluelinkError):
    """The vendor answered with a non-200 status for an operation."""

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        super().__init__(message)


class BluelinkMalformedResponseError(BluelinkError):
    """A 200 response whose body is unparsable or lacks an expected subtree."""

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)


class BluelinkNotImplementedError(BluelinkError, NotImplementedError):
    """Capability not supported by a region adapter.

    Raised before any network I/O takes place.
    """

    def __init__(self, operation: str, *, region: str = "") -> None:
        self.operation = operation
        self.region = region
        suffix = f" for region {region}" if region else ""
        super().__init__(f"{operation} is not implemented{suffix}")
