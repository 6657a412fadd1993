"""Helpers for safe debug logging.

Requests carry the access token and the service PIN in plain headers and
vendor payloads echo account identifiers back. This module redacts those
fields before emitting DEBUG logs.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "accesstoken",
        "refresh_token",
        "refreshtoken",
        "authorization",
        "bluelinkservicepin",
        "pin",
        "password",
        "cookie",
    }
)


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Return a copy of a decoded JSON value with secrets masked.

    Values under a sensitive key are replaced wholesale; long strings are
    truncated. Numbers, booleans and ``None`` pass through.
    """
    if isinstance(value, Mapping):
        redacted: dict[str, Any] = {}
        for key, item in value.items():
            if str(key).lower() in _SENSITIVE_VALUE_KEYS:
                redacted[key] = "<redacted>"
            else:
                redacted[key] = redact_for_log(item, max_string=max_string)
        return redacted
    if isinstance(value, list):
        return [redact_for_log(item, max_string=max_string) for item in value]
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value


def redact_body_for_log(body: str, *, max_string: int = 2048) -> Any:
    """Redact a raw response body, decoding it first when it is JSON."""
    try:
        decoded = json.loads(body)
    except ValueError:
        return redact_for_log(body, max_string=max_string)
    return redact_for_log(decoded, max_string=max_string)
