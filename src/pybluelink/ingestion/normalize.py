"""Normalization helpers.

Centralizes optional-safe traversal and the coercions vendor payloads need.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

_MISSING = object()

_TRUE_STRINGS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "n", "off", "", "--"})

# 20200219200135 (yyyyMMddHHmmss)
_COMPACT_DATETIME = re.compile(r"^\d{14}$")


def get_path(data: Any, path: str, default: Any = None) -> Any:
    """Return the value at a dotted *path*, or *default* when any hop is missing.

    Integer segments index into lists (``"drvDistance.0.rangeByFuel"``).
    """
    current = data
    for part in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(part)]
            except (ValueError, IndexError):
                current = _MISSING
        else:
            current = _MISSING
        if current is _MISSING or current is None:
            return default
    return current


def coerce_bool(value: Any) -> bool:
    """Coerce vendor flag encodings (``0/1``, ``"true"``, ``None``) to a strict bool."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value) and value != 0
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
        try:
            return float(normalized) != 0
        except ValueError:
            return False
    return bool(value)


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool) or value == "" or value == "--":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def parse_vendor_datetime(value: Any) -> datetime | None:
    """Parse a vendor date-time string into an aware UTC datetime.

    Handles the compact ``yyyyMMddHHmmss`` form and ISO-8601 (with or
    without a trailing ``Z``). Naive values are taken as UTC. Returns
    ``None`` when *value* cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            if _COMPACT_DATETIME.match(text):
                parsed = datetime.strptime(text, "%Y%m%d%H%M%S")
            else:
                parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
