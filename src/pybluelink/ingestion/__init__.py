"""Vendor payload ingestion: coercion helpers and status normalization."""

from pybluelink.ingestion.status import normalize_vehicle_status

__all__ = ["normalize_vehicle_status"]
