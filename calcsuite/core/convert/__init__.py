# calcsuite/core/convert/__init__.py

from .length import LENGTH_FACTORS, LENGTH_LABELS, convert_length
from .timezones import available_time_zones, describe_difference, time_zone_difference, utc_offset

__all__ = [
    "LENGTH_FACTORS",
    "LENGTH_LABELS",
    "available_time_zones",
    "convert_length",
    "describe_difference",
    "time_zone_difference",
    "utc_offset",
]
