"""Initialize the core package and expose key functionality."""

from .errors import (
    VakitError,
    InsufficientData,
    LocationUnavailable,
    CompassUnavailable,
)
from .prayer_window import (
    PrayerSlot,
    NextPrayer,
    resolve,
    format_remaining,
    to_time_of_day,
)
from .bearing import (
    GeoPoint,
    HeadingSample,
    MECCA,
    compute_target_bearing,
    on_heading_sample,
)
from .compass import QiblaCompass, CompassState

__all__ = [
    "VakitError",
    "InsufficientData",
    "LocationUnavailable",
    "CompassUnavailable",
    "PrayerSlot",
    "NextPrayer",
    "resolve",
    "format_remaining",
    "to_time_of_day",
    "GeoPoint",
    "HeadingSample",
    "MECCA",
    "compute_target_bearing",
    "on_heading_sample",
    "QiblaCompass",
    "CompassState",
]
