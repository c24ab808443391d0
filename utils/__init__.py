"""
Utils Package
-------------
Collaborators around the core: configuration, logging, the Aladhan time
provider, location providers and the heading stream.
"""

from .config_loader import load_config
from .prayer_api import get_prayer_times, PrayerApiError
from .location import provider_from_config
from .heading_stream import HeadingStream

__all__ = [
    "load_config",
    "get_prayer_times",
    "PrayerApiError",
    "provider_from_config",
    "HeadingStream",
]
