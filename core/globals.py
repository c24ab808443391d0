"""
Process-wide objects shared by main.py and the API routes.
"""

import threading

from core.compass import CompassState, QiblaCompass
from utils.heading_stream import HeadingStream
from utils.location import provider_from_config

stop_flag = threading.Event()

HEADING_STREAM = HeadingStream()
COMPASS = QiblaCompass(HEADING_STREAM)


def arm_from_config(cfg: dict, compass: QiblaCompass = None) -> CompassState:
    """Apply the configured sensor presence, then arm with the configured location."""
    compass = compass or COMPASS
    compass.heading_stream.set_available(bool(cfg["compass"]["sensor"]))
    return compass.arm(provider_from_config(cfg))
