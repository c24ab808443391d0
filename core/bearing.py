"""
Great-circle bearing toward the Kaaba and compass-relative rotation.
"""

import math
from dataclasses import dataclass

MECCA_LAT = 21.4225
MECCA_LNG = 39.8262


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"longitude out of range: {self.longitude}")


@dataclass(frozen=True)
class HeadingSample:
    """Raw magnetometer reading. Only x and y are used."""
    x: float
    y: float
    z: float = 0.0


MECCA = GeoPoint(MECCA_LAT, MECCA_LNG)


def compute_target_bearing(observer: GeoPoint, target: GeoPoint = MECCA) -> float:
    """Initial great-circle bearing from observer to target, degrees in [0, 360).

    observer == target degenerates to atan2(0, 0) and yields 0.
    """
    lat1 = math.radians(observer.latitude)
    lat2 = math.radians(target.latitude)
    d_lon = math.radians(target.longitude - observer.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return (math.degrees(math.atan2(y, x)) + 360) % 360


def heading_from_sample(raw: HeadingSample) -> int:
    """Compass heading in whole degrees, halves rounded up."""
    degree = (math.degrees(math.atan2(raw.y, raw.x)) + 360) % 360
    return int(math.floor(degree + 0.5))


def on_heading_sample(raw: HeadingSample, target_bearing: float) -> float:
    """Rotation to apply to the Qibla indicator. Not normalized to [0, 360)."""
    return heading_from_sample(raw) - target_bearing
