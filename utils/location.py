"""
Location providers for arming the compass and fetching prayer times.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from core.bearing import GeoPoint
from core.errors import LocationUnavailable, NO_FIX, PERMISSION_DENIED

# Used for prayer times when no position can be obtained.
DEFAULT_LOCATION = GeoPoint(41.0082, 28.9784)
DEFAULT_LOCATION_NAME = "Istanbul, Türkiye"

IP_LOOKUP_URL = "http://ip-api.com/json/"


@dataclass(frozen=True)
class Place:
    point: GeoPoint
    name: str = ""


class StaticLocationProvider:
    """Coordinates taken from config.yml."""

    def __init__(self, latitude: Optional[float], longitude: Optional[float],
                 name: str = "", permission: bool = True):
        self.latitude = latitude
        self.longitude = longitude
        self.name = name
        self.permission = permission

    def locate(self) -> Place:
        if not self.permission:
            raise LocationUnavailable(PERMISSION_DENIED, "location permission not granted")
        if self.latitude is None or self.longitude is None:
            raise LocationUnavailable(NO_FIX, "no coordinates configured")
        try:
            point = GeoPoint(float(self.latitude), float(self.longitude))
        except ValueError as e:
            raise LocationUnavailable(NO_FIX, str(e))
        return Place(point, self.name)


class IpLocationProvider:
    """Approximate position from the public IP address."""

    def __init__(self, url: str = IP_LOOKUP_URL, timeout: float = 10, permission: bool = True):
        self.url = url
        self.timeout = timeout
        self.permission = permission

    def locate(self) -> Place:
        if not self.permission:
            raise LocationUnavailable(PERMISSION_DENIED, "location permission not granted")

        logging.info("[LOC] Looking up position from IP")
        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise LocationUnavailable(NO_FIX, f"IP lookup failed: {e}")

        if data.get("status") != "success":
            raise LocationUnavailable(NO_FIX, f"IP lookup rejected: {data.get('message', 'unknown')}")

        try:
            point = GeoPoint(float(data["lat"]), float(data["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise LocationUnavailable(NO_FIX, f"IP lookup returned no coordinates: {e}")

        name = ", ".join(part for part in (data.get("city"), data.get("country")) if part)
        return Place(point, name)


def provider_from_config(cfg: dict):
    loc = cfg.get("location", {})
    permission = bool(loc.get("permission", True))

    if loc.get("source", "static") == "ip":
        return IpLocationProvider(permission=permission)

    return StaticLocationProvider(
        loc.get("latitude"),
        loc.get("longitude"),
        name=loc.get("name", ""),
        permission=permission,
    )
