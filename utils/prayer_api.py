"""
Aladhan client: six daily boundaries for a position and date.
"""

import requests
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from core.bearing import GeoPoint
from core.errors import VakitError
from core.prayer_window import SLOT_KEYS, PrayerSlot, to_time_of_day
from utils.locales import DEFAULT_LOCALE, hijri_month, slot_label

ALADHAN_BASE = "https://api.aladhan.com/v1"
DEFAULT_METHOD = 3  # Muslim World League


class PrayerApiError(VakitError):
    pass


@dataclass
class DailyTimes:
    slots: List[PrayerSlot]
    hijri_date: str = ""
    gregorian_date: str = ""
    fetched_at: datetime = field(default_factory=datetime.now)


def parse_clock(time_str: str) -> int:
    """'05:12' or '05:12 (EET)' -> minutes since midnight."""
    return to_time_of_day(datetime.strptime(time_str.strip().split(" ")[0], "%H:%M"))


def parse_timings(timings: dict, locale: str = DEFAULT_LOCALE) -> List[PrayerSlot]:
    try:
        return [
            PrayerSlot(slot_label(key, locale), parse_clock(timings[key]))
            for key in SLOT_KEYS
        ]
    except (KeyError, ValueError, AttributeError) as e:
        raise PrayerApiError(f"Malformed timings: {e}")


def format_hijri(hijri: dict, locale: str = DEFAULT_LOCALE) -> str:
    try:
        month = hijri_month(hijri["month"]["en"], locale)
        return f"{hijri['day']} {month} {hijri['year']}"
    except (KeyError, TypeError):
        return ""


def get_prayer_times(
        point: GeoPoint,
        when: Optional[datetime] = None,
        method: int = DEFAULT_METHOD,
        locale: str = DEFAULT_LOCALE,
        timeout: float = 10,
) -> DailyTimes:
    """Fetch daily prayer times from Aladhan API."""
    when = when or datetime.now()
    api_url = f"{ALADHAN_BASE}/timings/{int(when.timestamp())}"
    params = {
        "latitude": point.latitude,
        "longitude": point.longitude,
        "method": method,
    }

    logging.info(f"[PRAYER] Fetching prayer times ({point.latitude:.4f}, {point.longitude:.4f})")

    try:
        response = requests.get(api_url, params=params, timeout=timeout)
        response.raise_for_status()
        body = response.json()
    except requests.RequestException as e:
        raise PrayerApiError(f"Aladhan request failed: {e}")
    except ValueError as e:
        raise PrayerApiError(f"Aladhan returned invalid JSON: {e}")

    if body.get("code") != 200:
        raise PrayerApiError(f"Aladhan API error: {body.get('status')}")

    data = body["data"]
    date = data.get("date", {})

    return DailyTimes(
        slots=parse_timings(data.get("timings", {}), locale),
        hijri_date=format_hijri(date.get("hijri", {}), locale),
        gregorian_date=date.get("gregorian", {}).get("date", when.strftime("%d-%m-%Y")),
    )
