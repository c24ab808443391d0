from datetime import datetime

import pytest
import requests

from core.bearing import GeoPoint
from utils import prayer_api
from utils.prayer_api import PrayerApiError, get_prayer_times, parse_clock

TIMINGS = {
    "Fajr": "05:42",
    "Sunrise": "07:08",
    "Dhuhr": "12:58 (EET)",
    "Asr": "16:02",
    "Sunset": "18:39",
    "Maghrib": "18:39",
    "Isha": "19:59",
    "Imsak": "05:32",
    "Midnight": "00:59",
}

HIJRI = {"day": "26", "month": {"en": "Rabīʿ al-thānī", "ar": ""}, "year": "1448"}


class FakeResponse:
    def __init__(self, body, status_code=200):
        self.body = body
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self.body


def ok_body():
    return {
        "code": 200,
        "status": "OK",
        "data": {
            "timings": dict(TIMINGS),
            "date": {"hijri": HIJRI, "gregorian": {"date": "18-10-2026"}},
        },
    }


@pytest.fixture
def fake_get(monkeypatch):
    calls = []

    def install(response):
        def fake(url, params=None, timeout=None):
            calls.append((url, params, timeout))
            return response
        monkeypatch.setattr(prayer_api.requests, "get", fake)
        return calls

    return install


def test_parse_clock_strips_timezone_suffix():
    assert parse_clock("05:42") == 342
    assert parse_clock("12:58 (EET)") == 778


def test_fetches_six_slots_in_day_order(fake_get):
    calls = fake_get(FakeResponse(ok_body()))
    when = datetime(2026, 10, 18, 9, 0)

    daily = get_prayer_times(GeoPoint(41.0082, 28.9784), when=when)

    assert [s.label for s in daily.slots] == ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]
    assert [s.clock for s in daily.slots] == ["05:42", "07:08", "12:58", "16:02", "18:39", "19:59"]
    assert daily.hijri_date == "26 Rabīʿ al-thānī 1448"
    assert daily.gregorian_date == "18-10-2026"

    url, params, _ = calls[0]
    assert url.endswith(f"/timings/{int(when.timestamp())}")
    assert params == {"latitude": 41.0082, "longitude": 28.9784, "method": 3}


def test_turkish_locale(fake_get):
    fake_get(FakeResponse(ok_body()))
    daily = get_prayer_times(GeoPoint(41.0, 29.0), locale="tr")

    assert daily.slots[0].label == "İmsak"
    assert daily.slots[-1].label == "Yatsı"
    assert daily.hijri_date == "26 Rebiülahir 1448"


def test_api_error_code(fake_get):
    fake_get(FakeResponse({"code": 400, "status": "Bad Request"}))
    with pytest.raises(PrayerApiError):
        get_prayer_times(GeoPoint(41.0, 29.0))


def test_http_error(fake_get):
    fake_get(FakeResponse({}, status_code=502))
    with pytest.raises(PrayerApiError):
        get_prayer_times(GeoPoint(41.0, 29.0))


def test_missing_timing_is_reported(fake_get):
    body = ok_body()
    del body["data"]["timings"]["Asr"]
    fake_get(FakeResponse(body))
    with pytest.raises(PrayerApiError):
        get_prayer_times(GeoPoint(41.0, 29.0))
