import copy

import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.routes import compass as compass_route
from api.routes import status as status_route
from core.bearing import MECCA, GeoPoint, compute_target_bearing
from core.compass import QiblaCompass
from core.errors import REASON_MESSAGES, SENSOR_MISSING
from core.prayer_window import PrayerSlot
from utils.config_loader import DEFAULT_CONFIG
from utils.heading_stream import HeadingStream
from utils.prayer_api import DailyTimes

client = TestClient(app)


@pytest.fixture(autouse=True)
def _runtime(clean_runtime, monkeypatch):
    monkeypatch.setattr(compass_route, "load_config", lambda: DEFAULT_CONFIG)
    yield clean_runtime


def load_day(runtime):
    slots = [
        PrayerSlot("Fajr", 300),
        PrayerSlot("Sunrise", 390),
        PrayerSlot("Dhuhr", 750),
        PrayerSlot("Asr", 960),
        PrayerSlot("Maghrib", 1170),
        PrayerSlot("Isha", 1260),
    ]
    runtime.set_day(DailyTimes(slots, hijri_date="26 Rabīʿ al-thānī 1448"), "Istanbul, Türkiye")


def test_health():
    assert client.get("/health").json() == {"status": "ok"}


def test_schedule_not_loaded():
    assert client.get("/schedule").json() == {"error": "schedule not loaded"}


def test_schedule(_runtime):
    load_day(_runtime)
    body = client.get("/schedule").json()

    assert body["location"] == "Istanbul, Türkiye"
    assert body["slots"][0] == {"label": "Fajr", "time": "05:00"}
    assert len(body["slots"]) == 6


def test_status_loading():
    body = client.get("/status").json()
    assert body["next_prayer"] == {"loading": True}
    assert body["compass"]["state"] == "uninitialized"


def test_status_with_schedule(_runtime):
    load_day(_runtime)
    prayer = client.get("/status").json()["next_prayer"]

    assert prayer["label"] in {"Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"}
    assert 0 < prayer["remaining_minutes"] <= 1440
    assert prayer["remaining"].endswith("m")


def test_compass_flow():
    started = client.post("/compass/start").json()
    assert started["success"] is True

    expected_bearing = compute_target_bearing(GeoPoint(41.0082, 28.9784), MECCA)
    body = client.post("/compass/heading", json={"x": 0, "y": 1}).json()
    assert body["state"] == "tracking"
    assert body["heading"] == 90
    assert body["rotation"] == pytest.approx(90 - expected_bearing)

    assert client.post("/compass/start").json()["success"] is False
    assert client.post("/compass/stop").json()["success"] is True
    assert client.post("/compass/stop").json()["success"] is False
    assert client.get("/compass").json()["state"] == "uninitialized"


def test_heading_ignored_when_not_tracking():
    body = client.post("/compass/heading", json={"x": 1, "y": 0}).json()
    assert body["rotation"] is None


def test_status_does_not_touch_runtime_state(_runtime):
    load_day(_runtime)
    client.get("/status")
    assert _runtime.next_prayer is None


def test_start_honours_missing_sensor(monkeypatch):
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    cfg["compass"]["sensor"] = False
    stream = HeadingStream()
    compass = QiblaCompass(stream)

    monkeypatch.setattr(compass_route, "load_config", lambda: cfg)
    monkeypatch.setattr(compass_route, "COMPASS", compass)
    monkeypatch.setattr(compass_route, "HEADING_STREAM", stream)
    monkeypatch.setattr(status_route, "COMPASS", compass)

    body = client.post("/compass/start").json()

    assert body == {"success": False, "message": REASON_MESSAGES[SENSOR_MISSING]}
    assert compass.reason == SENSOR_MISSING
    assert stream.listener_count() == 0
    assert client.get("/status").json()["compass"]["state"] == "unavailable"
