# --- VakitCompass entry point ---

import threading
import logging
import time
from datetime import datetime, timedelta

from tabulate import tabulate

from utils.logger import setup_logging
from utils.config_loader import load_config
from utils.prayer_api import get_prayer_times, PrayerApiError
from utils.location import DEFAULT_LOCATION, DEFAULT_LOCATION_NAME, provider_from_config
from utils.locales import remaining_template

from core.compass import CompassState
from core.errors import LocationUnavailable
from core.globals import stop_flag, COMPASS, arm_from_config
from core.prayer_scheduler import start_prayer_ticker, tick
from core.runtime_state import state


# ========== LOCATION ==========
def resolve_place(cfg: dict):
    """Configured position, or Istanbul when none can be obtained."""
    try:
        place = provider_from_config(cfg).locate()
        logging.info(f"[LOC] Using ({place.point.latitude:.4f}, {place.point.longitude:.4f}) {place.name}")
        return place.point, place.name
    except LocationUnavailable as e:
        logging.warning(f"[LOC] {e.message} Showing times for {DEFAULT_LOCATION_NAME}")
        return DEFAULT_LOCATION, DEFAULT_LOCATION_NAME


# ========== PRAYER TIMES ==========
def refresh_prayer_times(point, name: str, cfg: dict) -> bool:
    settings = cfg["settings"]
    try:
        daily = get_prayer_times(point, method=settings["method"], locale=settings["locale"])
    except PrayerApiError as e:
        logging.error(f"[PRAYER] {e}")
        with state.lock:
            state.last_error = str(e)
        return False

    state.set_day(daily, name)
    logging.info(f"[PRAYER] Updated | hijri={daily.hijri_date or 'n/a'}")
    return True


def display_prayer_times() -> None:
    """Pretty-print today's boundaries with the next one marked."""
    snap = state.snapshot()
    next_prayer = tick()

    rows = [
        ["→" if next_prayer and slot.label == next_prayer.label else "", slot.label, slot.clock]
        for slot in snap["slots"]
    ]
    header = f"{snap['location_name']} | {snap['hijri_date']}".strip(" |")
    print(f"\n🕌 {header}\n" + tabulate(rows, headers=["", "Prayer", "Time"], tablefmt="fancy_grid"))

    if next_prayer:
        print(f"Next: {next_prayer.label} {next_prayer.clock} "
              f"({next_prayer.remaining(snap['remaining_template'])})\n")


def prayer_refresh_loop(point, name: str, cfg: dict):
    """Refetch the day's times shortly after every midnight."""
    while not stop_flag.is_set():
        now = datetime.now()
        next_midnight = (now + timedelta(days=1)).replace(
            hour=0, minute=0, second=5, microsecond=0
        )
        if stop_flag.wait((next_midnight - now).total_seconds()):
            break

        logging.info("[SCHED] Refreshing prayer times")
        try:
            refresh_prayer_times(point, name, cfg)
        except Exception as e:
            logging.error(f"[ERROR] Prayer refresh failure: {e}", exc_info=True)


# ========== QIBLA ==========
def arm_compass(cfg: dict) -> None:
    arm_from_config(cfg)

    status = COMPASS.status()
    if COMPASS.state is CompassState.UNAVAILABLE:
        logging.warning(f"[QIBLA] {status['message']}")
        return

    logging.info(f"[QIBLA] Qibla bearing {status['target_bearing']:.1f}° from true north")
    COMPASS.start_tracking()


# ========== API ==========
def run_api(cfg: dict):
    import uvicorn
    from api.app import app

    api = cfg["api"]
    try:
        uvicorn.run(app, host=api["host"], port=int(api["port"]), log_level="warning")
    except Exception as e:
        logging.error(f"[ERROR] API server crashed: {e}")


# ========== MAIN ==========
def main():
    setup_logging()
    cfg = load_config()

    with state.lock:
        state.remaining_template = remaining_template(cfg["settings"]["locale"])

    logging.info("[CORE] VakitCompass started")

    point, name = resolve_place(cfg)
    refresh_prayer_times(point, name, cfg)
    display_prayer_times()

    arm_compass(cfg)

    start_prayer_ticker(stop_flag)
    threading.Thread(target=prayer_refresh_loop, args=(point, name, cfg), daemon=True).start()

    if cfg["api"]["enabled"]:
        threading.Thread(target=run_api, args=(cfg,), daemon=True).start()
        logging.info(f"[API] Listening on {cfg['api']['host']}:{cfg['api']['port']}")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logging.info("[CORE] Shutdown requested")

        stop_flag.set()
        COMPASS.teardown()

        logging.info("[CORE] VakitCompass closed")


if __name__ == "__main__":
    main()
