"""
1 Hz ticker that keeps the "next prayer" view-model current.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from core.errors import InsufficientData
from core.prayer_window import NextPrayer, resolve
from core.runtime_state import state

TICK_SECONDS = 1.0


def tick(now: Optional[datetime] = None, runtime=state) -> Optional[NextPrayer]:
    """Resolve the next prayer for `now` and store it on the runtime state.

    Returns None while slots are still loading.
    """
    now = now or datetime.now()

    with runtime.lock:
        slots = list(runtime.slots)
        previous = runtime.next_prayer

    try:
        next_prayer = resolve(slots, now)
    except InsufficientData:
        next_prayer = None

    with runtime.lock:
        runtime.next_prayer = next_prayer

    if next_prayer and (previous is None or previous.label != next_prayer.label):
        logging.info(
            f"[TICK] Next={next_prayer.label} at {next_prayer.clock} "
            f"| remaining={next_prayer.remaining(runtime.remaining_template)}"
        )

    return next_prayer


def prayer_ticker_loop(stop_flag: threading.Event,
                       on_tick: Optional[Callable[[Optional[NextPrayer]], None]] = None,
                       interval: float = TICK_SECONDS):
    logging.info("[TICK] Ticker running")

    while not stop_flag.is_set():
        try:
            next_prayer = tick()
            if on_tick:
                on_tick(next_prayer)
        except Exception as e:
            logging.error(f"[ERROR] Ticker failure: {e}", exc_info=True)

        stop_flag.wait(interval)

    logging.info("[TICK] Ticker stopped")


def start_prayer_ticker(stop_flag: threading.Event, on_tick=None) -> threading.Thread:
    t = threading.Thread(
        target=prayer_ticker_loop,
        args=(stop_flag, on_tick),
        name="PrayerTicker",
        daemon=True,
    )
    t.start()
    logging.info("[TICK] Ticker started")
    return t
