from datetime import datetime

from fastapi import APIRouter

from core.errors import InsufficientData
from core.globals import COMPASS
from core.prayer_window import resolve
from core.runtime_state import state

router = APIRouter()


@router.get("/status")
def status():
    snap = state.snapshot()

    try:
        next_prayer = resolve(snap["slots"], datetime.now())
        prayer = {
            "label": next_prayer.label,
            "time": next_prayer.clock,
            "remaining_minutes": next_prayer.remaining_minutes,
            "remaining": next_prayer.remaining(snap["remaining_template"]),
        }
    except InsufficientData:
        prayer = {"loading": True}

    return {
        "next_prayer": prayer,
        "compass": COMPASS.status(),
    }
