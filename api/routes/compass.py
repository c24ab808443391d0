import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from core.bearing import HeadingSample
from core.compass import CompassState
from core.globals import COMPASS, HEADING_STREAM, arm_from_config
from utils.config_loader import load_config

router = APIRouter()


class HeadingIn(BaseModel):
    x: float
    y: float
    z: Optional[float] = 0.0


@router.get("/compass")
def compass_status():
    return COMPASS.status()


# ---------- HEADING SAMPLES ----------
@router.post("/compass/heading")
def push_heading(sample: HeadingIn):
    HEADING_STREAM.publish(HeadingSample(sample.x, sample.y, sample.z or 0.0))
    return COMPASS.status()


# ---------- TRACKING ----------
@router.post("/compass/start")
def start_tracking():
    if COMPASS.state is CompassState.TRACKING:
        return {"success": False, "message": "Compass already tracking"}

    if COMPASS.state is CompassState.UNINITIALIZED:
        arm_from_config(load_config(), COMPASS)

    if not COMPASS.start_tracking():
        status = COMPASS.status()
        return {"success": False, "message": status["message"] or f"Compass is {status['state']}"}

    logging.info("[API] Compass tracking started")
    return {"success": True, "message": "Compass tracking started"}


@router.post("/compass/stop")
def stop_tracking():
    if not COMPASS.teardown():
        return {"success": False, "message": "Compass not running"}

    logging.info("[API] Compass torn down")
    return {"success": True, "message": "Compass stopped"}
