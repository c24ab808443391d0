from fastapi import APIRouter

from core.runtime_state import state

router = APIRouter()


@router.get("/schedule")
def schedule():
    snap = state.snapshot()
    if not snap["slots"]:
        return {"error": "schedule not loaded"}

    return {
        "location": snap["location_name"],
        "hijri_date": snap["hijri_date"],
        "date": snap["gregorian_date"],
        "slots": [{"label": s.label, "time": s.clock} for s in snap["slots"]],
    }
