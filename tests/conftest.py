import pytest

from core.globals import COMPASS, HEADING_STREAM
from core.runtime_state import state


@pytest.fixture
def clean_runtime():
    with state.lock:
        state.slots = []
        state.next_prayer = None
        state.hijri_date = ""
        state.location_name = ""
    HEADING_STREAM.set_available(True)
    COMPASS.teardown()
    yield state
    COMPASS.teardown()
    with state.lock:
        state.slots = []
        state.next_prayer = None
