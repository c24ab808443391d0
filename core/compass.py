"""
Qibla compass lifecycle.

    UNINITIALIZED --arm()--> ARMED --start_tracking()--> TRACKING
          ^                    |                            |
          +----- teardown() ---+----------------------------+

    arm() that cannot get a sensor, permission or fix -> UNAVAILABLE (terminal)

The target bearing is computed once per arm(); every heading sample received
while TRACKING recomputes the relative rotation.
"""

from __future__ import annotations
import logging
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Callable, Optional

from core.bearing import (
    MECCA,
    GeoPoint,
    HeadingSample,
    compute_target_bearing,
    heading_from_sample,
    on_heading_sample,
)
from core.errors import (
    CompassUnavailable,
    LocationUnavailable,
    REASON_MESSAGES,
    SENSOR_ERROR,
    SENSOR_MISSING,
)


class CompassState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ARMED = "armed"
    TRACKING = "tracking"
    UNAVAILABLE = "unavailable"


class QiblaCompass:
    def __init__(
            self,
            heading_stream,
            target: GeoPoint = MECCA,
            on_rotation: Optional[Callable[[float], None]] = None,
    ):
        self.heading_stream = heading_stream
        self.target = target
        self.on_rotation = on_rotation

        self._lock = threading.RLock()
        self._state = CompassState.UNINITIALIZED
        self._reason: Optional[str] = None
        self._observer: Optional[GeoPoint] = None
        self._target_bearing: Optional[float] = None
        self._subscription = None
        self._heading: Optional[int] = None
        self._rotation: Optional[float] = None

    # ------------ public API ------------
    @property
    def state(self) -> CompassState:
        with self._lock:
            return self._state

    @property
    def reason(self) -> Optional[str]:
        with self._lock:
            return self._reason

    @property
    def target_bearing(self) -> Optional[float]:
        with self._lock:
            return self._target_bearing

    @property
    def rotation(self) -> Optional[float]:
        with self._lock:
            return self._rotation

    def arm(self, location_provider) -> CompassState:
        """Check the sensor, get a fix and compute the bearing toward the target."""
        with self._lock:
            if self._state is not CompassState.UNINITIALIZED:
                logging.debug(f"[QIBLA] arm() ignored in state {self._state.value}")
                return self._state

            if not self.heading_stream.is_available():
                return self._mark_unavailable_locked(SENSOR_MISSING)

            try:
                place = location_provider.locate()
            except LocationUnavailable as e:
                return self._mark_unavailable_locked(e.reason, str(e))
            except Exception as e:
                logging.error(f"[QIBLA] Location provider failure: {e}", exc_info=True)
                return self._mark_unavailable_locked(SENSOR_ERROR, str(e))

            observer = getattr(place, "point", place)
            self._observer = observer
            self._target_bearing = compute_target_bearing(observer, self.target)
            self._state = CompassState.ARMED

            logging.info(
                f"[QIBLA] Armed | observer=({observer.latitude:.4f}, {observer.longitude:.4f}) "
                f"bearing={self._target_bearing:.1f}°"
            )
            return self._state

    def start_tracking(self) -> bool:
        """Subscribe to the heading stream. Only valid from ARMED."""
        with self._lock:
            if self._state is CompassState.TRACKING:
                logging.debug("[QIBLA] Already tracking")
                return True
            if self._state is not CompassState.ARMED:
                logging.warning(f"[QIBLA] Cannot track from state {self._state.value}")
                return False

            self._subscription = self.heading_stream.add_listener(self._on_sample)
            self._state = CompassState.TRACKING
            logging.info("[QIBLA] Tracking heading stream")
            return True

    def teardown(self) -> bool:
        """Release the heading subscription and forget the bearing.

        Safe to call more than once; UNAVAILABLE is left untouched.
        """
        with self._lock:
            if self._state in (CompassState.UNINITIALIZED, CompassState.UNAVAILABLE):
                return False

            subscription, self._subscription = self._subscription, None
            if subscription is not None:
                subscription.remove()

            self._state = CompassState.UNINITIALIZED
            self._observer = None
            self._target_bearing = None
            self._heading = None
            self._rotation = None

        logging.info("[QIBLA] Torn down")
        return True

    @contextmanager
    def tracking(self):
        """Track for the duration of the block; always torn down on exit."""
        if not self.start_tracking():
            reason = self.reason or SENSOR_ERROR
            raise CompassUnavailable(reason, f"compass is {self.state.value}")
        try:
            yield self
        finally:
            self.teardown()

    def status(self) -> dict:
        with self._lock:
            return {
                "state": self._state.value,
                "reason": self._reason,
                "message": REASON_MESSAGES.get(self._reason) if self._reason else None,
                "target_bearing": self._target_bearing,
                "heading": self._heading,
                "rotation": self._rotation,
            }

    # ------------ internals ------------
    def _on_sample(self, sample: HeadingSample) -> None:
        with self._lock:
            if self._state is not CompassState.TRACKING:
                return
            heading = heading_from_sample(sample)
            rotation = on_heading_sample(sample, self._target_bearing)
            self._heading = heading
            self._rotation = rotation
            callback = self.on_rotation

        if callback:
            callback(rotation)

    def _mark_unavailable_locked(self, reason: str, detail: str = "") -> CompassState:
        self._state = CompassState.UNAVAILABLE
        self._reason = reason
        logging.warning(f"[QIBLA] Unavailable | reason={reason} {detail}".rstrip())
        return self._state
